from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from saleshistory.core.errors import StoreUnavailable
from saleshistory.data.db import create_db_and_tables
from saleshistory.data.models import InvoiceLine, InvoiceSummary
from saleshistory.data.repo import SqlInvoiceStore, record_sale


@pytest.fixture()
def engine(tmp_path: Path):
    eng = create_engine(f"sqlite:///{(tmp_path / 'sales.db').as_posix()}")
    create_db_and_tables(eng)
    yield eng
    eng.dispose()


def test_list_invoices_newest_first(engine) -> None:
    a = record_sale(date(2024, 1, 1), [{"medicine_name": "A", "quantity": 1, "price": 19.5}], engine=engine)
    b = record_sale(date(2024, 1, 2), [{"medicine_name": "B", "quantity": 2, "price": 21}], engine=engine)
    c = record_sale(date(2024, 1, 2), [], engine=engine)

    rows = SqlInvoiceStore(engine).list_invoices()

    assert [r.id for r in rows] == [c.id, b.id, a.id]
    assert rows[-1] == InvoiceSummary(a.id, date(2024, 1, 1), 19.5)
    assert rows[1].total == 42.0
    assert rows[0].total == 0.0


def test_invoice_lines_in_insertion_order(engine) -> None:
    inv = record_sale(
        date(2024, 3, 3),
        [
            {"medicine_name": "Zinc", "quantity": 3, "price": 2.5},
            {"medicine_name": "Aspirin", "quantity": 1, "price": 4},
        ],
        engine=engine,
    )
    lines = SqlInvoiceStore(engine).get_invoice_lines(inv.id)
    assert lines == [InvoiceLine("Zinc", 3, 2.5), InvoiceLine("Aspirin", 1, 4.0)]
    assert inv.total == 11.5


def test_unknown_invoice_has_no_lines(engine) -> None:
    assert SqlInvoiceStore(engine).get_invoice_lines(12345) == []


def test_missing_tables_raise_store_unavailable(tmp_path: Path) -> None:
    eng = create_engine(f"sqlite:///{(tmp_path / 'empty.db').as_posix()}")
    store = SqlInvoiceStore(eng)
    with pytest.raises(StoreUnavailable):
        store.list_invoices()
    with pytest.raises(StoreUnavailable) as exc:
        store.get_invoice_lines(1)
    assert exc.value.details["invoice_id"] == 1
    eng.dispose()


def test_unreachable_database_raises_store_unavailable(tmp_path: Path) -> None:
    eng = create_engine(f"sqlite:///{(tmp_path / 'no' / 'such' / 'dir.db').as_posix()}")
    with pytest.raises(StoreUnavailable):
        SqlInvoiceStore(eng).list_invoices()
    eng.dispose()


@pytest.mark.parametrize(
    "line",
    [
        {"medicine_name": "  ", "quantity": 1, "price": 1},
        {"medicine_name": "X", "quantity": -1, "price": 1},
        {"medicine_name": "X", "quantity": 1, "price": -0.5},
    ],
)
def test_record_sale_rejects_bad_lines(engine, line) -> None:
    with pytest.raises(ValueError):
        record_sale(date(2024, 1, 1), [line], engine=engine)
    assert SqlInvoiceStore(engine).list_invoices() == []
