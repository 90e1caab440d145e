from __future__ import annotations

from typing import List

import pytest

pytest.importorskip("pytestqt")

from PySide6.QtCore import Qt

from saleshistory.core.errors import StoreUnavailable
from saleshistory.data.models import InvoiceLine, InvoiceSummary


class DemoStore:
    def __init__(self) -> None:
        self.calls: List[int] = []

    def list_invoices(self) -> List[InvoiceSummary]:
        return [InvoiceSummary(1, "2024-01-01", 19.5), InvoiceSummary(2, "2024-01-02", 42)]

    def get_invoice_lines(self, invoice_id: int) -> List[InvoiceLine]:
        self.calls.append(invoice_id)
        if invoice_id == 1:
            return [InvoiceLine("Paracetamol", 2, 4.75), InvoiceLine("Syrup", 1, 10)]
        return [InvoiceLine("Amoxicillin", 3, 14)]


class DownStore:
    def list_invoices(self) -> List[InvoiceSummary]:
        raise StoreUnavailable("offline")

    def get_invoice_lines(self, invoice_id: int) -> List[InvoiceLine]:
        raise StoreUnavailable("offline")


def _texts(table, col: int) -> List[str]:
    return [table.item(r, col).text() for r in range(table.rowCount())]


def test_dialog_loads_and_selects_first_invoice(qtbot):  # type: ignore[reportUnknownParameterType]
    from saleshistory.widgets.sales_history_dialog import SalesHistoryDialog

    dlg = SalesHistoryDialog(DemoStore())
    qtbot.addWidget(dlg)

    assert dlg.windowTitle() == "Sales History & Invoice Details"
    assert dlg.invoices_table.isColumnHidden(0)
    assert _texts(dlg.invoices_table, 1) == ["2024-01-01", "2024-01-02"]
    assert _texts(dlg.invoices_table, 2) == ["19.50", "42.00"]
    assert dlg.invoices_table.item(1, 0).data(Qt.UserRole) == 2
    assert dlg.presenter.selected_id == 1
    assert dlg.invoices_table.currentRow() == 0
    assert _texts(dlg.details_table, 0) == ["Paracetamol", "Syrup"]
    assert _texts(dlg.details_table, 1) == ["2", "1"]
    assert _texts(dlg.details_table, 2) == ["4.75", "10.00"]


def test_clicking_row_replaces_details(qtbot):  # type: ignore[reportUnknownParameterType]
    from saleshistory.widgets.sales_history_dialog import SalesHistoryDialog

    store = DemoStore()
    dlg = SalesHistoryDialog(store)
    qtbot.addWidget(dlg)

    dlg.invoices_table.cellClicked.emit(1, 2)

    assert store.calls == [1, 2]
    assert dlg.presenter.selected_id == 2
    assert _texts(dlg.details_table, 0) == ["Amoxicillin"]
    assert _texts(dlg.details_table, 2) == ["14.00"]


def test_dialog_with_unavailable_store_is_empty(qtbot):  # type: ignore[reportUnknownParameterType]
    from saleshistory.widgets.sales_history_dialog import SalesHistoryDialog

    dlg = SalesHistoryDialog(DownStore())
    qtbot.addWidget(dlg)

    assert dlg.invoices_table.rowCount() == 0
    assert dlg.details_table.rowCount() == 0
    assert dlg.presenter.selected_id is None
