from __future__ import annotations

from pathlib import Path
from typing import List
import sys

# Ensure project root is on sys.path when running this script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from saleshistory.core.presenter import InvoiceRow, LineRow, SalesHistoryPresenter
from saleshistory.core.settings import load_settings
from saleshistory.data.db import configure_engine
from saleshistory.data.repo import SqlInvoiceStore


class ConsoleView:
    """Prints the presenter's renders instead of drawing tables."""

    def show_invoices(self, rows: List[InvoiceRow]) -> None:
        print(f"Invoices ({len(rows)})")
        for r in rows:
            print(f"  #{r.invoice_id:<6} {r.date_text:<12} {r.total_text:>12}")

    def show_lines(self, rows: List[LineRow]) -> None:
        print(f"  Details ({len(rows)})")
        for r in rows:
            print(f"    {r.item_name:<30} {r.quantity_text:^6} {r.price_text:>10}")


def main() -> None:
    engine = configure_engine(load_settings().database_url())
    presenter = SalesHistoryPresenter(SqlInvoiceStore(engine), view=ConsoleView())
    presenter.initialize()
    # Walk the remaining invoices the way a user clicking down the list would
    for index in range(1, len(presenter.invoice_rows)):
        print(f"Selected row {index}")
        presenter.select_row(index)


if __name__ == "__main__":
    main()
