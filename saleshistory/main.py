from __future__ import annotations

# Allow running this file directly (python saleshistory/main.py) by ensuring the project root is on sys.path
import os
import sys
if __package__ in (None, ""):
    sys.path.append(os.path.dirname(os.path.dirname(__file__)))

import logging

from PySide6.QtWidgets import QApplication

from saleshistory.core.settings import load_settings
from saleshistory.data.db import configure_engine, create_db_and_tables
from saleshistory.data.repo import SqlInvoiceStore
from saleshistory.widgets.sales_history_dialog import SalesHistoryDialog

logger = logging.getLogger(__name__)


def main() -> int:
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, str(settings.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    app = QApplication.instance() or QApplication(sys.argv)

    engine = configure_engine(settings.database_url())
    create_db_and_tables(engine)
    logger.info("Opening sales history on %s", engine.url)

    dlg = SalesHistoryDialog(
        SqlInvoiceStore(engine),
        width=settings.dialog_width,
        height=settings.dialog_height,
    )
    return dlg.exec()


if __name__ == "__main__":
    sys.exit(main())
