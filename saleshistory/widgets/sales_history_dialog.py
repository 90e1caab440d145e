from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QHeaderView,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from saleshistory.core.presenter import InvoiceRow, LineRow, SalesHistoryPresenter
from saleshistory.data.repo import InvoiceStore


class SalesHistoryDialog(QDialog):
    """Invoices on the left, line items of the selected invoice on the right."""

    COL_ID = 0
    COL_DATE = 1
    COL_TOTAL = 2

    def __init__(self, store: Optional[InvoiceStore], parent=None, width: int = 800, height: int = 600) -> None:
        super().__init__(parent)
        self.setWindowTitle("Sales History & Invoice Details")
        self.setMinimumSize(800, 600)
        self.resize(max(width, 800), max(height, 600))
        self.setModal(True)

        root = QHBoxLayout(self)

        # Left pane: invoices
        invoices_group = QGroupBox("Invoices")
        left = QVBoxLayout(invoices_group)
        self.invoices_table = QTableWidget(0, 3)
        self.invoices_table.setHorizontalHeaderLabels(["ID", "Date of Sale", "Total Amount"])
        self.invoices_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.invoices_table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.invoices_table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.invoices_table.verticalHeader().setVisible(False)
        # Raw id stays hidden; it is kept as row data
        self.invoices_table.setColumnHidden(self.COL_ID, True)
        self.invoices_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        left.addWidget(self.invoices_table)

        # Right pane: details
        details_group = QGroupBox("Invoice Details")
        right = QVBoxLayout(details_group)
        self.details_table = QTableWidget(0, 3)
        self.details_table.setHorizontalHeaderLabels(["Medicine Name", "Quantity Sold", "Price at Sale"])
        self.details_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.details_table.verticalHeader().setVisible(False)
        self.details_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        right.addWidget(self.details_table)

        root.addWidget(invoices_group, 1)
        root.addWidget(details_group, 2)

        self.presenter = SalesHistoryPresenter(store, view=self)
        self.invoices_table.cellClicked.connect(self._on_invoice_clicked)

        # Initial load; presenter selects the first invoice on its own
        self.presenter.initialize()
        if self.invoices_table.rowCount() > 0:
            self.invoices_table.selectRow(0)

    def _on_invoice_clicked(self, row: int, _column: int) -> None:
        self.presenter.select_row(row)

    # SalesHistoryView

    def show_invoices(self, rows: List[InvoiceRow]) -> None:
        self.invoices_table.setRowCount(0)
        self.invoices_table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            it_id = QTableWidgetItem(str(row.invoice_id))
            it_id.setData(Qt.UserRole, row.invoice_id)
            self.invoices_table.setItem(r, self.COL_ID, it_id)
            self.invoices_table.setItem(r, self.COL_DATE, QTableWidgetItem(row.date_text))
            it_total = QTableWidgetItem(row.total_text)
            it_total.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.invoices_table.setItem(r, self.COL_TOTAL, it_total)

    def show_lines(self, rows: List[LineRow]) -> None:
        self.details_table.setRowCount(0)
        self.details_table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            self.details_table.setItem(r, 0, QTableWidgetItem(row.item_name))
            it_qty = QTableWidgetItem(row.quantity_text)
            it_qty.setTextAlignment(Qt.AlignCenter)
            self.details_table.setItem(r, 1, it_qty)
            it_price = QTableWidgetItem(row.price_text)
            it_price.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.details_table.setItem(r, 2, it_price)
