from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol
import logging

from saleshistory.core.currency import fmt_money
from saleshistory.core.errors import MissingRowData, StoreUnavailable
from saleshistory.data.models import InvoiceLine, InvoiceSummary
from saleshistory.data.repo import InvoiceStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvoiceRow:
	invoice_id: int
	date_text: str
	total_text: str


@dataclass(frozen=True)
class LineRow:
	item_name: str
	quantity_text: str
	price_text: str


class SalesHistoryView(Protocol):
	def show_invoices(self, rows: List[InvoiceRow]) -> None:
		...

	def show_lines(self, rows: List[LineRow]) -> None:
		...


def invoice_row(summary: InvoiceSummary) -> InvoiceRow:
	return InvoiceRow(int(summary.id), str(summary.date), fmt_money(summary.total))


def line_row(line: InvoiceLine) -> LineRow:
	return LineRow(str(line.item_name), str(line.quantity), fmt_money(line.unit_price))


class SalesHistoryPresenter:
	"""Master-detail logic behind the sales history dialog.

	Loads invoice summaries once per initialize(), selects the first one, and
	re-queries the line items on every selection (re-selecting the same invoice
	queries the store again). Store failures degrade to empty lists.
	"""

	def __init__(self, store: Optional[InvoiceStore], view: Optional[SalesHistoryView] = None) -> None:
		self.store = store
		self.view = view
		self.invoice_rows: List[InvoiceRow] = []
		self.line_rows: List[LineRow] = []
		self.selected_id: Optional[int] = None
		# Row index -> invoice id, in rendered order
		self._row_ids: List[int] = []

	@property
	def has_selection(self) -> bool:
		return self.selected_id is not None

	def initialize(self) -> None:
		self.selected_id = None
		self._row_ids = []
		self.invoice_rows = []
		self.line_rows = []

		if self.store is None:
			logger.warning("Invoice store not available in sales history.")
			return

		try:
			summaries = list(self.store.list_invoices())
		except StoreUnavailable as e:
			logger.warning("Could not load invoices: %s", e)
			summaries = []

		self._row_ids = [int(s.id) for s in summaries]
		self.invoice_rows = [invoice_row(s) for s in summaries]
		logger.debug("Rendered %s invoice row(s)", len(self.invoice_rows))
		self._render_invoices()

		if self._row_ids:
			self.select_invoice(self._row_ids[0])
		else:
			self._render_lines()

	def invoice_id_at(self, index: int) -> Optional[int]:
		if 0 <= index < len(self._row_ids):
			return self._row_ids[index]
		return None

	def select_row(self, index: int) -> None:
		"""Handle a click on master row `index`; unknown rows are ignored."""
		try:
			invoice_id = self._lookup_row(index)
		except MissingRowData as e:
			logger.debug("Ignoring selection: %s", e)
			return
		self.select_invoice(invoice_id)

	def select_invoice(self, invoice_id: int) -> None:
		if invoice_id not in self._row_ids:
			logger.debug("Ignoring selection of invoice %s: not in the invoice list", invoice_id)
			return

		self.selected_id = invoice_id
		self.line_rows = []
		try:
			lines = list(self.store.get_invoice_lines(invoice_id))  # type: ignore[union-attr]
		except StoreUnavailable as e:
			logger.warning("Could not load details for invoice %s: %s", invoice_id, e)
			lines = []
		self.line_rows = [line_row(line) for line in lines]
		logger.debug("Rendered %s line row(s) for invoice %s", len(self.line_rows), invoice_id)
		self._render_lines()

	def _lookup_row(self, index: int) -> int:
		invoice_id = self.invoice_id_at(index)
		if invoice_id is None:
			raise MissingRowData("No invoice behind clicked row", {"row": index})
		return invoice_id

	def _render_invoices(self) -> None:
		if self.view is not None:
			self.view.show_invoices(list(self.invoice_rows))

	def _render_lines(self) -> None:
		if self.view is not None:
			self.view.show_lines(list(self.line_rows))
