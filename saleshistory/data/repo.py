from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Protocol
import logging

from sqlmodel import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from saleshistory.core.currency import round_money
from saleshistory.core.errors import StoreUnavailable
from saleshistory.data.db import get_session, session_scope
from saleshistory.data.models import InvoiceLine, InvoiceSummary, SalesInvoice, SalesInvoiceItem

logger = logging.getLogger(__name__)


class InvoiceStore(Protocol):
	"""Read side consumed by the sales history presenter."""

	def list_invoices(self) -> List[InvoiceSummary]:
		...

	def get_invoice_lines(self, invoice_id: int) -> List[InvoiceLine]:
		...


class SqlInvoiceStore:
	"""InvoiceStore backed by the SQLModel tables. Query failures surface as StoreUnavailable."""

	def __init__(self, engine: Optional[Engine] = None) -> None:
		self._engine = engine

	def list_invoices(self) -> List[InvoiceSummary]:
		"""Return invoice summaries ordered by sale_date DESC, id DESC."""
		try:
			with get_session(self._engine) as s:
				stmt = (
					select(SalesInvoice.id, SalesInvoice.sale_date, SalesInvoice.total)
					.order_by(SalesInvoice.sale_date.desc(), SalesInvoice.id.desc())
				)
				rows = list(s.exec(stmt).all())
		except SQLAlchemyError as e:
			raise StoreUnavailable("Could not list invoices", {"error": str(e)}) from e
		out = [
			InvoiceSummary(id=int(inv_id), date=d, total=float(total or 0.0))
			for inv_id, d, total in rows
		]
		logger.debug("Listed %s invoices", len(out))
		return out

	def get_invoice_lines(self, invoice_id: int) -> List[InvoiceLine]:
		"""Return the line items of one invoice in insertion order. Unknown ids give []."""
		try:
			with get_session(self._engine) as s:
				stmt = (
					select(SalesInvoiceItem.medicine_name, SalesInvoiceItem.quantity, SalesInvoiceItem.price)
					.where(SalesInvoiceItem.invoice_id == invoice_id)
					.order_by(SalesInvoiceItem.id.asc())
				)
				rows = list(s.exec(stmt).all())
		except SQLAlchemyError as e:
			raise StoreUnavailable(
				"Could not load invoice details", {"invoice_id": invoice_id, "error": str(e)}
			) from e
		out = [
			InvoiceLine(item_name=str(name or ""), quantity=int(qty or 0), unit_price=float(price or 0.0))
			for name, qty, price in rows
		]
		logger.debug("Loaded %s line(s) for invoice %s", len(out), invoice_id)
		return out


def record_sale(sold_on: date, lines: Iterable[Dict[str, Any]], engine: Optional[Engine] = None) -> SalesInvoice:
	"""
	Persist one sale and its items.

	lines: [{'medicine_name': str, 'quantity': int, 'price': float}, ...]
	Total is computed as sum(quantity*price), rounded to cents.
	"""
	if not isinstance(sold_on, date):
		raise ValueError("sold_on must be a date")

	items: List[Dict[str, Any]] = []
	for line in lines or []:
		name = str(line.get("medicine_name") or "").strip()
		qty = int(line.get("quantity", 0) or 0)
		price = float(line.get("price", 0) or 0)
		if not name:
			raise ValueError("Medicine name is required")
		if qty < 0 or price < 0:
			raise ValueError(f"Quantity and price must not be negative: {name}")
		items.append({"medicine_name": name, "quantity": qty, "price": price})

	total_val = round_money(sum(i["quantity"] * i["price"] for i in items))

	with session_scope(engine) as s:
		inv = SalesInvoice(sale_date=sold_on, total=total_val)
		s.add(inv)
		s.flush()
		s.refresh(inv)
		for item in items:
			s.add(SalesInvoiceItem(invoice_id=inv.id, **item))  # type: ignore[arg-type]

	logger.info("Recorded sale %s with %s item(s), total %.2f", inv.id, len(items), total_val)
	# After commit, the returned instance is detached but not expired (expire_on_commit=False)
	return inv
