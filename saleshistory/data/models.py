from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from sqlmodel import Field, SQLModel


class SalesInvoice(SQLModel, table=True):
	id: Optional[int] = Field(default=None, primary_key=True)
	sale_date: date = Field(index=True)
	total: float = 0.0


class SalesInvoiceItem(SQLModel, table=True):
	id: Optional[int] = Field(default=None, primary_key=True)
	invoice_id: int = Field(foreign_key="salesinvoice.id", index=True)
	medicine_name: str
	quantity: int = 0
	# Unit price at the time of sale
	price: float = 0.0


# Read models handed to the presenter; detached from any session.

@dataclass(frozen=True)
class InvoiceSummary:
	id: int
	date: Union[date, str]
	total: float


@dataclass(frozen=True)
class InvoiceLine:
	item_name: str
	quantity: int
	unit_price: float
