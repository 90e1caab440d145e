from __future__ import annotations

from decimal import Decimal, ROUND_HALF_EVEN, InvalidOperation, localcontext

_CENTS = Decimal("0.01")


def to_decimal(x: object) -> Decimal:
	"""Best-effort conversion to Decimal via str to avoid binary float artifacts."""
	try:
		return Decimal(str(x))
	except (InvalidOperation, ValueError, TypeError):
		return Decimal("0")


def round_money_dec(x: float | Decimal) -> Decimal:
	"""Round a finite value to 2 decimals using banker's rounding (round-half-to-even).

	Precision grows with the magnitude so very large amounts keep every integer digit.
	"""
	d = to_decimal(x)
	with localcontext() as ctx:
		# integer digits + 2 fraction digits + 1 spare
		ctx.prec = max(ctx.prec, d.adjusted() + 3)
		return d.quantize(_CENTS, rounding=ROUND_HALF_EVEN)


def round_money(x: float | Decimal) -> float:
	return float(round_money_dec(x))


def fmt_money(x: float | Decimal) -> str:
	"""
	Format a monetary value as fixed-point text with exactly two decimals.

	Independent of locale: 1234.5 -> "1234.50", 19.999 -> "20.00", -5 -> "-5.00".
	Non-finite values fall back to float formatting ("inf", "-inf", "nan").
	"""
	d = to_decimal(x)
	if not d.is_finite():
		return f"{float(d):.2f}"
	return f"{round_money_dec(d):.2f}"
