"""
Net pay calculation. No tax logic: net pay is gross pay minus deductions.
"""
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

Amount = Union[Decimal, int, float, str]

CENT = Decimal("0.01")

# Enough digits for any finite double quantized to cents
MONEY_PRECISION = 400


def _as_decimal(value: Amount) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def to_money(value: Amount) -> Decimal:
    """Quantize an amount to two decimal places, rounding half up."""
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        return _as_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_net_pay(gross_pay: Amount, deductions: Amount = 0) -> Decimal:
    """
    Return ``gross_pay - deductions`` rounded to exactly two places.

    >>> compute_net_pay(1000, 150)
    Decimal('850.00')
    """
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        return to_money(_as_decimal(gross_pay) - _as_decimal(deductions))
