from decimal import Decimal, Inexact, InvalidOperation, ROUND_DOWN, localcontext
from typing import Union

from .errors import PrecisionError

SATOSHI_SCALE = 8
_SATOSHI = Decimal(10) ** SATOSHI_SCALE

Amount = Union[str, int, float, Decimal]


def _as_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    try:
        # str() first so floats keep their shortest repr instead of binary noise
        return Decimal(str(amount).strip())
    except InvalidOperation:
        raise PrecisionError(f"not a decimal amount: {amount!r}") from None


def to_satoshi(amount: Amount) -> int:
    """Scale a decimal amount to integer minor units (1e-8).

    Raises PrecisionError instead of truncating when the amount carries
    non-zero digits below the eighth decimal place.
    """
    value = _as_decimal(amount)
    if not value.is_finite():
        raise PrecisionError(f"not a finite amount: {amount!r}")
    if value < 0:
        raise PrecisionError(f"negative amount: {amount!r}")
    with localcontext() as ctx:
        ctx.prec = 60
        ctx.traps[Inexact] = True
        try:
            scaled = value * _SATOSHI
        except Inexact:
            raise PrecisionError(f"{amount!r} has too many significant digits") from None
        whole = scaled.to_integral_value(rounding=ROUND_DOWN)
    if scaled != whole:
        raise PrecisionError(f"{amount!r} has more than {SATOSHI_SCALE} decimal places")
    return int(whole)


def from_satoshi(value: int) -> Decimal:
    return Decimal(int(value)).scaleb(-SATOSHI_SCALE)
