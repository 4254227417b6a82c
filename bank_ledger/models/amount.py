"""Conversion of caller-supplied money values to Decimal."""

from decimal import Decimal, InvalidOperation, localcontext

from bank_ledger.exceptions import LedgerError

Amount = Decimal | int | float | str


def to_decimal(value: Amount, error: type[LedgerError], name: str = "amount") -> Decimal:
    """Normalize ``value`` to a finite Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Raises
    ------
    LedgerError
        An instance of ``error`` when the value is not a finite number.
    """
    if isinstance(value, bool):
        raise error(f"{name} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise error(f"{name} must be a number, got {value!r}") from e
    else:
        raise error(f"{name} must be a number, got {type(value).__name__}")

    if not result.is_finite():
        raise error(f"{name} must be finite, got {value!r}")
    return result


def exact_add(a: Decimal, b: Decimal) -> Decimal:
    """Return ``a + b`` without rounding, whatever the magnitudes."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits_needed(a, b))
        return a + b


def exact_subtract(a: Decimal, b: Decimal) -> Decimal:
    """Return ``a - b`` without rounding, whatever the magnitudes."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits_needed(a, b))
        return a - b


def _digits_needed(a: Decimal, b: Decimal) -> int:
    # Span from the highest digit of either operand to the lowest, plus a carry
    high = max(a.adjusted(), b.adjusted())
    low = min(a.as_tuple().exponent, b.as_tuple().exponent)
    return high - low + 2
