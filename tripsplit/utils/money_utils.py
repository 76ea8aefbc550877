"""Minor unit conversion helpers"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from tripsplit.config import get_settings


def to_minor_units(value, minor_units_per_major: Optional[int] = None) -> Optional[int]:
    """
    Convert a major-unit amount to integer minor units.

    Rounds half up, so 10.005 becomes 1001.

    Args:
        value: Amount in major units (Decimal, int, float or numeric string)
        minor_units_per_major: Scale (default from settings, 100)

    Returns:
        Amount in minor units, or None if the value is not a finite number
        or is too large to represent exactly
    """
    if value is None or isinstance(value, bool):
        return None

    scale = minor_units_per_major or get_settings().minor_units_per_major

    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite():
            return None
        minor = (amount * scale).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    except ArithmeticError:
        # InvalidOperation for unparsable input or more digits than the context holds
        return None

    return int(minor)


def sum_minor_units(values: Iterable[int]) -> int:
    """
    Sum a list of minor unit amounts.

    Args:
        values: Integer amounts

    Returns:
        Sum of all values
    """
    return sum(values, 0)


def format_minor_units(
    amount: int,
    symbol: Optional[str] = None,
    minor_units_per_major: Optional[int] = None,
) -> str:
    """
    Format a minor unit amount for display, e.g. 123456 -> "₹1,234.56".

    Args:
        amount: Amount in minor units
        symbol: Currency symbol (default from settings)
        minor_units_per_major: Scale (default from settings)

    Returns:
        Display string with sign, symbol, grouping and as many decimals as
        the scale has minor digits (two for 100, three for 1000)
    """
    settings = get_settings()
    symbol = settings.currency_symbol if symbol is None else symbol
    scale = minor_units_per_major or settings.minor_units_per_major

    decimals = len(str(scale - 1)) if scale > 1 else 0
    value = Decimal(abs(amount)) / Decimal(scale)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{value:,.{decimals}f}"
