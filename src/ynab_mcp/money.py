# ABOUTME: Milliunit conversion and currency formatting
# ABOUTME: YNAB stores amounts as integer milliunits where 1000 = $1.00

from decimal import ROUND_HALF_UP, Decimal

MILLIUNITS_PER_UNIT = 1000

_CENT = Decimal("0.01")


def to_milliunits(amount: float | int | Decimal) -> int:
    """
    Convert a dollar amount to milliunits.

    Rounds half away from zero at the milliunit boundary, so 0.0005 becomes 1
    and -0.0005 becomes -1.

    Args:
        amount: Amount in dollars (e.g., -25.99 for a $25.99 charge)

    Returns:
        Amount in milliunits (e.g., -25990)
    """
    value = Decimal(str(amount)) * MILLIUNITS_PER_UNIT
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_major(milliunits: int | None) -> Decimal:
    """Convert milliunits (integer) to Decimal dollars."""
    if milliunits is None:
        return Decimal("0")
    return Decimal(milliunits) / MILLIUNITS_PER_UNIT


def format_currency(milliunits: int | None) -> str:
    """
    Format milliunits as a currency string.

    The minus sign goes outside the symbol: "-$25.99", never "$-25.99".
    """
    dollars = to_major(milliunits)
    absolute = abs(dollars).quantize(_CENT, rounding=ROUND_HALF_UP)
    formatted = f"${absolute:,.2f}"
    return f"-{formatted}" if dollars < 0 else formatted
