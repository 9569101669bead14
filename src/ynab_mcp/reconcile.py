# ABOUTME: Reconciliation comparison between YNAB and a real-world statement
# ABOUTME: Classifies cleared-balance differences as matched or discrepancy

from decimal import Decimal

from ynab_mcp.money import format_currency, to_major, to_milliunits
from ynab_mcp.types import ReconciliationResult

# Strictly less than one cent counts as balanced
TOLERANCE = Decimal("0.01")


def compare_balances(
    cleared_balance: int,
    actual_balance: float | Decimal,
    account_name: str,
) -> ReconciliationResult:
    """
    Compare a YNAB cleared balance against the actual statement balance.

    Args:
        cleared_balance: YNAB cleared balance in milliunits
        actual_balance: Statement balance in dollars
        account_name: Account label used in the message

    Returns:
        ReconciliationResult with status and explanatory message
    """
    ynab_balance = to_major(cleared_balance)
    actual = Decimal(str(actual_balance))
    difference = ynab_balance - actual
    is_matched = abs(difference) < TOLERANCE

    if is_matched:
        message = (
            f'Account "{account_name}" is balanced! '
            "YNAB cleared balance matches the actual balance."
        )
    else:
        direction = "higher" if ynab_balance > actual else "lower"
        message = (
            f"Discrepancy found: YNAB cleared balance is "
            f"{format_currency(to_milliunits(abs(difference)))} {direction} "
            "than the actual balance. This may indicate missing or extra "
            "transactions in YNAB."
        )

    return ReconciliationResult(
        account_name=account_name,
        ynab_cleared_balance=float(ynab_balance),
        ynab_cleared_balance_formatted=format_currency(cleared_balance),
        actual_balance=float(actual),
        actual_balance_formatted=format_currency(to_milliunits(actual)),
        difference=float(difference),
        difference_formatted=format_currency(to_milliunits(difference)),
        status="matched" if is_matched else "discrepancy",
        message=message,
    )
