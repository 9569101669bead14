# ABOUTME: Reconciliation tools for YNAB
# ABOUTME: Compare YNAB cleared balance against a bank/card statement balance

from typing import TYPE_CHECKING

from ynab_mcp.client import handle_tool_errors
from ynab_mcp.config import resolve_budget_id
from ynab_mcp.reconcile import compare_balances
from ynab_mcp.types import ReconciliationResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP

    from ynab_mcp.api import YnabClient


async def reconciliation_check(
    client: "YnabClient",
    account_id: str,
    actual_balance: float,
    budget_id: str | None = None,
) -> ReconciliationResult:
    account = await client.get_account(resolve_budget_id(budget_id), account_id)
    return compare_balances(
        account.get("cleared_balance") or 0,
        actual_balance,
        account.get("name", account_id),
    )


def register_reconciliation_tools(mcp: "FastMCP", get_client: "Callable") -> None:
    """Register reconciliation tools with the MCP server."""

    @mcp.tool(name="reconciliation_check")
    @handle_tool_errors("checking reconciliation")
    async def reconciliation_check_tool(
        account_id: str,
        actual_balance: float,
        budget_id: str | None = None,
    ) -> ReconciliationResult:
        """
        Compare YNAB cleared balance to the actual balance from a statement.

        Reports whether they match (within one cent) or shows the
        discrepancy and its direction.

        Args:
            account_id: The account ID to check
            actual_balance: Actual balance in dollars (e.g., -1234.56 for credit card debt)
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await reconciliation_check(client, account_id, actual_balance, budget_id)
