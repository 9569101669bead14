# ABOUTME: Account tools for YNAB
# ABOUTME: List accounts and query cleared/uncleared balances

from typing import TYPE_CHECKING

from ynab_mcp.client import handle_tool_errors
from ynab_mcp.config import resolve_budget_id
from ynab_mcp.money import format_currency, to_major
from ynab_mcp.types import AccountBalance, AccountSummary

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP

    from ynab_mcp.api import YnabClient

# Account types most often reconciled against a statement; listed first
PRIORITY_TYPES = ("creditCard", "checking", "savings")


def _sort_key(account: dict) -> tuple[int, str]:
    priority = 0 if account.get("type") in PRIORITY_TYPES else 1
    return priority, (account.get("name") or "").casefold()


async def list_accounts(
    client: "YnabClient", budget_id: str | None = None
) -> list[AccountSummary]:
    """
    All non-deleted accounts, priority types first, then alphabetical.
    """
    accounts = await client.get_accounts(resolve_budget_id(budget_id))

    visible = [acc for acc in accounts if not acc.get("deleted", False)]
    visible.sort(key=_sort_key)

    return [
        AccountSummary(
            id=acc["id"],
            name=acc.get("name", ""),
            type=acc.get("type", ""),
            on_budget=acc.get("on_budget", False),
            closed=acc.get("closed", False),
            balance=float(to_major(acc.get("balance"))),
            balance_formatted=format_currency(acc.get("balance")),
            cleared_balance=float(to_major(acc.get("cleared_balance"))),
            cleared_balance_formatted=format_currency(acc.get("cleared_balance")),
            uncleared_balance=float(to_major(acc.get("uncleared_balance"))),
            uncleared_balance_formatted=format_currency(acc.get("uncleared_balance")),
        )
        for acc in visible
    ]


async def get_account_balance(
    client: "YnabClient", account_id: str, budget_id: str | None = None
) -> AccountBalance:
    account = await client.get_account(resolve_budget_id(budget_id), account_id)

    return AccountBalance(
        account_id=account.get("id", account_id),
        account_name=account.get("name", ""),
        cleared_balance=float(to_major(account.get("cleared_balance"))),
        cleared_balance_formatted=format_currency(account.get("cleared_balance")),
        uncleared_balance=float(to_major(account.get("uncleared_balance"))),
        uncleared_balance_formatted=format_currency(account.get("uncleared_balance")),
        total_balance=float(to_major(account.get("balance"))),
        total_balance_formatted=format_currency(account.get("balance")),
    )


def register_account_tools(mcp: "FastMCP", get_client: "Callable") -> None:
    """Register account tools with the MCP server."""

    @mcp.tool(name="list_accounts")
    @handle_tool_errors("listing accounts")
    async def list_accounts_tool(budget_id: str | None = None) -> list[AccountSummary]:
        """
        List all accounts with their balances.

        Returns credit cards, checking and savings accounts first.
        Balances are shown in dollars.

        Args:
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await list_accounts(client, budget_id)

    @mcp.tool(name="get_account_balance")
    @handle_tool_errors("getting account balance")
    async def get_account_balance_tool(
        account_id: str,
        budget_id: str | None = None,
    ) -> AccountBalance:
        """
        Get detailed balance information for a specific account.

        Args:
            account_id: The account ID to get balance for
            budget_id: Budget ID (uses default or last-used if not provided)

        Returns:
            Cleared, uncleared, and total balances in dollars
        """
        client: YnabClient = await get_client()
        return await get_account_balance(client, account_id, budget_id)
