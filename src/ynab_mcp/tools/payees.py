# ABOUTME: Payee tools for YNAB
# ABOUTME: List payees and fuzzy-search them by name

from typing import TYPE_CHECKING

from ynab_mcp.client import handle_tool_errors
from ynab_mcp.config import resolve_budget_id
from ynab_mcp.matching import search
from ynab_mcp.types import PayeeInfo, PayeeMatch

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP

    from ynab_mcp.api import YnabClient


async def list_payees(client: "YnabClient", budget_id: str | None = None) -> list[PayeeInfo]:
    payees = await client.get_payees(resolve_budget_id(budget_id))
    return [
        PayeeInfo(
            id=payee["id"],
            name=payee.get("name", ""),
            transfer_account_id=payee.get("transfer_account_id") or None,
            deleted=payee.get("deleted", False),
        )
        for payee in payees
        if not payee.get("deleted", False)
    ]


async def search_payees(
    client: "YnabClient", query: str, budget_id: str | None = None
) -> list[PayeeMatch]:
    """
    Fuzzy search for payees by name.

    Returns:
        Up to 10 best matches, highest score first
    """
    payees = await list_payees(client, budget_id)
    return [
        PayeeMatch(id=payee.id, name=payee.name, score=score)
        for payee, score in search(query, payees, key=lambda p: p.name)
    ]


def register_payee_tools(mcp: "FastMCP", get_client: "Callable") -> None:
    """Register payee tools with the MCP server."""

    @mcp.tool(name="list_payees")
    @handle_tool_errors("listing payees")
    async def list_payees_tool(budget_id: str | None = None) -> list[PayeeInfo]:
        """
        List all payees in the budget.

        Args:
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await list_payees(client, budget_id)

    @mcp.tool(name="search_payees")
    @handle_tool_errors("searching payees")
    async def search_payees_tool(
        query: str,
        budget_id: str | None = None,
    ) -> list[PayeeMatch]:
        """
        Fuzzy search for payees by name.

        Returns up to 10 best matches with relevance scores (100 = exact).

        Args:
            query: Search query to match against payee names
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await search_payees(client, query, budget_id)
