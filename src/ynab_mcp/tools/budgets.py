# ABOUTME: Budget tools for YNAB
# ABOUTME: List budgets to discover IDs for other operations

from typing import TYPE_CHECKING

from ynab_mcp.client import handle_tool_errors
from ynab_mcp.types import BudgetSummary

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP

    from ynab_mcp.api import YnabClient


async def list_budgets(client: "YnabClient") -> list[BudgetSummary]:
    budgets = await client.get_budgets()
    return [
        BudgetSummary(
            id=budget["id"],
            name=budget.get("name", ""),
            last_modified_on=budget.get("last_modified_on") or "",
            first_month=budget.get("first_month") or "",
            last_month=budget.get("last_month") or "",
        )
        for budget in budgets
    ]


def register_budget_tools(mcp: "FastMCP", get_client: "Callable") -> None:
    """Register budget tools with the MCP server."""

    @mcp.tool(name="list_budgets")
    @handle_tool_errors("listing budgets")
    async def list_budgets_tool() -> list[BudgetSummary]:
        """
        List all budgets for the authenticated YNAB user.

        Use this to find budget IDs for other operations.
        """
        client: YnabClient = await get_client()
        return await list_budgets(client)
