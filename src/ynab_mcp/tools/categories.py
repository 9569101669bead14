# ABOUTME: Category tools for YNAB
# ABOUTME: List visible category groups and categories for transaction entry

from typing import TYPE_CHECKING

from ynab_mcp.client import handle_tool_errors
from ynab_mcp.config import resolve_budget_id
from ynab_mcp.types import CategoryGroup, CategoryInfo

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP

    from ynab_mcp.api import YnabClient


def _is_visible(entity: dict) -> bool:
    return not entity.get("deleted", False) and not entity.get("hidden", False)


async def list_categories(
    client: "YnabClient", budget_id: str | None = None
) -> list[CategoryGroup]:
    """Category groups with deleted and hidden groups/categories removed."""
    groups = await client.get_category_groups(resolve_budget_id(budget_id))

    return [
        CategoryGroup(
            id=group["id"],
            name=group.get("name", ""),
            hidden=group.get("hidden", False),
            deleted=group.get("deleted", False),
            categories=[
                CategoryInfo(
                    id=cat["id"],
                    name=cat.get("name", ""),
                    hidden=cat.get("hidden", False),
                    deleted=cat.get("deleted", False),
                )
                for cat in group.get("categories", [])
                if _is_visible(cat)
            ],
        )
        for group in groups
        if _is_visible(group)
    ]


def register_category_tools(mcp: "FastMCP", get_client: "Callable") -> None:
    """Register category tools with the MCP server."""

    @mcp.tool(name="list_categories")
    @handle_tool_errors("listing categories")
    async def list_categories_tool(budget_id: str | None = None) -> list[CategoryGroup]:
        """
        List all category groups and their categories.

        Useful for categorizing new transactions. Hidden and deleted
        categories are excluded.

        Args:
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await list_categories(client, budget_id)
