# ABOUTME: MCP server entry point for ynab-mcp
# ABOUTME: Configures FastMCP and registers YNAB tools

import logging
import sys
from collections.abc import Awaitable, Callable

from fastmcp import FastMCP

from ynab_mcp.api import YnabClient
from ynab_mcp.client import get_client as default_get_client
from ynab_mcp.config import Settings
from ynab_mcp.exceptions import ConfigurationError
from ynab_mcp.tools.accounts import register_account_tools
from ynab_mcp.tools.budgets import register_budget_tools
from ynab_mcp.tools.categories import register_category_tools
from ynab_mcp.tools.payees import register_payee_tools
from ynab_mcp.tools.reconciliation import register_reconciliation_tools
from ynab_mcp.tools.transactions import register_transaction_tools

logger = logging.getLogger(__name__)


def create_server(
    get_client: Callable[[], Awaitable[YnabClient]] | None = None,
) -> FastMCP:
    """
    Create and configure the ynab-mcp server.

    Args:
        get_client: Async factory returning the YNAB client (default: shared
            client built from environment settings)

    Returns:
        Configured FastMCP server instance
    """
    client_factory = get_client or default_get_client

    mcp = FastMCP(
        name="ynab-mcp",
        instructions="""
ynab-mcp provides access to YNAB (You Need A Budget). You can:

- List budgets, accounts, categories, and payees
- Fuzzy search payees by name before entering transactions
- Create transactions one at a time or in batches from a statement
- Review cleared and uncleared transactions for an account
- Clear or update existing transactions
- Check whether an account's cleared balance matches a statement

All amounts are in dollars: negative for charges, positive for credits.
New transactions default to cleared, on the assumption they come straight
off a statement.

For reconciliation:
1. get_account_balance() or list_accounts() to see the cleared balance
2. reconciliation_check() with the statement balance
3. On a discrepancy, compare get_cleared_transactions() against the
   statement and use get_uncleared_transactions() to find items to clear
""",
    )

    register_budget_tools(mcp, client_factory)
    register_account_tools(mcp, client_factory)
    register_category_tools(mcp, client_factory)
    register_payee_tools(mcp, client_factory)
    register_transaction_tools(mcp, client_factory)
    register_reconciliation_tools(mcp, client_factory)

    return mcp


def main() -> None:
    """Run the MCP server over stdio."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    logging.getLogger().setLevel(settings.log_level)

    server = create_server()
    logger.info("ynab-mcp server starting")
    server.run()


if __name__ == "__main__":
    main()
