# ABOUTME: Pytest fixtures for ynab-mcp tests
# ABOUTME: Provides mock YNAB client, client factory, and MCP server fixtures

from unittest.mock import AsyncMock, MagicMock

import pytest

from ynab_mcp.server import create_server


@pytest.fixture(autouse=True)
def ynab_env(monkeypatch):
    """Isolate tests from the developer's real YNAB environment."""
    monkeypatch.setenv("YNAB_API_TOKEN", "test-token")
    monkeypatch.delenv("YNAB_BUDGET_ID", raising=False)
    monkeypatch.delenv("YNAB_API_URL", raising=False)
    monkeypatch.delenv("YNAB_MCP_LOG_LEVEL", raising=False)


@pytest.fixture
def mock_ynab_client():
    """Create a mock YNAB client with empty canned responses."""
    client = MagicMock()
    client.get_budgets = AsyncMock(return_value=[])
    client.get_accounts = AsyncMock(return_value=[])
    client.get_account = AsyncMock(return_value={})
    client.get_category_groups = AsyncMock(return_value=[])
    client.get_payees = AsyncMock(return_value=[])
    client.create_transaction = AsyncMock(return_value=None)
    client.create_transactions = AsyncMock(
        return_value={"transactions": [], "duplicate_import_ids": []}
    )
    client.get_account_transactions = AsyncMock(return_value=[])
    client.update_transaction = AsyncMock(return_value=None)
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_get_client(mock_ynab_client):
    """Create an async factory that returns the mock client."""

    async def _get_client():
        return mock_ynab_client

    return _get_client


@pytest.fixture
def mcp_server(mock_get_client):
    """Create an MCP server with all tools wired to the mock client."""
    return create_server(get_client=mock_get_client)


def make_account(**overrides) -> dict:
    """Raw YNAB account record."""
    account = {
        "id": "acc-1",
        "name": "Chase Sapphire",
        "type": "creditCard",
        "on_budget": True,
        "closed": False,
        "balance": -125990,
        "cleared_balance": -100000,
        "uncleared_balance": -25990,
        "deleted": False,
    }
    account.update(overrides)
    return account


def make_transaction(**overrides) -> dict:
    """Raw YNAB transaction record."""
    txn = {
        "id": "txn-1",
        "date": "2025-01-15",
        "amount": -25990,
        "payee_name": "Coffee Shop",
        "category_name": "Dining Out",
        "memo": None,
        "cleared": "cleared",
        "approved": True,
        "account_id": "acc-1",
        "deleted": False,
    }
    txn.update(overrides)
    return txn
