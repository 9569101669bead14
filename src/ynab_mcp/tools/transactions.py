# ABOUTME: Transaction tools for YNAB
# ABOUTME: Create, update, clear, and list transactions by cleared status

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ynab_mcp.client import handle_tool_errors
from ynab_mcp.config import resolve_budget_id
from ynab_mcp.exceptions import TransactionNotCreatedError, ValidationError
from ynab_mcp.money import format_currency, to_major, to_milliunits
from ynab_mcp.types import TransactionInput, TransactionResult, TransactionSummary

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastmcp import FastMCP

    from ynab_mcp.api import YnabClient

logger = logging.getLogger(__name__)


def _check_date(value: str, field: str = "date") -> str:
    """Reject anything that isn't a YYYY-MM-DD calendar date."""
    try:
        valid = len(value) == 10 and bool(datetime.strptime(value, "%Y-%m-%d"))
    except (TypeError, ValueError):
        valid = False
    if not valid:
        raise ValidationError(f"Invalid {field} '{value}': expected YYYY-MM-DD")
    return value


def _cleared_status(cleared: bool | None) -> str:
    # New transactions are assumed to come straight off a statement
    return "uncleared" if cleared is False else "cleared"


def _to_save_transaction(account_id: str, txn: TransactionInput) -> dict:
    """Build the YNAB SaveTransaction payload for a new transaction."""
    payload: dict = {
        "account_id": account_id,
        "date": _check_date(txn.date),
        "amount": to_milliunits(txn.amount),
        "payee_name": txn.payee_name,
        "cleared": _cleared_status(txn.cleared),
        "approved": True,
    }
    if txn.category_id:
        payload["category_id"] = txn.category_id
    if txn.memo:
        payload["memo"] = txn.memo
    if txn.import_id:
        payload["import_id"] = txn.import_id
    return payload


def _to_result(txn: dict) -> TransactionResult:
    return TransactionResult(
        id=txn["id"],
        date=txn.get("date", ""),
        amount=float(to_major(txn.get("amount"))),
        amount_formatted=format_currency(txn.get("amount")),
        payee_name=txn.get("payee_name") or None,
        category_name=txn.get("category_name") or None,
        memo=txn.get("memo") or None,
        cleared=txn.get("cleared", "uncleared"),
        approved=txn.get("approved", False),
    )


def _to_summary(txn: dict) -> TransactionSummary:
    return TransactionSummary(
        id=txn["id"],
        date=txn.get("date", ""),
        amount=float(to_major(txn.get("amount"))),
        amount_formatted=format_currency(txn.get("amount")),
        payee_name=txn.get("payee_name") or None,
        category_name=txn.get("category_name") or None,
        memo=txn.get("memo") or None,
    )


async def create_transaction(
    client: "YnabClient",
    account_id: str,
    transaction: TransactionInput,
    budget_id: str | None = None,
) -> TransactionResult:
    payload = _to_save_transaction(account_id, transaction)
    created = await client.create_transaction(resolve_budget_id(budget_id), payload)
    if not created:
        raise TransactionNotCreatedError()
    return _to_result(created)


async def create_transactions_batch(
    client: "YnabClient",
    account_id: str,
    transactions: list[TransactionInput],
    budget_id: str | None = None,
) -> dict:
    """
    Create many transactions in a single request.

    Transactions whose import_id YNAB has already seen are skipped and
    reported in ``duplicate_import_ids``; that is not an error.
    """
    payloads = [_to_save_transaction(account_id, txn) for txn in transactions]
    response = await client.create_transactions(resolve_budget_id(budget_id), payloads)

    created = [_to_result(txn) for txn in response["transactions"]]
    duplicates = list(response["duplicate_import_ids"])
    if duplicates:
        logger.info(f"YNAB skipped {len(duplicates)} duplicate import(s)")

    return {
        "created_count": len(created),
        "transactions": [txn.model_dump() for txn in created],
        "duplicate_import_ids": duplicates,
    }


async def get_uncleared_transactions(
    client: "YnabClient", account_id: str, budget_id: str | None = None
) -> list[TransactionSummary]:
    txns = await client.get_account_transactions(resolve_budget_id(budget_id), account_id)
    return [_to_summary(txn) for txn in txns if txn.get("cleared") == "uncleared"]


async def get_cleared_transactions(
    client: "YnabClient",
    account_id: str,
    budget_id: str | None = None,
    since_date: str | None = None,
) -> list[TransactionSummary]:
    """Cleared and reconciled transactions, optionally on or after since_date."""
    if since_date:
        _check_date(since_date, "since_date")
    txns = await client.get_account_transactions(
        resolve_budget_id(budget_id), account_id, since_date
    )
    return [
        _to_summary(txn)
        for txn in txns
        if txn.get("cleared") in ("cleared", "reconciled")
    ]


async def update_transaction(
    client: "YnabClient",
    transaction_id: str,
    budget_id: str | None = None,
    *,
    amount: float | None = None,
    date: str | None = None,
    payee_name: str | None = None,
    category_id: str | None = None,
    memo: str | None = None,
    cleared: bool | None = None,
) -> TransactionResult:
    """Apply a partial update; only fields that were given are sent."""
    changes: dict = {}
    if amount is not None:
        changes["amount"] = to_milliunits(amount)
    if date is not None:
        changes["date"] = _check_date(date)
    if payee_name is not None:
        changes["payee_name"] = payee_name
    if category_id is not None:
        changes["category_id"] = category_id
    if memo is not None:
        changes["memo"] = memo
    if cleared is not None:
        changes["cleared"] = "cleared" if cleared else "uncleared"

    updated = await client.update_transaction(
        resolve_budget_id(budget_id), transaction_id, changes
    )
    if not updated:
        raise TransactionNotCreatedError("Transaction was not updated")
    return _to_result(updated)


async def clear_transaction(
    client: "YnabClient", transaction_id: str, budget_id: str | None = None
) -> TransactionResult:
    return await update_transaction(client, transaction_id, budget_id, cleared=True)


def register_transaction_tools(mcp: "FastMCP", get_client: "Callable") -> None:
    """Register transaction tools with the MCP server."""

    @mcp.tool(name="create_transaction")
    @handle_tool_errors("creating transaction")
    async def create_transaction_tool(
        account_id: str,
        date: str,
        amount: float,
        payee_name: str,
        category_id: str | None = None,
        memo: str | None = None,
        cleared: bool | None = None,
        import_id: str | None = None,
        budget_id: str | None = None,
    ) -> TransactionResult:
        """
        Create a single transaction.

        Defaults to cleared status for the reconciliation workflow.

        Args:
            account_id: The account ID to create the transaction in
            date: Transaction date in ISO format (YYYY-MM-DD)
            amount: Amount in dollars (negative for charges like -25.99, positive for credits)
            payee_name: Name of the payee
            category_id: Category ID for the transaction
            memo: Optional memo/note
            cleared: Whether transaction is cleared (defaults to true)
            import_id: Optional import ID used by YNAB to skip duplicates
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        transaction = TransactionInput(
            date=date,
            amount=amount,
            payee_name=payee_name,
            category_id=category_id,
            memo=memo,
            cleared=cleared,
            import_id=import_id,
        )
        return await create_transaction(client, account_id, transaction, budget_id)

    @mcp.tool(name="create_transactions_batch")
    @handle_tool_errors("creating transactions")
    async def create_transactions_batch_tool(
        account_id: str,
        transactions: list[TransactionInput],
        budget_id: str | None = None,
    ) -> dict:
        """
        Create multiple transactions at once, all in the same account.

        Amounts are in dollars. Ideal for bulk entry from credit card
        statements. Transactions with an already-imported import_id are
        skipped and listed in duplicate_import_ids.

        Args:
            account_id: The account ID to create transactions in
            transactions: Transactions to create
            budget_id: Budget ID (uses default or last-used if not provided)

        Returns:
            Dict with created_count, transactions, and duplicate_import_ids
        """
        client: YnabClient = await get_client()
        return await create_transactions_batch(client, account_id, transactions, budget_id)

    @mcp.tool(name="get_uncleared_transactions")
    @handle_tool_errors("getting uncleared transactions")
    async def get_uncleared_transactions_tool(
        account_id: str,
        budget_id: str | None = None,
    ) -> dict:
        """
        Get all uncleared transactions for an account.

        Useful for seeing what might need to be cleared during reconciliation.

        Args:
            account_id: The account ID to get uncleared transactions for
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        txns = await get_uncleared_transactions(client, account_id, budget_id)
        return {"count": len(txns), "transactions": [t.model_dump() for t in txns]}

    @mcp.tool(name="get_cleared_transactions")
    @handle_tool_errors("getting cleared transactions")
    async def get_cleared_transactions_tool(
        account_id: str,
        since_date: str | None = None,
        budget_id: str | None = None,
    ) -> dict:
        """
        Get all cleared (and reconciled) transactions for an account.

        Useful for reconciliation to compare against a statement.

        Args:
            account_id: The account ID to get cleared transactions for
            since_date: Only return transactions on or after this date (YYYY-MM-DD)
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        txns = await get_cleared_transactions(client, account_id, budget_id, since_date)
        return {"count": len(txns), "transactions": [t.model_dump() for t in txns]}

    @mcp.tool(name="clear_transaction")
    @handle_tool_errors("clearing transaction")
    async def clear_transaction_tool(
        transaction_id: str,
        budget_id: str | None = None,
    ) -> TransactionResult:
        """
        Mark a transaction as cleared.

        Args:
            transaction_id: The transaction ID to mark as cleared
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await clear_transaction(client, transaction_id, budget_id)

    @mcp.tool(name="update_transaction")
    @handle_tool_errors("updating transaction")
    async def update_transaction_tool(
        transaction_id: str,
        amount: float | None = None,
        date: str | None = None,
        payee_name: str | None = None,
        category_id: str | None = None,
        memo: str | None = None,
        cleared: bool | None = None,
        budget_id: str | None = None,
    ) -> TransactionResult:
        """
        Update an existing transaction.

        Only the fields provided are changed.

        Args:
            transaction_id: The transaction ID to update
            amount: New amount in dollars (negative for charges, positive for credits)
            date: New date in ISO format (YYYY-MM-DD)
            payee_name: New payee name
            category_id: New category ID
            memo: New memo/note
            cleared: Whether transaction is cleared
            budget_id: Budget ID (uses default or last-used if not provided)
        """
        client: YnabClient = await get_client()
        return await update_transaction(
            client,
            transaction_id,
            budget_id,
            amount=amount,
            date=date,
            payee_name=payee_name,
            category_id=category_id,
            memo=memo,
            cleared=cleared,
        )
