# ABOUTME: Pydantic models for ynab-mcp tool I/O
# ABOUTME: Defines Budget, Account, Category, Payee, Transaction and Reconciliation types

from typing import Literal

from pydantic import BaseModel, Field

ClearedStatus = Literal["cleared", "uncleared", "reconciled"]


class BudgetSummary(BaseModel):
    """A YNAB budget visible to the authenticated user."""

    id: str
    name: str
    last_modified_on: str = ""
    first_month: str = ""
    last_month: str = ""


class AccountSummary(BaseModel):
    """An account with balances in dollars and as display strings."""

    id: str
    name: str
    type: str
    on_budget: bool
    closed: bool
    balance: float
    balance_formatted: str
    cleared_balance: float
    cleared_balance_formatted: str
    uncleared_balance: float
    uncleared_balance_formatted: str


class AccountBalance(BaseModel):
    """Cleared, uncleared and total balance for one account."""

    account_id: str
    account_name: str
    cleared_balance: float
    cleared_balance_formatted: str
    uncleared_balance: float
    uncleared_balance_formatted: str
    total_balance: float
    total_balance_formatted: str


class CategoryInfo(BaseModel):
    id: str
    name: str
    hidden: bool = False
    deleted: bool = False


class CategoryGroup(BaseModel):
    """A category group and its visible categories."""

    id: str
    name: str
    hidden: bool = False
    deleted: bool = False
    categories: list[CategoryInfo] = Field(default_factory=list)


class PayeeInfo(BaseModel):
    id: str
    name: str
    transfer_account_id: str | None = None
    deleted: bool = False


class PayeeMatch(BaseModel):
    """A payee search hit with its relevance score (0-100)."""

    id: str
    name: str
    score: float


class TransactionInput(BaseModel):
    """A transaction to create. Amount is in dollars."""

    date: str = Field(description="Transaction date in ISO format (YYYY-MM-DD)")
    amount: float = Field(description="Amount in dollars (negative for charges)")
    payee_name: str = Field(description="Name of the payee")
    category_id: str | None = Field(default=None, description="Category ID")
    memo: str | None = Field(default=None, description="Optional memo/note")
    cleared: bool | None = Field(default=None, description="Whether cleared (defaults to true)")
    import_id: str | None = Field(
        default=None,
        description="Optional import ID; YNAB skips transactions whose import ID already exists",
    )


class TransactionResult(BaseModel):
    """A created or updated transaction."""

    id: str
    date: str
    amount: float
    amount_formatted: str
    payee_name: str | None = None
    category_name: str | None = None
    memo: str | None = None
    cleared: ClearedStatus
    approved: bool


class TransactionSummary(BaseModel):
    """A transaction as listed for reconciliation review."""

    id: str
    date: str
    amount: float
    amount_formatted: str
    payee_name: str | None = None
    category_name: str | None = None
    memo: str | None = None


class ReconciliationResult(BaseModel):
    """Comparison of YNAB cleared balance against a statement balance."""

    account_name: str
    ynab_cleared_balance: float
    ynab_cleared_balance_formatted: str
    actual_balance: float
    actual_balance_formatted: str
    difference: float = Field(description="YNAB cleared balance minus actual balance")
    difference_formatted: str
    status: Literal["matched", "discrepancy"]
    message: str
