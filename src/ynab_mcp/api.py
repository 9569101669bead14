# ABOUTME: Async HTTP client for the YNAB v1 REST API
# ABOUTME: Wraps budget, account, category, payee and transaction endpoints

import logging
from typing import Any

import httpx

from ynab_mcp.config import API_BASE_URL
from ynab_mcp.exceptions import TransportError, YnabAPIError, error_for_status

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class YnabClient:
    """
    Authenticated client for the YNAB API.

    Every YNAB response body is wrapped as ``{"data": {...}}``. Methods return
    the unwrapped ``data`` object and raise a typed ``YnabAPIError`` variant on
    any failure.
    """

    def __init__(
        self,
        token: str,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the authenticated HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                },
            )
        return self._client

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict:
        """Send a request and return the ``data`` member of the response."""
        client = self._get_client()
        logger.debug(f"{method} {path}")
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"Could not reach YNAB API: {e}") from e

        if response.is_error:
            try:
                payload: Any = response.json()
            except ValueError:
                payload = response.text
            error = error_for_status(response.status_code, payload)
            logger.debug(f"{method} {path} failed with {response.status_code}: {error}")
            raise error

        try:
            body = response.json()
        except ValueError as e:
            raise YnabAPIError(
                f"Invalid JSON in YNAB response: {response.text[:200]}",
                status_code=response.status_code,
            ) from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise YnabAPIError(
                f"Malformed YNAB response: expected a data object, got {response.text[:200]}",
                status_code=response.status_code,
            )
        return data

    async def get_budgets(self) -> list[dict]:
        data = await self._request("GET", "/budgets")
        return data.get("budgets", [])

    async def get_accounts(self, budget_id: str) -> list[dict]:
        data = await self._request("GET", f"/budgets/{budget_id}/accounts")
        return data.get("accounts", [])

    async def get_account(self, budget_id: str, account_id: str) -> dict:
        data = await self._request("GET", f"/budgets/{budget_id}/accounts/{account_id}")
        return data.get("account", {})

    async def get_category_groups(self, budget_id: str) -> list[dict]:
        data = await self._request("GET", f"/budgets/{budget_id}/categories")
        return data.get("category_groups", [])

    async def get_payees(self, budget_id: str) -> list[dict]:
        data = await self._request("GET", f"/budgets/{budget_id}/payees")
        return data.get("payees", [])

    async def create_transaction(self, budget_id: str, transaction: dict) -> dict | None:
        """Create one transaction; returns None if YNAB omits it."""
        data = await self._request(
            "POST", f"/budgets/{budget_id}/transactions", json={"transaction": transaction}
        )
        return data.get("transaction")

    async def create_transactions(self, budget_id: str, transactions: list[dict]) -> dict:
        """
        Create several transactions in one request.

        Returns:
            Dict with ``transactions`` (created, in input order) and
            ``duplicate_import_ids`` (inputs YNAB skipped as already imported)
        """
        data = await self._request(
            "POST", f"/budgets/{budget_id}/transactions", json={"transactions": transactions}
        )
        return {
            "transactions": data.get("transactions") or [],
            "duplicate_import_ids": data.get("duplicate_import_ids") or [],
        }

    async def get_account_transactions(
        self,
        budget_id: str,
        account_id: str,
        since_date: str | None = None,
    ) -> list[dict]:
        params = {"since_date": since_date} if since_date else None
        data = await self._request(
            "GET",
            f"/budgets/{budget_id}/accounts/{account_id}/transactions",
            params=params,
        )
        return data.get("transactions", [])

    async def update_transaction(
        self, budget_id: str, transaction_id: str, changes: dict
    ) -> dict | None:
        data = await self._request(
            "PUT",
            f"/budgets/{budget_id}/transactions/{transaction_id}",
            json={"transaction": changes},
        )
        return data.get("transaction")

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
