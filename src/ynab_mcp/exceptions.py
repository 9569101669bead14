# ABOUTME: Custom exception hierarchy for ynab-mcp
# ABOUTME: Typed YNAB API error variants with per-variant message derivation

from typing import Any


class YnabMCPError(Exception):
    """Base exception for all ynab-mcp errors."""


class ConfigurationError(YnabMCPError):
    """Required configuration missing from the environment."""


class TransactionNotCreatedError(YnabMCPError):
    """YNAB reported success but returned no transaction."""

    def __init__(self, message: str = "Transaction was not created") -> None:
        super().__init__(message)


class YnabAPIError(YnabMCPError):
    """
    Error response from the YNAB API.

    YNAB wraps failures as ``{"error": {"id", "name", "detail"}}``. The
    human-readable message prefers ``detail``, then ``name``, then the
    variant's generic message.
    """

    generic_message = "Unexpected error from YNAB API"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        error_id: str | None = None,
        error_name: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_id = error_id
        self.error_name = error_name
        self.detail = detail
        super().__init__(message or detail or error_name or self.generic_message)

    @classmethod
    def from_payload(cls, payload: Any, status_code: int | None = None) -> "YnabAPIError":
        """Build an error from a decoded response body (or raw text)."""
        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            return cls(
                status_code=status_code,
                error_id=error.get("id"),
                error_name=error.get("name"),
                detail=error.get("detail"),
            )
        message = str(payload) if payload not in (None, "", {}) else None
        return cls(message, status_code=status_code)


class AuthenticationError(YnabAPIError):
    """Access token rejected by YNAB."""

    generic_message = "Unauthorized: check YNAB_API_TOKEN"


class NotFoundError(YnabAPIError):
    """Budget, account or transaction ID doesn't exist."""

    generic_message = "Resource not found"


class ValidationError(YnabAPIError):
    """Invalid input, rejected locally or by YNAB."""

    generic_message = "Invalid request"


class RateLimitError(YnabAPIError):
    """Too many requests to YNAB API."""

    generic_message = "Rate limit exceeded, try again later"


class TransportError(YnabAPIError):
    """Network failure before YNAB returned a response."""

    generic_message = "Could not reach YNAB API"


_STATUS_ERRORS: dict[int, type[YnabAPIError]] = {
    400: ValidationError,
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    409: ValidationError,
    422: ValidationError,
    429: RateLimitError,
}


def error_for_status(status_code: int, payload: Any) -> YnabAPIError:
    """Map an HTTP error status and body to the matching error variant."""
    error_cls = _STATUS_ERRORS.get(status_code, YnabAPIError)
    return error_cls.from_payload(payload, status_code=status_code)
