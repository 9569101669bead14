# ABOUTME: YNAB client management and tool error boundary
# ABOUTME: Provides the shared client factory and error-to-ToolError decorator

import asyncio
import functools
import logging
from typing import Any, Callable, TypeVar

from fastmcp.exceptions import ToolError

from ynab_mcp.api import YnabClient
from ynab_mcp.config import Settings
from ynab_mcp.exceptions import YnabMCPError

logger = logging.getLogger(__name__)

# Module-level client cache, created on first tool call
_client: YnabClient | None = None
_client_lock = asyncio.Lock()

F = TypeVar("F", bound=Callable[..., Any])


async def get_client() -> YnabClient:
    """
    Get or create the shared YNAB client.

    Creates the client on first call from environment settings and returns
    the cached instance afterwards.
    """
    global _client

    async with _client_lock:
        if _client is None:
            settings = Settings.from_env()
            logger.info("Creating YNAB API client")
            _client = YnabClient(settings.api_token, base_url=settings.api_base_url)
        return _client


async def close_client() -> None:
    """Close and forget the cached client."""
    global _client

    async with _client_lock:
        if _client:
            await _client.close()
            _client = None
            logger.info("Closed YNAB API client")


def handle_tool_errors(action: str) -> Callable[[F], F]:
    """
    Decorator that turns any tool failure into a flagged tool result.

    Any exception raised by the tool is logged and re-raised as a FastMCP
    ``ToolError`` reading "Error <action>: <message>", which the caller
    receives as an ``isError`` result. ``YnabMCPError`` is expected and
    logged as a warning; anything else is logged with its traceback.
    Nothing is retried.

    Usage:
        @mcp.tool
        @handle_tool_errors("listing budgets")
        async def list_budgets(...):
            ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except YnabMCPError as exc:
                logger.warning(f"{func.__name__} failed: {exc}")
                raise ToolError(f"Error {action}: {exc}") from exc
            except Exception as exc:
                logger.exception(f"Unexpected error in {func.__name__}")
                raise ToolError(f"Error {action}: {exc}") from exc

        return wrapper  # type: ignore

    return decorator
