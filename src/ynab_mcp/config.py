# ABOUTME: Environment configuration for ynab-mcp
# ABOUTME: Reads the YNAB access token, default budget and API URL

import logging
import os
from typing import Literal, get_args

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ynab_mcp.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.ynab.com/v1"

# YNAB accepts this alias in place of a budget ID
LAST_USED_BUDGET = "last-used"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = get_args(LogLevel)


class Settings(BaseModel):
    """Runtime settings resolved from the environment."""

    api_token: str
    default_budget_id: str = LAST_USED_BUDGET
    api_base_url: str = API_BASE_URL
    log_level: LogLevel = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Raises:
            ConfigurationError: YNAB_API_TOKEN is not set, or
                YNAB_MCP_LOG_LEVEL is not a logging level name
        """
        token = os.environ.get("YNAB_API_TOKEN")
        if not token:
            raise ConfigurationError("YNAB_API_TOKEN environment variable is required")

        log_level = os.environ.get("YNAB_MCP_LOG_LEVEL", "INFO").upper()
        try:
            return cls(
                api_token=token,
                default_budget_id=get_default_budget_id(),
                api_base_url=os.environ.get("YNAB_API_URL", API_BASE_URL).rstrip("/"),
                log_level=log_level,
            )
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"YNAB_MCP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
            ) from e


def get_default_budget_id() -> str:
    """Budget used when a tool call omits budget_id."""
    return os.environ.get("YNAB_BUDGET_ID") or LAST_USED_BUDGET


def resolve_budget_id(budget_id: str | None = None) -> str:
    """Return the explicit budget ID or fall back to the configured default."""
    if budget_id:
        return budget_id
    resolved = get_default_budget_id()
    logger.debug(f"No budget_id given, using {resolved}")
    return resolved
