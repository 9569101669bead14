# ABOUTME: ynab-mcp package exposing YNAB as MCP tools
# ABOUTME: Exports create_server function and version info

from ynab_mcp.server import create_server

__version__ = "0.1.0"
__all__ = ["create_server", "__version__"]
