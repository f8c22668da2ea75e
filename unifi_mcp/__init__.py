"""UniFi Network MCP server — tool calls compiled into UniFi Integration API requests."""

__version__ = "1.1.0"
