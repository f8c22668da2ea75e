"""Exceptions raised while turning a tool invocation into a UniFi API call.

Every invocation-level error derives from UnifiToolError; the pipeline in
tools.executor catches these and turns them into failure results.
"""


class UnifiToolError(Exception):
    """Base exception for all tool invocation errors."""

    pass


class ToolValidationError(UnifiToolError):
    """Raised when tool arguments are missing or have the wrong shape."""

    pass


class UnknownToolError(UnifiToolError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class UnifiNetworkError(UnifiToolError):
    """Raised when the request never got a response (DNS, refused, TLS, timeout)."""

    pass


class UnifiApiError(UnifiToolError):
    """Raised for a non-2xx response from the UniFi API."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"UniFi API error ({status_code}): {body}")


class ToolDefinitionError(Exception):
    """Raised at import time when a catalogue entry is malformed."""

    pass
