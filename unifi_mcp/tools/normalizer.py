"""Response normalizer — maps HTTP responses and pipeline errors to ToolResult."""
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

from ..exceptions import (
    ToolValidationError,
    UnifiApiError,
    UnifiNetworkError,
    UnifiToolError,
    UnknownToolError,
)

logger = logging.getLogger(__name__)

EMPTY_SUCCESS = {"success": True}


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    UNKNOWN_TOOL = "unknown_tool"
    NETWORK = "network_error"
    API = "api_error"


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one invocation: a JSON payload, or an error kind and message."""
    payload: Any = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    status_code: Optional[int] = None

    @classmethod
    def success(cls, payload: Any) -> "ToolResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, status_code: Optional[int] = None) -> "ToolResult":
        return cls(error_kind=kind, message=message, status_code=status_code)

    @property
    def is_error(self) -> bool:
        return self.error_kind is not None

    def to_text(self) -> str:
        if self.is_error:
            return f"Error: {self.message}"
        return json.dumps(self.payload, indent=2, ensure_ascii=False)


def normalize_response(resp: httpx.Response) -> ToolResult:
    """Turn a UniFi API response into a ToolResult.

    204 and empty 2xx bodies become {"success": true}. Error bodies are
    quoted verbatim in the message, never re-parsed.
    """
    if not resp.is_success:
        return normalize_error(UnifiApiError(resp.status_code, resp.text))

    if resp.status_code == 204 or not resp.content.strip():
        return ToolResult.success(dict(EMPTY_SUCCESS))

    try:
        return ToolResult.success(resp.json())
    except ValueError:
        logger.warning(f"UniFi API returned non-JSON {resp.status_code} body, passing text through")
        return ToolResult.success(resp.text)


def normalize_error(exc: UnifiToolError) -> ToolResult:
    if isinstance(exc, UnifiApiError):
        return ToolResult.failure(ErrorKind.API, str(exc), status_code=exc.status_code)
    if isinstance(exc, UnknownToolError):
        return ToolResult.failure(ErrorKind.UNKNOWN_TOOL, str(exc))
    if isinstance(exc, UnifiNetworkError):
        return ToolResult.failure(ErrorKind.NETWORK, str(exc))
    if isinstance(exc, ToolValidationError):
        return ToolResult.failure(ErrorKind.VALIDATION, str(exc))
    return ToolResult.failure(ErrorKind.VALIDATION, str(exc) or exc.__class__.__name__)
