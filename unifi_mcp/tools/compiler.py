"""Request compiler — turns a ToolDef and bound arguments into one HTTP request."""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote, urlencode

from .binder import BoundArguments
from .registry import ToolDef


@dataclass(frozen=True)
class CompiledRequest:
    method: str
    path: str
    query: Tuple[Tuple[str, str], ...] = ()
    body: Optional[Dict[str, Any]] = None

    @property
    def query_string(self) -> str:
        return urlencode(self.query, quote_via=quote)

    @property
    def target(self) -> str:
        """Path plus query string, relative to the integration API root."""
        if not self.query:
            return self.path
        return f"{self.path}?{self.query_string}"

    def __str__(self) -> str:
        return f"{self.method} {self.target}"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _render_path(tool: ToolDef, args: BoundArguments) -> str:
    # Identifiers go in verbatim; httpx escapes what the URL needs
    return tool.path.format(**{name: args[name] for name in tool.path_fields})


def _build_query(tool: ToolDef, args: BoundArguments) -> Tuple[Tuple[str, str], ...]:
    return tuple(
        (key, _query_value(args[key]))
        for key in tool.query
        if args.is_present(key)
    )


def _build_body(tool: ToolDef, args: BoundArguments) -> Optional[Dict[str, Any]]:
    if not tool.has_body:
        return None
    body: Dict[str, Any] = {}
    if tool.action:
        body["action"] = tool.action
    for key in tool.body:
        if args.is_present(key):
            body[key] = args[key]
    for key, value in tool.defaults.items():
        body.setdefault(key, value)
    return body


def compile_request(tool: ToolDef, args: BoundArguments) -> CompiledRequest:
    """Build the request for a tool call.

    Optional params only appear in the query or body when the caller supplied
    them; create defaults fill in fields the caller left out. Deterministic:
    the same arguments always give the same path, query string and body.
    """
    return CompiledRequest(
        method=tool.method,
        path=_render_path(tool, args),
        query=_build_query(tool, args),
        body=_build_body(tool, args),
    )
