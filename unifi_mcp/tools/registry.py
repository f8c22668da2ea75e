"""Tool registry — declarative tool definitions and read-only lookup."""
import copy
import logging
import string
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import ToolDefinitionError, UnknownToolError

logger = logging.getLogger(__name__)

PARAM_TYPES = ("string", "integer", "number", "boolean", "array", "object")
HTTP_METHODS = ("GET", "POST", "PUT", "DELETE")
BODY_METHODS = ("POST", "PUT")


@dataclass(frozen=True)
class ToolParam:
    name: str
    type: str = "string"
    description: str = ""
    required: bool = True
    enum: Optional[Tuple[str, ...]] = None
    items: Optional[Mapping[str, Any]] = None
    properties: Optional[Mapping[str, Any]] = None

    def json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.items is not None:
            schema["items"] = copy.deepcopy(dict(self.items))
        if self.properties is not None:
            schema["properties"] = copy.deepcopy(dict(self.properties))
        return schema


@dataclass(frozen=True)
class ToolDef:
    """One catalogue entry: how a tool name maps onto a UniFi API request.

    `query` and `body` name the params that feed the query string and the
    request body, in the order they are rendered. `defaults` are injected
    into the body only when the caller left the field out. `action` is the
    discriminator sent to `.../actions` endpoints.
    """
    name: str
    description: str
    method: str
    path: str
    params: Tuple[ToolParam, ...] = ()
    query: Tuple[str, ...] = ()
    body: Tuple[str, ...] = ()
    defaults: Mapping[str, Any] = field(default_factory=dict)
    action: Optional[str] = None
    category: str = ""

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ToolDefinitionError(f"{self.name}: unsupported method {self.method}")
        names = [p.name for p in self.params]
        if len(set(names)) != len(names):
            raise ToolDefinitionError(f"{self.name}: duplicate parameter names")
        for p in self.params:
            if p.type not in PARAM_TYPES:
                raise ToolDefinitionError(f"{self.name}: parameter {p.name} has unknown type {p.type}")
        required = set(self.required_params)
        for placeholder in self.path_fields:
            if placeholder not in required:
                raise ToolDefinitionError(f"{self.name}: path field {placeholder} must be a required parameter")
        for key in self.query + self.body:
            if key not in names:
                raise ToolDefinitionError(f"{self.name}: {key} is not a declared parameter")
        if (self.body or self.defaults or self.action) and self.method not in BODY_METHODS:
            raise ToolDefinitionError(f"{self.name}: only POST/PUT tools may declare a body")
        # Freeze defaults so the registry stays read-only
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))

    @property
    def path_fields(self) -> List[str]:
        return [fname for _, fname, _, _ in string.Formatter().parse(self.path) if fname]

    @property
    def required_params(self) -> List[str]:
        return [p.name for p in self.params if p.required]

    @property
    def has_body(self) -> bool:
        return self.method in BODY_METHODS and bool(self.body or self.defaults or self.action)

    def param(self, name: str) -> Optional[ToolParam]:
        for p in self.params:
            if p.name == name:
                return p
        return None

    def input_schema(self) -> Dict[str, Any]:
        """JSON Schema for the tool's arguments, as advertised over MCP."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": self.required_params,
        }


class ToolRegistry:
    """Read-only catalogue of ToolDefs, built once at startup."""

    def __init__(self, tools: Iterable[ToolDef]):
        table: Dict[str, ToolDef] = {}
        for tool in tools:
            if tool.name in table:
                raise ToolDefinitionError(f"Tool {tool.name} is defined twice")
            table[tool.name] = tool
        self._tools = MappingProxyType(table)
        logger.debug(f"Tool registry built with {len(table)} tools")

    def lookup(self, name: str) -> ToolDef:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(name)
        return tool

    def get(self, name: str) -> Optional[ToolDef]:
        return self._tools.get(name)

    @property
    def tools(self) -> Mapping[str, ToolDef]:
        return self._tools

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDef]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def by_category(self) -> Dict[str, List[str]]:
        groups: Dict[str, List[str]] = {}
        for tool in self._tools.values():
            groups.setdefault(tool.category, []).append(tool.name)
        return groups
