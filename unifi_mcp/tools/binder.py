"""Argument binder — checks required params and coerces primitive shapes.

Presence is the rule throughout: a key the caller left out stays out, while
`False`, `0` and `""` are real values. Updates rely on this so that omitting
a field leaves it unchanged on the console.
"""
import logging
from typing import Any, Dict, Iterator, Mapping, Optional

from ..exceptions import ToolValidationError
from .registry import ToolDef, ToolParam

logger = logging.getLogger(__name__)


class _Absent:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


class BoundArguments(Mapping[str, Any]):
    """Validated arguments for one tool. Holds only the keys the caller supplied."""

    def __init__(self, tool: ToolDef, values: Dict[str, Any]):
        self.tool = tool
        self._values = dict(values)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def get(self, name: str, default: Any = ABSENT) -> Any:
        return self._values.get(name, default)

    def is_present(self, name: str) -> bool:
        return name in self._values

    def __repr__(self) -> str:
        return f"BoundArguments({self.tool.name}, {self._values!r})"


def _invalid(param: ToolParam) -> ToolValidationError:
    return ToolValidationError(f"Invalid value for parameter '{param.name}': expected {param.type}")


def _coerce(param: ToolParam, value: Any) -> Any:
    kind = param.type
    if kind == "string":
        if isinstance(value, str):
            return value
    elif kind == "integer":
        if isinstance(value, bool):
            raise _invalid(param)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
    elif kind == "number":
        if isinstance(value, bool):
            raise _invalid(param)
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                try:
                    return float(value.strip())
                except ValueError:
                    pass
    elif kind == "boolean":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
    elif kind == "array":
        if isinstance(value, (list, tuple)):
            return list(value)
    elif kind == "object":
        if isinstance(value, Mapping):
            return dict(value)
    raise _invalid(param)


def bind(tool: ToolDef, arguments: Optional[Mapping[str, Any]]) -> BoundArguments:
    """Validate raw invocation arguments against a tool definition.

    Raises ToolValidationError naming the first missing required param, or the
    first param whose value cannot be read as its declared type. Enum values
    are not checked here; the UniFi API rejects values it does not accept.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ToolValidationError(f"Arguments for {tool.name} must be an object")

    # JSON null means "not provided"
    supplied = {k: v for k, v in arguments.items() if v is not None}

    for name in tool.required_params:
        if name not in supplied:
            raise ToolValidationError(f"Missing required parameter: {name}")

    values: Dict[str, Any] = {}
    for param in tool.params:
        if param.name in supplied:
            values[param.name] = _coerce(param, supplied[param.name])

    unknown = [k for k in arguments if tool.param(k) is None]
    if unknown:
        logger.debug(f"{tool.name}: ignoring undeclared arguments {unknown}")

    return BoundArguments(tool, values)
