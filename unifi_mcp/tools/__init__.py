"""Tool system — catalogue registry, binder, compiler, normalizer, executor."""
from .registry import ToolDef, ToolParam, ToolRegistry
from .catalog import CATALOG
from .binder import ABSENT, BoundArguments, bind
from .compiler import CompiledRequest, compile_request
from .normalizer import ErrorKind, ToolResult, normalize_error, normalize_response

# Built once at import; read-only afterwards
tool_registry = ToolRegistry(CATALOG)

from .executor import execute_tool  # noqa: E402
