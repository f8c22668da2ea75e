"""Tool executor — runs one invocation through lookup, bind, compile, send, normalize."""
import logging
import time
from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..exceptions import UnifiToolError
from .binder import bind
from .compiler import compile_request
from .normalizer import ErrorKind, ToolResult, normalize_error, normalize_response
from .registry import ToolRegistry

if TYPE_CHECKING:
    from ..client import UnifiClient

logger = logging.getLogger(__name__)

# Never echoed into logs
_SECRET_ARGS = ("password",)


def _format_args(args: Mapping[str, Any]) -> str:
    return ", ".join(
        f"{k}={'***' if k in _SECRET_ARGS else repr(v)}" for k, v in args.items()
    )


async def execute_tool(
    tool_name: str,
    args: Optional[Mapping[str, Any]],
    client: "UnifiClient",
    registry: Optional[ToolRegistry] = None,
) -> ToolResult:
    """Execute a catalogue tool by name.

    Always returns a ToolResult. Nothing raised inside the pipeline escapes;
    unexpected errors are logged with a traceback and reported as failures.
    """
    if registry is None:
        from . import tool_registry
        registry = tool_registry

    t0 = time.monotonic()
    try:
        tool = registry.lookup(tool_name)
        bound = bind(tool, args)
        request = compile_request(tool, bound)
        logger.info(f"Executing tool: {tool_name}({_format_args(bound)}) -> {request}")
        resp = await client.send(request)
        result = normalize_response(resp)
    except UnifiToolError as e:
        logger.warning(f"Tool {tool_name} failed: {e}")
        result = normalize_error(e)
    except Exception as e:
        logger.error(f"Tool {tool_name} failed: {e}", exc_info=True)
        detail = str(e) or e.__class__.__name__
        result = ToolResult.failure(ErrorKind.NETWORK, f"Tool execution failed: {detail}")

    elapsed = time.monotonic() - t0
    outcome = result.error_kind.value if result.is_error else "ok"
    logger.info(f"Tool {tool_name}: {elapsed:.2f}s -> {outcome}")
    return result
