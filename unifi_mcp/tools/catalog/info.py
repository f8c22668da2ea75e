"""Application info and sites."""
from ..registry import ToolDef
from ._common import list_tool

TOOLS = [
    ToolDef(
        name="unifi_get_info",
        description="Get application information including version and whether it's a UniFi OS Console",
        method="GET",
        path="/v1/info",
        category="info",
    ),
    list_tool(
        "unifi_list_sites",
        "List all sites available to the API key",
        "/v1/sites",
        scoped=False,
        category="sites",
    ),
]
