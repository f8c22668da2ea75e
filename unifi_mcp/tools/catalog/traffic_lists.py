"""Traffic matching lists (IP, port, domain, app and region groups)."""
from ..registry import ToolDef, ToolParam
from ._common import SITE_ID, delete_tool, get_tool, list_tool, resource_id

LIST_ID = resource_id("listId", "Traffic matching list ID")
_COLLECTION = "/v1/sites/{siteId}/trafficMatchingLists"
_ITEM = _COLLECTION + "/{listId}"

ENTRY_SHAPE = {
    "type": "object",
    "properties": {
        "address": {"type": "string", "description": "IP address or CIDR"},
        "port": {"type": "string", "description": "Port or port range"},
        "protocol": {"type": "string", "description": "Protocol (tcp, udp)"},
        "domain": {"type": "string", "description": "Domain name"},
        "appId": {"type": "string", "description": "DPI application ID"},
        "regionCode": {"type": "string", "description": "Country/region code"},
    },
}

TOOLS = [
    list_tool(
        "unifi_list_traffic_matching_lists",
        "List all traffic matching lists at a site (IP groups, port groups, etc.)",
        _COLLECTION,
        category="traffic_lists",
    ),
    get_tool(
        "unifi_get_traffic_matching_list",
        "Get a specific traffic matching list by ID",
        _ITEM,
        LIST_ID,
        category="traffic_lists",
    ),
    ToolDef(
        name="unifi_create_traffic_matching_list",
        description="Create a new traffic matching list",
        method="POST",
        path=_COLLECTION,
        params=(
            SITE_ID,
            ToolParam("name", description="List name"),
            ToolParam("type", enum=("IP_ADDRESS", "PORT", "IP_PORT", "DOMAIN", "APP", "REGION"),
                      description="List type"),
            ToolParam("entries", type="array", required=False, items=ENTRY_SHAPE, description="List entries"),
        ),
        body=("name", "type", "entries"),
        category="traffic_lists",
    ),
    ToolDef(
        name="unifi_update_traffic_matching_list",
        description="Update a traffic matching list. Supplied entries replace the existing ones.",
        method="PUT",
        path=_ITEM,
        params=(
            SITE_ID,
            LIST_ID,
            ToolParam("name", required=False, description="List name"),
            ToolParam("entries", type="array", required=False, items=ENTRY_SHAPE, description="List entries"),
        ),
        body=("name", "entries"),
        category="traffic_lists",
    ),
    delete_tool(
        "unifi_delete_traffic_matching_list",
        "Delete a traffic matching list",
        _ITEM,
        LIST_ID,
        category="traffic_lists",
    ),
]
