"""Connected clients and guest authorization."""
from ..registry import ToolParam
from ._common import USAGE_QUOTA, action_tool, get_tool, list_tool, resource_id

CLIENT_ID = resource_id("clientId", "Client ID")
_CLIENT = "/v1/sites/{siteId}/clients/{clientId}"

TOOLS = [
    list_tool(
        "unifi_list_clients",
        "List all clients (connected devices/users) at a site",
        "/v1/sites/{siteId}/clients",
        category="clients",
    ),
    get_tool(
        "unifi_get_client",
        "Get a specific client by ID",
        _CLIENT,
        CLIENT_ID,
        category="clients",
    ),
    action_tool(
        "unifi_authorize_guest",
        "Authorize a guest client on a hotspot network",
        _CLIENT + "/actions",
        (CLIENT_ID,),
        "AUTHORIZE_GUEST_ACCESS",
        fields=(
            ToolParam("expiresAt", description="ISO 8601 timestamp when authorization expires"),
            USAGE_QUOTA,
        ),
        category="clients",
    ),
    action_tool(
        "unifi_unauthorize_guest",
        "Revoke a guest client's hotspot authorization",
        _CLIENT + "/actions",
        (CLIENT_ID,),
        "UNAUTHORIZE_GUEST_ACCESS",
        category="clients",
    ),
]
