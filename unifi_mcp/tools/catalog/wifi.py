"""WiFi broadcasts (SSIDs)."""
from ..registry import ToolDef, ToolParam
from ._common import SITE_ID, delete_tool, get_tool, list_tool, names, optional, require, resource_id

WIFI_ID = resource_id("wifiId", "WiFi network ID")
_COLLECTION = "/v1/sites/{siteId}/wifi"
_ITEM = _COLLECTION + "/{wifiId}"

FIELDS = (
    ToolParam("name", description="SSID name"),
    ToolParam("enabled", type="boolean", description="Enable the WiFi network"),
    ToolParam("security", enum=("open", "wpa2", "wpa3", "wpa2wpa3"), description="Security protocol"),
    ToolParam("password", description="WiFi password (required for WPA)"),
    ToolParam("networkId", description="Associated network ID"),
    ToolParam("hideSsid", type="boolean", description="Hide the SSID from broadcast"),
    ToolParam("band", enum=("2.4GHz", "5GHz", "both"), description="Radio band"),
    ToolParam("bandSteeringEnabled", type="boolean", description="Enable band steering"),
    ToolParam("wpa3TransitionMode", type="boolean", description="Enable WPA3 transition mode"),
    ToolParam("pmfMode", enum=("disabled", "optional", "required"),
              description="Protected Management Frames mode"),
)

TOOLS = [
    list_tool(
        "unifi_list_wifi",
        "List all WiFi networks (SSIDs) at a site",
        _COLLECTION,
        category="wifi",
    ),
    get_tool(
        "unifi_get_wifi",
        "Get a specific WiFi network by ID",
        _ITEM,
        WIFI_ID,
        category="wifi",
    ),
    ToolDef(
        name="unifi_create_wifi",
        description="Create a new WiFi network (SSID)",
        method="POST",
        path=_COLLECTION,
        params=(SITE_ID,) + require(FIELDS, ("name", "security", "networkId")),
        body=names(FIELDS),
        category="wifi",
    ),
    ToolDef(
        name="unifi_update_wifi",
        description="Update an existing WiFi network. Only the fields supplied are changed.",
        method="PUT",
        path=_ITEM,
        params=(SITE_ID, WIFI_ID) + optional(FIELDS),
        body=names(FIELDS),
        category="wifi",
    ),
    delete_tool(
        "unifi_delete_wifi",
        "Delete a WiFi network",
        _ITEM,
        WIFI_ID,
        category="wifi",
    ),
]
