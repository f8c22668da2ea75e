"""Adopted and pending devices, device actions and port power-cycling."""
from ..registry import ToolDef, ToolParam
from ._common import SITE_ID, action_tool, get_tool, list_tool, resource_id

DEVICE_ID = resource_id("deviceId", "Device ID")
_DEVICE = "/v1/sites/{siteId}/devices/{deviceId}"

TOOLS = [
    list_tool(
        "unifi_list_devices",
        "List all adopted devices at a site",
        "/v1/sites/{siteId}/devices",
        category="devices",
    ),
    get_tool(
        "unifi_get_device",
        "Get a specific device by ID",
        _DEVICE,
        DEVICE_ID,
        category="devices",
    ),
    ToolDef(
        name="unifi_get_device_statistics",
        description="Get latest statistics for a device (uptime, CPU, memory, uplink rates)",
        method="GET",
        path=_DEVICE + "/statistics/latest",
        params=(SITE_ID, DEVICE_ID),
        category="devices",
    ),
    action_tool(
        "unifi_adopt_device",
        "Adopt a pending device",
        _DEVICE + "/actions",
        (DEVICE_ID,),
        "ADOPT",
        category="devices",
    ),
    action_tool(
        "unifi_restart_device",
        "Restart a device",
        _DEVICE + "/actions",
        (DEVICE_ID,),
        "RESTART",
        category="devices",
    ),
    action_tool(
        "unifi_locate_device",
        "Enable or disable the locate function (flashing LED) on a device",
        _DEVICE + "/actions",
        (DEVICE_ID,),
        "LOCATE",
        fields=(ToolParam("enabled", type="boolean", description="Enable or disable locate mode"),),
        category="devices",
    ),
    action_tool(
        "unifi_power_cycle_port",
        "Power-cycle a PoE port on a switch or gateway",
        _DEVICE + "/interfaces/ports/{portIdx}/actions",
        (DEVICE_ID, ToolParam("portIdx", type="integer", description="Port index")),
        "POWER_CYCLE",
        category="devices",
    ),
    list_tool(
        "unifi_list_pending_devices",
        "List devices pending adoption at a site",
        "/v1/sites/{siteId}/devices/pending",
        category="devices",
    ),
]
