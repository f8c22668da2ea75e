"""Networks (LANs / VLANs)."""
from ..registry import ToolDef, ToolParam
from ._common import SITE_ID, delete_tool, get_tool, list_tool, names, optional, require, resource_id

NETWORK_ID = resource_id("networkId", "Network ID")
_COLLECTION = "/v1/sites/{siteId}/networks"
_ITEM = _COLLECTION + "/{networkId}"

FIELDS = (
    ToolParam("name", description="Network name"),
    ToolParam("purpose", enum=("corporate", "guest", "wan", "vlan-only"), description="Network purpose"),
    ToolParam("management", enum=("GATEWAY", "SWITCH", "UNMANAGED"),
              description="Which device manages the network (default GATEWAY on create)"),
    ToolParam("vlanId", type="integer", description="VLAN ID (1-4094)"),
    ToolParam("dhcpEnabled", type="boolean", description="Enable DHCP server"),
    ToolParam("dhcpStart", description="DHCP range start IP"),
    ToolParam("dhcpStop", description="DHCP range end IP"),
    ToolParam("gateway", description="Gateway IP address"),
    ToolParam("subnet", description="Subnet in CIDR notation (e.g., 192.168.1.0/24)"),
    ToolParam("domainName", description="Domain name for the network"),
    ToolParam("internetAccessEnabled", type="boolean", description="Allow internet access"),
)

TOOLS = [
    list_tool(
        "unifi_list_networks",
        "List all networks at a site",
        _COLLECTION,
        category="networks",
    ),
    get_tool(
        "unifi_get_network",
        "Get a specific network by ID",
        _ITEM,
        NETWORK_ID,
        category="networks",
    ),
    ToolDef(
        name="unifi_create_network",
        description="Create a new network",
        method="POST",
        path=_COLLECTION,
        params=(SITE_ID,) + require(FIELDS, ("name", "purpose")),
        body=names(FIELDS),
        defaults={"management": "GATEWAY"},
        category="networks",
    ),
    ToolDef(
        name="unifi_update_network",
        description="Update an existing network. Only the fields supplied are changed.",
        method="PUT",
        path=_ITEM,
        params=(SITE_ID, NETWORK_ID) + optional(FIELDS),
        body=names(FIELDS),
        category="networks",
    ),
    delete_tool(
        "unifi_delete_network",
        "Delete a network",
        _ITEM,
        NETWORK_ID,
        extra=(
            ToolParam("cascade", type="boolean", required=False,
                      description="Also delete resources that reference this network"),
            ToolParam("force", type="boolean", required=False,
                      description="Delete even if the network is in use"),
        ),
        category="networks",
    ),
]
