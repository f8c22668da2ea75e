"""Firewall zones and ACL rules."""
from ..registry import ToolDef, ToolParam
from ._common import SITE_ID, delete_tool, get_tool, list_tool, names, optional, require, resource_id

ZONE_ID = resource_id("zoneId", "Firewall zone ID")
RULE_ID = resource_id("ruleId", "ACL rule ID")
_ZONES = "/v1/sites/{siteId}/firewallZones"
_ZONE = _ZONES + "/{zoneId}"
_RULES = "/v1/sites/{siteId}/firewallRulesAcl"
_RULE = _RULES + "/{ruleId}"

ZONE_FIELDS = (
    ToolParam("name", description="Zone name"),
    ToolParam("networkIds", type="array", items={"type": "string"},
              description="Network IDs to include in this zone"),
)

RULE_FIELDS = (
    ToolParam("name", description="Rule name"),
    ToolParam("type", enum=("IPV4", "MAC"), description="Rule type (default IPV4 on create)"),
    ToolParam("enabled", type="boolean", description="Enable the rule"),
    ToolParam("action", enum=("ALLOW", "DENY", "REJECT"), description="Rule action"),
    ToolParam("index", type="integer", description="Rule priority index (lower = higher priority)"),
    ToolParam("protocol", enum=("all", "tcp", "udp", "tcp_udp", "icmp"), description="Protocol"),
    ToolParam("sourceZoneId", description="Source firewall zone ID"),
    ToolParam("destinationZoneId", description="Destination firewall zone ID"),
    ToolParam("sourceAddress", description="Source IP/CIDR"),
    ToolParam("destinationAddress", description="Destination IP/CIDR"),
    ToolParam("sourcePort", description="Source port or range (e.g., '80' or '80-443')"),
    ToolParam("destinationPort", description="Destination port or range"),
    ToolParam("description", description="Rule description"),
    ToolParam(
        "schedule", type="object", description="Time-based schedule",
        properties={
            "mode": {"type": "string", "enum": ["always", "custom"]},
            "days": {"type": "array", "items": {"type": "string"}},
            "timeRanges": {"type": "array", "items": {"type": "object"}},
        },
    ),
)

# Rule type and source/destination zones are fixed once a rule exists
_RULE_UPDATE_FIELDS = tuple(p for p in RULE_FIELDS if p.name not in ("sourceZoneId", "destinationZoneId", "type"))

TOOLS = [
    list_tool(
        "unifi_list_firewall_zones",
        "List all firewall zones at a site",
        _ZONES,
        category="firewall",
    ),
    get_tool(
        "unifi_get_firewall_zone",
        "Get a specific firewall zone by ID",
        _ZONE,
        ZONE_ID,
        category="firewall",
    ),
    ToolDef(
        name="unifi_create_firewall_zone",
        description="Create a new firewall zone",
        method="POST",
        path=_ZONES,
        params=(SITE_ID,) + require(ZONE_FIELDS, ("name",)),
        body=names(ZONE_FIELDS),
        category="firewall",
    ),
    ToolDef(
        name="unifi_update_firewall_zone",
        description="Update a firewall zone. Only the fields supplied are changed.",
        method="PUT",
        path=_ZONE,
        params=(SITE_ID, ZONE_ID) + optional(ZONE_FIELDS),
        body=names(ZONE_FIELDS),
        category="firewall",
    ),
    delete_tool(
        "unifi_delete_firewall_zone",
        "Delete a firewall zone",
        _ZONE,
        ZONE_ID,
        category="firewall",
    ),
    list_tool(
        "unifi_list_acl_rules",
        "List all ACL (firewall) rules at a site",
        _RULES,
        category="acl",
    ),
    get_tool(
        "unifi_get_acl_rule",
        "Get a specific ACL rule by ID",
        _RULE,
        RULE_ID,
        category="acl",
    ),
    ToolDef(
        name="unifi_create_acl_rule",
        description="Create a new ACL (firewall) rule",
        method="POST",
        path=_RULES,
        params=(SITE_ID,) + require(RULE_FIELDS, ("name", "action", "sourceZoneId", "destinationZoneId")),
        body=names(RULE_FIELDS),
        defaults={"type": "IPV4"},
        category="acl",
    ),
    ToolDef(
        name="unifi_update_acl_rule",
        description="Update an ACL rule. Only the fields supplied are changed.",
        method="PUT",
        path=_RULE,
        params=(SITE_ID, RULE_ID) + optional(_RULE_UPDATE_FIELDS),
        body=names(_RULE_UPDATE_FIELDS),
        category="acl",
    ),
    delete_tool(
        "unifi_delete_acl_rule",
        "Delete an ACL rule",
        _RULE,
        RULE_ID,
        category="acl",
    ),
    ToolDef(
        name="unifi_batch_update_acl_rules",
        description="Batch update ACL rules (reorder, enable/disable multiple rules)",
        method="POST",
        path=_RULES + "/batchUpdate",
        params=(
            SITE_ID,
            ToolParam(
                "rules", type="array", description="Array of rule updates",
                items={
                    "type": "object",
                    "properties": {
                        "id": {"type": "string", "description": "Rule ID"},
                        "index": {"type": "number", "description": "New index"},
                        "enabled": {"type": "boolean", "description": "Enabled state"},
                    },
                },
            ),
        ),
        body=("rules",),
        category="acl",
    ),
]
