"""Read-only supporting resources: WANs, VPNs, RADIUS, logs, DPI and countries."""
from ._common import list_tool

TOOLS = [
    list_tool("unifi_list_wans", "List all WAN interfaces at a site",
              "/v1/sites/{siteId}/wans", category="supporting"),
    list_tool("unifi_list_vpns", "List all VPN configurations at a site",
              "/v1/sites/{siteId}/vpns", category="supporting"),
    list_tool("unifi_list_radius_profiles", "List all RADIUS profiles at a site",
              "/v1/sites/{siteId}/radiusProfiles", category="supporting"),
    list_tool("unifi_get_system_log", "Get system log entries for a site",
              "/v1/sites/{siteId}/systemLog", cap=1000, with_filter=False, category="supporting"),
    list_tool("unifi_list_dpi_categories", "List all DPI (Deep Packet Inspection) categories",
              "/v1/dpiCategories", scoped=False, category="supporting"),
    list_tool("unifi_list_dpi_applications", "List all DPI applications for traffic identification",
              "/v1/dpiApplications", scoped=False, category="supporting"),
    list_tool("unifi_list_countries", "List all countries/regions for geo-based rules",
              "/v1/countries", scoped=False, category="supporting"),
]
