"""The fixed tool catalogue, one module per UniFi resource family."""
from . import info, devices, clients, networks, wifi, vouchers, firewall, traffic_lists, supporting

CATALOG = tuple(
    info.TOOLS
    + devices.TOOLS
    + clients.TOOLS
    + networks.TOOLS
    + wifi.TOOLS
    + vouchers.TOOLS
    + firewall.TOOLS
    + traffic_lists.TOOLS
    + supporting.TOOLS
)
