"""Hotspot vouchers."""
from ..registry import ToolDef, ToolParam
from ._common import SITE_ID, USAGE_QUOTA, delete_tool, get_tool, list_tool, names, resource_id

VOUCHER_ID = resource_id("voucherId", "Voucher ID")
_COLLECTION = "/v1/sites/{siteId}/hotspotVouchers"
_ITEM = _COLLECTION + "/{voucherId}"

CREATE_FIELDS = (
    ToolParam("count", type="integer", description="Number of vouchers to create"),
    ToolParam("duration", type="integer", description="Duration in minutes"),
    USAGE_QUOTA,
    ToolParam("multiUse", type="boolean", required=False, description="Allow multiple uses"),
    ToolParam("maxUses", type="integer", required=False,
              description="Maximum number of uses (if multiUse is true)"),
    ToolParam("note", required=False, description="Note/description for the vouchers"),
)

TOOLS = [
    list_tool(
        "unifi_list_vouchers",
        "List all hotspot vouchers at a site",
        _COLLECTION,
        cap=1000,
        category="vouchers",
    ),
    get_tool(
        "unifi_get_voucher",
        "Get a specific hotspot voucher by ID",
        _ITEM,
        VOUCHER_ID,
        category="vouchers",
    ),
    ToolDef(
        name="unifi_create_voucher",
        description="Create hotspot vouchers",
        method="POST",
        path=_COLLECTION,
        params=(SITE_ID,) + CREATE_FIELDS,
        body=names(CREATE_FIELDS),
        category="vouchers",
    ),
    ToolDef(
        name="unifi_update_voucher",
        description="Update a hotspot voucher",
        method="PUT",
        path=_ITEM,
        params=(
            SITE_ID,
            VOUCHER_ID,
            ToolParam("note", required=False, description="Note/description for the voucher"),
        ),
        body=("note",),
        category="vouchers",
    ),
    delete_tool(
        "unifi_delete_voucher",
        "Delete a hotspot voucher",
        _ITEM,
        VOUCHER_ID,
        category="vouchers",
    ),
    ToolDef(
        name="unifi_bulk_delete_vouchers",
        description="Delete every hotspot voucher matching a filter expression",
        method="DELETE",
        path=_COLLECTION,
        params=(
            SITE_ID,
            ToolParam("filter", description="Filter expression selecting the vouchers to delete, "
                                            "e.g. expired.eq(true)"),
        ),
        query=("filter",),
        category="vouchers",
    ),
]
