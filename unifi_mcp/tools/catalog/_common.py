"""Shared parameter shapes and builders for the catalogue modules."""
from dataclasses import replace
from typing import Iterable, Tuple

from ..registry import ToolDef, ToolParam

SITE_ID = ToolParam("siteId", description="Site ID")

PAGING_KEYS = ("offset", "limit", "filter")

USAGE_QUOTA = ToolParam(
    "usageQuota", type="object", required=False,
    description="Optional usage limits",
    properties={
        "dataTx": {"type": "number", "description": "Upload limit in bytes"},
        "dataRx": {"type": "number", "description": "Download limit in bytes"},
        "dataTotal": {"type": "number", "description": "Total data limit in bytes"},
    },
)


def resource_id(name: str, label: str) -> ToolParam:
    return ToolParam(name, description=label)


def paging(cap: int = 200, with_filter: bool = True) -> Tuple[ToolParam, ...]:
    """Optional offset/limit/filter params; the limit cap is enforced by the API."""
    params = (
        ToolParam("offset", type="integer", required=False,
                  description="Number of records to skip (default 0)"),
        ToolParam("limit", type="integer", required=False,
                  description=f"Maximum number of records to return (max {cap})"),
    )
    if with_filter:
        params += (
            ToolParam("filter", required=False,
                      description="Filter expression, e.g. name.eq('Office') or "
                                  "and(type.eq('UAP'), state.eq('ONLINE'))"),
        )
    return params


def optional(params: Iterable[ToolParam]) -> Tuple[ToolParam, ...]:
    return tuple(replace(p, required=False) for p in params)


def require(params: Iterable[ToolParam], names: Iterable[str]) -> Tuple[ToolParam, ...]:
    """Copy of params with exactly the given names marked required."""
    wanted = set(names)
    return tuple(replace(p, required=p.name in wanted) for p in params)


def names(params: Iterable[ToolParam]) -> Tuple[str, ...]:
    return tuple(p.name for p in params)


def list_tool(name: str, description: str, path: str, *, category: str,
              scoped: bool = True, cap: int = 200, with_filter: bool = True) -> ToolDef:
    """GET on a collection with offset/limit/filter pagination."""
    page = paging(cap, with_filter)
    return ToolDef(
        name=name,
        description=description,
        method="GET",
        path=path,
        params=((SITE_ID,) if scoped else ()) + page,
        query=names(page),
        category=category,
    )


def get_tool(name: str, description: str, path: str, id_param: ToolParam, *, category: str) -> ToolDef:
    return ToolDef(
        name=name,
        description=description,
        method="GET",
        path=path,
        params=(SITE_ID, id_param),
        category=category,
    )


def delete_tool(name: str, description: str, path: str, id_param: ToolParam, *, category: str,
                extra: Tuple[ToolParam, ...] = ()) -> ToolDef:
    """DELETE on a single resource; `extra` params go to the query string."""
    return ToolDef(
        name=name,
        description=description,
        method="DELETE",
        path=path,
        params=(SITE_ID, id_param) + extra,
        query=names(extra),
        category=category,
    )


def action_tool(name: str, description: str, path: str, id_params: Tuple[ToolParam, ...],
                action: str, *, category: str, fields: Tuple[ToolParam, ...] = ()) -> ToolDef:
    """POST to an .../actions endpoint carrying an action discriminator."""
    return ToolDef(
        name=name,
        description=description,
        method="POST",
        path=path,
        params=(SITE_ID,) + id_params + fields,
        body=names(fields),
        action=action,
        category=category,
    )
