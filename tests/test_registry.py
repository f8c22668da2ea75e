"""Tests for unifi_mcp/tools/registry.py and the catalogue — definitions, lookup, schemas."""
import pytest

from unifi_mcp.exceptions import ToolDefinitionError, UnknownToolError
from unifi_mcp.tools import CATALOG, tool_registry
from unifi_mcp.tools.registry import ToolDef, ToolParam, ToolRegistry


class TestCatalogInvariants:
    def test_names_unique(self):
        names = [t.name for t in CATALOG]
        assert len(names) == len(set(names))
        assert len(tool_registry) == len(CATALOG)

    def test_required_params_are_declared(self):
        for tool in CATALOG:
            declared = {p.name for p in tool.params}
            assert set(tool.required_params) <= declared, tool.name

    def test_path_fields_are_required(self):
        for tool in CATALOG:
            for field_name in tool.path_fields:
                assert field_name in tool.required_params, tool.name

    def test_body_only_on_post_put(self):
        for tool in CATALOG:
            if tool.has_body:
                assert tool.method in ("POST", "PUT"), tool.name
            if tool.method in ("GET", "DELETE"):
                assert not tool.body and not tool.defaults and tool.action is None

    def test_updates_inject_no_defaults(self):
        for tool in CATALOG:
            if tool.method == "PUT":
                assert dict(tool.defaults) == {}, tool.name

    def test_all_paths_versioned(self):
        for tool in CATALOG:
            assert tool.path.startswith("/v1/"), tool.name

    def test_all_tools_prefixed(self):
        assert all(t.name.startswith("unifi_") for t in CATALOG)

    def test_expected_tools_present(self):
        for name in (
            "unifi_get_info",
            "unifi_list_sites",
            "unifi_list_networks",
            "unifi_delete_network",
            "unifi_bulk_delete_vouchers",
            "unifi_restart_device",
            "unifi_power_cycle_port",
            "unifi_authorize_guest",
            "unifi_batch_update_acl_rules",
            "unifi_list_countries",
        ):
            assert name in tool_registry


class TestLookup:
    def test_lookup_known(self):
        tool = tool_registry.lookup("unifi_list_networks")
        assert tool.method == "GET"
        assert tool.path == "/v1/sites/{siteId}/networks"

    def test_lookup_unknown(self):
        with pytest.raises(UnknownToolError) as exc_info:
            tool_registry.lookup("unifi_make_coffee")
        assert str(exc_info.value) == "Unknown tool: unifi_make_coffee"

    def test_get_unknown_returns_none(self):
        assert tool_registry.get("nope") is None

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            tool_registry.tools["x"] = None

    def test_defaults_are_read_only(self):
        tool = tool_registry.lookup("unifi_create_acl_rule")
        with pytest.raises(TypeError):
            tool.defaults["type"] = "MAC"

    def test_by_category(self):
        groups = tool_registry.by_category()
        assert "unifi_list_networks" in groups["networks"]
        assert "unifi_create_acl_rule" in groups["acl"]


class TestInputSchema:
    def test_required_list(self):
        schema = tool_registry.lookup("unifi_create_network").input_schema()
        assert schema["type"] == "object"
        assert schema["required"] == ["siteId", "name", "purpose"]

    def test_enum_rendered(self):
        schema = tool_registry.lookup("unifi_create_wifi").input_schema()
        assert schema["properties"]["security"]["enum"] == ["open", "wpa2", "wpa3", "wpa2wpa3"]

    def test_array_items_rendered(self):
        schema = tool_registry.lookup("unifi_create_firewall_zone").input_schema()
        assert schema["properties"]["networkIds"] == {
            "type": "array",
            "description": "Network IDs to include in this zone",
            "items": {"type": "string"},
        }

    def test_no_params(self):
        schema = tool_registry.lookup("unifi_get_info").input_schema()
        assert schema == {"type": "object", "properties": {}, "required": []}

    def test_limit_cap_documented(self):
        schema = tool_registry.lookup("unifi_list_vouchers").input_schema()
        assert "1000" in schema["properties"]["limit"]["description"]

    def test_nested_item_shape_not_shared(self):
        tool = tool_registry.lookup("unifi_create_traffic_matching_list")
        schema = tool.input_schema()
        schema["properties"]["entries"]["items"]["properties"]["address"]["type"] = "integer"
        schema["properties"]["entries"]["items"]["properties"].pop("address")
        fresh = tool.input_schema()
        assert fresh["properties"]["entries"]["items"]["properties"]["address"]["type"] == "string"
        other = tool_registry.lookup("unifi_update_traffic_matching_list").input_schema()
        assert "address" in other["properties"]["entries"]["items"]["properties"]

    def test_nested_object_members_not_shared(self):
        schema = tool_registry.lookup("unifi_create_voucher").input_schema()
        schema["properties"]["usageQuota"]["properties"]["dataTx"]["type"] = "string"
        fresh = tool_registry.lookup("unifi_create_voucher").input_schema()
        assert fresh["properties"]["usageQuota"]["properties"]["dataTx"]["type"] == "number"


class TestDefinitionValidation:
    def test_duplicate_tool_rejected(self):
        tool = ToolDef(name="t", description="", method="GET", path="/v1/info")
        with pytest.raises(ToolDefinitionError):
            ToolRegistry([tool, tool])

    def test_path_field_must_be_required(self):
        with pytest.raises(ToolDefinitionError):
            ToolDef(
                name="t", description="", method="GET", path="/v1/sites/{siteId}",
                params=(ToolParam("siteId", required=False),),
            )

    def test_body_on_get_rejected(self):
        with pytest.raises(ToolDefinitionError):
            ToolDef(
                name="t", description="", method="GET", path="/v1/info",
                params=(ToolParam("name", required=False),), body=("name",),
            )

    def test_undeclared_query_key_rejected(self):
        with pytest.raises(ToolDefinitionError):
            ToolDef(name="t", description="", method="GET", path="/v1/info", query=("limit",))

    def test_unknown_method_rejected(self):
        with pytest.raises(ToolDefinitionError):
            ToolDef(name="t", description="", method="PATCH", path="/v1/info")

    def test_unknown_param_type_rejected(self):
        with pytest.raises(ToolDefinitionError):
            ToolDef(name="t", description="", method="GET", path="/v1/info",
                    params=(ToolParam("x", type="date", required=False),))
