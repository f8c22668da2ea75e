"""Tests for unifi_mcp/client.py — URL, headers and transport failures."""
import json

import httpx
import pytest

from unifi_mcp.client import UnifiClient
from unifi_mcp.config import Settings
from unifi_mcp.exceptions import ToolValidationError, UnifiNetworkError
from unifi_mcp.tools import CompiledRequest


@pytest.fixture
def settings():
    return Settings(base_url="https://console.local/", api_key="secret-key-1234")


def _recording_transport(captured, status=200, body=None):
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)
    return httpx.MockTransport(handler)


class TestSend:
    @pytest.mark.asyncio
    async def test_url_and_headers_for_get(self, settings):
        captured = []
        async with UnifiClient(settings, transport=_recording_transport(captured, body={"data": []})) as client:
            resp = await client.send(CompiledRequest("GET", "/v1/sites/abc/networks", (("limit", "10"),)))
        assert resp.status_code == 200
        req = captured[0]
        assert req.method == "GET"
        assert str(req.url) == "https://console.local/proxy/network/integration/v1/sites/abc/networks?limit=10"
        assert req.headers["Accept"] == "application/json"
        assert req.headers["X-API-KEY"] == "secret-key-1234"
        assert "Content-Type" not in req.headers
        assert req.content == b""

    @pytest.mark.asyncio
    async def test_body_sets_content_type(self, settings):
        captured = []
        async with UnifiClient(settings, transport=_recording_transport(captured, status=201, body={"id": "x"})) as client:
            await client.send(CompiledRequest("POST", "/v1/sites/s/devices/d/actions", body={"action": "RESTART"}))
        req = captured[0]
        assert req.headers["Content-Type"] == "application/json"
        assert json.loads(req.content) == {"action": "RESTART"}

    @pytest.mark.asyncio
    async def test_empty_update_body_still_sent(self, settings):
        captured = []
        async with UnifiClient(settings, transport=_recording_transport(captured)) as client:
            await client.send(CompiledRequest("PUT", "/v1/sites/s/networks/n", body={}))
        req = captured[0]
        assert req.headers["Content-Type"] == "application/json"
        assert json.loads(req.content) == {}

    @pytest.mark.asyncio
    async def test_error_status_returned_not_raised(self, settings):
        captured = []
        async with UnifiClient(settings, transport=_recording_transport(captured, status=404)) as client:
            resp = await client.send(CompiledRequest("GET", "/v1/sites/s/networks/missing"))
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_connect_error_becomes_network_error(self, settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with UnifiClient(settings, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(UnifiNetworkError) as exc_info:
                await client.send(CompiledRequest("GET", "/v1/info"))
        assert "connection refused" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_timeout_becomes_network_error(self, settings):
        def handler(request):
            raise httpx.ReadTimeout("", request=request)

        async with UnifiClient(settings, transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(UnifiNetworkError, match="ReadTimeout"):
                await client.send(CompiledRequest("GET", "/v1/info"))

    @pytest.mark.asyncio
    async def test_each_send_is_one_request(self, settings):
        captured = []
        async with UnifiClient(settings, transport=_recording_transport(captured, status=503)) as client:
            await client.send(CompiledRequest("DELETE", "/v1/sites/s/wifi/w"))
        assert len(captured) == 1

    @pytest.mark.asyncio
    async def test_invalid_target_becomes_validation_error(self, settings):
        captured = []
        async with UnifiClient(settings, transport=_recording_transport(captured)) as client:
            with pytest.raises(ToolValidationError, match="Invalid request URL"):
                await client.send(CompiledRequest("GET", "/v1/sites/a\nb/networks"))
        assert captured == []
