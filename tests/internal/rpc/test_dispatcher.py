"""Tests for Dispatcher."""

import httpx
import pytest
import respx

from monerod_rpc._internal.rpc.dispatcher import Dispatcher
from monerod_rpc._internal.rpc.request import RpcRequest
from monerod_rpc.config import ClientConfig
from monerod_rpc.exceptions import MonerodDecodeError, MonerodTransportError

BASE_URL = "http://node.example:18089"
JSON_RPC_URL = f"{BASE_URL}/json_rpc"


def _dispatcher(**overrides) -> Dispatcher:
    return Dispatcher(ClientConfig(base_url=BASE_URL, **overrides))


class TestDispatcherSend:
    """Tests for successful sends."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_decodes_json_body(self):
        """Should return the parsed body with numbers kept as numbers."""
        respx.post(JSON_RPC_URL).mock(
            return_value=httpx.Response(200, text='{"status":"OK","count":9933}')
        )

        result = await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert result == {"status": "OK", "count": 9933}
        assert isinstance(result["count"], int)

    @pytest.mark.asyncio
    @respx.mock
    async def test_raw_body_when_decode_disabled(self):
        """Should return the exact body text when decoding is off."""
        raw = '{ "status": "OK",  "count": 9933 }\n'
        respx.post(JSON_RPC_URL).mock(return_value=httpx.Response(200, text=raw))

        result = await _dispatcher(decode_json=False).send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert result == raw

    @pytest.mark.asyncio
    @respx.mock
    async def test_raw_body_not_json(self):
        """Raw mode should not care whether the body is JSON."""
        respx.post(f"{BASE_URL}/getheight").mock(return_value=httpx.Response(200, text="not json"))

        result = await _dispatcher(decode_json=False).send(RpcRequest(url=f"{BASE_URL}/getheight"))

        assert result == "not json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_posts_body_once(self):
        """Should send exactly one POST with the request body."""
        route = respx.post(JSON_RPC_URL).mock(return_value=httpx.Response(200, json={}))

        await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body='{"a":1}'))

        assert route.call_count == 1
        request = route.calls.last.request
        assert request.method == "POST"
        assert request.content == b'{"a":1}'
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"].startswith("monerod-rpc/")

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_body(self):
        """Should send no content when the request has no body."""
        route = respx.post(f"{BASE_URL}/getheight").mock(
            return_value=httpx.Response(200, json={"height": 993163, "status": "OK"})
        )

        result = await _dispatcher().send(RpcRequest(url=f"{BASE_URL}/getheight"))

        assert result["height"] == 993163
        assert route.calls.last.request.content == b""


class TestDispatcherErrors:
    """Tests for failure handling."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error(self):
        """Should raise MonerodTransportError carrying the cause."""
        cause = httpx.ConnectError("Connection refused")
        respx.post(JSON_RPC_URL).mock(side_effect=cause)

        with pytest.raises(MonerodTransportError) as exc_info:
            await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout(self):
        """Should raise MonerodTransportError on timeout."""
        respx.post(JSON_RPC_URL).mock(side_effect=httpx.TimeoutException("timeout"))

        with pytest.raises(MonerodTransportError) as exc_info:
            await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert isinstance(exc_info.value.cause, httpx.TimeoutException)

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_status(self):
        """Should raise MonerodTransportError with the status code on non-2xx."""
        respx.post(JSON_RPC_URL).mock(return_value=httpx.Response(500, text="oops"))

        with pytest.raises(MonerodTransportError) as exc_info:
            await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_invalid_json(self):
        """Should raise MonerodDecodeError when the body is not JSON."""
        respx.post(JSON_RPC_URL).mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(MonerodDecodeError) as exc_info:
            await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert exc_info.value.body == "<html>"


class TestDispatcherDebug:
    """Tests for debug logging."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_debug_writes_to_stderr(self, capsys):
        """Should log to stderr when debug is enabled."""
        respx.post(JSON_RPC_URL).mock(return_value=httpx.Response(200, json={}))

        await _dispatcher(debug=True).send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert "[monerod-rpc] POST" in capsys.readouterr().err

    @pytest.mark.asyncio
    @respx.mock
    async def test_silent_by_default(self, capsys):
        """Should not log anything when debug is disabled."""
        respx.post(JSON_RPC_URL).mock(return_value=httpx.Response(200, json={}))

        await _dispatcher().send(RpcRequest(url=JSON_RPC_URL, body="{}"))

        assert capsys.readouterr().err == ""
