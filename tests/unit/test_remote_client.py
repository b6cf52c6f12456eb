"""Unit tests for the remote backend client."""

import json

import httpx
import pytest

from advisor_portal.core.exceptions import RemoteUnavailableError
from advisor_portal.remote_client import RemoteClient


def client_for(handler) -> RemoteClient:
    return RemoteClient("https://remote.test/", transport=httpx.MockTransport(handler))


async def test_sends_json_and_bearer_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json={"ok": True})

    response = await client_for(handler).request(
        "POST", "/send_message", token="abc", json={"message": "hi"}
    )

    request = seen["request"]
    assert str(request.url) == "https://remote.test/send_message"
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Authorization"] == "Bearer abc"
    assert json.loads(request.content) == {"message": "hi"}
    assert response.ok
    assert response.body == {"ok": True}


async def test_omits_authorization_without_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json=[])

    await client_for(handler).request("GET", "/questions/7")

    assert "Authorization" not in seen["request"].headers


async def test_passes_query_params():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["request"] = request
        return httpx.Response(200, json={})

    await client_for(handler).request("DELETE", "/delete_user/3", params={"advisor_id": 7})

    assert seen["request"].url.params["advisor_id"] == "7"


async def test_error_status_is_returned_not_raised():
    """Test that remote rejections are data, not exceptions."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"detail": "bad step"})

    response = await client_for(handler).request("PUT", "/questions/1", json={})

    assert not response.ok
    assert response.status_code == 422
    assert response.body == {"detail": "bad step"}


async def test_empty_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    response = await client_for(handler).request("DELETE", "/questions/1")

    assert response.status_code == 204
    assert response.body is None


async def test_network_failure_raises_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteUnavailableError) as exc_info:
        await client_for(handler).request("GET", "/users/7")

    assert exc_info.value.status_code == 500


async def test_non_json_body_raises_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    with pytest.raises(RemoteUnavailableError):
        await client_for(handler).request("GET", "/users/7")
