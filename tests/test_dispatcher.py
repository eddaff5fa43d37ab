"""Tests for the dispatcher: the full validate → build → call → format path."""
import asyncio
from unittest.mock import Mock, patch

import pytest
import requests

from core.catalog import list_tools
from core.models import Failure, NetworkError, Success, ToolResult, UpstreamRequest
from core.upstream import UpstreamClient
from tools.dispatcher import Dispatcher

from conftest import StubClient


@pytest.mark.asyncio
@pytest.mark.parametrize("tool", list_tools(), ids=lambda t: t.name)
async def test_missing_required_makes_no_network_call(dispatcher, stub_client, tool):
    first = next(p.name for p in tool.parameters if p.required)

    result = await dispatcher.dispatch(tool.name, {})

    assert result == ToolResult(f"Error: {first} is required")
    assert stub_client.sent == []


@pytest.mark.asyncio
async def test_action_requirement_makes_no_network_call(dispatcher, stub_client):
    result = await dispatcher.dispatch("manageSongRequest", {"action": "create", "streamerName": "alice"})

    assert result.text == "Error: songTitle is required for creating a request"
    assert not result.is_error
    assert stub_client.sent == []


@pytest.mark.asyncio
async def test_unknown_tool(dispatcher, stub_client):
    result = await dispatcher.dispatch("deleteEverything", {"streamerName": "alice"})

    assert result == ToolResult("Error: Unknown tool: deleteEverything")
    assert stub_client.sent == []


@pytest.mark.asyncio
async def test_get_queue_defaults(dispatcher, stub_client):
    stub_client.outcome = Success(200, [])

    await dispatcher.dispatch("getQueue", {"streamerName": "alice"})

    assert stub_client.sent == [
        UpstreamRequest("GET", "streamers/alice/queue", query={"limit": 50, "offset": 0})
    ]


@pytest.mark.asyncio
async def test_create_song_request(dispatcher, stub_client):
    stub_client.outcome = Success(201, {"id": "r1", "songTitle": "Song"})

    result = await dispatcher.dispatch(
        "manageSongRequest", {"action": "create", "streamerName": "a/b", "songTitle": "Song"}
    )

    assert stub_client.sent == [
        UpstreamRequest("POST", "streamers/a%2Fb/requests", body={"songTitle": "Song"})
    ]
    assert result.text.startswith("Successfully created request:")


@pytest.mark.asyncio
async def test_attribute_list(dispatcher, stub_client):
    await dispatcher.dispatch("manageSongAttributes", {"action": "list", "songId": "9", "attributeName": "x"})

    assert stub_client.sent == [UpstreamRequest("GET", "attributes")]


@pytest.mark.asyncio
async def test_upstream_404_is_not_flagged(config):
    client = StubClient(Failure(404, "Not Found"))

    result = await Dispatcher(config, client=client).dispatch("getStreamerByName", {"streamerName": "ghost"})

    assert "404" in result.text
    assert result.is_error is False


@pytest.mark.asyncio
async def test_network_error_is_flagged(config):
    client = StubClient(NetworkError("connection refused"))

    result = await Dispatcher(config, client=client).dispatch("getStreamerByName", {"streamerName": "alice"})

    assert result == ToolResult("Error: connection refused", is_error=True)


@pytest.mark.asyncio
async def test_unexpected_exception_is_caught_and_flagged(config):
    client = StubClient(RuntimeError("boom"))

    result = await Dispatcher(config, client=client).dispatch("getSong", {"songId": "1"})

    assert result == ToolResult("Error: boom", is_error=True)


@pytest.mark.asyncio
async def test_real_client_connection_failure(config):
    dispatcher = Dispatcher(config, client=UpstreamClient(config.api_base_url))

    with patch("core.upstream.requests.request",
               side_effect=requests.ConnectionError("Failed to establish a new connection")):
        result = await dispatcher.dispatch("getStreamerByName", {"streamerName": "alice"})

    assert result.is_error is True
    assert result.text.startswith("Error: Failed to establish")


@pytest.mark.asyncio
async def test_real_client_404(config):
    response = Mock(status_code=404, reason="Not Found", ok=False, content=b"")
    dispatcher = Dispatcher(config, client=UpstreamClient(config.api_base_url))

    with patch("core.upstream.requests.request", return_value=response) as mock_request:
        result = await dispatcher.dispatch("getStreamerByName", {"streamerName": "a/b"})

    assert result == ToolResult("Error fetching streamer data: 404 Not Found")
    assert mock_request.call_args.args[1] == "https://api.example.test/v1/streamers/a%2Fb"


@pytest.mark.asyncio
async def test_real_client_undecodable_success_is_flagged(config):
    response = Mock(status_code=200, reason="OK", ok=True, content=b"<html>")
    response.json.side_effect = ValueError("Expecting value")
    dispatcher = Dispatcher(config, client=UpstreamClient(config.api_base_url))

    with patch("core.upstream.requests.request", return_value=response):
        result = await dispatcher.dispatch("getSong", {"songId": "1"})

    assert result.is_error is True
    assert result.text.startswith("Error: Invalid JSON from GET songs/1")


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_interfere(dispatcher, stub_client):
    stub_client.outcome = Success(200, {"name": "alice"})

    first, second = await asyncio.gather(
        dispatcher.dispatch("getStreamerByName", {"streamerName": "alice"}),
        dispatcher.dispatch("getStreamerByName", {"streamerName": "alice"}),
    )

    assert first == second
    assert len(stub_client.sent) == 2


def test_list_tools_is_the_catalog(dispatcher):
    assert dispatcher.list_tools() == list_tools()


def test_default_client_uses_config(config):
    dispatcher = Dispatcher(config)
    assert dispatcher.client.base_url == config.api_base_url
    assert dispatcher.client.timeout is None
