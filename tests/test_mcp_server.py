"""Tests for the FastMCP surface, using FastMCP's in-memory client."""
import pytest
from fastmcp import Client

from core.catalog import list_tools
from core.models import Failure, NetworkError, Success
from tools.dispatcher import Dispatcher
from tools.mcp_server import create_server

from conftest import StubClient


def _server(config, outcome):
    return create_server(config, Dispatcher(config, client=StubClient(outcome)))


@pytest.mark.asyncio
async def test_lists_catalog_in_order(config):
    server = _server(config, Success(200, {}))

    async with Client(server) as client:
        first = await client.list_tools()
        second = await client.list_tools()

    expected = list_tools()
    assert [t.name for t in first] == [d.name for d in expected]
    assert [t.description for t in first] == [d.description for d in expected]
    assert [t.name for t in second] == [t.name for t in first]


@pytest.mark.asyncio
async def test_input_schema_is_published(config):
    server = _server(config, Success(200, {}))

    async with Client(server) as client:
        tools = {t.name: t for t in await client.list_tools()}

    schema = tools["getQueue"].inputSchema
    assert schema["required"] == ["streamerName"]
    assert schema["properties"]["limit"]["default"] == 50


@pytest.mark.asyncio
async def test_call_returns_text_content(config):
    server = _server(config, Success(200, {"name": "alice"}))

    async with Client(server) as client:
        result = await client.call_tool_mcp("getStreamerByName", {"streamerName": "alice"})

    assert not result.isError
    assert result.content[0].type == "text"
    assert '"name": "alice"' in result.content[0].text


@pytest.mark.asyncio
async def test_upstream_failure_is_content(config):
    server = _server(config, Failure(404, "Not Found"))

    async with Client(server) as client:
        result = await client.call_tool_mcp("getStreamerByName", {"streamerName": "ghost"})

    assert not result.isError
    assert result.content[0].text == "Error fetching streamer data: 404 Not Found"


@pytest.mark.asyncio
async def test_network_error_sets_is_error(config):
    server = _server(config, NetworkError("connection refused"))

    async with Client(server) as client:
        result = await client.call_tool_mcp("getStreamerByName", {"streamerName": "alice"})

    assert result.isError
    assert "connection refused" in result.content[0].text


def test_server_name_from_config(config):
    server = _server(config, Success(200, {}))
    assert server.name == config.server_name
