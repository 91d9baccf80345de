"""
Feature Discussion Server Tests

Tests for tool registration, the lifespan-owned engine and the JSON
resource rendering.
"""
import json

import pytest

from feature_discussion.engine import InterviewEngine
from feature_discussion.errors import DiscussionNotFoundError


class TestRegistration:

    @pytest.mark.asyncio
    async def test_tools_registered(self):
        from feature_discussion.server import mcp

        tools = await mcp.list_tools()
        names = {tool.name for tool in tools}

        assert {
            "begin_feature_discussion",
            "provide_feature_input",
            "list_feature_discussions",
            "get_feature_discussion",
        } <= names

    @pytest.mark.asyncio
    async def test_context_not_exposed_as_argument(self):
        from feature_discussion.server import mcp

        tools = {tool.name: tool for tool in await mcp.list_tools()}
        schema = tools["provide_feature_input"].inputSchema

        assert set(schema["required"]) == {"feature_id", "response"}
        assert "ctx" not in schema["properties"]


class TestLifespan:

    @pytest.mark.asyncio
    async def test_lifespan_provides_fresh_engine(self):
        from feature_discussion.server import app_lifespan, mcp

        async with app_lifespan(mcp) as first:
            first.engine.begin_discussion("x")
            assert len(first.engine.registry) == 1

        async with app_lifespan(mcp) as second:
            assert isinstance(second.engine, InterviewEngine)
            assert len(second.engine.registry) == 0


class TestResources:

    def test_render_discussion(self, engine):
        from feature_discussion.server import render_discussion

        engine.begin_discussion("Dark mode")
        engine.submit_answer("f1", "A dark theme")

        payload = json.loads(render_discussion(engine, "f1"))

        assert payload["id"] == "f1"
        assert payload["description"] == "A dark theme"
        assert payload["status"] == "in-discussion"
        assert payload["context"]["conversationHistory"][0]["response"] == "A dark theme"
        assert payload["context"]["relatedFeatures"] == []

    def test_render_unknown_discussion(self, engine):
        from feature_discussion.server import render_discussion

        with pytest.raises(DiscussionNotFoundError):
            render_discussion(engine, "f1")

    def test_render_index(self, engine):
        from feature_discussion.server import render_discussion_index

        engine.begin_discussion("Dark mode")
        engine.begin_discussion("Export")

        index = json.loads(render_discussion_index(engine))

        assert [entry["uri"] for entry in index] == ["feature:///f1", "feature:///f2"]
        assert index[0]["name"] == "Dark mode"
        assert index[0]["mimeType"] == "application/json"


class TestResourcesOverSession:
    """Resources read through a connected MCP client session."""

    @pytest.mark.asyncio
    async def test_read_discussion_resources(self):
        from mcp.shared.memory import create_connected_server_and_client_session
        from pydantic import AnyUrl

        from feature_discussion.server import mcp

        async with create_connected_server_and_client_session(mcp._mcp_server) as client:
            await client.call_tool("begin_feature_discussion", {"title": "Dark mode"})
            await client.call_tool(
                "provide_feature_input", {"feature_id": "f1", "response": "A dark theme"}
            )

            index = await client.read_resource(AnyUrl("feature://discussions"))
            entries = json.loads(index.contents[0].text)
            assert entries == [{
                "uri": "feature:///f1",
                "mimeType": "application/json",
                "name": "Dark mode",
                "description": "A dark theme",
            }]

            detail = await client.read_resource(AnyUrl("feature:///f1"))
            payload = json.loads(detail.contents[0].text)
            assert payload["id"] == "f1"
            assert payload["currentPrompt"] == "business_value"
            assert len(payload["context"]["conversationHistory"]) == 1

    @pytest.mark.asyncio
    async def test_unknown_discussion_resource_fails(self):
        from mcp.shared.exceptions import McpError
        from mcp.shared.memory import create_connected_server_and_client_session
        from pydantic import AnyUrl

        from feature_discussion.server import mcp

        async with create_connected_server_and_client_session(mcp._mcp_server) as client:
            with pytest.raises(McpError):
                await client.read_resource(AnyUrl("feature:///f404"))
