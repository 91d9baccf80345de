#!/usr/bin/env python3
"""
Feature Discussion MCP Server

Guides a developer through a fixed interview about a proposed feature and
records each answer into a typed feature record.

This server exposes:
- Tools to begin a discussion, answer its questions and inspect it
- Resources listing and reading recorded discussions as JSON
"""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv
from mcp.server.fastmcp import Context, FastMCP

from feature_discussion.engine import InterviewEngine, utc_now
from feature_discussion.errors import FeatureDiscussionError
from feature_discussion.registry import DiscussionRegistry
from feature_discussion.settings import load_config

# Load environment variables
load_dotenv()

CONFIG = load_config()

# Configure logging
logging.basicConfig(level=CONFIG["server"]["log_level"])
logger = logging.getLogger("feature-discussion-server")


# =============================================================================
# Lifespan
# =============================================================================

@dataclass
class AppContext:
    engine: InterviewEngine


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Own one registry per server run; it is dropped on shutdown."""
    registry = DiscussionRegistry(clock=utc_now, id_prefix=CONFIG["discussion"]["id_prefix"])
    engine = InterviewEngine(registry=registry, clock=utc_now)
    logger.info("Feature discussion registry ready")
    try:
        yield AppContext(engine=engine)
    finally:
        logger.info(f"Discarding {len(engine.registry)} feature discussions")


def get_engine(ctx: Context) -> InterviewEngine:
    return ctx.request_context.lifespan_context.engine


# =============================================================================
# MCP Server Setup
# =============================================================================

mcp = FastMCP(
    name=CONFIG["server"]["name"],
    lifespan=app_lifespan,
)


def feature_uri(feature_id: str) -> str:
    return f"feature:///{feature_id}"


def render_discussion(engine: InterviewEngine, feature_id: str) -> str:
    """JSON text for one discussion: the record with its context attached."""
    view = engine.read_discussion(feature_id)
    return json.dumps({**view["record"], "context": view["context"]}, indent=2)


def render_discussion_index(engine: InterviewEngine) -> str:
    return json.dumps(
        [
            {
                "uri": feature_uri(item["id"]),
                "mimeType": "application/json",
                "name": item["title"],
                "description": item["description"],
            }
            for item in engine.list_discussions()
        ],
        indent=2,
    )


# =============================================================================
# Tools
# =============================================================================

@mcp.tool()
async def begin_feature_discussion(title: str, ctx: Context) -> dict[str, Any]:
    """
    Start a new feature discussion.

    Args:
        title: Title or name of the feature

    Returns:
        The new feature ID and the first question to answer
    """
    started = get_engine(ctx).begin_discussion(title)
    return {
        "success": True,
        "feature_id": started.feature_id,
        "title": started.title,
        "question": started.first_prompt,
        "progress": started.progress,
        "message": started.message,
    }


@mcp.tool()
async def provide_feature_input(feature_id: str, response: str, ctx: Context) -> dict[str, Any]:
    """
    Provide information for the current feature discussion prompt.

    List-style questions (target users, requirements, success criteria,
    risks) take one item per line.

    Args:
        feature_id: ID of the feature being discussed
        response: Your response to the current prompt

    Returns:
        The next question, or confirmation that the feature is fully documented
    """
    try:
        recorded = get_engine(ctx).submit_answer(feature_id, response)
    except FeatureDiscussionError as e:
        logger.warning(f"provide_feature_input rejected: {e.message}")
        return e.to_dict()

    return {
        "success": True,
        "feature_id": recorded.feature_id,
        "status": recorded.status.value,
        "complete": recorded.complete,
        "next_question": recorded.next_prompt,
        "progress": recorded.progress,
        "message": recorded.message,
    }


@mcp.tool()
async def list_feature_discussions(ctx: Context) -> dict[str, Any]:
    """
    List all feature discussions started in this server run.

    Returns:
        Discussions in creation order with their title and description
    """
    discussions = get_engine(ctx).list_discussions()
    return {
        "success": True,
        "count": len(discussions),
        "discussions": discussions,
    }


@mcp.tool()
async def get_feature_discussion(feature_id: str, ctx: Context) -> dict[str, Any]:
    """
    Get the recorded answers and conversation history of a discussion.

    Args:
        feature_id: ID of the feature discussion

    Returns:
        The feature record and its conversation context
    """
    try:
        view = get_engine(ctx).read_discussion(feature_id)
    except FeatureDiscussionError as e:
        logger.warning(f"get_feature_discussion rejected: {e.message}")
        return e.to_dict()

    return {"success": True, **view}


# =============================================================================
# Resources
# =============================================================================

@mcp.resource("feature://discussions", mime_type="application/json")
def discussion_index() -> str:
    """Every feature discussion with its resource URI."""
    return render_discussion_index(get_engine(mcp.get_context()))


@mcp.resource("feature:///{feature_id}", mime_type="application/json")
def feature_discussion(feature_id: str) -> str:
    """A feature discussion record together with its conversation history."""
    return render_discussion(get_engine(mcp.get_context()), feature_id)


# =============================================================================
# Entry Point
# =============================================================================

def main():
    """Run the MCP server."""
    logger.info("Starting Feature Discussion MCP Server...")
    mcp.run()


if __name__ == "__main__":
    main()
