"""
Feature Discussion Test Configuration - Shared Fixtures

Provides a deterministic clock, a fresh engine per test and a stand-in for
the MCP request context used by the server tools.
"""
import pytest
import sys
import os
from types import SimpleNamespace

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))


class TickingClock:
    """Returns a later ISO timestamp on every call."""

    def __init__(self):
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"2026-01-01T00:00:{self.calls:02d}+00:00"


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def engine(clock):
    """Fresh engine with its own registry."""
    from feature_discussion.engine import InterviewEngine
    return InterviewEngine(clock=clock)


@pytest.fixture
def ctx(engine):
    """Minimal request context exposing the lifespan AppContext."""
    from feature_discussion.server import AppContext
    return SimpleNamespace(
        request_context=SimpleNamespace(lifespan_context=AppContext(engine=engine))
    )


@pytest.fixture
def full_answers():
    """One answer per prompt, in script order."""
    return [
        "Let users switch the UI to a dark colour scheme.",
        "Reduces eye strain and is a frequently requested feature.",
        "Night-time users\n  Developers  \n\nAccessibility users",
        "Toggle in settings\nRespect OS preference",
        "Toggle persists across sessions\nNo contrast regressions",
        "CSS custom properties with a theme provider.",
        "Third-party widgets may ignore the theme",
        "Next release, medium priority",
    ]
