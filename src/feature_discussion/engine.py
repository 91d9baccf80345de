#!/usr/bin/env python3
"""
Interview Engine - Core logic for feature discussions

Walks a discussion through the fixed prompt script:
- begin_discussion: registers a new discussion and returns the first question
- submit_answer: writes an answer into the current slot and advances the cursor
- read_discussion / list_discussions: read-side views for the transport
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from feature_discussion.errors import InterviewCompleteError, InvalidStateError
from feature_discussion.helpers.fields import apply_answer
from feature_discussion.helpers.prompts import (
    COMPLETION_MESSAGE,
    FEATURE_DISCUSSION_PROMPTS,
    format_progress,
    get_prompt_index,
)
from feature_discussion.models import ConversationEntry, DiscussionStatus
from feature_discussion.registry import DiscussionRegistry

logger = logging.getLogger("feature-discussion-engine")


def utc_now() -> str:
    """Current time as an ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class DiscussionStarted:
    feature_id: str
    title: str
    first_prompt: str
    progress: str

    @property
    def message(self) -> str:
        return (
            f"Feature discussion started for: {self.title}\n\n"
            f"Feature ID: {self.feature_id}\n\n"
            f"First question:\n{self.first_prompt}"
        )


@dataclass(frozen=True)
class AnswerRecorded:
    feature_id: str
    status: DiscussionStatus
    next_prompt: Optional[str]
    progress: Optional[str]

    @property
    def complete(self) -> bool:
        return self.next_prompt is None

    @property
    def message(self) -> str:
        if self.next_prompt is None:
            return f"Response recorded. \n\n{COMPLETION_MESSAGE}"
        return f"Response recorded. \n\nNext question:\n{self.next_prompt}"


class InterviewEngine:
    """
    Drives feature discussions through the prompt script.

    The engine holds the registry for its whole lifetime; callers never get
    to keep references to records or contexts beyond a single call.
    Calls for the same discussion must not run concurrently.
    Pass a registry to control ID allocation (e.g. a custom prefix).
    """

    def __init__(
        self,
        registry: Optional[DiscussionRegistry] = None,
        clock: Callable[[], str] = utc_now,
    ):
        self._clock = clock
        if registry is None:
            registry = DiscussionRegistry(clock=clock)
        self.registry = registry

    def begin_discussion(self, title: str) -> DiscussionStarted:
        feature_id = self.registry.create(title)
        first = FEATURE_DISCUSSION_PROMPTS[0]
        logger.info(f"Started feature discussion {feature_id}: {title}")
        return DiscussionStarted(
            feature_id=feature_id,
            title=title,
            first_prompt=first.message,
            progress=format_progress(0),
        )

    def submit_answer(self, feature_id: str, text: str) -> AnswerRecorded:
        """
        Record an answer to the discussion's current question.

        Steps:
        1. Resolve the prompt the cursor points at
        2. Compute the slot value and history entry
        3. Apply everything at once, advancing the cursor or completing

        Args:
            feature_id: ID returned by begin_discussion
            text: Free-text answer, stored verbatim in the history

        Returns:
            AnswerRecorded with the next question, or completion

        Raises:
            DiscussionNotFoundError: unknown feature_id
            InterviewCompleteError: every question was already answered
            InvalidStateError: cursor does not name a script entry
        """
        discussion, context = self.registry.get(feature_id)

        if discussion.is_complete:
            raise InterviewCompleteError(feature_id)

        index = get_prompt_index(discussion.current_prompt)
        if index is None:
            raise InvalidStateError(
                feature_id, f"unknown prompt '{discussion.current_prompt}'"
            )

        prompt = FEATURE_DISCUSSION_PROMPTS[index]
        value = apply_answer(prompt.field, text)
        now = self._clock()
        entry = ConversationEntry(prompt=prompt.message, response=text, timestamp=now)
        next_index = index + 1
        has_next = next_index < len(FEATURE_DISCUSSION_PROMPTS)

        # Everything is computed above; apply the transition
        discussion.answers.set(prompt.field, value)
        context.append(entry)
        discussion.updated_at = now

        if has_next:
            next_prompt = FEATURE_DISCUSSION_PROMPTS[next_index]
            discussion.current_prompt = next_prompt.id
            logger.debug(f"{feature_id}: recorded {prompt.field.value}, next {next_prompt.id}")
            return AnswerRecorded(
                feature_id=feature_id,
                status=discussion.status,
                next_prompt=next_prompt.message,
                progress=format_progress(next_index),
            )

        discussion.current_prompt = None
        discussion.status = DiscussionStatus.PROPOSED
        logger.info(f"Feature discussion {feature_id} fully documented")
        return AnswerRecorded(
            feature_id=feature_id,
            status=discussion.status,
            next_prompt=None,
            progress=None,
        )

    def read_discussion(self, feature_id: str) -> dict[str, Any]:
        """Record and context as JSON-ready dicts."""
        discussion, context = self.registry.get(feature_id)
        return {
            "record": discussion.to_dict(),
            "context": context.to_dict(),
        }

    def list_discussions(self) -> list[dict[str, Any]]:
        return [
            {
                "id": feature_id,
                "title": discussion.title,
                "description": discussion.answers.description,
            }
            for feature_id, discussion in self.registry.list()
        ]
