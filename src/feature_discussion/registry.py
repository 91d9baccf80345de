"""In-process store of feature discussions and their contexts."""

from typing import Callable

from feature_discussion.errors import DiscussionNotFoundError
from feature_discussion.helpers.prompts import FEATURE_DISCUSSION_PROMPTS
from feature_discussion.models import (
    DiscussionContext,
    DiscussionStatus,
    FeatureDiscussion,
)


class DiscussionRegistry:
    """
    Owns every discussion created during the life of the process.

    IDs come from a counter that is never decremented, so an ID is never
    handed out twice.
    """

    def __init__(self, clock: Callable[[], str], id_prefix: str = "f"):
        self._clock = clock
        self._id_prefix = id_prefix
        self._counter = 0
        self._discussions: dict[str, tuple[FeatureDiscussion, DiscussionContext]] = {}

    def __len__(self) -> int:
        return len(self._discussions)

    def __contains__(self, feature_id: str) -> bool:
        return feature_id in self._discussions

    def create(self, title: str) -> str:
        self._counter += 1
        feature_id = f"{self._id_prefix}{self._counter}"
        now = self._clock()

        discussion = FeatureDiscussion(
            id=feature_id,
            title=title,
            created_at=now,
            updated_at=now,
            status=DiscussionStatus.IN_DISCUSSION,
            current_prompt=FEATURE_DISCUSSION_PROMPTS[0].id,
        )
        self._discussions[feature_id] = (discussion, DiscussionContext())
        return feature_id

    def get(self, feature_id: str) -> tuple[FeatureDiscussion, DiscussionContext]:
        try:
            return self._discussions[feature_id]
        except KeyError:
            raise DiscussionNotFoundError(feature_id) from None

    def list(self) -> list[tuple[str, FeatureDiscussion]]:
        """All discussions in creation order."""
        return [(feature_id, pair[0]) for feature_id, pair in self._discussions.items()]
