"""Feature discussion helpers package."""

from feature_discussion.helpers.fields import FieldKind, apply_answer
from feature_discussion.helpers.prompts import (
    FEATURE_DISCUSSION_PROMPTS,
    FeatureField,
    FeaturePrompt,
)

__all__ = [
    "FEATURE_DISCUSSION_PROMPTS",
    "FeatureField",
    "FeaturePrompt",
    "FieldKind",
    "apply_answer",
]
