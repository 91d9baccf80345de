"""
Feature Discussion Data Model

A discussion record holds the typed answers of one interview; its context
is the append-only question/answer history recorded alongside it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from feature_discussion.helpers.fields import FieldValue
from feature_discussion.helpers.prompts import FeatureField


def _copy_value(value: Optional[Any]) -> Optional[Any]:
    """Shallow-copy list values for JSON views."""
    if isinstance(value, list):
        return list(value)
    return value


class DiscussionStatus(str, Enum):
    PROPOSED = "proposed"
    IN_DISCUSSION = "in-discussion"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class FeatureAnswers:
    """Answer slots. ``None`` means the slot has not been answered."""

    description: Optional[str] = None
    business_value: Optional[str] = None
    target_users: Optional[list[str]] = None
    requirements: Optional[list[str]] = None
    success_criteria: Optional[list[str]] = None
    technical_approach: Optional[str] = None
    risks: Optional[list[str]] = None
    timeline: Optional[str] = None

    def get(self, slot: FeatureField) -> Optional[FieldValue]:
        return getattr(self, SLOT_ATTRIBUTES[slot])

    def set(self, slot: FeatureField, value: FieldValue) -> None:
        setattr(self, SLOT_ATTRIBUTES[slot], value)

    def filled(self) -> list[FeatureField]:
        """Slots that hold a value, in declaration order."""
        return [slot for slot in FeatureField if self.get(slot) is not None]

    def to_dict(self) -> dict[str, Any]:
        return {slot.value: _copy_value(self.get(slot)) for slot in FeatureField}


SLOT_ATTRIBUTES: dict[FeatureField, str] = {
    FeatureField.DESCRIPTION: "description",
    FeatureField.BUSINESS_VALUE: "business_value",
    FeatureField.TARGET_USERS: "target_users",
    FeatureField.REQUIREMENTS: "requirements",
    FeatureField.SUCCESS_CRITERIA: "success_criteria",
    FeatureField.TECHNICAL_APPROACH: "technical_approach",
    FeatureField.RISKS: "risks",
    FeatureField.TIMELINE: "timeline",
}


@dataclass
class FeatureDiscussion:
    id: str
    title: str
    created_at: str
    updated_at: str
    status: DiscussionStatus = DiscussionStatus.IN_DISCUSSION
    answers: FeatureAnswers = field(default_factory=FeatureAnswers)
    current_prompt: Optional[str] = None
    # Outside the interview; nothing in the core writes these.
    architectural_decisions: Optional[list[str]] = None
    dependencies: Optional[list[str]] = None

    @property
    def is_complete(self) -> bool:
        return self.current_prompt is None

    def to_dict(self) -> dict[str, Any]:
        """JSON view using the camelCase keys clients expect."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "status": self.status.value,
        }
        data.update(self.answers.to_dict())
        data.update({
            "architecturalDecisions": _copy_value(self.architectural_decisions),
            "dependencies": _copy_value(self.dependencies),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "currentPrompt": self.current_prompt,
        })
        return data


@dataclass(frozen=True)
class ConversationEntry:
    prompt: str
    response: str
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {
            "prompt": self.prompt,
            "response": self.response,
            "timestamp": self.timestamp,
        }


@dataclass
class DiscussionContext:
    """Audit trail for one discussion; history is only ever appended to."""

    previous_decisions: list[str] = field(default_factory=list)
    related_features: list[str] = field(default_factory=list)
    technical_constraints: list[str] = field(default_factory=list)
    conversation_history: list[ConversationEntry] = field(default_factory=list)

    def append(self, entry: ConversationEntry) -> None:
        self.conversation_history.append(entry)

    def to_dict(self) -> dict[str, Any]:
        return {
            "previousDecisions": list(self.previous_decisions),
            "relatedFeatures": list(self.related_features),
            "technicalConstraints": list(self.technical_constraints),
            "conversationHistory": [e.to_dict() for e in self.conversation_history],
        }
