"""
Feature Discussion Field Writer

Turns raw answer text into the value stored in a record slot. List slots
get one item per non-blank line; scalar slots keep the text verbatim.
"""

from enum import Enum
from typing import Union

from feature_discussion.helpers.prompts import FeatureField


class FieldKind(str, Enum):
    SCALAR = "scalar"
    LIST = "list"


FIELD_KINDS: dict[FeatureField, FieldKind] = {
    FeatureField.DESCRIPTION: FieldKind.SCALAR,
    FeatureField.BUSINESS_VALUE: FieldKind.SCALAR,
    FeatureField.TARGET_USERS: FieldKind.LIST,
    FeatureField.REQUIREMENTS: FieldKind.LIST,
    FeatureField.SUCCESS_CRITERIA: FieldKind.LIST,
    FeatureField.TECHNICAL_APPROACH: FieldKind.SCALAR,
    FeatureField.RISKS: FieldKind.LIST,
    FeatureField.TIMELINE: FieldKind.SCALAR,
}

FieldValue = Union[str, list[str]]


def split_list_answer(raw_text: str) -> list[str]:
    """
    Split a multi-line answer into list items.

    Each line is trimmed and blank lines are dropped; remaining order is kept.

    Args:
        raw_text: The answer exactly as the user typed it

    Returns:
        List of non-empty trimmed lines (may be empty)
    """
    lines = [line.strip() for line in raw_text.split("\n")]
    return [line for line in lines if line]


def apply_answer(field: FeatureField, raw_text: str) -> FieldValue:
    """Compute the value to store in ``field`` for an answer."""
    if FIELD_KINDS[field] is FieldKind.LIST:
        return split_list_answer(raw_text)
    return raw_text
