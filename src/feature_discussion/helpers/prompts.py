"""
Feature Discussion Prompt Script

The fixed, ordered sequence of questions every feature discussion walks
through. Each entry names the record slot its answer fills.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FeatureField(str, Enum):
    """Answer slots on a feature discussion record."""

    DESCRIPTION = "description"
    BUSINESS_VALUE = "businessValue"
    TARGET_USERS = "targetUsers"
    REQUIREMENTS = "requirements"
    SUCCESS_CRITERIA = "successCriteria"
    TECHNICAL_APPROACH = "technicalApproach"
    RISKS = "risks"
    TIMELINE = "timeline"


@dataclass(frozen=True)
class FeaturePrompt:
    id: str
    message: str
    field: FeatureField


# =============================================================================
# Prompt Script
# =============================================================================

FEATURE_DISCUSSION_PROMPTS: tuple[FeaturePrompt, ...] = (
    FeaturePrompt(
        id="initial_description",
        message="Please provide a brief description of the feature you'd like to discuss.",
        field=FeatureField.DESCRIPTION,
    ),
    FeaturePrompt(
        id="business_value",
        message="What business value does this feature provide? How does it benefit users or stakeholders?",
        field=FeatureField.BUSINESS_VALUE,
    ),
    FeaturePrompt(
        id="target_users",
        message="Who are the target users for this feature?",
        field=FeatureField.TARGET_USERS,
    ),
    FeaturePrompt(
        id="requirements",
        message="What are the key requirements or constraints for this feature?",
        field=FeatureField.REQUIREMENTS,
    ),
    FeaturePrompt(
        id="success_criteria",
        message="What are the success criteria for this feature? How will we know it's working as intended?",
        field=FeatureField.SUCCESS_CRITERIA,
    ),
    FeaturePrompt(
        id="technical_approach",
        message="Do you have any specific technical approach in mind for implementing this feature?",
        field=FeatureField.TECHNICAL_APPROACH,
    ),
    FeaturePrompt(
        id="risks",
        message="Are there any potential risks or challenges we should consider?",
        field=FeatureField.RISKS,
    ),
    FeaturePrompt(
        id="timeline",
        message="What's the desired timeline or priority for this feature?",
        field=FeatureField.TIMELINE,
    ),
)

COMPLETION_MESSAGE = "Thank you! The feature has been fully documented."


# =============================================================================
# Pure Helper Functions
# =============================================================================

def get_prompt_index(prompt_id: Optional[str]) -> Optional[int]:
    """
    Find the position of a prompt in the script.

    Args:
        prompt_id: Prompt ID stored as a discussion's cursor

    Returns:
        0-based index, or None if no script entry has that ID
    """
    if prompt_id is None:
        return None

    for index, prompt in enumerate(FEATURE_DISCUSSION_PROMPTS):
        if prompt.id == prompt_id:
            return index

    return None


def format_progress(index: int) -> str:
    """Progress indicator for the prompt at ``index`` (e.g. "Question 3 of 8")."""
    return f"Question {index + 1} of {len(FEATURE_DISCUSSION_PROMPTS)}"
