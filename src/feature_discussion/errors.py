"""
Feature Discussion Error Hierarchy

Standardized error handling for the interview core and its MCP adapter.
All exceptions inherit from FeatureDiscussionError for consistent handling.
"""


class FeatureDiscussionError(Exception):
    """Base exception for all feature discussion errors."""

    def __init__(self, message: str, code: str = "FEATURE_DISCUSSION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to response dict for MCP tool returns."""
        return {
            "success": False,
            "error": self.message,
            "code": self.code
        }


# =============================================================================
# Discussion Errors
# =============================================================================

class DiscussionNotFoundError(FeatureDiscussionError):
    """Raised when a discussion ID doesn't exist in the registry."""

    def __init__(self, feature_id: str):
        super().__init__(
            f"Feature discussion {feature_id} not found",
            "DISCUSSION_NOT_FOUND"
        )
        self.feature_id = feature_id


class InvalidStateError(FeatureDiscussionError):
    """Raised when a discussion's cursor does not match the prompt script."""

    def __init__(self, feature_id: str, detail: str):
        super().__init__(
            f"Feature discussion {feature_id} is in an invalid state: {detail}",
            "INVALID_STATE"
        )
        self.feature_id = feature_id
        self.detail = detail


class InterviewCompleteError(InvalidStateError):
    """Raised when answering a discussion whose interview has finished."""

    def __init__(self, feature_id: str):
        super().__init__(feature_id, "all questions have already been answered")
        self.code = "INTERVIEW_COMPLETE"

