from freeeats.services.moderation.moderation_service import (
    ContentModerator,
    ModerationImage,
    ModerationResult,
    parse_moderator_response,
)

__all__ = ["ContentModerator", "ModerationImage", "ModerationResult", "parse_moderator_response"]
