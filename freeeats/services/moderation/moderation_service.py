"""
Food-relevance moderation for new posts using a Gemini classifier.

The gate fails open: a missing key, a failed call, or an unreadable answer
all let the post through. Only an explicit ``{"isValid": false}`` rejects.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from google import genai
from google.genai import types

from freeeats.config.settings import Settings, settings
from freeeats.core.exceptions import ModerationRejectedError
from freeeats.core.logging import get_logger

logger = get_logger(__name__)

_PROMPT_HEADER = """You are a content moderator for a free food sharing app on college campuses. Your job is to determine if a post is legitimately about food.

Analyze the following post and determine if it is food-related:

{text}
"""

_TEXT_RULES = """
Rules:
1. The post MUST be about food (free food, leftovers, snacks, drinks, etc.)
2. Reject posts that are clearly spam, advertisements, inappropriate content, or not about food
3. Be lenient with edge cases - if it could reasonably be food-related, allow it
"""

_IMAGE_RULES = """
The post also includes an image (shown below).

Rules:
1. The post MUST be about food (free food, leftovers, snacks, drinks, etc.)
2. The image MUST show food, food packaging, food containers, or a food-related location
3. Reject posts that are clearly spam, advertisements, inappropriate content, or not about food
4. Be lenient with edge cases - if it could reasonably be food-related, allow it
"""

_RESPONSE_FORMAT = """
Respond with a JSON object containing:
- "isValid": true if the post is food-related, false otherwise
- "reason": if rejected, a brief, friendly explanation (e.g., "This doesn't appear to be about food")

Return ONLY the JSON object, no additional text."""


@dataclass(frozen=True)
class ModerationResult:
    is_valid: bool
    reason: Optional[str] = None

    def raise_if_rejected(self) -> None:
        if not self.is_valid:
            raise ModerationRejectedError(self.reason)


@dataclass(frozen=True)
class ModerationImage:
    data: bytes
    mime_type: str


def build_prompt(title: str, description: Optional[str], with_image: bool) -> str:
    text = f"Title: {title}\nDescription: {description}" if description else f"Title: {title}"
    rules = _IMAGE_RULES if with_image else _TEXT_RULES
    return _PROMPT_HEADER.format(text=text) + rules + _RESPONSE_FORMAT


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text[3:]
        if text.startswith("json"):
            text = text[4:]
        if text.endswith("```"):
            text = text[:-3]
    return text.strip()


def parse_moderator_response(text: Optional[str]) -> ModerationResult:
    """
    Read the classifier's answer. Anything other than a JSON object with a
    boolean isValid yields an accepting result.
    """
    if not text:
        logger.warning("Empty moderator response")
        return ModerationResult(is_valid=True)
    try:
        parsed: Any = json.loads(_strip_code_fences(text))
    except json.JSONDecodeError:
        logger.warning(f"Failed to parse moderator response: {text!r}")
        return ModerationResult(is_valid=True)

    if not isinstance(parsed, dict) or not isinstance(parsed.get("isValid"), bool):
        logger.warning(f"Unexpected moderator response format: {text!r}")
        return ModerationResult(is_valid=True)

    if parsed["isValid"]:
        return ModerationResult(is_valid=True)
    reason = parsed.get("reason")
    if not isinstance(reason, str) or not reason.strip():
        reason = ModerationRejectedError.DEFAULT_REASON
    return ModerationResult(is_valid=False, reason=reason.strip())


class ContentModerator:
    """
    Classifies a post as food related or not.

    The genai client is created lazily so that a deployment without an API
    key never touches the network.
    """

    def __init__(self, config: Settings = settings, client: Optional[genai.Client] = None):
        self.config = config
        self._client = client

    @property
    def enabled(self) -> bool:
        return bool(self.config.MODERATION_ENABLED and (self._client or self.config.GOOGLE_GENERATIVE_AI_API_KEY))

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.config.GOOGLE_GENERATIVE_AI_API_KEY)
        return self._client

    def moderate(
        self,
        title: str,
        description: Optional[str] = None,
        image: Optional[ModerationImage] = None,
    ) -> ModerationResult:
        if not self.enabled:
            logger.warning("GOOGLE_GENERATIVE_AI_API_KEY not set or moderation disabled, skipping content filter")
            return ModerationResult(is_valid=True)

        prompt = build_prompt(title, description, with_image=image is not None)
        contents: list = [prompt]
        if image is not None:
            contents.append(types.Part.from_bytes(data=image.data, mime_type=image.mime_type))

        try:
            response = self._get_client().models.generate_content(
                model=self.config.MODERATION_MODEL,
                contents=contents,
            )
            text = response.text
        except Exception as e:
            logger.warning(f"Moderation call failed, allowing post: {e}")
            return ModerationResult(is_valid=True)

        result = parse_moderator_response(text)
        if not result.is_valid:
            logger.info(f"Post rejected by moderation: {result.reason}")
        return result
