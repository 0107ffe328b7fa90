"""Model reply sanitizer and parser.

Models rarely honour "return only JSON": replies arrive wrapped in code
fences, with leading chatter or trailing explanations. Cleaning is
best-effort. Slicing runs from the first ``{`` to the last ``}``, so
trailing prose that contains a brace, or JSON that was cut off, cannot be
recovered and surfaces as MalformedReply.
"""

import logging
import re

from pydantic import ValidationError

from nextjs_openapi.errors import MalformedReply
from nextjs_openapi.parser.base import RouteDocumentation

logger = logging.getLogger(__name__)

FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def clean_reply(text: str) -> str:
    """Strip code fences and surrounding prose from a model reply."""
    text = FENCE_RE.sub("", text)
    text = text.strip()

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        text = text[start : end + 1]
    return text


def parse_reply(text: str) -> RouteDocumentation:
    """Recover a RouteDocumentation from a raw model reply.

    Method keys are returned exactly as the model wrote them.

    Raises MalformedReply carrying the cleaned text on failure.
    """
    logger.debug("Raw model reply:\n%s", text)
    cleaned = clean_reply(text)
    logger.debug("Cleaned model reply:\n%s", cleaned)

    try:
        return RouteDocumentation.model_validate_json(cleaned)
    except ValidationError as e:
        raise MalformedReply(cleaned, reason=_summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "reply"
    return f"{location}: {first['msg']} ({error.error_count()} error(s))"
