"""
Deterministic description extraction from raw product page markup.
"""

import logging
import re
from typing import Pattern, Sequence

from ..models import PLACEHOLDER

logger = logging.getLogger(__name__)

# Known description containers, highest priority first
DEFAULT_PATTERNS = (
    re.compile(r'<div id="ds_div"[^>]*>(.*?)</div>', re.IGNORECASE | re.DOTALL),
    re.compile(r'<div class="item-description"[^>]*>(.*?)</div>', re.IGNORECASE | re.DOTALL),
    re.compile(r'<div class="section"[^>]*>(.*?)</div>', re.IGNORECASE | re.DOTALL),
    re.compile(r'<div class="prod-description"[^>]*>(.*?)</div>', re.IGNORECASE | re.DOTALL),
)

MIN_DESCRIPTION_LENGTH = 10

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(fragment: str) -> str:
    """Strip tags from a markup fragment and collapse whitespace."""
    text = _TAG_RE.sub(" ", fragment)
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_by_pattern(
    markup: str,
    patterns: Sequence[Pattern] = DEFAULT_PATTERNS,
    min_length: int = MIN_DESCRIPTION_LENGTH,
) -> str:
    """
    Extract a product description by matching known container shapes.

    Patterns are tried in order and the first one yielding cleaned text longer
    than ``min_length`` wins, even if a later pattern would give more text.

    Args:
        markup: Full HTML of a product detail page.
        patterns: Compiled patterns with the description body in group 1.
        min_length: Cleaned text must be longer than this to be accepted.

    Returns:
        The cleaned description, or the placeholder if nothing usable matched.
    """
    try:
        for pattern in patterns:
            match = pattern.search(markup)
            if not match or not match.group(1):
                continue

            text = clean_text(match.group(1))
            if len(text) > min_length:
                return text

        return PLACEHOLDER
    except Exception as e:
        logger.error(f"Error extracting description with patterns: {str(e)}")
        return PLACEHOLDER
