"""
Prompt templates for LLM-based extraction.
"""

from .description_extraction import (DESCRIPTION_SYSTEM_PROMPT,
                                     DESCRIPTION_USER_PROMPT)

__all__ = [
    "DESCRIPTION_SYSTEM_PROMPT",
    "DESCRIPTION_USER_PROMPT",
]
