"""
Description extraction strategies and completion providers.
"""

from .description_extractor import (DescriptionExtractor, ExtractionStrategy,
                                    PatternStrategy, ProviderStrategy)
from .exceptions import ExtractionError, ProviderError, ProviderNotConfigured
from .pattern_extractor import DEFAULT_PATTERNS, extract_by_pattern
from .providers import CompletionProvider, DeepSeekProvider, OpenAIProvider

__all__ = [
    "DescriptionExtractor",
    "ExtractionStrategy",
    "ProviderStrategy",
    "PatternStrategy",
    "extract_by_pattern",
    "DEFAULT_PATTERNS",
    "CompletionProvider",
    "OpenAIProvider",
    "DeepSeekProvider",
    "ExtractionError",
    "ProviderError",
    "ProviderNotConfigured",
]
