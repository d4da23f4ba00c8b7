"""
Description extraction with a provider -> pattern fallback chain.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..config import LLMConfig
from ..models import PLACEHOLDER
from ..prompts import DESCRIPTION_SYSTEM_PROMPT, DESCRIPTION_USER_PROMPT
from .pattern_extractor import extract_by_pattern
from .providers import CompletionProvider, DeepSeekProvider, OpenAIProvider

logger = logging.getLogger(__name__)


class ExtractionStrategy(ABC):
    """One tier of the description extraction chain."""

    name: str = "strategy"

    @abstractmethod
    def is_available(self) -> bool:
        """Whether this tier can run right now."""

    @abstractmethod
    async def extract(self, markup: str) -> str:
        """Return a description for the markup; may raise."""


class ProviderStrategy(ExtractionStrategy):
    """Extraction tier that asks a completion provider for the description."""

    def __init__(
        self,
        provider: CompletionProvider,
        max_tokens: int = 500,
        max_input_chars: int = 15000,
    ):
        self.provider = provider
        self.max_tokens = max_tokens
        self.max_input_chars = max_input_chars
        self.name = provider.name

    def is_available(self) -> bool:
        return self.provider.is_configured

    async def extract(self, markup: str) -> str:
        truncated = markup[: self.max_input_chars]
        text = await self.provider.complete(
            DESCRIPTION_SYSTEM_PROMPT,
            DESCRIPTION_USER_PROMPT.format(html=truncated),
            self.max_tokens,
        )
        return text.strip() or PLACEHOLDER


class PatternStrategy(ExtractionStrategy):
    """Terminal tier backed by the deterministic pattern extractor."""

    name = "pattern"

    def is_available(self) -> bool:
        return True

    async def extract(self, markup: str) -> str:
        return extract_by_pattern(markup)


class DescriptionExtractor:
    """
    Extracts a product description from detail page markup.

    Strategies are kept in priority order. On each call the first provider
    tier with a credential is selected, followed by every non-provider tier.
    A failing tier falls through to the next selected one, so a broken
    provider degrades straight to pattern matching. ``extract`` never raises.
    """

    def __init__(self, strategies: Optional[Sequence[ExtractionStrategy]] = None):
        """
        Initialize the extractor.

        Args:
            strategies: Ordered extraction tiers. Defaults to pattern matching only.
        """
        self.strategies: List[ExtractionStrategy] = list(strategies or [PatternStrategy()])

    @classmethod
    def from_config(cls, llm_config: LLMConfig) -> "DescriptionExtractor":
        """Build the standard secondary -> primary -> pattern chain."""
        options = {
            "max_tokens": llm_config.max_tokens,
            "max_input_chars": llm_config.max_input_chars,
        }
        return cls(
            [
                ProviderStrategy(DeepSeekProvider.from_config(llm_config), **options),
                ProviderStrategy(OpenAIProvider.from_config(llm_config), **options),
                PatternStrategy(),
            ]
        )

    def _active_strategies(self) -> List[ExtractionStrategy]:
        active = []
        provider_selected = False
        for strategy in self.strategies:
            if not strategy.is_available():
                continue
            if isinstance(strategy, ProviderStrategy):
                if provider_selected:
                    continue
                provider_selected = True
            active.append(strategy)
        return active

    async def extract(self, markup: str) -> str:
        """
        Extract a description, degrading through the chain on failure.

        Args:
            markup: Full rendered HTML of a product detail page.

        Returns:
            Description text, or the placeholder when nothing could be found.
        """
        markup = markup or ""
        active = self._active_strategies()
        if not any(isinstance(s, ProviderStrategy) for s in active):
            logger.info("No AI API key provided. Using fallback extraction method.")

        for strategy in active:
            try:
                description = await strategy.extract(markup)
                logger.debug(f"Description extracted with {strategy.name}")
                return description
            except Exception as e:
                logger.error(f"Error using {strategy.name} to extract description: {str(e)}")

        return extract_by_pattern(markup)
