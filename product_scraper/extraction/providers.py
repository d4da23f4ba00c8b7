"""
Chat completion providers used to extract descriptions from page markup.

Both providers expose the same ``complete(system_prompt, user_prompt,
max_tokens)`` coroutine and raise ``ProviderError`` on any failure.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp
from openai import AsyncOpenAI, OpenAIError

from ..config import LLMConfig
from .exceptions import ProviderError, ProviderNotConfigured

logger = logging.getLogger(__name__)


class CompletionProvider(ABC):
    """Base class for chat completion providers."""

    name: str = "provider"

    def __init__(self, api_key: Optional[str], model: str, timeout: float = 60.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        """Whether a credential is available for this provider."""
        return bool(self.api_key)

    def _messages(self, system_prompt: str, user_prompt: str) -> list:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

    @abstractmethod
    async def complete(self, system_prompt: str, user_prompt: str, max_tokens: int) -> str:
        """
        Run a chat completion and return the text of the first choice.

        Raises:
            ProviderNotConfigured: If no credential is set.
            ProviderError: If the call fails or the response is malformed.
        """


class OpenAIProvider(CompletionProvider):
    """Primary provider backed by the OpenAI chat completions API."""

    name = "openai"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-3.5-turbo",
        timeout: float = 60.0,
        client: Optional[AsyncOpenAI] = None,
    ):
        super().__init__(api_key, model, timeout)
        self._client = client

    @classmethod
    def from_config(cls, llm_config: LLMConfig) -> "OpenAIProvider":
        return cls(
            api_key=llm_config.openai_api_key,
            model=llm_config.openai_model,
            timeout=llm_config.request_timeout,
        )

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    async def complete(self, system_prompt: str, user_prompt: str, max_tokens: int) -> str:
        if not self.is_configured:
            raise ProviderNotConfigured("OPENAI_API_KEY is not set")

        logger.debug(f"Requesting OpenAI completion with model {self.model}")

        try:
            response = await self._get_client().chat.completions.create(
                model=self.model,
                messages=self._messages(system_prompt, user_prompt),
                max_tokens=max_tokens,
            )
        except OpenAIError as e:
            raise ProviderError(f"OpenAI API error: {str(e)}") from e

        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderError(f"Malformed OpenAI response: {str(e)}") from e


class DeepSeekProvider(CompletionProvider):
    """Secondary provider calling the DeepSeek chat completions endpoint."""

    name = "deepseek"

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "deepseek-chat",
        timeout: float = 60.0,
        base_url: str = "https://api.deepseek.com",
    ):
        super().__init__(api_key, model, timeout)
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_config(cls, llm_config: LLMConfig) -> "DeepSeekProvider":
        return cls(
            api_key=llm_config.deepseek_api_key,
            model=llm_config.deepseek_model,
            timeout=llm_config.request_timeout,
            base_url=llm_config.deepseek_base_url,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1/chat/completions"

    async def complete(self, system_prompt: str, user_prompt: str, max_tokens: int) -> str:
        if not self.is_configured:
            raise ProviderNotConfigured("DEEPSEEK_API_KEY is not set")

        logger.debug(f"Requesting DeepSeek completion from {self.endpoint}")

        payload = {
            "model": self.model,
            "messages": self._messages(system_prompt, user_prompt),
            "max_tokens": max_tokens,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with aiohttp.ClientSession(
                headers=headers, timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as session:
                async with session.post(self.endpoint, json=payload) as response:
                    if response.status >= 400:
                        detail = await response.text()
                        raise ProviderError(
                            f"DeepSeek API error {response.status}: {detail[:200]}"
                        )
                    data: Dict[str, Any] = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, json.JSONDecodeError) as e:
            raise ProviderError(f"DeepSeek request failed: {str(e)}") from e

        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"Malformed DeepSeek response: {str(e)}") from e
