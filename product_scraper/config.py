"""
Configuration module for the product scraper.
"""

import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class CrawlerConfig(BaseModel):
    """Crawler configuration settings."""

    headless: bool = Field(
        default=os.getenv("HEADLESS", "true").lower() == "true",
        description="Whether to run the browser in headless mode",
    )
    user_agent: str = Field(
        default=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
        description="User agent string to use for requests",
    )
    launch_args: List[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"],
        description="Extra command line arguments for the browser process",
    )
    request_delay: float = Field(
        default=float(os.getenv("CRAWL_REQUEST_DELAY", "1.0")),
        description="Seconds to wait between product detail fetches",
    )
    max_products_per_page: int = Field(
        default=int(os.getenv("CRAWL_MAX_PRODUCTS_PER_PAGE", "5")),
        description="Number of listing items resolved to detail pages per page",
    )
    listing_timeout_ms: int = Field(
        default=60000, description="Navigation timeout for listing pages"
    )
    results_timeout_ms: int = Field(
        default=10000, description="Wait for the listing container to populate"
    )
    detail_timeout_ms: int = Field(
        default=30000, description="Navigation timeout for detail pages"
    )
    description_timeout_ms: int = Field(
        default=5000, description="Wait for the description region on detail pages"
    )


class LLMConfig(BaseModel):
    """Extraction provider configuration settings."""

    openai_api_key: Optional[str] = Field(
        default=os.getenv("OPENAI_API_KEY") or None,
        description="Credential for the primary (OpenAI) provider",
    )
    openai_model: str = Field(
        default=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        description="Model used by the primary provider",
    )
    deepseek_api_key: Optional[str] = Field(
        default=os.getenv("DEEPSEEK_API_KEY") or None,
        description="Credential for the secondary (DeepSeek) provider",
    )
    deepseek_model: str = Field(
        default=os.getenv("DEEPSEEK_MODEL", "deepseek-chat"),
        description="Model used by the secondary provider",
    )
    deepseek_base_url: str = Field(
        default=os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com"),
        description="Base URL of the DeepSeek API",
    )
    max_tokens: int = Field(
        default=int(os.getenv("LLM_MAX_TOKENS", "500")),
        description="Maximum tokens for provider responses",
    )
    max_input_chars: int = Field(
        default=15000,
        description="Markup sent to a provider is truncated to this many characters",
    )
    request_timeout: float = Field(
        default=float(os.getenv("LLM_REQUEST_TIMEOUT", "60")),
        description="Timeout for a single provider call in seconds",
    )

    @property
    def has_openai(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def has_deepseek(self) -> bool:
        return bool(self.deepseek_api_key)


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerConfig(BaseModel):
    """HTTP server configuration settings."""

    host: str = Field(default=os.getenv("HOST", "0.0.0.0"), description="Bind host")
    port: int = Field(default=int(os.getenv("PORT", "3000")), description="Bind port")
    log_level: str = Field(
        default=os.getenv("LOG_LEVEL", "INFO"),
        validate_default=True,
        description="Logging level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: Any) -> str:
        level = str(value or "").upper()
        return level if level in LOG_LEVELS else "INFO"


class AppConfig(BaseModel):
    """Main application configuration."""

    crawler: CrawlerConfig = Field(default_factory=CrawlerConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a dictionary with credentials redacted."""
        llm = self.llm.model_dump()
        for key in ("openai_api_key", "deepseek_api_key"):
            if llm.get(key):
                llm[key] = "***"
        return {
            "crawler": self.crawler.model_dump(),
            "llm": llm,
            "server": self.server.model_dump(),
        }


# Create a singleton instance of the configuration
config = AppConfig()


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    return config
