"""Client configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from oneinch_swap.chains import BASIC_URL, Network, get_network


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # 1inch API
    # ======================
    oneinch_api_token: str = Field(default="", description="1inch developer portal API token")
    oneinch_base_url: str = Field(default=BASIC_URL, description="1inch API base URL")
    oneinch_network: str = Field(
        default="ethereum", description="Network name or chain ID used for swap requests"
    )

    # ======================
    # HTTP
    # ======================
    http_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")

    # ======================
    # Environment
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def network(self) -> Network:
        """Resolve the configured network."""
        return get_network(self.oneinch_network)

    @property
    def has_token(self) -> bool:
        return bool(self.oneinch_api_token)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "oneinch_api_token": "***" if self.oneinch_api_token else "(not set)",
            "oneinch_base_url": self.oneinch_base_url,
            "oneinch_network": self.oneinch_network,
            "http_timeout": self.http_timeout,
            "debug": self.debug,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
