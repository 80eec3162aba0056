# The module is to define the configuration settings for the o3-search MCP server.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Literal, Optional, Dict, Any

Richness = Literal["low", "medium", "high"]


class Settings(BaseSettings):
    """
    The Settings class holds the process-wide configuration of the server.
    It is loaded once from the environment (or a .env file) at startup and
    is frozen afterwards.
    Attributes:
        OPENAI_API_KEY (str): API key for the OpenAI Responses API.
        OPENAI_BASE_URL (str): Optional alternate base URL for the API.
        OPENAI_MAX_RETRIES (int): Retry budget handed to the OpenAI client.
        OPENAI_API_TIMEOUT (int): Per-attempt request timeout in milliseconds.
        SEARCH_CONTEXT_SIZE (str): Web search richness, low/medium/high.
        REASONING_EFFORT (str): Reasoning depth, low/medium/high.
        LOG_LEVEL (str): Level of the diagnostic logger.
    """
    # OPENAI
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_BASE_URL: Optional[str] = None
    OPENAI_MAX_RETRIES: int = Field(default=3, ge=0)
    OPENAI_API_TIMEOUT: int = Field(default=60000, gt=0)

    # O3_SEARCH
    SEARCH_CONTEXT_SIZE: Richness = "medium"
    REASONING_EFFORT: Richness = "medium"

    # LOGGING
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = "ignore"
        frozen = True

    @property
    def timeout_seconds(self) -> float:
        """The request timeout converted to seconds, as the OpenAI client expects."""
        return self.OPENAI_API_TIMEOUT / 1000

    def summary(self) -> Dict[str, Any]:
        """Returns the settings for display, with the API key masked."""
        data = self.model_dump()
        key = data.get("OPENAI_API_KEY")
        if key:
            data["OPENAI_API_KEY"] = f"{key[:3]}...{key[-4:]}" if len(key) > 8 else "***"
        else:
            data["OPENAI_API_KEY"] = "(not set)"
        data["OPENAI_BASE_URL"] = data.get("OPENAI_BASE_URL") or "(default)"
        return data


def load_settings() -> Settings:
    # Called exactly once at process entry; the result is passed down by reference.
    return Settings()


if __name__ == "__main__":
    print(load_settings().model_dump_json(indent=4))
