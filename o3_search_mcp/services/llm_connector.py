# o3_search_mcp/services/llm_connector.py
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from openai import AsyncOpenAI, OpenAIError
from typing import Optional
from o3_search_mcp.core.config import Settings
from o3_search_mcp.utils.logger import console

O3_MODEL = "o3"


class MissingCredentialError(OpenAIError):
    """Raised when a search is attempted without OPENAI_API_KEY configured."""


def build_client(settings: Settings) -> Optional[AsyncOpenAI]:
    """
    Creates the single OpenAI client shared by every invocation.

    The retry budget and timeout are handed to the client, which owns the
    retry loop. Returns None when no API key is configured so the server can
    still start; the missing key surfaces on the first search instead.
    """
    if not settings.OPENAI_API_KEY:
        console.warning("OPENAI_API_KEY is not set; searches will fail until it is provided.")
        return None
    return AsyncOpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
        max_retries=settings.OPENAI_MAX_RETRIES,
        timeout=settings.timeout_seconds,
    )


class O3SearchConnector:
    """
    Issues web-search-enabled requests to the o3 model via the Responses API.
    """
    def __init__(self, settings: Settings, client: Optional[AsyncOpenAI] = None):
        self.settings = settings
        self._client = client if client is not None else build_client(settings)

    async def search(self, query: str) -> str:
        """
        Sends one request for the query and returns the aggregated output text.
        Args:
            query (str): The natural-language question.
        Returns:
            str: The model's output text, which may be empty.
        Raises:
            MissingCredentialError: If no API key is configured.
            openai.OpenAIError: For any failure reported by the client.
        """
        if self._client is None:
            raise MissingCredentialError("OPENAI_API_KEY is not set in the environment.")

        response = await self._client.responses.create(
            model=O3_MODEL,
            input=query,
            tools=[{"type": "web_search_preview", "search_context_size": self.settings.SEARCH_CONTEXT_SIZE}],
            tool_choice="auto",
            parallel_tool_calls=True,
            reasoning={"effort": self.settings.REASONING_EFFORT},
        )
        return response.output_text
