# The module is to define the O3SearchTool that answers queries with o3 and web search.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from pydantic import Field
from typing import Annotated, List
from mcp.types import TextContent
from .base_tool import BaseTool
from o3_search_mcp.core.error_classifier import classify_failure, describe_failure
from o3_search_mcp.models.common import NO_RESPONSE_TEXT, SearchAnswer, SearchFailure, SearchResult, to_content
from o3_search_mcp.services.llm_connector import O3SearchConnector
from o3_search_mcp.utils.logger import console

INPUT_DESCRIPTION = "Ask questions, search for information, or consult about complex problems in English."


class O3SearchTool(BaseTool):
    """
    Forwards a natural-language query to the o3 model with web search enabled
    and returns its synthesized answer.
    """
    name: str = "o3-search"
    description: str = "An AI agent with advanced web search capabilities. " \
    "Useful for finding latest information and troubleshooting errors. Supports natural language queries."

    def __init__(self, connector: O3SearchConnector):
        super().__init__()
        self._connector = connector

    async def execute(self, input: Annotated[str, Field(description=INPUT_DESCRIPTION)]) -> List[TextContent]:
        """
        Runs the search and wraps the outcome into a single text content block.
        Args:
            input (str): The query text.
        Returns:
            list[TextContent]: The answer, or an "Error: " prefixed message.
        """
        result = await self.run(input)
        return to_content(result)

    async def run(self, query: str) -> SearchResult:
        """
        Performs one upstream call. Never raises: every failure is logged and
        classified into a SearchFailure.
        """
        settings = self._connector.settings
        console.info(
            f"[{self.name}] Request started with timeout: {settings.OPENAI_API_TIMEOUT}ms, "
            f"maxRetries: {settings.OPENAI_MAX_RETRIES}"
        )
        try:
            text = await self._connector.search(query)
        except Exception as e:
            console.exception(f"[{self.name}] Error calling OpenAI API: {e!r}")
            kind = classify_failure(describe_failure(e))
            return SearchFailure(kind=kind)

        console.success(f"[{self.name}] Request completed.")
        return SearchAnswer(text=text or NO_RESPONSE_TEXT)
