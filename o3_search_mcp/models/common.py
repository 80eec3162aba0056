# The module is to define the common models for the o3-search MCP server.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional, Union
from mcp.types import TextContent

NO_RESPONSE_TEXT = "No response text available."
ERROR_PREFIX = "Error: "


class ErrorKind(str, Enum):
    """The user-facing categories an upstream failure is mapped to."""
    RATE_LIMIT = "rate_limit"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


ERROR_MESSAGES = {
    ErrorKind.RATE_LIMIT: "Rate limit exceeded. The request was retried but still failed. Please try again later.",
    ErrorKind.SERVICE_UNAVAILABLE: "OpenAI service is temporarily unavailable. Please try again later.",
    ErrorKind.TIMEOUT: "Request timed out. Please try again with a simpler query.",
    ErrorKind.UNKNOWN: "An error occurred while processing your request.",
}


class FailureDescriptor(BaseModel):
    """
    A structured view of a failed upstream call.
    Attributes:
        status_code (Optional[int]): The HTTP status reported by the upstream, if any.
        timed_out (bool): Whether the call exhausted its time budget.
    """
    status_code: Optional[int] = Field(default=None, description="HTTP status reported by the upstream.")
    timed_out: bool = Field(default=False, description="Whether the call timed out across all retries.")


class SearchAnswer(BaseModel):
    """The answer text produced by a successful search."""
    text: str


class SearchFailure(BaseModel):
    """A classified failure of a search."""
    kind: ErrorKind

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]


SearchResult = Union[SearchAnswer, SearchFailure]


def to_content(result: SearchResult) -> List[TextContent]:
    """
    Converts an internal search result into the MCP response envelope.

    Answers and errors share the same text block; errors are only told apart
    by the "Error: " prefix, which the consuming clients rely on.
    """
    if isinstance(result, SearchFailure):
        text = f"{ERROR_PREFIX}{result.message}"
    else:
        text = result.text
    return [TextContent(type="text", text=text)]
