# The module maps upstream failures onto the fixed user-facing error kinds.
# Author: Shibo Li
# Date: 2026-10-17
# Version: 0.1.0

from openai import APIStatusError, APITimeoutError
from o3_search_mcp.models.common import ErrorKind, FailureDescriptor


def describe_failure(error: BaseException) -> FailureDescriptor:
    """
    Extracts the fields relevant for classification from a raised exception.
    APITimeoutError is checked first: it is an APIError too, but carries no status.
    """
    if isinstance(error, APITimeoutError):
        return FailureDescriptor(timed_out=True)
    if isinstance(error, APIStatusError):
        return FailureDescriptor(status_code=error.status_code)
    return FailureDescriptor()


def classify_failure(descriptor: FailureDescriptor) -> ErrorKind:
    if descriptor.timed_out:
        return ErrorKind.TIMEOUT
    if descriptor.status_code == 429:
        return ErrorKind.RATE_LIMIT
    if descriptor.status_code is not None and descriptor.status_code >= 500:
        return ErrorKind.SERVICE_UNAVAILABLE
    return ErrorKind.UNKNOWN
