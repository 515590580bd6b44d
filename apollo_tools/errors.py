# =============================================================================
# apollo_tools/errors.py  -  Tool-call error taxonomy
# =============================================================================
#
# Every failure a caller can see is one of these.  They all subclass
# FastMCP's ToolError, so FastMCP reports the message verbatim as a
# tool-call error instead of masking it.  Each also carries the JSON-RPC
# error code from the MCP SDK that best describes it.
#
# MAPPING ORDER (map_exception):
#   1. pydantic.ValidationError           → InvalidParamsError
#   2. HTTP 401 from Apollo               → InvalidCredentialsError
#   3. HTTP 429 from Apollo               → RateLimitError
#   4. anything else                      → InternalToolError
#   An error that is already an ApolloToolError passes through untouched.
# =============================================================================

import httpx
from fastmcp.exceptions import ToolError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND
from pydantic import ValidationError

DEFAULT_INTERNAL_MESSAGE = "An unexpected error occurred"


class ApolloToolError(ToolError):
    """Base class for errors returned to the MCP caller."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidParamsError(ApolloToolError):
    code = INVALID_PARAMS

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "InvalidParamsError":
        # errors() lists violations in field-declaration order
        messages = []
        for detail in error.errors():
            location = ".".join(str(part) for part in detail["loc"])
            messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
        return cls(f"Invalid parameters: {', '.join(messages)}")


class UnknownToolError(ApolloToolError):
    code = METHOD_NOT_FOUND

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidCredentialsError(ApolloToolError):
    code = INVALID_REQUEST

    def __init__(self) -> None:
        super().__init__("Invalid Apollo API key. Check your APOLLO_API_KEY environment variable.")


class RateLimitError(ApolloToolError):
    code = INTERNAL_ERROR

    def __init__(self) -> None:
        super().__init__("Apollo API rate limit exceeded. Please wait and try again.")


class InternalToolError(ApolloToolError):
    code = INTERNAL_ERROR


def map_exception(exc: Exception) -> ApolloToolError:
    """Translate any failure during a tool call into an ApolloToolError."""
    if isinstance(exc, ApolloToolError):
        return exc
    if isinstance(exc, ValidationError):
        return InvalidParamsError.from_validation_error(exc)
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        if status == 401:
            return InvalidCredentialsError()
        if status == 429:
            return RateLimitError()
    return InternalToolError(str(exc) or DEFAULT_INTERNAL_MESSAGE)
