"""Error definitions for MCP tools.

This module defines structured error types with stable codes
that are surfaced to MCP clients. Every failure raised while
dispatching a tool is turned into one of these envelopes.
"""

from dataclasses import dataclass
from typing import Any

from miro_boards.errors import (
    MiroError,
    RemoteError,
    UnknownPromptError,
    UnknownToolError,
    ValidationError,
)

# Error code constants; MiroError subclasses carry the same values
VALIDATION_ERROR = "validation"
UNKNOWN_TOOL = "unknown_tool"
UNKNOWN_PROMPT = "unknown_prompt"
REMOTE_ERROR = "remote_error"
TIMEOUT_ERROR = "timeout"
NETWORK_ERROR = "network_error"
INVALID_RESPONSE = "invalid_response"
INTERNAL_ERROR = "internal_error"

# Codes a RemoteError may carry; anything else is reported as REMOTE_ERROR
REMOTE_CODES = frozenset({REMOTE_ERROR, TIMEOUT_ERROR, NETWORK_ERROR, INVALID_RESPONSE})


@dataclass
class MCPError:
    """Structured error response for MCP tools.

    Attributes:
        code: Stable error code for programmatic handling.
        message: Human-readable error message.
        details: Optional additional error details.
    """

    code: str
    message: str
    details: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


def make_error(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> MCPError:
    """Create an MCPError instance.

    Args:
        code: Stable error code.
        message: Human-readable message.
        details: Optional additional details.

    Returns:
        MCPError instance.
    """
    return MCPError(code=code, message=message, details=details)


def validation_error(message: str, details: dict[str, Any] | None = None) -> MCPError:
    """Create a validation error."""
    return make_error(VALIDATION_ERROR, message, details)


def unknown_tool(name: str) -> MCPError:
    """Create an unknown tool error."""
    return make_error(
        UNKNOWN_TOOL,
        f"Unknown tool: {name}",
        details={"tool": name},
    )


def unknown_prompt(name: str) -> MCPError:
    """Create an unknown prompt error."""
    return make_error(
        UNKNOWN_PROMPT,
        f"Unknown prompt: {name}",
        details={"prompt": name},
    )


def remote_error(message: str, status_code: int | None, code: str = REMOTE_ERROR) -> MCPError:
    """Create a remote (Miro API) error."""
    return make_error(code, message, details={"status_code": status_code})


def error_from_exception(exc: BaseException) -> MCPError:
    """Map an exception raised during dispatch to an MCPError.

    Args:
        exc: The exception.

    Returns:
        MCPError with the exception's stable code, or internal_error for
        anything that is not a MiroError.
    """
    if isinstance(exc, UnknownToolError):
        return unknown_tool(exc.name)
    if isinstance(exc, UnknownPromptError):
        return unknown_prompt(exc.name)
    if isinstance(exc, ValidationError):
        return validation_error(exc.message)
    if isinstance(exc, RemoteError):
        code = exc.code if exc.code in REMOTE_CODES else REMOTE_ERROR
        return remote_error(str(exc), exc.status_code, code)
    if isinstance(exc, MiroError):
        return make_error(exc.code, exc.message)
    return make_error(INTERNAL_ERROR, f"Unexpected error: {exc}")


__all__ = [
    "INTERNAL_ERROR",
    "INVALID_RESPONSE",
    "MCPError",
    "NETWORK_ERROR",
    "REMOTE_CODES",
    "REMOTE_ERROR",
    "TIMEOUT_ERROR",
    "UNKNOWN_PROMPT",
    "UNKNOWN_TOOL",
    "VALIDATION_ERROR",
    "error_from_exception",
    "make_error",
    "remote_error",
    "unknown_prompt",
    "unknown_tool",
    "validation_error",
]
