"""Exception hierarchy for miro_boards.

All errors carry a stable ``code`` so frontends can surface them
without string matching. Validation problems are always detected
before any network access; remote errors wrap non-success HTTP
responses and transport failures.
"""

from __future__ import annotations


class MiroError(Exception):
    """Base error for all miro_boards operations."""

    def __init__(self, message: str, code: str = "miro_error") -> None:
        """Initialize MiroError.

        Args:
            message: Error description.
            code: Error code for structured error handling.
        """
        super().__init__(message)
        self.message = message
        self.code = code


class ValidationError(MiroError):
    """Raised when arguments, identifiers or batch sizes are invalid."""

    def __init__(self, message: str, code: str = "validation") -> None:
        super().__init__(message, code)


class UnknownToolError(ValidationError):
    """Raised when a tool name is not registered."""

    def __init__(self, name: str, code: str = "unknown_tool") -> None:
        super().__init__(f"Unknown tool: {name}", code)
        self.name = name


class UnknownPromptError(ValidationError):
    """Raised when a prompt name is not known."""

    def __init__(self, name: str, code: str = "unknown_prompt") -> None:
        super().__init__(f"Unknown prompt: {name}", code)
        self.name = name


class RemoteError(MiroError):
    """Raised when the Miro API fails or cannot be reached.

    Attributes:
        status_code: HTTP status code, or None for transport failures.
        message: Service-provided message (or a generic fallback).
    """

    def __init__(
        self,
        status_code: int | None,
        message: str,
        code: str = "remote_error",
    ) -> None:
        super().__init__(message, code)
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return f"Miro API error: {self.message}"
        return f"Miro API error: {self.status_code} {self.message}"


class StartupError(MiroError):
    """Raised when the process cannot start (e.g. no OAuth token)."""

    def __init__(self, message: str, code: str = "startup_error") -> None:
        super().__init__(message, code)


__all__ = [
    "MiroError",
    "RemoteError",
    "StartupError",
    "UnknownPromptError",
    "UnknownToolError",
    "ValidationError",
]
