"""Static prompt catalog.

A single named prompt whose body is read from a markdown file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from miro_boards.errors import UnknownPromptError

logger = logging.getLogger(__name__)

WORKING_WITH_MIRO = "Working with MIRO"


@dataclass(frozen=True)
class PromptInfo:
    """Name and description of an available prompt."""

    name: str
    description: str


PROMPTS: tuple[PromptInfo, ...] = (
    PromptInfo(
        name=WORKING_WITH_MIRO,
        description="Basic prompt for working with MIRO boards",
    ),
)


def list_prompts() -> list[PromptInfo]:
    """Return the available prompts."""
    return list(PROMPTS)


def load_prompt(name: str, path: Path) -> str:
    """Return the text of a prompt.

    Args:
        name: Prompt name.
        path: File holding the prompt body.

    Returns:
        The prompt text.

    Raises:
        UnknownPromptError: If the name is not in the catalog.
        OSError: If the file cannot be read.
    """
    if name not in {prompt.name for prompt in PROMPTS}:
        raise UnknownPromptError(name)
    logger.debug("Loading prompt %r from %s", name, path)
    return path.read_text(encoding="utf-8")


__all__ = [
    "PROMPTS",
    "WORKING_WITH_MIRO",
    "PromptInfo",
    "list_prompts",
    "load_prompt",
]
