"""Tests for the prompt catalog."""

import pytest

from miro_boards.config import Settings
from miro_boards.errors import UnknownPromptError
from miro_boards.prompts import WORKING_WITH_MIRO, list_prompts, load_prompt


class TestPrompts:
    """Tests for listing and loading prompts."""

    def test_single_prompt_listed(self):
        """The catalog should contain the working-with-Miro prompt."""
        prompts = list_prompts()

        assert [p.name for p in prompts] == [WORKING_WITH_MIRO]
        assert prompts[0].description == "Basic prompt for working with MIRO boards"

    def test_load_from_file(self, tmp_path):
        """The prompt body should be read from the given file."""
        path = tmp_path / "facts.md"
        path.write_text("# Facts\nBoards contain items.\n", encoding="utf-8")

        assert load_prompt(WORKING_WITH_MIRO, path) == "# Facts\nBoards contain items.\n"

    def test_bundled_prompt_loads(self):
        """The bundled prompt should be readable and mention boards."""
        text = load_prompt(WORKING_WITH_MIRO, Settings(_env_file=None).prompt_path)
        assert "board" in text.lower()

    def test_unknown_prompt(self, tmp_path):
        """Unknown prompt names should be rejected."""
        with pytest.raises(UnknownPromptError) as exc_info:
            load_prompt("Nope", tmp_path / "missing.md")
        assert exc_info.value.code == "unknown_prompt"
