"""Tests for the board resource catalog."""

import json

import httpx
import pytest

from miro_boards.errors import ValidationError
from miro_boards.models import Board
from miro_boards.resources import (
    RESOURCE_MIME_TYPE,
    board_resource,
    board_uri,
    list_board_resources,
    parse_board_uri,
    read_board_resource,
)


class TestBoardUri:
    """Tests for building and parsing board URIs."""

    def test_build(self):
        """Board URIs should use the miro://board/ prefix."""
        assert board_uri("uXjVO123=") == "miro://board/uXjVO123="

    def test_parse(self):
        """Parsing should return the board id."""
        assert parse_board_uri("miro://board/uXjVO123=") == "uXjVO123="

    @pytest.mark.parametrize(
        "uri",
        ["http://board/x", "miro://boards/x", "board/x", "", "miro://frame/x"],
    )
    def test_wrong_prefix_rejected(self, uri):
        """URIs without the board prefix should be rejected."""
        with pytest.raises(ValidationError) as exc_info:
            parse_board_uri(uri)
        assert "miro://board/" in exc_info.value.message

    def test_missing_id_rejected(self):
        """A bare prefix should be rejected."""
        with pytest.raises(ValidationError):
            parse_board_uri("miro://board/")


class TestBoardResource:
    """Tests for describing boards as resources."""

    def test_description_fallback(self):
        """Boards without a description should get a generated one."""
        resource = board_resource(Board(id="b1", name="Roadmap"))

        assert resource.uri == "miro://board/b1"
        assert resource.name == "Roadmap"
        assert resource.description == "Miro board: Roadmap"
        assert resource.mime_type == RESOURCE_MIME_TYPE

    def test_description_kept(self):
        """A board's own description should be used when present."""
        resource = board_resource(Board(id="b1", name="R", description="Q3 plan"))
        assert resource.description == "Q3 plan"


class TestCatalog:
    """Tests for listing and reading board resources."""

    @pytest.mark.asyncio
    async def test_list(self, client, miro_api):
        """Each board should become one resource."""
        miro_api.get("/boards").mock(
            return_value=httpx.Response(
                200,
                json={
                    "data": [
                        {"id": "b1", "name": "One", "type": "board"},
                        {"id": "b2", "name": "Two", "description": "Second"},
                    ]
                },
            )
        )

        resources = await list_board_resources(client)

        assert [r.uri for r in resources] == ["miro://board/b1", "miro://board/b2"]
        assert resources[1].description == "Second"

    @pytest.mark.asyncio
    async def test_read(self, client, miro_api):
        """Reading a board should return its items as indented JSON."""
        items = [{"id": "i1", "type": "sticky_note"}]
        miro_api.get("/boards/b1/items").mock(
            return_value=httpx.Response(200, json={"data": items, "cursor": "c"})
        )

        text = await read_board_resource(client, "miro://board/b1")

        assert json.loads(text) == items
        assert text == json.dumps(items, indent=2)

    @pytest.mark.asyncio
    async def test_read_bad_uri_makes_no_request(self, client, miro_api):
        """A malformed URI should fail before any request."""
        with pytest.raises(ValidationError):
            await read_board_resource(client, "http://example.com/board/b1")
        assert miro_api.calls.call_count == 0
