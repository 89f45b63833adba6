"""Tests for the Miro API client.

These tests use mocked HTTP responses; no request leaves the process.
"""

import json

import httpx
import pytest
import respx

from miro_boards.client import GENERIC_ERROR_MESSAGE, MiroClient
from miro_boards.errors import RemoteError, ValidationError
from miro_boards.types import ItemType


class TestRequest:
    """Tests for the request round trip."""

    @pytest.mark.asyncio
    async def test_sends_bearer_and_json_headers(self, client, miro_api):
        """Every request should carry the token and JSON content headers."""
        route = miro_api.get("/boards").mock(
            return_value=httpx.Response(200, json={"data": []})
        )

        await client.get_boards()

        request = route.calls.last.request
        assert request.headers["Authorization"] == f"Bearer {client.config.token}"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_no_content_returns_none(self, client, miro_api):
        """A 204 response should decode to None."""
        miro_api.delete("/boards/b1/items/i1").mock(return_value=httpx.Response(204))

        assert await client.request("DELETE", "/boards/b1/items/i1") is None

    @pytest.mark.asyncio
    async def test_error_uses_service_message(self, client, miro_api):
        """Non-success responses should surface the service's message."""
        miro_api.get("/boards/missing").mock(
            return_value=httpx.Response(404, json={"message": "Board not found"})
        )

        with pytest.raises(RemoteError) as exc_info:
            await client.get_board("missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Board not found"
        assert str(exc_info.value) == "Miro API error: 404 Board not found"

    @pytest.mark.asyncio
    async def test_error_falls_back_to_reason_phrase(self, client, miro_api):
        """Without a JSON message the HTTP reason phrase should be used."""
        miro_api.get("/boards/b1").mock(return_value=httpx.Response(500, text="oops"))

        with pytest.raises(RemoteError) as exc_info:
            await client.get_board("b1")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_error_generic_fallback(self, client, miro_api):
        """Unknown status codes without a body get the generic message."""
        miro_api.get("/boards/b1").mock(return_value=httpx.Response(599))

        with pytest.raises(RemoteError) as exc_info:
            await client.get_board("b1")

        assert exc_info.value.message == GENERIC_ERROR_MESSAGE

    @pytest.mark.asyncio
    async def test_network_error(self, client, miro_api):
        """Transport failures should become RemoteError without a status."""
        miro_api.get("/boards").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(RemoteError) as exc_info:
            await client.get_boards()

        assert exc_info.value.status_code is None
        assert exc_info.value.code == "network_error"

    @pytest.mark.asyncio
    async def test_timeout(self, client, miro_api):
        """Timeouts should be reported with their own code."""
        miro_api.get("/boards").mock(side_effect=httpx.ReadTimeout("slow"))

        with pytest.raises(RemoteError) as exc_info:
            await client.get_boards()

        assert exc_info.value.code == "timeout"

    @pytest.mark.asyncio
    async def test_invalid_json(self, client, miro_api):
        """A success response that is not JSON should be rejected."""
        miro_api.get("/boards/b1").mock(
            return_value=httpx.Response(200, content=b"<html>")
        )

        with pytest.raises(RemoteError) as exc_info:
            await client.get_board("b1")

        assert exc_info.value.code == "invalid_response"

    @pytest.mark.asyncio
    async def test_unbuildable_url(self, client, miro_api):
        """A URL httpx refuses to build should become a network RemoteError."""
        with pytest.raises(RemoteError) as exc_info:
            await client.request("GET", "/boards/bad\x00id")

        assert exc_info.value.status_code is None
        assert exc_info.value.code == "network_error"
        assert miro_api.calls.call_count == 0


class TestItems:
    """Tests for item listing and CRUD paths."""

    @pytest.mark.asyncio
    async def test_get_items_forwards_cursor_and_limit(self, client, miro_api):
        """Cursor and limit should be sent verbatim and the page returned untouched."""
        page = {"data": [{"id": "i1"}], "cursor": "next-cursor", "limit": 10}
        route = miro_api.get("/boards/b1/items").mock(
            return_value=httpx.Response(200, json=page)
        )

        result = await client.get_items("b1", limit=10, cursor="opaque==")

        params = route.calls.last.request.url.params
        assert params["limit"] == "10"
        assert params["cursor"] == "opaque=="
        assert "type" not in params
        assert result == page

    @pytest.mark.asyncio
    async def test_get_frames_filters_by_type(self, client, miro_api):
        """Frames should be listed through the items endpoint with type=frame."""
        route = miro_api.get("/boards/b1/items").mock(
            return_value=httpx.Response(200, json={"data": [{"id": "f1"}]})
        )

        frames = await client.get_frames("b1")

        assert route.calls.last.request.url.params["type"] == "frame"
        assert frames == [{"id": "f1"}]

    @pytest.mark.asyncio
    async def test_get_items_in_frame(self, client, miro_api):
        """Frame children should be requested with the parent filter."""
        route = miro_api.get("/boards/b1/items").mock(
            return_value=httpx.Response(
                200, json={"data": [{"id": "s1"}, {"id": "s2"}]}
            )
        )

        items = await client.get_items_in_frame("b1", "f1")

        assert route.calls.last.request.url.params["parent_item_id"] == "f1"
        assert [item["id"] for item in items] == ["s1", "s2"]

    @pytest.mark.asyncio
    async def test_create_item_posts_to_collection(self, client, miro_api):
        """Items should be created in their variant's collection."""
        route = miro_api.post("/boards/b1/sticky_notes").mock(
            return_value=httpx.Response(201, json={"id": "n1"})
        )

        created = await client.create_item(
            "b1", ItemType.STICKY_NOTE, {"data": {"content": "hi"}}
        )

        assert created == {"id": "n1"}
        assert json.loads(route.calls.last.request.content) == {
            "data": {"content": "hi"}
        }

    @pytest.mark.asyncio
    async def test_update_typed_item_patches(self, client, miro_api):
        """Updates should use PATCH on the item path."""
        route = miro_api.patch("/boards/b1/connectors/c1").mock(
            return_value=httpx.Response(200, json={"id": "c1"})
        )

        await client.update_typed_item("b1", ItemType.CONNECTOR, "c1", {"shape": "straight"})

        assert route.called

    @pytest.mark.asyncio
    async def test_bulk_create_returns_data(self, client, miro_api):
        """Bulk create should post a list and return the created items."""
        route = miro_api.post("/boards/b1/items/bulk").mock(
            return_value=httpx.Response(201, json={"data": [{"id": "a"}, {"id": "b"}]})
        )

        created = await client.bulk_create_items("b1", [{"type": "text"}, {"type": "text"}])

        assert [item["id"] for item in created] == ["a", "b"]
        assert json.loads(route.calls.last.request.content) == [
            {"type": "text"},
            {"type": "text"},
        ]


class TestPathEscaping:
    """Tests for identifiers placed in request paths."""

    @pytest.mark.asyncio
    async def test_reserved_characters_stay_in_segment(self, client, miro_api):
        """Ids with ``?`` or ``/`` should not add a query or leave the item path."""
        route = miro_api.route(method="DELETE").mock(return_value=httpx.Response(204))

        await client.delete_item("b1", "victim?x=1")
        await client.delete_item("b1", "../../b2/items/z")

        requests = [call.request for call in route.calls]
        assert [r.url.raw_path for r in requests] == [
            b"/v2/boards/b1/items/victim%3Fx%3D1",
            b"/v2/boards/b1/items/..%2F..%2Fb2%2Fitems%2Fz",
        ]
        assert all(r.url.query == b"" for r in requests)

    @pytest.mark.asyncio
    async def test_board_id_escaped(self, client, miro_api):
        """Board ids are escaped the same way as item ids."""
        route = miro_api.route(method="GET").mock(
            return_value=httpx.Response(200, json={"data": []})
        )

        await client.get_items("b1/items#frag", limit=10)

        request = route.calls.last.request
        assert request.url.raw_path.startswith(b"/v2/boards/b1%2Fitems%23frag/items?")
        assert request.url.params["limit"] == "10"

    @pytest.mark.asyncio
    async def test_dot_segments_not_collapsed(self, client, miro_api):
        """An id of ``..`` should not be resolved against the board path."""
        route = miro_api.route(method="GET").mock(
            return_value=httpx.Response(200, json={"id": ".."})
        )

        await client.get_item("b1", "..")

        assert route.calls.last.request.url.raw_path == b"/v2/boards/b1/items/%2E%2E"

    @pytest.mark.asyncio
    async def test_empty_id_rejected(self, client, miro_api):
        """An empty id should fail before any request."""
        with pytest.raises(ValidationError):
            await client.delete_item("b1", "")

        assert miro_api.calls.call_count == 0


class TestLifecycle:
    """Tests for client ownership of the HTTP client."""

    @pytest.mark.asyncio
    async def test_injected_http_client_not_closed(self, client_config):
        """A caller-provided httpx client should stay open."""
        http = httpx.AsyncClient(base_url=client_config.base_url)
        async with MiroClient(client_config, http=http):
            pass
        assert not http.is_closed
        await http.aclose()

    @pytest.mark.asyncio
    async def test_injected_http_client_gets_headers(self, client_config):
        """Auth headers should be applied to an injected client too."""
        with respx.mock(base_url=client_config.base_url) as router:
            route = router.get("/boards").mock(
                return_value=httpx.Response(200, json={"data": []})
            )
            async with httpx.AsyncClient(base_url=client_config.base_url) as http:
                await MiroClient(client_config, http=http).get_boards()

        assert route.calls.last.request.headers["Authorization"].startswith("Bearer ")
