"""
Noteboard Client: NotesApi Tests
=================================

What:  Request/response handling of the HTTP wrapper.
How:   httpx.MockTransport captures requests and returns canned responses;
       one test talks to the real app through ASGITransport.
"""

import json

import httpx
import pytest

from noteboard.client.api import NotesApi, NotesApiError

NOTE_JSON = {
    "id": "123",
    "title": "Test Note",
    "content": "This is a test note",
    "color": "#3B82F6",
    "createdAt": "2026-01-15T09:30:00Z",
    "updatedAt": "2026-01-15T09:30:00Z",
}


def api_with(handler) -> NotesApi:
    return NotesApi(base_url="http://notes.test", transport=httpx.MockTransport(handler))


class TestNotesApiRequests:

    @pytest.mark.asyncio
    async def test_create_sends_json_and_parses_note(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["content_type"] = request.headers["Content-Type"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json=NOTE_JSON)

        async with api_with(handler) as api:
            note = await api.create_note({"title": "Test Note", "content": "This is a test note"})

        assert seen == {
            "method": "POST",
            "path": "/notes",
            "content_type": "application/json",
            "body": {"title": "Test Note", "content": "This is a test note"},
        }
        assert note.id == "123"
        assert note.updated_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_update_uses_patch(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PATCH"
            assert request.url.path == "/notes/123"
            return httpx.Response(200, json={**NOTE_JSON, "title": "Updated Title"})

        async with api_with(handler) as api:
            note = await api.update_note("123", {"title": "Updated Title"})

        assert note.title == "Updated Title"

    @pytest.mark.asyncio
    async def test_delete_204_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "DELETE"
            return httpx.Response(204)

        async with api_with(handler) as api:
            assert await api.delete_note("123") is None

    @pytest.mark.asyncio
    async def test_list_parses_every_note(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[NOTE_JSON, {**NOTE_JSON, "id": "456"}])

        async with api_with(handler) as api:
            notes = await api.list_notes()

        assert [n.id for n in notes] == ["123", "456"]


class TestNotesApiErrors:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_non_2xx_raises_with_status(self, status):
        async with api_with(lambda request: httpx.Response(status, json={"error": "x"})) as api:
            with pytest.raises(NotesApiError) as excinfo:
                await api.get_note("123")

        assert excinfo.value.status_code == status
        assert str(status) in excinfo.value.message

    @pytest.mark.asyncio
    async def test_transport_failure_raises_without_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with api_with(handler) as api:
            with pytest.raises(NotesApiError) as excinfo:
                await api.list_notes()

        assert excinfo.value.status_code is None


class TestNotesApiAgainstApp:

    @pytest.mark.asyncio
    async def test_round_trip_through_service(self, app):
        async with NotesApi(base_url="http://test", transport=httpx.ASGITransport(app=app)) as api:
            created = await api.create_note(
                {"title": "Groceries", "content": "Milk, eggs", "color": "#10B981"}
            )
            fetched = await api.get_note(created.id)
            await api.delete_note(created.id)

            with pytest.raises(NotesApiError) as excinfo:
                await api.get_note(created.id)

        assert fetched == created
        assert excinfo.value.status_code == 404
