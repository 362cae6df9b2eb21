"""
Noteboard Client: HTTP API Wrapper
===================================

What:  Async wrapper around the Noteboard REST API.
How:   One httpx.AsyncClient per NotesApi. Every request sends JSON headers;
       a non-2xx status or a transport failure raises NotesApiError; a 204
       answer yields None. Responses are validated into NoteResponse.
Who:   NoteBoard (noteboard.client.board) and anything scripting the API.

No retries and no timeouts beyond httpx's defaults: every failure goes
straight back to the caller.

Example:
    async with NotesApi("http://localhost:8000") as api:
        note = await api.create_note({"title": "Groceries", "content": "Milk, eggs"})
        await api.update_note(note.id, {"color": "#10B981"})
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from noteboard.config import settings
from noteboard.exceptions import NoteboardError
from noteboard.schemas.note import NoteResponse

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class NotesApiError(NoteboardError):
    """
    Raised when a call to the note service does not succeed.

    Attributes:
        status_code: HTTP status of the failed response; None when the request
                     never got an answer (connection refused, DNS, ...)
    """

    def __init__(
        self,
        message: str = "Request to the note service failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code


class NotesApi:
    """
    Client for the /notes endpoints.

    Args:
        base_url:  Service root, e.g. http://localhost:8000 (defaults to settings)
        transport: Optional httpx transport; tests pass httpx.ASGITransport
                   to talk to an in-process app
        client:    Pre-built AsyncClient; takes precedence over the above
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            transport=transport,
            headers=JSON_HEADERS,
        )

    async def __aenter__(self) -> "NotesApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        """
        Send one request and decode its JSON answer.

        Returns:
            Decoded JSON, or None for 204 No Content.

        Raises:
            NotesApiError: transport failure or non-2xx status
        """
        try:
            response = await self._client.request(method, path, json=body, headers=JSON_HEADERS)
        except httpx.HTTPError as e:
            logger.error("API request failed: %s %s: %s", method, path, e)
            raise NotesApiError(
                message=f"Could not reach the note service: {e}",
                context={"method": method, "path": path},
            ) from e

        if not response.is_success:
            logger.error("API request failed: %s %s -> %d", method, path, response.status_code)
            raise NotesApiError(
                message=f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                context={"method": method, "path": path},
            )

        if response.status_code == 204:
            return None
        return response.json()

    # ── Operations ────────────────────────────────────────────────────────

    async def list_notes(self) -> List[NoteResponse]:
        data = await self._request("GET", "/notes")
        return [NoteResponse.model_validate(item) for item in data]

    async def get_note(self, note_id: str) -> NoteResponse:
        data = await self._request("GET", f"/notes/{note_id}")
        return NoteResponse.model_validate(data)

    async def create_note(self, fields: Dict[str, str]) -> NoteResponse:
        """POST /notes with {title, content, color?}."""
        data = await self._request("POST", "/notes", body=fields)
        return NoteResponse.model_validate(data)

    async def update_note(self, note_id: str, fields: Dict[str, str]) -> NoteResponse:
        """PATCH /notes/{id} with any subset of {title, content, color}."""
        data = await self._request("PATCH", f"/notes/{note_id}", body=fields)
        return NoteResponse.model_validate(data)

    async def delete_note(self, note_id: str) -> None:
        await self._request("DELETE", f"/notes/{note_id}")
