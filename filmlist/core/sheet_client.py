"""Spreadsheet backend: Google Apps Script web app over HTTP (httpx, async)."""
import logging
from typing import Any, List, Optional

import httpx

from filmlist.config import HTTP_TIMEOUT_SEC, SHEET_API_URL
from filmlist.core.errors import NotFoundError, ParseError, RemoteError
from filmlist.core.field_mapper import to_internal_many, to_remote
from filmlist.models.film import Film

logger = logging.getLogger(__name__)


class SheetClient:
    """read/add/edit/delete against the sheet endpoint.

    The endpoint answers every call with a JSON object whose ``status`` is
    ``"success"`` on success; anything else carries an optional ``message``.
    Edit and delete target a row through the film's ``row_index``.
    """

    def __init__(
        self,
        url: str = SHEET_API_URL,
        *,
        timeout: float = HTTP_TIMEOUT_SEC,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            # Apps Script replies with a 302 to googleusercontent.com
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, **kwargs: Any) -> dict:
        if not self._url:
            raise RemoteError("Spreadsheet endpoint URL is not configured")
        try:
            response = await self._get_client().request(method, self._url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteError(f"HTTP {e.response.status_code} from spreadsheet endpoint") from e
        except httpx.HTTPError as e:
            raise RemoteError(f"Cannot reach spreadsheet endpoint: {e}") from e
        try:
            body = response.json()
        except ValueError as e:
            raise ParseError("Spreadsheet endpoint did not return JSON") from e
        if not isinstance(body, dict):
            raise ParseError("Spreadsheet endpoint returned an unexpected payload")
        return body

    async def _post(self, action: str, data: dict, default_message: str) -> dict:
        result = await self._request("POST", json={"action": action, "data": data})
        if result.get("status") != "success":
            raise RemoteError(result.get("message") or default_message)
        logger.info("Sheet %s ok", action)
        return result

    async def read(self) -> List[Film]:
        result = await self._request("GET", params={"action": "read"})
        if result.get("status") != "success":
            raise RemoteError(result.get("message") or "Failed to load data")
        rows = result.get("data")
        if rows is None:
            rows = []
        if not isinstance(rows, list) or not all(isinstance(r, dict) for r in rows):
            raise ParseError("Spreadsheet data is not a list of rows")
        logger.debug("Sheet read: %d rows", len(rows))
        return to_internal_many(rows)

    async def add(self, film: Film) -> dict:
        return await self._post("add", to_remote(film), "Failed to save data")

    async def edit(self, film: Film) -> dict:
        if film.row_index is None:
            raise NotFoundError(f"Film {film.id} has no spreadsheet row")
        return await self._post("edit", to_remote(film), "Failed to save data")

    async def delete(self, film: Film) -> dict:
        """Delete by row handle; rows shift afterwards so callers must reload."""
        if film.row_index is None:
            raise NotFoundError(f"Film {film.id} has no spreadsheet row")
        return await self._post("delete", {"rowIndex": film.row_index}, "Failed to delete data")
