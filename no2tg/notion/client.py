"""Notion REST client for pages, database queries and block children."""

import logging
from typing import Optional

import httpx

from ..errors import ContentStoreError

logger = logging.getLogger("no2tg.notion.client")

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"
PUBLISHED_STATUS = "Published"


class NotionClient:
    """Thin async wrapper over the handful of Notion endpoints no2tg uses."""

    def __init__(
        self,
        auth_key: str,
        timeout: float = 30.0,
        proxy: Optional[str] = None,
        base_url: str = NOTION_API_URL,
    ):
        self.auth_key = auth_key
        self.timeout = timeout
        self.proxy = proxy
        self.base_url = base_url

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.auth_key}",
            "Notion-Version": NOTION_VERSION,
            "Content-Type": "application/json",
        }

    @staticmethod
    def _error_message(resp) -> str:
        try:
            data = resp.json()
        except ValueError:
            return f"HTTP {resp.status_code}"
        return data.get("message") or data.get("code") or f"HTTP {resp.status_code}"

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, proxy=self.proxy) as client:
                resp = await client.request(
                    method,
                    f"{self.base_url}{path}",
                    headers=self._headers(),
                    **kwargs,
                )
        except httpx.TransportError as e:
            logger.error(f"Notion {method} {path} transport error: {e}")
            raise ContentStoreError(f"Notion {method} {path}: {e}") from e

        if resp.status_code >= 400:
            message = self._error_message(resp)
            logger.error(f"Notion {method} {path} failed: {resp.status_code} {message}")
            raise ContentStoreError(message, status_code=resp.status_code)

        return resp.json()

    async def retrieve_page(self, page_id: str) -> Optional[dict]:
        """Fetch a page object, or None if Notion does not know the ID."""
        try:
            return await self._request("GET", f"/pages/{page_id}")
        except ContentStoreError as e:
            if e.status_code == 404:
                return None
            raise

    async def query_database(
        self,
        database_id: str,
        filter: Optional[dict] = None,
        page_size: int = 50,
    ) -> list[dict]:
        """Run a single-page database query and return its results."""
        body: dict = {"page_size": page_size}
        if filter:
            body["filter"] = filter
        data = await self._request("POST", f"/databases/{database_id}/query", json=body)
        return data.get("results", [])

    async def list_block_children(self, block_id: str, page_size: int = 100) -> list[dict]:
        """Fetch every child block, following pagination cursors."""
        blocks: list[dict] = []
        cursor: Optional[str] = None

        while True:
            params: dict = {"page_size": page_size}
            if cursor:
                params["start_cursor"] = cursor
            data = await self._request("GET", f"/blocks/{block_id}/children", params=params)
            blocks.extend(data.get("results", []))

            if not data.get("has_more") or not data.get("next_cursor"):
                break
            cursor = data["next_cursor"]

        return blocks

    async def update_page_status(self, page_id: str, status: str = PUBLISHED_STATUS) -> dict:
        """Set the page's ``Status`` select property."""
        return await self._request(
            "PATCH",
            f"/pages/{page_id}",
            json={"properties": {"Status": {"select": {"name": status}}}},
        )
