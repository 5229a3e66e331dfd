"""Telegram channel that executes a DeliveryRequest against the Bot API."""

import logging
from typing import Optional

import httpx

from ..communication.outbound import DeliveryRequest
from ..errors import DeliveryError

logger = logging.getLogger("no2tg.channels.telegram")

TELEGRAM_API_URL = "https://api.telegram.org"


class TelegramChannel:
    """Posts to a single chat (usually a channel) as one bot."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        timeout: float = 30.0,
        proxy: Optional[str] = None,
        base_url: str = TELEGRAM_API_URL,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.timeout = timeout
        self.proxy = proxy
        self.base_url = base_url

    def _url(self, method: str) -> str:
        return f"{self.base_url}/bot{self.bot_token}/{method}"

    async def send(self, request: DeliveryRequest) -> dict:
        """Send the request and return Telegram's ``result`` object.

        Raises:
            DeliveryError: on an HTTP error or an ``"ok": false`` reply.
        """
        body = {"chat_id": self.chat_id, **request.payload}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, proxy=self.proxy) as client:
                resp = await client.post(self._url(request.method), json=body)
        except httpx.TransportError as e:
            logger.error(f"Telegram {request.method} transport error: {e}")
            raise DeliveryError(f"Telegram {request.method}: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}

        if resp.status_code >= 400 or not data.get("ok"):
            description = data.get("description") or f"HTTP {resp.status_code}"
            logger.error(f"Telegram {request.method} failed: {description}")
            status = resp.status_code if resp.status_code >= 400 else None
            raise DeliveryError(description, status_code=status)

        logger.debug(f"Telegram {request.method} response: {data}")
        return data.get("result")
