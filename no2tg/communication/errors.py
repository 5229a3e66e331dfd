"""Error classification for user-facing CLI messages."""

import asyncio
import httpx

from ..errors import (
    ConfigurationError,
    ContentStoreError,
    DeliveryError,
    RecordValidationError,
    UnknownCategoryError,
)


def _classify_status(service: str, code: int) -> str:
    if code == 429:
        return f"{service} rate limited the request. Please wait a moment and try again."
    if code in (401, 403):
        return f"{service} authentication error. Check the token and its permissions."
    if code == 404:
        return f"{service} could not find the requested object."
    if code == 400:
        return f"{service} rejected the request as malformed."
    if 500 <= code < 600:
        return f"{service} is having server issues. Please try again later."
    return f"{service} returned HTTP {code}."


def _classify_transport(e: BaseException | None) -> str | None:
    if isinstance(e, (httpx.TimeoutException, asyncio.TimeoutError)):
        return "Request timed out. Please try again."
    if isinstance(e, httpx.ConnectError):
        return "Cannot connect. Check connectivity and proxy settings."
    return None


def classify_error(e: Exception) -> str:
    """Classify any exception into a one-line message for the operator.

    The full traceback is logged separately; this is what gets printed.
    """
    # 1-3: Record / configuration problems (nothing was sent)
    if isinstance(e, UnknownCategoryError):
        return f"Unknown category {e.label!r}. Nothing was published."
    if isinstance(e, RecordValidationError):
        return f"Invalid record: {e}. Nothing was published."
    if isinstance(e, ConfigurationError):
        return f"Configuration error: {e}"

    # 4-5: Typed adapter errors, by status when known or by the wrapped network error
    if isinstance(e, (ContentStoreError, DeliveryError)):
        network = _classify_transport(e.__cause__)
        if network:
            service = "Notion" if isinstance(e, ContentStoreError) else "Telegram"
            return f"{service}: {network}"
    if isinstance(e, ContentStoreError):
        if e.status_code:
            return _classify_status("Notion", e.status_code)
        return f"Notion request failed: {e}"
    if isinstance(e, DeliveryError):
        if e.status_code:
            return f"{_classify_status('Telegram', e.status_code)} ({e})"
        return f"Telegram request failed: {e}"

    # 6: Raw httpx status errors that escaped an adapter
    if isinstance(e, httpx.HTTPStatusError):
        return _classify_status("Remote API", e.response.status_code)

    # 7-8: Network / timeout errors
    network = _classify_transport(e)
    if network:
        return network

    # 9: Unexpected response shape
    if isinstance(e, (KeyError, IndexError)):
        return "Unexpected response format from remote API."

    # 10: Fallback, with the type name for debugging
    type_name = type(e).__name__
    return f"Something went wrong ({type_name}). Check logs for details."
