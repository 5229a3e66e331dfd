"""Delivery routing: pick the Telegram API shape from the cover count.

  0 covers  → sendMessage     (text)
  1 cover   → sendPhoto       (text becomes the caption)
  2+ covers → sendMediaGroup  (caption on the first photo only)

The chat id is not part of the payload; the channel adds it on send.
"""

from dataclasses import dataclass, field

PARSE_MODE = "MarkdownV2"

SEND_MESSAGE = "sendMessage"
SEND_PHOTO = "sendPhoto"
SEND_MEDIA_GROUP = "sendMediaGroup"


@dataclass(frozen=True)
class DeliveryRequest:
    method: str
    payload: dict = field(default_factory=dict)


def route(final_text: str, covers: list[str]) -> DeliveryRequest:
    """Build the request payload for ``final_text`` and its covers."""
    if not covers:
        return DeliveryRequest(SEND_MESSAGE, {"text": final_text, "parse_mode": PARSE_MODE})

    if len(covers) == 1:
        return DeliveryRequest(
            SEND_PHOTO,
            {"photo": covers[0], "caption": final_text, "parse_mode": PARSE_MODE},
        )

    media = [
        {"type": "photo", "media": cover, "parse_mode": PARSE_MODE}
        for cover in covers
    ]
    # Telegram shows a media group's caption only from its first item
    media[0]["caption"] = final_text
    return DeliveryRequest(SEND_MEDIA_GROUP, {"media": media})
