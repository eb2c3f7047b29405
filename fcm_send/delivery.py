"""
Delivery of one message to the FCM HTTP v1 endpoint.

The response is printed as-is: the HTTP status is recorded but never treated as
success or failure. A network failure is printed too and not retried.
"""
import json
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeliveryResult:
    body: Optional[str] = None
    status_code: Optional[int] = None
    error: Optional[TransportError] = None

    @property
    def sent(self) -> bool:
        return self.error is None


def _headers(access_token: str) -> dict:
    return {
        "Authorization": f"Bearer {access_token}",
        "Content-Type": "application/json; UTF-8",
    }


async def send_message(settings, access_token: str, message: dict, transport=None) -> DeliveryResult:
    body_json = json.dumps(message, separators=(",", ":"))
    logger.info("POST %s", settings.url)

    try:
        async with httpx.AsyncClient(transport=transport) as client:
            resp = await client.post(settings.url, headers=_headers(access_token), content=body_json)
    except httpx.TransportError as exc:
        error = TransportError(f"{type(exc).__name__}: {exc}")
        print("Unable to send message to Firebase")
        print(error)
        return DeliveryResult(error=error)

    logger.info("Response status=%s", resp.status_code)
    print("Message sent to Firebase for delivery, response:")
    print(resp.text)
    return DeliveryResult(body=resp.text, status_code=resp.status_code)
