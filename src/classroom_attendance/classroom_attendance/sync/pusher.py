from __future__ import annotations

import json
from typing import Any, Mapping, Optional, Protocol

import requests


class AttendancePusher(Protocol):
    def push(self, url: str, payload: Mapping[str, Any]) -> None:
        """Send one attendance event. Raise on transport failure."""

        raise NotImplementedError


class WebhookAttendancePusher:
    """POST the payload as a text/plain JSON body to a spreadsheet webhook.

    The response is not inspected. Each push is its own `requests.post` call.
    """

    def __init__(self, *, timeout: Optional[float] = None):
        self._timeout = timeout

    def push(self, url: str, payload: Mapping[str, Any]) -> None:
        requests.post(
            url,
            data=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            headers={"Content-Type": "text/plain"},
            timeout=self._timeout,
        )
