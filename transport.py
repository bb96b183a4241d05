from __future__ import annotations
import logging
import os
from typing import Any, Optional

import requests
from dotenv import load_dotenv

from models import RawResponse, TransportError

load_dotenv()

DEFAULT_BASE_URL = os.getenv("GUESS_GAME_BASE_URL", "http://127.0.0.1:8000")
DEFAULT_TIMEOUT = float(os.getenv("GUESS_GAME_TIMEOUT", "10"))
LOGGER = logging.getLogger(__name__)


class GuessTransport:
    """
    HTTP boundary to the guess server.
    The server keys the game on a cookie, so one client session must be reused
    for every call of a play-through.
    """
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[Any] = None,
    ):
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.session = session if session is not None else requests.Session()

    def initiate_session(self) -> RawResponse:
        return self._send("GET", "/api")

    def reset_session(self) -> RawResponse:
        return self._send("GET", "/api/reset")

    def submit_guess(self, value: int) -> RawResponse:
        return self._send("POST", "/api", payload={"number": value})

    def _send(self, method: str, path: str, payload: Optional[dict] = None) -> RawResponse:
        url = f"{self.base_url}{path}"
        LOGGER.debug("guess_request_prepared", extra={"method": method, "url": url})
        try:
            if method == "POST":
                resp = self.session.post(url, json=payload, timeout=self.timeout)
            else:
                resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            LOGGER.error(
                "guess_request_transport_error",
                extra={"method": method, "url": url, "error": str(e)},
            )
            raise TransportError(f"Could not reach game server: {e}") from e

        raw = RawResponse.from_response(resp)
        LOGGER.debug(
            "guess_response_received",
            extra={"url": url, "http_status": raw.status, "content_type": raw.content_type},
        )
        return raw
