from __future__ import annotations
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

MIN_GUESS = 0
MAX_GUESS = 1000


class ValidationError(ValueError):
    """Guess input rejected before anything is sent."""


class TransportError(RuntimeError):
    """No response could be obtained from the game server."""


class Feedback(str, Enum):
    TOO_LOW = "TOO_LOW"
    TOO_HIGH = "TOO_HIGH"
    CORRECT = "CORRECT"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Feedback.TOO_HIGH: "Too High",
    Feedback.TOO_LOW: "Too Low",
    Feedback.CORRECT: "Correct",
}

# ---------- Outcomes ----------
@dataclass(frozen=True)
class FeedbackOutcome:
    feedback: Feedback

@dataclass(frozen=True)
class MessageOutcome:
    text: str

@dataclass(frozen=True)
class ErrorOutcome:
    text: str

Outcome = Union[FeedbackOutcome, MessageOutcome, ErrorOutcome]

# ---------- Transport response ----------
@dataclass(frozen=True)
class RawResponse:
    status: int
    content_type: Optional[str] = None
    text: str = ""

    @classmethod
    def from_response(cls, resp: Any) -> RawResponse:
        """Snapshot a requests/httpx response; the body is read exactly once."""
        return cls(
            status=resp.status_code,
            content_type=resp.headers.get("content-type"),
            text=resp.text or "",
        )

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def claims_json(self) -> bool:
        return "application/json" in (self.content_type or "").lower()

    def json(self) -> Any:
        return json.loads(self.text)

# ---------- Client session ----------
@dataclass
class SessionState:
    started: bool = False
    finished: bool = False
    guess_count: int = 0
    last_message: str = ""
    last_error: str = ""
    pending: bool = False

# ---------- Server side ----------
@dataclass
class GameRecord:
    session_id: str
    target: int
    guess_count: int = 0
    finished: bool = False
