from __future__ import annotations
from typing import Any, Dict, Optional

from models import (
    ErrorOutcome,
    Feedback,
    FeedbackOutcome,
    MessageOutcome,
    Outcome,
    RawResponse,
)

ERROR_FIELDS = ("error", "message", "detail")
FEEDBACK_FIELDS = ("feedback", "message", "result")
FALLBACK_MESSAGE = "Submitted."


def interpret(raw: RawResponse) -> Outcome:
    """
    Classify a game server response into a single Outcome.
    Servers disagree on field names and content types, so every path degrades
    to a Message or Error outcome instead of raising.
    """
    if not raw.ok:
        return ErrorOutcome(_error_text(raw))

    data: Dict[str, Any] = _parse_object(raw) if raw.claims_json else {}

    for key in FEEDBACK_FIELDS:
        fb = _as_feedback(data.get(key))
        if fb is not None:
            return FeedbackOutcome(fb)

    text = "" if raw.claims_json else raw.text.strip()
    if not raw.claims_json:
        fb = _as_feedback(text)
        if fb is not None:
            return FeedbackOutcome(fb)

    return MessageOutcome(
        text
        or _nonblank(data.get("message"))
        or _nonblank(data.get("result"))
        or FALLBACK_MESSAGE
    )

# ---------- helpers ----------
def _error_text(raw: RawResponse) -> str:
    if raw.claims_json:
        data = _parse_object(raw)
        # first present field wins, even if it turns out unusable
        value = next((data[k] for k in ERROR_FIELDS if data.get(k) is not None), None)
        msg = _nonblank(value)
        if msg:
            return msg
    return raw.text.strip() or f"HTTP {raw.status}"

def _parse_object(raw: RawResponse) -> Dict[str, Any]:
    try:
        parsed = raw.json()
    except (ValueError, RecursionError):
        # unparsable or absurdly nested bodies count as empty
        return {}
    return parsed if isinstance(parsed, dict) else {}

def _as_feedback(value: Any) -> Optional[Feedback]:
    # exact literal match only; "too_low" is not feedback
    if isinstance(value, str) and value in Feedback.__members__:
        return Feedback(value)
    return None

def _nonblank(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
