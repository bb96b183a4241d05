from __future__ import annotations
import random
import uuid
from typing import Dict, Optional, Tuple

from models import MAX_GUESS, MIN_GUESS, Feedback, GameRecord

class GuessGameEngine:
    """
    Server-side number guessing game.
    - One secret target per session id, drawn from [MIN_GUESS, MAX_GUESS].
    - A CORRECT guess ends the session and removes it; the player must start or reset.
    """
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self._sessions: Dict[str, GameRecord] = {}

    # ---------- Session lifecycle ----------
    def start_session(self, session_id: Optional[str] = None) -> GameRecord:
        sid = session_id or str(uuid.uuid4())
        record = GameRecord(session_id=sid, target=self.rng.randint(MIN_GUESS, MAX_GUESS))
        self._sessions[sid] = record
        return record

    def reset_session(self, session_id: str) -> GameRecord:
        # a fresh target under the same id; works after a finished game too
        return self.start_session(session_id)

    def get_state(self, session_id: Optional[str]) -> Optional[GameRecord]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    # ---------- Guess handling ----------
    def guess(self, session_id: Optional[str], number: int) -> Tuple[Feedback, GameRecord]:
        record = self._require_session(session_id)
        if number < MIN_GUESS or number > MAX_GUESS:
            raise ValueError(f"Number must be between {MIN_GUESS} and {MAX_GUESS}")

        record.guess_count += 1
        if number < record.target:
            return Feedback.TOO_LOW, record
        if number > record.target:
            return Feedback.TOO_HIGH, record

        record.finished = True
        del self._sessions[record.session_id]
        return Feedback.CORRECT, record

    # ---------- helpers ----------
    def _require_session(self, session_id: Optional[str]) -> GameRecord:
        st = self.get_state(session_id)
        if not st:
            raise LookupError("No active game. Start a new game.")
        return st
