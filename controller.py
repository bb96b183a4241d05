from __future__ import annotations
import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional, Union

from interpreter import interpret
from models import (
    MAX_GUESS,
    MIN_GUESS,
    ErrorOutcome,
    Feedback,
    FeedbackOutcome,
    MessageOutcome,
    Outcome,
    SessionState,
    TransportError,
    ValidationError,
)
from transport import GuessTransport

LOGGER = logging.getLogger(__name__)

RESET_MESSAGE = "Game reset. Counter set to 0."
NOT_STARTED = "Start a game first."
ALREADY_FINISHED = "Game finished. Reset to play again."


def validate_guess(raw: Union[str, int]) -> int:
    """Parse user input into a guess in [MIN_GUESS, MAX_GUESS] or raise ValidationError."""
    if isinstance(raw, bool):
        raise ValidationError(_range_message())
    if isinstance(raw, int):
        n = raw
    else:
        text = str(raw).strip()
        if not text:
            raise ValidationError("Please enter a number")
        # int() also takes "1_000" and non-ASCII digits
        if not text.isascii() or "_" in text:
            raise ValidationError(_range_message())
        try:
            n = int(text)
        except ValueError:
            try:
                f = float(text)
            except ValueError:
                raise ValidationError(_range_message()) from None
            # "5.0" is an integer guess, "2.5" is not
            if not f.is_integer():
                raise ValidationError(_range_message())
            n = int(f)
    if n < MIN_GUESS or n > MAX_GUESS:
        raise ValidationError(_range_message())
    return n

def _range_message() -> str:
    return f"Enter an integer between {MIN_GUESS} and {MAX_GUESS}"


class GameController:
    """
    Owns the client-side SessionState.
    - start: any state -> Active with fresh counters.
    - reset: Active/Finished -> Active, counters cleared.
    - guess: validates locally, submits, applies the interpreted outcome.
    No intent raises; failures land in last_error.
    """
    def __init__(self, transport: GuessTransport):
        self.transport = transport
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return replace(self._state)

    # ---------- intents ----------
    def start(self) -> Outcome:
        self._clear_messages()
        outcome = self._call(self.transport.initiate_session)
        if isinstance(outcome, ErrorOutcome):
            self._state.last_error = outcome.text
            return outcome
        self._state.started = True
        self._state.finished = False
        self._state.guess_count = 0
        LOGGER.info("game_started")
        return outcome

    def reset(self) -> Optional[Outcome]:
        self._clear_messages()
        if not self._state.started:
            self._state.last_error = NOT_STARTED
            return None
        outcome = self._call(self.transport.reset_session)
        if isinstance(outcome, ErrorOutcome):
            self._state.last_error = outcome.text
            return outcome
        self._state.guess_count = 0
        self._state.finished = False
        self._state.last_message = RESET_MESSAGE
        LOGGER.info("game_reset")
        return outcome

    def guess(self, raw: Union[str, int]) -> Optional[Outcome]:
        self._clear_messages()
        try:
            n = validate_guess(raw)
            if not self._state.started:
                raise ValidationError(NOT_STARTED)
            if self._state.finished:
                raise ValidationError(ALREADY_FINISHED)
        except ValidationError as e:
            self._state.last_error = str(e)
            return None

        outcome = self._call(lambda: self.transport.submit_guess(n))
        st = self._state
        if isinstance(outcome, ErrorOutcome):
            st.last_error = outcome.text
        elif isinstance(outcome, FeedbackOutcome):
            st.guess_count += 1
            st.finished = outcome.feedback is Feedback.CORRECT
            st.last_message = f"{outcome.feedback.label}. Total guess {st.guess_count}"
        elif isinstance(outcome, MessageOutcome):
            st.guess_count += 1
            st.last_message = f"{outcome.text}. Total guess {st.guess_count}"
        LOGGER.debug(
            "guess_applied",
            extra={"guess": n, "outcome": type(outcome).__name__, "guess_count": st.guess_count},
        )
        return outcome

    # ---------- helpers ----------
    def _call(self, request) -> Outcome:
        with self._pending():
            try:
                raw = request()
            except TransportError as e:
                return ErrorOutcome(str(e))
            except Exception as e:
                LOGGER.exception("guess_request_unexpected_error")
                return ErrorOutcome(str(e) or type(e).__name__)
            return interpret(raw)

    @contextmanager
    def _pending(self) -> Iterator[None]:
        self._state.pending = True
        try:
            yield
        finally:
            self._state.pending = False

    def _clear_messages(self) -> None:
        self._state.last_message = ""
        self._state.last_error = ""
