from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, Optional

import requests

from controller import GameController
from models import MAX_GUESS, MIN_GUESS, Feedback, FeedbackOutcome, SessionState
from transport import DEFAULT_BASE_URL, GuessTransport

# -----------------------------
# Pretty printers
# -----------------------------
def print_state(state: SessionState) -> None:
    if state.last_error:
        print(f"[ERROR] {state.last_error}")
    elif state.last_message:
        print(state.last_message)

def prompt_label(state: SessionState) -> str:
    action = "n = start new game" if state.finished else "r = reset game"
    return f"Your guess ({MIN_GUESS}-{MAX_GUESS}; {action}, q = quit): "

# -----------------------------
# Interactive play loop
# -----------------------------
def interactive_play(ctrl: GameController, read: Callable[[str], str] = input) -> None:
    ctrl.start()
    state = ctrl.state
    if not state.started:
        print_state(state)
        return
    print("\n✅ Game started. Guess the number!")

    while True:
        try:
            line = read(prompt_label(ctrl.state)).strip()
        except EOFError:
            break
        cmd = line.lower()
        if cmd in ("q", "quit", "exit"):
            break
        if cmd in ("r", "n", "reset"):
            ctrl.reset()
        else:
            ctrl.guess(line)
        print_state(ctrl.state)

# -----------------------------
# Auto-demo play loop
# -----------------------------
def auto_demo_play(ctrl: GameController) -> Optional[int]:
    """
    Bisects [MIN_GUESS, MAX_GUESS] until CORRECT.
    Returns the number of guesses used, or None when the server gave up on us.
    """
    print("\n🤖 Running auto-demo...")
    ctrl.start()
    if not ctrl.state.started:
        print_state(ctrl.state)
        return None

    lo, hi = MIN_GUESS, MAX_GUESS
    while lo <= hi:
        mid = (lo + hi) // 2
        outcome = ctrl.guess(mid)
        state = ctrl.state
        print(f"Guess {mid}: ", end="")
        print_state(state)
        if not isinstance(outcome, FeedbackOutcome):
            return None
        if outcome.feedback is Feedback.CORRECT:
            return state.guess_count
        if outcome.feedback is Feedback.TOO_LOW:
            lo = mid + 1
        else:
            hi = mid - 1
    return None

# -----------------------------
# Run server (programmatically)
# -----------------------------
def run_server(port: int, host: str = "127.0.0.1", reload: bool = True) -> None:
    try:
        import uvicorn
    except ImportError:
        print("❌ uvicorn not installed. Run: pip install -e .")
        sys.exit(1)
    uvicorn.run("api:app", host=host, port=port, reload=reload)

# -----------------------------
# Health checker
# -----------------------------
def health_check(base_url: str) -> None:
    print(f"🔎 Checking server at {base_url} ...")
    ctrl = GameController(GuessTransport(base_url=base_url))
    ctrl.start()
    if not ctrl.state.started:
        print(f"❌ Health check failed: {ctrl.state.last_error}")
        sys.exit(1)
    print("✅ Game API ok")

# -----------------------------
# CLI
# -----------------------------
def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Number Guess: server + terminal client in one place")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = p.add_subparsers(dest="cmd", required=True)

    ps = sub.add_parser("serve", help="Start the FastAPI game server (uvicorn)")
    ps.add_argument("--port", type=int, default=8000, help="Port to bind")
    ps.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind")
    ps.add_argument("--no-reload", action="store_true", help="Disable auto-reload")

    pp = sub.add_parser("play", help="Play a game (interactive or auto)")
    pp.add_argument("--base-url", type=str, default=DEFAULT_BASE_URL, help="API base URL")
    pp.add_argument("--auto-demo", action="store_true", help="Let a bisecting bot play instead of prompting")

    ph = sub.add_parser("health", help="Check server availability")
    ph.add_argument("--base-url", type=str, default=DEFAULT_BASE_URL, help="API base URL")

    return p.parse_args(argv)

def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if args.cmd == "serve":
        run_server(port=args.port, host=args.host, reload=(not args.no_reload))
        return

    if args.cmd == "play":
        ctrl = GameController(GuessTransport(base_url=args.base_url, session=requests.Session()))
        if args.auto_demo:
            auto_demo_play(ctrl)
        else:
            interactive_play(ctrl)
        return

    if args.cmd == "health":
        health_check(args.base_url)
        return

if __name__ == "__main__":
    main()
