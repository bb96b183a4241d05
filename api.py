from __future__ import annotations
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import Cookie, FastAPI, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from engine import GuessGameEngine
from models import Feedback, GameRecord

load_dotenv()

COOKIE_NAME = os.getenv("GUESS_GAME_COOKIE", "session_id")

# ---------- Pydantic IO models ----------
class GuessIn(BaseModel):
    number: int = Field(..., examples=[500])

class GuessOut(BaseModel):
    feedback: Feedback
    guessCount: int
    finished: bool

class GameStatusOut(BaseModel):
    active: bool
    guessCount: int
    finished: bool

# ---------- App ----------
app = FastAPI(title="Number Guess API", version="1.0.0")

_engine = GuessGameEngine()

def _to_status(r: Optional[GameRecord]) -> GameStatusOut:
    if r is None:
        return GameStatusOut(active=False, guessCount=0, finished=False)
    return GameStatusOut(active=True, guessCount=r.guess_count, finished=r.finished)

def _bind(response: Response, r: GameRecord) -> None:
    response.set_cookie(COOKIE_NAME, r.session_id, httponly=True, samesite="lax")

@app.get("/api", response_model=GameStatusOut)
def start_game(response: Response):
    rec = _engine.start_session()
    _bind(response, rec)
    return _to_status(rec)

@app.get("/api/reset", response_model=GameStatusOut)
def reset_game(response: Response, session_id: Optional[str] = Cookie(None, alias=COOKIE_NAME)):
    rec = _engine.reset_session(session_id) if session_id else _engine.start_session()
    _bind(response, rec)
    return _to_status(rec)

@app.get("/api/status", response_model=GameStatusOut)
def get_status(session_id: Optional[str] = Cookie(None, alias=COOKIE_NAME)):
    return _to_status(_engine.get_state(session_id))

@app.post("/api", response_model=GuessOut)
def submit_guess(g: GuessIn, session_id: Optional[str] = Cookie(None, alias=COOKIE_NAME)):
    try:
        fb, rec = _engine.guess(session_id, g.number)
    except LookupError as e:
        # session gone, e.g. after a CORRECT guess
        return JSONResponse(status_code=404, content={"error": str(e)})
    except ValueError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return GuessOut(feedback=fb, guessCount=rec.guess_count, finished=rec.finished)
