from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set
import random
import uuid

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from backend.models import (
    MAX_SEATS,
    MIN_SEATS,
    ActionReq,
    GetStateResp,
    NewGameReq,
    SessionReq,
    StateEnvelope,
)

from nothanks.core import (
    GameState,
    apply_action,
    create_game,
    get_active_player,
    is_game_over,
    play_bot_turn,
    to_json,
)
from nothanks.types import SetupPlayer


@dataclass
class Session:
    state: GameState
    rng: random.Random
    setups: List[SetupPlayer]


# In-memory session store
SESSIONS: Dict[str, Session] = {}


def _new_session_id() -> str:
    return uuid.uuid4().hex


def get_session(session_id: str) -> Session:
    session = SESSIONS.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def save_session(session_id: str, session: Session) -> None:
    SESSIONS[session_id] = session


def _setups_from_request(req: NewGameReq) -> List[SetupPlayer]:
    if not MIN_SEATS <= len(req.players) <= MAX_SEATS:
        raise HTTPException(status_code=422, detail=f"players must be {MIN_SEATS}..{MAX_SEATS}")
    setups: List[SetupPlayer] = []
    seen: Set[str] = set()
    for i, seat in enumerate(req.players):
        name = seat.name.strip()
        if not name:
            raise HTTPException(status_code=422, detail="Player names must not be blank")
        pid = seat.id or f"p{i + 1}"
        if pid in seen:
            raise HTTPException(status_code=422, detail=f"Duplicate player id: {pid}")
        seen.add(pid)
        style = None if seat.isHuman else (seat.botStyle or "standard")
        setups.append(SetupPlayer(id=pid, name=name, is_human=seat.isHuman, bot_style=style))
    return setups


app = FastAPI()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, bool]:
    return {"ok": True}


@app.post("/new-game", response_model=StateEnvelope)
def new_game(req: NewGameReq) -> StateEnvelope:
    try:
        setups = _setups_from_request(req)
        rng = random.Random(req.seed)
        state = create_game(setups, rng.random)
        sid = _new_session_id()
        save_session(sid, Session(state=state, rng=rng, setups=setups))
        return StateEnvelope(sessionId=sid, state=to_json(state))
    except HTTPException:
        raise
    except AssertionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"new-game failed: {e}")


@app.get("/state/{sessionId}", response_model=GetStateResp)
def get_state_endpoint(sessionId: str) -> GetStateResp:
    session = get_session(sessionId)
    return GetStateResp(state=to_json(session.state))


@app.post("/action", response_model=GetStateResp)
def action_endpoint(req: ActionReq) -> GetStateResp:
    try:
        session = get_session(req.sessionId)
        state = session.state
        if not is_game_over(state) and not get_active_player(state).is_human:
            raise HTTPException(status_code=409, detail="Active seat is a bot; use /bot-step")
        # Failed preconditions (no chips, game over) leave the state unchanged
        session.state = apply_action(state, req.action)
        save_session(req.sessionId, session)
        return GetStateResp(state=to_json(session.state))
    except HTTPException:
        raise
    except AssertionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"action failed: {e}")


@app.post("/bot-step", response_model=GetStateResp)
def bot_step_endpoint(req: SessionReq) -> GetStateResp:
    try:
        session = get_session(req.sessionId)
        state = session.state
        if is_game_over(state):
            raise HTTPException(status_code=409, detail="Game is over")
        if get_active_player(state).is_human:
            raise HTTPException(status_code=409, detail="Active seat is human")
        session.state = play_bot_turn(state, session.rng.random)
        save_session(req.sessionId, session)
        return GetStateResp(state=to_json(session.state))
    except HTTPException:
        raise
    except AssertionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"bot-step failed: {e}")


@app.post("/rematch", response_model=StateEnvelope)
def rematch_endpoint(req: SessionReq) -> StateEnvelope:
    session = get_session(req.sessionId)
    session.state = create_game(session.setups, session.rng.random)
    save_session(req.sessionId, session)
    return StateEnvelope(sessionId=req.sessionId, state=to_json(session.state))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.app:app", host="0.0.0.0", port=8000, reload=True)
