from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


BotStyleName = Literal["easy", "standard", "greedy"]


class SeatReq(BaseModel):
    name: str
    isHuman: bool = False
    botStyle: Optional[BotStyleName] = None
    id: Optional[str] = None


class NewGameReq(BaseModel):
    players: List[SeatReq]
    seed: Optional[int] = Field(default=None, ge=0)


class SessionReq(BaseModel):
    sessionId: str


class ActionReq(BaseModel):
    sessionId: str
    action: Literal["pass", "take"]


class GetStateResp(BaseModel):
    state: Dict[str, Any]


class StateEnvelope(BaseModel):
    sessionId: str
    state: Dict[str, Any]


# Seat range offered by the table setup
MIN_SEATS: int = 3
MAX_SEATS: int = 5
