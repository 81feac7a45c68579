from __future__ import annotations
from datetime import datetime
from enum import Enum
from typing import Any, Mapping
from pydantic import BaseModel

from tuiter_api.models.tuits import TuitStats


class ReactionState(str, Enum):
    NEUTRAL = "none"
    LIKED = "liked"
    DISLIKED = "disliked"


class ReactionItem(BaseModel):
    tuit_id: str
    user_id: str
    created_at: datetime | None = None

    @classmethod
    def from_doc(cls, doc: Mapping[str, Any]) -> "ReactionItem":
        return cls(
            tuit_id=str(doc["tuit_id"]),
            user_id=doc["user_id"],
            created_at=doc.get("created_at"),
        )


class ReactionStateResponse(BaseModel):
    tuit_id: str
    user_id: str
    state: ReactionState


class ToggleResponse(BaseModel):
    tuit_id: str
    user_id: str
    state: ReactionState
    stats: TuitStats
