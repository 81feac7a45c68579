from __future__ import annotations
from datetime import datetime
from typing import Any, Mapping
from pydantic import BaseModel, ConfigDict


class TuitStats(BaseModel):
    # replies/retuits counters may live in the same subdocument
    model_config = ConfigDict(extra="ignore")

    likes: int = 0
    dislikes: int = 0


class Tuit(BaseModel):
    tuit_id: str
    tuit: str = ""
    posted_by: str | None = None
    posted_on: datetime | None = None
    stats: TuitStats = TuitStats()

    @classmethod
    def from_doc(cls, doc: Mapping[str, Any]) -> "Tuit":
        return cls(
            tuit_id=str(doc["_id"]),
            tuit=doc.get("tuit", ""),
            posted_by=doc.get("posted_by"),
            posted_on=doc.get("posted_on"),
            stats=TuitStats(**(doc.get("stats") or {})),
        )
