import uuid
from datetime import datetime, timezone
from typing import Dict
from bson import ObjectId
from httpx import AsyncClient


def new_user() -> str:
    return str(ObjectId())


async def new_tuit(db, likes: int = 0, dislikes: int = 0) -> str:
    res = await db["tuits"].insert_one({
        "tuit": f"tuit {uuid.uuid4().hex[:8]}",
        "posted_by": new_user(),
        "posted_on": datetime.now(timezone.utc),
        "stats": {"likes": likes, "dislikes": dislikes,
                  "replies": 0, "retuits": 0},
    })
    return str(res.inserted_id)


async def add_reactions(db, kind: str, tuit_id: str, count: int) -> None:
    """Insert `count` reaction records by fresh users."""
    for _ in range(count):
        await db[kind].insert_one({
            "tuit_id": ObjectId(tuit_id),
            "user_id": new_user(),
            "created_at": datetime.now(timezone.utc),
        })


def profile_header(user_id: str) -> Dict[str, str]:
    return {"X-User-Id": user_id}


async def read_stats(client: AsyncClient, tuit_id: str) -> dict:
    r = await client.get(f"/api/tuits/{tuit_id}/stats")
    assert r.status_code == 200
    return r.json()
