from __future__ import annotations
from typing import Optional, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

TUITS_COLLECTION = "tuits"


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a tuit id; malformed ids are treated as unknown tuits."""
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value) if ObjectId.is_valid(value) else None


class TuitsRepo:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.col = db[TUITS_COLLECTION]

    async def find_by_id(
            self,
            tuit_id: str,
            session=None) -> Optional[Dict[str, Any]]:
        oid = to_object_id(tuit_id)
        if oid is None:
            return None
        return await self.col.find_one({"_id": oid}, session=session)

    async def update_stats(
            self,
            tuit_id: str,
            likes: int,
            dislikes: int,
            session=None) -> Optional[Dict[str, Any]]:
        """Overwrite both counters. Returns None if the tuit is missing."""
        return await self._update(
            tuit_id,
            {"$set": {"stats.likes": likes, "stats.dislikes": dislikes}},
            session=session,
        )

    async def apply_stats_delta(
            self,
            tuit_id: str,
            likes: int = 0,
            dislikes: int = 0,
            session=None) -> Optional[Dict[str, Any]]:
        """Atomic $inc of the counters, never upserts."""
        return await self._update(
            tuit_id,
            {"$inc": {"stats.likes": likes, "stats.dislikes": dislikes}},
            session=session,
        )

    async def _update(self, tuit_id: str, update: dict,
                      session=None) -> Optional[Dict[str, Any]]:
        oid = to_object_id(tuit_id)
        if oid is None:
            return None
        return await self.col.find_one_and_update(
            {"_id": oid},
            update,
            return_document=ReturnDocument.AFTER,
            session=session,
        )
