"""Mongo repository base for per-user reaction records on tuits."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import DuplicateKeyError

from tuiter_api.core.errors import DuplicateReactionError
from tuiter_api.services.repositories.tuits_repo import (
    TUITS_COLLECTION, to_object_id,
)


class ReactionRepo:
    """One record per (tuit, user) pair; subclasses pick the collection."""

    collection: str = ""

    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self.col = db[self.collection]

    @staticmethod
    def _key(tuit_id: str, user_id: str) -> Dict[str, Any]:
        return {'tuit_id': to_object_id(tuit_id), 'user_id': user_id}

    async def ensure_indexes(self) -> None:
        """Unique (tuit_id, user_id) plus per-user listing order."""
        await self.col.create_index(
            [('tuit_id', ASCENDING), ('user_id', ASCENDING)],
            unique=True,
            name=f'{self.collection}_tuit_user',
        )
        await self.col.create_index(
            [('user_id', ASCENDING), ('created_at', DESCENDING)],
            name=f'{self.collection}_user_created_desc',
        )

    async def count_for_tuit(self, tuit_id: str, session=None) -> int:
        oid = to_object_id(tuit_id)
        if oid is None:
            return 0
        return await self.col.count_documents(
            {'tuit_id': oid}, session=session)

    async def find(
        self,
        tuit_id: str,
        user_id: str,
        session=None,
    ) -> Optional[Dict[str, Any]]:
        if to_object_id(tuit_id) is None:
            return None
        return await self.col.find_one(
            self._key(tuit_id, user_id), session=session)

    async def create(
        self,
        tuit_id: str,
        user_id: str,
        session=None,
    ) -> Dict[str, Any]:
        """Insert a record; a second record for the pair is rejected."""
        doc = {
            **self._key(tuit_id, user_id),
            'created_at': datetime.now(timezone.utc),
        }
        try:
            await self.col.insert_one(doc, session=session)
        except DuplicateKeyError as error:
            raise DuplicateReactionError(
                f'{self.collection} {tuit_id} {user_id}') from error
        return doc

    async def remove(self, tuit_id: str, user_id: str, session=None) -> bool:
        if to_object_id(tuit_id) is None:
            return False
        res = await self.col.delete_one(
            self._key(tuit_id, user_id), session=session)
        return res.deleted_count == 1

    async def find_tuits_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """Tuit documents the user reacted to, newest reaction first."""
        pipeline = [
            {'$match': {'user_id': user_id}},
            {'$sort': {'created_at': -1}},
            {'$lookup': {
                'from': TUITS_COLLECTION,
                'localField': 'tuit_id',
                'foreignField': '_id',
                'as': 'tuit',
            }},
            # reactions on deleted tuits are dropped here
            {'$unwind': '$tuit'},
            {'$replaceRoot': {'newRoot': '$tuit'}},
        ]
        return [d async for d in self.col.aggregate(pipeline)]

    async def list_by_tuit(self, tuit_id: str) -> List[Dict[str, Any]]:
        oid = to_object_id(tuit_id)
        if oid is None:
            return []
        cur = self.col.find({'tuit_id': oid}, {'_id': 0}).sort(
            'created_at', -1)
        return [d async for d in cur]
