"""Service layer for tuit lookups and denormalized reaction counters."""

from __future__ import annotations

from pymongo.errors import PyMongoError

from tuiter_api.core.errors import StoreUnavailableError, TuitNotFoundError
from tuiter_api.models.tuits import Tuit, TuitStats
from tuiter_api.services.repositories.tuits_repo import TuitsRepo


class TuitsService:
    """Reads tuits and writes their likes/dislikes counters."""

    def __init__(self, repo: TuitsRepo) -> None:
        self.repo = repo

    async def find_by_id(self, tuit_id: str, session=None) -> Tuit:
        """Return the tuit or raise TuitNotFoundError."""
        doc = await self.repo.find_by_id(tuit_id, session=session)
        if doc is None:
            raise TuitNotFoundError(tuit_id)
        return Tuit.from_doc(doc)

    async def get_stats(self, tuit_id: str) -> TuitStats:
        try:
            tuit = await self.find_by_id(tuit_id)
        except PyMongoError as error:
            raise StoreUnavailableError(str(error)) from error
        return tuit.stats

    async def update_stats(
        self,
        tuit_id: str,
        stats: TuitStats,
        session=None,
    ) -> TuitStats:
        """Overwrite the counters with the given values."""
        doc = await self.repo.update_stats(
            tuit_id,
            likes=stats.likes,
            dislikes=stats.dislikes,
            session=session,
        )
        if doc is None:
            raise TuitNotFoundError(tuit_id)
        return TuitStats(**(doc.get('stats') or {}))

    async def apply_stats_delta(
        self,
        tuit_id: str,
        likes: int = 0,
        dislikes: int = 0,
        session=None,
    ) -> TuitStats:
        """Increment counters in place and return them after the update."""
        doc = await self.repo.apply_stats_delta(
            tuit_id,
            likes=likes,
            dislikes=dislikes,
            session=session,
        )
        if doc is None:
            raise TuitNotFoundError(tuit_id)
        return TuitStats(**(doc.get('stats') or {}))
