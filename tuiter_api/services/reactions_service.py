"""Likes/dislikes on tuits: toggle reconciliation and listings."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, List, TypeVar

from pymongo.errors import PyMongoError

from tuiter_api.core.errors import StoreUnavailableError
from tuiter_api.models.reactions import (
    ReactionItem,
    ReactionState,
    ToggleResponse,
)
from tuiter_api.models.tuits import Tuit, TuitStats
from tuiter_api.services.repositories.reactions_repo import ReactionRepo
from tuiter_api.services.tuits_service import TuitsService

logger = logging.getLogger(__name__)

T = TypeVar('T')

LIKED = ReactionState.LIKED
DISLIKED = ReactionState.DISLIKED
NEUTRAL = ReactionState.NEUTRAL


class ReactionsService:
    """Keeps a user's like and dislike on a tuit mutually exclusive.

    The tuit's ``stats.likes``/``stats.dislikes`` counters follow every
    record change. Counters are moved with ``$inc`` deltas and, when a
    Mongo client is given, the whole read-decide-write sequence runs in one
    transaction, so concurrent toggles on a tuit cannot lose updates.
    Without a client the steps run one after another and a failed counter
    write leaves the record change in place.
    """

    def __init__(
        self,
        likes: ReactionRepo,
        dislikes: ReactionRepo,
        tuits: TuitsService,
        client: Any = None,
    ) -> None:
        self.repos = {LIKED: likes, DISLIKED: dislikes}
        self.tuits = tuits
        self._client = client

    @property
    def likes(self) -> ReactionRepo:
        return self.repos[LIKED]

    @property
    def dislikes(self) -> ReactionRepo:
        return self.repos[DISLIKED]

    # ---------- helpers ----------

    async def _in_txn(self, fn: Callable[[Any], Awaitable[T]]) -> T:
        """Run ``fn(session)``; retried by the driver on write conflicts."""
        if self._client is None:
            return await fn(None)
        async with await self._client.start_session() as session:
            return await session.with_transaction(fn)

    @staticmethod
    def _opposite(kind: ReactionState) -> ReactionState:
        return DISLIKED if kind is LIKED else LIKED

    # ---------- TOGGLE ----------

    async def toggle_like(self, user_id: str, tuit_id: str) -> ToggleResponse:
        return await self._toggle(user_id, tuit_id, LIKED)

    async def toggle_dislike(
            self, user_id: str, tuit_id: str) -> ToggleResponse:
        return await self._toggle(user_id, tuit_id, DISLIKED)

    async def _toggle(
        self,
        user_id: str,
        tuit_id: str,
        kind: ReactionState,
    ) -> ToggleResponse:
        """Flip ``kind`` for the user, dropping the opposite reaction."""
        own = self.repos[kind]
        other_kind = self._opposite(kind)
        other = self.repos[other_kind]

        async def reconcile(session) -> ToggleResponse:
            await self.tuits.find_by_id(tuit_id, session=session)

            delta = {LIKED: 0, DISLIKED: 0}
            if await own.find(tuit_id, user_id, session=session):
                # a concurrent toggle may have removed it already
                if await own.remove(tuit_id, user_id, session=session):
                    delta[kind] -= 1
                state = NEUTRAL
            else:
                if await other.find(tuit_id, user_id, session=session):
                    if await other.remove(
                            tuit_id, user_id, session=session):
                        delta[other_kind] -= 1
                await own.create(tuit_id, user_id, session=session)
                delta[kind] += 1
                state = kind

            stats = await self.tuits.apply_stats_delta(
                tuit_id,
                likes=delta[LIKED],
                dislikes=delta[DISLIKED],
                session=session,
            )
            return ToggleResponse(
                tuit_id=tuit_id,
                user_id=user_id,
                state=state,
                stats=stats,
            )

        try:
            result = await self._in_txn(reconcile)
        except PyMongoError as error:
            logger.warning(
                'reaction_toggle_failed',
                extra={'tuit_id': tuit_id, 'user_id': user_id,
                       'kind': kind.value, 'err': str(error)},
            )
            raise StoreUnavailableError(str(error)) from error

        logger.info(
            'reaction_toggled',
            extra={'tuit_id': tuit_id, 'user_id': user_id,
                   'kind': kind.value, 'state': result.state.value},
        )
        return result

    # ---------- READ ----------

    async def get_state(self, user_id: str, tuit_id: str) -> ReactionState:
        """Current reaction of the user on the tuit."""
        try:
            await self.tuits.find_by_id(tuit_id)
            if await self.likes.find(tuit_id, user_id):
                return LIKED
            if await self.dislikes.find(tuit_id, user_id):
                return DISLIKED
            return NEUTRAL
        except PyMongoError as error:
            raise StoreUnavailableError(str(error)) from error

    async def liked_tuits(self, user_id: str) -> List[Tuit]:
        return await self._tuits_by_user(LIKED, user_id)

    async def disliked_tuits(self, user_id: str) -> List[Tuit]:
        return await self._tuits_by_user(DISLIKED, user_id)

    async def likes_for_tuit(self, tuit_id: str) -> List[ReactionItem]:
        return await self._reactions_for_tuit(LIKED, tuit_id)

    async def dislikes_for_tuit(self, tuit_id: str) -> List[ReactionItem]:
        return await self._reactions_for_tuit(DISLIKED, tuit_id)

    async def _tuits_by_user(
            self, kind: ReactionState, user_id: str) -> List[Tuit]:
        try:
            docs = await self.repos[kind].find_tuits_by_user(user_id)
        except PyMongoError as error:
            raise StoreUnavailableError(str(error)) from error
        return [Tuit.from_doc(doc) for doc in docs]

    async def _reactions_for_tuit(
            self, kind: ReactionState, tuit_id: str) -> List[ReactionItem]:
        try:
            await self.tuits.find_by_id(tuit_id)
            docs = await self.repos[kind].list_by_tuit(tuit_id)
        except PyMongoError as error:
            raise StoreUnavailableError(str(error)) from error
        return [ReactionItem.from_doc(doc) for doc in docs]

    # ---------- REPAIR ----------

    async def recount_stats(self, tuit_id: str) -> TuitStats:
        """Rewrite the tuit's counters from the actual record counts."""

        async def recount(session) -> TuitStats:
            await self.tuits.find_by_id(tuit_id, session=session)
            counted = TuitStats(
                likes=await self.likes.count_for_tuit(
                    tuit_id, session=session),
                dislikes=await self.dislikes.count_for_tuit(
                    tuit_id, session=session),
            )
            return await self.tuits.update_stats(
                tuit_id, counted, session=session)

        try:
            stats = await self._in_txn(recount)
        except PyMongoError as error:
            raise StoreUnavailableError(str(error)) from error
        logger.info(
            'stats_recounted',
            extra={'tuit_id': tuit_id, 'likes': stats.likes,
                   'dislikes': stats.dislikes},
        )
        return stats

