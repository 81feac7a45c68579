"""TuitsService against hand-built repository answers."""

from __future__ import annotations

import pytest
from bson import ObjectId

from tuiter_api.core.errors import TuitNotFoundError
from tuiter_api.models.tuits import TuitStats
from tuiter_api.services.tuits_service import TuitsService


class StubTuitsRepo:
    """Returns a fixed document from every call."""

    def __init__(self, doc):
        self.doc = doc

    async def find_by_id(self, tuit_id, session=None):
        return self.doc

    async def update_stats(self, tuit_id, likes, dislikes, session=None):
        return self.doc

    async def apply_stats_delta(self, tuit_id, likes=0, dislikes=0,
                                session=None):
        return self.doc


@pytest.mark.parametrize("doc", [
    {"_id": ObjectId(), "tuit": "t", "stats": None},
    {"_id": ObjectId(), "tuit": "t"},
])
async def test_missing_or_null_stats_read_as_zero(doc):
    svc = TuitsService(StubTuitsRepo(doc))
    tid = str(doc["_id"])

    assert await svc.apply_stats_delta(tid, likes=1) == TuitStats()
    assert await svc.update_stats(tid, TuitStats(likes=2)) == TuitStats()
    assert await svc.get_stats(tid) == TuitStats()


async def test_missing_tuit_raises_not_found():
    svc = TuitsService(StubTuitsRepo(None))
    with pytest.raises(TuitNotFoundError):
        await svc.apply_stats_delta("0" * 24, dislikes=1)
    with pytest.raises(TuitNotFoundError):
        await svc.update_stats("0" * 24, TuitStats())
