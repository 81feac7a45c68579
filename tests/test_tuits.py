"""Tests for tuit stats endpoint and the counter recount."""

from __future__ import annotations

from tests.helpers import add_reactions, new_tuit, read_stats
from tuiter_api.main import app


async def test_stats_for_unknown_tuit_returns_404(client, db):
    r = await client.get("/api/tuits/000000000000000000000000/stats")
    assert r.status_code == 404
    assert r.json()["detail"] == "tuit_not_found"


async def test_stats_ignore_other_counters(client, db):
    tid = await new_tuit(db, likes=1, dislikes=2)
    assert await read_stats(client, tid) == {"likes": 1, "dislikes": 2}


async def test_recount_rewrites_counters_from_records(client, db):
    tid = await new_tuit(db, likes=40, dislikes=-3)
    await add_reactions(db, "likes", tid, 2)
    await add_reactions(db, "dislikes", tid, 1)

    svc = app.state.reactions_service
    stats = await svc.recount_stats(tid)

    assert stats.likes == 2 and stats.dislikes == 1
    assert await read_stats(client, tid) == {"likes": 2, "dislikes": 1}
    assert await svc.dislikes.count_for_tuit(await new_tuit(db)) == 0


async def test_health(client):
    r = await client.get("/health")
    assert r.status_code == 200 and r.json() == {"status": "ok"}
    assert r.headers.get("X-Request-Id")
