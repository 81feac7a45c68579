"""Tests for likes API flows and tuit stats updates."""

from __future__ import annotations

import pytest

from tests.helpers import new_tuit, new_user, profile_header, read_stats
from tuiter_api.core.errors import DuplicateReactionError
from tuiter_api.main import app


async def test_reaction_state_initially_none(client, db):
    tid, user = await new_tuit(db), new_user()

    r = await client.get(f"/api/users/{user}/reactions/{tid}")
    assert r.status_code == 200
    assert r.json() == {"tuit_id": tid, "user_id": user, "state": "none"}


async def test_toggle_like_sets_state_and_stats(client, db):
    tid, user = await new_tuit(db, likes=2, dislikes=1), new_user()

    r = await client.put(f"/api/users/{user}/likes/{tid}")
    assert r.status_code == 200
    assert r.json()["state"] == "liked"

    s = await read_stats(client, tid)
    assert s == {"likes": 3, "dislikes": 1}
    r = await client.get(f"/api/users/{user}/reactions/{tid}")
    assert r.json()["state"] == "liked"


async def test_toggle_like_on_disliked_tuit_moves_reaction(client, db):
    tid, user = await new_tuit(db), new_user()

    await client.put(f"/api/users/{user}/dislikes/{tid}")
    r = await client.put(f"/api/users/{user}/likes/{tid}")

    assert r.json()["stats"] == {"likes": 1, "dislikes": 0}
    assert await db["dislikes"].count_documents({"user_id": user}) == 0
    assert await db["likes"].count_documents({"user_id": user}) == 1


async def test_toggle_like_twice_removes_like(client, db):
    tid, user = await new_tuit(db), new_user()

    await client.put(f"/api/users/{user}/likes/{tid}")
    r = await client.put(f"/api/users/{user}/likes/{tid}")

    assert r.json()["state"] == "none"
    assert (await read_stats(client, tid))["likes"] == 0


async def test_liked_tuits_listing_with_me(client, db):
    t1, t2, user = await new_tuit(db), await new_tuit(db), new_user()
    await client.put(f"/api/users/{user}/likes/{t1}")
    await client.put(f"/api/users/{user}/likes/{t2}")

    r = await client.get("/api/users/me/likes", headers=profile_header(user))
    assert r.status_code == 200
    body = r.json()
    assert {t["tuit_id"] for t in body} == {t1, t2}
    assert all(t["stats"]["likes"] == 1 for t in body)


async def test_users_that_liked_unknown_tuit_returns_404(client, db):
    r = await client.get("/api/tuits/000000000000000000000000/likes")
    assert r.status_code == 404


async def test_liked_tuits_empty_for_new_user(client, db):
    r = await client.get(f"/api/users/{new_user()}/likes")
    assert r.status_code == 200
    assert r.json() == []


async def test_reaction_state_for_unknown_tuit_returns_404(client, db):
    user = new_user()
    for tid in ("0" * 24, "not-an-id"):
        r = await client.get(f"/api/users/{user}/reactions/{tid}")
        assert r.status_code == 404
        assert r.json()["detail"] == "tuit_not_found"


async def test_like_record_is_unique_per_user_and_tuit(client, db):
    tid, user = await new_tuit(db), new_user()
    likes = app.state.reactions_service.likes

    assert await likes.count_for_tuit(tid) == 0
    await likes.create(tid, user)
    with pytest.raises(DuplicateReactionError):
        await likes.create(tid, user)

    assert await likes.count_for_tuit(tid) == 1
    assert await likes.remove(tid, user) is True
    assert await likes.remove(tid, user) is False
