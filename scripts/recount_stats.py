"""Rewrite tuit like/dislike counters from the reaction records.

Usage: python -m scripts.recount_stats [TUIT_ID ...]
Without ids every tuit is recounted.
"""

from __future__ import annotations

import asyncio
import sys

from motor.motor_asyncio import AsyncIOMotorClient

from tuiter_api.core.config import settings
from tuiter_api.services.reactions_service import ReactionsService
from tuiter_api.services.repositories.dislikes_repo import DislikesRepo
from tuiter_api.services.repositories.likes_repo import LikesRepo
from tuiter_api.services.repositories.tuits_repo import TuitsRepo
from tuiter_api.services.tuits_service import TuitsService


async def main(tuit_ids: list[str]) -> None:
    client = AsyncIOMotorClient(settings.mongo_dsn)
    db = client[settings.mongo_db]
    svc = ReactionsService(
        LikesRepo(db),
        DislikesRepo(db),
        TuitsService(TuitsRepo(db)),
        client=client if settings.mongo_transactions else None,
    )

    if not tuit_ids:
        tuit_ids = [str(d["_id"])
                    async for d in db["tuits"].find({}, {"_id": 1})]

    print("Using DSN:", settings.mongo_dsn, "DB:", settings.mongo_db)
    for tid in tuit_ids:
        stats = await svc.recount_stats(tid)
        print(f"  {tid}: likes={stats.likes} dislikes={stats.dislikes}")

    print(f"Recounted {len(tuit_ids)} tuits.")
    client.close()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
