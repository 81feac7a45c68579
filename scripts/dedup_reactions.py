"""Restore the one-reaction-per-user invariant on legacy data.

1. Duplicate records of one kind for a (tuit, user) pair: keep the newest.
2. Pairs holding both a like and a dislike: keep the newer of the two.

Run scripts/recount_stats.py afterwards to fix the counters.
"""

from pymongo import MongoClient, DESCENDING
from tuiter_api.core.config import settings

KINDS = ("likes", "dislikes")


def dedup_collection(col) -> int:
    pipeline = [
        {"$group": {"_id": {"tuit_id": "$tuit_id",
                            "user_id": "$user_id"}, "count": {"$sum": 1}}},
        {"$match": {"count": {"$gt": 1}}}
    ]
    removed = 0
    for d in col.aggregate(pipeline):
        key = d["_id"]
        docs = list(col.find(key).sort("created_at", DESCENDING))
        to_delete = [x["_id"] for x in docs[1:]]
        if to_delete:
            removed += col.delete_many(
                {"_id": {"$in": to_delete}}).deleted_count
            print(f"  {col.name}: kept={docs[0]['_id']}, "
                  f"deleted={len(to_delete)} for {key}")
    return removed


def resolve_conflicts(likes, dislikes) -> int:
    removed = 0
    for like in likes.find({}):
        key = {"tuit_id": like["tuit_id"], "user_id": like["user_id"]}
        dislike = dislikes.find_one(key)
        if dislike is None:
            continue
        older, col = ((like, likes)
                      if like["created_at"] <= dislike["created_at"]
                      else (dislike, dislikes))
        col.delete_one({"_id": older["_id"]})
        removed += 1
        print(f"  conflict {key}: dropped {col.name} {older['_id']}")
    return removed


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    print("Using DSN:", settings.mongo_dsn, "DB:", settings.mongo_db)

    for kind in KINDS:
        print(f"Duplicates removed from {kind}: {dedup_collection(db[kind])}")

    print("Like/dislike conflicts resolved:",
          resolve_conflicts(db["likes"], db["dislikes"]))
    print("Dedup done.")


if __name__ == "__main__":
    main()
