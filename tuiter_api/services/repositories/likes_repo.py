"""Mongo repository for likes collection."""

from tuiter_api.services.repositories.reactions_repo import ReactionRepo


class LikesRepo(ReactionRepo):
    collection = 'likes'
