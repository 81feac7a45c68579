"""Mongo repository for dislikes collection."""

from tuiter_api.services.repositories.reactions_repo import ReactionRepo


class DislikesRepo(ReactionRepo):
    collection = 'dislikes'
