from http import HTTPStatus
from typing import List
from fastapi import APIRouter, Depends
from tuiter_api.api.http_utils import REACTION_ERRORS, handle_runtime_errors
from tuiter_api.dependencies import get_reactions_service, resolve_user_id
from tuiter_api.models.reactions import ReactionItem, ToggleResponse
from tuiter_api.models.tuits import Tuit
from tuiter_api.services.reactions_service import ReactionsService

router = APIRouter(prefix="/api", tags=["likes"])


@router.get(
    "/users/{uid}/likes",
    response_model=List[Tuit],
    status_code=HTTPStatus.OK)
@handle_runtime_errors(REACTION_ERRORS)
async def find_all_tuits_liked_by_user(
    user_id: str = Depends(resolve_user_id),
    svc: ReactionsService = Depends(get_reactions_service),
):
    return await svc.liked_tuits(user_id)


@router.get(
    "/tuits/{tid}/likes",
    response_model=List[ReactionItem],
    status_code=HTTPStatus.OK)
@handle_runtime_errors(REACTION_ERRORS)
async def find_all_users_that_liked_tuit(
    tid: str,
    svc: ReactionsService = Depends(get_reactions_service),
):
    return await svc.likes_for_tuit(tid)


@router.put(
    "/users/{uid}/likes/{tid}",
    response_model=ToggleResponse,
    status_code=HTTPStatus.OK)
@handle_runtime_errors(REACTION_ERRORS)
async def user_toggles_tuit_likes(
    tid: str,
    user_id: str = Depends(resolve_user_id),
    svc: ReactionsService = Depends(get_reactions_service),
):
    return await svc.toggle_like(user_id, tid)
