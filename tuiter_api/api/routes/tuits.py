from http import HTTPStatus
from fastapi import APIRouter, Depends
from tuiter_api.api.http_utils import REACTION_ERRORS, handle_runtime_errors
from tuiter_api.dependencies import (
    get_reactions_service, get_tuits_service, resolve_user_id,
)
from tuiter_api.models.reactions import ReactionStateResponse
from tuiter_api.models.tuits import TuitStats
from tuiter_api.services.reactions_service import ReactionsService
from tuiter_api.services.tuits_service import TuitsService

router = APIRouter(prefix="/api", tags=["tuits"])


@router.get(
    "/tuits/{tid}/stats",
    response_model=TuitStats,
    status_code=HTTPStatus.OK)
@handle_runtime_errors(REACTION_ERRORS)
async def get_tuit_stats(
    tid: str,
    svc: TuitsService = Depends(get_tuits_service),
) -> TuitStats:
    return await svc.get_stats(tid)


@router.get(
    "/users/{uid}/reactions/{tid}",
    response_model=ReactionStateResponse,
    status_code=HTTPStatus.OK)
@handle_runtime_errors(REACTION_ERRORS)
async def get_reaction_state(
    tid: str,
    user_id: str = Depends(resolve_user_id),
    svc: ReactionsService = Depends(get_reactions_service),
) -> ReactionStateResponse:
    state = await svc.get_state(user_id, tid)
    return ReactionStateResponse(tuit_id=tid, user_id=user_id, state=state)
