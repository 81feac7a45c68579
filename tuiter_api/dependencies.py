from typing import Optional
from fastapi import Header, HTTPException, Path, Request, Depends, status
from tuiter_api.services.reactions_service import ReactionsService
from tuiter_api.services.tuits_service import TuitsService

ME = "me"


def session_user_id(
        x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> Optional[str]:
    """Profile id of the signed-in user, forwarded by the auth gateway."""
    if x_user_id is None or not x_user_id.strip():
        return None
    return x_user_id.strip()


def resolve_user_id(
        uid: str = Path(..., min_length=1),
        profile_id: Optional[str] = Depends(session_user_id),
) -> str:
    """`me` stands for the session profile; other ids are taken as is."""
    if uid != ME:
        return uid
    if profile_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="profile_required")
    return profile_id


# services are built once in the app lifespan
def get_reactions_service(request: Request) -> ReactionsService:
    return request.app.state.reactions_service


def get_tuits_service(request: Request) -> TuitsService:
    return request.app.state.tuits_service
