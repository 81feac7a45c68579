from functools import wraps
from http import HTTPStatus
from fastapi import HTTPException

# domain error code -> HTTP status, shared by the reaction routers
REACTION_ERRORS: dict[str, HTTPStatus] = {
    "tuit_not_found": HTTPStatus.NOT_FOUND,
    "reaction_exists": HTTPStatus.CONFLICT,
    "store_unavailable": HTTPStatus.SERVICE_UNAVAILABLE,
}


def handle_runtime_errors(mapping: dict[str, HTTPStatus]):
    """
    Turns a RuntimeError carrying a text code into an HTTPException.
    Example mapping: {"tuit_not_found": 404}
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except RuntimeError as e:
                msg = str(e)
                for key, status in mapping.items():
                    if msg.startswith(key):
                        raise HTTPException(status_code=status, detail=key)
                raise HTTPException(
                    status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
                    detail="internal_error")
        return wrapper
    return decorator
