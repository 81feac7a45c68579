from http import HTTPStatus
from fastapi import APIRouter, FastAPI
import sentry_sdk
from tuiter_api.core.config import settings

router = APIRouter(tags=["debug"])


@router.get("/__sentry-test", status_code=HTTPStatus.NO_CONTENT)
async def sentry_test():
    sentry_sdk.capture_message(f"Sentry test ping from {settings.app_name}")
    return None


def include_debug_routes(app: FastAPI) -> bool:
    """Mount the debug router only when explicitly enabled."""
    if not settings.sentry_test_enabled:
        return False
    app.include_router(router)
    return True
