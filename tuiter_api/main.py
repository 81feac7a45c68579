import logging

from fastapi import FastAPI
from pymongo.errors import PyMongoError

from contextlib import asynccontextmanager
from tuiter_api.db.mongo import get_client, get_mongo_db, close_client

from tuiter_api.core.logger import setup_json_logging, shutdown_logging
from tuiter_api.core.sentry import init_sentry
from tuiter_api.core.config import settings
from tuiter_api.core.middleware import RequestContextMiddleware

from tuiter_api.services.reactions_service import ReactionsService
from tuiter_api.services.tuits_service import TuitsService
from tuiter_api.services.repositories.dislikes_repo import DislikesRepo
from tuiter_api.services.repositories.likes_repo import LikesRepo
from tuiter_api.services.repositories.tuits_repo import TuitsRepo

from tuiter_api.api.routes.likes import router as likes_router
from tuiter_api.api.routes.dislikes import router as dislikes_router
from tuiter_api.api.routes.tuits import router as tuits_router
from tuiter_api.api.routes.debug import include_debug_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # logging first, everything below may log
    setup_json_logging(service=settings.app_name)
    init_sentry(settings.sentry_dsn, environment=settings.env)

    client = await get_client()
    db = await get_mongo_db()

    likes, dislikes = LikesRepo(db), DislikesRepo(db)
    if settings.mongo_ensure_indexes:
        try:
            for repo in (likes, dislikes):
                await repo.ensure_indexes()
        except PyMongoError as e:
            logger.warning("mongo_indexes_failed", extra={"err": str(e)})

    tuits = TuitsService(TuitsRepo(db))
    app.state.tuits_service = tuits
    app.state.reactions_service = ReactionsService(
        likes,
        dislikes,
        tuits,
        client=client if settings.mongo_transactions else None,
    )

    try:
        yield
    finally:
        await close_client()
        shutdown_logging()


app = FastAPI(title="Tuiter Reactions Service", lifespan=lifespan)

app.add_middleware(RequestContextMiddleware)

# access lines come from RequestContextMiddleware
logging.getLogger("uvicorn.access").setLevel("WARNING")

include_debug_routes(app)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(likes_router)
app.include_router(dislikes_router)
app.include_router(tuits_router)
