import os
import pytest
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from tuiter_api.main import app
from tuiter_api.core.config import settings

TEST_MONGO_DSN = os.environ.get(
    "TEST_MONGO_DSN", "mongodb://mongo:27017/tuiter_test?replicaSet=rs0")
TEST_MONGO_DB = "tuiter_test"


@pytest.fixture(scope="session", autouse=True)
def test_env():
    os.environ["MONGO_DSN"] = TEST_MONGO_DSN
    os.environ["SENTRY_DSN"] = ""  # no Sentry in tests
    settings.mongo_dsn = TEST_MONGO_DSN
    settings.mongo_db = TEST_MONGO_DB
    settings.sentry_dsn = ""


@pytest.fixture(scope="session")
async def mongo():
    """Raw Motor client for the test database; skips if Mongo is down."""
    client = AsyncIOMotorClient(TEST_MONGO_DSN,
                                serverSelectionTimeoutMS=1500)
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        pytest.skip(f"MongoDB is not reachable: {e}")
    yield client
    client.close()


@pytest.fixture(scope="session")
async def client(mongo):
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport,
                               base_url="http://test") as ac:
            yield ac


@pytest.fixture
async def db(mongo):
    """Test database, emptied before each test."""
    database = mongo[TEST_MONGO_DB]
    for name in await database.list_collection_names():
        await database[name].delete_many({})
    yield database
