import asyncio
import base64
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import vendorhub.domain  # noqa: F401  register models on Base.metadata
from vendorhub.core.config import settings
from vendorhub.core.deps import get_image_store, get_token_validator
from vendorhub.core.response import ResponseContext
from vendorhub.db.base import Base, get_db
from vendorhub.domain.vendor import Vendor
from vendorhub.main import app
from vendorhub.services.images import ImageStore
from vendorhub.services.token import TokenValidation

VALID_TOKEN = "valid-token"
PNG_PAYLOAD = "AAAA"
PNG_DATA_URI = f"data:image/png;base64,{PNG_PAYLOAD}"
PNG_BYTES = base64.b64decode(PNG_PAYLOAD)


class FakeTokenValidator:
    """Token validator accepting a fixed set of tokens.

    A valid token refreshes a cookie on the given context and hands back a
    replacement context carrying it, like a validator that rotates sessions.
    """

    def __init__(self):
        self.valid_tokens = {VALID_TOKEN}
        self.calls: list[str] = []
        self.error: Optional[Exception] = None

    async def is_token_valid(
        self, token: str, response: ResponseContext
    ) -> Optional[TokenValidation]:
        self.calls.append(token)
        if self.error is not None:
            raise self.error
        if token not in self.valid_tokens:
            return None
        replacement = ResponseContext(
            headers={**response.headers, "X-Token-Refreshed": "1"},
            cookies={**response.cookies, "session": "refreshed"},
        )
        return TokenValidation(is_valid=True, response=replacement)


async def _create_all(engine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(name="engine")
def engine_fixture(tmp_path):
    # NullPool: every request runs on its own event loop under TestClient
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    asyncio.run(_create_all(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture(name="session_factory")
def session_factory_fixture(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture(name="token_validator")
def token_validator_fixture():
    return FakeTokenValidator()


@pytest.fixture(name="upload_dir")
def upload_dir_fixture(tmp_path):
    return tmp_path / "uploads"


def _override_db(session_factory):
    async def get_db_override():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    return get_db_override


@pytest.fixture(name="client")
def client_fixture(session_factory, token_validator, upload_dir):
    app.dependency_overrides[get_db] = _override_db(session_factory)
    app.dependency_overrides[get_token_validator] = lambda: token_validator
    app.dependency_overrides[get_image_store] = lambda: ImageStore(str(upload_dir))

    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="auth_headers")
def auth_headers_fixture():
    return {settings.token_header_key: VALID_TOKEN}


@pytest.fixture(name="db")
def db_fixture(session_factory):
    """Synchronous helpers to seed and inspect the test database."""

    class _DB:
        def count_vendors(self) -> int:
            async def _count():
                async with session_factory() as session:
                    return (
                        await session.execute(select(func.count()).select_from(Vendor))
                    ).scalar_one()

            return asyncio.run(_count())

        def vendors(self) -> list[Vendor]:
            async def _all():
                async with session_factory() as session:
                    return list((await session.execute(select(Vendor))).scalars().all())

            return asyncio.run(_all())

        def add(self, *rows: dict) -> None:
            async def _add():
                async with session_factory() as session:
                    session.add_all([Vendor(**row) for row in rows])
                    await session.commit()

            asyncio.run(_add())

        def run(self, fn):
            """Run ``fn(session)`` (a coroutine function) in its own session and commit."""

            async def _run():
                async with session_factory() as session:
                    result = await fn(session)
                    await session.commit()
                    return result

            return asyncio.run(_run())

    return _DB()
