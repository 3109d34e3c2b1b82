from pathlib import Path
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker, AsyncEngine

from catalog.api.dependencies import get_image_store
from catalog.api.main import app
from catalog.domain.images import ImageStore
from catalog.domain.services import CatalogServices
from database import enable_sqlite_foreign_keys, get_session_maker, init_db


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'db' / 'catalog.sqlite3'}")
    enable_sqlite_foreign_keys(engine)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def async_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def image_store(tmp_path: Path) -> ImageStore:
    return ImageStore(tmp_path / "images")


@pytest.fixture
def catalog_srv(async_session_maker: async_sessionmaker, image_store: ImageStore) -> CatalogServices:
    return CatalogServices(async_session_maker, image_store)


@pytest.fixture
def override_dependencies(async_session_maker: async_sessionmaker, image_store: ImageStore):
    app.dependency_overrides[get_session_maker] = lambda: async_session_maker
    app.dependency_overrides[get_image_store] = lambda: image_store
    yield
    app.dependency_overrides.clear()


@pytest.fixture(name="async_client")
async def get_async_client(
    override_dependencies
) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
