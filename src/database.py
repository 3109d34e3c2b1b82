from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlmodel import SQLModel

from catalog.app.config_reader import config
from models.category import CategoryInDB  # noqa: F401 (registers table)
from models.item import ItemInDB  # noqa: F401 (registers table)


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
        SQLite doesn't check foreign keys unless it's asked to on every connection.
    """
    if engine.dialect.name != 'sqlite':
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


async def init_db(engine: AsyncEngine) -> None:
    """
        Creates the DB file directory and all tables that don't exist yet.
    """
    db_path = engine.url.database
    if engine.dialect.name == 'sqlite' and db_path and db_path != ':memory:':
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


engine = create_async_engine(config.DB_DSN)
enable_sqlite_foreign_keys(engine)
async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


def get_session_maker() -> async_sessionmaker:
    return async_session_maker
