from typing import Optional

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col

from models.category import CategoryInDB
from models.item import ItemInDB, ItemOutput
from . import exceptions as exc

# SQLite INTEGER is a signed 64-bit value
SQLITE_MIN_INT = -2**63
SQLITE_MAX_INT = 2**63 - 1


def _items_with_category_st() -> Select:
    """ Items joined with their categories, in the order they were added """
    return (
        select(
            col(ItemInDB.name),
            col(CategoryInDB.name).label("category"),
            col(ItemInDB.image),
        )
            .join(CategoryInDB, col(ItemInDB.category_id) == col(CategoryInDB.id))
            .order_by(col(ItemInDB.id))
    )


def _row_to_output(row: Row) -> ItemOutput:
    return ItemOutput(name=row.name, category=row.category, image=row.image)


async def insert_item(
    session: AsyncSession,
    name: str,
    category_id: int,
    image: Optional[str],
) -> ItemInDB:
    """
        Adds item and commits.
        Raises `SQLAlchemyError` on DB error (including unknown `category_id`).
    """
    item = ItemInDB(name=name, category_id=category_id, image=image)
    session.add(item)
    await session.commit()
    return item


async def list_items(session: AsyncSession) -> list[ItemOutput]:
    res = await session.execute(_items_with_category_st())
    return [_row_to_output(row) for row in res.all()]


async def get_item_by_id(session: AsyncSession, item_id: int) -> ItemOutput:
    """
        Returns item with category name by primary key `id`.
        Raises:
            `CatalogExceptionNotFound` if item doesn't exist
            `SQLAlchemyError` on DB error
    """
    not_found = exc.CatalogExceptionNotFound(f"Item with id={item_id} doesn't exist")
    if not SQLITE_MIN_INT <= item_id <= SQLITE_MAX_INT:
        raise not_found

    st = _items_with_category_st().where(col(ItemInDB.id) == item_id)
    row = (await session.execute(st)).first()
    if row is None:
        raise not_found
    return _row_to_output(row)


async def search_items(session: AsyncSession, keyword: str) -> list[ItemOutput]:
    """ Items whose name is exactly `keyword` """
    st = _items_with_category_st().where(col(ItemInDB.name) == keyword)
    res = await session.execute(st)
    return [_row_to_output(row) for row in res.all()]
