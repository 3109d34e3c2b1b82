import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col

from models.category import CategoryInDB

logger = logging.getLogger(__name__)


async def get_category_by_name(session: AsyncSession, name: str) -> Optional[CategoryInDB]:
    st = select(CategoryInDB).where(col(CategoryInDB.name) == name)
    return await session.scalar(st)


async def resolve_or_create(session: AsyncSession, name: str) -> int:
    """
        Returns id of the category with name `name`.
        Creates the category if it doesn't exist.
        Raises `SQLAlchemyError` on DB error.
    """
    # Check whether the category already exists
    category = await get_category_by_name(session, name)
    if category is not None:
        return category.id

    # Creating the category
    category = CategoryInDB(name=name)
    session.add(category)
    try:
        await session.flush()
        category_id = category.id
        await session.commit()
    except IntegrityError:
        # Category was created by concurrent request
        await session.rollback()
        category = await get_category_by_name(session, name)
        if category is None:
            raise
        logger.debug(f'Category `{name}` was created concurrently, id={category.id}')
        return category.id

    logger.debug(f'Category `{name}` created, id={category_id}')
    return category_id
