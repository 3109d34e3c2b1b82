from pathlib import Path
from typing import Optional
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncSession

from catalog.domain.images import ImageStore
from models.category import CategoryInDB
from models.item import ItemInDB


async def create_category(
    async_session_maker: async_sessionmaker,
    *,
    name: Optional[str] = None
) -> CategoryInDB:
    if name is None:
        name = f"cat_{uuid4()}"

    category = CategoryInDB(name=name)
    session: AsyncSession
    async with async_session_maker() as session:
        session.add(category)
        await session.commit()
    return category


async def create_items(
    async_session_maker: async_sessionmaker,
    items: list[tuple[str, str]],
    *,
    image: Optional[str] = None
) -> list[ItemInDB]:
    """ Creates items from (name, category_name) pairs, categories are created if needed """
    created = []
    session: AsyncSession
    async with async_session_maker() as session:
        for name, category_name in items:
            category = await session.scalar(
                select(CategoryInDB).where(CategoryInDB.name == category_name)
            )
            if category is None:
                category = CategoryInDB(name=category_name)
                session.add(category)
                await session.flush()
            item = ItemInDB(name=name, category_id=category.id, image=image)
            session.add(item)
            created.append(item)
        await session.commit()
    return created


async def get_categories_count(
    async_session_maker: async_sessionmaker,
    *,
    name_filter: Optional[str] = None
) -> int:
    session: AsyncSession
    async with async_session_maker() as session:
        st = select(func.count(CategoryInDB.id))
        if name_filter is not None:
            st = st.where(CategoryInDB.name == name_filter)
        return await session.scalar(st)


async def get_all_items(async_session_maker: async_sessionmaker) -> list[ItemInDB]:
    session: AsyncSession
    async with async_session_maker() as session:
        return (await session.scalars(select(ItemInDB).order_by(ItemInDB.id))).all()


def create_default_image(image_store: ImageStore, content: bytes = b"default image") -> Path:
    image_store.images_dir.mkdir(parents=True, exist_ok=True)
    image_store.default_image_path.write_bytes(content)
    return image_store.default_image_path
