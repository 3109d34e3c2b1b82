import logging
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from models.item import ItemOutput
from . import categories
from . import items
from . import exceptions as exc
from .images import ImageStore

logger = logging.getLogger(__name__)


class CatalogServices():

    def __init__(self, db_pool: async_sessionmaker, image_store: ImageStore):
        self._db_pool = db_pool
        self._image_store = image_store


    def _db_error_handle(self, error: SQLAlchemyError) -> None:
        logger.error(f'Exception {error.__class__} {error}')


    def _image_error_handle(self, error: OSError) -> None:
        logger.error(f'Failed to create image: {error.__class__} {error}')


    def _check_item_fields(self, name: str, category: str) -> None:
        """
            Checks `name` first, then `category`.
            Raises `CatalogExceptionValidation` with the first empty field.
        """
        if not name:
            raise exc.CatalogExceptionValidation("name")
        logger.info(f'Receive item: {name}')
        if not category:
            raise exc.CatalogExceptionValidation("category")
        logger.info(f'Receive category: {category}')


    async def add_item(
        self, name: str, category: str, image: Optional[UploadFile] = None
    ) -> str:
        """
            Validates fields, creates category if needed, stores image and adds item.
            Returns confirmation message.
            Raises:
                `CatalogExceptionValidation` if `name` or `category` is empty
                `CatalogExceptionImage` if image can't be stored
                `CatalogExceptionSQL` exception on DB error
        """
        self._check_item_fields(name, category)

        try:
            async with self._db_pool() as session:
                category_id = await categories.resolve_or_create(session, category)

                try:
                    image_name = await self._image_store.ingest(image)
                except OSError as e:
                    self._image_error_handle(e)
                    raise exc.CatalogExceptionImage("Failed to create image")

                await items.insert_item(session, name, category_id, image_name)
        except SQLAlchemyError as e:
            self._db_error_handle(e)
            raise exc.CatalogExceptionSQL("SQLAlchemyError")

        return f"item received: {name}"


    async def list_items(self) -> list[ItemOutput]:
        """
            Returns all items with category names.
            Raises `CatalogExceptionSQL` exception on DB error.
        """
        try:
            async with self._db_pool() as session:
                return await items.list_items(session)
        except SQLAlchemyError as e:
            self._db_error_handle(e)
            raise exc.CatalogExceptionSQL("SQLAlchemyError")


    async def search_items(self, keyword: str) -> list[ItemOutput]:
        """
            Returns items whose name equals `keyword`.
            Raises `CatalogExceptionSQL` exception on DB error.
        """
        try:
            async with self._db_pool() as session:
                return await items.search_items(session, keyword)
        except SQLAlchemyError as e:
            self._db_error_handle(e)
            raise exc.CatalogExceptionSQL("SQLAlchemyError")


    async def get_item(self, item_id: int) -> ItemOutput:
        """
            Returns item by `id`.
            Raises:
                `CatalogExceptionNotFound` if item doesn't exist
                `CatalogExceptionSQL` exception on DB error
        """
        try:
            async with self._db_pool() as session:
                return await items.get_item_by_id(session, item_id)
        except SQLAlchemyError as e:
            self._db_error_handle(e)
            raise exc.CatalogExceptionSQL("SQLAlchemyError")


    def get_image_path(self, requested_name: str) -> Path:
        """
            Returns path of the image file to send.
            Raises:
                `CatalogExceptionBadRequest` if requested name is malformed
                `CatalogExceptionNotFound` if neither image nor default image exist
        """
        image_path = self._image_store.resolve(requested_name)
        if not image_path.is_file():
            logger.error(f'Default image is missing: {image_path}')
            raise exc.CatalogExceptionNotFound("Image not found")
        return image_path
