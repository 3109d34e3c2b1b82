from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from catalog.app.config_reader import config
from catalog.domain.images import ImageStore
from catalog.domain.services import CatalogServices
from database import get_session_maker


def get_image_store() -> ImageStore:
    return ImageStore(
        config.IMAGES_DIR,
        image_ext=config.IMAGE_EXT,
        default_image=config.DEFAULT_IMAGE,
    )


def get_catalog_services(
    db_pool: Annotated[async_sessionmaker, Depends(get_session_maker)],
    image_store: Annotated[ImageStore, Depends(get_image_store)],
) -> CatalogServices:
    return CatalogServices(db_pool, image_store)
