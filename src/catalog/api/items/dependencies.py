from typing import Annotated, Optional

from fastapi import Depends, File, Form, HTTPException, Query, UploadFile, status

from catalog.domain import exceptions as exc
from catalog.domain.services import CatalogServices
from models.item import ItemOutput, ItemsOutput
from models.message import MessageOutput
from ..dependencies import get_catalog_services


async def add_item_dep(
    catalog_srv: Annotated[CatalogServices, Depends(get_catalog_services)],
    name: Annotated[str, Form()] = "",
    category: Annotated[str, Form()] = "",
    image: Annotated[Optional[UploadFile], File()] = None,
) -> MessageOutput:
    try:
        message = await catalog_srv.add_item(name, category, image)
    except exc.CatalogExceptionValidation as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Failed to create item. Please fill {e.field}."
        )
    except exc.CatalogExceptionImage:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create image"
        )
    except exc.CatalogExceptionSQL:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create item"
        )
    return MessageOutput(message=message)


async def get_items_dep(
    catalog_srv: Annotated[CatalogServices, Depends(get_catalog_services)],
) -> ItemsOutput:
    try:
        return ItemsOutput(items=await catalog_srv.list_items())
    except exc.CatalogExceptionSQL:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get item"
        )


async def search_items_dep(
    catalog_srv: Annotated[CatalogServices, Depends(get_catalog_services)],
    keyword: Annotated[str, Query()] = "",
) -> ItemsOutput:
    try:
        return ItemsOutput(items=await catalog_srv.search_items(keyword))
    except exc.CatalogExceptionSQL:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get item"
        )


async def get_item_by_id_dep(
    item_id: int,
    catalog_srv: Annotated[CatalogServices, Depends(get_catalog_services)],
) -> ItemOutput:
    try:
        return await catalog_srv.get_item(item_id)
    except exc.CatalogExceptionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Item with id={item_id} not found"
        )
    except exc.CatalogExceptionSQL:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get item"
        )
