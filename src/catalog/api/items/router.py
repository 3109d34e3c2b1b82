from typing import Annotated

from fastapi import APIRouter, Depends

from models.item import ItemOutput, ItemsOutput
from models.message import MessageOutput
from .dependencies import add_item_dep, get_items_dep, get_item_by_id_dep, search_items_dep


items_router = APIRouter(
    tags=["items"]
)


@items_router.get("/items", response_model=ItemsOutput)
async def get_items(
    items: Annotated[ItemsOutput, Depends(get_items_dep)]
):
    """ Get all items """
    return items


@items_router.get(
    "/items/{item_id}",
    response_model=ItemOutput,
    responses={
        404: {"description": "Item not found"},
    }
)
async def get_item(
    item: Annotated[ItemOutput, Depends(get_item_by_id_dep)]
):
    """ Get item by id """
    return item


@items_router.post(
    "/items",
    response_model=MessageOutput,
    responses={
        400: {"description": "Item name or category is empty"},
    }
)
async def add_item(
    message: Annotated[MessageOutput, Depends(add_item_dep)]
):
    """ Add item (multipart form: name, category, optional image file) """
    return message


@items_router.get("/search", response_model=ItemsOutput)
async def search_items(
    items: Annotated[ItemsOutput, Depends(search_items_dep)]
):
    """ Get items whose name equals `keyword` """
    return items
