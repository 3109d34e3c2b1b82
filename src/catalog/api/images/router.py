from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from .dependencies import get_image_path_dep


images_router = APIRouter(
    tags=["images"]
)


@images_router.get(
    "/image/{image_name}",
    response_class=FileResponse,
    responses={
        400: {"description": "Image name has wrong extension"},
        404: {"description": "Default image is missing"},
    }
)
async def get_image(
    image_path: Annotated[Path, Depends(get_image_path_dep)]
):
    """ Get image file by name (default image if it doesn't exist) """
    return FileResponse(image_path)
