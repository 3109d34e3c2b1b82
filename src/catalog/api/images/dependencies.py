from pathlib import Path
from typing import Annotated

from fastapi import Depends, HTTPException, status

from catalog.domain import exceptions as exc
from catalog.domain.services import CatalogServices
from ..dependencies import get_catalog_services


def get_image_path_dep(
    image_name: str,
    catalog_srv: Annotated[CatalogServices, Depends(get_catalog_services)],
) -> Path:
    try:
        return catalog_srv.get_image_path(image_name)
    except exc.CatalogExceptionBadRequest as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except exc.CatalogExceptionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Image not found"
        )
