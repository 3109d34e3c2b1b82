import asyncio
from hashlib import sha256
import logging
from pathlib import Path
from typing import Optional, Union

from fastapi import UploadFile

from . import exceptions as exc

UPLOAD_CHUNK_SIZE = 1024 * 1024  # 1 MiB

logger = logging.getLogger(__name__)


class ImageStore():
    """
        Directory with uploaded item images.

        Stored files are named by the SHA-256 digest of the original file name
        with its extension cut off, so uploads of `cat.jpg` and `cat.png` end up
        in the same file and the last one wins.
    """

    def __init__(
        self,
        images_dir: Union[str, Path],
        image_ext: str = '.jpg',
        default_image: str = 'default.jpg',
    ):
        self._images_dir = Path(images_dir)
        self._image_ext = image_ext
        self._default_image = default_image

    @property
    def images_dir(self) -> Path:
        return self._images_dir

    @property
    def image_ext(self) -> str:
        return self._image_ext

    @property
    def default_image_path(self) -> Path:
        return self._images_dir / self._default_image


    def image_file_name(self, filename: str) -> str:
        base_name = filename.split('.')[0]
        return sha256(base_name.encode('utf-8')).hexdigest() + self._image_ext


    async def ingest(self, upload: Optional[UploadFile]) -> Optional[str]:
        """
            Saves uploaded file into the images directory.
            Returns stored file name or None if no file was uploaded.
            Raises `OSError` if directory or file can't be created or written.
        """
        if upload is None or not upload.filename:
            return None

        await asyncio.to_thread(self._images_dir.mkdir, parents=True, exist_ok=True)

        # Blocking file I/O runs in a worker thread
        file_name = self.image_file_name(upload.filename)
        dst = await asyncio.to_thread(open, self._images_dir / file_name, 'wb')
        try:
            while True:
                chunk = await upload.read(UPLOAD_CHUNK_SIZE)
                if not chunk:
                    break
                await asyncio.to_thread(dst.write, chunk)
        finally:
            await asyncio.to_thread(dst.close)

        logger.info(f'Receive image: {upload.filename} -> {file_name}')
        return file_name


    def resolve(self, requested_name: str) -> Path:
        """
            Returns path of the requested image.
            Falls back to the default image if requested one doesn't exist.
            Raises `CatalogExceptionBadRequest` if the name doesn't end with the
            image extension or isn't a plain file name.
        """
        if not requested_name.endswith(self._image_ext):
            raise exc.CatalogExceptionBadRequest(
                f"Image path does not end with {self._image_ext}"
            )
        if Path(requested_name).name != requested_name:
            raise exc.CatalogExceptionBadRequest(f"Invalid image name: {requested_name}")

        image_path = self._images_dir / requested_name
        if not image_path.is_file():
            logger.debug(f'Image not found: {image_path}')
            image_path = self.default_image_path
        return image_path
