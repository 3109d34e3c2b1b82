from typing import Literal

from pydantic_settings import BaseSettings

dotenv_path = '.env'


class Settings(BaseSettings):

    MODE: Literal['DEPLOY', 'DEBUG'] = 'DEPLOY'

    # SQLite DB (file-backed)
    DB_DSN: str = 'sqlite+aiosqlite:///db/catalog.sqlite3'

    # Image store
    IMAGES_DIR: str = 'images'
    IMAGE_EXT: str = '.jpg'
    DEFAULT_IMAGE: str = 'default.jpg'

    # HTTP server
    FRONT_URL: str = 'http://localhost:3000'
    HOST: str = '0.0.0.0'
    PORT: int = 9000

    # Logging
    LOG_LEVEL: str = 'INFO'
    LOG_FILE: str = ''


    def get_allowed_origins(self) -> list[str]:
        return [self.FRONT_URL]


    class Config:
        env_file = dotenv_path
        env_file_encoding = 'utf-8'


config = Settings()
