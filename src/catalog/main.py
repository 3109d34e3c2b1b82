import logging

import uvicorn

from catalog.app.config_reader import config
from catalog.debug import debug_enable

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        filename=config.LOG_FILE or None,
        level=config.LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    if config.MODE == 'DEBUG':
        debug_enable()

    logger.info(f'Starting server on {config.HOST}:{config.PORT} ({config.MODE=})')
    uvicorn.run(
        "catalog.api.main:app",
        host=config.HOST,
        port=config.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
