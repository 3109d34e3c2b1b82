import logging

def debug_enable(*argv):
    debug_modules = (
        'catalog.main',
        'catalog.api.main',
        'catalog.api.access_log',
        'catalog.domain.services',
        'catalog.domain.categories',
        'catalog.domain.images',
    )

    if len(argv):
        debug_modules = argv

    for module in debug_modules:
        logging.getLogger(module).setLevel(logging.DEBUG)
