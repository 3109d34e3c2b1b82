class CatalogException(Exception):
    pass


class CatalogExceptionValidation(CatalogException):
    """ Required field of the submitted item is empty """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Field `{field}` is empty")


class CatalogExceptionSQL(CatalogException):
    pass


class CatalogExceptionImage(CatalogException):
    pass


class CatalogExceptionNotFound(CatalogException):
    pass


class CatalogExceptionBadRequest(CatalogException):
    pass
