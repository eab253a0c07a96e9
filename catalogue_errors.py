class CatalogueError(ValueError):
    """Base error for invalid values handed to the catalogue core"""
    pass


class InvalidInputError(CatalogueError):
    """Raised when a query receives a value it cannot process"""
    pass


class InvalidConfigurationError(CatalogueError):
    """Raised when an object graph is built from invalid parts"""
    pass
