__all__ = ["ValidationException", "RecordNotFound", "MenuItemNotFound", "OrderNotFound",
           "PersistenceException"]


# Validations exceptions
class ValidationException(Exception):
    LEVEL = 'warning'


# Lookup exceptions
class RecordNotFound(Exception):
    LEVEL = 'warning'


class MenuItemNotFound(RecordNotFound):
    pass


class OrderNotFound(RecordNotFound):
    pass


# Storage exceptions
class PersistenceException(Exception):
    LEVEL = 'error'
