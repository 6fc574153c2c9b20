"""Custom exception classes for the catalog."""


class CatalogException(Exception):
    """
    Base exception class for all catalog errors.
    """
    pass


class ValidationError(CatalogException):
    """
    Raised when an uploaded file record fails validation.
    The message is the validator's reason.
    """
    pass


class NotFoundError(CatalogException):
    """
    Raised when no file record exists for the requested id.
    """
    pass


class TagMismatchError(CatalogException):
    """
    Raised when tags requested for removal are not all present on the file.
    """
    pass
