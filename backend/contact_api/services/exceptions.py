"""
Service Exceptions

Errors raised by the contact, messaging and auth services. They carry no
HTTP details; the API layer maps each one to a status code.
"""


class ServiceError(Exception):
    """Base exception for service errors"""
    pass


class MissingFieldError(ServiceError):
    """Raised when a required request field is absent or empty"""
    pass


class ConflictError(ServiceError):
    """Base for operations rejected because of existing state"""
    pass


class DuplicateContactError(ConflictError):
    """Raised when a contact_name is already taken"""
    pass


class MessageWriteError(ConflictError):
    """Raised when a message row cannot be written"""
    pass


class NotFoundError(ServiceError):
    pass


class ContactNotFoundError(NotFoundError):
    """Raised when no contact matches the given id or name"""
    pass


class InvalidCredentialsError(ServiceError):
    """Raised when no user row matches the username/password pair"""
    pass


class StoreUnavailableError(ServiceError):
    """Raised for any other database failure, including connectivity"""
    pass


class ImageStorageError(StoreUnavailableError):
    """Raised when an uploaded image cannot be written to disk"""
    pass
