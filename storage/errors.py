class StorageError(Exception):
    """Base exception for storage layer errors."""
    pass


class StorageUnavailableError(StorageError):
    """Raised when the backing store cannot complete an operation."""
    pass


class ReferenceNotFoundError(StorageError, ValueError):
    """Raised when a record references a resume or job description that does not exist."""
    pass


class DuplicateUsernameError(StorageError, ValueError):
    """Raised when creating a user whose username is already taken."""
    pass
