"""Exceptions raised by the data-access layer."""


class EchowellError(Exception):
    """Base class for application errors."""


class StorageError(EchowellError):
    """The database could not complete a read or write."""


class DuplicateEmailError(StorageError):
    """A user with the same email is already stored."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email!r} already exists")
        self.email = email
