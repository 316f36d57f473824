"""Custom exceptions for recordtree."""


class RecordTreeError(Exception):
    """Base exception for recordtree operations."""


class AddressRequiredError(RecordTreeError, ValueError):
    """No target address was supplied for a delete."""

    def __init__(self, message: str = "address is required") -> None:
        super().__init__(message)


class StorageError(RecordTreeError):
    """Error talking to the backing store."""


class StorageReadError(StorageError):
    """Backing store could not be read or parsed."""


class StorageWriteError(StorageError):
    """Backing store could not be written."""


class FetchError(RecordTreeError):
    """Error during a request to the record tree API."""


class DeleteFailedError(FetchError):
    """The API reported that a delete did not succeed."""
