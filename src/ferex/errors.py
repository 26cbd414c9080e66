"""
Storage error taxonomy.

Every error wraps the exception that caused it (available as ``__cause__``)
and renders as a plain message suitable for showing to the user.
"""


class StorageError(Exception):
    """Base class for scenario store failures."""

    operation = "storage operation"

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"{self.operation} failed: {cause}")


class StorageInitError(StorageError):
    """The data directory or database could not be prepared."""

    operation = "database initialization"


class StorageReadError(StorageError):
    operation = "reading scenarios"


class StorageWriteError(StorageError):
    operation = "writing scenarios"
