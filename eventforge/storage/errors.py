"""
Storage Errors

Typed failures raised by every repository backend. Callers dispatch on the
exception class, never on message text.
"""


class StoreError(Exception):
    """Persistence failed for a reason the caller cannot fix."""

    def __init__(self, message='Storage operation failed'):
        super().__init__(message)
        self.message = message


class ConflictError(StoreError):
    """A uniqueness constraint rejected the write."""

    def __init__(self, message='Resource already exists', field=None):
        super().__init__(message)
        self.field = field


class StoreUnavailableError(StoreError):
    """The backing store is unreachable or its connection pool is exhausted."""

    def __init__(self, message='Service temporarily unavailable'):
        super().__init__(message)
