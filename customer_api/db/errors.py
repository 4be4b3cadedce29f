"""Store error hierarchy.

Every CustomerStore implementation raises these errors so that callers
handle in-memory and PostgreSQL backends identically.
"""


class StoreError(Exception):
    """Base exception for all store errors.

    Backend-specific failures are wrapped in one of the subclasses,
    with the original exception kept on ``cause``.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConnectionError(StoreError):
    """Raised when the store cannot be reached.

    Examples:
        - Database connection timeout
        - Pool exhausted or closed
        - Network errors
    """

    pass


class NotFoundError(StoreError):
    """Raised when a referenced customer does not exist or is soft-deleted.

    Not raised for empty query results.
    """

    pass


class ConflictError(StoreError):
    """Raised when a write clashes with stored data.

    Examples:
        - Two active customers would share an email (``email`` is set)
        - A new customer reuses an existing id
    """

    def __init__(
        self,
        message: str,
        email: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.email = email


class ValidationError(StoreError):
    """Raised on invalid input.

    Examples:
        - Required field missing or blank
        - Field longer than its column allows
        - Non-positive page size
    """

    pass
