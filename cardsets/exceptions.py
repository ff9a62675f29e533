"""Exception hierarchy for the cardsets service."""

from fastapi import status


class CardSetsError(Exception):
    """Base exception for all cardsets errors."""

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CardSetsError):
    """Requested record does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class SetNotFoundError(NotFoundError):
    def __init__(self, set_id: str) -> None:
        self.set_id = set_id
        super().__init__(f"Set with id {set_id} not found")


class StoreError(CardSetsError):
    """A call to the persistent store failed."""

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(
            f"Store call '{operation}' failed: {reason}",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )


class PartialCascadeError(CardSetsError):
    """A multi-step write succeeded on an earlier step and failed on a later one.

    The records listed in ``completed`` were written (or deleted) and are not
    rolled back; the caller has to reconcile.
    """

    def __init__(self, operation: str, completed: list[str], cause: StoreError) -> None:
        self.operation = operation
        self.completed = completed
        self.cause = cause
        super().__init__(
            f"{operation} partially applied ({', '.join(completed) or 'no records'}): {cause.message}"
        )
