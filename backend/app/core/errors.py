"""Error taxonomy shared by the validation layer, repositories and routers.

Routers never build error responses for these by hand; the handlers
registered in app.api.errors translate them to status codes.
"""


class WeightTrackerError(Exception):
    """Base class for every error the core raises on purpose."""

    message = "Unexpected error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(WeightTrackerError):
    """Input rejected before any storage access."""

    message = "Invalid request"

    def __init__(self, field: str, kind: str, reason: str, message: str | None = None):
        super().__init__(message)
        self.field = field
        self.kind = kind
        self.reason = reason

    def details(self) -> dict:
        return {self.field: self.reason}


class FutureDateError(ValidationError):
    """Entry date falls after today (UTC)."""

    def __init__(self, field: str, value: str):
        super().__init__(
            field,
            kind="future_date",
            reason=f"{value} is in the future",
            message="Invalid date",
        )


class NotFoundError(WeightTrackerError):
    message = "Weight entry not found"


class ConflictError(WeightTrackerError):
    message = "Weight entry already exists for this date"


class StorageError(WeightTrackerError):
    """Underlying read/write failure, including lost connectivity."""

    def __init__(self, operation: str):
        super().__init__(f"Failed to {operation}")
        self.operation = operation
