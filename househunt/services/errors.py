"""Domain exceptions raised by the lookup and plot services.

Every error carries a human-readable message for the UI and a stable code
for the HTTP layer.
"""


class TrackerError(Exception):
    """Base exception for tracker errors."""

    code = "tracker_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(TrackerError):
    """Missing required field, malformed id, missing parent, bad document."""

    code = "validation_error"


class ConflictError(TrackerError):
    """Duplicate name within scope, duplicate plot number, duplicate link."""

    code = "conflict"


class NotFoundError(TrackerError):
    """Update targeted a row that does not exist."""

    code = "not_found"
