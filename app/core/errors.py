# app/core/errors.py
"""Error kinds raised by the clearance engine.

Each kind carries the HTTP status it maps onto; ``app.main`` renders them as
``{"error": message}``.
"""


class ClearanceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(ClearanceError):
    status_code = 404


class Conflict(ClearanceError):
    status_code = 409


class StaleContext(ClearanceError):
    """Write targets a school year / term that is no longer active."""
    status_code = 409


class ValidationFailed(ClearanceError):
    status_code = 422


class UpstreamFailure(ClearanceError):
    """Datastore failure. Callers may retry."""
    status_code = 503
