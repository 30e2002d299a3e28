"""Errors raised by the core services.

Each error carries a ``status_code`` and ``detail`` so a presentation layer can
surface it the same way it would an HTTP error.
"""


class SchoolDeskError(Exception):
    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFound(SchoolDeskError):
    """A referenced id does not exist in its collection."""

    status_code = 404


class ValidationError(SchoolDeskError):
    """An operation was given values it cannot apply."""

    status_code = 400
