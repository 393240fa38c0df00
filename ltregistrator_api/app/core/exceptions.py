"""
Error kinds shared by the data-access services and the API handlers.

Services raise these exceptions instead of returning status codes; the
handlers translate them into HTTP responses using ``status_code`` and
``detail`` as they are.  This is the only contract between the two
layers for telling a missing record (404) apart from a record owned by
somebody else (403).
"""

from typing import Any, Dict, List, Optional


class ServiceError(Exception):
    """Base class for errors reported by the data-access layer."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> Any:
        return self.message


class ValidationError(ServiceError):
    """Request data is missing or does not match its schema.

    ``errors`` holds the individual problems in pydantic's shape
    (``loc``, ``msg``, ``type``); when present they are sent to the
    client instead of the summary message.
    """

    status_code = 400

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    @property
    def detail(self) -> Any:
        return self.errors or self.message


class NotFoundError(ServiceError):
    """An employee, leave or project id could not be resolved."""

    status_code = 404


class ForbiddenError(ServiceError):
    """The caller tried to touch a record owned by another employee."""

    status_code = 403
