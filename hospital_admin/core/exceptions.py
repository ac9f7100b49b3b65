"""
Exceptions for the hospital admin core.

``DataServiceError`` is raised by the data service client for every
transport or backend failure. The entity controller translates those into
``FetchFailed`` / ``WriteFailed`` and records ``ValidationFailed`` before any
network call is made.
"""

from __future__ import annotations

from typing import Any


class HospitalAdminError(Exception):
    """Base exception for all hospital admin errors."""
    pass


class DataServiceError(HospitalAdminError):
    """
    Raised when the hosted data service rejects or fails a request.

    The error is opaque to the controller: it is never retried, only
    reported.

    Attributes:
        status_code: HTTP status returned by the service (None for transport errors)
        detail: Parsed error body, if any
    """
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: Any = None,
    ):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = {'detail': str(self)}
        if self.status_code is not None:
            result['status_code'] = self.status_code
        if self.detail:
            result['service_detail'] = self.detail
        return result


class ControllerError(HospitalAdminError):
    """Base class for failures recorded by the entity controller."""

    code = 'controller_error'
    status_code = None

    def to_dict(self) -> dict[str, Any]:
        return {'detail': str(self), 'code': self.code}


class FetchFailed(ControllerError):
    """List retrieval failed; the previously loaded items are kept."""

    code = 'fetch_failed'

    def __init__(self, message: str, *, entity: str, status_code: int | None = None):
        self.entity = entity
        self.status_code = status_code
        super().__init__(message)


class WriteFailed(ControllerError):
    """
    Insert, update or delete failed.

    Attributes:
        entity: Table name of the entity
        action: 'add', 'book', 'update' or 'delete'
        record_id: ID of the affected record (None for inserts)
        status_code: HTTP status of the data service failure, if any
    """

    code = 'write_failed'

    def __init__(
        self,
        message: str,
        *,
        entity: str,
        action: str,
        record_id: Any = None,
        status_code: int | None = None,
    ):
        self.entity = entity
        self.action = action
        self.record_id = record_id
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result['action'] = self.action
        if self.record_id is not None:
            result['id'] = self.record_id
        return result


class ValidationFailed(ControllerError):
    """
    Required fields missing or values not coercible.

    Raised before any network call; carries the per-field messages for
    inline display.
    """

    code = 'validation_failed'

    def __init__(self, errors: dict[str, list[str]], message: str = "Please correct the highlighted fields"):
        self.errors = errors
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result['errors'] = self.errors
        return result
