"""
Domain errors raised by repositories and services.

Each carries the HTTP status the API maps it to; see the handler registered in
lifttrack.main. Unauthenticated requests never get this far: the auth
dependency rejects them with a 401 HTTPException.
"""
from __future__ import annotations
from typing import Any


class LiftTrackError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFound(LiftTrackError):
    status_code = 404


class Forbidden(LiftTrackError):
    status_code = 403


class ValidationFailure(LiftTrackError):
    status_code = 422


class InvalidTransition(LiftTrackError):
    status_code = 409


class StoreFailure(LiftTrackError):
    """
    A read or write against the database failed and was rolled back.

    `snapshot` is set when the failure happened inside a session transition:
    it holds the session state with the optimistic change undone.
    """
    status_code = 503

    def __init__(self, detail: str, *, snapshot: Any = None):
        super().__init__(detail)
        self.snapshot = snapshot
