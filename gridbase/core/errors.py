# File: /gridbase/core/errors.py | Version: 1.0 | Title: Domain error taxonomy
from __future__ import annotations


class GridError(Exception):
    """Root of every error the service raises on purpose."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GridError):
    """Malformed filter/sort/cursor, column type mismatch, out-of-range input."""

    status_code = 400


class NotFoundError(GridError):
    status_code = 404


class PreconditionError(GridError):
    """The request is well formed but the target is not in a usable state."""

    status_code = 409


class InfrastructureError(GridError):
    """
    Storage unreachable or a statement failed to execute.
    Never retried here; the caller decides whether to resend the request.
    """

    status_code = 503


class PartialCompletionError(GridError):
    """
    A bulk run failed after some batches were already committed.

    Committed rows stay in place. Callers should re-query the table to find
    out what exists rather than blindly retrying the whole run.
    """

    status_code = 500

    def __init__(self, committed: int, total: int):
        super().__init__(
            f"bulk create failed after {committed} of {total} rows were committed"
        )
        self.committed = committed
        self.total = total
