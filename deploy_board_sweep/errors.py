"""Exception hierarchy shared by every component of the sweep."""

from typing import Optional


class BoardSweepError(Exception):
    """Base class for all errors raised by deploy-board-sweep."""


class ValidationError(BoardSweepError, ValueError):
    """A caller-supplied parameter or configuration value is invalid.

    Always raised before any network request is sent.
    """


class RemoteError(BoardSweepError):
    """A request returned a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NetworkError(RemoteError):
    """Transport failure, or a non-success status from a plain JSON fetch."""


class DataError(BoardSweepError):
    """A response body is malformed or lacks an expected field."""


class NotFoundError(BoardSweepError):
    """A project or column with the configured name does not exist."""


class SweepStepError(BoardSweepError):
    """A step of the sweep failed; the message names the step."""
