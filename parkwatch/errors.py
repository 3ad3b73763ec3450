"""Exception taxonomy for flood zone resolution.

InvalidInputError is the caller's fault (HTTP 400). UpstreamQueryError and its
UpstreamUnavailableError subclass are dependency failures (HTTP 502). An empty
result is not an error and has no exception.
"""


class ParkWatchError(Exception):
    pass


class InvalidInputError(ParkWatchError, ValueError):
    """Latitude/longitude missing or not a finite number."""


class UpstreamQueryError(ParkWatchError):
    """The geometry service answered, but not with a usable feature collection."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnavailableError(UpstreamQueryError):
    """Network failure or deadline expiry talking to the geometry service."""
