"""
Exceptions raised while loading sensor history.

Both kinds are non-fatal: the LoadController turns either one into the
ERRORED state and waits for the user to press Refresh.
"""


class LoadError(Exception):
    """Base class for failures that prevent a history load from completing."""


class APIError(LoadError):
    """The history could not be fetched or decoded (transport, HTTP status, JSON or field errors)."""


class DataError(LoadError):
    """The payload decoded but cannot produce a valid chart window (e.g. it is empty)."""
