"""
Constants describing the remote sensor history endpoint and its payload.
"""
from typing import Final, Tuple


class ApiConstants:
    """Defines the data source location, wire format and request limits."""
    HISTORY_URL: Final[str] = "https://sienkiewiczapi.duckdns.org/co2/api/history"
    HISTORY_URL_ENV_VAR: Final[str] = "CO2DASH_HISTORY_URL"

    # Wire format of the "time" field, interpreted as local time.
    TIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S.%f"
    REQUIRED_FIELDS: Final[Tuple[str, ...]] = ("time", "status", "qi", "tvoc", "co2")
    MAX_SENSOR_VALUE: Final[int] = 65535

    # Seconds
    DEFAULT_TIMEOUT: Final[float] = 10.0
    MIN_TIMEOUT: Final[float] = 1.0
    MAX_TIMEOUT: Final[float] = 120.0

    ACCEPT_HEADER: Final[str] = "application/json"

    # Milliseconds to wait for the worker thread on shutdown
    SHUTDOWN_WAIT_MS: Final[int] = 500

    def __init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.HISTORY_URL.startswith(("http://", "https://")):
            raise ValueError("HISTORY_URL must be an http(s) URL")
        if not (self.MIN_TIMEOUT <= self.DEFAULT_TIMEOUT <= self.MAX_TIMEOUT):
            raise ValueError("DEFAULT_TIMEOUT must lie within [MIN_TIMEOUT, MAX_TIMEOUT]")
        if not self.REQUIRED_FIELDS:
            raise ValueError("REQUIRED_FIELDS must not be empty")

# Singleton instance for easy access
api = ApiConstants()
