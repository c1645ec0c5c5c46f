"""
Fetch request objects for worker thread communication.

Using a dataclass instead of loose arguments keeps the queued signal between
the controller and the worker thread self-documenting and validated.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchRequest:
    """
    Encapsulates one history fetch.

    Attributes:
        url: Endpoint returning the JSON array of readings.
        timeout: Request timeout in seconds.
        sequence_id: Fetch generation; only the newest one may change state.

    Example:
        >>> request = FetchRequest(url="https://example.org/co2/api/history", timeout=10.0, sequence_id=3)
        >>> worker.process_request(request)
    """
    url: str
    timeout: float
    sequence_id: int

    def __post_init__(self):
        """Validate request parameters."""
        if not isinstance(self.url, str) or not self.url.startswith(("http://", "https://")):
            raise ValueError(f"url must be an http(s) URL, got {self.url!r}")

        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number, got {self.timeout!r}")

        if isinstance(self.sequence_id, bool) or not isinstance(self.sequence_id, int) or self.sequence_id < 0:
            raise ValueError(f"sequence_id must be non-negative int, got {self.sequence_id}")
