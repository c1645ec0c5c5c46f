"""
HTTP access to the sensor history endpoint.

The client is the only place that touches the network. It turns every failure
into one of the two load errors so callers never see `requests` exceptions.
"""

import logging
from typing import Optional

import requests

from co2dash import constants
from co2dash.core.errors import APIError
from co2dash.core.model import SeriesStore

logger = logging.getLogger("CO2Dash.HistoryClient")


class HistoryClient:
    """Fetches and decodes the reading history with a shared `requests.Session`."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", constants.api.ACCEPT_HEADER)
        self.session.headers.setdefault("User-Agent", f"{constants.app.APP_NAME}/{constants.app.VERSION}")

    def fetch(self, url: str, timeout: float = constants.api.DEFAULT_TIMEOUT) -> SeriesStore:
        """
        GETs `url` and decodes the JSON array of readings.

        Raises:
            APIError: On transport failure, non-2xx status, invalid JSON or malformed records.
            DataError: If the array is empty.
        """
        try:
            response = self.session.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Request to %s failed: %s", url, e)
            raise APIError(f"Request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Response from %s is not valid JSON: %s", url, e)
            raise APIError("Response is not valid JSON") from e

        store = SeriesStore.from_json(payload)
        logger.debug("Decoded %d readings from %s", len(store), url)
        return store

    def close(self) -> None:
        self.session.close()
