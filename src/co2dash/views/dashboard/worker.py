from PyQt6.QtCore import QObject, pyqtSignal
import logging
from typing import Optional

from co2dash.core.api_client import HistoryClient
from co2dash.core.errors import APIError, LoadError
from co2dash.core.request import FetchRequest


class HistoryWorker(QObject):
    """
    Fetches sensor history in a background thread to keep the UI responsive.

    Results travel back to the GUI thread through queued signals, tagged with
    the request's sequence id so the controller can drop stale ones.
    """
    data_ready = pyqtSignal(object, int)  # SeriesStore, sequence_id
    error = pyqtSignal(object, int)  # LoadError, sequence_id

    def __init__(self, client: Optional[HistoryClient] = None):
        """
        Initializes the worker.

        Args:
            client: HTTP client to use; a new one is created when omitted.
        """
        super().__init__()
        self.client = client or HistoryClient()
        self.logger = logging.getLogger("CO2Dash.HistoryWorker")
        self._last_received_id = -1

    def process_request(self, request: FetchRequest):
        """
        Runs one fetch and emits exactly one of data_ready / error.

        Args:
            request: FetchRequest describing the fetch.
        """
        # Check if this request is already obsolete
        if request.sequence_id < self._last_received_id:
            self.logger.debug("Skipping obsolete request #%d", request.sequence_id)
            return
        self._last_received_id = request.sequence_id

        try:
            store = self.client.fetch(request.url, timeout=request.timeout)
        except LoadError as e:
            self.error.emit(e, request.sequence_id)
            return
        except Exception as e:
            self.logger.error(f"Unexpected error in history worker: {e}", exc_info=True)
            self.error.emit(APIError(str(e)), request.sequence_id)
            return

        self.data_ready.emit(store, request.sequence_id)

    def shutdown(self):
        """Releases the HTTP session."""
        self.client.close()
