"""
Unit tests for HistoryWorker, called directly on the test thread.
"""

import pytest
from unittest.mock import MagicMock

from co2dash.core.api_client import HistoryClient
from co2dash.core.errors import APIError, DataError
from co2dash.core.request import FetchRequest
from co2dash.views.dashboard.worker import HistoryWorker


def _request(sequence_id: int) -> FetchRequest:
    return FetchRequest(url="https://example.org/h", timeout=2.0, sequence_id=sequence_id)


@pytest.fixture
def client() -> MagicMock:
    return MagicMock(spec=HistoryClient)


@pytest.fixture
def worker(q_app, client):
    worker = HistoryWorker(client)
    worker.ready_events = []
    worker.error_events = []
    worker.data_ready.connect(lambda result, seq: worker.ready_events.append((result, seq)))
    worker.error.connect(lambda err, seq: worker.error_events.append((err, seq)))
    return worker


def test_success_emits_data_ready(worker, client, make_store):
    store = make_store(5)
    client.fetch.return_value = store

    worker.process_request(_request(1))

    client.fetch.assert_called_once_with("https://example.org/h", timeout=2.0)
    assert worker.ready_events == [(store, 1)]
    assert worker.error_events == []


def test_load_error_is_forwarded(worker, client):
    failure = DataError("empty")
    client.fetch.side_effect = failure

    worker.process_request(_request(4))

    assert worker.error_events == [(failure, 4)]
    assert worker.ready_events == []


def test_unexpected_exception_becomes_api_error(worker, client):
    client.fetch.side_effect = RuntimeError("boom")

    worker.process_request(_request(2))

    (error, seq), = worker.error_events
    assert isinstance(error, APIError)
    assert seq == 2


def test_obsolete_request_is_skipped(worker, client, make_store):
    client.fetch.return_value = make_store(3)

    worker.process_request(_request(5))
    worker.process_request(_request(3))

    assert client.fetch.call_count == 1
    assert [seq for _, seq in worker.ready_events] == [5]


def test_shutdown_closes_client(worker, client):
    worker.shutdown()
    client.close.assert_called_once()
