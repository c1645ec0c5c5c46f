"""
Unit tests for the reading model and SeriesStore decoding.
"""

import pytest
from datetime import datetime

from co2dash.core.errors import APIError, DataError
from co2dash.core.model import QualityIndex, Reading, SensorStatus, SeriesStore


def test_quality_index_encoding_is_preserved():
    """Higher integers mean worse air, except Unknown which is 0."""
    assert QualityIndex(0) is QualityIndex.UNKNOWN
    assert QualityIndex(1) is QualityIndex.EXCELLENT
    assert QualityIndex(5) is QualityIndex.UNHEALTHY
    assert QualityIndex.POOR > QualityIndex.GOOD


def test_status_labels():
    assert SensorStatus(0).label == "Normal operation"
    assert SensorStatus(1).label == "Warm-up"
    assert SensorStatus(2).label == "Initial startup"
    assert SensorStatus(3).label == "Invalid output"
    assert QualityIndex.MODERATE.label == "Moderate"


def test_reading_from_json_parses_local_time_and_enums(history_payload):
    reading = Reading.from_json(history_payload[1])

    assert reading.time == datetime(2024, 5, 1, 12, 1, 0, 250000)
    assert reading.time.tzinfo is None
    assert reading.status is SensorStatus.WARMUP
    assert reading.quality is QualityIndex.MODERATE
    assert reading.tvoc == 130
    assert reading.co2 == 700


def test_reading_is_immutable(history_payload):
    reading = Reading.from_json(history_payload[0])
    with pytest.raises(AttributeError):
        reading.co2 = 1  # type: ignore[misc]


@pytest.mark.parametrize("field, value", [
    ("status", 4),
    ("qi", 6),
    ("co2", 70000),
    ("tvoc", -1),
    ("co2", "640"),
    ("status", True),
    ("time", "2024/05/01 12:00"),
    ("time", 1714564800),
])
def test_reading_from_json_rejects_bad_fields(history_payload, field, value):
    record = dict(history_payload[0], **{field: value})
    with pytest.raises(APIError):
        Reading.from_json(record)


def test_reading_from_json_rejects_missing_field(history_payload):
    record = dict(history_payload[0])
    del record["qi"]
    with pytest.raises(APIError, match="qi"):
        Reading.from_json(record)


def test_series_store_from_json(history_payload):
    store = SeriesStore.from_json(history_payload)

    assert len(store) == 3
    assert store.latest.co2 == 1850
    assert store[0].co2 == 640
    assert [r.co2 for r in store] == [640, 700, 1850]


def test_series_store_keeps_received_order():
    later = Reading(datetime(2024, 5, 1, 13), SensorStatus.NORMAL, QualityIndex.GOOD, 1, 900)
    earlier = Reading(datetime(2024, 5, 1, 12), SensorStatus.NORMAL, QualityIndex.GOOD, 1, 800)
    store = SeriesStore([later, earlier])
    assert store[0] is later
    assert store.latest is earlier


def test_series_store_empty_raises_data_error():
    with pytest.raises(DataError):
        SeriesStore([])
    with pytest.raises(DataError):
        SeriesStore.from_json([])


def test_series_store_non_list_payload_raises_api_error():
    with pytest.raises(APIError):
        SeriesStore.from_json({"readings": []})


def test_window_is_inclusive(make_store):
    store = make_store(10)
    window = store.window(2, 5)
    assert len(window) == 4
    assert window[0] is store[2]
    assert window[-1] is store[5]
    assert store.co2_values(2, 5) == [502, 503, 504, 505]
    assert store.times(0, 1) == [store[0].time, store[1].time]


def test_window_out_of_range_raises(make_store):
    store = make_store(5)
    with pytest.raises(IndexError):
        store.window(3, 5)
    with pytest.raises(IndexError):
        store.window(3, 2)
