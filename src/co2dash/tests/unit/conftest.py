import os
from datetime import datetime, timedelta

# Headless Qt and Matplotlib for the whole test session
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from PyQt6.QtWidgets import QApplication

from co2dash.core.model import QualityIndex, Reading, SensorStatus, SeriesStore


@pytest.fixture(scope="session")
def q_app():
    """Provides a QApplication instance for the test session."""
    return QApplication.instance() or QApplication([])


def build_readings(count: int, start: datetime = datetime(2024, 5, 1, 12, 0), co2_start: int = 500):
    """Readings one minute apart with ascending CO2."""
    return [
        Reading(
            time=start + timedelta(minutes=i),
            status=SensorStatus.NORMAL,
            quality=QualityIndex.GOOD,
            tvoc=100 + i,
            co2=co2_start + i,
        )
        for i in range(count)
    ]


@pytest.fixture
def make_store():
    """Factory fixture: make_store(n) -> SeriesStore of n ascending readings."""
    def _make(count: int, **kwargs) -> SeriesStore:
        return SeriesStore(build_readings(count, **kwargs))
    return _make


@pytest.fixture
def history_payload():
    """A decoded JSON payload as served by the history endpoint."""
    return [
        {"time": "2024-05-01 12:00:00.000000", "status": 0, "qi": 2, "tvoc": 120, "co2": 640},
        {"time": "2024-05-01 12:01:00.250000", "status": 1, "qi": 3, "tvoc": 130, "co2": 700},
        {"time": "2024-05-01 12:02:00.500000", "status": 0, "qi": 5, "tvoc": 150, "co2": 1850},
    ]
