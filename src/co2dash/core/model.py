"""
Model module for CO2Dash.

Defines the immutable sensor `Reading`, its enumerations, and the `SeriesStore`
that holds one complete, successfully decoded history payload.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any, Iterator, List, Mapping, Sequence, Tuple, Union, overload

from co2dash import constants
from co2dash.core.errors import APIError, DataError


class SensorStatus(IntEnum):
    """Operating state reported by the sensor, encoded 0-3 on the wire."""
    NORMAL = 0
    WARMUP = 1
    STARTUP = 2
    INVALID = 3

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    SensorStatus.NORMAL: "Normal operation",
    SensorStatus.WARMUP: "Warm-up",
    SensorStatus.STARTUP: "Initial startup",
    SensorStatus.INVALID: "Invalid output",
}


class QualityIndex(IntEnum):
    """
    Air quality index, encoded 0-5 on the wire.

    Higher values mean worse air, except UNKNOWN which is 0.
    """
    UNKNOWN = 0
    EXCELLENT = 1
    GOOD = 2
    MODERATE = 3
    POOR = 4
    UNHEALTHY = 5

    @property
    def label(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class Reading:
    """
    One timestamped sensor sample.

    Attributes:
        time: Local (naive) time the sample was taken.
        status: Sensor operating state.
        quality: Air quality index.
        tvoc: Total volatile organic compounds, 0-65535.
        co2: CO2 concentration in ppm, 0-65535.
    """
    time: datetime
    status: SensorStatus
    quality: QualityIndex
    tvoc: int
    co2: int

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> "Reading":
        """
        Builds a Reading from one decoded JSON object.

        Raises:
            APIError: If a field is missing, has the wrong type, or is out of range.
        """
        if not isinstance(record, Mapping):
            raise APIError(f"Expected a JSON object, got {type(record).__name__}")

        missing = [name for name in constants.api.REQUIRED_FIELDS if name not in record]
        if missing:
            raise APIError(f"Reading is missing fields: {', '.join(missing)}")

        raw_time = record["time"]
        if not isinstance(raw_time, str):
            raise APIError(f"'time' must be a string, got {raw_time!r}")
        try:
            timestamp = datetime.strptime(raw_time, constants.api.TIME_FORMAT)
        except ValueError as e:
            raise APIError(f"Unparseable 'time' value {raw_time!r}") from e

        try:
            status = SensorStatus(_as_int("status", record["status"]))
            quality = QualityIndex(_as_int("qi", record["qi"]))
        except ValueError as e:
            raise APIError(str(e)) from e

        return cls(
            time=timestamp,
            status=status,
            quality=quality,
            tvoc=_as_sensor_value("tvoc", record["tvoc"]),
            co2=_as_sensor_value("co2", record["co2"]),
        )


def _as_int(name: str, value: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise APIError(f"'{name}' must be an integer, got {value!r}")
    return value


def _as_sensor_value(name: str, value: Any) -> int:
    number = _as_int(name, value)
    if not 0 <= number <= constants.api.MAX_SENSOR_VALUE:
        raise APIError(f"'{name}' out of range: {number}")
    return number


class SeriesStore(Sequence[Reading]):
    """
    An immutable, non-empty sequence of readings in the order received.

    The store is replaced wholesale on every successful load; its identity is
    part of the render cache key.
    """

    def __init__(self, readings: Sequence[Reading]) -> None:
        if not readings:
            raise DataError("History payload contains no readings.")
        self._readings: Tuple[Reading, ...] = tuple(readings)

    @classmethod
    def from_json(cls, payload: Any) -> "SeriesStore":
        """
        Decodes a JSON array of reading objects.

        Raises:
            APIError: If the payload is not a list or any record is malformed.
            DataError: If the list is empty.
        """
        if not isinstance(payload, list):
            raise APIError(f"Expected a JSON array of readings, got {type(payload).__name__}")
        return cls([Reading.from_json(record) for record in payload])

    @overload
    def __getitem__(self, index: int) -> Reading: ...
    @overload
    def __getitem__(self, index: slice) -> Tuple[Reading, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Reading, Tuple[Reading, ...]]:
        return self._readings[index]

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[Reading]:
        return iter(self._readings)

    def __repr__(self) -> str:
        return f"SeriesStore(length={len(self)}, first={self._readings[0].time}, last={self.latest.time})"

    @property
    def latest(self) -> Reading:
        """The most recent reading (last in the sequence)."""
        return self._readings[-1]

    def window(self, low: int, high: int) -> Tuple[Reading, ...]:
        """Returns readings low..high inclusive."""
        if not (0 <= low <= high < len(self)):
            raise IndexError(f"Window [{low}, {high}] outside series of length {len(self)}")
        return self._readings[low:high + 1]

    def times(self, low: int, high: int) -> List[datetime]:
        return [reading.time for reading in self.window(low, high)]

    def co2_values(self, low: int, high: int) -> List[int]:
        return [reading.co2 for reading in self.window(low, high)]
