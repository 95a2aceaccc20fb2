# ABOUTME: Read-only accessor wrapper around one decoded forecast payload.
# ABOUTME: Exposes location metadata, data blocks, alerts, and flags without further computation.

from typing import Literal

from forecasttools.models import Alert, DataBlock, DataPoint, Flags, ForecastPayload

BlockName = Literal["minutely", "hourly", "daily"]


class ForecastResponse:
    """Weather data returned for one query."""

    def __init__(self, payload: ForecastPayload):
        self._payload = payload

    def __repr__(self) -> str:
        return f"ForecastResponse(latitude={self.latitude}, longitude={self.longitude}, timezone={self.timezone!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, ForecastResponse):
            return NotImplemented
        return self._payload == other._payload

    @property
    def raw_data(self) -> ForecastPayload:
        return self._payload

    @property
    def latitude(self) -> float:
        return self._payload.latitude

    @property
    def longitude(self) -> float:
        return self._payload.longitude

    @property
    def timezone(self) -> str:
        return self._payload.timezone

    @property
    def offset(self) -> float | None:
        return self._payload.offset

    @property
    def currently(self) -> DataPoint | None:
        return self._payload.currently

    def count(self, block: BlockName) -> int:
        """Number of data points in a block, 0 when the block is absent."""
        data_block: DataBlock | None = getattr(self._payload, block)
        return len(data_block.data) if data_block else 0

    def _block(self, block: BlockName, index: int | None) -> list[DataPoint] | DataPoint | None:
        points = getattr(self._payload, block).data if self.count(block) else []
        if index is None:
            return points or None
        if 0 <= index < len(points):
            return points[index]
        return None

    def minutely(self, index: int | None = None) -> list[DataPoint] | DataPoint | None:
        """All minutely points, or the one at index; None if unavailable."""
        return self._block("minutely", index)

    def hourly(self, index: int | None = None) -> list[DataPoint] | DataPoint | None:
        return self._block("hourly", index)

    def daily(self, index: int | None = None) -> list[DataPoint] | DataPoint | None:
        return self._block("daily", index)

    @property
    def alerts(self) -> list[Alert] | None:
        return self._payload.alerts or None

    @property
    def flags(self) -> Flags | None:
        return self._payload.flags
