# ABOUTME: Pydantic BaseModels for forecast queries, decoded API payloads, and failure sentinels.
# ABOUTME: Defines the structured types passed between the query builder, dispatcher, and decoder.

from enum import Enum
from typing import Annotated

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, Strict, StrictInt

# Finite floats or ints; bools, numeric strings, NaN and infinity are rejected.
Coordinate = Annotated[float, Strict(), AllowInfNan(False)] | StrictInt


class Query(BaseModel):
    """One location/time request for weather data."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    latitude: Coordinate
    longitude: Coordinate
    time: StrictInt | None = None
    units: str | None = None
    exclude: str | None = None
    extend: str | None = None
    callback: str | None = None

    def modifiers(self) -> dict[str, str]:
        """Return the optional modifiers that were supplied, in API order."""
        candidates = {"units": self.units, "exclude": self.exclude, "extend": self.extend, "callback": self.callback}
        return {k: v for k, v in candidates.items() if v}


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    EMPTY = "empty"
    DECODE = "decode"


class Failure(BaseModel):
    """In-band marker standing in for a result that could not be retrieved.

    Failures are falsy so a batch can be filtered with a plain truth test.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    reason: str
    url: str | None = None

    def __bool__(self) -> bool:
        return False


class DataPoint(BaseModel):
    """Conditions at one instant; providers add many fields beyond these."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    time: int | None = None
    summary: str | None = None
    icon: str | None = None
    temperature: float | None = None
    apparent_temperature: float | None = Field(default=None, alias="apparentTemperature")
    precip_intensity: float | None = Field(default=None, alias="precipIntensity")
    precip_probability: float | None = Field(default=None, alias="precipProbability")
    humidity: float | None = None
    wind_speed: float | None = Field(default=None, alias="windSpeed")
    cloud_cover: float | None = Field(default=None, alias="cloudCover")
    pressure: float | None = None


class DataBlock(BaseModel):
    """A minutely, hourly, or daily series of data points."""

    model_config = ConfigDict(extra="allow")

    summary: str | None = None
    icon: str | None = None
    data: list[DataPoint] = []


class Alert(BaseModel):
    """Severe weather alert issued for the requested location."""

    model_config = ConfigDict(extra="allow")

    title: str | None = None
    expires: int | None = None
    description: str | None = None
    uri: str | None = None


class Flags(BaseModel):
    """Metadata about the sources used to build the forecast."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    darksky_unavailable: str | None = Field(default=None, alias="darksky-unavailable")
    darksky_stations: list[str] | None = Field(default=None, alias="darksky-stations")
    datapoint_stations: list[str] | None = Field(default=None, alias="datapoint-stations")
    isd_stations: list[str] | None = Field(default=None, alias="isd-stations")
    lamp_stations: list[str] | None = Field(default=None, alias="lamp-stations")
    metar_stations: list[str] | None = Field(default=None, alias="metar-stations")
    metno_license: str | None = Field(default=None, alias="metno-license")
    sources: list[str] | None = None
    units: str | None = None


class ForecastPayload(BaseModel):
    """Parsed response body from the forecast endpoint."""

    model_config = ConfigDict(extra="allow")

    latitude: float
    longitude: float
    timezone: str
    offset: float | None = None
    currently: DataPoint | None = None
    minutely: DataBlock | None = None
    hourly: DataBlock | None = None
    daily: DataBlock | None = None
    alerts: list[Alert] = []
    flags: Flags | None = None
