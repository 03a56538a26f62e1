"""Pydantic models for Parks on the Air activation spots."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from seabird_radio.errors import ParseError
from seabird_radio.models.frequency import Frequency
from seabird_radio.models.mode import Mode

SPOT_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


class RawActivation(BaseModel):
    """A spot exactly as the POTA API returns it.

    Only the fields the bot uses are declared; the API sends many more,
    which are ignored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    activator: str
    name: str
    location_desc: str
    mode: Optional[str] = None
    frequency: str  # kHz, as text
    spot_time: str  # UTC, no offset

    def to_activation(self) -> Activation:
        """Convert every field or fail the whole spot."""
        try:
            naive = datetime.strptime(self.spot_time, SPOT_TIME_FORMAT)
        except ValueError:
            raise ParseError(
                f'invalid spot time "{self.spot_time}"', self.spot_time
            ) from None

        return Activation(
            activator=self.activator,
            name=self.name,
            location_desc=self.location_desc,
            mode=Mode.from_feed(self.mode),
            frequency=Frequency.parse(self.frequency),
            spot_time=naive.replace(tzinfo=timezone.utc),
        )


class Activation(BaseModel):
    """A validated activation spot."""

    activator: str
    name: str
    location_desc: str
    mode: Mode
    frequency: Frequency
    spot_time: datetime

    def age(self, now: Optional[datetime] = None) -> timedelta:
        """Signed time from ``now`` to the spot; negative for past spots."""
        return self.spot_time - (now or datetime.now(timezone.utc))

    @field_serializer("frequency")
    def serialize_frequency(self, frequency: Frequency, _info) -> str:
        return str(frequency)

    @field_serializer("spot_time")
    def serialize_datetime(self, dt: datetime, _info) -> str:
        return dt.strftime(SPOT_TIME_FORMAT) + "Z"
