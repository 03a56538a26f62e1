"""Amateur bands the POTA lookup can search."""

from __future__ import annotations

from enum import Enum

from seabird_radio.errors import ParseError
from seabird_radio.models.frequency import Frequency, FrequencyRange


class Band(str, Enum):
    """Named allocations, each owning a fixed inclusive frequency range."""

    B20M = "20m"
    B40M = "40m"

    @classmethod
    def parse(cls, text: str) -> Band:
        try:
            return cls(text.lower())
        except (AttributeError, ValueError):
            raise ParseError(f'unknown band "{text}"', str(text)) from None

    def frequency_range(self) -> FrequencyRange:
        return _BAND_RANGES[self]

    def __str__(self) -> str:
        return self.value


_BAND_RANGES = {
    Band.B20M: FrequencyRange(low=Frequency(hz=14_000_000), high=Frequency(hz=14_350_000)),
    Band.B40M: FrequencyRange(low=Frequency(hz=7_000_000), high=Frequency(hz=7_300_000)),
}
