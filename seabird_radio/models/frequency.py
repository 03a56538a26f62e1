"""Exact integer-hertz radio frequencies.

Frequencies are stored as a whole number of hertz so that comparisons
against band edges never suffer from floating point drift.  Text is
parsed with :class:`decimal.Decimal` for the same reason.
"""

from __future__ import annotations

import re
from decimal import ROUND_FLOOR, Decimal
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, Field

from seabird_radio.errors import ParseError

# Plain decimal digits only: no sign, exponent, underscores, nan or inf.
_DECIMAL_TEXT = re.compile(r"^(\d+\.?\d*|\.\d+)$")


@total_ordering
class Frequency(BaseModel):
    """A non-negative radio frequency in hertz."""

    model_config = ConfigDict(frozen=True)

    hz: int = Field(ge=0)

    @classmethod
    def parse(cls, text: str) -> Frequency:
        """Parse decimal frequency text, flooring to whole hertz.

        Spot feeds report kilohertz (``"14074"``, ``"7123.5"``).  Text with
        a decimal point and a value below 1000 is read as megahertz
        instead (``"14.074"``), since no amateur spot is reported in
        fractional kilohertz that low.
        """
        cleaned = text.strip() if isinstance(text, str) else ""
        if not _DECIMAL_TEXT.match(cleaned):
            raise ParseError(f'invalid frequency "{text}"', str(text))

        value = Decimal(cleaned)
        scale = 1_000_000 if "." in cleaned and value < 1000 else 1_000
        try:
            hz = (value * scale).to_integral_value(rounding=ROUND_FLOOR)
        except ArithmeticError:
            raise ParseError(f'invalid frequency "{text}"', str(text)) from None
        return cls(hz=int(hz))

    def mhz(self) -> int:
        """Whole megahertz, truncated."""
        return self.hz // 1_000_000

    def in_range(self, frequency_range: FrequencyRange) -> bool:
        return frequency_range.low.hz <= self.hz <= frequency_range.high.hz

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Frequency):
            return NotImplemented
        return self.hz < other.hz

    def __str__(self) -> str:
        khz = (self.hz % 1_000_000) // 1_000
        # Half-kHz spots keep their precision; other sub-kHz remainders are dropped.
        suffix = ".5" if self.hz % 1_000 == 500 else ""
        return f"{self.mhz()}.{khz:03d}{suffix}"


class FrequencyRange(BaseModel):
    """An inclusive span of frequencies."""

    model_config = ConfigDict(frozen=True)

    low: Frequency
    high: Frequency

    def __contains__(self, frequency: object) -> bool:
        if not isinstance(frequency, Frequency):
            return False
        return frequency.in_range(self)
