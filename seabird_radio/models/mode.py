"""Modulation modes reported by spotting networks."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from seabird_radio.errors import ParseError


class Mode(str, Enum):
    """Closed set of modes understood by the bot.

    ``UNKNOWN`` is only produced for spots that carry no mode at all; it
    can never be typed by a user.
    """

    FT4 = "FT4"
    FT8 = "FT8"
    SSB = "SSB"
    USB = "USB"
    LSB = "LSB"
    CW = "CW"
    FM = "FM"
    RTTY = "RTTY"
    C4FM = "C4FM"
    PSK31 = "PSK31"
    DSTAR = "DSTAR"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, text: str) -> Mode:
        """Case-insensitive lookup over the named modes."""
        mode = _NAMED_MODES.get(text.upper()) if isinstance(text, str) else None
        if mode is None:
            raise ParseError(f'unknown mode "{text}"', str(text))
        return mode

    @classmethod
    def from_feed(cls, value: Optional[str]) -> Mode:
        """Mode field of a spot record; blank means ``UNKNOWN``."""
        if not value:
            return cls.UNKNOWN
        return cls.parse(value)

    def __str__(self) -> str:
        return self.value


_NAMED_MODES = {m.value: m for m in Mode if m is not Mode.UNKNOWN}
