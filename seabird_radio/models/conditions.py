"""Pydantic models for the hamqsl day/night band condition report.

The upstream report lists each band twice, once tagged ``day`` and once
tagged ``night``, in no particular order.  Entries are accumulated into
a :class:`PartialBandCondition` per band name and only promoted to a
:class:`BandConditionRecord` once both periods are present.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel

from seabird_radio.errors import ValidationError


class BandConditionEntry(BaseModel):
    """One ``<band name=.. time=..>condition</band>`` element."""

    name: str
    time: str  # "day" or "night"
    condition: str


class BandConditionRecord(BaseModel):
    """Complete propagation conditions for one band."""

    day: str
    night: str


class PartialBandCondition(BaseModel):
    """Accumulator for a band whose day or night value may still be missing."""

    name: str
    day: Optional[str] = None
    night: Optional[str] = None

    def assign(self, time: str, condition: str) -> None:
        """Fill the slot for ``time``, refusing to overwrite it."""
        if time not in ("day", "night"):
            raise ValidationError(f"unknown time {time} for band {self.name}")
        if getattr(self, time) is not None:
            raise ValidationError(f"{time} conditions for band {self.name} already set")
        setattr(self, time, condition)

    def finalize(self) -> BandConditionRecord:
        if self.day is None:
            raise ValidationError(f"missing day value for band {self.name}")
        if self.night is None:
            raise ValidationError(f"missing night value for band {self.name}")
        return BandConditionRecord(day=self.day, night=self.night)


class SolarConditionReport(BaseModel):
    """Band conditions keyed by band name, in name order."""

    updated: str
    bands: Dict[str, BandConditionRecord]

    def lines(self) -> List[str]:
        """Render the report as chat lines, header first."""
        output = [f"updated {self.updated}"]
        for name in sorted(self.bands):
            band = self.bands[name]
            output.append(f"{name} - day: {band.day}, night: {band.night}")
        return output
