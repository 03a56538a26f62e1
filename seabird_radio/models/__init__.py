"""Model exports."""

from .activation import Activation, RawActivation
from .band import Band
from .command import ChannelSource, ChannelUser, CommandEvent, CommandMetadata, Reply
from .conditions import (
    BandConditionEntry,
    BandConditionRecord,
    PartialBandCondition,
    SolarConditionReport,
)
from .frequency import Frequency, FrequencyRange
from .mode import Mode

__all__ = [
    "Frequency",
    "FrequencyRange",
    "Mode",
    "Band",
    "BandConditionEntry",
    "BandConditionRecord",
    "PartialBandCondition",
    "SolarConditionReport",
    "RawActivation",
    "Activation",
    "ChannelUser",
    "ChannelSource",
    "CommandEvent",
    "CommandMetadata",
    "Reply",
]
