"""Shared fixtures for seabird radio tests."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from seabird_radio.adapters.solar import build_solar_report
from seabird_radio.models import Activation, BandConditionEntry, Frequency, Mode
from seabird_radio.router import CommandRouter

SOLAR_XML = """<solar>
  <solardata>
    <source url="http://www.hamqsl.com/solar.html">N0NBH</source>
    <updated> 18 Oct 2026 1200 GMT</updated>
    <solarflux>150</solarflux>
    <calculatedconditions>
      <band name="80m-40m" time="day">Fair</band>
      <band name="30m-20m" time="day">Good</band>
      <band name="17m-15m" time="day">Good</band>
      <band name="12m-10m" time="day">Poor</band>
      <band name="80m-40m" time="night">Good</band>
      <band name="30m-20m" time="night">Fair</band>
      <band name="17m-15m" time="night">Poor</band>
      <band name="12m-10m" time="night">Poor</band>
    </calculatedconditions>
  </solardata>
</solar>
"""

NOW = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


def make_activation(khz_text: str, mode: Mode, activator: str = "K1ABC") -> Activation:
    return Activation(
        activator=activator,
        name="Test Park",
        location_desc="US-CT",
        mode=mode,
        frequency=Frequency.parse(khz_text),
        spot_time=datetime(2026, 10, 18, 11, 58, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def solar_xml():
    return SOLAR_XML


@pytest.fixture
def activations():
    """20m FT8, 20m SSB, 40m SSB, most recent first."""
    return [
        make_activation("14074", Mode.FT8, "K1FT8"),
        make_activation("14200", Mode.SSB, "K1SSB"),
        make_activation("7100", Mode.SSB, "W1SSB"),
    ]


@pytest.fixture
def raw_spot():
    """One spot as returned by api.pota.app/v1/spots."""
    return {
        "spotId": 1234567,
        "activator": "N1XYZ",
        "frequency": "14285.5",
        "mode": "SSB",
        "reference": "US-1234",
        "parkName": None,
        "spotTime": "2026-10-18T11:57:55",
        "spotter": "N1XYZ",
        "comments": "QRT soon",
        "source": "RBN",
        "name": "Sleeping Giant State Park",
        "locationDesc": "US-CT",
        "grid4": "FN31",
    }


@pytest.fixture
def report():
    return build_solar_report(
        "18 Oct 2026 1200 GMT",
        [
            BandConditionEntry(name="80m-40m", time="night", condition="Good"),
            BandConditionEntry(name="30m-20m", time="day", condition="Good"),
            BandConditionEntry(name="80m-40m", time="day", condition="Fair"),
            BandConditionEntry(name="30m-20m", time="night", condition="Fair"),
        ],
    )


@pytest.fixture
def router(report, activations):
    """Router backed by canned sources instead of the live feeds."""
    return CommandRouter(
        solar_source=AsyncMock(return_value=report),
        spot_source=AsyncMock(return_value=activations),
    )
