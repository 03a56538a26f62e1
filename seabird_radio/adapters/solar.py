"""Adapter for the hamqsl.com solar data feed.

Fetches the XML report and normalizes its calculated band conditions
into a :class:`SolarConditionReport`.  Any incomplete or duplicated band
data fails the whole report; partial results are never returned.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict, Iterable, List, Tuple, Union

import httpx

from seabird_radio import config
from seabird_radio.errors import UpstreamError
from seabird_radio.middleware.logging import log_error, log_info
from seabird_radio.models.conditions import (
    BandConditionEntry,
    PartialBandCondition,
    SolarConditionReport,
)


def build_solar_report(
    updated: str, entries: Iterable[BandConditionEntry]
) -> SolarConditionReport:
    """Group day/night entries per band and validate that each is complete."""
    partials: Dict[str, PartialBandCondition] = {}
    for entry in entries:
        partial = partials.setdefault(entry.name, PartialBandCondition(name=entry.name))
        partial.assign(entry.time, entry.condition)

    bands = {name: partials[name].finalize() for name in sorted(partials)}
    return SolarConditionReport(updated=updated, bands=bands)


def parse_solar_xml(text: Union[str, bytes]) -> Tuple[str, List[BandConditionEntry]]:
    """Extract the update time and band entries from a hamqsl document."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise UpstreamError(f"invalid solar XML: {e}") from e

    solar_data = root if root.tag == "solardata" else root.find("solardata")
    if solar_data is None:
        raise UpstreamError("solar XML has no solardata element")

    updated = solar_data.find("updated")
    if updated is None or updated.text is None:
        raise UpstreamError("solar XML has no updated time")

    conditions = solar_data.find("calculatedconditions")
    if conditions is None:
        raise UpstreamError("solar XML has no calculatedconditions element")

    entries = []
    for band in conditions.findall("band"):
        name = band.get("name")
        time_attr = band.get("time")
        if name is None or time_attr is None or band.text is None:
            raise UpstreamError("solar XML band element is missing name, time or text")
        entries.append(
            BandConditionEntry(name=name, time=time_attr, condition=band.text.strip())
        )
    return updated.text.strip(), entries


async def fetch_solar_report() -> SolarConditionReport:
    """Fetch hamqsl data and build the band condition report."""
    log_info("solar_request", url=config.HAMQSL_URL)
    try:
        async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as client:
            response = await client.get(config.HAMQSL_URL)
            response.raise_for_status()
    except httpx.HTTPError as e:
        log_error("solar_fetch_error", error=str(e))
        raise UpstreamError(f"solar data request failed: {e}") from e

    updated, entries = parse_solar_xml(response.content)
    report = build_solar_report(updated, entries)
    log_info("solar_report_built", updated=report.updated, bands=len(report.bands))
    return report
