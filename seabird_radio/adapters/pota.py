"""Parks on the Air spot feed adapter.

Spots arrive most recent first.  That order is kept as-is: "most recent
match" means the first matching spot in feed order, timestamps are never
compared.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, List, Optional

import httpx
import pydantic

from seabird_radio import config
from seabird_radio.errors import UpstreamError
from seabird_radio.middleware.logging import log_error, log_info, log_warning
from seabird_radio.models.activation import Activation, RawActivation
from seabird_radio.models.band import Band
from seabird_radio.models.mode import Mode


def normalize_activations(raw_spots: Iterable[RawActivation]) -> List[Activation]:
    """Convert raw spots in order.

    A single bad spot fails the whole feed rather than being skipped.
    """
    return [spot.to_activation() for spot in raw_spots]


def find_most_recent_match(
    activations: Iterable[Activation], band: Band, mode: Mode
) -> Optional[Activation]:
    """First activation inside ``band`` using exactly ``mode``."""
    frequency_range = band.frequency_range()
    for activation in activations:
        if activation.frequency in frequency_range and activation.mode == mode:
            return activation
    return None


def format_age(activation: Activation, now: Optional[datetime] = None) -> str:
    """Render spot age as ``"45"`` or, past a minute, ``"2m5s"``."""
    seconds = int(abs(activation.age(now).total_seconds()))
    if seconds > 60:
        return f"{seconds // 60}m{seconds % 60}s"
    return str(seconds)


def format_activation(activation: Activation, now: Optional[datetime] = None) -> str:
    return (
        f"[time:{activation.spot_time.strftime('%Y-%m-%d %H:%M:%S UTC')},"
        f"age:{format_age(activation, now)}] "
        f"{activation.frequency}MHz {activation.mode}, "
        f"{activation.location_desc} - {activation.name} ({activation.activator})"
    )


def _parse_spot_list(data: Any) -> List[RawActivation]:
    if not isinstance(data, list):
        log_warning("pota_unexpected_payload", payload_type=type(data).__name__)
        raise UpstreamError("POTA spot feed is not a JSON list")
    try:
        return [RawActivation.model_validate(item) for item in data]
    except pydantic.ValidationError as e:
        raise UpstreamError(f"malformed POTA spot: {e}") from e


async def fetch_activations() -> List[Activation]:
    """Fetch the live spot feed and normalize every spot."""
    log_info("pota_request", url=config.POTA_SPOTS_URL)
    try:
        async with httpx.AsyncClient(timeout=config.HTTP_TIMEOUT) as client:
            response = await client.get(config.POTA_SPOTS_URL)
            response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as e:
        log_error("pota_fetch_error", error=str(e))
        raise UpstreamError(f"POTA spot request failed: {e}") from e
    except ValueError as e:
        raise UpstreamError(f"POTA spot feed is not valid JSON: {e}") from e

    activations = normalize_activations(_parse_spot_list(data))
    log_info("pota_spots_normalized", count=len(activations))
    return activations

