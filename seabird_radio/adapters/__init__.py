"""Adapter exports."""

from .pota import (
    fetch_activations,
    find_most_recent_match,
    format_activation,
    format_age,
    normalize_activations,
)
from .solar import build_solar_report, fetch_solar_report, parse_solar_xml

__all__ = [
    "build_solar_report",
    "parse_solar_xml",
    "fetch_solar_report",
    "normalize_activations",
    "find_most_recent_match",
    "format_age",
    "format_activation",
    "fetch_activations",
]
