"""Seabird radio: HAM band conditions and POTA spot lookups for chat."""

__version__ = "0.1.0"
