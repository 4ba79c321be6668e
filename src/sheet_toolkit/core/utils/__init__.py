"""
Utils Package

Serialization helpers for records.
"""

from .serialization import (
    serialize_record,
    deserialize_record,
    parse_analysis_response,
    load_record,
    save_record,
)

__all__ = [
    "serialize_record",
    "deserialize_record",
    "parse_analysis_response",
    "load_record",
    "save_record",
]
