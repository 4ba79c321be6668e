"""
Serialization Utilities

Provides to/from JSON utilities for FieldRecord.

The analysis service answers with a JSON object, but the model behind it
sometimes wraps that object in markdown code fences or surrounds it with
prose. parse_analysis_response() strips the wrapping before parsing so
callers always get a complete FieldRecord or a RecordParseError.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from ..errors import RecordParseError
from ..models.fields import FREE_TEXT_KEY, FieldRecord

logger = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"```json\s*")
_FENCE_ANY = re.compile(r"```\s*")
_OBJECT = re.compile(r"\{[\s\S]*\}")


# ─────────────────────────────────────────────────────────────────────────────
# Record Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_record(record: FieldRecord) -> dict[str, str]:
    """
    Serialize a FieldRecord to a dictionary in field order.

    Args:
        record: Record to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return record.to_dict()


def deserialize_record(data: Any) -> FieldRecord:
    """
    Deserialize a FieldRecord from decoded JSON.

    Accepts either a flat mapping of field values or the service envelope
    ``{"analysis": {...}}``.

    Raises:
        RecordParseError: If data is not a JSON object
    """
    if isinstance(data, dict) and isinstance(data.get("analysis"), dict):
        data = data["analysis"]
    if not isinstance(data, dict):
        raise RecordParseError(f"Record must be a JSON object, got {type(data).__name__}")
    return FieldRecord.from_mapping(data)


def parse_analysis_response(text: str) -> FieldRecord:
    """
    Parse the raw text returned by the analysis service.

    Markdown fences are removed and the outermost ``{...}`` block is
    parsed. The service does not fill the free-text field, so it comes
    back as "" unless the payload carries it.

    Args:
        text: Raw response content

    Returns:
        FieldRecord built from the response

    Raises:
        RecordParseError: If no JSON object can be parsed

    Example:
        >>> parse_analysis_response('```json\\n{"gender": "Female"}\\n```')["gender"]
        'Female'
    """
    cleaned = text.strip()
    cleaned = _FENCE_OPEN.sub("", cleaned)
    cleaned = _FENCE_ANY.sub("", cleaned)

    match = _OBJECT.search(cleaned)
    candidate = match.group(0) if match else cleaned

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning(f"Analysis response is not valid JSON: {e}")
        raise RecordParseError(f"Failed to parse analysis response: {e}") from e

    record = deserialize_record(data)
    logger.debug(f"Parsed analysis response, {FREE_TEXT_KEY}={record[FREE_TEXT_KEY]!r}")
    return record


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_record(path: Path) -> FieldRecord:
    """
    Load a FieldRecord from a JSON file.

    Raises:
        RecordParseError: If the file is not valid JSON
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RecordParseError(f"Invalid JSON in {path}: {e}") from e
    return deserialize_record(data)


def save_record(record: FieldRecord, path: Path) -> None:
    """Write a FieldRecord to a JSON file (UTF-8, non-ASCII preserved)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(serialize_record(record), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )
