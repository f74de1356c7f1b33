"""Canonical JSON encoding for metadata columns."""

import json
from decimal import Decimal
from typing import Any


def _canonical_value(obj: Any) -> Any:
    """Convert value for canonical representation."""
    if obj is None:
        return None
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, (int, float, Decimal)):
        return float(obj) if isinstance(obj, (float, Decimal)) else int(obj)
    if isinstance(obj, dict):
        return {str(k): _canonical_value(v) for k, v in sorted(obj.items())}
    if isinstance(obj, (list, tuple)):
        return [_canonical_value(v) for v in obj]
    if isinstance(obj, str):
        return obj
    return str(obj)


def canonical_json(obj: Any) -> str:
    """Produce canonical JSON string (sorted keys, consistent formatting)."""
    canonical = _canonical_value(obj)
    return json.dumps(canonical, sort_keys=True, separators=(",", ":"))


def encode_metadata(metadata: dict[str, Any] | None) -> str | None:
    """Serialize a metadata map for a text column. None stays NULL, {} is kept."""
    if metadata is None:
        return None
    return canonical_json(metadata)


def decode_metadata(raw: str | None) -> dict[str, Any] | None:
    """
    Parse a stored metadata column.

    Columns are only ever written through encode_metadata, so a malformed
    value raises json.JSONDecodeError instead of being papered over.
    """
    if not raw:
        return None
    value = json.loads(raw)
    if not isinstance(value, dict):
        raise ValueError(f"metadata column must hold a JSON object, got {type(value).__name__}")
    return value
