"""Conversion of stored items to plain records and JSON bytes."""

import base64
import json
from datetime import datetime, timezone
from decimal import Decimal, DecimalException
from typing import Any

from boto3.dynamodb.types import Binary, TypeDeserializer

from envdump.errors import ConversionError, SerializationError


def from_dynamo_json(item: dict[str, Any]) -> dict[str, Any]:
    """Convert DynamoDB typed JSON (AttributeValue format) to plain Python dict."""
    deserializer = TypeDeserializer()
    try:
        return {k: deserializer.deserialize(v) for k, v in item.items()}
    except (TypeError, ValueError, DecimalException) as e:
        raise ConversionError(f"failed to unmarshal db object: {e}") from e


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    if isinstance(value, (set, frozenset)):
        # string sets pass through, number and binary sets are converted first
        return sorted(v if isinstance(v, str) else _json_default(v) for v in value)
    if isinstance(value, Binary):
        value = value.value
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, datetime):
        # always UTC, botocore parses into the local zone
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps_indented(records: list[dict[str, Any]]) -> bytes:
    """Two-space indented JSON with stable key order."""
    try:
        text = json.dumps(
            records, indent=2, sort_keys=True, ensure_ascii=False, default=_json_default
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to marshal to json: {e}") from e
    return text.encode("utf-8")


def dumps_compact(records: list[dict[str, Any]]) -> bytes:
    try:
        text = json.dumps(
            records,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"failed to marshal to json: {e}") from e
    return text.encode("utf-8")
