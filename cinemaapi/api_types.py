"""Request and response shapes shared by the HTTP handlers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


class RecordNotFoundError(LookupError):
    """Raised by a store when a requested record does not exist."""

    def __init__(self, message: str = "record not found") -> None:
        super().__init__(message)


class MovieNotFoundError(LookupError):
    """Raised by a store when a requested movie does not exist."""

    def __init__(self, message: str = "movie not found") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ReservationRequest:
    """A validated request to reserve seats for a screening."""

    username: str
    movie_id: str
    date: str
    time: str
    hall: str
    reserv_seats: list[str]


_RESERVATION_STRING_FIELDS = (
    ("username", "username"),
    ("movie_id", "movieId"),
    ("date", "date"),
    ("time", "time"),
    ("hall", "hall"),
)


def _load_json(data: Any) -> Any:
    """Decode JSON text or bytes; pass already decoded values through."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("utf-8")
    if isinstance(data, str):
        try:
            return json.loads(data)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON: {exc}") from exc
    return data


def _require_object(data: Any) -> Mapping[str, Any]:
    obj = _load_json(data)
    if not isinstance(obj, Mapping):
        raise ValueError("request body must be a JSON object")
    return obj


def parse_reservation_request(data: Any) -> ReservationRequest:
    """Validate a reservation body; every field is required."""
    obj = _require_object(data)
    values: dict[str, str] = {}
    for attr, key in _RESERVATION_STRING_FIELDS:
        value = obj.get(key)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"field {key!r} must be a string")
        if not value:
            raise ValueError(f"field {key!r} is required")
        values[attr] = value
    seats = obj.get("reservSeats")
    if seats is None:
        raise ValueError("field 'reservSeats' is required")
    if not isinstance(seats, list) or not all(isinstance(s, str) for s in seats):
        raise ValueError("field 'reservSeats' must be a list of strings")
    return ReservationRequest(**values, reserv_seats=list(seats))


def error_body(message: Any) -> dict[str, str]:
    """The JSON body sent with a failed request."""
    return {"error": str(message)}


def message_body(message: str) -> dict[str, str]:
    """The JSON body sent with a plain confirmation."""
    return {"message": message}


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _jsonable(value: Any) -> Any:
    """Turn a store result into something the JSON encoder accepts."""
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, Mapping):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value