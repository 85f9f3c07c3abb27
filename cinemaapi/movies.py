"""Handlers for the movie endpoints."""

from __future__ import annotations

import re
from datetime import datetime
from http import HTTPStatus
from typing import Any

from cinemaapi.api_types import (
    MovieNotFoundError,
    _jsonable,
    _require_object,
    error_body,
    message_body,
)
from cinemaapi.halls import _object_id, _optional_string

Result = tuple[HTTPStatus, Any]

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_RFC3339 = re.compile(
    r"(\d{4}-\d{2}-\d{2})[Tt](\d{2}:\d{2}:\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)

_TEXT_FIELDS = ("title", "genre", "directors", "actors", "plot", "poster")


def _parse_time(value: Any) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("field 'screening' must be a time string")
    match = _RFC3339.fullmatch(value)
    if not match:
        raise ValueError(f"field 'screening' is not an RFC 3339 time: {value!r}")
    date, clock, fraction, zone = match.groups()
    micros = (fraction or "")[:6].ljust(6, "0")
    offset = "+00:00" if zone.upper() == "Z" else zone
    try:
        return datetime.fromisoformat(f"{date}T{clock}.{micros}{offset}")
    except ValueError as exc:
        raise ValueError(f"field 'screening' is out of range: {value!r}") from exc


def _duration(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("field 'duration' must be an integer")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError("field 'duration' is out of range")
    return value


def parse_movie(body: Any) -> dict[str, Any]:
    """Validate a movie body given as JSON text or a decoded mapping."""
    obj = _require_object(body)
    movie: dict[str, Any] = {}
    movie_id = _object_id(obj.get("id"))
    if movie_id is not None:
        movie["id"] = movie_id
    movie["title"] = _optional_string(obj, "title")
    movie["duration"] = _duration(obj.get("duration"))
    for key in _TEXT_FIELDS[1:4]:
        movie[key] = _optional_string(obj, key)
    movie["screening"] = _parse_time(obj.get("screening"))
    for key in _TEXT_FIELDS[4:]:
        movie[key] = _optional_string(obj, key)
    return movie


def search_movie(store: Any, movie_id: str) -> Result:
    try:
        movie = store.get_movie(movie_id)
    except MovieNotFoundError as exc:
        return HTTPStatus.NOT_FOUND, error_body(exc)
    except Exception as exc:  # store failures become a 500 response
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(movie)


def list_movies(store: Any) -> Result:
    try:
        movies = store.search_movies("0")
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(movies)


def insert_movie(store: Any, body: Any) -> Result:
    try:
        movie = parse_movie(body)
    except ValueError as exc:
        return HTTPStatus.BAD_REQUEST, error_body(f" invalid input: {exc}")
    try:
        created = store.add_movie(movie)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.CREATED, _jsonable(created)


def update_movie(store: Any, movie_id: str, body: Any) -> Result:
    try:
        movie = parse_movie(body)
    except ValueError as exc:
        return HTTPStatus.BAD_REQUEST, error_body(f" invalid input: {exc}")
    try:
        modified = store.update_movie(movie_id, movie)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(modified)


def delete_movie(store: Any, movie_id: str) -> Result:
    try:
        store.delete_movie(movie_id)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, message_body("Movie has been deleted")