"""Handlers for the repertoire (screening schedule) endpoints."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any

from cinemaapi.api_types import _jsonable, _require_object, error_body, message_body

Result = tuple[HTTPStatus, Any]

_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

# Key of the date string in a repertoire body; it is parsed into "date".
DATE_STRING_KEY = "dateSt"


def parse_date(value: Any) -> datetime:
    """Parse a YYYY-MM-DD date into a UTC datetime at midnight."""
    if not isinstance(value, str) or not _DATE.fullmatch(value):
        raise ValueError(f"cannot parse {value!r} as a date")
    parsed = datetime.strptime(value, "%Y-%m-%d")
    return parsed.replace(tzinfo=timezone.utc)


def _parse_repertoire(body: Any) -> dict[str, Any]:
    try:
        return dict(_require_object(body))
    except ValueError as exc:
        raise ValueError(f" invalid input: {exc}") from exc


def get_repertoire(store: Any, repertoire_id: str) -> Result:
    try:
        repertoire = store.get_repertoire(repertoire_id)
    except Exception as exc:  # store failures become a 500 response
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(repertoire)


def get_all_repertoire_for_movie(
    store: Any, movie_id: str, start_date: Any, end_date: Any
) -> Result:
    try:
        start = parse_date(start_date)
    except ValueError:
        return HTTPStatus.BAD_REQUEST, error_body("Error parsing startDate")
    try:
        end = parse_date(end_date)
    except ValueError:
        return HTTPStatus.BAD_REQUEST, error_body("Error parsing endDate")
    try:
        repertoires = store.get_all_repertoire_for_movie(movie_id, start, end)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(repertoires)


def list_repertoires(store: Any) -> Result:
    try:
        repertoires = store.list_repertoires()
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(repertoires)


def add_repertoire(store: Any, body: Any) -> Result:
    try:
        repertoire = _parse_repertoire(body)
    except ValueError as exc:
        return HTTPStatus.BAD_REQUEST, error_body(exc)
    try:
        repertoire["date"] = parse_date(repertoire.get(DATE_STRING_KEY))
    except ValueError:
        return HTTPStatus.BAD_REQUEST, error_body("Error parsing date")
    try:
        created = store.add_repertoire(repertoire)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.CREATED, _jsonable(created)


def update_repertoire(store: Any, repertoire_id: str, body: Any) -> Result:
    try:
        repertoire = _parse_repertoire(body)
    except ValueError as exc:
        return HTTPStatus.BAD_REQUEST, error_body(exc)
    try:
        modified = store.update_repertoire(repertoire_id, repertoire)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(modified)


def delete_repertoire(store: Any, repertoire_id: str) -> Result:
    try:
        store.delete_repertoire(repertoire_id)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, message_body("repertoire has been deleted")


def delete_repertoire_for_movie(store: Any, movie_id: str) -> Result:
    try:
        store.delete_repertoire_for_movie(movie_id)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, message_body("repertoire has been deleted")