"""Handlers for the cinema hall endpoints."""

from __future__ import annotations

import re
from http import HTTPStatus
from typing import Any

from cinemaapi.api_types import (
    RecordNotFoundError,
    _jsonable,
    _require_object,
    error_body,
    message_body,
)

_OBJECT_ID = re.compile(r"[0-9a-fA-F]{24}")

Result = tuple[HTTPStatus, Any]


def _object_id(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not _OBJECT_ID.fullmatch(value):
        raise ValueError(f"field 'id' is not a valid object id: {value!r}")
    return value.lower()


def _optional_string(obj: Any, key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _list_of(obj: Any, key: str, kind: str) -> list | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list")
    for item in value:
        if kind == "str" and not isinstance(item, str):
            raise ValueError(f"field {key!r} must hold strings")
        if kind == "int" and (isinstance(item, bool) or not isinstance(item, int)):
            raise ValueError(f"field {key!r} must hold integers")
    return list(value)


def parse_hall(body: Any) -> dict[str, Any]:
    """Validate a hall body given as JSON text or a decoded mapping."""
    obj = _require_object(body)
    hall: dict[str, Any] = {}
    hall_id = _object_id(obj.get("id"))
    if hall_id is not None:
        hall["id"] = hall_id
    hall["name"] = _optional_string(obj, "name")
    hall["rows"] = _list_of(obj, "rows", "str")
    hall["cols"] = _list_of(obj, "cols", "int")
    return hall


def get_hall_by_id(store: Any, hall_id: str) -> Result:
    try:
        hall = store.get_hall_by_id(hall_id)
    except RecordNotFoundError as exc:
        return HTTPStatus.NOT_FOUND, error_body(exc)
    except Exception as exc:  # store failures become a 500 response
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(hall)


def list_halls(store: Any) -> Result:
    try:
        halls = store.list_halls()
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(halls)


def search_hall(store: Any, name: str) -> Result:
    try:
        halls = store.get_hall(name)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(halls)


def insert_hall(store: Any, body: Any) -> Result:
    try:
        hall = parse_hall(body)
    except ValueError as exc:
        return HTTPStatus.BAD_REQUEST, error_body(exc)
    try:
        created = store.insert_hall(hall)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.CREATED, _jsonable(created)


def update_hall(store: Any, hall_id: str, body: Any) -> Result:
    try:
        hall = parse_hall(body)
    except ValueError as exc:
        return HTTPStatus.BAD_REQUEST, error_body(exc)
    try:
        modified = store.update_hall(hall_id, hall)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(modified)


def delete_hall(store: Any, hall_id: str) -> Result:
    try:
        store.delete_hall(hall_id)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, message_body("Hall has been deleted")