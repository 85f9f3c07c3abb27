"""Handlers for the reservation endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from http import HTTPStatus
from typing import Any

from cinemaapi.api_types import _jsonable, error_body, message_body, parse_reservation_request
from cinemaapi.repertoires import parse_date

Result = tuple[HTTPStatus, Any]


@dataclass(frozen=True)
class AddReservationParams:
    """What a store needs to record a reservation."""

    username: str
    movie_id: str
    date: datetime
    time: str
    hall: str
    reserv_seats: list[str]


def get_all_reservations_for_user(store: Any, username: str) -> Result:
    try:
        reservations = store.get_all_reservations_for_user(username)
    except Exception as exc:  # store failures become a 500 response
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, _jsonable(reservations)


def add_reservation(store: Any, body: Any) -> Result:
    try:
        request = parse_reservation_request(body)
    except ValueError:
        return HTTPStatus.BAD_REQUEST, error_body("Invalid input")
    try:
        date = parse_date(request.date)
    except ValueError:
        return HTTPStatus.BAD_REQUEST, error_body("Error parsing date")
    params = AddReservationParams(
        username=request.username,
        movie_id=request.movie_id,
        date=date,
        time=request.time,
        hall=request.hall,
        reserv_seats=list(request.reserv_seats),
    )
    try:
        store.add_reservation(params)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, message_body("Reservation added successfully")


def cancel_reservation(store: Any, reservation_id: str) -> Result:
    try:
        store.cancel_reservation(reservation_id)
    except Exception as exc:
        return HTTPStatus.INTERNAL_SERVER_ERROR, error_body(exc)
    return HTTPStatus.OK, message_body("Reservation canceled successfully")