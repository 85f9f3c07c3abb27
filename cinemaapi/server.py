"""HTTP server wiring the handlers to routes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from flask import Flask, Response, g, jsonify, request

from cinemaapi import halls, movies, repertoires, reservations
from cinemaapi.api_types import error_body
from cinemaapi.middleware import AUTHORIZATION_PAYLOAD_KEY, AuthError, authorize

_ALLOW_METHODS = "GET, POST, PUT, PATCH, DELETE, OPTIONS"
_ALLOW_HEADERS = "Origin, Content-Type, Authorization"
_EXPOSE_HEADERS = "Content-Length"


def _respond(result: tuple[Any, Any]) -> tuple[Response, int]:
    status, body = result
    return jsonify(body), int(status)


class Server:
    """Serves the cinema API over HTTP; every listed route needs a bearer token."""

    def __init__(self, store: Any, token_maker: Any, config: Any = None) -> None:
        self.store = store
        self.token_maker = token_maker
        self.config = config
        self.app = Flask(__name__)
        self._setup_cors()
        self._setup_routes()

    def _setup_cors(self) -> None:
        app = self.app

        @app.before_request
        def preflight():
            if (
                request.method == "OPTIONS"
                and request.headers.get("Origin")
                and request.headers.get("Access-Control-Request-Method")
            ):
                response = Response(status=204)
                response.headers["Access-Control-Allow-Methods"] = _ALLOW_METHODS
                response.headers["Access-Control-Allow-Headers"] = _ALLOW_HEADERS
                response.headers["Access-Control-Max-Age"] = "43200"
                return response
            return None

        @app.after_request
        def cors_headers(response: Response) -> Response:
            if request.headers.get("Origin"):
                response.headers["Access-Control-Allow-Origin"] = "*"
                response.headers["Access-Control-Allow-Credentials"] = "true"
                response.headers["Access-Control-Expose-Headers"] = _EXPOSE_HEADERS
            return response

    def _protected(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        def view(**kwargs: Any):
            try:
                payload = authorize(request.headers.get("Authorization"), self.token_maker)
            except AuthError as exc:
                return _respond((exc.status, error_body(exc)))
            setattr(g, AUTHORIZATION_PAYLOAD_KEY, payload)
            return _respond(handler(**kwargs))

        return view

    def _setup_routes(self) -> None:
        store = self.store

        def body() -> bytes:
            return request.get_data()

        def query(name: str) -> str:
            return request.args.get(name, "")

        routes = [
            ("/halls/<hall_id>", "GET", "get_hall_by_id",
             lambda hall_id: halls.get_hall_by_id(store, hall_id)),
            ("/halls", "GET", "list_halls", lambda: halls.list_halls(store)),
            ("/halls", "POST", "insert_hall", lambda: halls.insert_hall(store, body())),
            ("/halls/<hall_id>", "PUT", "update_hall",
             lambda hall_id: halls.update_hall(store, hall_id, body())),
            ("/halls/<hall_id>", "DELETE", "delete_hall",
             lambda hall_id: halls.delete_hall(store, hall_id)),
            ("/searchhalls/<name>", "GET", "search_hall",
             lambda name: halls.search_hall(store, name)),
            ("/movies/<movie_id>", "GET", "search_movie",
             lambda movie_id: movies.search_movie(store, movie_id)),
            ("/movies", "GET", "list_movies", lambda: movies.list_movies(store)),
            ("/movies/<movie_id>", "PUT", "update_movie",
             lambda movie_id: movies.update_movie(store, movie_id, body())),
            ("/movies", "POST", "insert_movie", lambda: movies.insert_movie(store, body())),
            ("/movies/<movie_id>", "DELETE", "delete_movie",
             lambda movie_id: movies.delete_movie(store, movie_id)),
            ("/repertoires/<repertoire_id>", "GET", "get_repertoire",
             lambda repertoire_id: repertoires.get_repertoire(store, repertoire_id)),
            ("/repertoires/movie", "GET", "get_all_repertoire_for_movie",
             lambda: repertoires.get_all_repertoire_for_movie(
                 store, query("movie_id"), query("start_date"), query("end_date"))),
            ("/repertoires", "GET", "list_repertoires",
             lambda: repertoires.list_repertoires(store)),
            ("/repertoires/<repertoire_id>", "PUT", "update_repertoire",
             lambda repertoire_id: repertoires.update_repertoire(store, repertoire_id, body())),
            ("/repertoires", "POST", "add_repertoire",
             lambda: repertoires.add_repertoire(store, body())),
            ("/repertoires/<repertoire_id>", "DELETE", "delete_repertoire",
             lambda repertoire_id: repertoires.delete_repertoire(store, repertoire_id)),
            ("/repertoires/movie", "DELETE", "delete_repertoire_for_movie",
             lambda: repertoires.delete_repertoire_for_movie(store, query("movie_id"))),
            ("/reservation", "POST", "add_reservation",
             lambda: reservations.add_reservation(store, body())),
            ("/reservation/<reservation_id>", "DELETE", "cancel_reservation",
             lambda reservation_id: reservations.cancel_reservation(store, reservation_id)),
            ("/reservationforuser", "GET", "get_all_reservations_for_user",
             lambda: reservations.get_all_reservations_for_user(store, query("username"))),
        ]
        for rule, method, endpoint, handler in routes:
            self.app.add_url_rule(
                rule, endpoint, view_func=self._protected(handler), methods=[method]
            )

    def start(self, host: str, port: int) -> None:
        """Run the HTTP server on the given address."""
        self.app.run(host=host, port=port)