# cinemaapi

A Flask HTTP API for running a cinema: the halls and their seating, the
movies being shown, the repertoire of screenings, and the seats that users
reserve. Every route sits behind bearer-token authorization.

## Running the server

The API is served by `cinemaapi.server.Server`. You give it a store that
holds the data and a token maker that verifies access tokens; a third,
optional argument `config` is kept on the server as `server.config` and is
not otherwise used.

```python
from cinemaapi.server import Server

server = Server(store, token_maker)
server.start("0.0.0.0", 8080)
```

`server.app` is the underlying Flask application, so it can also be handed
to any WSGI server or exercised with `server.app.test_client()`.

### The token maker

Any object with a method `verify_token(token)` will do. It returns the
token's payload, or raises any exception if the token is invalid or has
expired. For a request that passes, the payload is available to the request
as `flask.g.authorization_payload`.

### The store

The store is any object with these methods. Records are passed in as plain
dictionaries (reservations as `cinemaapi.reservations.AddReservationParams`),
and whatever the methods return is sent back as JSON, with `datetime` values
written in ISO 8601 form (`Z` for UTC).

| Method | Used by |
| --- | --- |
| `get_hall_by_id(hall_id)` | `GET /halls/<id>` |
| `list_halls()` | `GET /halls` |
| `get_hall(name)` | `GET /searchhalls/<name>` |
| `insert_hall(hall)` | `POST /halls` |
| `update_hall(hall_id, hall)` | `PUT /halls/<id>` |
| `delete_hall(hall_id)` | `DELETE /halls/<id>` |
| `get_movie(movie_id)` | `GET /movies/<id>` |
| `search_movies("0")` | `GET /movies` |
| `add_movie(movie)` | `POST /movies` |
| `update_movie(movie_id, movie)` | `PUT /movies/<id>` |
| `delete_movie(movie_id)` | `DELETE /movies/<id>` |
| `get_repertoire(repertoire_id)` | `GET /repertoires/<id>` |
| `get_all_repertoire_for_movie(movie_id, start, end)` | `GET /repertoires/movie` |
| `list_repertoires()` | `GET /repertoires` |
| `add_repertoire(repertoire)` | `POST /repertoires` |
| `update_repertoire(repertoire_id, repertoire)` | `PUT /repertoires/<id>` |
| `delete_repertoire(repertoire_id)` | `DELETE /repertoires/<id>` |
| `delete_repertoire_for_movie(movie_id)` | `DELETE /repertoires/movie` |
| `add_reservation(params)` | `POST /reservation` |
| `cancel_reservation(reservation_id)` | `DELETE /reservation/<id>` |
| `get_all_reservations_for_user(username)` | `GET /reservationforuser` |

`get_hall_by_id` signals a missing hall by raising
`cinemaapi.api_types.RecordNotFoundError`, and `get_movie` a missing movie
by raising `cinemaapi.api_types.MovieNotFoundError`; both are answered with
`404`. Any other exception from the store is answered with `500`.

## Authorization

Each request must carry a header of the form

```
Authorization: Bearer token
```

where the part after `Bearer` is an access token that the token maker
accepts. A missing header, a header without a token, a scheme other than
`bearer` (in any letter case), or a token that does not verify is answered
with `401` and a body `{"error": "..."}`.

## Routes

Halls:

| Method | Path | Result |
| --- | --- | --- |
| GET | `/halls/<id>` | the hall, or `404` if there is no such hall |
| GET | `/halls` | all halls |
| GET | `/searchhalls/<name>` | halls with that name |
| POST | `/halls` | the created hall, `201` |
| PUT | `/halls/<id>` | the updated hall |
| DELETE | `/halls/<id>` | `{"message": "Hall has been deleted"}` |

A hall body may hold `id` (a 24-digit hexadecimal object id), `name` (a
string), `rows` (a list of strings) and `cols` (a list of integers).

Movies:

| Method | Path | Result |
| --- | --- | --- |
| GET | `/movies/<id>` | the movie, or `404` if there is no such movie |
| GET | `/movies` | all movies |
| POST | `/movies` | the created movie, `201` |
| PUT | `/movies/<id>` | the updated movie |
| DELETE | `/movies/<id>` | `{"message": "Movie has been deleted"}` |

A movie body may hold `id`, `title`, `duration` (a 32-bit integer),
`genre`, `directors`, `actors`, `screening` (an RFC 3339 time such as
`2024-07-08T20:00:00Z`), `plot` and `poster`.

Repertoires:

| Method | Path | Result |
| --- | --- | --- |
| GET | `/repertoires/<id>` | the repertoire |
| GET | `/repertoires/movie?movie_id=&start_date=&end_date=` | screenings of a movie between two dates (`YYYY-MM-DD`) |
| GET | `/repertoires` | all repertoires |
| POST | `/repertoires` | the created repertoire, `201` |
| PUT | `/repertoires/<id>` | the updated repertoire |
| DELETE | `/repertoires/<id>` | `{"message": "repertoire has been deleted"}` |
| DELETE | `/repertoires/movie?movie_id=` | removes every screening of a movie |

A repertoire body is a JSON object passed on to the store. On `POST`, its
`dateSt` field (`YYYY-MM-DD`) is parsed and stored under `date` as a UTC
midnight `datetime`.

Reservations:

| Method | Path | Result |
| --- | --- | --- |
| POST | `/reservation` | `{"message": "Reservation added successfully"}` |
| DELETE | `/reservation/<id>` | `{"message": "Reservation canceled successfully"}` |
| GET | `/reservationforuser?username=` | that user's reservations |

A reservation body names `username`, `movieId`, `date` (`YYYY-MM-DD`),
`time`, `hall` and `reservSeats` (a list of seat strings); all are required.

## Errors

Error responses carry a body `{"error": "..."}`.

- A hall body that cannot be read is answered with `400` and the reason.
- A movie or repertoire body that cannot be read is answered with `400` and
  `" invalid input: ..."`.
- A reservation body that is incomplete or malformed is answered with `400`
  and `"Invalid input"`.
- A date that cannot be parsed is answered with `400` and one of
  `"Error parsing startDate"`, `"Error parsing endDate"` or
  `"Error parsing date"`.
- A failure in the store is answered with `500` and the store's error
  message.

## CORS

Responses to requests that carry an `Origin` header allow any origin, allow
credentials and expose `Content-Length`. Preflight `OPTIONS` requests are
answered with `204`, allowing the methods `GET, POST, PUT, PATCH, DELETE,
OPTIONS` and the headers `Origin, Content-Type, Authorization`.

## Using the handlers directly

The route handlers are plain functions that take the store and the request
data and return a pair of an `http.HTTPStatus` and a JSON-ready body, so they
can be called without a running server:

```python
from cinemaapi import halls, movies

status, body = halls.list_halls(store)
status, body = movies.insert_movie(store, '{"title": "Example", "duration": 120}')
```

The body validators are available on their own: `halls.parse_hall`,
`movies.parse_movie`, `repertoires.parse_date` and
`api_types.parse_reservation_request`; each raises `ValueError` on bad
input. The authorization check is
`cinemaapi.middleware.authorize(header, token_maker)`, which returns the
token payload or raises `cinemaapi.middleware.AuthError`.

## What this package does not do

- It has no store. Halls, movies, repertoires and reservations live wherever
  the store you pass in keeps them.
- It has no token maker: it only verifies tokens through the object you
  pass in, and issues none.
- It has no user accounts: there are no routes for registering, logging in
  or renewing tokens.
- It has no command-line entry point; the server is started from Python
  with `Server.start`.