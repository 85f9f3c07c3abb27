from datetime import datetime, timezone
from http import HTTPStatus

import pytest

from cinemaapi.repertoires import (
    add_repertoire,
    delete_repertoire,
    delete_repertoire_for_movie,
    get_all_repertoire_for_movie,
    get_repertoire,
    list_repertoires,
    parse_date,
    update_repertoire,
)


class FakeStore:
    def __init__(self, results=None, error=None):
        self.results = results or {}
        self.error = error
        self.calls = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def method(*args):
            self.calls.append((name, args))
            if self.error is not None:
                raise self.error
            return self.results.get(name)

        return method


def test_parse_date_valid():
    assert parse_date("2024-07-08") == datetime(2024, 7, 8, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["2024-7-8", "08.07.2024", "2024-13-01", "", None, 20240708])
def test_parse_date_invalid(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_get_repertoire_ok():
    rep = {"id": "abc", "hall": "Sala 1"}
    store = FakeStore(results={"get_repertoire": rep})
    assert get_repertoire(store, "abc") == (HTTPStatus.OK, rep)
    assert store.calls == [("get_repertoire", ("abc",))]


def test_get_repertoire_error():
    store = FakeStore(error=ConnectionError("connection lost"))
    assert get_repertoire(store, "abc") == (
        HTTPStatus.INTERNAL_SERVER_ERROR,
        {"error": "connection lost"},
    )


def test_get_all_repertoire_for_movie_ok():
    store = FakeStore(results={"get_all_repertoire_for_movie": []})
    status, body = get_all_repertoire_for_movie(store, "m1", "2024-07-01", "2024-07-31")
    assert status == HTTPStatus.OK
    assert body == []
    name, args = store.calls[0]
    assert name == "get_all_repertoire_for_movie"
    assert args == (
        "m1",
        datetime(2024, 7, 1, tzinfo=timezone.utc),
        datetime(2024, 7, 31, tzinfo=timezone.utc),
    )


def test_get_all_repertoire_for_movie_bad_start():
    store = FakeStore()
    result = get_all_repertoire_for_movie(store, "m1", "bad", "2024-07-31")
    assert result == (HTTPStatus.BAD_REQUEST, {"error": "Error parsing startDate"})
    assert store.calls == []


def test_get_all_repertoire_for_movie_bad_end():
    store = FakeStore()
    result = get_all_repertoire_for_movie(store, "m1", "2024-07-01", "")
    assert result == (HTTPStatus.BAD_REQUEST, {"error": "Error parsing endDate"})
    assert store.calls == []


def test_get_all_repertoire_for_movie_store_error():
    store = FakeStore(error=RuntimeError("down"))
    status, body = get_all_repertoire_for_movie(store, "m1", "2024-07-01", "2024-07-02")
    assert status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert body == {"error": "down"}


def test_list_repertoires():
    reps = [{"id": "a"}, {"id": "b"}]
    assert list_repertoires(FakeStore(results={"list_repertoires": reps})) == (HTTPStatus.OK, reps)
    status, _ = list_repertoires(FakeStore(error=RuntimeError("down")))
    assert status == HTTPStatus.INTERNAL_SERVER_ERROR


def test_add_repertoire_sets_date():
    body = {"movieId": "m1", "dateSt": "2024-07-08", "time": "20:00"}
    store = FakeStore()

    def echo(rep):
        store.calls.append(("add_repertoire", (rep,)))
        return rep

    store.add_repertoire = echo
    status, created = add_repertoire(store, body)
    assert status == HTTPStatus.CREATED
    sent = store.calls[0][1][0]
    assert sent["date"] == datetime(2024, 7, 8, tzinfo=timezone.utc)
    assert created["date"] == "2024-07-08T00:00:00Z"
    assert created["movieId"] == "m1"


def test_add_repertoire_invalid_json():
    store = FakeStore()
    status, body = add_repertoire(store, b"{not json")
    assert status == HTTPStatus.BAD_REQUEST
    assert body["error"].startswith(" invalid input: ")
    assert store.calls == []


def test_add_repertoire_bad_date():
    store = FakeStore()
    result = add_repertoire(store, {"dateSt": "08/07/2024"})
    assert result == (HTTPStatus.BAD_REQUEST, {"error": "Error parsing date"})
    assert store.calls == []


def test_add_repertoire_store_error():
    store = FakeStore(error=RuntimeError("down"))
    status, body = add_repertoire(store, '{"dateSt": "2024-07-08"}')
    assert status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert body == {"error": "down"}


def test_update_repertoire():
    rep = {"id": "r1", "time": "18:00"}
    store = FakeStore(results={"update_repertoire": rep})
    assert update_repertoire(store, "r1", {"time": "18:00"}) == (HTTPStatus.OK, rep)
    assert store.calls == [("update_repertoire", ("r1", {"time": "18:00"}))]
    status, _ = update_repertoire(FakeStore(), "r1", "[1, 2]")
    assert status == HTTPStatus.BAD_REQUEST


def test_delete_repertoire():
    store = FakeStore()
    assert delete_repertoire(store, "r1") == (
        HTTPStatus.OK,
        {"message": "repertoire has been deleted"},
    )
    assert store.calls == [("delete_repertoire", ("r1",))]
    status, body = delete_repertoire(FakeStore(error=RuntimeError("down")), "r1")
    assert (status, body) == (HTTPStatus.INTERNAL_SERVER_ERROR, {"error": "down"})


def test_delete_repertoire_for_movie():
    store = FakeStore()
    assert delete_repertoire_for_movie(store, "m1") == (
        HTTPStatus.OK,
        {"message": "repertoire has been deleted"},
    )
    assert store.calls == [("delete_repertoire_for_movie", ("m1",))]
    status, _ = delete_repertoire_for_movie(FakeStore(error=RuntimeError("x")), "m1")
    assert status == HTTPStatus.INTERNAL_SERVER_ERROR