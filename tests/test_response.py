"""Tests for response envelope decoding and error mapping."""

from __future__ import annotations

import json

import pytest

from speedrun_api.api.client import ApiResponse
from speedrun_api.api.errors import (
    DataTypeError,
    JsonParseError,
    SpeedrunApiError,
    UnknownApiError,
)
from speedrun_api.api.response import deserialize_response, error_from_body
from speedrun_api.types import Game, Pagination, Platform, Run, User


def _response(body, status_code: int = 200) -> ApiResponse:
    content = body if isinstance(body, bytes) else json.dumps(body).encode()
    return ApiResponse(status_code=status_code, content=content)


GAME = {
    "id": "o1y9wo6q",
    "names": {"international": "Super Mario 64", "japanese": None, "twitch": "Super Mario 64"},
    "abbreviation": "sm64",
    "weblink": "https://www.speedrun.com/sm64",
    "release-date": "1996-06-23",
    "ruleset": {
        "show-milliseconds": False,
        "require-verification": True,
        "require-video": False,
        "run-times": ["realtime"],
        "default-time": "realtime",
        "emulators-allowed": True,
    },
    "platforms": ["w89rwelk"],
    "moderators": {"kj9ojl8m": "super-moderator"},
    "assets": {"logo": {"uri": "https://www.speedrun.com/logo.png"}},
    "links": [{"rel": "self", "uri": "https://www.speedrun.com/api/v1/games/o1y9wo6q"}],
    "some-new-field": {"ignored": True},
}

RUN = {
    "id": "90y6pm7e",
    "weblink": "https://www.speedrun.com/run/90y6pm7e",
    "game": "o1y9wo6q",
    "level": None,
    "category": "wkpoo02r",
    "status": {"status": "verified", "examiner": "kj9ojl8m", "verify-date": "2021-01-01T00:00:00Z"},
    "players": [
        {"rel": "user", "id": "kj9ojl8m", "uri": "https://www.speedrun.com/api/v1/users/kj9ojl8m"},
        {"rel": "guest", "name": "someone", "uri": "https://www.speedrun.com/api/v1/guests/someone"},
    ],
    "times": {
        "primary": "PT1H39M27S",
        "primary_t": 5967,
        "realtime": "PT1H39M27S",
        "realtime_t": 5967,
    },
    "system": {"platform": "w89rwelk", "emulated": False, "region": None},
    "values": {"e8m7em86": "9qj7z0oq"},
}


# ── success path ──────────────────────────────────────────────────────────


class TestDecodeSuccess:
    def test_untyped_data(self):
        root = deserialize_response(_response({"data": {"id": "x"}}))
        assert root.data == {"id": "x"}
        assert root.pagination is None

    def test_typed_game_ignores_unknown_keys(self):
        game = deserialize_response(_response({"data": GAME}), Game).data
        assert game.names.international == "Super Mario 64"
        assert game.release_date == "1996-06-23"
        assert game.ruleset.show_milliseconds is False
        assert game.assets.logo.uri.endswith("logo.png")

    def test_tagged_unions(self):
        run = deserialize_response(_response({"data": RUN}), Run).data
        assert run.status.status == "verified"
        assert run.status.verify_date == "2021-01-01T00:00:00Z"
        assert [p.rel for p in run.players] == ["user", "guest"]
        assert run.players[1].name == "someone"
        assert run.times.primary_t == 5967

    def test_paged_decodes_pagination(self):
        body = {
            "data": [{"id": "a", "name": "PC"}],
            "pagination": {"offset": 20, "max": 20, "size": 1, "links": []},
        }
        root = deserialize_response(_response(body), list[Platform], paged=True)
        assert root.data == [Platform(id="a", name="PC")]
        assert root.pagination == Pagination(offset=20, max=20, size=1)

    def test_paged_without_pagination_object(self):
        root = deserialize_response(_response({"data": []}), list[str], paged=True)
        assert root.data == []
        assert root.pagination == Pagination()

    def test_empty_body(self):
        root = deserialize_response(_response(b"", status_code=204))
        assert root.data is None


# ── failure path ──────────────────────────────────────────────────────────


class TestDecodeFailure:
    def test_top_level_message(self):
        body = {"status": 404, "message": "The game could not be found."}
        with pytest.raises(SpeedrunApiError) as exc_info:
            deserialize_response(_response(body, status_code=404))
        assert exc_info.value.message == "The game could not be found."
        assert exc_info.value.status_code == 404

    def test_nested_message(self):
        with pytest.raises(SpeedrunApiError, match="rate limited"):
            deserialize_response(_response({"error": {"message": "rate limited"}}, 500))

    def test_missing_message_keeps_raw_value(self):
        body = {"status": 500, "errors": ["boom"]}
        with pytest.raises(UnknownApiError) as exc_info:
            deserialize_response(_response(body, status_code=500))
        assert exc_info.value.value == body

    def test_non_string_message_is_unknown(self):
        assert isinstance(error_from_body({"message": 42}, 400), UnknownApiError)

    def test_error_body_checked_before_data(self):
        with pytest.raises(SpeedrunApiError):
            deserialize_response(_response({"data": [], "message": "nope"}, 403))

    def test_invalid_json(self):
        with pytest.raises(JsonParseError) as exc_info:
            deserialize_response(_response(b"<html>bad gateway</html>", status_code=502))
        assert exc_info.value.status_code == 502

    def test_shape_mismatch_names_type(self):
        with pytest.raises(DataTypeError, match="User") as exc_info:
            deserialize_response(_response({"data": {"id": "x"}}), User)
        assert exc_info.value.typename == "User"
        assert exc_info.value.value == {"id": "x"}
        assert exc_info.value.__cause__ is exc_info.value.source

    def test_bad_pagination_is_shape_mismatch(self):
        body = {"data": [], "pagination": {"offset": "many"}}
        with pytest.raises(DataTypeError, match="Pagination"):
            deserialize_response(_response(body), list[str], paged=True)

    def test_non_object_body(self):
        with pytest.raises(DataTypeError):
            deserialize_response(_response([1, 2, 3]))
