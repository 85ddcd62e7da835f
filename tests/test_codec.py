"""
Tests for the persisted blob format.
"""

import json

import pytest

from core.drill import PersistedStateCorrupt, SessionState, decode_state, encode_state

from tests.conftest import DAY


def _state() -> SessionState:
    return SessionState(
        day_stamp=DAY,
        unknown_ids=["2", "4"],
        mastered_today=["1", "3"],
        first_pass_queue=[],
        first_pass_done=True,
        package_size=6,
        package_started=True,
        active_ids=["4"],
        consecutive_correct={"4": 1},
    )


def test_encode_uses_camel_case_keys():
    data = json.loads(encode_state(_state()))
    assert data == {
        "dayStamp": DAY,
        "unknownIds": ["2", "4"],
        "masteredToday": ["1", "3"],
        "firstPassQueue": [],
        "firstPassDone": True,
        "packageSize": 6,
        "packageStarted": True,
        "activeIds": ["4"],
        "consecutiveCorrect": {"4": 1},
    }


def test_decode_restores_every_field():
    assert decode_state(encode_state(_state())) == _state()


def test_decode_blob_with_numeric_ids():
    raw = json.dumps({
        "dayStamp": DAY,
        "unknownIds": [2, 5],
        "masteredToday": [1],
        "firstPassQueue": [5],
        "firstPassDone": False,
        "packageSize": 3,
        "packageStarted": False,
        "activeIds": [],
        "consecutiveCorrect": {},
    })

    state = decode_state(raw)

    assert state.unknown_ids == ["2", "5"]
    assert state.mastered_today == ["1"]
    assert state.first_pass_queue == ["5"]


def test_decode_fills_missing_fields_with_fresh_defaults():
    state = decode_state(json.dumps({"dayStamp": DAY, "unknownIds": None}))

    assert state.unknown_ids == []
    assert state.first_pass_done is False
    assert state.package_size == 3
    assert state.consecutive_correct == {}


def test_decode_accepts_bytes():
    assert decode_state(encode_state(_state()).encode("utf-8")).day_stamp == DAY


@pytest.mark.parametrize("raw", [
    "",
    "not json",
    "[]",
    json.dumps({"unknownIds": []}),
    json.dumps({"dayStamp": DAY, "unknownIds": 5}),
    json.dumps({"dayStamp": DAY, "consecutiveCorrect": ["a"]}),
    json.dumps({"dayStamp": DAY, "packageSize": "big"}),
])
def test_decode_rejects_corrupt_blobs(raw):
    with pytest.raises(PersistedStateCorrupt):
        decode_state(raw)
