"""Shared fixtures for the drill tests."""

import random

import pytest

from core.drill import MemoryStateStore, SessionState
from core.schemas import WordRecord


DAY = "2026-10-18"


def make_catalog(count: int) -> list[WordRecord]:
    return [
        WordRecord(id=str(i), text=f"word{i}", translation=f"translation{i}")
        for i in range(1, count + 1)
    ]


def assert_invariants(state: SessionState) -> None:
    unknown = set(state.unknown_ids)
    mastered = set(state.mastered_today)
    assert not unknown & mastered
    assert set(state.active_ids) <= unknown
    assert not set(state.first_pass_queue) & mastered
    assert len(state.mastered_today) == len(mastered)
    assert state.package_size >= 3
    assert all(count >= 0 for count in state.consecutive_correct.values())


class CountingStore(MemoryStateStore):
    """MemoryStateStore that records every call."""

    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0
        self.deletes = 0

    def write(self, key, payload):
        self.writes += 1
        super().write(key, payload)

    def delete(self, key):
        self.deletes += 1
        super().delete(key)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def catalog():
    return make_catalog(5)


@pytest.fixture
def store():
    return CountingStore()
