from __future__ import annotations

import pytest

from portfolio.browser import ScriptQueue


class MemoryStore:
    def __init__(self, initial=None):
        self.values = dict(initial or {})
        self.writes = []

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.writes.append((key, value))
        self.values[key] = value


class BrokenStore:
    """Storage that is unavailable both ways (private mode, quota)."""

    def __init__(self):
        self.attempts = 0

    def get(self, key):
        raise OSError("storage disabled")

    def set(self, key, value):
        self.attempts += 1
        raise OSError("quota exceeded")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def queue():
    return ScriptQueue()


@pytest.fixture
def flags():
    return []


@pytest.fixture
def session_state(monkeypatch):
    import streamlit as st

    state = {}
    monkeypatch.setattr(st, "session_state", state)
    return state
