"""Shared fixtures for deinflector tests."""

import pytest

import deinflector


@pytest.fixture(scope="session")
def engine():
    """Load the built-in rules once for all tests."""
    return deinflector.load()


@pytest.fixture
def find():
    """Return the candidate with the given word and type, or None."""
    def _find(candidates, word, type_):
        for candidate in candidates:
            if candidate.word == word and candidate.type == type_:
                return candidate
        return None
    return _find
