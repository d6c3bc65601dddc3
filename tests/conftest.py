"""Shared fixtures for family tree server tests."""

import os
from pathlib import Path

import pytest

# Set env vars BEFORE importing any family_tree_server modules
# Set explicit test values so .env doesn't override them (load_dotenv won't override existing)
_TEST_FAMILY = Path(__file__).parent / "fixtures" / "family.json"
os.environ["FAMILY_TREE_FILE"] = str(_TEST_FAMILY)
os.environ["FAMILY_TREE_SELECTION_MODE"] = "single"

from family_tree_server import initialize  # noqa: E402

initialize()

from family_tree_server import state  # noqa: E402
from family_tree_server.core import assign_index, find_person_by_index  # noqa: E402
from family_tree_server.models import Person  # noqa: E402


@pytest.fixture(autouse=True)
def restore_selection():
    """Put the global selection back after tests that click around."""
    saved = state.selection
    yield
    state.selection = saved


@pytest.fixture
def tree():
    """The indexed sample tree loaded from fixtures/family.json."""
    return state.indexed_tree


@pytest.fixture
def person(tree):
    """Look up a person in the sample tree by index."""

    def _lookup(*index):
        found = find_person_by_index(tree, index)
        assert found is not None, f"No person at {index}"
        return found

    return _lookup


@pytest.fixture
def small_tree():
    """Root with one child, who has two children of their own."""
    raw = Person(
        first_name="Root",
        gender="male",
        children=[
            Person(
                first_name="Parent",
                gender="female",
                children=[
                    Person(first_name="Son", gender="male"),
                    Person(first_name="Daughter", gender="female"),
                ],
            )
        ],
    )
    return assign_index(raw)


@pytest.fixture
def make_person():
    """Bare indexed person for kinship tests: make_person((0, 1), "female")."""

    def _make(index, gender="neutral", first_name="Someone"):
        return Person(first_name=first_name, gender=gender, index=tuple(index))

    return _make
