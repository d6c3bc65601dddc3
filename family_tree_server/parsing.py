"""Family record loading."""

import json
import logging
from pathlib import Path

from . import state
from .constants import FALLBACK_FIRST_NAME
from .core import index_tree
from .models import Person
from .selection import initial_selection

logger = logging.getLogger(__name__)


def fallback_person() -> Person:
    """Single placeholder root shown when the record cannot be loaded."""
    return Person(first_name=FALLBACK_FIRST_NAME, children=[])


def parse_family(content: str) -> Person:
    """Parse a JSON family record into an unindexed Person tree.

    Raises:
        json.JSONDecodeError: If the content is not valid JSON.
        ValueError: If the record is not tree shaped.
    """
    return Person.from_dict(json.loads(content))


def read_family_file(path: Path | None) -> Person:
    """Read a family record, falling back to a placeholder tree on any error."""
    if path is None:
        logger.error("No family file configured; using placeholder tree")
        return fallback_person()

    try:
        return parse_family(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Error loading family data from {path}: {e}")
        return fallback_person()


def load_family() -> None:
    """Load the configured family record, index it and reset the selection."""
    state.raw_tree = read_family_file(state.FAMILY_FILE)
    state.indexed_tree = index_tree(state.raw_tree)
    state.selection = initial_selection(state.indexed_tree, state.SELECTION_MODE)

    logger.info(
        "Loaded family tree rooted at %s from %s",
        state.indexed_tree.first_name or "(unnamed)",
        state.FAMILY_FILE,
    )
