"""Selection and highlight state.

The state is a small frozen record. Every transition takes the previous
state plus the indexed tree and returns a brand new state, so highlight sets
are always recomputed in one step and never observed half-updated.

Only addresses are stored; person content is re-resolved through
core.find_person_by_index whenever it is needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from . import state
from .constants import SELECTION_MODES, SELECTION_SLOTS
from .core import find_person_by_index, get_highlighted_ancestors, get_highlighted_descendants
from .models import Index, Person
from .telemetry import get_tracer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionState:
    mode: str = "single"
    primary: Index | None = None
    secondary: Index | None = None
    active_slot: str = "primary"
    highlighted_ancestors: tuple[Index, ...] = ()
    highlighted_descendants: tuple[Index, ...] = ()

    @property
    def active_index(self) -> Index | None:
        return self.primary if self.active_slot == "primary" else self.secondary

    @property
    def highlighted_persons(self) -> frozenset[Index]:
        """Ancestors, the active person, and the descendant path."""
        if self.active_index is None:
            return frozenset()
        return frozenset(
            (*self.highlighted_ancestors, self.active_index, *self.highlighted_descendants)
        )

    def to_dict(self) -> dict:
        def as_list(index):
            return list(index) if index is not None else None

        return {
            "mode": self.mode,
            "primary": as_list(self.primary),
            "secondary": as_list(self.secondary),
            "active_slot": self.active_slot,
            "active_index": as_list(self.active_index),
            "highlighted_ancestors": [list(i) for i in self.highlighted_ancestors],
            "highlighted_descendants": [list(i) for i in self.highlighted_descendants],
            "highlighted_persons": [list(i) for i in sorted(self.highlighted_persons)],
        }


def _with_highlights(current: SelectionState, tree: Person | None) -> SelectionState:
    """Recompute highlight sets from the active slot's address."""
    person = find_person_by_index(tree, current.active_index)
    if person is None:
        return replace(current, highlighted_ancestors=(), highlighted_descendants=())
    return replace(
        current,
        highlighted_ancestors=tuple(get_highlighted_ancestors(person.index)),
        highlighted_descendants=tuple(get_highlighted_descendants(person)),
    )


def initial_selection(tree: Person | None, mode: str = "single") -> SelectionState:
    """Selection at mount: the root is the active (primary) address."""
    if mode not in SELECTION_MODES:
        raise ValueError(f"Unknown selection mode: {mode!r}")
    root = tree.index if tree is not None else None
    return _with_highlights(SelectionState(mode=mode, primary=root), tree)


def click_person(current: SelectionState, tree: Person | None, index) -> SelectionState:
    """Put a clicked person into the active slot.

    A click on an address that does not resolve leaves the state unchanged.
    """
    with get_tracer().start_as_current_span("click_person"):
        person = find_person_by_index(tree, index)
        if person is None:
            logger.warning("Ignoring click on unknown index %r", index)
            return current

        new_state = replace(current, **{current.active_slot: person.index})
        logger.debug("Selected %s into %s slot", person.index, current.active_slot)
        return _with_highlights(new_state, tree)


def activate_slot(current: SelectionState, tree: Person | None, slot: str) -> SelectionState:
    """Make the other selection card receive the next click (dual mode only).

    Stored addresses are kept; highlights follow the newly active slot.
    """
    with get_tracer().start_as_current_span("activate_slot"):
        if current.mode != "dual" or slot not in SELECTION_SLOTS:
            return current
        return _with_highlights(replace(current, active_slot=slot), tree)


def clear_selection(current: SelectionState) -> SelectionState:
    with get_tracer().start_as_current_span("clear_selection"):
        return SelectionState(mode=current.mode)


def selected_people(current: SelectionState, tree: Person | None) -> tuple[Person | None, Person | None]:
    """Resolve both slots to people; missing or stale addresses give None."""
    return (
        find_person_by_index(tree, current.primary),
        find_person_by_index(tree, current.secondary),
    )


def normalize_slot(slot: str) -> str | None:
    slot = (slot or "").strip().lower()
    return slot if slot in SELECTION_SLOTS else None


def _get_selection() -> dict:
    if state.selection is None:
        state.selection = initial_selection(state.indexed_tree, state.SELECTION_MODE)
    return state.selection.to_dict()


def _select_person(index) -> dict:
    """Click on a node; unknown addresses leave the selection as it was."""
    current = state.selection or initial_selection(state.indexed_tree, state.SELECTION_MODE)
    if find_person_by_index(state.indexed_tree, index) is None:
        return {**current.to_dict(), "error": f"No person at index {index!r}"}
    state.selection = click_person(current, state.indexed_tree, index)
    return state.selection.to_dict()


def _activate_selection_slot(slot: str) -> dict:
    current = state.selection or initial_selection(state.indexed_tree, state.SELECTION_MODE)
    slot_name = normalize_slot(slot)
    if slot_name is None:
        return {**current.to_dict(), "error": f"Unknown selection slot {slot!r}"}
    if current.mode != "dual":
        return {**current.to_dict(), "error": "Selection slots are only available in dual mode"}
    state.selection = activate_slot(current, state.indexed_tree, slot_name)
    return state.selection.to_dict()


def _clear_selection() -> dict:
    current = state.selection or SelectionState(mode=state.SELECTION_MODE)
    state.selection = clear_selection(current)
    return state.selection.to_dict()
