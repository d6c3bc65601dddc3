"""Narrative views: person details cards and relationship wording."""

from __future__ import annotations

from . import state
from .core import find_person_by_index, get_descendants
from .helpers import format_person_name, get_display_name, is_index_equal
from .kinship import relate
from .models import Person
from .selection import selected_people


def _person_card(person: Person) -> dict:
    card = {
        "index": list(person.index),
        "display_name": get_display_name(person),
        "generation": len(person.index),
    }
    if person.spouse:
        card["spouse"] = person.spouse
    if person.birth and person.birth.describe():
        card["birth"] = person.birth.describe()
    if person.death and person.death.describe():
        card["death"] = person.death.describe()
    if person.children:
        card["children"] = len(person.children)
        card["descendants"] = len(get_descendants(person))
    if person.background_color:
        card["background_color"] = person.background_color
    if person.text_color:
        card["text_color"] = person.text_color
    return card


def _get_person_card(index) -> dict | None:
    """Details card for one person, omitting empty fields."""
    person = find_person_by_index(state.indexed_tree, index)
    return _person_card(person) if person else None


def _describe_relationship(person_a: Person | None, person_b: Person | None) -> dict | None:
    """Relationship between two people, ready for display.

    The same person selected twice is reported without calling relate().
    When both people carry the same term (siblings, same-degree cousins) a
    single plural summary is given; otherwise one line per direction, with
    the American term in parentheses where Irish usage differs.
    """
    if person_a is None or person_b is None:
        return None

    if is_index_equal(person_a.index, person_b.index):
        return {"same_person": True, "summary": "Same person selected"}

    result = relate(person_a, person_b)
    name_a = format_person_name(person_a)
    name_b = format_person_name(person_b)

    if result.person_a.irish == result.person_b.irish:
        summary = f"{result.person_a.irish}s"
    else:
        lines = []
        for source, target, term in (
            (name_b, name_a, result.person_a),
            (name_a, name_b, result.person_b),
        ):
            line = f"{source} is the {term.irish}"
            if term.irish != term.american:
                line += f" ({term.american})"
            lines.append(f"{line} of {target}")
        summary = "\n".join(lines)

    return {
        "same_person": False,
        "person_a": person_a.to_summary(),
        "person_b": person_b.to_summary(),
        "relationship": result.to_dict(),
        "common_ancestor": _common_ancestor(result.lca_index),
        "summary": summary,
    }


def _common_ancestor(lca_index) -> dict | None:
    ancestor = find_person_by_index(state.indexed_tree, lca_index)
    return ancestor.to_summary() if ancestor else None


def _get_relationship(index_a, index_b) -> dict:
    person_a = find_person_by_index(state.indexed_tree, index_a)
    person_b = find_person_by_index(state.indexed_tree, index_b)
    if person_a is None:
        return {"error": f"No person at index {index_a!r}"}
    if person_b is None:
        return {"error": f"No person at index {index_b!r}"}
    return _describe_relationship(person_a, person_b)


def _get_selection_relationship() -> dict | None:
    """Relationship between the two selection cards (dual mode)."""
    if state.selection is None:
        return None
    primary, secondary = selected_people(state.selection, state.indexed_tree)
    return _describe_relationship(primary, secondary)
