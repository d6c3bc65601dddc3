"""Utility functions for addresses, names and kinship wording."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .constants import ORDINALS, TERMS

if TYPE_CHECKING:
    from .models import Index, Person

_INDEX_SEPARATORS = re.compile(r"[.,/\s]+")


def normalize_index(value) -> Index | None:
    """Normalize an address given as a tuple, list or dotted string.

    Accepts (0, 2, 1), [0, 2, 1], "0.2.1" or "0,2,1". Returns None when the
    value cannot be read as a sequence of integers.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip().strip("[]()")
        if not text:
            return None
        try:
            return tuple(int(part) for part in _INDEX_SEPARATORS.split(text) if part)
        except ValueError:
            return None
    if isinstance(value, (bytes, bytearray)):
        return None
    if isinstance(value, Sequence):
        if any(isinstance(v, bool) or not isinstance(v, int) for v in value):
            return None
        return tuple(value)
    return None


def is_index_equal(a: Sequence[int] | None, b: Sequence[int] | None) -> bool:
    """Compare two addresses; a missing address never equals anything."""
    if a is None or b is None:
        return False
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def ordinal(n: int) -> str:
    """1 -> "first" ... 10 -> "tenth", otherwise "{n}th"."""
    return ORDINALS.get(n, f"{n}th")


def pick(gender: str, stem: str) -> str:
    """Gendered form of a kinship stem from constants.TERMS."""
    male, female, neutral = TERMS[stem]
    if gender == "male":
        return male
    if gender == "female":
        return female
    return neutral


def format_person_name(person: Person) -> str:
    """Format as 'First (Nickname) Last', dropping any empty part."""
    parts = [person.first_name or ""]
    if person.nickname:
        parts.append(f"({person.nickname})")
    if person.last_name:
        parts.append(person.last_name)
    return " ".join(p for p in parts if p)


def get_display_name(person: Person, show_spouse: bool = False) -> str:
    """Formatted name, with " and {spouse}" only when requested."""
    name = format_person_name(person)
    if show_spouse and person.spouse:
        return f"{name} and {person.spouse}"
    return name
