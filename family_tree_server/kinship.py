"""Kinship terms between two people in the same tree.

Both people are placed by their addresses alone: the longest common prefix
of the two addresses is their lowest common ancestor, and the number of
generations each person sits below it decides the term. Two naming
conventions are produced:

- american: the usual English terms ("first cousin once removed" is written
  "first cousin first removed").
- irish: identical, except that a parent's first cousin is called an aunt or
  uncle and a first cousin's child a nephew or niece.

Every term describes the *other* person from one person's viewpoint, so it is
gendered by that other person.
"""

from __future__ import annotations

from dataclasses import dataclass

from .helpers import ordinal, pick
from .models import Index, Person
from .telemetry import get_tracer


@dataclass
class Relationship:
    american: str
    irish: str

    def to_dict(self) -> dict:
        return {"american": self.american, "irish": self.irish}


@dataclass
class RelateResult:
    person_a: Relationship  # what B is to A
    person_b: Relationship  # what A is to B
    lca_index: Index

    def to_dict(self) -> dict:
        return {
            "person_a": self.person_a.to_dict(),
            "person_b": self.person_b.to_dict(),
            "lca_index": list(self.lca_index),
        }


def common_prefix_length(a: Index, b: Index) -> int:
    i = 0
    while i < len(a) and i < len(b) and a[i] == b[i]:
        i += 1
    return i


def _great(n: int) -> str:
    return "great-" * n


def american_term(up_self: int, up_other: int, gender_other: str) -> str:
    """Name the other person given each side's distance to the common ancestor."""
    # direct descendant
    if up_self == 0:
        if up_other == 0:
            return pick(gender_other, "self")
        if up_other == 1:
            return pick(gender_other, "child")
        return _great(up_other - 2) + pick(gender_other, "grandchild")

    # direct ancestor
    if up_other == 0:
        if up_self == 1:
            return pick(gender_other, "parent")
        return _great(up_self - 2) + pick(gender_other, "grandparent")

    # same generation
    if up_self == up_other:
        if up_self == 1:
            return pick(gender_other, "sibling")
        return f"{ordinal(up_self - 1)} cousin"

    closer = min(up_self, up_other)
    diff = abs(up_self - up_other)

    # aunt/uncle line
    if closer == 1:
        stem = "pibling" if up_self > up_other else "nibling"
        return _great(diff - 1) + pick(gender_other, stem)

    return f"{ordinal(closer - 1)} cousin {ordinal(diff)} removed"


def irish_term(american: str, up_self: int, up_other: int, gender_other: str) -> str:
    """Irish usage: a first cousin once removed becomes aunt/uncle or nephew/niece."""
    if min(up_self, up_other) == 2 and abs(up_self - up_other) == 1:
        stem = "pibling" if up_self > up_other else "nibling"
        return pick(gender_other, stem)
    return american


def relate(person_a: Person, person_b: Person) -> RelateResult:
    """How are A and B related?

    Callers are expected to rule out the same person beforehand with
    helpers.is_index_equal; here that case simply yields "self" both ways.
    """
    with get_tracer().start_as_current_span("relate"):
        a_path = person_a.index or ()
        b_path = person_b.index or ()

        split = common_prefix_length(a_path, b_path)
        up_a = len(a_path) - split
        up_b = len(b_path) - split

        am_a = american_term(up_a, up_b, person_b.gender)
        am_b = american_term(up_b, up_a, person_a.gender)

        return RelateResult(
            person_a=Relationship(am_a, irish_term(am_a, up_a, up_b, person_b.gender)),
            person_b=Relationship(am_b, irish_term(am_b, up_b, up_a, person_a.gender)),
            lca_index=tuple(a_path[:split]),
        )
