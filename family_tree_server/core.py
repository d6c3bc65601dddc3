"""Core logic for indexing and navigating the family tree."""

from __future__ import annotations

import logging
from collections import Counter, deque
from dataclasses import replace

from rapidfuzz import fuzz, process

from . import state
from .constants import INHERITED_COLOR_FIELDS
from .helpers import format_person_name, get_display_name, normalize_index
from .models import Index, Person
from .telemetry import get_tracer

logger = logging.getLogger(__name__)

# Single-slot memo keyed on the identity of the raw tree object
_index_cache: tuple[Person, Person] | None = None


def _inherit(own: str | None, parent: str | None) -> str | None:
    return parent if own is None or own == "" else own


def assign_index(person: Person, parent_index: Index = (), sibling_idx: int = 0) -> Person:
    """Assign a stable address to every node in the tree.

    The root is always (0,); each child appends its sibling position to its
    parent's address. Empty colour fields are filled from the parent's
    already-resolved value. Returns a new tree; the input is not modified.
    """
    current = (0,) if not parent_index else (*parent_index, sibling_idx)

    children = []
    for idx, child in enumerate(person.children or []):
        resolved = replace(
            child,
            **{
                name: _inherit(getattr(child, name), getattr(person, name))
                for name in INHERITED_COLOR_FIELDS
            },
        )
        children.append(assign_index(resolved, current, idx))

    return replace(person, index=current, children=children)


def index_tree(raw_root: Person) -> Person:
    """Memoized assign_index; re-indexes only when given a different object."""
    global _index_cache
    if _index_cache is not None and _index_cache[0] is raw_root:
        return _index_cache[1]
    indexed = assign_index(raw_root)
    _index_cache = (raw_root, indexed)
    return indexed


def find_person_by_index(root: Person | None, path) -> Person | None:
    """Walk from the root following each address component as a child position.

    Returns None for an empty address, an address not starting at 0, or any
    out-of-range component.
    """
    index = normalize_index(path)
    if root is None or not index or index[0] != 0:
        return None

    node = root
    for idx in index[1:]:
        children = node.children or []
        if idx < 0 or idx >= len(children):
            return None
        node = children[idx]
    return node


def get_highlighted_ancestors(path) -> list[Index]:
    """All ancestor addresses of a node, nearest the root first.

    e.g. (0, 2, 1) -> [(0,), (0, 2)]
    """
    index = normalize_index(path) or ()
    return [index[:i] for i in range(1, len(index))]


def get_descendants(person: Person) -> set[Index]:
    """Every address strictly below a node."""
    result: set[Index] = set()

    def walk(p: Person) -> None:
        for child in p.children or []:
            result.add(child.index)
            walk(child)

    walk(person)
    return result


def get_highlighted_descendants(person: Person) -> list[Index]:
    """Single path down the tree, always following the lowest-numbered child."""
    result: list[Index] = []

    node = person
    while node.children:
        first_child = min(node.children, key=lambda child: child.index[-1])
        result.append(first_child.index)
        node = first_child

    return result


def get_generations(root: Person) -> list[list[Index]]:
    """Addresses grouped by depth, left to right within each row."""
    rows: list[list[Index]] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        depth = len(node.index) - 1
        if depth == len(rows):
            rows.append([])
        rows[depth].append(node.index)
        queue.extend(node.children)
    return rows


def _iter_people(root: Person):
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def _lookup(index) -> Person | None:
    person = find_person_by_index(state.indexed_tree, index)
    if person is None:
        logger.debug("No person at index %r", index)
    return person


def _get_tree() -> dict | None:
    if state.indexed_tree is None:
        return None
    return state.indexed_tree.to_dict()


def _get_person(index) -> dict | None:
    person = _lookup(index)
    if not person:
        return None

    result = person.to_dict()
    result["display_name"] = format_person_name(person)
    result["children"] = [child.to_summary() for child in person.children]
    return result


def _format_name(index, show_spouse: bool = False) -> str | None:
    person = _lookup(index)
    return get_display_name(person, show_spouse) if person else None


def _get_ancestors(index) -> list[dict]:
    if not _lookup(index):
        return []
    ancestors = []
    for ancestor_index in get_highlighted_ancestors(index):
        ancestor = find_person_by_index(state.indexed_tree, ancestor_index)
        if ancestor:
            ancestors.append(ancestor.to_summary())
    return ancestors


def _get_descendants(index) -> list[dict]:
    person = _lookup(index)
    if not person:
        return []
    return [
        find_person_by_index(state.indexed_tree, d).to_summary()
        for d in sorted(get_descendants(person))
    ]


def _get_highlight_path(index) -> dict | None:
    """Ancestor chain, the person, and the first-child path below them."""
    person = _lookup(index)
    if not person:
        return None

    ancestors = get_highlighted_ancestors(person.index)
    descendants = get_highlighted_descendants(person)
    return {
        "index": list(person.index),
        "ancestors": [list(i) for i in ancestors],
        "descendants": [list(i) for i in descendants],
        "highlighted": [list(i) for i in sorted({*ancestors, person.index, *descendants})],
    }


def _get_generations() -> list[list[list[int]]]:
    if state.indexed_tree is None:
        return []
    return [[list(i) for i in row] for row in get_generations(state.indexed_tree)]


def _search_people(name: str, max_results: int = 20, threshold: int = 70) -> list[dict]:
    """Fuzzy name search over every person in the tree, best match first."""
    query = name.strip()
    if not query or state.indexed_tree is None:
        return []

    people = list(_iter_people(state.indexed_tree))
    choices = [format_person_name(p) for p in people]

    with get_tracer().start_as_current_span("search_people"):
        matches = process.extract(
            query,
            choices,
            scorer=fuzz.WRatio,
            limit=max_results,
            score_cutoff=threshold,
        )

    results = []
    for _, score, position in matches:
        info = people[position].to_summary()
        info["score"] = round(score, 1)
        results.append(info)
    return results


def _get_statistics() -> dict:
    if state.indexed_tree is None:
        return {"total_people": 0}

    people = list(_iter_people(state.indexed_tree))
    genders = Counter(p.gender for p in people)
    last_names = Counter(p.last_name for p in people if p.last_name)

    top_last_names = sorted(last_names.items(), key=lambda x: (-x[1], x[0]))[:20]

    return {
        "total_people": len(people),
        "generations": len(get_generations(state.indexed_tree)),
        "males": genders.get("male", 0),
        "females": genders.get("female", 0),
        "neutral": genders.get("neutral", 0),
        "max_children": max(len(p.children) for p in people),
        "unique_last_names": len(last_names),
        "top_last_names": [{"last_name": n, "count": c} for n, c in top_last_names],
    }
