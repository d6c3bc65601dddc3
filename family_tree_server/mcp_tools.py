"""MCP tool definitions for the family tree server."""

from .core import (
    _format_name,
    _get_ancestors,
    _get_descendants,
    _get_generations,
    _get_highlight_path,
    _get_person,
    _get_statistics,
    _get_tree,
    _search_people,
)
from .narrative import _get_person_card, _get_relationship, _get_selection_relationship
from .selection import (
    _activate_selection_slot,
    _clear_selection,
    _get_selection,
    _select_person,
)


def register_tools(mcp):
    """Register all MCP tools with the server."""

    # ============== TREE TOOLS (3) ==============

    @mcp.tool()
    def get_tree() -> dict | None:
        """
        Get the whole indexed family tree.

        Every person carries an "index": their path from the root, e.g. [0, 2, 1]
        is the second child of the third child of the root. Use these indexes
        with every other tool.

        Returns:
            Nested person record starting at the root ([0])
        """
        return _get_tree()

    @mcp.tool()
    def get_generations() -> list[list[list[int]]]:
        """
        Get the tree's rows: the indexes in each generation, left to right.

        Returns:
            One list of indexes per generation, root generation first
        """
        return _get_generations()

    @mcp.tool()
    def get_statistics() -> dict:
        """
        Get statistics about the family tree.

        Returns:
            Counts of people and generations, gender breakdown and top last names
        """
        return _get_statistics()

    # ============== LOOKUP TOOLS (4) ==============

    @mcp.tool()
    def get_person(index: str) -> dict | None:
        """
        Get a person by their index.

        Args:
            index: Path from the root, e.g. "0.2.1" (root is "0")

        Returns:
            Person record with child summaries, or None if no one is at that index
        """
        return _get_person(index)

    @mcp.tool()
    def get_person_card(index: str) -> dict | None:
        """
        Get the details card for a person.

        Includes display name, generation, spouse, birth and death, and
        counts of children and descendants. Empty fields are left out.

        Args:
            index: Path from the root, e.g. "0.2.1"

        Returns:
            Card dict or None if no one is at that index
        """
        return _get_person_card(index)

    @mcp.tool()
    def format_name(index: str, show_spouse: bool = False) -> str | None:
        """
        Format a person's display name as "First (Nickname) Last".

        Args:
            index: Path from the root, e.g. "0.2.1"
            show_spouse: Append " and {spouse}" when the person has one

        Returns:
            The formatted name, or None if no one is at that index
        """
        return _format_name(index, show_spouse)

    @mcp.tool()
    def search_people(name: str, max_results: int = 20) -> list[dict]:
        """
        Fuzzy search for people by name.

        Tolerates typos and partial names; nicknames are searched too.

        Args:
            name: Name or part of a name
            max_results: Maximum results to return (default 20)

        Returns:
            Matching people with their indexes and a match score, best first
        """
        return _search_people(name, max_results)

    # ============== NAVIGATION TOOLS (3) ==============

    @mcp.tool()
    def get_ancestors(index: str) -> list[dict]:
        """
        Get the direct ancestors of a person, root first.

        Args:
            index: Path from the root, e.g. "0.2.1"

        Returns:
            Ancestor summaries from the root down to the parent
        """
        return _get_ancestors(index)

    @mcp.tool()
    def get_descendants(index: str) -> list[dict]:
        """
        Get every descendant of a person (the full subtree below them).

        Args:
            index: Path from the root, e.g. "0.2.1"

        Returns:
            Descendant summaries in index order
        """
        return _get_descendants(index)

    @mcp.tool()
    def get_highlight_path(index: str) -> dict | None:
        """
        Get the highlight chain for a person.

        The chain is every ancestor, the person, and a single line of
        descent that always follows the first child.

        Args:
            index: Path from the root, e.g. "0.2.1"

        Returns:
            Dict with ancestors, descendants path and the combined highlighted set
        """
        return _get_highlight_path(index)

    # ============== RELATIONSHIP TOOLS (2) ==============

    @mcp.tool()
    def get_relationship(index_a: str, index_b: str) -> dict | None:
        """
        Name the relationship between two people.

        Both directions are given in American and Irish usage; Irish usage
        calls a parent's first cousin an aunt/uncle and a first cousin's
        child a nephew/niece.

        Args:
            index_a: First person's index, e.g. "0.0.1"
            index_b: Second person's index, e.g. "0.1.0.2"

        Returns:
            Dict with both people, terms each way, common ancestor and a summary
        """
        return _get_relationship(index_a, index_b)

    @mcp.tool()
    def get_selection_relationship() -> dict | None:
        """
        Name the relationship between the two selected people (dual mode).

        Returns:
            Same shape as get_relationship, or None if a slot is empty
        """
        return _get_selection_relationship()

    # ============== SELECTION TOOLS (4) ==============

    @mcp.tool()
    def get_selection() -> dict:
        """
        Get the current selection and highlight sets.

        Returns:
            Selected indexes, the active slot and highlighted indexes
        """
        return _get_selection()

    @mcp.tool()
    def select_person(index: str) -> dict:
        """
        Select a person, as if their box was clicked.

        The person goes into the active slot and the highlights are recomputed.
        Unknown indexes leave the selection unchanged.

        Args:
            index: Path from the root, e.g. "0.2.1"

        Returns:
            The new selection state
        """
        return _select_person(index)

    @mcp.tool()
    def activate_selection_slot(slot: str) -> dict:
        """
        Choose which selection card receives the next selection (dual mode).

        Args:
            slot: "primary" or "secondary"

        Returns:
            The new selection state, highlighting the slot's stored person
        """
        return _activate_selection_slot(slot)

    @mcp.tool()
    def clear_selection() -> dict:
        """
        Clear the selection and all highlights.

        Returns:
            The empty selection state
        """
        return _clear_selection()
