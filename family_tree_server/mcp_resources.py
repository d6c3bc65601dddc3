"""MCP resource definitions for the family tree server."""

import json

from .core import _get_person, _get_statistics, _get_tree
from .selection import _get_selection


def register_resources(mcp):
    """Register all MCP resources with the server."""

    @mcp.resource("family://tree")
    def resource_tree() -> str:
        """Get the whole indexed tree as JSON."""
        return json.dumps(_get_tree(), ensure_ascii=False)

    @mcp.resource("family://person/{index}")
    def resource_person(index: str) -> str:
        """Get a person by dotted index, e.g. 0.2.1."""
        person = _get_person(index)
        if person:
            return json.dumps(person, ensure_ascii=False)
        return f"Person {index} not found"

    @mcp.resource("family://selection")
    def resource_selection() -> str:
        """Get the current selection and highlight sets."""
        return json.dumps(_get_selection())

    @mcp.resource("family://stats")
    def resource_stats() -> str:
        """Get tree statistics."""
        return str(_get_statistics())
