"""Family Tree Server - FastMCP server for exploring a family tree.

Every person in the loaded family record gets a positional index (a path from
the root). The server navigates the tree by index, keeps a single or dual
selection with its highlighted line of ancestors and descendants, and names
the relationship between any two people in American and Irish usage.

Usage:
    family-tree-server --family-file /path/to/family.json
    FAMILY_TREE_FILE=/path/to/family.json python -m family_tree_server
"""

from fastmcp import FastMCP

from .mcp_resources import register_resources
from .mcp_tools import register_tools
from .parsing import load_family
from .state import configure
from .telemetry import initialize_tracing

# Initialize tracing FIRST (before creating server)
# This is a no-op if PHOENIX_ENABLED is not set to 'true'
initialize_tracing()

# Initialize FastMCP server
mcp = FastMCP("Family Tree Server")

# Register tools and resources
register_tools(mcp)
register_resources(mcp)

_initialized = False


def initialize():
    """Initialize the server: configure from env vars and load the family record.

    Called automatically on first use or can be called explicitly.
    Safe to call multiple times.
    """
    global _initialized
    if _initialized:
        return
    configure()
    load_family()
    _initialized = True


__all__ = ["mcp", "initialize"]
