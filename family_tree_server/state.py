"""Global mutable state for family tree data and selection."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from .constants import SELECTION_MODES

if TYPE_CHECKING:
    from .models import Person
    from .selection import SelectionState

# Configuration (set by configure() at startup)
FAMILY_FILE: Path | None = None
SELECTION_MODE: str = "single"

# Tree data (populated at startup by load_family)
raw_tree: Person | None = None
indexed_tree: Person | None = None

# Current selection; replaced wholesale on every transition, never mutated
selection: SelectionState | None = None


def _resolve_family_path() -> Path:
    """Get family record path from FAMILY_TREE_FILE env var.

    The file itself is not checked here; a missing or unreadable file is
    handled by the loader's fallback tree.

    Raises:
        FileNotFoundError: If FAMILY_TREE_FILE env var is not set.
    """
    env_path = os.getenv("FAMILY_TREE_FILE")
    if not env_path:
        raise FileNotFoundError(
            "FAMILY_TREE_FILE environment variable not set.\n"
            "Set it to the path of your family JSON file:\n"
            "  export FAMILY_TREE_FILE=/path/to/family.json\n"
            "Or use the --family-file CLI argument:\n"
            "  family-tree-server --family-file /path/to/family.json"
        )
    return Path(env_path).expanduser().resolve()


def _resolve_selection_mode() -> str:
    """Get selection mode from FAMILY_TREE_SELECTION_MODE (default: single).

    Raises:
        ValueError: If the mode is not one of SELECTION_MODES.
    """
    mode = (os.getenv("FAMILY_TREE_SELECTION_MODE") or "single").strip().lower()
    if mode not in SELECTION_MODES:
        raise ValueError(
            f"Invalid FAMILY_TREE_SELECTION_MODE {mode!r}; "
            f"expected one of {', '.join(SELECTION_MODES)}"
        )
    return mode


def configure() -> None:
    """Initialize configuration from environment. Called at startup.

    Loads .env file if present, then reads FAMILY_TREE_FILE and
    FAMILY_TREE_SELECTION_MODE from environment.
    Note: load_dotenv() does NOT override existing env vars by default.
    """
    global FAMILY_FILE, SELECTION_MODE
    load_dotenv()  # Load .env, won't override existing env vars
    FAMILY_FILE = _resolve_family_path()
    SELECTION_MODE = _resolve_selection_mode()
