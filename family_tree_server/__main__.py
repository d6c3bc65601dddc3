"""Entry point for running the family tree server as a module.

Usage:
    python -m family_tree_server --family-file /path/to/family.json
    family-tree-server --family-file /path/to/family.json
"""

import argparse
import logging
import os
import sys


def main():
    """Main entry point for the family tree MCP server."""
    parser = argparse.ArgumentParser(
        description="Family Tree MCP Server - Explore a family tree and its relationships via MCP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  family-tree-server --family-file ~/family.json
  family-tree-server -f ~/family.json --selection-mode dual

Environment variables:
  FAMILY_TREE_FILE            Path to the family JSON record
  FAMILY_TREE_SELECTION_MODE  single (default) or dual
""",
    )
    parser.add_argument(
        "--family-file",
        "-f",
        metavar="PATH",
        help="Path to family JSON file (or set FAMILY_TREE_FILE env var)",
    )
    parser.add_argument(
        "--selection-mode",
        "-m",
        choices=["single", "dual"],
        help="Select one person, or two people for comparison (default: single)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    # stdout carries the MCP stdio transport, so logs go to stderr
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    # CLI args override env vars
    if args.family_file:
        os.environ["FAMILY_TREE_FILE"] = args.family_file
    if args.selection_mode:
        os.environ["FAMILY_TREE_SELECTION_MODE"] = args.selection_mode

    # Import and initialize AFTER setting env vars
    from . import initialize, mcp

    initialize()
    mcp.run()


if __name__ == "__main__":
    main()
