"""Tests for the server-facing tree functions."""

import family_tree_server as fts
from family_tree_server.core import (
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


class TestGetTree:
    """Tests for _get_tree."""

    def test_root_index(self):
        tree = _get_tree()
        assert tree["index"] == [0]
        assert tree["first_name"] == "Cornelius"

    def test_nested_indexes(self):
        tree = _get_tree()
        assert tree["children"][0]["children"][1]["index"] == [0, 0, 1]

    def test_inherited_colors_serialized(self):
        tree = _get_tree()
        assert tree["children"][0]["background_color"] == "#fde68a"


class TestGetPerson:
    """Tests for _get_person."""

    def test_returns_person(self):
        result = _get_person("0.0.0")
        assert result["first_name"] == "Cornelius"
        assert result["nickname"] == "Con"
        assert result["display_name"] == "Cornelius (Con) O'Donovan"

    def test_children_are_summaries(self):
        result = _get_person("0.0.0")
        assert [c["index"] for c in result["children"]] == [[0, 0, 0, 0], [0, 0, 0, 1]]
        assert "children" not in result["children"][0]

    def test_life_events(self):
        result = _get_person([0, 1])
        assert result["birth"] == {"date": "1902-03-14", "location": "Cork"}
        assert result["death"] == {"date": "1980-11-02", "location": "Dublin"}

    def test_unknown_index(self):
        assert _get_person("0.4") is None

    def test_malformed_index(self):
        assert _get_person("not-an-index") is None
        assert _get_person("") is None


class TestFormatName:
    """Tests for _format_name."""

    def test_without_spouse(self):
        assert _format_name("0.0") == "John O'Donovan"

    def test_with_spouse(self):
        assert _format_name("0.0", show_spouse=True) == "John O'Donovan and Ellen O'Neill"

    def test_spouse_requested_but_absent(self):
        assert _format_name("0.2", show_spouse=True) == "Daniel O'Donovan"

    def test_unknown_index(self):
        assert _format_name("0.9") is None


class TestAncestorsAndDescendants:
    """Tests for _get_ancestors and _get_descendants."""

    def test_ancestors_root_first(self):
        names = [a["name"] for a in _get_ancestors("0.0.1.0")]
        assert names == ["Cornelius O'Donovan", "John O'Donovan", "Margaret Ryan"]

    def test_root_has_no_ancestors(self):
        assert _get_ancestors("0") == []

    def test_unknown_index_has_no_ancestors(self):
        assert _get_ancestors("0.3.3") == []

    def test_descendants_in_index_order(self):
        indexes = [d["index"] for d in _get_descendants("0.0.1")]
        assert indexes == [[0, 0, 1, 0], [0, 0, 1, 0, 0]]

    def test_leaf_has_no_descendants(self):
        assert _get_descendants("0.2") == []


class TestHighlightPath:
    """Tests for _get_highlight_path."""

    def test_path(self):
        result = _get_highlight_path("0.0")
        assert result["ancestors"] == [[0]]
        assert result["descendants"] == [[0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0, 0]]
        assert result["highlighted"] == [
            [0],
            [0, 0],
            [0, 0, 0],
            [0, 0, 0, 0],
            [0, 0, 0, 0, 0],
        ]

    def test_unknown_index(self):
        assert _get_highlight_path("0.0.5") is None


class TestGenerations:
    """Tests for _get_generations."""

    def test_row_sizes(self):
        assert [len(row) for row in _get_generations()] == [1, 3, 3, 3, 2]


class TestSearchPeople:
    """Tests for fuzzy name search."""

    def test_exact_name(self):
        results = _search_people("Aoife Ryan")
        assert results[0]["index"] == [0, 0, 1, 0, 0]
        assert results[0]["score"] >= 90

    def test_typo_tolerated(self):
        results = _search_people("Patrik Ryan")
        assert results[0]["name"] == "Patrick Ryan"

    def test_nickname_searchable(self):
        results = _search_people("Nell")
        assert [0, 0, 0, 1] in [r["index"] for r in results]

    def test_blank_query(self):
        assert _search_people("   ") == []

    def test_max_results(self):
        assert len(_search_people("O'Donovan", max_results=2)) <= 2

    def test_no_match(self):
        assert _search_people("Xqzv") == []


class TestStatistics:
    """Tests for _get_statistics."""

    def test_counts(self):
        stats = _get_statistics()
        assert stats["total_people"] == 12
        assert stats["generations"] == 5
        assert stats["males"] == 6
        assert stats["females"] == 5
        assert stats["neutral"] == 1
        assert stats["max_children"] == 3

    def test_last_names(self):
        stats = _get_statistics()
        assert stats["unique_last_names"] == 3
        assert stats["top_last_names"] == [
            {"last_name": "O'Donovan", "count": 7},
            {"last_name": "Ryan", "count": 3},
            {"last_name": "Walsh", "count": 2},
        ]


class TestServer:
    """Tests for the FastMCP server object."""

    def test_server_exists(self):
        assert fts.mcp is not None
        assert fts.mcp.name == "Family Tree Server"

    def test_initialize_is_idempotent(self):
        fts.initialize()
        fts.initialize()
        assert fts._initialized is True
