"""Tests for domain/section.py — section lookup and insertion planning."""

import pytest

from quick_actions.domain.section import (
    find_section,
    heading_level,
    insert_into_section,
    insertion_index,
    parse_headings,
)


def insert(lines, heading, position, text):
    result = insert_into_section("\n".join(lines), heading, position, text)
    return None if result is None else result.split("\n")


class TestHeadingLevel:
    @pytest.mark.parametrize("heading,level", [("# A", 1), ("## Log", 2), ("###### Deep", 6), ("Log", 1)])
    def test_levels(self, heading, level):
        assert heading_level(heading) == level


class TestFindSection:
    def test_first_match(self):
        assert find_section(["x", "## Log", "## Log"], "## Log") == 1

    def test_trailing_whitespace_ignored(self):
        assert find_section(["## Log   \t"], "## Log") == 0

    def test_leading_whitespace_must_match(self):
        assert find_section(["  ## Log"], "## Log") == -1

    def test_missing(self):
        assert find_section(["# Other"], "## Log") == -1


class TestInsertBeginning:
    def test_directly_after_heading(self):
        assert insert(["## Log", "- old"], "## Log", "beginning", "NEW") == ["## Log", "NEW", "- old"]

    def test_blank_line_after_heading_kept_below(self):
        assert insert(["## Log", "", "- old"], "## Log", "beginning", "NEW") == ["## Log", "NEW", "", "- old"]


class TestInsertEnd:
    def test_before_blank_separator_and_sibling(self):
        doc = ["## Log", "- a", "", "## Next"]
        assert insert(doc, "## Log", "end", "- b") == ["## Log", "- a", "- b", "", "## Next"]

    def test_no_bounding_heading_appends(self):
        assert insert(["## Log", "- a"], "## Log", "end", "- b") == ["## Log", "- a", "- b"]

    def test_trailing_newline_preserved(self):
        result = insert_into_section("## Log\n- a\n", "## Log", "end", "- b")
        assert result == "## Log\n- a\n- b\n"

    def test_deeper_heading_belongs_to_section(self):
        doc = ["# Top", "## Log", "- a", "### Sub", "- s", "## Next"]
        assert insert(doc, "## Log", "end", "- b") == ["# Top", "## Log", "- a", "### Sub", "- s", "- b", "## Next"]

    def test_ancestor_heading_bounds_section(self):
        doc = ["## Log", "- a", "# Top"]
        assert insert(doc, "## Log", "end", "- b") == ["## Log", "- a", "- b", "# Top"]

    def test_hash_without_space_is_not_a_boundary(self):
        doc = ["## Log", "- a", "#tag"]
        assert insert(doc, "## Log", "end", "- b") == ["## Log", "- a", "#tag", "- b"]

    def test_never_walks_back_past_heading(self):
        assert insert(["## Log", "", "", "## Next"], "## Log", "end", "- b") == ["## Log", "- b", "", "", "## Next"]

    def test_empty_section_at_end_of_document(self):
        assert insert(["## Log"], "## Log", "end", "- b") == ["## Log", "- b"]

    def test_heading_without_hashes_is_level_one(self):
        doc = ["Log", "- a", "## Child", "- c", "# Other"]
        assert insert(doc, "Log", "end", "- b") == ["Log", "- a", "## Child", "- c", "- b", "# Other"]

    def test_blank_lines_are_not_deleted(self):
        doc = ["## Log", "- a", "", "", "## Next"]
        result = insert(doc, "## Log", "end", "- b")
        assert result == ["## Log", "- a", "- b", "", "", "## Next"]
        assert len(result) == len(doc) + 1


class TestInsertionIndex:
    def test_invalid_position(self):
        with pytest.raises(ValueError):
            insertion_index(["## Log"], 0, 2, "middle")


class TestMissingSection:
    def test_returns_none(self):
        assert insert_into_section("# Title\n- a", "## Log", "end", "- b") is None


class TestParseHeadings:
    def test_collects_atx_headings(self):
        headings = parse_headings("# Title\ntext\n## Log ##\n#tag\n### Deep")
        assert [(h.text, h.level, h.line) for h in headings] == [
            ("Title", 1, 0),
            ("Log", 2, 2),
            ("Deep", 3, 4),
        ]

    def test_skips_fenced_code(self):
        headings = parse_headings("# A\n```\n# not a heading\n```\n## B")
        assert [h.text for h in headings] == ["A", "B"]
