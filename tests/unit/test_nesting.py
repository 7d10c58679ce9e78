"""
Unit tests for nested list re-indentation.
"""

from wikimark.nesting import reindent_nested_lists


class TestReindentNestedLists:
    """Tests for reindent_nested_lists."""

    def test_flat_list_unchanged(self):
        assert reindent_nested_lists("* a\n* b") == "* a\n* b"

    def test_single_step_nesting_unchanged(self):
        """Test that runs already growing by one per level are kept."""
        text = "* a\n** b\n*** c"
        assert reindent_nested_lists(text) == text

    def test_indent_distance_inferred_from_first_nested_line(self):
        """Test that a two-character step is detected and collapsed."""
        assert reindent_nested_lists("* a\n*** b\n***** c") == "* a\n** b\n*** c"

    def test_parent_marker_carried_into_child(self):
        assert reindent_nested_lists("# a\n** b") == "# a\n#* b"

    def test_markers_tracked_per_depth(self):
        """Test that a bullet under a numbered item keeps the numbered parent."""
        assert reindent_nested_lists("# a\n** b\n*** c") == "# a\n#* b\n#** c"

    def test_shallower_line_ends_sub_list(self):
        text = "* a\n## b\n* c\n** d"
        assert reindent_nested_lists(text) == "* a\n*# b\n* c\n** d"

    def test_non_list_line_resets_markers(self):
        """Test that a paragraph line forgets the parent markers."""
        text = "# a\n## b\ntext\n** c"
        assert reindent_nested_lists(text) == "# a\n## b\ntext\n* c"

    def test_blocks_processed_independently(self):
        text = "# a\n** b\n\n* c\n** d"
        assert reindent_nested_lists(text) == "# a\n#* b\n\n* c\n** d"

    def test_separator_preserved(self):
        assert reindent_nested_lists("#\ta\n**\tb") == "#\ta\n#*\tb"

    def test_marker_without_space_untouched(self):
        """Test that a starred line with no marker run is kept and keeps the stack."""
        text = "* a\n*bold*\n** item"
        assert reindent_nested_lists(text) == text

    def test_non_list_text_unchanged(self):
        text = "h1. Title\n\nSome paragraph."
        assert reindent_nested_lists(text) == text

    def test_empty_string(self):
        assert reindent_nested_lists("") == ""
