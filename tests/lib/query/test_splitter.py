"""Unit tests for quote-aware where-clause splitting."""

import pytest

from tpbridge.lib.query.splitter import split_conditions


class TestSplitConditions:
    """Tests for split_conditions."""

    def test_single_clause(self):
        """A clause without an and token yields one element."""
        assert split_conditions("Priority eq High") == ["Priority eq High"]

    def test_splits_on_and(self):
        """Top-level and separates clauses."""
        assert split_conditions("A eq 1 and B eq 2 and C eq 3") == ["A eq 1", "B eq 2", "C eq 3"]

    def test_trailing_and_yields_empty_clause(self):
        assert split_conditions("A eq 1 and") == ["A eq 1", ""]

    def test_and_prefix_of_word_is_not_a_separator(self):
        assert split_conditions("Name eq Andy") == ["Name eq Andy"]

    def test_and_is_case_insensitive(self):
        """AND and And split like and."""
        assert split_conditions("A eq 1 AND B eq 2 And C eq 3") == ["A eq 1", "B eq 2", "C eq 3"]

    def test_and_inside_single_quotes_is_kept(self):
        """An and inside a single-quoted literal is not a separator."""
        assert split_conditions("Name eq 'Tom and Jerry' and Id gt 5") == [
            "Name eq 'Tom and Jerry'",
            "Id gt 5",
        ]

    def test_and_inside_double_quotes_is_kept(self):
        """An and inside a double-quoted literal is not a separator."""
        assert split_conditions('Name eq "Rock and Roll" and Id gt 5') == [
            'Name eq "Rock and Roll"',
            "Id gt 5",
        ]

    def test_doubled_quote_escape(self):
        """Doubled single quotes close and reopen the literal."""
        assert split_conditions("Name eq 'It''s done' and Priority eq High") == [
            "Name eq 'It''s done'",
            "Priority eq High",
        ]

    def test_other_quote_char_inside_literal_is_ignored(self):
        """A single quote inside a double-quoted literal doesn't toggle state."""
        assert split_conditions('Name eq "it\'s" and Id gt 1') == ['Name eq "it\'s"', "Id gt 1"]

    def test_backslash_escaped_quote_does_not_open_literal(self):
        """A quote preceded by a backslash is not a quote."""
        assert split_conditions("Name eq \\'x and Id gt 1") == ["Name eq \\'x", "Id gt 1"]

    def test_word_starting_with_and_is_not_split(self):
        """Only a standalone and token separates clauses."""
        assert split_conditions("Name eq Andy and Owner eq Anderson") == [
            "Name eq Andy",
            "Owner eq Anderson",
        ]

    def test_extra_whitespace_is_trimmed(self):
        """Clauses are trimmed."""
        assert split_conditions("  A eq 1   and   B eq 2  ") == ["A eq 1", "B eq 2"]

    def test_unbalanced_quote_swallows_rest(self):
        """An unclosed quote keeps everything after it in one clause."""
        assert split_conditions("Name eq 'abc and Id gt 5") == ["Name eq 'abc and Id gt 5"]

    @pytest.mark.parametrize("where", [
        "Priority eq High",
        "A eq 1 and B eq 2",
        "Name eq 'Tom and Jerry' and Id gt 5",
        "Description is null and Name contains \"x and y\"",
    ])
    def test_rejoin_reconstructs_expression(self, where):
        """Joining the clauses with ' and ' gives back the input."""
        assert " and ".join(split_conditions(where)) == where
