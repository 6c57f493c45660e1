"""
Tests for transition counting and line tokenization.
"""
import itertools

import pytest

from gibberish.services.transitions import (
    GranularityMode,
    TransitionTable,
    cyclic_pairs,
    tokenize,
)


class TestTokenize:
    """Test suite for tokenize."""

    def test_word_mode_splits_whitespace(self):
        """Test word mode splits on any whitespace."""
        assert tokenize("Hello   big\tWorld\n") == ["hello", "big", "world"]

    def test_char_mode_keeps_spaces(self):
        """Test char mode yields every character except the line terminator."""
        assert tokenize("Ab c\n", GranularityMode.CHAR) == ["a", "b", " ", "c"]

    def test_accepts_string_mode(self):
        """Test plain string modes are accepted."""
        assert tokenize("ab", "char") == ["a", "b"]

    def test_blank_line(self):
        """Test blank lines produce no tokens."""
        assert tokenize("   \n") == []


class TestCyclicPairs:
    """Test suite for cyclic_pairs."""

    def test_last_wraps_to_first(self):
        """Test the last unit pairs with the first."""
        assert list(cyclic_pairs(["a", "b", "c"])) == [("a", "b"), ("b", "c"), ("c", "a")]

    def test_single_unit_pairs_with_itself(self):
        """Test a lone unit forms a self-loop."""
        assert list(cyclic_pairs(["a"])) == [("a", "a")]

    def test_empty(self):
        """Test no units means no pairs."""
        assert list(cyclic_pairs([])) == []


class TestTransitionTable:
    """Test suite for TransitionTable."""

    def test_initialization(self):
        """Test table starts empty."""
        table = TransitionTable()

        assert len(table) == 0
        assert table.total_transitions == 0

    def test_update_creates_and_increments(self):
        """Test update creates entries and counts."""
        table = TransitionTable()
        table.update("a", "b")
        table.update("a", "b")
        table.update("a", "c")

        assert table.count("a", "b") == 2
        assert table.count("a", "c") == 1
        assert table.count("a", "z") == 0
        assert "b" not in table

    def test_update_order_does_not_matter(self):
        """Test any order of the same pairs yields the same counts."""
        pairs = [("a", "b"), ("a", "c"), ("b", "a"), ("a", "b"), ("c", "a")]
        results = []
        for perm in itertools.permutations(pairs):
            table = TransitionTable()
            for token, neighbor in perm:
                table.update(token, neighbor)
            results.append({t: dict(n) for t, n in table.items()})

        assert all(r == results[0] for r in results)

    def test_example_line(self, tiny_corpus):
        """Test 'a b a c' gives a -> {b:1, c:1}, b -> {a:1}, c -> {a:1}."""
        table = TransitionTable.from_lines(tiny_corpus)

        assert table.neighbors("a") == {"b": 1, "c": 1}
        assert table.neighbors("b") == {"a": 1}
        assert table.neighbors("c") == {"a": 1}

    def test_no_cross_line_pairing(self):
        """Test pairing restarts on every line."""
        table = TransitionTable.from_lines(["a b", "c d"])

        assert table.neighbors("b") == {"a": 1}
        assert table.neighbors("d") == {"c": 1}
        assert table.count("b", "c") == 0

    def test_embedded_line_breaks_split_lines(self):
        """Test an element holding several lines never pairs across them."""
        table = TransitionTable.from_lines(["a b\nc d"])

        assert table.neighbors("b") == {"a": 1}
        assert table.neighbors("d") == {"c": 1}
        assert table.count("b", "c") == 0
        assert table.count("d", "a") == 0

    def test_embedded_line_breaks_char_mode(self):
        """Test char mode never records a line break as a token."""
        table = TransitionTable.from_lines(["ab\r\ncd\n"], GranularityMode.CHAR)

        assert table.neighbors("b") == {"a": 1}
        assert table.neighbors("d") == {"c": 1}
        assert "\n" not in table
        assert "\r" not in table

    def test_ingest_normalizes(self):
        """Test tokens are normalized before counting."""
        table = TransitionTable.from_lines(["Apple apple ÀPPLE banana"])

        assert table.count("apple", "apple") == 2
        assert table.count("apple", "banana") == 1
        assert table.count("banana", "apple") == 1

    def test_ingest_line_returns_transition_count(self):
        """Test ingest_line reports recorded transitions."""
        table = TransitionTable()

        assert table.ingest_line("one two three") == 3
        assert table.ingest_line("") == 0
        assert table.total_transitions == 3

    def test_char_mode(self):
        """Test character granularity."""
        table = TransitionTable.from_lines(["abA"], GranularityMode.CHAR)

        assert table.neighbors("a") == {"b": 1, "a": 1}
        assert table.neighbors("b") == {"a": 1}

    @pytest.mark.parametrize("line", ["solo", "  solo  "])
    def test_single_word_line_self_loop(self, line):
        """Test a one-word line records a self transition."""
        table = TransitionTable.from_lines([line])

        assert table.neighbors("solo") == {"solo": 1}
