"""
Tests for fixtureplan.round_robin.analyzer.

The reverse scan is checked against small hand-built match lists.
"""

import pytest

from fixtureplan.round_robin import MatchesAnalyzer, RoundRobinSystem

# A plays home, home, guest, home, home
MATCHES = [
    (1, "A", "B"),
    (2, "A", "C"),
    (3, "D", "A"),
    (4, "A", "B"),
    (5, "A", "C"),
]


class TestHomeGuestCount:
    """Test get_home_guest_count."""

    def test_counts(self):
        result = MatchesAnalyzer.get_home_guest_count(MATCHES)
        assert result == {"A": (4, 1), "B": (0, 2), "C": (0, 2), "D": (1, 0)}

    def test_first_appearance_order(self):
        result = MatchesAnalyzer.get_home_guest_count(MATCHES)
        assert list(result) == ["A", "B", "C", "D"]

    def test_empty(self):
        assert MatchesAnalyzer.get_home_guest_count([]) == {}


class TestUnbalancedHomeGuestCount:
    """Test get_unbalanced_home_guest_count."""

    def test_hand_built_all_unbalanced(self):
        # 4 participants allow 1 or 2 home and guest matches
        result = MatchesAnalyzer.get_unbalanced_home_guest_count(MATCHES)
        assert set(result) == {"A", "B", "C", "D"}

    def test_even_allows_difference_of_one(self):
        matches = [(1, 1, 2), (1, 4, 3), (2, 3, 1), (2, 2, 4), (3, 1, 4), (3, 3, 2)]
        # 1 has 2 home 1 guest, within [1, 2]
        assert MatchesAnalyzer.get_unbalanced_home_guest_count(matches) == {}

    def test_odd_requires_equal_counts(self):
        matches = [(1, 1, 2), (2, 1, 3), (3, 2, 3)]
        result = MatchesAnalyzer.get_unbalanced_home_guest_count(matches)
        assert result == {1: (2, 0), 3: (0, 2)}

    @pytest.mark.parametrize("count", range(2, 17))
    def test_round_robin_system_is_balanced(self, participants, count):
        matches = RoundRobinSystem(participants(count)).generate_matches()
        assert MatchesAnalyzer.get_unbalanced_home_guest_count(matches) == {}


class TestLastConsecutiveCounts:
    """Test the reverse scan of get_last_consecutive_counts."""

    def test_home_runs_most_recent_first(self):
        counts = MatchesAnalyzer.get_last_consecutive_counts("A", True, MATCHES)
        assert list(counts) == [2, 2]

    def test_guest_scan_resumes_after_opposite_role(self):
        counts = MatchesAnalyzer.get_last_consecutive_counts("A", False, MATCHES)
        # turn 2 ends the guest run and is not scanned again
        assert list(counts) == [0, 0, 1, 0]

    def test_run_spans_other_matches(self):
        counts = MatchesAnalyzer.get_last_consecutive_counts("B", False, MATCHES)
        assert list(counts) == [0, 2]

    def test_is_lazy(self):
        counts = MatchesAnalyzer.get_last_consecutive_counts("A", True, MATCHES)
        assert next(counts) == 2

    def test_unknown_participant(self):
        counts = MatchesAnalyzer.get_last_consecutive_counts("X", True, MATCHES)
        assert list(counts) == [0, 0, 0, 0, 0]

    def test_empty(self):
        assert list(MatchesAnalyzer.get_last_consecutive_counts("A", True, [])) == []


class TestMaxConsecutiveHomeGuestCount:
    """Test get_max_consecutive_home_guest_count."""

    def test_both_roles(self):
        assert MatchesAnalyzer.get_max_consecutive_home_guest_count("A", MATCHES) == (2, 1)

    def test_role_never_taken(self):
        assert MatchesAnalyzer.get_max_consecutive_home_guest_count("B", MATCHES) == (0, 2)
        assert MatchesAnalyzer.get_max_consecutive_home_guest_count("D", MATCHES) == (1, 0)

    def test_no_matches(self):
        assert MatchesAnalyzer.get_max_consecutive_home_guest_count("A", []) == (0, 0)
