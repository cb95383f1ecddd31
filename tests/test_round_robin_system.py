"""Tests for fixtureplan.round_robin.system."""

import pytest

from fixtureplan.round_robin import BYE, RoundRobinSystem


def pairs(matches):
    return [frozenset((home, guest)) for _, home, guest in matches]


class TestGenerateMatches:
    """Test the circle method generator."""

    @pytest.mark.parametrize("count", range(2, 17))
    def test_every_pair_once(self, participants, count):
        matches = RoundRobinSystem(participants(count)).generate_matches()
        assert len(matches) == count * (count - 1) // 2
        assert len(set(pairs(matches))) == len(matches)
        assert all(home != guest for _, home, guest in matches)

    @pytest.mark.parametrize("count", range(2, 17))
    def test_matches_per_participant(self, participants, count):
        matches = RoundRobinSystem(participants(count)).generate_matches()
        for participant in participants(count):
            played = [m for m in matches if participant in m[1:]]
            assert len(played) == count - 1

    @pytest.mark.parametrize("count", [4, 5, 10, 11])
    def test_turns(self, participants, count):
        matches = RoundRobinSystem(participants(count)).generate_matches()
        num_turns = count - 1 if count % 2 == 0 else count
        assert sorted({turn for turn, _, _ in matches}) == list(range(1, num_turns + 1))
        # nobody plays twice in a turn
        for turn in range(1, num_turns + 1):
            in_turn = [p for t, h, g in matches if t == turn for p in (h, g)]
            assert len(in_turn) == len(set(in_turn))

    def test_four_participants(self, participants):
        assert RoundRobinSystem(participants(4)).generate_matches() == [
            (1, 1, 2),
            (1, 4, 3),
            (2, 3, 1),
            (2, 2, 4),
            (3, 1, 4),
            (3, 3, 2),
        ]

    def test_five_participants(self, participants):
        assert RoundRobinSystem(participants(5)).generate_matches() == [
            (1, 1, 2),
            (1, 4, 5),
            (2, 3, 1),
            (2, 2, 4),
            (3, 1, 4),
            (3, 3, 5),
            (4, 5, 1),
            (4, 2, 3),
            (5, 5, 2),
            (5, 4, 3),
        ]

    def test_three_participants(self, participants):
        assert RoundRobinSystem(participants(3)).generate_matches() == [
            (1, 1, 2),
            (2, 3, 1),
            (3, 2, 3),
        ]

    def test_two_participants(self):
        assert RoundRobinSystem(["x", "y"]).generate_matches() == [(1, "x", "y")]

    @pytest.mark.parametrize("count", [0, 1])
    def test_too_few_participants(self, participants, count):
        assert RoundRobinSystem(participants(count)).generate_matches() == []

    def test_bye_never_returned(self, participants):
        matches = RoundRobinSystem(participants(7)).generate_matches()
        assert all(BYE not in match for match in matches)

    def test_zero_is_a_participant(self):
        matches = RoundRobinSystem([0, 1, 2]).generate_matches()
        assert len(matches) == 3
        assert sum(1 for m in matches if 0 in m[1:]) == 2

    def test_depends_on_order(self, participants):
        forward = RoundRobinSystem(participants(5)).generate_matches()
        backward = RoundRobinSystem(participants(5)[::-1]).generate_matches()
        assert forward != backward
        assert set(pairs(forward)) == set(pairs(backward))

    def test_deterministic(self, participants):
        system = RoundRobinSystem(participants(9))
        assert system.generate_matches() == system.generate_matches()

    def test_input_is_copied(self, participants):
        teams = participants(4)
        system = RoundRobinSystem(teams)
        teams.append(5)
        assert len(system.generate_matches()) == 6


class TestFixUnbalancedLastTurn:
    """Test fix_unbalanced_home_guest_counts_in_last_turn."""

    def test_swaps_home_with_too_many_home_matches(self):
        matches = [(1, 1, 2), (2, 3, 2), (3, 1, 3)]
        RoundRobinSystem.fix_unbalanced_home_guest_counts_in_last_turn(
            matches, 3, [1, 2, 3]
        )
        assert matches == [(1, 1, 2), (2, 3, 2), (3, 3, 1)]

    def test_only_last_turn_is_changed(self):
        matches = [(1, 1, 2), (2, 1, 3), (3, 2, 3)]
        RoundRobinSystem.fix_unbalanced_home_guest_counts_in_last_turn(
            matches, 3, [1, 2, 3]
        )
        assert matches == [(1, 1, 2), (2, 1, 3), (3, 2, 3)]

    def test_even_participants_unchanged(self):
        matches = [(1, 1, 2), (2, 1, 3), (3, 1, 4), (3, 2, 3)]
        RoundRobinSystem.fix_unbalanced_home_guest_counts_in_last_turn(
            matches, 3, [1, 2, 3, 4]
        )
        assert matches == [(1, 1, 2), (2, 1, 3), (3, 1, 4), (3, 2, 3)]


def test_bye_repr():
    assert repr(BYE) == "BYE"
