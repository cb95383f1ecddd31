"""Tests for fixtureplan.plan.combination."""

from fixtureplan.plan import ParticipantCombination, ParticipantCombinations


def make_leg():
    return ParticipantCombinations(
        [
            ParticipantCombination(1, "A", "B", "C"),
            ParticipantCombination(1, "D", "E"),
            ParticipantCombination(2, "C", "A", "B"),
        ]
    )


class TestParticipantCombination:
    """Test a single combination."""

    def test_defaults_to_no_referee(self):
        assert ParticipantCombination(1, "A", "B").referee is None

    def test_swap_home_guest(self):
        combination = ParticipantCombination(3, "A", "B", "C")
        combination.swap_home_guest()
        assert (combination.home, combination.guest) == ("B", "A")
        assert combination.referee == "C"
        assert combination.turn == 3

    def test_str(self):
        assert str(ParticipantCombination(1, "A", "B", "C")) == "A : B / C"
        assert str(ParticipantCombination(1, "A", "B")) == "A : B / -"


class TestParticipantCombinations:
    """Test the leg container."""

    def test_is_a_list(self):
        leg = make_leg()
        assert isinstance(leg, list)
        assert len(leg) == 3

    def test_get_turns(self):
        assert make_leg().get_turns() == [1, 2]

    def test_get_combinations(self):
        turn_one = make_leg().get_combinations(1)
        assert [c.home for c in turn_one] == ["A", "D"]

    def test_get_combinations_unknown_turn(self):
        assert make_leg().get_combinations(7) == []

    def test_empty(self):
        assert ParticipantCombinations().get_turns() == []
        assert str(ParticipantCombinations()) == ""

    def test_str(self):
        assert str(make_leg()) == "\n".join(
            ["Turn 1:", "  A : B / C", "  D : E / -", "Turn 2:", "  C : A / B"]
        )
