"""Tests for fixtureplan.plan.referee."""

import logging

import pytest

from fixtureplan.exceptions import OutOfRangeError, ParticipantCountError
from fixtureplan.plan import (
    GuestRefereeAssigner,
    HomeRefereeAssigner,
    NoRefereeAssigner,
    OtherFromRoundRefereeAssigner,
    RefereeType,
    get_referee_assigner,
)


class TestSimpleAssigners:
    """Test the assigners without state."""

    def test_no_referee(self):
        assert NoRefereeAssigner().get_referee((1, "A", "B")) is None

    def test_home_referee(self):
        assert HomeRefereeAssigner().get_referee((1, "A", "B")) == "A"

    def test_guest_referee(self):
        assert GuestRefereeAssigner().get_referee((1, "A", "B")) == "B"


class TestOtherFromRoundRefereeAssigner:
    """Test picking a referee from the other participants."""

    def test_requires_referees(self):
        with pytest.raises(ValueError):
            OtherFromRoundRefereeAssigner()

    def test_missing_referees_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError):
                OtherFromRoundRefereeAssigner()
        assert "No referees given" in caplog.text

    def test_fewest_assignments_first(self):
        assigner = OtherFromRoundRefereeAssigner([1, 2, 3, 4])
        assert assigner.get_referee((1, 1, 2)) == 3
        assert assigner.get_referee((1, 3, 4)) == 1
        assert assigner.get_referee((2, 1, 3)) == 2
        # 1 and 3 refereed once each, ties go to the first listed
        assert assigner.get_referee((2, 2, 4)) == 1

    def test_not_twice_in_a_row(self):
        assigner = OtherFromRoundRefereeAssigner([1, 2, 3, 4])
        assert assigner.get_referee((1, 1, 2)) == 3
        # 3 refereed the previous match
        assert assigner.get_referee((1, 1, 2)) == 4

    def test_reuses_last_referee_when_only_one_is_left(self):
        assigner = OtherFromRoundRefereeAssigner([1, 2, 3])
        assert assigner.get_referee((1, 1, 2)) == 3
        assert assigner.get_referee((2, 2, 1)) == 3

    def test_no_referee_left(self):
        assigner = OtherFromRoundRefereeAssigner([1, 2])
        with pytest.raises(ParticipantCountError):
            assigner.get_referee((1, 1, 2))


class TestGetRefereeAssigner:
    """Test the factory."""

    @pytest.mark.parametrize(
        "referee_type, expected",
        [
            (RefereeType.NONE, NoRefereeAssigner),
            (RefereeType.HOME, HomeRefereeAssigner),
            (RefereeType.GUEST, GuestRefereeAssigner),
            (RefereeType.OTHER_FROM_ROUND, OtherFromRoundRefereeAssigner),
            (1, HomeRefereeAssigner),
            ("guest", GuestRefereeAssigner),
        ],
    )
    def test_types(self, referee_type, expected):
        assigner = get_referee_assigner(referee_type, ["A", "B", "C"])
        assert type(assigner) is expected

    @pytest.mark.parametrize("referee_type", [12345, -1, "NOBODY"])
    def test_undefined(self, referee_type):
        with pytest.raises(OutOfRangeError):
            get_referee_assigner(referee_type, ["A", "B", "C"])

    def test_fresh_history(self):
        first = get_referee_assigner(RefereeType.OTHER_FROM_ROUND, [1, 2, 3, 4])
        first.get_referee((1, 1, 2))
        second = get_referee_assigner(RefereeType.OTHER_FROM_ROUND, [1, 2, 3, 4])
        assert second.get_referee((1, 1, 2)) == 3
