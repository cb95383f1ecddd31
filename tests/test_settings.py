"""Tests for fixtureplan.settings."""

import logging

import pytest

from fixtureplan.exceptions import OutOfRangeError
from fixtureplan.plan import RefereeType
from fixtureplan.settings import PlanSettings


class TestPlanSettings:
    """Test defaults, validation and serialization."""

    def test_defaults(self):
        settings = PlanSettings()
        assert settings.referee_type is RefereeType.NONE
        assert settings.use_ideal_system is True
        assert (settings.optimizer_min_participants, settings.optimizer_max_participants) == (3, 9)
        assert settings.avoid_consecutive_home_guest is False
        assert settings.prefer_home_teams_not_playing_each_other is False

    @pytest.mark.parametrize("value", [2, "GUEST", "guest", RefereeType.GUEST])
    def test_referee_type_converted(self, value):
        assert PlanSettings(referee_type=value).referee_type is RefereeType.GUEST

    def test_undefined_referee_type(self):
        with pytest.raises(OutOfRangeError):
            PlanSettings(referee_type=12345)

    def test_validate_inverted_range(self):
        with pytest.raises(OutOfRangeError):
            PlanSettings(optimizer_min_participants=10, optimizer_max_participants=9).validate()

    def test_validate_negative(self):
        with pytest.raises(OutOfRangeError):
            PlanSettings(optimizer_min_participants=-1).validate()

    @pytest.mark.parametrize(
        "low, high, message",
        [(-1, 9, "Negative optimizer minimum"), (10, 9, "Inverted optimizer range")],
    )
    def test_validate_logs_error(self, caplog, low, high, message):
        settings = PlanSettings(
            optimizer_min_participants=low, optimizer_max_participants=high
        )
        with caplog.at_level(logging.ERROR):
            with pytest.raises(OutOfRangeError):
                settings.validate()
        assert message in caplog.text

    def test_to_dict(self):
        data = PlanSettings(referee_type=RefereeType.OTHER_FROM_ROUND).to_dict()
        assert data == {
            "referee_type": "OTHER_FROM_ROUND",
            "use_ideal_system": True,
            "optimizer_min_participants": 3,
            "optimizer_max_participants": 9,
            "avoid_consecutive_home_guest": False,
            "prefer_home_teams_not_playing_each_other": False,
        }

    def test_round_trip(self):
        settings = PlanSettings(
            referee_type=RefereeType.HOME,
            use_ideal_system=False,
            optimizer_min_participants=4,
            optimizer_max_participants=8,
            avoid_consecutive_home_guest=True,
        )
        assert PlanSettings.from_dict(settings.to_dict()) == settings

    def test_from_dict_missing_keys(self):
        assert PlanSettings.from_dict({}) == PlanSettings()
        assert PlanSettings.from_dict({"use_ideal_system": False}).use_ideal_system is False

    def test_from_dict_validates(self):
        with pytest.raises(OutOfRangeError):
            PlanSettings.from_dict({"optimizer_min_participants": 12})
