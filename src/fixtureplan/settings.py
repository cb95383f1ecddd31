# Fixture Plan
# Copyright (C) 2025  Fixture Plan developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict

from fixtureplan.constants import (
    AVOID_CONSECUTIVE_HOME_GUEST,
    OPTIMIZER_MAX_PARTICIPANTS,
    OPTIMIZER_MIN_PARTICIPANTS,
    PREFER_HOME_TEAMS_NOT_PLAYING_EACH_OTHER,
)
from fixtureplan.exceptions import OutOfRangeError
from fixtureplan.plan.types import RefereeType, to_enum
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PlanSettings:
    """Settings for creating the match combinations of a round.

    Attributes:
        referee_type: the referee rule used when none is passed in
        use_ideal_system: use the ideal tables where they exist
        optimizer_min_participants: smallest round the optimizer runs on
        optimizer_max_participants: largest round the optimizer runs on
        avoid_consecutive_home_guest: let the optimizer swap home/guest of
            matches to shorten home or guest runs. The swaps can leave home
            and guest counts unbalanced by more than one.
        prefer_home_teams_not_playing_each_other: enable the optimizer's
            first heuristic
    """

    referee_type: RefereeType = RefereeType.NONE
    use_ideal_system: bool = True
    optimizer_min_participants: int = OPTIMIZER_MIN_PARTICIPANTS
    optimizer_max_participants: int = OPTIMIZER_MAX_PARTICIPANTS
    avoid_consecutive_home_guest: bool = AVOID_CONSECUTIVE_HOME_GUEST
    prefer_home_teams_not_playing_each_other: bool = (
        PREFER_HOME_TEAMS_NOT_PLAYING_EACH_OTHER
    )

    def __post_init__(self) -> None:
        self.referee_type = to_enum(RefereeType, self.referee_type)

    def validate(self) -> None:
        """Check the settings are consistent.

        Raises
        ------
        OutOfRangeError
            if the optimizer range is inverted or negative
        """
        if self.optimizer_min_participants < 0:
            logger.error(
                "Negative optimizer minimum: %d", self.optimizer_min_participants
            )
            raise OutOfRangeError(
                f"optimizer_min_participants must not be negative, got {self.optimizer_min_participants}"
            )
        if self.optimizer_min_participants > self.optimizer_max_participants:
            logger.error(
                "Inverted optimizer range: %d..%d",
                self.optimizer_min_participants,
                self.optimizer_max_participants,
            )
            raise OutOfRangeError(
                f"optimizer range {self.optimizer_min_participants}.."
                f"{self.optimizer_max_participants} is inverted"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the settings to a dictionary."""
        return {
            "referee_type": self.referee_type.name,
            "use_ideal_system": self.use_ideal_system,
            "optimizer_min_participants": self.optimizer_min_participants,
            "optimizer_max_participants": self.optimizer_max_participants,
            "avoid_consecutive_home_guest": self.avoid_consecutive_home_guest,
            "prefer_home_teams_not_playing_each_other": self.prefer_home_teams_not_playing_each_other,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanSettings":
        """Deserialize settings from a dictionary, missing keys take the defaults."""
        settings = cls(
            referee_type=data.get("referee_type", RefereeType.NONE),
            use_ideal_system=data.get("use_ideal_system", True),
            optimizer_min_participants=data.get(
                "optimizer_min_participants", OPTIMIZER_MIN_PARTICIPANTS
            ),
            optimizer_max_participants=data.get(
                "optimizer_max_participants", OPTIMIZER_MAX_PARTICIPANTS
            ),
            avoid_consecutive_home_guest=data.get(
                "avoid_consecutive_home_guest", AVOID_CONSECUTIVE_HOME_GUEST
            ),
            prefer_home_teams_not_playing_each_other=data.get(
                "prefer_home_teams_not_playing_each_other",
                PREFER_HOME_TEAMS_NOT_PLAYING_EACH_OTHER,
            ),
        )
        settings.validate()
        return settings


#  LocalWords:  PlanSettings
