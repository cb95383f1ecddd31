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

"""
Referee assignment for matches.

A referee assigner is picked by :class:`RefereeType`. Assigning the home or
the guest participant as its own referee means "no external referee", the
playing team provides one.
"""

from typing import Any, List, Optional, Sequence

from fixtureplan.exceptions import ParticipantCountError
from fixtureplan.plan.types import RefereeType, to_enum
from fixtureplan.type_hints import Match
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)


class RefereeAssigner:
    """Base class of all referee assigners."""

    assignment_type: RefereeType

    def __init__(self, referees: Optional[Sequence[Any]] = None) -> None:
        self.referees: List[Any] = list(referees) if referees is not None else []

    def get_referee(self, match: Match) -> Optional[Any]:
        """Get the referee for a match.

        Parameters
        ----------
        match : Match
            (turn, home, guest)

        Returns
        -------
        Optional[Any]
            the referee, None for no referee
        """
        raise NotImplementedError


class NoRefereeAssigner(RefereeAssigner):
    """Matches get no referee."""

    assignment_type = RefereeType.NONE

    def get_referee(self, match: Match) -> Optional[Any]:
        return None


class HomeRefereeAssigner(RefereeAssigner):
    """The home participant is referee."""

    assignment_type = RefereeType.HOME

    def get_referee(self, match: Match) -> Optional[Any]:
        return match[1]


class GuestRefereeAssigner(RefereeAssigner):
    """The guest participant is referee."""

    assignment_type = RefereeType.GUEST

    def get_referee(self, match: Match) -> Optional[Any]:
        return match[2]


class OtherFromRoundRefereeAssigner(RefereeAssigner):
    """Another participant of the round is referee.

    The referee is the participant with the fewest referee assignments so
    far, who neither plays in the match nor was referee of the previous
    match. Ties go to the participant listed first.
    """

    assignment_type = RefereeType.OTHER_FROM_ROUND

    def __init__(self, referees: Optional[Sequence[Any]] = None) -> None:
        if referees is None:
            logger.error("No referees given for %s", type(self).__name__)
            raise ValueError("referees are required to assign another referee")
        super().__init__(referees)
        self._assigned: List[Any] = []

    def get_referee(self, match: Match) -> Optional[Any]:
        """Get a referee who does not play in the match.

        Raises
        ------
        ParticipantCountError
            if every referee plays in the match
        """
        _, home, guest = match
        candidates = [r for r in self.referees if r != home and r != guest]
        if not candidates:
            logger.error("No referee available for %s - %s", home, guest)
            raise ParticipantCountError(
                f"No referee left who does not play in {home} - {guest}"
            )

        last_referee = self._assigned[-1] if self._assigned else None
        rested = [r for r in candidates if r != last_referee]
        # with a single candidate it has to referee twice in a row
        referee = min(rested or candidates, key=self._assigned.count)

        self._assigned.append(referee)
        return referee


def get_referee_assigner(
    referee_type: Any, referees: Optional[Sequence[Any]] = None
) -> RefereeAssigner:
    """Get the referee assigner for a referee type.

    Parameters
    ----------
    referee_type : Any
        a :class:`RefereeType` or its value or name
    referees : Optional[Sequence[Any]]
        the possible referees, required for ``OTHER_FROM_ROUND``

    Returns
    -------
    RefereeAssigner
        a fresh assigner

    Raises
    ------
    OutOfRangeError
        if referee_type is not defined
    """
    referee_type = to_enum(RefereeType, referee_type)
    assigners = {
        RefereeType.NONE: NoRefereeAssigner,
        RefereeType.HOME: HomeRefereeAssigner,
        RefereeType.GUEST: GuestRefereeAssigner,
        RefereeType.OTHER_FROM_ROUND: OtherFromRoundRefereeAssigner,
    }
    return assigners[referee_type](referees)


#  LocalWords:  RefereeAssigner
