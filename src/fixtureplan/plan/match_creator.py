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
Match Creator

Creates the match combinations of a round, where every participant plays
every other participant once per leg. The return leg mirrors the first leg
with home and guest swapped.
"""

from collections.abc import Mapping, Set
from typing import Any, Dict, Hashable, Iterable, Optional, Tuple

from fixtureplan.constants import (
    MIN_PARTICIPANTS,
    MIN_PARTICIPANTS_OTHER_FROM_ROUND_REFEREE,
)
from fixtureplan.exceptions import (
    IncompatibleTypesError,
    ParticipantCountError,
    ParticipantError,
)
from fixtureplan.plan.combination import (
    ParticipantCombination,
    ParticipantCombinations,
)
from fixtureplan.plan.referee import get_referee_assigner
from fixtureplan.plan.types import LegType, RefereeType, to_enum
from fixtureplan.round_robin import (
    IdealRoundRobinSystem,
    RoundRobinOptimizer,
    RoundRobinSystem,
)
from fixtureplan.settings import PlanSettings
from fixtureplan.type_hints import Matches
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)


class MatchCreator:
    """Creates the match combinations for the participants of a round.

    The schedule depends on the order of the participants, so they must be
    given as an ordered sequence.

    Example:
        >>> creator = MatchCreator(int, int).set_participants([1, 2, 3, 4, 5])
        >>> len(creator.get_combinations(RefereeType.NONE))
        10
        >>> creator.combinations_per_leg
        4

    Attributes:
        participant_type: type every participant must be an instance of
        referee_type: type of referees, must be able to hold a participant
        settings: the planning settings
        participants: the participants in planning order
    """

    def __init__(
        self,
        participant_type: type = object,
        referee_type: type = object,
        settings: Optional[PlanSettings] = None,
    ) -> None:
        if not issubclass(participant_type, referee_type):
            logger.error(
                "Participant type %s is no %s",
                participant_type.__name__,
                referee_type.__name__,
            )
            raise IncompatibleTypesError(
                f"A referee of type {referee_type.__name__} can not hold a "
                f"participant of type {participant_type.__name__}"
            )

        self.participant_type = participant_type
        self.referee_type = referee_type
        self.settings = settings if settings is not None else PlanSettings()
        self.settings.validate()
        self.participants: Tuple[Hashable, ...] = ()
        self._first_leg = ParticipantCombinations()
        self._return_leg = ParticipantCombinations()

    def set_participants(self, participants: Iterable[Hashable]) -> "MatchCreator":
        """Set the participants of the round.

        Parameters
        ----------
        participants : Iterable[Hashable]
            the participants in planning order

        Returns
        -------
        MatchCreator
            self, for chaining

        Raises
        ------
        ParticipantError
            if participants are unordered, of the wrong type, unhashable
            or duplicated
        """
        if isinstance(participants, (Set, Mapping)):
            logger.error("Unordered participants: %s", type(participants).__name__)
            raise ParticipantError(
                "Participants must be an ordered sequence, "
                f"not {type(participants).__name__}"
            )

        participants = tuple(participants)
        for participant in participants:
            if not isinstance(participant, self.participant_type):
                logger.error("Participant of wrong type: %r", participant)
                raise ParticipantError(
                    f"Participant {participant!r} is no "
                    f"{self.participant_type.__name__}"
                )
        try:
            distinct = set(participants)
        except TypeError as e:
            logger.error("Unhashable participants: %s", e)
            raise ParticipantError(f"Participants must be hashable: {e}") from e
        if len(distinct) != len(participants):
            logger.error("Duplicate participants: %s", participants)
            raise ParticipantError(f"Duplicate participants in {participants}")

        self.participants = participants
        self._first_leg = ParticipantCombinations()
        self._return_leg = ParticipantCombinations()
        return self

    @property
    def combinations_per_leg(self) -> int:
        """The number of matches every participant plays per leg."""
        return max(len(self.participants) - 1, 0)

    def get_combinations(
        self,
        referee_type: Any = None,
        leg_type: Any = LegType.FIRST,
    ) -> ParticipantCombinations:
        """Get the combinations of all participants for a leg.

        Parameters
        ----------
        referee_type : Any
            how referees are assigned, a :class:`RefereeType` or its value
            or name. None uses ``settings.referee_type``.
        leg_type : Any
            the first or the return leg

        Returns
        -------
        ParticipantCombinations
            the combinations in playing order, turns numbered from 1

        Raises
        ------
        OutOfRangeError
            if the referee type or leg type is not defined
        ParticipantCountError
            if there are too few participants
        """
        if referee_type is None:
            referee_type = self.settings.referee_type
        referee_type = to_enum(RefereeType, referee_type)
        leg_type = to_enum(LegType, leg_type)

        self._create_combinations(referee_type)
        return self._first_leg if leg_type is LegType.FIRST else self._return_leg

    def _create_combinations(self, referee_type: RefereeType) -> None:
        n_participants = len(self.participants)
        if n_participants < MIN_PARTICIPANTS:
            logger.error("Too few participants: %d", n_participants)
            raise ParticipantCountError(
                f"Round robin requires at least {MIN_PARTICIPANTS} participants, "
                f"got {n_participants}"
            )
        if (
            referee_type is RefereeType.OTHER_FROM_ROUND
            and n_participants < MIN_PARTICIPANTS_OTHER_FROM_ROUND_REFEREE
        ):
            logger.error("Too few participants for a referee from the round")
            raise ParticipantCountError(
                "Round robin with a referee from the round requires at least "
                f"{MIN_PARTICIPANTS_OTHER_FROM_ROUND_REFEREE} participants, "
                f"got {n_participants}"
            )

        logger.debug("Creating combinations for %d participants", n_participants)

        matches = self._renumber_turns(self._generate_matches())
        assigner = get_referee_assigner(referee_type, self.participants)

        self._first_leg = ParticipantCombinations()
        for match in matches:
            turn, home, guest = match
            self._first_leg.append(
                ParticipantCombination(turn, home, guest, assigner.get_referee(match))
            )

        self._create_return_leg(referee_type)

    def _generate_matches(self) -> Matches:
        """Matches of the first leg from the best round robin system."""
        n_participants = len(self.participants)
        if self.settings.use_ideal_system:
            try:
                return IdealRoundRobinSystem(self.participants).generate_matches()
            except ParticipantCountError:
                logger.info(
                    "No ideal table for %d participants, using round robin system",
                    n_participants,
                )

        matches = RoundRobinSystem(self.participants).generate_matches()
        if (
            self.settings.optimizer_min_participants
            <= n_participants
            <= self.settings.optimizer_max_participants
        ):
            optimizer = RoundRobinOptimizer(
                self.participants,
                matches,
                prefer_home_teams_not_playing_each_other=self.settings.prefer_home_teams_not_playing_each_other,
                avoid_consecutive_home_guest=self.settings.avoid_consecutive_home_guest,
            )
            matches = optimizer.optimize_home_guest_matches()
        return matches

    @staticmethod
    def _renumber_turns(matches: Matches) -> Matches:
        """Number the turns 1..T in the order they are played."""
        numbers: Dict[int, int] = {}
        for turn, _, _ in matches:
            numbers.setdefault(turn, len(numbers) + 1)
        return [(numbers[turn], home, guest) for turn, home, guest in matches]

    def _create_return_leg(self, referee_type: RefereeType) -> None:
        """Mirror the first leg, home and guest swapped."""
        self._return_leg = ParticipantCombinations()
        turn_offset = len(self._first_leg.get_turns())

        for combination in self._first_leg:
            if referee_type is RefereeType.HOME:
                referee = combination.guest
            elif referee_type is RefereeType.GUEST:
                referee = combination.home
            else:
                referee = combination.referee
            self._return_leg.append(
                ParticipantCombination(
                    combination.turn + turn_offset,
                    combination.guest,
                    combination.home,
                    referee,
                )
            )


#  LocalWords:  MatchCreator
