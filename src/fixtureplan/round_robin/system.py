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
Round Robin System

Circle method round robin for any number of participants. Every participant
meets every other participant exactly once, home and guest matches are
alternated and finally balanced in the last turn.

The first participant stays in place while the others rotate one position per
turn. An odd number of participants is padded with ``BYE``, and whoever
meets the bye rests that turn.

The schedule depends on the *order* of the participants, not only on who
they are: the same participants in a different order give a different (but
equally valid) schedule. Never sort or deduplicate them on the way in.

Example:
    >>> RoundRobinSystem([1, 2, 3, 4]).generate_matches()[:2]
    [(1, 1, 2), (1, 4, 3)]
"""

from typing import Any, Hashable, List, Sequence, Tuple

from fixtureplan.round_robin.analyzer import MatchesAnalyzer
from fixtureplan.type_hints import Match, Matches
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)


class _Bye:
    """Placeholder opponent that pads an odd number of participants."""

    def __repr__(self) -> str:
        return "BYE"


BYE = _Bye()


class RoundRobinSystem:
    """Circle method round robin generator.

    Attributes:
        participants: Immutable tuple of participants in planning order
    """

    def __init__(self, participants: Sequence[Hashable]) -> None:
        # The order must be kept, the schedule is derived from it
        self.participants: Tuple[Hashable, ...] = tuple(participants)

    def generate_matches(self) -> Matches:
        """Generate the matches of one leg.

        Turns are 1-based. Matches against the bye are left out, so with an
        odd number of participants one of them rests in every turn.

        Returns
        -------
        Matches
            (turn, home, guest) tuples ordered by turn
        """
        participants: List[Any] = list(self.participants)
        if len(participants) % 2 != 0:
            participants.append(BYE)

        num_turns = len(participants) - 1
        half_size = len(participants) // 2
        # everybody but the first participant, who stays in place
        rotation = participants[1:]
        rotation_size = len(rotation)

        logger.info(
            "Generating %d turns for %d participants",
            num_turns,
            len(self.participants),
        )

        matches: Matches = []
        for turn in range(num_turns):
            opponent = rotation[turn % rotation_size]
            if opponent is not BYE:
                # alternate home/guest
                if turn % 2 == 0:
                    matches.append((turn + 1, participants[0], opponent))
                else:
                    matches.append((turn + 1, opponent, participants[0]))

            for idx in range(1, half_size):
                first = rotation[(turn + idx) % rotation_size]
                second = rotation[(turn + rotation_size - idx) % rotation_size]
                if first is BYE or second is BYE:
                    continue
                # alternate home/guest
                if idx % 2 == 0:
                    matches.append((turn + 1, first, second))
                else:
                    matches.append((turn + 1, second, first))
            logger.debug("Turn %d: %s", turn + 1, [m for m in matches if m[0] == turn + 1])

        self.fix_unbalanced_home_guest_counts_in_last_turn(
            matches, num_turns, self.participants
        )
        return matches

    @staticmethod
    def fix_unbalanced_home_guest_counts_in_last_turn(
        matches: Matches, last_turn: int, participants: Sequence[Hashable]
    ) -> None:
        """Balance home/guest counts by swapping matches of the last turn.

        With an odd number of participants some of them end up with one home
        match more than guest matches, always in the last turn. Checking the
        home counts is enough: a participant with too many home matches has
        an opponent with too many guest matches. The list is changed in place.

        Parameters
        ----------
        matches : Matches
            all matches of the leg
        last_turn : int
            the turn number to fix
        participants : Sequence[Hashable]
            the participants, only their count is relevant
        """
        # Only odd number of participants require an adjustment
        if len(participants) % 2 == 0:
            return

        too_big_home_count = {
            participant
            for participant, (home, guest) in MatchesAnalyzer.get_unbalanced_home_guest_count(
                matches
            ).items()
            if home > guest
        }

        for i, (turn, home, guest) in enumerate(matches):
            if turn != last_turn:
                continue
            if home in too_big_home_count:
                logger.debug("Swapping home/guest of %s - %s in turn %d", home, guest, turn)
                matches[i] = _swapped(matches[i])


def _swapped(match: Match) -> Match:
    turn, home, guest = match
    return turn, guest, home


#  LocalWords:  RoundRobinSystem
