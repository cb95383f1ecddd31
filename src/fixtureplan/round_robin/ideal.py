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
Ideal Round Robin System

Table driven schedules for 5 to 14 participants with the minimum number of
breaks (consecutive home or consecutive guest matches), after Pit Schneider's
Ideal Round Robin (https://github.com/Schneipi/ideal-round-robin, GPL-3.0).

For n participants, n even:

1. The return leg mirrors the first leg with inverted home advantage.
2. A single leg has the minimum of n-2 breaks [de Werra 1981].
3. Nobody plays more than 2 home or 2 guest matches in a row.
4. Home and guest counts differ by at most 1.

For n participants, n odd:

1. The return leg mirrors the first leg with inverted home advantage.
2. A single leg has 0 breaks [de Werra 1981], bye turns not counted.
3. Home and guest counts are equal.

The tables can not be derived cheaply, they are kept as literal data.
Participant numbers are 1-based positions in the participant sequence,
turns are 1-based in the tables and 0-based in the generated matches.

The 12 participant table is the FIDE Berger table for 12 players (first
listed participant at home), which has the same break properties.

Example:
    >>> IdealRoundRobinSystem(["A", "B", "C", "D", "E"]).generate_matches()[0]
    (0, 'D', 'C')
"""

from types import MappingProxyType
from typing import Dict, Hashable, Mapping, Sequence, Tuple

from fixtureplan.constants import IDEAL_MAX_PARTICIPANTS, IDEAL_MIN_PARTICIPANTS
from fixtureplan.exceptions import ParticipantCountError
from fixtureplan.type_hints import IdealTable, Matches
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)


# Ideal round robin tables, one line per turn
# Format: (turn, home participant number, guest participant number)
# fmt: off
_IDEAL_TABLES: Dict[int, IdealTable] = {
    5: (
        (1, 4, 3), (1, 5, 2),
        (2, 1, 4), (2, 3, 5),
        (3, 2, 3), (3, 5, 1),
        (4, 1, 2), (4, 4, 5),
        (5, 2, 4), (5, 3, 1),
    ),
    6: (
        (1, 1, 5), (1, 3, 2), (1, 6, 4),
        (2, 2, 6), (2, 4, 1), (2, 5, 3),
        (3, 1, 2), (3, 3, 6), (3, 5, 4),
        (4, 2, 4), (4, 3, 1), (4, 6, 5),
        (5, 1, 6), (5, 4, 3), (5, 5, 2),
    ),
    7: (
        (1, 5, 4), (1, 6, 3), (1, 7, 2),
        (2, 1, 6), (2, 3, 5), (2, 4, 7),
        (3, 2, 4), (3, 5, 1), (3, 7, 3),
        (4, 1, 7), (4, 3, 2), (4, 6, 5),
        (5, 2, 1), (5, 4, 3), (5, 7, 6),
        (6, 1, 4), (6, 5, 7), (6, 6, 2),
        (7, 2, 5), (7, 3, 1), (7, 4, 6),
    ),
    8: (
        (1, 1, 7), (1, 3, 6), (1, 5, 4), (1, 8, 2),
        (2, 2, 5), (2, 4, 3), (2, 6, 1), (2, 7, 8),
        (3, 1, 4), (3, 3, 2), (3, 5, 8), (3, 7, 6),
        (4, 2, 1), (4, 4, 7), (4, 5, 3), (4, 8, 6),
        (5, 1, 5), (5, 3, 8), (5, 6, 4), (5, 7, 2),
        (6, 2, 6), (6, 3, 1), (6, 5, 7), (6, 8, 4),
        (7, 1, 8), (7, 4, 2), (7, 6, 5), (7, 7, 3),
    ),
    9: (
        (1, 6, 5), (1, 7, 4), (1, 8, 3), (1, 9, 2),
        (2, 1, 8), (2, 3, 6), (2, 4, 9), (2, 5, 7),
        (3, 2, 4), (3, 6, 1), (3, 7, 3), (3, 9, 5),
        (4, 1, 7), (4, 3, 9), (4, 5, 2), (4, 8, 6),
        (5, 2, 3), (5, 4, 5), (5, 7, 8), (5, 9, 1),
        (6, 1, 2), (6, 3, 4), (6, 6, 7), (6, 8, 9),
        (7, 2, 8), (7, 4, 1), (7, 5, 3), (7, 9, 6),
        (8, 1, 5), (8, 6, 2), (8, 7, 9), (8, 8, 4),
        (9, 2, 7), (9, 3, 1), (9, 4, 6), (9, 5, 8),
    ),
    10: (
        (1, 1, 9), (1, 3, 7), (1, 6, 2), (1, 8, 5), (1, 10, 4),
        (2, 2, 10), (2, 4, 8), (2, 5, 3), (2, 7, 1), (2, 9, 6),
        (3, 1, 5), (3, 3, 4), (3, 6, 10), (3, 8, 2), (3, 9, 7),
        (4, 2, 3), (4, 4, 1), (4, 5, 9), (4, 7, 6), (4, 10, 8),
        (5, 1, 2), (5, 3, 10), (5, 6, 8), (5, 7, 5), (5, 9, 4),
        (6, 2, 9), (6, 4, 7), (6, 5, 6), (6, 8, 3), (6, 10, 1),
        (7, 1, 8), (7, 3, 6), (7, 5, 4), (7, 7, 2), (7, 9, 10),
        (8, 2, 5), (8, 3, 1), (8, 6, 4), (8, 8, 9), (8, 10, 7),
        (9, 1, 6), (9, 4, 2), (9, 5, 10), (9, 7, 8), (9, 9, 3),
    ),
    11: (
        (1, 7, 6), (1, 8, 5), (1, 9, 4), (1, 10, 3), (1, 11, 2),
        (2, 1, 10), (2, 3, 8), (2, 4, 11), (2, 5, 7), (2, 6, 9),
        (3, 2, 4), (3, 7, 3), (3, 8, 1), (3, 9, 5), (3, 11, 6),
        (4, 1, 7), (4, 3, 9), (4, 5, 11), (4, 6, 2), (4, 10, 8),
        (5, 2, 5), (5, 4, 6), (5, 7, 10), (5, 9, 1), (5, 11, 3),
        (6, 1, 11), (6, 3, 2), (6, 5, 4), (6, 8, 7), (6, 10, 9),
        (7, 2, 1), (7, 4, 3), (7, 6, 5), (7, 9, 8), (7, 11, 10),
        (8, 1, 4), (8, 3, 6), (8, 7, 9), (8, 8, 11), (8, 10, 2),
        (9, 2, 8), (9, 4, 10), (9, 5, 3), (9, 6, 1), (9, 11, 7),
        (10, 1, 5), (10, 7, 2), (10, 8, 4), (10, 9, 11), (10, 10, 6),
        (11, 2, 9), (11, 3, 1), (11, 4, 7), (11, 5, 10), (11, 6, 8),
    ),
    12: (
        (1, 1, 12), (1, 2, 11), (1, 3, 10), (1, 4, 9), (1, 5, 8), (1, 6, 7),
        (2, 12, 7), (2, 8, 6), (2, 9, 5), (2, 10, 4), (2, 11, 3), (2, 1, 2),
        (3, 2, 12), (3, 3, 1), (3, 4, 11), (3, 5, 10), (3, 6, 9), (3, 7, 8),
        (4, 12, 8), (4, 9, 7), (4, 10, 6), (4, 11, 5), (4, 1, 4), (4, 2, 3),
        (5, 3, 12), (5, 4, 2), (5, 5, 1), (5, 6, 11), (5, 7, 10), (5, 8, 9),
        (6, 12, 9), (6, 10, 8), (6, 11, 7), (6, 1, 6), (6, 2, 5), (6, 3, 4),
        (7, 4, 12), (7, 5, 3), (7, 6, 2), (7, 7, 1), (7, 8, 11), (7, 9, 10),
        (8, 12, 10), (8, 11, 9), (8, 1, 8), (8, 2, 7), (8, 3, 6), (8, 4, 5),
        (9, 5, 12), (9, 6, 4), (9, 7, 3), (9, 8, 2), (9, 9, 1), (9, 10, 11),
        (10, 12, 11), (10, 1, 10), (10, 2, 9), (10, 3, 8), (10, 4, 7), (10, 5, 6),
        (11, 6, 12), (11, 7, 5), (11, 8, 4), (11, 9, 3), (11, 10, 2), (11, 11, 1),
    ),
    13: (
        (1, 8, 7), (1, 9, 6), (1, 10, 5), (1, 11, 4), (1, 12, 3), (1, 13, 2),
        (2, 1, 12), (2, 3, 10), (2, 4, 13), (2, 5, 8), (2, 6, 11), (2, 7, 9),
        (3, 2, 4), (3, 8, 3), (3, 9, 5), (3, 10, 1), (3, 11, 7), (3, 13, 6),
        (4, 1, 8), (4, 3, 9), (4, 5, 11), (4, 6, 2), (4, 7, 13), (4, 12, 10),
        (5, 2, 7), (5, 4, 6), (5, 8, 12), (5, 9, 1), (5, 11, 3), (5, 13, 5),
        (6, 1, 11), (6, 3, 13), (6, 5, 2), (6, 7, 4), (6, 10, 8), (6, 12, 9),
        (7, 2, 3), (7, 4, 5), (7, 6, 7), (7, 9, 10), (7, 11, 12), (7, 13, 1),
        (8, 1, 2), (8, 3, 4), (8, 5, 6), (8, 8, 9), (8, 10, 11), (8, 12, 13),
        (9, 2, 12), (9, 4, 1), (9, 6, 3), (9, 7, 5), (9, 11, 8), (9, 13, 10),
        (10, 1, 6), (10, 3, 7), (10, 8, 13), (10, 9, 11), (10, 10, 2), (10, 12, 4),
        (11, 2, 8), (11, 4, 10), (11, 5, 3), (11, 6, 12), (11, 7, 1), (11, 13, 9),
        (12, 1, 5), (12, 8, 4), (12, 9, 2), (12, 10, 6), (12, 11, 13), (12, 12, 7),
        (13, 2, 11), (13, 3, 1), (13, 4, 9), (13, 5, 12), (13, 6, 8), (13, 7, 10),
    ),
    14: (
        (1, 1, 14), (1, 4, 9), (1, 6, 7), (1, 8, 5), (1, 10, 3), (1, 12, 2), (1, 13, 11),
        (2, 2, 10), (2, 3, 8), (2, 5, 6), (2, 7, 4), (2, 9, 13), (2, 11, 1), (2, 14, 12),
        (3, 1, 9), (3, 4, 5), (3, 6, 3), (3, 8, 2), (3, 10, 12), (3, 11, 14), (3, 13, 7),
        (4, 2, 6), (4, 3, 4), (4, 5, 13), (4, 7, 1), (4, 9, 11), (4, 12, 8), (4, 14, 10),
        (5, 1, 5), (5, 4, 2), (5, 6, 12), (5, 8, 10), (5, 9, 14), (5, 11, 7), (5, 13, 3),
        (6, 2, 13), (6, 3, 1), (6, 5, 11), (6, 7, 9), (6, 10, 6), (6, 12, 4), (6, 14, 8),
        (7, 1, 2), (7, 4, 10), (7, 6, 8), (7, 7, 14), (7, 9, 5), (7, 11, 3), (7, 13, 12),
        (8, 2, 11), (8, 3, 9), (8, 5, 7), (8, 8, 4), (8, 10, 13), (8, 12, 1), (8, 14, 6),
        (9, 1, 10), (9, 4, 6), (9, 5, 14), (9, 7, 3), (9, 9, 2), (9, 11, 12), (9, 13, 8),
        (10, 2, 7), (10, 3, 5), (10, 6, 13), (10, 8, 1), (10, 10, 11), (10, 12, 9), (10, 14, 4),
        (11, 1, 6), (11, 3, 14), (11, 5, 2), (11, 7, 12), (11, 9, 10), (11, 11, 8), (11, 13, 4),
        (12, 2, 3), (12, 4, 1), (12, 6, 11), (12, 8, 9), (12, 10, 7), (12, 12, 5), (12, 13, 14),
        (13, 1, 13), (13, 3, 12), (13, 5, 10), (13, 7, 8), (13, 9, 6), (13, 11, 4), (13, 14, 2),
    ),
}
# fmt: on

IDEAL_TABLES: Mapping[int, IdealTable] = MappingProxyType(_IDEAL_TABLES)


class IdealRoundRobinSystem:
    """Round robin generator returning the ideal table for the participant count.

    Attributes:
        participants: Immutable tuple of participants in planning order
    """

    def __init__(self, participants: Sequence[Hashable]) -> None:
        # The order must be kept, table numbers are positions in it
        self.participants: Tuple[Hashable, ...] = tuple(participants)

    def generate_matches(self) -> Matches:
        """Generate the matches of one leg from the ideal table.

        Returns
        -------
        Matches
            (turn, home, guest) tuples, turns are 0-based

        Raises
        ------
        ParticipantCountError
            if there are fewer than 5 or more than 14 participants
        """
        n_participants = len(self.participants)
        table = IDEAL_TABLES.get(n_participants)
        if table is None:
            logger.error(
                "Invalid participant count for ideal round robin: %d", n_participants
            )
            raise ParticipantCountError(
                f"The number of participants must be between {IDEAL_MIN_PARTICIPANTS} "
                f"and {IDEAL_MAX_PARTICIPANTS}, got {n_participants}"
            )

        logger.info("Using ideal round robin table for %d participants", n_participants)
        return self._to_matches(table)

    def _to_matches(self, table: IdealTable) -> Matches:
        """Replace participant numbers by participants and make turns zero-based."""
        return [
            (turn - 1, self.participants[home - 1], self.participants[guest - 1])
            for turn, home, guest in table
        ]


#  LocalWords:  IdealRoundRobinSystem Schneipi Werra
