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

"""Participant combinations handed to the date and venue scheduler."""

from dataclasses import dataclass
from typing import Any, Hashable, List, Optional


@dataclass
class ParticipantCombination:
    """The home and guest participant of a match and an optional referee."""

    turn: int
    home: Hashable
    guest: Hashable
    referee: Optional[Any] = None

    def swap_home_guest(self) -> None:
        """Swap the home and guest participants."""
        self.home, self.guest = self.guest, self.home

    def __str__(self) -> str:
        referee = "-" if self.referee is None else str(self.referee)
        return f"{self.home} : {self.guest} / {referee}"


class ParticipantCombinations(List[ParticipantCombination]):
    """The combinations of one leg, in playing order."""

    def get_turns(self) -> List[int]:
        """Get the distinct turns, ascending."""
        return sorted({c.turn for c in self})

    def get_combinations(self, turn: int) -> List[ParticipantCombination]:
        """Get the combinations of a turn.

        Parameters
        ----------
        turn : int
            the turn number

        Returns
        -------
        List[ParticipantCombination]
            the combinations of the turn, empty for an unknown turn
        """
        return [c for c in self if c.turn == turn]

    def __str__(self) -> str:
        lines = []
        for turn in self.get_turns():
            lines.append(f"Turn {turn}:")
            lines.extend(f"  {c}" for c in self.get_combinations(turn))
        return "\n".join(lines)


#  LocalWords:  ParticipantCombination
