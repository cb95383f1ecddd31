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
Round Robin Optimizer

Reorders whole turns of a round robin schedule so that participants play
fewer consecutive home or guest matches. Which participants meet is never
changed. Gives best results between 3 and 9 participants, for more
participants the plain round robin schedule is already good.

The next turn is picked by a waterfall of heuristics, the first one with an
answer wins:

1. a turn where every match has exactly one of the previous turn's home
   participants (off unless ``prefer_home_teams_not_playing_each_other``)
2. the turn with the most previous home participants playing as guest
3. the turn with the least continuation of home/guest runs
4. the first turn not placed yet
"""

from typing import Dict, Hashable, List, Optional, Sequence, Tuple

from fixtureplan.constants import (
    AVOID_CONSECUTIVE_HOME_GUEST,
    PREFER_HOME_TEAMS_NOT_PLAYING_EACH_OTHER,
)
from fixtureplan.round_robin.analyzer import MatchesAnalyzer
from fixtureplan.type_hints import HomeGuestCounts, Match, Matches
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)


def _distinct_turns(matches: Sequence[Match]) -> List[int]:
    """Turns in order of first appearance."""
    return list(dict.fromkeys(turn for turn, _, _ in matches))


def _turn_matches(matches: Sequence[Match], turn: int) -> Matches:
    return [m for m in matches if m[0] == turn]


class RoundRobinOptimizer:
    """Optimizes the turn sequence of a round robin schedule.

    Attributes:
        prefer_home_teams_not_playing_each_other: enable heuristic 1
        avoid_consecutive_home_guest: swap home/guest of the next turn's
            matches before placing it
    """

    def __init__(
        self,
        participants: Sequence[Hashable],
        round_robin_matches: Sequence[Match],
        prefer_home_teams_not_playing_each_other: bool = PREFER_HOME_TEAMS_NOT_PLAYING_EACH_OTHER,
        avoid_consecutive_home_guest: bool = AVOID_CONSECUTIVE_HOME_GUEST,
    ) -> None:
        self._participants: Tuple[Hashable, ...] = tuple(participants)
        # The input schedule, never changed
        self._round_robin_matches: Matches = list(round_robin_matches)
        # The working copy, home/guest may be swapped here
        self._working_matches: Matches = []
        self._turns_processed: List[int] = []
        self._result: Matches = []
        self.prefer_home_teams_not_playing_each_other = (
            prefer_home_teams_not_playing_each_other
        )
        self.avoid_consecutive_home_guest = avoid_consecutive_home_guest

    def optimize_home_guest_matches(self) -> Matches:
        """Reorder the turns to balance home/guest sequences.

        Returns
        -------
        Matches
            the same matches with their input turn values, ordered by
            the new turn sequence
        """
        self._result.clear()
        self._working_matches = list(self._round_robin_matches)
        self._turns_processed.clear()

        return self._optimize_match_sequences()

    def _optimize_match_sequences(self) -> Matches:
        turns = _distinct_turns(self._round_robin_matches)
        if not turns:
            return []

        # initialize with the first turn
        self._turns_processed.append(turns[0])
        self._result.extend(_turn_matches(self._working_matches, turns[0]))

        while len(self._turns_processed) < len(turns):
            turn_id = self._turns_processed[-1]

            next_turn_id = self._get_preferred_turn(turn_id)
            if next_turn_id is None:
                next_turn_id = self.get_turn_with_max_home_teams_not_playing_each_other(
                    turn_id, self._turns_processed, self._working_matches
                )
            if next_turn_id is None:
                next_turn_id = self.get_turn_with_least_consecutive_home_or_guest(
                    turn_id, self._turns_processed, self._working_matches
                )
            if next_turn_id is None:
                next_turn_id = next(t for t in turns if t not in self._turns_processed)

            if self.avoid_consecutive_home_guest:
                self.avoid_consecutive_home_guest_matches(next_turn_id)

            logger.debug("Turn %s placed after turn %s", next_turn_id, turn_id)
            self._result.extend(_turn_matches(self._working_matches, next_turn_id))
            self._turns_processed.append(next_turn_id)

        logger.info("Optimized turn sequence: %s", self._turns_processed)
        return list(self._result)

    def _get_preferred_turn(self, last_turn: int) -> Optional[int]:
        # heuristic 1 is switched off as built
        if not self.prefer_home_teams_not_playing_each_other:
            return None
        return self.get_turn_of_home_teams_not_playing_each_other(
            last_turn, self._turns_processed, self._working_matches
        )

    @staticmethod
    def get_turn_of_home_teams_not_playing_each_other(
        last_turn: int, excluded_turns: Sequence[int], matches: Sequence[Match]
    ) -> Optional[int]:
        """Get the next turn where all last turn's home teams play, but not each other.

        Parameters
        ----------
        last_turn : int
            the turn placed last
        excluded_turns : Sequence[int]
            turns already placed
        matches : Sequence[Match]
            all matches

        Returns
        -------
        Optional[int]
            the turn, or None if no turn fulfills the criteria
        """
        home_teams = {home for _, home, _ in _turn_matches(matches, last_turn)}
        for turn in _distinct_turns(matches):
            if turn in excluded_turns:
                continue
            if all(
                (home in home_teams) != (guest in home_teams)
                for _, home, guest in _turn_matches(matches, turn)
            ):
                return turn
        return None

    @staticmethod
    def get_turn_with_max_home_teams_not_playing_each_other(
        last_turn: int, excluded_turns: Sequence[int], matches: Sequence[Match]
    ) -> Optional[int]:
        """Get the turn where most of last turn's home teams play as guest.

        Parameters
        ----------
        last_turn : int
            the turn placed last
        excluded_turns : Sequence[int]
            turns already placed
        matches : Sequence[Match]
            all matches

        Returns
        -------
        Optional[int]
            the first turn with the highest count, or None if every count is 0
        """
        best_turn: Optional[int] = None
        best_count = 0
        home_teams = [home for _, home, _ in _turn_matches(matches, last_turn)]
        for turn in _distinct_turns(matches):
            if turn in excluded_turns:
                continue
            count = sum(
                1 for _, _, guest in _turn_matches(matches, turn) if guest in home_teams
            )
            if count > best_count:
                best_turn, best_count = turn, count
        return best_turn

    @staticmethod
    def get_turn_with_least_consecutive_home_or_guest(
        last_turn: int, excluded_turns: Sequence[int], matches: Sequence[Match]
    ) -> Optional[int]:
        """Get the turn adding the least to the home/guest runs of last turn's teams.

        Parameters
        ----------
        last_turn : int
            the turn placed last
        excluded_turns : Sequence[int]
            turns already placed
        matches : Sequence[Match]
            all matches

        Returns
        -------
        Optional[int]
            the first turn with the lowest total, or None if no turn is left
        """
        best_turn: Optional[int] = None
        best_total: Optional[int] = None

        last_turn_matches = _turn_matches(matches, last_turn)
        last_turn_participants = [home for _, home, _ in last_turn_matches]
        last_turn_participants += [guest for _, _, guest in last_turn_matches]

        for turn in _distinct_turns(matches):
            if turn in excluded_turns:
                continue
            current_turn_matches = _turn_matches(matches, turn)

            total = 0
            for participant in last_turn_participants:
                for for_home in (True, False):
                    total += next(
                        MatchesAnalyzer.get_last_consecutive_counts(
                            participant, for_home, current_turn_matches
                        ),
                        0,
                    )

            if best_total is None or total < best_total:
                best_turn, best_total = turn, total
        return best_turn

    def avoid_consecutive_home_guest_matches(self, next_turn_id: int) -> None:
        """Swap home/guest in the next turn to avoid consecutive home/guest matches.

        Only runs when ``avoid_consecutive_home_guest`` is set.

        Parameters
        ----------
        next_turn_id : int
            the turn containing the matches to change
        """
        # nothing to compare with before the second turn
        if len(self._turns_processed) == 1:
            return

        consecutive = self._get_participants_last_consecutive_counts(self._result)

        for i, match in enumerate(self._working_matches):
            turn, home, guest = match
            if turn != next_turn_id:
                continue

            home_run, guest_run = consecutive[home], consecutive[guest]
            if home_run[0] >= 2 or guest_run[1] >= 2:
                swap = True
            elif home_run[0] > guest_run[0]:
                swap = True
            elif home_run[1] > guest_run[1]:
                swap = False
            else:
                swap = home_run[0] == guest_run[0] and self._is_consecutive_home_or_guest_match(
                    match
                )

            if swap:
                logger.debug("Swapping home/guest of %s - %s in turn %s", home, guest, turn)
                self._working_matches[i] = (turn, guest, home)

    def _is_consecutive_home_or_guest_match(self, match: Match) -> bool:
        """Check whether home or guest kept their role since the previous turn."""
        _, home, guest = match
        previous = _turn_matches(self._working_matches, self._turns_processed[-1])
        return any(m[1] == home for m in previous) or any(m[2] == guest for m in previous)

    def _get_participants_last_consecutive_counts(
        self, matches: Sequence[Match]
    ) -> HomeGuestCounts:
        """Most recent home/guest run length of every participant."""
        result: Dict[Hashable, Tuple[int, int]] = {}
        for participant in self._participants:
            home_count = next(
                MatchesAnalyzer.get_last_consecutive_counts(participant, True, matches), 0
            )
            guest_count = next(
                MatchesAnalyzer.get_last_consecutive_counts(participant, False, matches), 0
            )
            result.setdefault(participant, (home_count, guest_count))
        return result


#  LocalWords:  RoundRobinOptimizer
