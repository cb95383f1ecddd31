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
Home/guest statistics over a list of round robin matches.

All functions are pure. Matches are ``(turn, home, guest)`` tuples and are
analyzed in the order given, which is the order they will be played in.
"""

import math
from typing import Dict, Hashable, Iterator, Sequence, Tuple

from fixtureplan.type_hints import HomeGuestCounts, Match


class MatchesAnalyzer:
    """Stateless statistics over a list of matches."""

    @staticmethod
    def get_home_guest_count(matches: Sequence[Match]) -> HomeGuestCounts:
        """Get the total number of home/guest matches for each participant.

        Parameters
        ----------
        matches : Sequence[Match]
            the matches to count

        Returns
        -------
        HomeGuestCounts
            participant -> (home count, guest count), in order of first appearance
        """
        result: Dict[Hashable, Tuple[int, int]] = {}
        for _, home, guest in matches:
            result.setdefault(home, (0, 0))
            result.setdefault(guest, (0, 0))
            result[home] = (result[home][0] + 1, result[home][1])
            result[guest] = (result[guest][0], result[guest][1] + 1)
        return result

    @staticmethod
    def get_unbalanced_home_guest_count(matches: Sequence[Match]) -> HomeGuestCounts:
        """Get the participants with an unbalanced number of home/guest matches.

        For an odd number of participants home and guest counts must be equal.
        For an even number the difference may be 1 (e.g. 6 participants:
        2 home and 3 guest matches).

        Parameters
        ----------
        matches : Sequence[Match]
            the matches to analyze

        Returns
        -------
        HomeGuestCounts
            only the participants whose home or guest count falls outside
            ``[floor((N-1)/2), ceil((N-1)/2)]``
        """
        home_guest_count = MatchesAnalyzer.get_home_guest_count(matches)
        half = (len(home_guest_count) - 1) / 2
        min_count = math.floor(half)
        max_count = math.ceil(half)

        return {
            participant: (home, guest)
            for participant, (home, guest) in home_guest_count.items()
            if not (min_count <= home <= max_count and min_count <= guest <= max_count)
        }

    @staticmethod
    def get_max_consecutive_home_guest_count(
        participant: Hashable, matches: Sequence[Match]
    ) -> Tuple[int, int]:
        """Get the longest run of consecutive home and of consecutive guest matches.

        Parameters
        ----------
        participant : Hashable
            the participant to analyze
        matches : Sequence[Match]
            the matches in playing order

        Returns
        -------
        Tuple[int, int]
            (max home run, max guest run), 0 for a role never taken
        """
        home_count = max(
            MatchesAnalyzer.get_last_consecutive_counts(participant, True, matches),
            default=0,
        )
        guest_count = max(
            MatchesAnalyzer.get_last_consecutive_counts(participant, False, matches),
            default=0,
        )
        return home_count, guest_count

    @staticmethod
    def get_last_consecutive_counts(
        participant: Hashable, for_home: bool, matches: Sequence[Match]
    ) -> Iterator[int]:
        """Yield the runs of consecutive home (or guest) matches, most recent first.

        The matches are scanned backwards. Where the participant holds the
        tracked role a run starts: scanning continues, counting every further
        match in the tracked role, until the participant shows up in the
        opposite role or the matches are exhausted. The run length is yielded
        and the scan carries on *after* the match that ended the run. Any other
        position yields 0.

        Parameters
        ----------
        participant : Hashable
            the participant to analyze
        for_home : bool
            track home matches if True, guest matches otherwise
        matches : Sequence[Match]
            the matches in playing order

        Yields
        ------
        int
            run length, or 0 where the participant does not hold the tracked role
        """
        tracked_idx, opposite_idx = (1, 2) if for_home else (2, 1)
        scan = reversed(list(matches))
        for match in scan:
            if match[tracked_idx] != participant:
                yield 0
                continue
            count = 1
            # shares the iterator, so the outer loop resumes where this one stops
            for match in scan:
                if match[tracked_idx] == participant:
                    count += 1
                if match[opposite_idx] == participant:
                    break
            yield count


#  LocalWords:  HomeGuestCounts
