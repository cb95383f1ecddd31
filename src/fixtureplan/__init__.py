"""Fixture Plan: round robin match combinations for sports rounds."""

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

__version__ = "0.1.0"

from fixtureplan.exceptions import (
    IncompatibleTypesError,
    OutOfRangeError,
    ParticipantCountError,
    ParticipantError,
    PlanningException,
)
from fixtureplan.plan import (
    LegType,
    ParticipantCombination,
    ParticipantCombinations,
    RefereeType,
)
from fixtureplan.plan.match_creator import MatchCreator
from fixtureplan.round_robin import (
    BYE,
    IdealRoundRobinSystem,
    MatchesAnalyzer,
    RoundRobinOptimizer,
    RoundRobinSystem,
)
from fixtureplan.settings import PlanSettings

__all__ = [
    "BYE",
    "IdealRoundRobinSystem",
    "IncompatibleTypesError",
    "LegType",
    "MatchCreator",
    "MatchesAnalyzer",
    "OutOfRangeError",
    "ParticipantCombination",
    "ParticipantCombinations",
    "ParticipantCountError",
    "ParticipantError",
    "PlanSettings",
    "PlanningException",
    "RefereeType",
    "RoundRobinOptimizer",
    "RoundRobinSystem",
]
