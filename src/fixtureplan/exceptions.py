"""Exceptions raised by Fixture Plan."""

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


class PlanningException(Exception):
    """Base class for every error raised while planning fixtures."""


class ParticipantCountError(PlanningException, ValueError):
    """The number of participants is not supported by a round robin system."""


class OutOfRangeError(PlanningException, ValueError):
    """An enum value (referee type, leg type) is not defined."""


class IncompatibleTypesError(PlanningException, TypeError):
    """The referee type can not hold a participant."""


class ParticipantError(PlanningException, ValueError):
    """Participants are unordered, duplicated or of the wrong type."""


#  LocalWords:  PlanningException
