"""Enums for planning match combinations."""

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

from enum import IntEnum
from typing import Any, Type, TypeVar

from fixtureplan.exceptions import OutOfRangeError
from fixtureplan.utils import setup_logger

logger = setup_logger(__name__)

E = TypeVar("E", bound=IntEnum)


class RefereeType(IntEnum):
    """Which participant is assigned referee for a match."""

    NONE = 0
    HOME = 1  # the home participant referees itself
    GUEST = 2  # the guest participant referees itself
    OTHER_FROM_ROUND = 3


class LegType(IntEnum):
    """The leg to create match combinations for."""

    FIRST = 1
    RETURN = 2


def to_enum(enum_type: Type[E], value: Any) -> E:
    """Convert a value or name to a member of enum_type.

    Raises
    ------
    OutOfRangeError
        if the value is not defined for enum_type
    """
    if isinstance(value, enum_type):
        return value
    try:
        if isinstance(value, str):
            return enum_type[value.upper()]
        return enum_type(value)
    except (KeyError, ValueError) as e:
        logger.error("Undefined %s: %r", enum_type.__name__, value)
        raise OutOfRangeError(
            f"{value!r} is not a valid {enum_type.__name__}"
        ) from e
