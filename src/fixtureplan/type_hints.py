"""Type hints used in Fixture Plan."""

from typing import Dict, Hashable, List, Sequence, Tuple, TypeVar

# A participant is anything hashable with value equality, e.g. a team key
P = TypeVar("P", bound=Hashable)

# (turn, home, guest)
Match = Tuple[int, P, P]
Matches = List[Match]

# (turn, home index, guest index), all 1-based
IdealMatch = Tuple[int, int, int]
IdealTable = Tuple[IdealMatch, ...]

# Participants in their planning order
Participants = Sequence[P]

# participant -> (home count, guest count)
HomeGuestCounts = Dict[P, Tuple[int, int]]

#  LocalWords:  IdealMatch IdealTable HomeGuestCounts
