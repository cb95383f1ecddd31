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

# --- Constants ---
APP_NAME = "Fixture Plan"
LOG_FILE_NAME = "fixture-plan.log"
# overrides the default INFO level, e.g. FIXTUREPLAN_LOG_LEVEL=DEBUG
LOG_LEVEL_ENV_VAR = "FIXTUREPLAN_LOG_LEVEL"

# Participant counts covered by the ideal round robin tables
IDEAL_MIN_PARTICIPANTS = 5
IDEAL_MAX_PARTICIPANTS = 14

# The optimizer gives its best results between 3 and 9 participants,
# above that the plain round robin schedule is already good.
OPTIMIZER_MIN_PARTICIPANTS = 3
OPTIMIZER_MAX_PARTICIPANTS = 9

# Smallest rounds that can be planned
MIN_PARTICIPANTS = 2
MIN_PARTICIPANTS_OTHER_FROM_ROUND_REFEREE = 3

# Optimizer switches, both off as built
PREFER_HOME_TEAMS_NOT_PLAYING_EACH_OTHER = False
AVOID_CONSECUTIVE_HOME_GUEST = False
