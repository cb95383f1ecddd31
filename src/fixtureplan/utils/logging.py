"""Logging utilities."""

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


import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from PyQt6 import QtCore

from fixtureplan.constants import APP_NAME, LOG_FILE_NAME, LOG_LEVEL_ENV_VAR

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"


def _log_level() -> int:
    """Level from the environment, INFO when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _log_folder() -> Optional[str]:
    """Find a writable folder for the log file.

    Returns
    -------
    Optional[str]
        the ``logs`` folder, created if needed, or None
    """
    # Preferred Windows location: %APPDATA%\Fixture Plan
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        folder = os.path.join(os.environ["APPDATA"], APP_NAME)
    else:
        # prefer Qt's AppDataLocation then TempLocation
        folder = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.AppDataLocation
        )
        if not folder:
            folder = QtCore.QStandardPaths.writableLocation(
                QtCore.QStandardPaths.StandardLocation.TempLocation
            )
    if not folder:
        return None

    folder = os.path.join(folder, "logs")
    try:
        os.makedirs(folder, exist_ok=True)
    except OSError:
        # If we can't create the folder, fall back to temp dir
        folder = os.path.join(
            QtCore.QStandardPaths.writableLocation(
                QtCore.QStandardPaths.StandardLocation.TempLocation
            ),
            "logs",
        )
        os.makedirs(folder, exist_ok=True)
    return folder


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up file handler and console handler

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    level = _log_level()
    lgr.setLevel(level)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    file_handler = None
    try:
        log_folder = _log_folder()
        if log_folder:
            # Use RotatingFileHandler to prevent unbounded log growth
            file_handler = RotatingFileHandler(
                os.path.join(log_folder, LOG_FILE_NAME),
                maxBytes=5 * 1024 * 1024,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_formatter)
    except OSError:
        # continue without file logging
        file_handler = None

    # Console Handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    lgr.addHandler(console_handler)
    if file_handler:
        lgr.addHandler(file_handler)
        lgr.debug("Logging to: %s", file_handler.baseFilename)
    else:
        lgr.debug("No writable location for the log file")
    return lgr


#  LocalWords:  AppDataLocation TempLocation
