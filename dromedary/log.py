# This file is part of dromedary
# Copyright (C) 2018  Thomas Vogt
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

import sys
import logging

from dromedary import config

LOGGER_NAME = "dromedary"
TIME_FORMAT = "%Y-%m-%d:%H:%M:%S"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_handler = None

def setup_logging(level=None, stream=None):
    """
    Attach a single stderr handler to the package logger. Calling this
    again replaces the handler instead of stacking another one.
    """
    global _handler
    if level is None: level = config.log_level()
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None: logger.removeHandler(_handler)
    _handler = handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=TIME_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
