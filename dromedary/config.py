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

import os

XSLT_DIR = "./indexer/xslt"
XSLT_SUFFIX = ".xsl"
LOG_LEVEL = "INFO"

ENV = {
    "XSLT_DIR": "DROMEDARY_XSLT_DIR",
    "BIBMAP": "DROMEDARY_BIBMAP",
    "LOG_LEVEL": "DROMEDARY_LOG_LEVEL",
}

STYLESHEET_NAMES = {
    "FORM": "FormOnly",
    "DEF": "DefOnly",
    "CIT": "CitOnly",
    "ETYM": "EtymOnly",
    "NOTE": "NoteOnly",
    "SUPPLEMENT": "SupplementOnly",
}

def xslt_dir():
    return os.environ.get(ENV["XSLT_DIR"]) or XSLT_DIR

def bibmap_file():
    """ Path of the reference id -> bib id table, or None if not configured """
    return os.environ.get(ENV["BIBMAP"]) or None

def log_level():
    return (os.environ.get(ENV["LOG_LEVEL"]) or LOG_LEVEL).upper()
