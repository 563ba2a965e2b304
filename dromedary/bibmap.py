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

import json
import logging
import threading
from collections.abc import Iterable

from dromedary import config
from dromedary.errors import ConfigurationError

logger = logging.getLogger(__name__)

def load_bibmap_file(path):
    """
    Read a reference id -> bibliography id table, either a JSON object or
    a tab separated file with one 'reference id<TAB>bib id' pair per line.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.endswith(".json"): data = json.load(f)
            else: data = list(_tsv_pairs(f))
    except OSError as e:
        raise ConfigurationError("Can't read bib id table {}: {}".format(path, e)) from e
    except ValueError as e:
        raise ConfigurationError("Invalid bib id table {}: {}".format(path, e)) from e
    if not isinstance(data, (dict, list)) or not _is_mapping(data):
        raise ConfigurationError("Bib id table {} is not a mapping".format(path))
    return data

def _is_mapping(data):
    """ A dict, or a sequence of (reference id, bib id) pairs """
    if hasattr(data, "items"): return True
    try: return all(isinstance(p, (list, tuple)) and len(p) == 2 for p in data)
    except TypeError: return False

def _tsv_pairs(lines):
    for no, line in enumerate(lines, 1):
        line = line.strip()
        if line.startswith("#") or line == "": continue
        fields = line.split("\t")
        if len(fields) < 2:
            logger.warning("Skipping invalid bib id line %d: %r", no, line)
            continue
        yield fields[0].strip(), fields[1].strip()

def load_configured_bibmap():
    path = config.bibmap_file()
    if path is None:
        logger.warning("No bib id table configured (set %s), citations "
                       "will be rendered without bib ids", config.ENV["BIBMAP"])
        return {}
    logger.info("Loading bib id table from %s", path)
    return load_bibmap_file(path)

class BibIdMapper(object):
    """
    Case-insensitive mapping from a citation's reference id (as found in
    cit.bib.stencil) to the id of its bibliography record. The table is
    built on first lookup.
    """
    loader = None

    def __init__(self, loader=None):
        self.loader = loader
        self._table = None
        self._lock = threading.Lock()

    @staticmethod
    def _build(data):
        if not hasattr(data, "items") and isinstance(data, Iterable): data = list(data)
        if not _is_mapping(data):
            raise ConfigurationError("Bib id table is not a mapping")
        items = data.items() if hasattr(data, "items") else data
        return {str(rid).upper(): str(bibid) for rid, bibid in items}

    @property
    def table(self):
        table = self._table
        if table is None:
            with self._lock:
                if self._table is None:
                    data = self.loader() if self.loader is not None else {}
                    self._table = self._build(data)
                    logger.debug("Bib id table holds %d entries", len(self._table))
                table = self._table
        return table

    def set_table(self, data):
        table = self._build(data)
        with self._lock: self._table = table

    def lookup(self, reference_id):
        if reference_id is None: return None
        return self.table.get(str(reference_id).upper())

    def __contains__(self, reference_id): return self.lookup(reference_id) is not None
    def __len__(self): return len(self.table)

BIBIDS = BibIdMapper(load_configured_bibmap)
