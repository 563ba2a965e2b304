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

"""
Compiled XSLT stylesheets, loaded lazily and kept for the lifetime of the
process.

Compiling a stylesheet is by far the most expensive step of rendering an
entry, so every stylesheet is compiled once and the same etree.XSLT object
is handed out afterwards. A lock per stylesheet name makes sure two threads
asking for the same uncompiled stylesheet don't both compile it; the
compiled object is only stored in the cache once it is complete.

A stylesheet that can't be loaded is not retried: the ConfigurationError
from the first attempt is raised again on every later request.
"""

import os
import logging
import threading

from lxml import etree

from dromedary import config
from dromedary.errors import ConfigurationError

logger = logging.getLogger(__name__)

def load_xslt(path):
    try:
        with open(path, "r", encoding="utf-8") as f: text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError("Can't read stylesheet {}: {}".format(path, e)) from e
    parser = etree.XMLParser(encoding="utf-8", no_network=True)
    try:
        xsl = etree.fromstring(text.encode("utf-8"), parser=parser, base_url=path)
        return etree.XSLT(xsl)
    except (etree.XMLSyntaxError, etree.XSLTParseError) as e:
        raise ConfigurationError("Can't compile stylesheet {}: {}".format(path, e)) from e

class StylesheetCache(object):
    directory = None
    suffix = config.XSLT_SUFFIX

    def __init__(self, directory=None, suffix=None, loader=None):
        self.directory = directory
        if suffix is not None: self.suffix = suffix
        self.loader = load_xslt if loader is None else loader
        self._compiled = {}
        self._failed = {}
        self._locks = {}
        self._lock = threading.Lock()

    def __contains__(self, name): return name in self._compiled
    def __len__(self): return len(self._compiled)

    def path_for(self, name):
        directory = self.directory
        if directory is None: directory = config.xslt_dir()
        return os.path.join(directory, name + self.suffix)

    def get(self, name):
        xslt = self._compiled.get(name)
        if xslt is not None: return xslt
        with self._lock:
            name_lock = self._locks.setdefault(name, threading.Lock())
        with name_lock:
            if name in self._failed:
                raise ConfigurationError(str(self._failed[name])) from self._failed[name]
            if name not in self._compiled:
                self._compiled[name] = self._compile(name)
        return self._compiled[name]

    def _compile(self, name):
        path = self.path_for(name)
        logger.info("Compiling stylesheet '%s' from %s", name, path)
        try: return self.loader(path)
        except ConfigurationError as e:
            logger.error("Stylesheet '%s' unusable: %s", name, e)
            self._failed[name] = e
            raise

    def preload(self, names=None):
        """ Compile stylesheets up front, e.g. when a server starts """
        if names is None: names = config.STYLESHEET_NAMES.values()
        return [self.get(name) for name in names]

STYLESHEETS = StylesheetCache()
