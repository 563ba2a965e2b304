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
Choosing between the highlighted snippets of a Solr response and the stored
field values. Highlight snippets carry markup for the matched terms
(e.g. "<em>worde</em>") and are preferred whenever Solr returns them.
"""

_MISSING = object()

OFFICIAL_HEADWORD = "official_headword"
HEADWORD = "headword"

def as_list(value):
    if value is None: return []
    if isinstance(value, (list, tuple)): return list(value)
    return [value]

class SolrDocument(object):
    """
    One hit of a Solr select response: the stored fields plus the
    highlighting block Solr returned for this document (if any).
    """

    def __init__(self, fields, highlighting=None):
        self._fields = dict(fields)
        self._highlighting = dict(highlighting or {})

    @classmethod
    def from_response(cls, response):
        """ All documents of a select response, paired with their highlights """
        highlighting = response.get("highlighting") or {}
        docs = (response.get("response") or {}).get("docs") or []
        return [cls(doc, highlighting.get(str(doc.get("id")))) for doc in docs]

    @property
    def id(self): return self._fields.get("id")

    def has_highlight_field(self, name): return name in self._highlighting
    def highlight_field(self, name): return as_list(self._highlighting.get(name))
    def has_field(self, name): return name in self._fields

    def fetch(self, name, default=_MISSING):
        if name in self._fields: return self._fields[name]
        if default is _MISSING: raise KeyError(name)
        return default

    def get(self, name, default=None): return self.fetch(name, default)

def hl_field(record, name):
    """
    The highlighted values of a field if Solr returned any, the stored
    values otherwise, and an empty list if the record has neither.
    """
    if record.has_highlight_field(name):
        return list(record.highlight_field(name))
    elif record.has_field(name):
        return as_list(record.fetch(name))
    else:
        return []

def highlighted_official_headword(record):
    values = hl_field(record, OFFICIAL_HEADWORD)
    return values[0] if len(values) > 0 else None

def highlighted_other_spellings(record):
    official = highlighted_official_headword(record)
    return [w for w in hl_field(record, HEADWORD) if w != official]
