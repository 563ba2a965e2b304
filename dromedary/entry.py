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
The dictionary entry as stored in the 'json' field of the index. Every
section that gets rendered carries its own XML snippet.
"""

import json

from dromedary.errors import ParseError

class Headword(object):
    orig = ""

    def __init__(self, orig="", regs=None):
        self.orig = orig
        self._regs = list(regs or [])

    @property
    def regs(self):
        """ The regularized spellings, in order """
        return list(self._regs)

    @classmethod
    def from_dict(cls, data):
        return cls(data.get("orig", ""), data.get("regs"))

class Stencil(object):
    def __init__(self, reference_id=None, title="", date=""):
        self.reference_id = reference_id
        self.title, self.date = title, date

    @classmethod
    def from_dict(cls, data):
        rid = data.get("reference_id", data.get("rid"))
        return cls(rid, data.get("title", ""), data.get("date", ""))

class Bib(object):
    def __init__(self, stencil=None):
        self.stencil = stencil if stencil is not None else Stencil()

    @classmethod
    def from_dict(cls, data):
        return cls(Stencil.from_dict(data.get("stencil") or {}))

class Citation(object):
    def __init__(self, xml=None, bib=None):
        self.xml = xml
        self.bib = bib if bib is not None else Bib()

    @property
    def reference_id(self): return self.bib.stencil.reference_id

    @classmethod
    def from_dict(cls, data):
        return cls(data.get("xml"), Bib.from_dict(data.get("bib") or {}))

class Note(object):
    def __init__(self, xml=None): self.xml = xml

    @classmethod
    def from_dict(cls, data): return cls(data.get("xml"))

class Supplement(object):
    def __init__(self, xml=None): self.xml = xml

    @classmethod
    def from_dict(cls, data): return cls(data.get("xml"))

class Sense(object):
    def __init__(self, definition_xml=None, citations=None):
        self.definition_xml = definition_xml
        self.citations = list(citations or [])

    @property
    def quotes(self): return self.citations

    @classmethod
    def from_dict(cls, data):
        return cls(
            data.get("definition_xml"),
            [Citation.from_dict(c) for c in data.get("citations") or []]
        )

class Entry(object):
    id = None
    pos = None

    def __init__(self, id=None, pos=None, headwords=None, senses=None,
                 notes=None, supplements=None):
        self.id, self.pos = id, pos
        self.headwords = list(headwords or [])
        self.senses = list(senses or [])
        self.notes = list(notes or [])
        self.supplements = list(supplements or [])

    def all_quotes(self):
        return [c for sense in self.senses for c in sense.citations]

    @property
    def citations(self): return self.all_quotes()

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data.get("id"),
            pos=data.get("pos"),
            headwords=[Headword.from_dict(h) for h in data.get("headwords") or []],
            senses=[Sense.from_dict(s) for s in data.get("senses") or []],
            notes=[Note.from_dict(n) for n in data.get("notes") or []],
            supplements=[Supplement.from_dict(s) for s in data.get("supplements") or []],
        )

    @classmethod
    def from_json(cls, payload):
        try: data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise ParseError("Invalid entry json: {}".format(e)) from e
        if not isinstance(data, dict):
            raise ParseError("Entry json is not an object")
        try: return cls.from_dict(data)
        except (AttributeError, TypeError) as e:
            raise ParseError("Entry json has an unexpected shape: {}".format(e)) from e
