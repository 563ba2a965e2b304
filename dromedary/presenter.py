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

import logging
from xml.sax.saxutils import escape

from dromedary import config, highlight
from dromedary.bibmap import BIBIDS
from dromedary.entry import Entry
from dromedary.errors import BibLookupMiss
from dromedary.util import apply_xslt, doc_from_xml, doc_from_xpath
from dromedary.xslt import STYLESHEETS

logger = logging.getLogger(__name__)

# definitions are often bare text with inline markup
DEF_WRAPPER = "DEFWRAP"
HEADWORD_PLACEHOLDER = "~"

class RecordPresenter(object):
    """ Plain rendering of a search hit straight from its stored fields """

    def __init__(self, document):
        self.document = document

    def field_value(self, name, separator=", "):
        if not self.document.has_field(name): return ""
        return separator.join(str(v) for v in highlight.as_list(self.document.fetch(name)))

    def heading(self):
        values = highlight.as_list(self.document.get(highlight.OFFICIAL_HEADWORD))
        if len(values) > 0: return str(values[0])
        return str(self.document.get("id", ""))

class IndexPresenter(object):
    """
    Presents one search hit: hydrates the entry from the record's 'json'
    field and renders its sections from the record's 'xml' field through
    the section stylesheets.

    heading() and field_value() are answered by the base presenter, which
    defaults to a RecordPresenter over the same record.
    """
    entry = None
    document = None
    search_field = None
    strict_bibids = False

    def __init__(self, document, search_field=None, base=None,
                 stylesheets=None, bibids=None, strict_bibids=False):
        self.document = document
        self.search_field = search_field
        self.base = base if base is not None else RecordPresenter(document)
        self.stylesheets = stylesheets if stylesheets is not None else STYLESHEETS
        self.bibids = bibids if bibids is not None else BIBIDS
        self.strict_bibids = strict_bibids
        self.entry = Entry.from_json(document.fetch("json"))
        self.entry_doc = doc_from_xml(document.get("xml"))
        self._senses_ready = False
        logger.debug("Presenting entry %s (search field: %s)",
                     self.entry.id, self.search_field)

    def heading(self): return self.base.heading()
    def field_value(self, name): return self.base.field_value(name)

    ##### Sections #####

    def form_html(self):
        return self.xsl_transform_from_entry("/ENTRYFREE/FORM", "FORM")

    def etym_html(self):
        return self.xsl_transform_from_entry("/ENTRYFREE/ETYM", "ETYM")

    def def_html(self, sense):
        if sense.definition_xml is None or sense.definition_xml.strip() == "": return None
        xml = "<{0}>{1}</{0}>".format(DEF_WRAPPER, sense.definition_xml)
        return self.xsl_transform_from_xml(xml, "DEF")

    def note_html(self, note):
        return self.xsl_transform_from_xml(note.xml, "NOTE")

    def cit_html(self, cit):
        doc = doc_from_xml(cit.xml)
        if doc is None: return None
        params = {"bibid": self.bibid_for(cit)}
        return apply_xslt(doc, self.xslt("CIT"), params)

    cite_html = cit_html
    citation_html = cit_html

    def supplement_html(self, supplement):
        return self.xsl_transform_from_xml(supplement.xml, "SUPPLEMENT")

    def bibid_for(self, cit):
        """
        The bib id for a citation. A missing mapping renders the citation
        with an empty bibid, or raises BibLookupMiss if strict_bibids is set.
        """
        rid = cit.reference_id
        bibid = self.bibids.lookup(rid)
        if bibid is None:
            if self.strict_bibids: raise BibLookupMiss(rid)
            logger.warning("No bib id for reference id %r (entry %s)", rid, self.entry.id)
        return bibid

    ##### Entry data #####

    def part_of_speech_abbrev(self):
        return self.entry.pos

    def regularized_headword(self):
        if len(self.entry.headwords) == 0: return None
        regs = self.entry.headwords[0].regs
        return regs[0] if len(regs) > 0 else None

    def senses(self):
        """
        The entry's senses, with the headword placeholder in every
        definition replaced by the regularized headword. Substitution
        happens once per presenter.
        """
        if not self._senses_ready:
            headw = self.regularized_headword()
            if headw is None:
                logger.debug("Entry %s has no regularized headword", self.entry.id)
            else:
                for sense in self.entry.senses:
                    if sense.definition_xml is None: continue
                    sense.definition_xml = sense.definition_xml.replace(
                        HEADWORD_PLACEHOLDER, escape(headw))
            self._senses_ready = True
        return self.entry.senses

    def quote_count(self):
        return len(self.entry.all_quotes())

    ##### Highlighting #####

    def hl_field(self, k): return highlight.hl_field(self.document, k)

    def highlighted_official_headword(self):
        return highlight.highlighted_official_headword(self.document)

    def highlighted_other_spellings(self):
        return highlight.highlighted_other_spellings(self.document)

    ##### XSLT helpers #####

    def xslt(self, section):
        return self.stylesheets.get(config.STYLESHEET_NAMES[section])

    def xsl_transform_from_xml(self, xml, section, params=None):
        doc = doc_from_xml(xml)
        if doc is None: return None
        return apply_xslt(doc, self.xslt(section), params)

    def xsl_transform_from_entry(self, xpath, section, params=None):
        if self.entry_doc is None: return None
        doc = doc_from_xpath(self.entry_doc, xpath)
        if doc is None: return None
        return apply_xslt(doc, self.xslt(section), params)
