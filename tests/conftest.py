"""Shared fixtures: tiny section stylesheets and a sample MED entry."""

import json

import pytest

from dromedary.bibmap import BibIdMapper
from dromedary.highlight import SolrDocument
from dromedary.presenter import IndexPresenter
from dromedary.xslt import StylesheetCache

XSL_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<xsl:stylesheet version="1.0" xmlns:xsl="http://www.w3.org/1999/XSL/Transform">
  <xsl:output method="html" encoding="UTF-8"/>
  BODY
</xsl:stylesheet>
"""

STYLESHEETS = {
    "FormOnly": '<xsl:template match="/"><span class="form">'
                '<xsl:value-of select="normalize-space(/FORM)"/></span></xsl:template>',
    "EtymOnly": '<xsl:template match="/"><span class="etym">'
                '<xsl:value-of select="normalize-space(/ETYM)"/></span></xsl:template>',
    "DefOnly": '<xsl:template match="/"><span class="def" data-root="{name(/*)}">'
               '<xsl:value-of select="normalize-space(/*)"/></span></xsl:template>',
    "CitOnly": '<xsl:param name="bibid"/>'
               '<xsl:template match="/"><span class="cit">[<xsl:value-of select="$bibid"/>] '
               '<xsl:value-of select="normalize-space(/*)"/></span></xsl:template>',
    "NoteOnly": '<xsl:template match="/"><span class="note">'
                '<xsl:value-of select="normalize-space(/*)"/></span></xsl:template>',
    "SupplementOnly": '<xsl:template match="/"><span class="supplement">'
                      '<xsl:value-of select="normalize-space(/*)"/></span></xsl:template>',
}

ENTRY_XML = (
    '<ENTRYFREE ID="MED52345">'
    '<FORM><ORTH>worde</ORTH>, <ORTH>word</ORTH> <POS>n.</POS></FORM>'
    '<ETYM>OE word</ETYM>'
    '<SENSE><DEF>see ~ above</DEF></SENSE>'
    '</ENTRYFREE>'
)

ENTRY = {
    "id": "MED52345",
    "pos": "n.",
    "headwords": [{"orig": "worde", "regs": ["worde", "word"]}],
    "senses": [
        {
            "definition_xml": "see ~ above",
            "citations": [{
                "xml": "<CIT><Q>the word of god</Q></CIT>",
                "bib": {"stencil": {"rid": "wb12", "title": "WBible(1)"}},
            }],
        },
        {
            "definition_xml": "a <i>fair</i> speech",
            "citations": [
                {"xml": "<CIT><Q>faire wordes</Q></CIT>",
                 "bib": {"stencil": {"rid": "zz99"}}},
                {"xml": "<CIT><Q>wordes wise</Q></CIT>",
                 "bib": {"stencil": {"rid": "WB12"}}},
            ],
        },
    ],
    "notes": [{"xml": "<NOTE>Cp. wordes.</NOTE>"}],
    "supplements": [{"xml": "<SUPPLEMENT><P>added 2007</P></SUPPLEMENT>"}],
}


def write_stylesheet(directory, name, body):
    path = directory / (name + ".xsl")
    path.write_text(XSL_TEMPLATE.replace("BODY", body), encoding="utf-8")
    return path


@pytest.fixture
def xslt_dir(tmp_path):
    """Directory with all six section stylesheets."""
    d = tmp_path / "xslt"
    d.mkdir()
    for name, body in STYLESHEETS.items():
        write_stylesheet(d, name, body)
    return d


@pytest.fixture
def stylesheets(xslt_dir):
    return StylesheetCache(str(xslt_dir))


@pytest.fixture
def bibids():
    mapper = BibIdMapper()
    mapper.set_table({"WB12": "123"})
    return mapper


@pytest.fixture
def make_record():
    """Build a Solr document for the sample entry, with optional overrides."""
    def _make(entry=None, xml=ENTRY_XML, highlighting=None, **fields):
        doc = {
            "id": "MED52345",
            "json": json.dumps(entry if entry is not None else ENTRY),
            "official_headword": ["worde"],
            "headword": ["worde", "word"],
        }
        if xml is not None:
            doc["xml"] = xml
        doc.update(fields)
        return SolrDocument(doc, highlighting)
    return _make


@pytest.fixture
def record(make_record):
    return make_record()


@pytest.fixture
def presenter(record, stylesheets, bibids):
    return IndexPresenter(record, "hnf", stylesheets=stylesheets, bibids=bibids)
