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
HTML preview of search hits. Each section is rendered on its own: if a
section fails, the error is logged and the rest of the entry is still shown.
"""

import re
import logging

from pyquery import PyQuery as pq

from dromedary.errors import DromedaryError

logger = logging.getLogger(__name__)

BASE_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <style>
  .headword em, .other-spellings em {
    background-color: #ffef9f;
    font-style: normal;
  }
  </style>
  <title>TITLE</title>
</head>
<body>BODY</body>
</html>
"""

XML_DECL = re.compile(r"^\s*<\?xml[^>]*\?>\s*")

def section(render, *args):
    try: return render(*args)
    except DromedaryError as e:
        logger.error("Skipping section %s: %s", render.__name__, e)
        return None

def element(tag, html=None, cls=None):
    d = pq("<{}/>".format(tag))
    if cls is not None: d.attr("class", cls)
    if html: d.html(XML_DECL.sub("", html))
    return d

def render_entry(presenter):
    entry = element("div", cls="entry")
    if presenter.entry.id is not None: entry.attr("id", str(presenter.entry.id))

    heading = presenter.highlighted_official_headword() or presenter.heading()
    entry.append(element("h2", heading, "headword"))
    others = presenter.highlighted_other_spellings()
    if len(others) > 0:
        entry.append(element("p", ", ".join(others), "other-spellings"))
    pos = presenter.part_of_speech_abbrev()
    if pos: entry.append(element("span", pos, "pos"))

    for cls, render in (("form", presenter.form_html), ("etym", presenter.etym_html)):
        html = section(render)
        if html: entry.append(element("div", html, cls))

    senses = element("ol", cls="senses")
    for sense in presenter.senses():
        li = element("li", section(presenter.def_html, sense), "sense")
        cits = [section(presenter.cit_html, c) for c in sense.citations]
        cits = "".join("<li>{}</li>".format(c) for c in cits if c)
        if cits: li.append(element("ul", cits, "citations"))
        senses.append(li)
    entry.append(senses)

    for cls, render, items in (
        ("note", presenter.note_html, presenter.entry.notes),
        ("supplement", presenter.supplement_html, presenter.entry.supplements),
    ):
        for item in items:
            html = section(render, item)
            if html: entry.append(element("div", html, cls))

    entry.append(element("p", "{} quotations".format(presenter.quote_count()), "quote-count"))
    return entry.outer_html()

def render_page(entries, title="Search results"):
    return BASE_HTML.replace("TITLE", title).replace("BODY", "\n".join(entries))
