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
import json
import logging
import argparse

from dromedary.bibmap import BIBIDS, load_bibmap_file
from dromedary.errors import ConfigurationError, DromedaryError
from dromedary.highlight import SolrDocument
from dromedary.log import setup_logging
from dromedary.presenter import IndexPresenter
from dromedary.preview import render_entry, render_page
from dromedary.xslt import STYLESHEETS

logger = logging.getLogger(__name__)

def load_records(path):
    """ Documents from a Solr select response, or from a single document """
    with open(path, "r", encoding="utf-8") as f: data = json.load(f)
    if not isinstance(data, dict): raise ValueError("expected a JSON object")
    if "response" in data: return SolrDocument.from_response(data)
    fields = {k: v for k, v in data.items() if k != "highlighting"}
    return [SolrDocument(fields, data.get("highlighting"))]

def cli_main(argv=None):
    parser = argparse.ArgumentParser(description='Render dictionary entries of search results as HTML.')
    parser.add_argument('records', metavar='FILE', type=str,
                    help='Solr response or single Solr document (JSON).')
    parser.add_argument('--xslt-dir', action="store", default=None, type=str,
                    help=("Directory holding the section stylesheets."))
    parser.add_argument('--bibmap', action="store", default=None, type=str,
                    help=("Reference id to bib id table (JSON or TSV)."))
    parser.add_argument('--search-field', action="store", default=None, type=str,
                    help=("The field that was searched on."))
    parser.add_argument('--strict-bibids', action="store_true", default=False,
                    help=("Fail citations whose bib id is unknown."))
    parser.add_argument('--page', action="store_true", default=False,
                    help=("Write a complete HTML page."))
    parser.add_argument('-v', '--verbose', action="store_true", default=False,
                    help=("Log debug messages."))
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)
    if args.xslt_dir is not None: STYLESHEETS.directory = args.xslt_dir
    try:
        if args.bibmap is not None: BIBIDS.set_table(load_bibmap_file(args.bibmap))
        STYLESHEETS.preload()
    except ConfigurationError as e:
        sys.exit("Configuration error: {}".format(e))

    try: docs = load_records(args.records)
    except (OSError, ValueError) as e:
        sys.exit("Can't read records from '{}': {}".format(args.records, e))

    entries = []
    for doc in docs:
        try:
            presenter = IndexPresenter(doc, args.search_field,
                                       stylesheets=STYLESHEETS, bibids=BIBIDS,
                                       strict_bibids=args.strict_bibids)
        except (DromedaryError, KeyError) as e:
            logger.error("Skipping document %s: %s", doc.id, e)
            continue
        entries.append(render_entry(presenter))
    logger.info("Rendered %d of %d documents", len(entries), len(docs))

    out = render_page(entries) if args.page else "\n".join(entries)
    sys.stdout.write(out + "\n")
    sys.stdout.flush()
    return 0
