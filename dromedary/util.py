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

import copy
import logging

from lxml import etree

from dromedary.errors import ParseError, QueryError, TransformError

logger = logging.getLogger(__name__)

def xml_parser():
    # one parser per call, lxml parsers must not be shared between threads
    return etree.XMLParser(resolve_entities=False, no_network=True)

def first_match(doc, xpath):
    """ First node selected by xpath in document order, or None """
    try: result = doc.xpath(xpath)
    except etree.XPathError as e:
        raise QueryError("Invalid xpath {!r}: {}".format(xpath, e)) from e
    if not isinstance(result, list):
        raise QueryError("xpath {!r} does not select nodes".format(xpath))
    return result[0] if len(result) > 0 else None

def doc_from_node(node):
    """
    Create a free-standing document containing nothing but a copy of node.

    XSLT needs a full document as input, not an arbitrary element. The
    source tree is never touched: documents are duplicated and elements
    are deep-copied into a new document.
    """
    if node is None: return None
    if isinstance(node, etree._ElementTree):
        return copy.deepcopy(node)
    root = copy.deepcopy(node)
    root.tail = None
    return etree.ElementTree(root)

isolate = doc_from_node

def doc_from_xml(xml):
    """ Parse an XML snippet into a document, None/blank gives None """
    if xml is None: return None
    if isinstance(xml, str):
        if xml.strip() == "": return None
        xml = xml.encode("utf-8")
    elif xml.strip() == b"": return None
    try: root = etree.fromstring(xml, parser=xml_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError("Malformed XML fragment: {}".format(e)) from e
    return root.getroottree()

def doc_from_xpath(doc, xpath):
    return doc_from_node(first_match(doc, xpath))

def apply_xslt(doc, xslt, params=None):
    """
    Apply a compiled stylesheet to doc and return the serialized result.

    params are handed to the stylesheet as string parameters, so a value
    like 123 arrives as the string '123'. None values become ''.
    Returns None if doc is None.
    """
    if doc is None: return None
    xsl_params = {}
    for key, value in (params or {}).items():
        if value is None: value = ""
        xsl_params[key] = etree.XSLT.strparam(str(value))
    try: result = xslt(doc, **xsl_params)
    except etree.XSLTError as e:
        raise TransformError("Stylesheet failed: {}".format(e)) from e
    for entry in xslt.error_log:
        logger.debug("xslt: %s", entry.message)
    return str(result)
