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

""" Exceptions raised while presenting dictionary entries """

class DromedaryError(Exception):
    """ Base class for all dromedary errors """

class ConfigurationError(DromedaryError):
    """ A stylesheet or data file is missing or could not be compiled """

class QueryError(DromedaryError):
    """ An XPath expression is invalid or does not select nodes """

class ParseError(DromedaryError):
    """ An XML fragment is not well-formed """

class TransformError(DromedaryError):
    """ A stylesheet failed while being applied to a document """

class BibLookupMiss(DromedaryError, LookupError):
    """ A citation's reference id has no bibliography id """

    def __init__(self, reference_id):
        super(BibLookupMiss, self).__init__(
            "No bibliography id for reference id {!r}".format(reference_id))
        self.reference_id = reference_id
