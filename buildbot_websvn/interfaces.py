# This file is part of Buildbot.  Buildbot is free software: you can
# redistribute it and/or modify it under the terms of the GNU General Public
# License as published by the Free Software Foundation, version 2.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
# details.
#
# You should have received a copy of the GNU General Public License along with
# this program; if not, write to the Free Software Foundation, Inc., 51
# Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.
#
# Copyright Buildbot Team Members

"""Interface documentation.

Define the interfaces that are implemented by the repository browsers.
"""

# disable pylint warnings triggered by interface definitions
# pylint: disable=no-self-argument
# pylint: disable=no-method-argument
# pylint: disable=inherit-non-class

from zope.interface import Attribute
from zope.interface import Interface


class MalformedURLError(ValueError):
    """A generated link could not be parsed as an absolute URL."""


class IConfigured(Interface):

    def getConfigDict():
        pass


class IRepositoryBrowser(Interface):

    """
    Turns the entries of a Subversion change log into links to a web
    viewer. Every method returns an absolute URL as a string, or raises
    L{MalformedURLError} if no valid URL can be produced.
    """

    displayName = Attribute('displayName',
                            "human-readable name of the web viewer")

    def getRepname():
        """Return the name of the repository the links point into."""

    def getDiffLink(path):
        """Return a link to the diff of C{path} (a
        L{buildbot_websvn.changes.Path}) against its previous revision."""

    def getFileLink(path):
        """Return a link showing C{path} as of its log entry's revision."""

    def getChangeSetLink(changeSet):
        """Return a link describing a whole
        L{buildbot_websvn.changes.LogEntry}."""
