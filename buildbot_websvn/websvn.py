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

"""
Links into U{WebSVN<https://websvnphp.github.io/>} 2.x for the entries of a
Subversion change log.

WebSVN publishes every repository below a C{/wsvn/} path, so a browser is
configured with a single URL of the form
C{http://server/optional-path/wsvn/Name-of-SVN-repo}.
"""

from __future__ import annotations

import re
from typing import Any
from typing import Mapping

from twisted.python import log
from zope.interface import implementer

from buildbot_websvn import util
from buildbot_websvn.changes import LogEntry
from buildbot_websvn.changes import Path
from buildbot_websvn.config.errors import InvalidConfigurationError
from buildbot_websvn.interfaces import IRepositoryBrowser
from buildbot_websvn.interfaces import MalformedURLError
from buildbot_websvn.util.urls import checkAbsoluteUrl
from buildbot_websvn.util.urls import resolveUrl
from buildbot_websvn.util.urls import toRevision
from buildbot_websvn.util.urls import urlEncode

WEBSVN_URL_RE = re.compile(r'(.*/wsvn)(/[^/]*)?/?')

URL_FORM = "http://server/optional-path/wsvn/Name-of-SVN-repo"


def _isRepositorySegment(segment: str | None) -> bool:
    # "/." and "/.." would resolve links outside the wsvn base
    return segment not in (None, '', '/', '/.', '/..')


class FormValidation:
    """Outcome of checking a value typed into a settings form."""

    OK = 'OK'
    ERROR = 'ERROR'

    def __init__(self, kind: str, message: str | None = None) -> None:
        self.kind = kind
        self.message = message

    @classmethod
    def ok(cls) -> FormValidation:
        return cls(cls.OK)

    @classmethod
    def error(cls, message: str) -> FormValidation:
        return cls(cls.ERROR, message)

    def isOk(self) -> bool:
        return self.kind == self.OK

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormValidation):
            return NotImplemented
        return (self.kind, self.message) == (other.kind, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        if self.message is None:
            return f"<FormValidation {self.kind}>"
        return f"<FormValidation {self.kind}: {self.message}>"


@implementer(IRepositoryBrowser)
class WebSVN2RepositoryBrowser(util.ComparableMixin):

    displayName = "WebSVN2"
    formPrefix = "webSVN2."

    compare_attrs: tuple[str, ...] = ('url',)

    CHANGE_SET_FORMAT = "%s?op=revision&rev=%d"
    DIFF_FORMAT = "%s/%s?op=diff&rev=%d"
    FILE_FORMAT = "%s/%s?rev=%d"

    def __init__(self, url: str) -> None:
        m = WEBSVN_URL_RE.fullmatch(url) if isinstance(url, str) else None
        if not m or not _isRepositorySegment(m.group(2)):
            raise InvalidConfigurationError([
                f"Please set a WebSVN2 url in the form {URL_FORM}, got {url!r}"])
        try:
            checkAbsoluteUrl(m.group(1))
        except MalformedURLError as e:
            raise InvalidConfigurationError([
                f"Please set a WebSVN2 url in the form {URL_FORM}: {e}"]) from e

        self._url = url
        self._baseUrl = m.group(1) + '/'
        self._repname = m.group(2)[len('/'):]
        log.msg(f"WebSVN2: linking repository {self._repname!r} below {self._baseUrl}")

    @property
    def url(self) -> str:
        return self._url

    @property
    def baseUrl(self) -> str:
        return self._baseUrl

    @property
    def repname(self) -> str:
        return self._repname

    def getRepname(self) -> str:
        return self._repname

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._url!r}>"

    def getConfigDict(self) -> dict[str, Any]:
        rv = super().getConfigDict()
        rv['name'] = self.displayName
        return rv

    # link generation

    def diffLink(self, path: str, revision: int | str) -> str:
        return resolveUrl(self._baseUrl, self.DIFF_FORMAT % (
            self._repname, urlEncode(path), toRevision(revision)))

    def fileLink(self, path: str, revision: int | str) -> str:
        # TODO: link directories to the WebSVN listing view instead
        return resolveUrl(self._baseUrl, self.FILE_FORMAT % (
            self._repname, urlEncode(path), toRevision(revision)))

    def changeSetLink(self, revision: int | str) -> str:
        return resolveUrl(self._baseUrl, self.CHANGE_SET_FORMAT % (
            self._repname, toRevision(revision)))

    def getDiffLink(self, path: Path) -> str:
        return self.diffLink(path.getValue(), path.getLogEntry().getRevision())

    def getFileLink(self, path: Path) -> str:
        return self.fileLink(path.getValue(), path.getLogEntry().getRevision())

    def getChangeSetLink(self, changeSet: LogEntry) -> str:
        return self.changeSetLink(changeSet.getRevision())

    # configuration entry points

    @classmethod
    def checkReposUrl(cls, value: str | None) -> FormValidation:
        """
        Check a candidate URL typed into a settings form. Never raises; the
        returned L{FormValidation} tells what, if anything, is wrong.
        """
        if not value or not isinstance(value, str):
            return FormValidation.error(
                f"Please set a WebSVN2 url in the form {URL_FORM}.")

        m = WEBSVN_URL_RE.fullmatch(value)
        if not m:
            return FormValidation.error(
                "Please set a WebSVN2 url containing wsvn path as well as SVN "
                f"repository in the form {URL_FORM}.")

        try:
            checkAbsoluteUrl(m.group(1))
        except MalformedURLError as e:
            return FormValidation.error(f"The entered url is not accepted: {e}")

        if not _isRepositorySegment(m.group(2)):
            return FormValidation.error(
                "Please set a WebSVN2 url containing SVN repository in the "
                f"form {URL_FORM}.")

        return FormValidation.ok()

    @classmethod
    def fromFormData(cls, formData: Mapping[str, Any],
                     prefix: str | None = None) -> WebSVN2RepositoryBrowser:
        """
        Build a browser from submitted or persisted form fields, where the
        URL is stored as C{<prefix>url}.
        """
        if prefix is None:
            prefix = cls.formPrefix
        key = prefix + 'url'
        value = formData.get(key)
        if not isinstance(value, str):
            raise InvalidConfigurationError([
                f"missing form field {key!r}; expected a WebSVN2 url in the form {URL_FORM}"])
        log.msg(f"WebSVN2: restoring browser from form field {key!r}")
        return cls(value.strip())
