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

from __future__ import annotations

from urllib.parse import quote as urlquote
from urllib.parse import urljoin
from urllib.parse import urlsplit

from buildbot_websvn.interfaces import MalformedURLError


def urlEncode(value: str) -> str:
    # everything outside the unreserved set is escaped, '/' included, so a
    # path always lands in a single URL segment
    return urlquote(value, safe='', encoding='utf-8')


def checkAbsoluteUrl(url: str) -> str:
    """
    Return C{url} unchanged if it is an absolute URL with a scheme and a
    host, otherwise raise L{MalformedURLError} describing what is missing.
    """
    try:
        parts = urlsplit(url)
        # accessing port validates it
        parts.port
    except ValueError as e:
        raise MalformedURLError(f"{e}: {url}") from e
    if not parts.scheme:
        raise MalformedURLError(f"no protocol: {url}")
    if not parts.netloc:
        raise MalformedURLError(f"no host: {url}")
    return url


def resolveUrl(base: str, relative: str) -> str:
    return checkAbsoluteUrl(urljoin(base, relative))


def toRevision(value: int | str) -> int:
    """
    Convert C{value} to a Subversion revision number. Buildbot carries
    revisions around as strings, so decimal strings are accepted too.
    """
    if isinstance(value, str):
        if not value.isdigit():
            raise ValueError(f"invalid revision {value!r}")
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid revision {value!r}")
    if value < 0:
        raise ValueError(f"revision must not be negative, got {value}")
    return value
