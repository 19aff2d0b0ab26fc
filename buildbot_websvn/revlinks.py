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

import re

from twisted.python import log

from buildbot_websvn.config.errors import error
from buildbot_websvn.util.urls import toRevision
from buildbot_websvn.websvn import WebSVN2RepositoryBrowser


class WebSVNRevlink:

    """
    A C{revlink} callable for the Buildbot master configuration, turning a
    Subversion revision into a WebSVN change-set link::

        c['revlink'] = WebSVNRevlink('http://svn.example.org/wsvn/project',
                                     repo_urls=r'svn://svn\\.example\\.org/project')

    When C{repo_urls} is given, only changes whose repository matches one of
    the patterns get a link.
    """

    def __init__(self, url, repo_urls=None):
        if repo_urls is None:
            repo_urls = []
        elif isinstance(repo_urls, str):
            repo_urls = [repo_urls]
        elif (not isinstance(repo_urls, (list, tuple)) or
              not all(isinstance(u, str) for u in repo_urls)):
            error("repo_urls must be a string or a list of strings")
            repo_urls = []
        self.browser = WebSVN2RepositoryBrowser(url)
        self.repo_urls = [re.compile(u) for u in repo_urls]

    def _matchesRepo(self, repo):
        if not self.repo_urls:
            return True
        return any(url.match(repo or '') for url in self.repo_urls)

    def __call__(self, rev, repo):
        if not self._matchesRepo(repo):
            return None
        try:
            revision = toRevision(rev)
        except ValueError:
            log.msg(f"WebSVN2: no link for non-numeric revision {rev!r}")
            return None
        return self.browser.changeSetLink(revision)


class RevlinkMultiplexer:

    def __init__(self, *revlinks):
        self.revlinks = revlinks

    def __call__(self, rev, repo):
        for revlink in self.revlinks:
            url = revlink(rev, repo)
            if url:
                return url
        return None
