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

from typing import Iterable

from buildbot_websvn import util
from buildbot_websvn.util.urls import toRevision


class LogEntry(util.ComparableMixin):
    """I represent a single revision of a Subversion change log, together
    with the paths that were touched by it."""

    compare_attrs: tuple[str, ...] = ('revision', 'paths')

    def __init__(self, revision: int | str, paths: Iterable[str | Path] = ()) -> None:
        self.revision = toRevision(revision)
        # paths are fixed here; the entry hashes over them
        self.paths = tuple(self._ownPath(p) for p in paths)

    def _ownPath(self, path: str | Path) -> Path:
        if not isinstance(path, Path):
            return Path(path, logEntry=self)
        if path.logEntry is None:
            path.logEntry = self
            return path
        if path.logEntry is self:
            return path
        # a path of another entry must not keep reporting that entry's revision
        return Path(path.value, logEntry=self, action=path.action, kind=path.kind)

    def getRevision(self) -> int:
        return self.revision

    def __repr__(self) -> str:
        return f"<LogEntry r{self.revision} ({len(self.paths)} paths)>"


class Path(util.ComparableMixin):
    """A file or directory changed within a L{LogEntry}.

    C{action} uses the letters of C{svn log}: A(dded), M(odified),
    D(eleted) or R(eplaced).
    """

    compare_attrs: tuple[str, ...] = ('value', 'action', 'kind')

    ACTIONS = ('A', 'M', 'D', 'R')
    KINDS = ('file', 'dir')

    def __init__(self, value: str, logEntry: LogEntry | None = None,
                 action: str = 'M', kind: str = 'file') -> None:
        if action not in self.ACTIONS:
            raise ValueError(f"unknown path action {action!r}")
        if kind not in self.KINDS:
            raise ValueError(f"unknown path kind {kind!r}")
        self.value = value
        self.logEntry = logEntry
        self.action = action
        self.kind = kind

    def getValue(self) -> str:
        return self.value

    def getLogEntry(self) -> LogEntry:
        if self.logEntry is None:
            raise ValueError(f"path {self.value!r} does not belong to a log entry")
        return self.logEntry

    def __repr__(self) -> str:
        return f"<Path {self.action} {self.value}>"
