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

import os


def getVersion(init_file):
    """
    Return BUILDBOT_WEBSVN_VERSION environment variable, content of VERSION
    file, or '0.0.0' meaning we could not find the version
    """

    try:
        return os.environ['BUILDBOT_WEBSVN_VERSION']
    except KeyError:
        pass

    try:
        cwd = os.path.dirname(os.path.abspath(init_file))
        fn = os.path.join(cwd, 'VERSION')
        with open(fn, encoding='utf-8') as f:
            return f.read().strip()
    except OSError:
        pass

    return "0.0.0"


version = getVersion(__file__)

__version__ = version
