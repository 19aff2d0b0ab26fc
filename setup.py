#!/usr/bin/env python
#
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
Standard setup script.
"""

import os

from setuptools import find_packages
from setuptools import setup

from buildbot_websvn import version


def define_plugin_entry(name, module_name):
    """
    helper to produce lines suitable for setup.py's entry_points
    """
    if isinstance(name, tuple):
        entry, name = name
    else:
        entry = name
    return '%s = %s:%s' % (entry, module_name, name)


def define_plugin_entries(groups):
    """
    helper to all groups for plugins
    """
    result = dict()

    for group, modules in groups:
        tempo = []
        for module_name, names in modules:
            tempo.extend([define_plugin_entry(name, module_name)
                          for name in names])
        result[group] = tempo

    return result


with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.rst')) as long_d_f:
    long_description = long_d_f.read()

setup_args = {
    'name': "buildbot-websvn",
    'version': version,
    'description': "WebSVN 2.x links for Subversion changes in Buildbot",
    'long_description': long_description,
    'author': "Buildbot Team Members",
    'url': "http://buildbot.net/",
    'license': "GNU GPL",
    'classifiers': [
        'Development Status :: 5 - Production/Stable',
        'Environment :: No Input/Output (Daemon)',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v2 (GPLv2)',
        'Topic :: Software Development :: Build Tools',
        'Topic :: Software Development :: Version Control',
        'Programming Language :: Python :: 3',
    ],

    'packages': find_packages(),
    'package_data': {
        'buildbot_websvn': ['VERSION'],
    },
    'python_requires': '>=3.8',
    'entry_points': define_plugin_entries([
        ('buildbot.util', [
            ('buildbot_websvn.revlinks', ['WebSVNRevlink', 'RevlinkMultiplexer']),
            ('buildbot_websvn.websvn', ['WebSVN2RepositoryBrowser']),
        ]),
    ]),
}

# dependencies
setup_args['install_requires'] = [
    'setuptools >= 8.0',
    'Twisted >= 17.9.0',
    'zope.interface >= 4.1.1',
]

setup_args['extras_require'] = {
    'test': [
        'pytest',
        'isort',
        'flake8',
    ],
}

if __name__ == '__main__':
    setup(**setup_args)
