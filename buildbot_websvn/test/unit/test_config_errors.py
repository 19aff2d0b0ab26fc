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


from twisted.trial import unittest

from buildbot_websvn.config.errors import ConfigErrors
from buildbot_websvn.config.errors import InvalidConfigurationError
from buildbot_websvn.config.errors import capture_config_errors
from buildbot_websvn.config.errors import error


class ConfigErrorsTest(unittest.TestCase):
    def test_constr(self):
        ex = ConfigErrors(["a", "b"])
        self.assertEqual(ex.errors, ["a", "b"])

    def test_constr_copies_list(self):
        errors = ["a"]
        ex = ConfigErrors(errors)
        errors.append("b")
        self.assertEqual(ex.errors, ["a"])

    def test_addError(self):
        ex = ConfigErrors(["a"])
        ex.addError("c")
        self.assertEqual(ex.errors, ["a", "c"])

    def test_merge(self):
        ex = ConfigErrors(["a"])
        ex.merge(InvalidConfigurationError(["b"]))
        self.assertEqual(ex.errors, ["a", "b"])

    def test_nonempty(self):
        empty = ConfigErrors()
        full = ConfigErrors(["a"])
        self.assertTrue(not empty)
        self.assertFalse(not full)

    def test_str(self):
        self.assertEqual(str(ConfigErrors()), "")
        self.assertEqual(str(ConfigErrors(["a"])), "a")
        self.assertEqual(str(ConfigErrors(["a", "b"])), "a\nb")

    def test_invalid_configuration_is_config_error(self):
        self.assertTrue(issubclass(InvalidConfigurationError, ConfigErrors))


class ErrorFunctionTest(unittest.TestCase):

    def test_error_raises(self):
        with self.assertRaises(ConfigErrors) as e:
            error("message")
        self.assertEqual(e.exception.errors, ["message"])

    def test_error_no_raise(self):
        with capture_config_errors() as errors:
            error("message")
        self.assertEqual(errors.errors, ["message"])

    def test_error_always_raise(self):
        with capture_config_errors() as errors:
            error("first")
            error("second", always_raise=True)
            error("never reached")
        self.assertEqual(errors.errors, ["first", "second"])

    def test_capture_raise_on_error(self):
        with self.assertRaises(ConfigErrors) as e:
            with capture_config_errors(raise_on_error=True):
                error("message")
        self.assertEqual(e.exception.errors, ["message"])

    def test_capture_collects_raised_errors(self):
        with capture_config_errors() as errors:
            raise InvalidConfigurationError(["bad url"])
        self.assertEqual(errors.errors, ["bad url"])

    def test_capture_restores_previous(self):
        with capture_config_errors() as outer:
            with capture_config_errors() as inner:
                error("inner")
            error("outer")
        self.assertEqual(inner.errors, ["inner"])
        self.assertEqual(outer.errors, ["outer"])
