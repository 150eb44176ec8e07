# -*- coding: utf-8 -*-

###############################################################################
# This file is part of microlibm
###############################################################################
# MIT License
#
# Copyright (c) 2018 Kalray
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
###############################################################################
# created:          Oct 19th, 2026
#
# description:      unit-tests for log reporting
###############################################################################
import io
import unittest

from microlibm_core.utility.log_report import Log


class UT_LogReport(unittest.TestCase):
    def setUp(self):
        self.saved_state = (Log.enabled_levels, Log.log_stream, Log.dump_stdout, Log.exit_on_error)
        Log.enabled_levels = list(Log.enabled_levels)
        Log.dump_stdout = False
        Log.exit_on_error = False
        self.stream = io.StringIO()
        Log.set_log_stream(self.stream)

    def tearDown(self):
        Log.enabled_levels, Log.log_stream, Log.dump_stdout, Log.exit_on_error = self.saved_state

    def test_error_raises(self):
        """ Error level reports raise the attached exception """
        with self.assertRaises(ValueError):
            Log.report(Log.Error, "invalid value {}", 3, error=ValueError("invalid value"))
        with self.assertRaises(Exception):
            Log.report(Log.Error, "generic error")
        self.assertTrue("invalid value 3" in self.stream.getvalue())

    def test_exit_on_error(self):
        Log.exit_on_error = True
        with self.assertRaises(SystemExit):
            Log.report(Log.Error, "fatal error", error=ValueError("fatal"))

    def test_level_filtering(self):
        """ messages of disabled levels are discarded """
        Log.report(Log.Info, "hidden message")
        self.assertEqual(self.stream.getvalue(), "")
        Log.enable_level(Log.Info)
        self.assertTrue(Log.is_level_enabled(Log.Info))
        Log.report(Log.Info, "value {} ulp(s)", 1.5)
        self.assertEqual(self.stream.getvalue(), "value 1.5 ulp(s)\n")
        Log.disable_level(Log.Info)
        self.assertFalse(Log.is_level_enabled(Log.Info))

    def test_sub_level(self):
        Log.enable_level("Debug", sub_level="pow")
        self.assertTrue(Log.is_level_enabled(Log.LogLevel("Debug", "pow")))
        self.assertFalse(Log.is_level_enabled(Log.Debug))
        Log.enable_level("Verbose")
        self.assertTrue(Log.is_level_enabled(Log.LogLevel("Verbose", "logf")))
        self.assertEqual(repr(Log.LogLevel("Debug", "pow")), "Debug:pow")


if __name__ == '__main__':
    unittest.main()
