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
# description:      unit-tests for the accuracy check command line
###############################################################################
import contextlib
import io
import unittest

from microlibm_core.utility.log_report import Log

from microlibm_functions import logf, pow, powf
from microlibm_functions.accuracy import main
from microlibm_functions.function_map import FUNCTION_MAP, function_parser


class UT_FunctionMap(unittest.TestCase):
    def test_function_parser(self):
        self.assertTrue(function_parser("logf") is logf)
        self.assertTrue(function_parser("pow") is pow)
        self.assertTrue(function_parser("powf") is powf)
        self.assertEqual(sorted(FUNCTION_MAP), ["logf", "pow", "powf"])
        self.assertRaises(ValueError, function_parser, "exp")


class UT_AccuracyCommandLine(unittest.TestCase):
    def setUp(self):
        self.saved_state = (Log.enabled_levels, Log.dump_stdout, Log.exit_on_error)
        Log.enabled_levels = list(Log.enabled_levels)

    def tearDown(self):
        Log.enabled_levels, Log.dump_stdout, Log.exit_on_error = self.saved_state

    def run_main(self, argv):
        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            status = main(argv)
        return status, output.getvalue()

    def test_std_only(self):
        """ standard test cases of every function """
        for function_name in ["logf", "pow", "powf"]:
            status, output = self.run_main(["--function", function_name, "--std-only", "--no-stdout"])
            self.assertEqual(status, 0)
            self.assertTrue(output.startswith("{}: max error".format(function_name)))

    def test_random_check(self):
        status, output = self.run_main(["--function", "powf", "--test-num", "100", "--seed", "1"])
        self.assertEqual(status, 0)
        self.assertTrue("Info: " in output)

    def test_failed_check(self):
        """ an unreachable error bound is reported as a failure """
        status, output = self.run_main([
            "--function", "pow", "--test-num", "0", "--max-ulp", "-1",
            "--value-test", "1.5,0.3", "--no-stdout"])
        self.assertEqual(status, 1)
        self.assertTrue(output.startswith("FAILED"))


if __name__ == '__main__':
    unittest.main()
