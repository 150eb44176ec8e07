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
###############################################################################

""" command-line argument templates """

import sys
import argparse

from .log_report import Log


def value_parser(value_str):
    """ parse a numerical value, C99 hexadecimal notation
        (e.g. 0x1.8p+1) is accepted """
    value_str = value_str.strip()
    try:
        if value_str.lstrip("+-").lower().startswith("0x"):
            return float.fromhex(value_str)
        return float(value_str)
    except ValueError:
        Log.report(
            Log.Error, "unable to parse numerical value {!r}", value_str,
            error=argparse.ArgumentTypeError("invalid value {!r}".format(value_str))
        )


def value_test_parser(test_str):
    """ parse ':'-separated list of ','-separated input tuples """
    return [tuple(value_parser(v) for v in t.split(",")) for t in test_str.split(":")]


class ExitOnErrorAction(argparse.Action):
    """ Custom action for command-line command --exit-on-error """
    def __init__(self, option_strings, dest, nargs=None, **kwargs):
        super(ExitOnErrorAction, self).__init__(
            option_strings, dest, nargs=nargs, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        Log.exit_on_error = True


class VerboseAction(argparse.Action):
    def __init__(self, option_strings, dest, nargs=None, **kwargs):
        if nargs is not None:
            raise ValueError("nargs not allowed")
        super(VerboseAction, self).__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        for level_str in values.split(","):
            if ":" in level_str:
                level, sub_level = level_str.split(":")
            else:
                level, sub_level = level_str, None
            Log.enable_level(level, sub_level=sub_level)
        setattr(namespace, self.dest, values)


class DefaultArgTemplate:
    function_name = "pow"
    # number of random test inputs
    test_num = 1000
    seed = None
    # maximal error (in ulps), None selects the function default bound
    max_ulp = None
    # list of user defined input tuples
    value_test = []
    # run standard test cases only
    std_only = False
    verbose_enable = False
    dump_stdout = True

    def __init__(self, **kw):
        for key in kw:
            setattr(self, key, kw[key])


class ML_ArgTemplate(object):
    """ argparse based template for microlibm command-line tools """
    def __init__(self, default_arg=DefaultArgTemplate, function_list=None):
        self.parser = argparse.ArgumentParser(
            " microlibm {} accuracy check".format(default_arg.function_name))
        self.parser.add_argument(
            "--function", dest="function_name",
            default=default_arg.function_name,
            choices=function_list,
            help="select the function to be checked")
        self.parser.add_argument(
            "--test-num", dest="test_num", action="store",
            type=int, default=default_arg.test_num,
            help="number of random test inputs")
        self.parser.add_argument(
            "--seed", dest="seed", action="store",
            type=int, default=default_arg.seed,
            help="random generator seed")
        self.parser.add_argument(
            "--max-ulp", dest="max_ulp", action="store",
            type=float, default=default_arg.max_ulp,
            help="maximal error (in ulps) accepted")
        self.parser.add_argument(
            "--value-test", dest="value_test", action="store",
            type=value_test_parser,
            default=default_arg.value_test,
            help="give input value for tests as ':'-separated list of tuples")
        self.parser.add_argument(
            "--std-only", dest="std_only", action="store_const",
            const=True, default=default_arg.std_only,
            help="only run the standard test cases")
        self.parser.add_argument(
            "--verbose", dest="verbose_enable", action=VerboseAction,
            default=default_arg.verbose_enable,
            help="enable log levels (comma separated list of level[:sub_level])")
        self.parser.add_argument(
            "--exit-on-error", dest="exit_on_error",
            action=ExitOnErrorAction, const=True,
            default=False,
            nargs=0,
            help="convert Fatal error to sys exit rather than exception")
        self.parser.add_argument(
            "--no-stdout", dest="dump_stdout",
            action="store_const", default=default_arg.dump_stdout, const=False,
            help="disable log display on stdout")

    # Extract argument from the command-line (sys.argv by default)
    def arg_extraction(self, argv=None):
        self.args = self.parser.parse_args(sys.argv[1:] if argv is None else argv)
        return self.args
