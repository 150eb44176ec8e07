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

""" command-line accuracy check of the microlibm functions: runs the
    standard test cases and a randomized differential campaign against
    an mpmath reference, reports the maximal error in ulps """

import sys

from microlibm_core.core.ml_function import ValidError
from microlibm_core.utility.log_report import Log
from microlibm_core.utility.ml_template import ML_ArgTemplate, DefaultArgTemplate

from microlibm_functions.function_map import FUNCTION_MAP, function_parser


def check_function(args):
    """ run the accuracy check selected by @p args, return the maximal
        error and the inputs it was reached on """
    function = function_parser(args.function_name)
    if args.std_only:
        failures = function.run_standard_test_cases()
        if failures:
            Log.report(
                Log.Error, "{} standard test case(s) failed for {}",
                len(failures), function.get_name(),
                error=ValidError("standard test cases failed for {}".format(function.get_name()))
            )
        Log.report(Log.Info, "{} standard test cases passed for {}",
                   len(function.standard_test_cases), function.get_name())
        return 0.0, None
    return function.check_accuracy(
        args.test_num, seed=args.seed, max_ulp=args.max_ulp,
        value_test=args.value_test
    )


def main(argv=None):
    arg_template = ML_ArgTemplate(
        default_arg=DefaultArgTemplate(), function_list=sorted(FUNCTION_MAP)
    )
    args = arg_template.arg_extraction(argv)
    Log.set_dump_stdout(args.dump_stdout)
    if not Log.is_level_enabled(Log.Info):
        Log.enable_level(Log.Info)
    try:
        max_error, worst_inputs = check_function(args)
    except ValidError as e:
        print("FAILED: {}".format(e))
        return 1
    print("{}: max error {} ulp(s) on {}".format(args.function_name, max_error, worst_inputs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
