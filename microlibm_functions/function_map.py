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

import microlibm_functions.ml_logf
import microlibm_functions.ml_pow

from microlibm_core.utility.log_report import Log


# dict of (str) -> function object
# the key is the function name, the value the function instance, which
# exposes its output precision and its mpmath emulation (numeric_emulate)
FUNCTION_MAP = {
    "logf": microlibm_functions.ml_logf.logf,
    "pow": microlibm_functions.ml_pow.pow,
    "powf": microlibm_functions.ml_pow.powf,
}


def function_parser(function_name):
    """ string -> function object conversion """
    if not function_name in FUNCTION_MAP:
        Log.report(
            Log.Error, "unknown function {} (supported functions are: {})",
            function_name, ", ".join(sorted(FUNCTION_MAP)),
            error=ValueError("unknown function {}".format(function_name))
        )
    return FUNCTION_MAP[function_name]
