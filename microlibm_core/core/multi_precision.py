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

## @package multi_precision
#  double-word (hi, lo) arithmetic helpers: a value is represented as the
#  unevaluated sum hi + lo where hi carries a truncated significand

import collections

from ..utility.log_report import Log
from ..utility.decorator import fp_silent


## unevaluated sum hi + lo with |lo| far below ulp(hi)
DoubleWord = collections.namedtuple("DoubleWord", ["hi", "lo"])


def get_drop_mask(precision, drop_bits=None):
    """ encoding mask clearing the @p drop_bits least significant bits
        (precision's default split size when None) """
    drop_bits = precision.get_split_size() if drop_bits is None else drop_bits
    if drop_bits < 0 or drop_bits > precision.get_field_size():
        Log.report(
            Log.Error, "can not drop {} bits of a {} significand", drop_bits, precision,
            error=ValueError("invalid drop bit count {}".format(drop_bits))
        )
    return (2**precision.get_bit_size() - 1) ^ (2**drop_bits - 1)


def truncate_low_bits(value, precision, drop_bits=None):
    """ clear the @p drop_bits least significant bits of @p value's
        encoding (truncation toward zero) """
    coding = precision.get_integer_coding(value)
    return precision.get_value_from_integer_coding(coding & get_drop_mask(precision, drop_bits))


@fp_silent
def split_high(value, precision, drop_bits=None):
    """ split @p value into DoubleWord(hi, lo) where hi is @p value
        truncated to fewer significant bits and lo = value - hi (exact) """
    value = precision.cast(value)
    hi = truncate_low_bits(value, precision, drop_bits)
    return DoubleWord(hi, value - hi)


@fp_silent
def split_sum(u, v, precision, drop_bits=None):
    """ compensated sum of u and v (|u| >= |v| expected):
        hi = truncate(u + v), lo = v - (hi - u) """
    hi = truncate_low_bits(u + v, precision, drop_bits)
    return DoubleWord(hi, v - (hi - u))
