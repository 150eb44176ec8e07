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

## @package special_values
#  microlibm floating-point special values and bit-level
#  classification of values (NaN, infinities, zeros, subnormals, integers)

import enum


###############################################################################
#                     FLOATING-POINT SPECIAL VALUES
###############################################################################
class FP_SpecialValue(object):
    """ parent to all floating-point constants """
    name = "undefined"

    def __init__(self, precision):
        self.precision = precision

    def __str__(self):
        return "%s" % (self.name)

    def __repr__(self):
        return "{}({})".format(self.name, self.precision)

    def get_precision(self):
        return self.precision

    def get_integer_coding(self):
        raise NotImplementedError

    def get_value(self):
        """ return the special value as a value of its format """
        return self.precision.get_value_from_integer_coding(self.get_integer_coding())


class FP_PlusInfty(FP_SpecialValue):
    name = "+inf"
    def get_integer_coding(self):
        return self.precision.get_infty_coding()

class FP_MinusInfty(FP_SpecialValue):
    name = "-inf"
    def get_integer_coding(self):
        return self.precision.get_sign_mask() | self.precision.get_infty_coding()


class FP_PlusZero(FP_SpecialValue):
    name = "+0"
    def get_integer_coding(self):
        return 0

class FP_MinusZero(FP_SpecialValue):
    name = "-0"
    def get_integer_coding(self):
        return self.precision.get_sign_mask()


class FP_QNaN(FP_SpecialValue):
    """ Floating-point quiet NaN (field MSB set) """
    name = "qNaN"
    def get_integer_coding(self):
        quiet_bit = 1 << (self.precision.get_field_size() - 1)
        return self.precision.get_infty_coding() | quiet_bit

class FP_SNaN(FP_SpecialValue):
    """ Floating-point signaling NaN (field MSB cleared) """
    name = "sNaN"
    def get_integer_coding(self):
        return self.precision.get_infty_coding() | 1


def FP_PlusOmega(precision):
    """ alias for positive omega value """
    return precision.get_omega()
def FP_MinusOmega(precision):
    """ alias for negative omega value """
    return -precision.get_omega()


###############################################################################
#                     BIT-LEVEL PREDICATES
###############################################################################
# every predicate takes a value of @p precision's format and only looks
# at its encoding

def get_abs_coding(value, precision):
    return precision.get_integer_coding(value) & precision.get_abs_mask()

def is_nan(value, precision):
    """ testing if a value is a NaN (quiet or signaling) """
    return get_abs_coding(value, precision) > precision.get_infty_coding()
def is_qnan(value, precision):
    quiet_bit = 1 << (precision.get_field_size() - 1)
    return is_nan(value, precision) and bool(precision.get_integer_coding(value) & quiet_bit)
def is_snan(value, precision):
    return is_nan(value, precision) and not is_qnan(value, precision)

def is_infty(value, precision):
    return get_abs_coding(value, precision) == precision.get_infty_coding()
def is_plus_infty(value, precision):
    return precision.get_integer_coding(value) == precision.get_infty_coding()
def is_minus_infty(value, precision):
    return is_infty(value, precision) and is_negative(value, precision)

def is_zero(value, precision):
    return get_abs_coding(value, precision) == 0
def is_plus_zero(value, precision):
    return precision.get_integer_coding(value) == 0
def is_minus_zero(value, precision):
    return precision.get_integer_coding(value) == precision.get_sign_mask()

def is_subnormal(value, precision):
    """ non-zero value with a null exponent field """
    abs_coding = get_abs_coding(value, precision)
    return abs_coding != 0 and abs_coding <= precision.get_field_mask()

def is_number(value, precision):
    """ finite value (zeros and subnormals included) """
    return get_abs_coding(value, precision) < precision.get_infty_coding()

def is_negative(value, precision):
    """ sign bit test (true for -0 and negative NaNs) """
    return bool(precision.get_integer_coding(value) & precision.get_sign_mask())


###############################################################################
#                     INTEGER CLASSIFICATION
###############################################################################
class IntegerClass(enum.IntEnum):
    """ integral status of a floating-point value, the numerical values
        are significant: OddInteger and EvenInteger are 2 - parity """
    NotInteger = 0
    OddInteger = 1
    EvenInteger = 2


def classify_integer(coding, precision):
    """ classify the value encoded by @p coding (sign ignored)

        every magnitude of 2**(field_size + 1) or more (infinity included)
        is an even integer, NaN are not expected """
    abs_coding = coding & precision.get_abs_mask()
    field_size = precision.get_field_size()
    exponent = (abs_coding >> field_size) + precision.get_bias()
    if exponent >= field_size + 1:
        return IntegerClass.EvenInteger
    elif exponent >= 0:
        shift = field_size - exponent
        j = abs_coding >> shift
        if (j << shift) == abs_coding:
            return IntegerClass(2 - (j & 1))
        return IntegerClass.NotInteger
    else:
        return IntegerClass.NotInteger


def classify_integer_value(value, precision):
    """ classify_integer on the encoding of @p value """
    return classify_integer(precision.get_integer_coding(value), precision)
