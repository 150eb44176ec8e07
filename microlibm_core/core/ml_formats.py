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

## @package ml_formats
#  microlibm floating-point formats: IEEE-754 binary32 and binary64
#  descriptors providing exact bit-level reinterpretation of values

import numpy as np

from ..utility.log_report import Log
from ..utility.common import ML_FormatError, ML_NotImplemented
from ..utility.decorator import fp_silent


## size of the machine words used to split wide formats
#  into high and low halves
WORD_SIZE = 32
WORD_MASK = 2**WORD_SIZE - 1


def to_signed(value, size):
    """ interpret the unsigned integer @p value as a two's complement
        signed integer of @p size bits """
    value &= 2**size - 1
    if value >= 2**(size - 1):
        return value - 2**size
    return value


class ML_Format(object):
    """ parent to every microlibm format """
    def __init__(self, name=None):
        self.name = name

    def get_name(self):
        return self.name

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.name

    def get_bit_size(self):
        """ return the format bit size """
        raise ML_NotImplemented()


## Ancestor class for standard (as defined in IEEE-754) floating-point formats
class ML_Std_FP_Format(ML_Format):
    """ standard floating-point format base class

        A value of this format is a numpy scalar of type numpy_type,
        its encoding is exposed as a non-negative python integer
        (see get_integer_coding) """

    def __init__(self, bit_size, exponent_size, field_size, name,
                 numpy_type, integer_type, split_size):
        ML_Format.__init__(self, name)
        self.bit_size = bit_size
        self.exponent_size = exponent_size
        self.field_size = field_size
        self.numpy_type = numpy_type
        self.integer_type = integer_type
        ## default number of low bits cleared when splitting a value
        #  into high and low parts
        self.split_size = split_size

    def get_bit_size(self):
        return self.bit_size

    def get_exponent_size(self):
        return self.exponent_size

    ## return the size of the mantissa bitfield (excluding implicit bit(s))
    def get_field_size(self):
        return self.field_size

    ## Return the complete mantissa size (including implicit bit(s))
    def get_mantissa_size(self):
        return self.field_size + 1

    def get_precision(self):
        """ return the bit-size of the mantissa """
        return self.get_field_size()

    def get_split_size(self):
        return self.split_size

    def get_numpy_type(self):
        return self.numpy_type

    def get_bias(self):
        return - 2**(self.get_exponent_size() - 1) + 1

    def get_emax(self):
        return 2**self.get_exponent_size() - 2 + self.get_bias()

    ## Return the minimal exponent for a normal number
    def get_emin_normal(self):
        return 1 + self.get_bias()

    ## Return the minimal exponent for a subnormal number
    def get_emin_subnormal(self):
        return 1 - (self.get_field_size()) + self.get_bias()

    ## return the exponent field corresponding to
    #  a special value (inf or NaN)
    def get_nanorinf_exp_field(self):
        return 2**self.get_exponent_size() - 1

    def get_sign_mask(self):
        return 1 << (self.bit_size - 1)

    def get_abs_mask(self):
        return self.get_sign_mask() - 1

    def get_field_mask(self):
        return 2**self.field_size - 1

    def get_exponent_mask(self):
        return self.get_nanorinf_exp_field() << self.field_size

    def get_infty_coding(self):
        """ encoding of +infinity, every |value| encoding above it is a NaN """
        return self.get_exponent_mask()

    def get_one_coding(self):
        return (-self.get_bias()) << self.field_size

    ## test if @p value is a value of this format (no conversion required)
    def is_value(self, value):
        return isinstance(value, self.numpy_type)

    ## Convert @p value to this format (rounding to nearest),
    #  values already in this format are forwarded unchanged
    @fp_silent
    def cast(self, value):
        if self.is_value(value):
            return value
        return self.numpy_type(value)

    ## return the integer coding of @p value
    #  @param value numeric value to be converted
    #  @return value encoding (as a non-negative integer)
    def get_integer_coding(self, value):
        return int(np.array(self.cast(value), dtype=self.numpy_type).view(self.integer_type)[()])

    def get_value_from_integer_coding(self, value, base=0):
        """ Convert a value binary encoded following IEEE-754 standard
            to its floating-point numerical (or special) counterpart,
            @p value may be an integer or a string parsed in @p base """
        if isinstance(value, str):
            value = int(value, base)
        if value < 0 or value >= 2**self.bit_size:
            Log.report(
                Log.Error, "encoding {:#x} does not fit in {}", value, self,
                error=ML_FormatError("invalid {} encoding {:#x}".format(self, value))
            )
        return np.array(value, dtype=self.integer_type).view(self.numpy_type)[()]

    # @return the format omega value, the maximal normal value
    def get_omega(self):
        return self.get_value_from_integer_coding(self.get_infty_coding() - 1)

    def get_min_normal_value(self):
        """ return the minimal normal number in @p self format """
        return self.get_value_from_integer_coding(1 << self.field_size)

    def get_max_subnormal_value(self):
        """ return the maximal subnormal number in @p self format """
        return self.get_value_from_integer_coding(self.get_field_mask())

    def get_min_subnormal_value(self):
        """ return the minimal subnormal number in @p self format """
        return self.get_value_from_integer_coding(1)

    ## number of bits of the encoding below the high word
    def get_low_word_size(self):
        return self.bit_size - WORD_SIZE

    ## size of the mantissa field part located in the high word
    def get_high_field_size(self):
        return self.field_size - self.get_low_word_size()

    def get_high_word(self, value):
        """ return the (signed) high 32-bit word of @p value's encoding,
            the whole encoding for a 32-bit format """
        return to_signed(self.get_integer_coding(value) >> self.get_low_word_size(), WORD_SIZE)

    def with_set_high_word(self, value, high_word):
        """ return @p value with its high word replaced by @p high_word """
        low_size = self.get_low_word_size()
        coding = self.get_integer_coding(value) & (2**low_size - 1)
        return self.get_value_from_integer_coding(((high_word & WORD_MASK) << low_size) | coding)

    def get_high_word_coding(self, coding):
        """ high word (unsigned) of the encoding @p coding """
        return coding >> self.get_low_word_size()


ML_Binary32 = ML_Std_FP_Format(32, 8, 23, "float", np.float32, np.uint32, 12)
ML_Binary64 = ML_Std_FP_Format(64, 11, 52, "double", np.float64, np.uint64, 32)


precision_map = {
    # floating-point formats
    "binary32": ML_Binary32,
    "binary64": ML_Binary64,
    # aliases
    "float": ML_Binary32,
    "double": ML_Binary64,
}


def precision_parser(precision_str):
    """ string -> ML_Std_FP_Format conversion """
    if not precision_str in precision_map:
        Log.report(
            Log.Error, "unknown precision {} (supported precisions are: {})",
            precision_str, ", ".join(precision_map.keys()),
            error=ML_FormatError("unknown precision {}".format(precision_str))
        )
    return precision_map[precision_str]
