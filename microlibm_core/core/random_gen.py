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

## @package random_gen
#  weighted-category random generators of floating-point test inputs,
#  every value is built from its encoding so generation is exact

import random

from .special_values import (
    FP_PlusInfty, FP_MinusInfty, FP_PlusZero, FP_MinusZero,
    FP_PlusOmega, FP_MinusOmega, FP_QNaN, FP_SNaN
)

from ..utility.log_report import Log


def normalize_map(weight_map):
    """ Ensure that every weight in map is positive and adds up to 1.0.
        Works inplace
    """
    total = 0.0
    # summing
    for key in weight_map:
        weight = weight_map[key]
        if weight < 0:
            Log.report(Log.Error, "negative weight {} for category {}", weight, key,
                       error=ValueError("negative category weight"))
        total += weight
    # normalizing
    normalization_factor = float(total)
    if normalization_factor <= 0:
        Log.report(Log.Error, "category weights sum to zero",
                   error=ValueError("null weight map"))
    for key in weight_map:
        weight_map[key] = weight_map[key] / normalization_factor
    return weight_map


class RandomGenWeightCat(object):
    """ Abstract random number generator using weighted
        categories """
    def __init__(self, category_keys=None, weight_map=None):
        self.category_keys = list(category_keys)
        self.weight_map = weight_map

    def get_category_from_weight_index(self, weight_index):
        """ returns the set category corresponding to weight_index """
        for category in self.category_keys:
            weight_index -= self.weight_map[category]
            if weight_index <= 0.0:
                return category
        return self.category_keys[0]

    def get_new_value(self):
        """ Generate a new random value """
        weight_index = self.random.random()
        category = self.get_category_from_weight_index(weight_index)
        return category.generate_value(self)


class FPRandomGen(RandomGenWeightCat):
    """ Random generator for floating-point numbers """
    class Category:
        """ Value set category """
        ##  Special value category
        class SpecialValues:
            """ Special values """
            @staticmethod
            def generate_value(generator):
                """ Generate a single special value """
                return generator.random.choice(generator.sp_list)

        class Subnormal:
            """ Subnormal numbers """
            @staticmethod
            def generate_value(generator):
                """ Generate a single subnormal value """
                field = generator.random.randrange(1, 2**generator.precision.get_field_size())
                return generator.build_value(generator.generate_sign_bit(), 0, field)

        class Normal:
            """ Normal number category """
            @staticmethod
            def generate_value(generator):
                """ Generate a single value in the normal range """
                exp = generator.random.randrange(
                    generator.precision.get_emin_normal(),
                    generator.precision.get_emax() + 1
                )
                return generator.build_normal_value(exp)

        class NearOne:
            """ values a few ulps away from 1.0 (both signs) """
            @staticmethod
            def generate_value(generator):
                offset = generator.random.randrange(-generator.near_range, generator.near_range + 1)
                coding = generator.precision.get_one_coding() + offset
                sign = generator.generate_sign_bit()
                return generator.precision.get_value_from_integer_coding(coding | sign)

        class Integer:
            """ small integral values (both parities) """
            @staticmethod
            def generate_value(generator):
                value = generator.random.randrange(-generator.integer_range, generator.integer_range + 1)
                return generator.precision.cast(value)

        class FPLogInterval:
            """ normal numbers whose exponent lies in [min_exp, max_exp] """
            def __init__(self, min_exp, max_exp, positive=False):
                self.min_exp = min_exp
                self.max_exp = max_exp
                self.positive = positive

            def __repr__(self):
                return "LogInterval[2^{};2^{}]".format(self.min_exp, self.max_exp + 1)

            def generate_value(self, generator):
                exp = generator.random.randrange(self.min_exp, self.max_exp + 1)
                return generator.build_normal_value(exp, sign_bit=0 if self.positive else None)

        class IntervalBoundary:
            """ generator boundary values perturbed by -1, 0 or +1 ulp """
            @staticmethod
            def generate_value(generator):
                if not generator.boundary_list:
                    return FPRandomGen.Category.Normal.generate_value(generator)
                value = generator.random.choice(generator.boundary_list)
                coding = generator.precision.get_integer_coding(value)
                perturbed = coding + generator.random.choice([-1, 0, 1])
                if perturbed < 0 or perturbed >= 2**generator.precision.get_bit_size():
                    perturbed = coding
                return generator.precision.get_value_from_integer_coding(perturbed)

    special_value_ctor = [
        FP_PlusInfty, FP_MinusInfty,
        FP_PlusZero, FP_MinusZero,
        FP_QNaN, FP_SNaN
    ]
    def __init__(self, precision, weight_map=None, seed=None, boundary_list=None, include_snan=False,
                 integer_range=None):
        """
            Args:
                precision (ML_Std_FP_Format): floating-point format
                weight_map (dict): map category -> weigth
                seed: random generator seed (reproducible sequences)
                boundary_list (list): values drawn by the IntervalBoundary
                    category
                integer_range (int): bound of the values drawn by the Integer
                    category

        """
        self.precision = precision

        # default category mapping
        weight_map = normalize_map({
            FPRandomGen.Category.SpecialValues: 0.1,
            FPRandomGen.Category.Subnormal: 0.2,
            FPRandomGen.Category.Normal: 0.7,

        } if weight_map is None else weight_map)
        category_keys = weight_map.keys()
        RandomGenWeightCat.__init__(
            self,
            weight_map=weight_map,
            category_keys=category_keys
        )

        self.random = random.Random(seed)
        self.sp_list = self.get_special_value_list(include_snan=include_snan)
        self.boundary_list = [] if boundary_list is None else list(boundary_list)
        # subranges for fuzzing around specific values
        self.near_range = 2**(precision.get_field_size() // 3)
        self.integer_range = 2**(precision.get_field_size() // 2) if integer_range is None else integer_range

    def get_special_value_list(self, include_snan=True):
        """ Returns a list a special values in the generator precision """
        return [
            sp_class(self.precision).get_value() for sp_class in
            FPRandomGen.special_value_ctor if (not sp_class is FP_SNaN or include_snan)
        ] + [FP_PlusOmega(self.precision), FP_MinusOmega(self.precision)]

    def generate_sign_bit(self):
        """ Generate a random sign bit, as an encoding mask """
        return self.precision.get_sign_mask() if self.random.randrange(2) == 1 else 0

    def build_value(self, sign_bit, biased_exp, field):
        coding = sign_bit | (biased_exp << self.precision.get_field_size()) | field
        return self.precision.get_value_from_integer_coding(coding)

    def build_normal_value(self, exp, sign_bit=None):
        """ random normal value 1.f * 2**exp """
        sign_bit = self.generate_sign_bit() if sign_bit is None else sign_bit
        field = self.random.randrange(2**self.precision.get_field_size())
        return self.build_value(sign_bit, exp - self.precision.get_bias(), field)
