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

## @package polynomials
#  Polynomial objects and numerical evaluation schemes,
#  every arithmetic operation is performed in the format of the
#  coefficients and of the evaluation variable

from ..utility.log_report import Log


class Polynomial(object):
    """ Mathematical polynomial object class """

    def __init__(self, init_object=None):
        """ Polynomial initialization function
            init_object can be one of
                - list of coefficient
                - dict of index, coefficient
        """
        self.degree = None
        self.coeff_map = {}

        if isinstance(init_object, list):
            self.degree = len(init_object) - 1
            for index, coeff_value in enumerate(init_object):
                self.coeff_map[index] = coeff_value

        elif isinstance(init_object, dict):
            self.degree = 0
            for index in init_object:
                self.degree = self.degree if index <= self.degree else index
                self.coeff_map[index] = init_object[index]

        elif init_object is not None:
            Log.report(
                Log.Error, "unsupported polynomial initializer {!r}", init_object,
                error=TypeError("unsupported polynomial initializer")
            )

    def get_min_monomial_degree(self):
        monomial_degrees = [index for index in self.coeff_map]
        return min(monomial_degrees)

    def get_degree(self):
        """ degree getter """
        return self.degree

    def get_coeff(self, index):
        return self.coeff_map[index]

    def sub_poly_cond(self, monomial_cond=lambda i, c: True, offset=0):
        """ sub polynomial extraction, each monomial C*x^i verifying monomial_cond(i, C)
            is selected, others are discarded """
        new_coeff_map = {}
        for index in self.coeff_map:
            coeff_value = self.coeff_map[index]
            if monomial_cond(index, coeff_value):
                new_coeff_map[index - offset] = coeff_value
        return Polynomial(new_coeff_map)

    def get_ordered_coeff_list(self):
        """ return the list of (index, coefficient) for the polynomial <self>
            ordered in increasing order """
        coeff_list = []
        for index in self.coeff_map:
            coeff = self.coeff_map[index]
            coeff_list.append((index, coeff))
        coeff_list.sort(key=lambda v: v[0])
        return coeff_list

    def __str__(self):
        return " + ".join(
            "{}*x^{}".format(coeff, index) for index, coeff in self.get_ordered_coeff_list()
        )


def generate_power(variable, power, power_map=None):
    """ evaluate variable^power by repeated squaring, using power_map
        for memoization (x^2 is x*x, x^3 is x*x^2, x^4 is x^2*x^2) """
    power_map = {} if power_map is None else power_map
    try:
        return power_map[power]
    except KeyError:
        if power == 1:
            result = variable
        elif power % 2 == 1:
            result = variable * generate_power(variable, power - 1, power_map)
        else:
            sub_power = generate_power(variable, power // 2, power_map)
            result = sub_power * sub_power
        # memoization
        power_map[power] = result
        return result


def evaluate_horner(coeff_list, variable):
    """ Horner evaluation of c0 + x*(c1 + x*(c2 + ...)) for the dense
        coefficient list [c0, c1, ...] """
    acc = coeff_list[-1]
    for coeff in coeff_list[-2::-1]:
        acc = coeff + variable * acc
    return acc


class PolynomialSchemeEvaluator(object):
    """ class for polynomial evaluation scheme selection """

    @staticmethod
    def evaluate_horner_scheme(polynomial_object, variable, power_map=None):
        """ evaluate <polynomial_object> on <variable> with a Horner scheme,
            a polynomial whose lowest monomial degree is d > 0 is evaluated
            as x^d * (c_d + x * (c_{d+1} + ...)) """
        coeff_list = polynomial_object.get_ordered_coeff_list()
        if len(coeff_list) == 0:
            return variable * 0
        index_list = [index for index, _ in coeff_list]
        min_index = index_list[0]
        if index_list != list(range(min_index, min_index + len(index_list))):
            Log.report(
                Log.Error, "Horner scheme requires contiguous monomials, got {}",
                index_list, error=ValueError("sparse polynomial")
            )
        acc = evaluate_horner([coeff for _, coeff in coeff_list], variable)
        if min_index > 0:
            acc = generate_power(variable, min_index, power_map) * acc
        return acc

    @staticmethod
    def evaluate_even_odd_scheme(polynomial_object, variable, square=None):
        """ evaluate <polynomial_object> as the sum of its odd and even
            parts, each one a Horner scheme in w = variable^2:
            x*(c1 + w*c3 + ...) + w*(c2 + w*c4 + ...) """
        square = variable * variable if square is None else square
        odd_poly = polynomial_object.sub_poly_cond(lambda i, c: i % 2 == 1)
        even_poly = polynomial_object.sub_poly_cond(lambda i, c: i % 2 == 0)
        odd_list = [coeff for _, coeff in odd_poly.get_ordered_coeff_list()]
        even_list = [coeff for _, coeff in even_poly.get_ordered_coeff_list()]
        odd_part = variable * evaluate_horner(odd_list, square)
        even_part = square * evaluate_horner(even_list, square)
        return odd_part + even_part
