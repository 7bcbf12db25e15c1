# Copyright 2018 Harold Fellermann
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""Counting containers, set algebra and lazy iteration helpers

This package offers a handful of small collection utilities. The
containers in pegboard.structures extend the mapping protocol:
DefaultValueMap returns a configurable default for absent keys,
Counter tracks integer quantities per key together with their
running total, and MultiSet restricts those quantities to be
non-negative and adds multiset union, intersection and difference.

pegboard.sets implements set algebra for any set-like container,
and pegboard.iteration provides generators for ranges, cartesian
products, zipping and de-duplication.

>>> inventory = MultiSet([('apple', 3), ('pear', 1)])
>>> inventory.subtract_multiset(MultiSet([('apple', 1)]))
MultiSet({'apple': 2, 'pear': 1})
>>> inventory.total
3
"""

__version__ = "0.3.0"

from .exceptions import (CapabilityError, MismatchedLengths,
                         UnexpectedFloat, UnexpectedNegative, Underflow)
from .structures import DefaultValueMap, Counter, MultiSet, count
from .sets import OrderedSet, SetAlgebra, sets_equal
from .views import (ReadableCounter, DefaultView, CounterView,
                    SetCounterView, as_counter_like)
from .validation import Requirement, Requirements, ValidatingMap
