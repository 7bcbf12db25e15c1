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
"""Collection of counting data structures

DefaultValueMap is a mutable mapping that returns a configurable
default value for absent keys. Counter specializes it to integer
values, deletes keys whose value drops to zero and keeps a running
total of all values. MultiSet further restricts counts to be
non-negative and provides set-algebra style operations.
(c.f. https://en.wikipedia.org/wiki/Multiset)
"""
import logging
import operator
from collections.abc import Iterable, Mapping, MutableMapping
from numbers import Integral, Number

from pqdict import nlargest

from .exceptions import (CapabilityError, UnexpectedFloat,
                         UnexpectedNegative, Underflow)
from .iteration import repeat
from .views import ReadableCounter, all_keys, as_counter_like


class DefaultValueMap(MutableMapping):
    """A mapping with a configurable default value for absent keys

    Looking up an absent key, through get or item access, returns
    the default value without storing it. The default can be changed
    at any time through the default_value attribute.
    """
    def __init__(self, iterable=None, default_value=None):
        """Initialization

        iterable is either a mapping or an iterable of (key, value)
        pairs.
        """
        self._data = {}
        self._default = default_value
        if iterable is not None:
            for key, value in self._pairs(iterable):
                self.set(key, value)

    @staticmethod
    def _pairs(iterable):
        if isinstance(iterable, Mapping):
            return list(iterable.items())
        elif isinstance(iterable, Iterable):
            return [tuple(pair) for pair in iterable]
        raise CapabilityError(
            "expected a mapping or iterable of pairs, not %r" % (iterable,))

    @property
    def default_value(self):
        """Value returned for absent keys"""
        return self._default

    @default_value.setter
    def default_value(self, value):
        self._default = value

    def __repr__(self):
        return '%s(%r, default_value=%r)' % (
            type(self).__name__, self._data, self.default_value)

    def __contains__(self, key):
        return key in self._data

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.set(key, value)

    def __delitem__(self, key):
        if not self.delete(key):
            raise KeyError(key)

    def get(self, key, *default):
        """Value for key, or a default if key is absent.

        The default is the optional second argument if given, and
        self.default_value otherwise.
        """
        if len(default) > 1:
            raise TypeError(
                "%s.get expected at most 2 arguments, got %d"
                % (type(self).__name__, len(default)+1))
        if key in self._data:
            return self._data[key]
        return default[0] if default else self.default_value

    def set(self, key, value):
        """Store value for key and return the map."""
        self._data[key] = value
        return self

    def delete(self, key):
        """Remove key and return whether it was present."""
        if key in self._data:
            del self._data[key]
            return True
        return False

    def pop(self, key, *default):
        if len(default) > 1:
            raise TypeError(
                "pop expected at most 2 arguments, got %d" % (len(default)+1))
        if key in self._data:
            value = self._data[key]
            self.delete(key)
            return value
        elif default:
            return default[0]
        raise KeyError(key)

    def setdefault(self, key, default=None):
        if key not in self._data:
            self.set(key, default)
        return self.get(key)

    def clear(self):
        self._data.clear()

    def copy(self):
        """Shallow copy with the same default value"""
        return type(self)(self._data, self.default_value)

    __copy__ = copy


class Counter(DefaultValueMap):
    """Tracks integer quantities for each key, including negatives.

    Setting the value of a key to 0 deletes the key. The attribute
    total holds the sum of all values and is updated on every change,
    so it can be negative. For the number of keys, use len().

    Counter leaves set-like operators to subclasses, because negative
    counts lack a commonly agreed upon meaning for multisets. See
    MultiSet for the default implementation, and operator_base for
    implementing operators of your own.
    """
    key_choice = staticmethod(all_keys)

    def __init__(self, iterable=None):
        """Initialization

        If iterable is a mapping, its values are copied after all of
        them passed check_value. Any other iterable is counted, i.e.
        every key is set to the number of times it occurs.
        """
        self._total = 0
        super(Counter, self).__init__(None, 0)
        if iterable is None:
            return
        elif isinstance(iterable, Mapping):
            self._update_from_pairs(list(iterable.items()))
        elif isinstance(iterable, Iterable):
            count(iterable, self)
        else:
            raise CapabilityError(
                "%r does not appear to be an iterable" % (iterable,))

    def _update_from_pairs(self, pairs):
        """Set all pairs, but only if every value passes check_value"""
        for _, value in pairs:
            problem = self.check_value(value)
            if problem:
                raise problem
        for key, value in pairs:
            self.set(key, value)

    @classmethod
    def counting(cls, iterable):
        """Create a new instance that counts the items of iterable"""
        return count(iterable, cls())

    @property
    def default_value(self):
        """Value returned for absent keys, always 0"""
        return 0

    @default_value.setter
    def default_value(self, value):
        if value != 0:
            raise AttributeError(
                "the default value of %s is always 0" % type(self).__name__)

    @property
    def total(self):
        """The sum of all values"""
        return self._total

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._data)

    def bad_set_value(self, error_type, value):
        """Create the error reported for an invalid value"""
        return error_type("expected integer value, not %r" % (value,))

    def check_value(self, value):
        """Return an error instance if value is invalid, else None.

        The error is returned rather than raised, so that subclasses
        can add their own checks on top of this one.
        """
        if isinstance(value, bool) or not isinstance(value, Number):
            return self.bad_set_value(TypeError, value)
        elif not isinstance(value, Integral):
            return self.bad_set_value(UnexpectedFloat, value)
        return None

    def count_of(self, key):
        return self._data[key]

    def get(self, key, default=0):
        return self._data[key] if key in self._data else default

    def setdefault(self, key, default=0):
        return super(Counter, self).setdefault(key, default)

    def set(self, key, value):
        """Set the count for key and return the counter.

        Setting a count to 0 deletes the key.
        """
        problem = self.check_value(value)
        if problem:
            raise problem
        old = self.get(key)
        if value == old:
            pass
        elif value == 0:
            self.delete(key)
        else:
            self._data[key] = value
            self._total += value - old
        return self

    def delete(self, key):
        if key in self._data:
            self._total -= self._data[key]
        return super(Counter, self).delete(key)

    def clear(self):
        super(Counter, self).clear()
        self._total = 0

    def copy(self):
        return type(self)(self)

    __copy__ = copy

    def increment(self, key, by=1):
        """Add by to the count of key and return the counter."""
        problem = self.check_value(by)
        if problem:
            raise problem
        return self.set(key, self.get(key) + by)

    def decrement(self, key, by=1):
        """Subtract by from the count of key and return the counter."""
        problem = self.check_value(by)
        if problem:
            raise problem
        return self.set(key, self.get(key) - by)

    def most_common(self, n=None):
        """List (key, count) pairs, largest counts first.

        If n is given, only the n pairs with the largest counts are
        returned. The order of keys with equal counts is unspecified.
        """
        if n is None:
            return sorted(self._data.items(), key=operator.itemgetter(1), reverse=True)
        return [(key, self._data[key]) for key in nlargest(n, self._data)]

    def elements(self):
        """Iterate over keys, each repeated as often as its count.

        Keys with negative counts are skipped.
        """
        for key, value in list(self._data.items()):
            if value > 0:
                for item in repeat(key, value):
                    yield item

    def operator_base(self, operator, operand, to=None, key_choice=None):
        """Helper method for defining operators over counters.

        For every key selected by key_choice (self.key_choice by
        default), operator is called with the counts of self and
        operand, and the result is written into to. Absent keys count
        as 0. Operand can be any mapping or set; sets count each of
        their elements once.

        All results are computed and validated with check_value before
        anything is written. If to is not given, a new instance of
        type(self) is created and written to. Either way, to is
        returned.
        """
        other = as_counter_like(operand)
        if other is None:
            raise CapabilityError(
                "expected a mapping or set, not %r" % (operand,))
        for key in other:
            problem = self.check_value(other.get(key, 0))
            if problem:
                raise problem

        key_choice = key_choice or self.key_choice
        results = []
        for key in key_choice(self, other):
            value = operator(self.get(key, 0), other.get(key, 0))
            problem = self.check_value(value)
            if problem:
                raise problem
            results.append((key, value))

        if to is None:
            to = type(self)()
        for key, value in results:
            to[key] = value
        return to

    def add(self, other, to=None):
        """Element-wise sum of self and other"""
        return self.operator_base(operator.add, other, to)

    def subtract(self, other, to=None):
        """Element-wise difference of self and other"""
        return self.operator_base(operator.sub, other, to)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)


ReadableCounter.register(Counter)


def count(iterable, counter=None):
    """Count the items of iterable.

    Every item increments its count in counter by one. If no counter
    is given, a new Counter is created. Returns the counter.
    """
    if not isinstance(iterable, Iterable):
        raise CapabilityError("expected an iterable, not %r" % (iterable,))
    if counter is None:
        counter = Counter()
    elif not isinstance(counter, MutableMapping):
        raise CapabilityError(
            "counter must be a mutable mapping, not %r" % (counter,))
    for item in iterable:
        counter[item] = counter.get(item, 0) + 1
    return counter


class MultiSet(Counter):
    """A multiset implementation

    Like Counter, but all counts are non-negative. Provides the
    multiset generalizations of set operations, where union adds
    counts, intersection takes the minimum and difference subtracts.
    """
    def __init__(self, iterable=None):
        """Initialization

        iterable is a mapping or an iterable of (key, count) pairs.
        Every count is validated before any is stored. Use
        MultiSet.counting to count the items of an iterable.
        """
        super(MultiSet, self).__init__()
        if iterable is not None:
            self._update_from_pairs(self._pairs(iterable))

    def bad_set_value(self, error_type, value):
        return error_type("expected integer value >= 0, not %r" % (value,))

    def check_value(self, value):
        problem = super(MultiSet, self).check_value(value)
        if problem is None and value < 0:
            problem = self.bad_set_value(UnexpectedNegative, value)
        return problem

    def _counter_like(self, other):
        result = as_counter_like(other)
        if result is None:
            raise CapabilityError(
                "expected a mapping or set, not %r" % (other,))
        return result

    def is_subset_of(self, other):
        """Whether every count of self is at most the count in other"""
        other = self._counter_like(other)
        for key, value in self._data.items():
            other_value = other.get(key, 0)
            if not (isinstance(other_value, Integral) and other_value >= value):
                return False
        return True

    def is_superset_of(self, other):
        """Whether every count of other is at most the count in self"""
        other = self._counter_like(other)
        return all(self.get(key) >= other.get(key, 0) for key in other)

    def union(self, other, to=None):
        """Multiset sum of self and other"""
        return self.operator_base(operator.add, other, to)

    def intersection(self, other, to=None):
        """Element-wise minimum of self and other"""
        return self.operator_base(min, other, to)

    def difference(self, other, to=None):
        """Element-wise difference of self and other

        Raises UnexpectedNegative if other has a larger count than
        self for any key.
        """
        return self.operator_base(operator.sub, other, to)

    def add_multiset(self, other):
        """Add the counts of another MultiSet to self, in place."""
        if not isinstance(other, MultiSet):
            raise CapabilityError("can't add non-MultiSet value %r" % (other,))
        for key, value in list(other.items()):
            self.increment(key, value)
        return self

    def _underflow(self, other):
        return {
            key: (self.get(key), value)
            for key, value in other.items()
            if self.get(key) < value
        }

    def subtract_multiset(self, other):
        """Subtract the counts of another MultiSet from self, in place.

        If any count of other exceeds the count of self, Underflow is
        raised and self is left unchanged.
        """
        if not isinstance(other, MultiSet):
            raise CapabilityError(
                "can't subtract non-MultiSet value %r" % (other,))
        elif not other:
            return self

        underflow = self._underflow(other)
        if underflow:
            logging.debug("Refused to subtract %r from %r" % (other, self))
            raise Underflow(
                "can't subtract: %s would underflow: %s" % (
                    'keys' if len(underflow) > 1 else 'key',
                    ', '.join('%r (this %d) < (other %d)' % (key, a, b)
                              for key, (a, b) in underflow.items())),
                underflow)

        for key, value in list(other.items()):
            self.decrement(key, value)
        return self

    def __le__(self, other):
        return self.is_subset_of(other)

    def __lt__(self, other):
        return self.is_subset_of(other) and not self.is_superset_of(other)

    def __ge__(self, other):
        return self.is_superset_of(other)

    def __gt__(self, other):
        return self.is_superset_of(other) and not self.is_subset_of(other)

    def __add__(self, other):
        return self.union(other)

    def __and__(self, other):
        return self.intersection(other)

    def __sub__(self, other):
        return self.difference(other)

    def __iadd__(self, other):
        return self.add_multiset(other)

    def __isub__(self, other):
        return self.subtract_multiset(other)
