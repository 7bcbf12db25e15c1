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
"""Read-only adapter views over mappings and sets

Counter and MultiSet operators accept any mapping or set as their
second operand. Instead of probing operands for methods at runtime,
operands are wrapped in one of the views below, all of which
implement the ReadableCounter interface: a read-only mapping whose
lookups default to 0.

The module also provides the key-choice functions used by
Counter.operator_base to decide which keys an operator visits.
"""
import abc
from collections.abc import Mapping, Set

from .exceptions import CapabilityError


class ReadableCounter(Mapping):
    """Abstract read-only counter interface

    A ReadableCounter is a Mapping from keys to integers where absent
    keys read as 0, both through get and through item access.
    Subclasses must implement __contains__, __iter__, __len__ and
    count_of.
    """
    __slots__ = ()

    @abc.abstractmethod
    def count_of(self, key):
        """The count stored for a present key."""
        raise KeyError(key)

    @abc.abstractmethod
    def __contains__(self, key):
        return False

    def __getitem__(self, key):
        return self.count_of(key) if key in self else 0

    def get(self, key, default=0):
        return self.count_of(key) if key in self else default


class DefaultView(Mapping):
    """Read-only view of a mapping with a default for absent keys

    Lookups never modify the underlying mapping. get accepts an
    optional override for the default, exactly like
    DefaultValueMap.get.
    """
    __slots__ = ('_mapping', '_default')

    def __init__(self, mapping, default_value=None):
        if not isinstance(mapping, Mapping):
            raise CapabilityError("expected a mapping, not %r" % (mapping,))
        self._mapping = mapping
        self._default = default_value

    @property
    def default_value(self):
        """Value returned for absent keys"""
        return self._default

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self._mapping, self._default)

    def __contains__(self, key):
        return key in self._mapping

    def __iter__(self):
        return iter(self._mapping)

    def __len__(self):
        return len(self._mapping)

    def __getitem__(self, key):
        return self._mapping[key] if key in self._mapping else self._default

    def get(self, key, *default):
        if len(default) > 1:
            raise TypeError(
                "get expected at most 2 arguments, got %d" % (len(default)+1))
        if key in self._mapping:
            return self._mapping[key]
        return default[0] if default else self._default


class CounterView(DefaultView, ReadableCounter):
    """Present an integer-valued mapping as a ReadableCounter"""
    __slots__ = ()

    def __init__(self, mapping):
        super(CounterView, self).__init__(mapping, 0)

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._mapping)

    def count_of(self, key):
        return self._mapping[key]

    def get(self, key, default=0):
        return self._mapping[key] if key in self._mapping else default


class SetCounterView(ReadableCounter):
    """Present a set as a ReadableCounter

    Every element of the set counts once; anything else counts zero.
    """
    __slots__ = ('_set',)

    def __init__(self, set_like):
        self._set = set_like

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self._set)

    def __contains__(self, key):
        return key in self._set

    def __iter__(self):
        return iter(self._set)

    def __len__(self):
        return len(self._set)

    def count_of(self, key):
        return 1


def as_counter_like(obj):
    """Get a ReadableCounter for obj, or None if there is none.

    Readable counters are returned unchanged, other mappings are
    wrapped in a CounterView and sets in a SetCounterView.
    """
    if isinstance(obj, ReadableCounter):
        return obj
    elif isinstance(obj, Mapping):
        return CounterView(obj)
    elif isinstance(obj, Set):
        return SetCounterView(obj)
    return None


def all_keys(*mappings):
    """Ordered union of the keys of all mappings

    Keys appear in the order in which they are first encountered.
    """
    keys = {}
    for mapping in mappings:
        for key in mapping:
            keys[key] = None
    return list(keys)


def shared_keys(*mappings):
    """Keys present in every mapping, in the order of the first one"""
    if not mappings:
        return []
    first, rest = mappings[0], mappings[1:]
    return [key for key in first if all(key in other for other in rest)]
