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
"""Reusable value requirements and a validating mapping

A Requirement pairs a predicate with the type of error to report
when a value does not satisfy it. Requirements collects several of
them and reports the first one a value fails. Like check_value of
Counter, requirements return problems instead of raising them, so
callers decide when to raise.

ValidatingMap is a DefaultValueMap that checks keys and values
against class-level Requirements before storing them.
"""
import logging

from .structures import DefaultValueMap


class Requirement(object):
    """A predicate together with the error reported on failure

    template is a format string for the error message. It is
    interpolated with the offending value.
    """
    def __init__(self, predicate, error_type, template=None):
        if not callable(predicate):
            raise TypeError(
                "requirement predicates must be callable, not %r" % (predicate,))
        if not callable(error_type):
            raise TypeError("error_type must be callable, not %r" % (error_type,))
        self.predicate = predicate
        self.error_type = error_type
        self.template = template or "value %r does not meet requirement"

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self.predicate, self.error_type)

    def check(self, value):
        """Return an error instance if value fails, else None"""
        if self.predicate(value):
            return None
        return self.error_type(self.template % (value,))


class Requirements(DefaultValueMap):
    """Ordered mapping of predicates to error types

    check reports the first predicate, in insertion order, that a
    value does not satisfy.
    """
    def __init__(self, iterable=None):
        super(Requirements, self).__init__(iterable, None)

    def set(self, predicate, error_type):
        if not callable(predicate):
            raise TypeError("keys must be predicates, not %r" % (predicate,))
        if not callable(error_type):
            raise TypeError(
                "values must be callables creating errors, not %r" % (error_type,))
        return super(Requirements, self).set(predicate, error_type)

    def copy(self):
        return type(self)(self)

    __copy__ = copy

    def requirements(self):
        """Iterate over the contained pairs as Requirement objects"""
        for predicate, error_type in self.items():
            yield Requirement(predicate, error_type)

    def check(self, value):
        """Return an error instance for the first failed predicate, or None"""
        for requirement in self.requirements():
            problem = requirement.check(value)
            if problem:
                return problem
        return None


class ValidatingMap(DefaultValueMap):
    """A DefaultValueMap that validates keys and values

    Subclasses restrict what can be stored by overriding the class
    attributes key_requirements and value_requirements. Each subclass
    receives its own copy of the inherited requirements, so extending
    them on a subclass leaves its bases unchanged. Values are
    checked on every set. Initialization checks every pair before
    storing any, so that a map is never partially populated.
    """
    key_requirements = Requirements()
    value_requirements = Requirements()

    def __init_subclass__(cls, **kwargs):
        super(ValidatingMap, cls).__init_subclass__(**kwargs)
        cls.key_requirements = cls.key_requirements.copy()
        cls.value_requirements = cls.value_requirements.copy()

    def __init__(self, iterable=None, default_value=None):
        super(ValidatingMap, self).__init__(None, default_value)
        if iterable is None:
            return
        pairs = self._pairs(iterable)
        for key, value in pairs:
            problem = self.check_pair(key, value)
            if problem:
                raise problem
        for key, value in pairs:
            super(ValidatingMap, self).set(key, value)

    def check_pair(self, key, value):
        """Return an error instance if key or value is invalid, else None"""
        return self.key_requirements.check(key) or self.value_requirements.check(value)

    def set(self, key, value):
        problem = self.check_pair(key, value)
        if problem:
            logging.debug("%s rejected %r: %s" % (type(self).__name__, key, problem))
            raise problem
        return super(ValidatingMap, self).set(key, value)
