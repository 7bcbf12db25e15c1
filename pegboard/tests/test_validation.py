"""Tests for pegboard.validation"""
import unittest

from pegboard.exceptions import UnexpectedNegative
from pegboard.validation import Requirement, Requirements, ValidatingMap


def is_int(value):
    return isinstance(value, int)


def is_positive(value):
    return value > 0


class TestRequirement(unittest.TestCase):
    """Tests for validation.Requirement"""
    def test_check(self):
        requirement = Requirement(is_int, TypeError, "not an int: %r")
        self.assertIsNone(requirement.check(1))
        problem = requirement.check('1')
        self.assertIsInstance(problem, TypeError)
        self.assertEqual(str(problem), "not an int: '1'")

    def test_init_rejects_non_callables(self):
        with self.assertRaises(TypeError):
            Requirement(None, TypeError)
        with self.assertRaises(TypeError):
            Requirement(is_int, 'TypeError')


class TestRequirements(unittest.TestCase):
    """Tests for validation.Requirements"""
    def test_first_failure(self):
        """check reports the first failing requirement"""
        requirements = Requirements([(is_int, TypeError), (is_positive, UnexpectedNegative)])
        self.assertIsNone(requirements.check(1))
        self.assertIsInstance(requirements.check('a'), TypeError)
        self.assertIsInstance(requirements.check(-1), UnexpectedNegative)

    def test_empty(self):
        self.assertIsNone(Requirements().check(object()))

    def test_rejects_non_callables(self):
        requirements = Requirements()
        with self.assertRaises(TypeError):
            requirements.set('predicate', TypeError)
        with self.assertRaises(TypeError):
            requirements.set(is_int, None)
        self.assertEqual(len(requirements), 0)

    def test_copy(self):
        requirements = Requirements([(is_int, TypeError)])
        duplicate = requirements.copy()
        self.assertEqual(duplicate, requirements)
        self.assertIsNot(duplicate, requirements)


class PositiveIntMap(ValidatingMap):
    key_requirements = Requirements([(lambda key: isinstance(key, str), TypeError)])
    value_requirements = Requirements([(is_int, TypeError), (is_positive, UnexpectedNegative)])


class TestValidatingMap(unittest.TestCase):
    """Tests for validation.ValidatingMap"""
    def test_unrestricted(self):
        """without requirements, anything goes"""
        mapping = ValidatingMap([(1, None), ('a', object())], 'D')
        self.assertEqual(len(mapping), 2)
        self.assertEqual(mapping.get('missing'), 'D')

    def test_set(self):
        mapping = PositiveIntMap()
        mapping['a'] = 1
        with self.assertRaises(UnexpectedNegative):
            mapping['b'] = -1
        with self.assertRaises(TypeError):
            mapping[1] = 1
        self.assertEqual(dict(mapping), {'a': 1})

    def test_init_all_or_nothing(self):
        """initialization checks every pair before storing any"""
        with self.assertRaises(UnexpectedNegative):
            PositiveIntMap([('a', 1), ('b', -1)])
        mapping = PositiveIntMap({'a': 1, 'b': 2}, 0)
        self.assertEqual(mapping.get('c'), 0)

    def test_copy(self):
        mapping = PositiveIntMap({'a': 1}, 0)
        duplicate = mapping.copy()
        self.assertIsInstance(duplicate, PositiveIntMap)
        self.assertEqual(duplicate, mapping)
        self.assertEqual(duplicate.default_value, 0)

    def test_subclass_requirements_are_separate(self):
        """extending a subclass leaves its base unrestricted"""
        class Restricted(ValidatingMap):
            pass
        Restricted.value_requirements.set(lambda value: value > 0, ValueError)
        self.assertEqual(len(ValidatingMap.value_requirements), 0)
        self.assertEqual(len(PositiveIntMap.value_requirements), 2)
        self.assertEqual(dict(ValidatingMap([('k', -1)])), {'k': -1})
        with self.assertRaises(ValueError):
            Restricted([('k', -1)])

    def test_requirements_are_inherited(self):
        class Narrower(PositiveIntMap):
            pass
        Narrower.value_requirements.set(lambda value: value < 10, ValueError)
        with self.assertRaises(UnexpectedNegative):
            Narrower([('a', -1)])
        with self.assertRaises(ValueError):
            Narrower([('a', 10)])
        self.assertEqual(dict(PositiveIntMap([('a', 10)])), {'a': 10})


if __name__ == '__main__':
    unittest.main()
