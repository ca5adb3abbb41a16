# python
"""
Tests for the internal helpers.

Scope
- Unset singleton semantics (identity, falsiness, repr, finality).
- coalesce() only replaces Unset.
- isoptchar() alphabet and basename() path handling.
"""
import copy
import unittest
from unittest import TestCase

from optscan.utils import Unset, UnsetType, basename, coalesce, isoptchar


class TestUnset(TestCase):
    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.copy(Unset), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testUnion(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("text", str | Unset)

    def testFinal(self):
        with self.assertRaises(TypeError):
            class Subclass(UnsetType):  # NOQA: F-841
                pass


class TestHelpers(TestCase):
    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce("", "fallback"), "")

    def testIsOptChar(self):
        for character in "azAZ09":
            self.assertTrue(isoptchar(character))
        for character in ("-", ":", " ", "é", "٣", "", "ab"):
            with self.subTest(character=character):
                self.assertFalse(isoptchar(character))

    def testBasename(self):
        self.assertEqual(basename("/usr/bin/tool"), "tool")
        self.assertEqual(basename("tool"), "tool")
        self.assertEqual(basename("./tool/"), "tool")
        self.assertEqual(basename("/"), "/")
        self.assertEqual(basename("///"), "/")
        self.assertEqual(basename(""), ".")


if __name__ == '__main__':
    unittest.main()
