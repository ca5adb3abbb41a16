# python
"""
ParsedOption tests.

Scope
- Argument presence and the empty-string-is-absent rule.
- Numeric coercions and their ValueError pass-through.
- Value semantics (equality, hashing, repr).
"""
import unittest
from unittest import TestCase

from optscan import ParsedOption


class TestParsedOption(TestCase):
    def testWithoutArgument(self):
        option = ParsedOption("v")
        self.assertEqual(option.character, "v")
        self.assertIsNone(option.argument)
        self.assertFalse(option.hasarg)
        self.assertEqual(str(option), "")

    def testWithArgument(self):
        option = ParsedOption("a", "42")
        self.assertEqual(option.argument, "42")
        self.assertTrue(option.hasarg)
        self.assertEqual(str(option), "42")

    def testEmptyArgumentIsAbsent(self):
        # an explicitly empty value cannot be told apart from no value
        self.assertFalse(ParsedOption("a", "").hasarg)
        self.assertEqual(ParsedOption("a", ""), ParsedOption("a"))
        self.assertEqual(ParsedOption("a", None), ParsedOption("a"))

    def testBadConstruction(self):
        with self.assertRaises(TypeError):
            ParsedOption("ab")
        with self.assertRaises(TypeError):
            ParsedOption("a", 42)

    def testInt(self):
        self.assertEqual(ParsedOption("n", "42").int(), 42)
        self.assertEqual(ParsedOption("n", "-7").int(), -7)
        self.assertEqual(ParsedOption("n", "9223372036854775807").int(), 9223372036854775807)

    def testIntErrors(self):
        for text in ("abc", "4.2", "9223372036854775808", "0x10"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    ParsedOption("n", text).int()

    def testIntWithoutArgument(self):
        with self.assertRaises(ValueError):
            ParsedOption("n").int()

    def testUint(self):
        self.assertEqual(ParsedOption("n", "18446744073709551615").uint(), 18446744073709551615)
        for text in ("-1", "+1", "18446744073709551616", "x"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    ParsedOption("n", text).uint()

    def testFloat(self):
        self.assertEqual(ParsedOption("f", "2.5").float(), 2.5)
        self.assertEqual(ParsedOption("f", "-1e3").float(), -1000.0)
        with self.assertRaises(ValueError):
            ParsedOption("f", "two").float()
        with self.assertRaises(ValueError):
            ParsedOption("f").float()

    def testValueSemantics(self):
        self.assertEqual(ParsedOption("a", "1"), ParsedOption("a", "1"))
        self.assertNotEqual(ParsedOption("a", "1"), ParsedOption("a", "2"))
        self.assertNotEqual(ParsedOption("a"), ParsedOption("b"))
        self.assertEqual(len({ParsedOption("a"), ParsedOption("a", "")}), 1)

    def testRepr(self):
        self.assertEqual(repr(ParsedOption("a")), "ParsedOption('a')")
        self.assertEqual(repr(ParsedOption("a", "x")), "ParsedOption('a', 'x')")


if __name__ == '__main__':
    unittest.main()
