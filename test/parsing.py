# python
"""
Parser module behavioral tests.

Scope
- Validate token matching (prefix convention, unknown tokens ignored).
- Validate value consumption and coercion for every value type.
- Validate MissingValueError / InvalidValueError and the repeated-option warning.

Conventions
- Test method names follow CamelCase per project convention.
- parse() receives tokens WITHOUT the program name.
"""

from __future__ import annotations

import sys
import unittest
import warnings
from unittest import TestCase

from commander import (
    OptionSpec,
    ValueType,
    MatchedValue,
    parse,
    MissingValueError,
    InvalidValueError,
    RepeatedOptionWarning,
    FaultCode,
)


def _options():
    return (
        OptionSpec("v", "version", "Show the version of this application"),
        OptionSpec("if", "input", "File to use as input", ValueType.STRING),
        OptionSpec("c", "count", "Amount of times to do something", ValueType.NUMBER),
        OptionSpec("b", "balance", "Amount of money in your bank account", ValueType.FLOAT),
    )


class TestMatching(TestCase):
    """Behavioral tests for option matching."""

    def setUp(self):
        self.options = _options()
        self.version, self.input, self.count, self.balance = self.options

    def testEmptyTokensYieldEmptyResult(self):
        self.assertEqual(parse(self.options, []), ())

    def testShortAndLongPrefixes(self):
        result = parse(self.options, ["-v", "--input", "a.txt"])
        self.assertEqual(result, (
            MatchedValue(self.version, "v", None),
            MatchedValue(self.input, "input", "a.txt"),
        ))

    def testPrefixFallsBackToOtherKind(self):
        result = parse(self.options, ["--v", "-count", "3"])
        self.assertEqual([match.option for match in result], [self.version, self.count])
        self.assertEqual(result[1].value, 3)

    def testUnknownAndBareTokensIgnored(self):
        result = parse(self.options, ["ignored", "-x", "--nothing", "-", "--", "v", "-v"])
        self.assertEqual(len(result), 1)
        self.assertIs(result[0].option, self.version)

    def testOrderFollowsCommandLineNotRegistry(self):
        result = parse(self.options, ["-b", "1.5", "-c", "2", "-v"])
        self.assertEqual(
            [match.option.long for match in result],
            ["balance", "count", "version"],
        )

    def testValueTokenIsNeverMatchedAsOption(self):
        result = parse(self.options, ["-if", "-v"])
        self.assertEqual(result, (MatchedValue(self.input, "if", "-v"),))

    def testNegativeNumberConsumed(self):
        result = parse(self.options, ["-c", "-5"])
        self.assertEqual(result[0].value, -5)

    def testPayloadKinds(self):
        result = parse(self.options, ["-v", "-if", "data.txt", "-c", "5", "-b", "2.5"])
        self.assertEqual([match.value for match in result], [None, "data.txt", 5, 2.5])
        self.assertIsInstance(result[2].value, int)
        self.assertIsInstance(result[3].value, float)

    def testMatchedValueName(self):
        result = parse(self.options, ["-c", "1"])
        self.assertEqual(result[0].name, "count")
        self.assertEqual(result[0].input, "c")

    def testResultIsTuple(self):
        self.assertIsInstance(parse(self.options, iter(["-v"])), tuple)


class TestFaults(TestCase):
    """Behavioral tests for parse faults."""

    def setUp(self):
        self.options = _options()

    def testMissingValueNamesOption(self):
        with self.assertRaises(MissingValueError) as context:
            parse(self.options, ["-c"])
        self.assertEqual(context.exception.options["name"], "c")
        self.assertIs(context.exception.options["code"], FaultCode.MISSING_VALUE)
        self.assertIn("'c'", str(context.exception))

    def testMissingValueAfterOtherOptions(self):
        with self.assertRaises(MissingValueError) as context:
            parse(self.options, ["-v", "--input"])
        self.assertEqual(context.exception.options["name"], "input")
        self.assertEqual(context.exception.options["index"], 2)
        self.assertIn("second position", str(context.exception))

    def testInvalidNumberNamesOptionAndText(self):
        with self.assertRaises(InvalidValueError) as context:
            parse(self.options, ["-c", "abc"])
        self.assertEqual(context.exception.options["name"], "c")
        self.assertEqual(context.exception.options["token"], "abc")
        self.assertIn("'c'", str(context.exception))
        self.assertIn("'abc'", str(context.exception))

    def testInvalidFloat(self):
        with self.assertRaises(InvalidValueError) as context:
            parse(self.options, ["--balance", "lots"])
        self.assertEqual(context.exception.options["name"], "balance")
        self.assertEqual(context.exception.options["token"], "lots")
        self.assertIs(context.exception.options["code"], FaultCode.INVALID_VALUE)

    def testContextMergedIntoFaults(self):
        with self.assertRaises(MissingValueError) as context:
            parse(self.options, ["-b"], prog="tool", colorful=False)
        self.assertEqual(context.exception.options["prog"], "tool")
        self.assertFalse(context.exception.options["colorful"])

    def testRepeatedOptionWarnsAndKeepsEveryOccurrence(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = parse(self.options, ["-c", "1", "--count", "2"])
        self.assertEqual([match.value for match in result], [1, 2])
        self.assertTrue(any(isinstance(w.message, RepeatedOptionWarning) for w in caught))

    def testRepeatedOptionWarningPointsAtCaller(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            parse(self.options, ["-v", "--version"])
        self.assertEqual(len(caught), 1)
        self.assertEqual(caught[0].filename, __file__)

    @unittest.skipIf(sys.get_int_max_str_digits() == 0, "integer digit limit disabled")
    def testNumberOverDigitLimit(self):
        with self.assertRaises(InvalidValueError) as context:
            parse(self.options, ["-c", "9" * (sys.get_int_max_str_digits() + 1)])
        self.assertIn("digits limit", str(context.exception))
        self.assertEqual(context.exception.options["name"], "c")

    def testSingleOccurrenceDoesNotWarn(self):
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            parse(self.options, ["-c", "1", "-v"])
        self.assertFalse(any(isinstance(w.message, RepeatedOptionWarning) for w in caught))


if __name__ == "__main__":
    unittest.main()
