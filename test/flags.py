"""
Flags module behavioral tests (interpretation, serialization, suggestions).

Scope
- Validate type-directed interpretation: booleans, absent markers, scalars, paths,
  sequences, enums, aliases and the faults for unrepresentable input.
- Validate token serialization: prefixes, valueless flags, no escaping.
- Validate flag suggestions and the UnknownFlagError they raise.

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (interpret, serialize, similar, suggest).
"""

from __future__ import annotations

import os.path
import pathlib
import sys
import unittest
from enum import Enum, IntEnum
from unittest import TestCase

from flagship import interpret, serialize, similar, suggest
from flagship.faults import FaultCode, InvalidArgumentError, UnknownFlagError
from flagship.utils import Unset


class Mode(Enum):
    FAST = "fast"
    SAFE = "safe"


class Level(IntEnum):
    LOW = 1
    HIGH = 3


class TestInterpret(TestCase):
    """Behavioral tests for interpret()."""

    def testReferenceScenario(self):
        flags = interpret({"arg1": "input", "arg2": None, "bool": True, "vals": [1, 2, 3]})
        self.assertEqual(flags, {"arg1": "input", "bool": "", "vals": "1,2,3"})
        self.assertEqual(list(flags), ["arg1", "bool", "vals"])

    def testFalseAndAbsentValuesAreRemoved(self):
        flags = interpret({
            "off": False,
            "none": None,
            "unset": Unset,
            "nan": float("nan"),
            "empty": [],
            "kept": "x",
        })
        self.assertEqual(flags, {"kept": "x"})

    def testTrueBecomesEmptySentinel(self):
        self.assertEqual(interpret({"verbose": True}), {"verbose": ""})

    def testNumbersAreStringified(self):
        self.assertEqual(interpret({"threads": 4, "ratio": 0.25}), {"threads": "4", "ratio": "0.25"})

    def testPathLikeValuesAreDecoded(self):
        flags = interpret({"out": pathlib.Path("res", "out.txt"), "ins": [pathlib.Path("a"), "b", 2]})
        self.assertEqual(flags, {"out": os.path.join("res", "out.txt"), "ins": "a,b,2"})

    def testOversizedIntegerRejectedWithKey(self):
        self.addCleanup(sys.set_int_max_str_digits, sys.get_int_max_str_digits())
        sys.set_int_max_str_digits(4300)
        for value in (10 ** 5000, [1, 10 ** 5000]):
            with self.subTest(sequence=isinstance(value, list)):
                with self.assertRaises(InvalidArgumentError) as context:
                    interpret({"ok": 1, "huge": value})
                self.assertEqual(context.exception.options["code"], FaultCode.UNREPRESENTABLE_VALUE)
                self.assertEqual(context.exception.options["key"], "huge")
                self.assertIn("'huge'", str(context.exception))

    def testSequencesAreCommaJoined(self):
        self.assertEqual(interpret({"k": (15, 17, "21")}), {"k": "15,17,21"})

    def testSingleItemSequenceHasNoComma(self):
        self.assertEqual(interpret({"k": [15]}), {"k": "15"})

    def testCustomSeparator(self):
        self.assertEqual(interpret({"k": [1, 2]}, sep=":"), {"k": "1:2"})

    def testEnumMembersUseTheirValue(self):
        flags = interpret({"mode": Mode.FAST, "level": Level.HIGH, "modes": [Mode.FAST, Mode.SAFE]})
        self.assertEqual(flags, {"mode": "fast", "level": "3", "modes": "fast,safe"})

    def testAliasesRenameKeysOnly(self):
        args = {"threads": 4, "output": "out.txt", "verbose": True}
        plain = interpret(args)
        aliased = interpret(args, {"threads": "t", "verbose": "v"})
        self.assertEqual(list(aliased), ["t", "output", "v"])
        self.assertEqual(aliased["t"], plain["threads"])
        self.assertEqual(aliased["v"], plain["verbose"])
        self.assertEqual(aliased["output"], plain["output"])

    def testAliasesForDroppedEntriesAreIgnored(self):
        self.assertEqual(interpret({"verbose": False}, {"verbose": "v"}), {})

    def testPairSequenceInput(self):
        self.assertEqual(interpret([("a", 1), ("b", True)]), {"a": "1", "b": ""})

    def testInputIsNotMutated(self):
        args = {"keep": "x", "off": False, "vals": [1, 2]}
        interpret(args, {"keep": "k"})
        self.assertEqual(args, {"keep": "x", "off": False, "vals": [1, 2]})

    def testDuplicateNamesRejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            interpret([("a", 1), ("a", 2)])
        self.assertEqual(context.exception.options["code"], FaultCode.DUPLICATED_NAME)
        self.assertEqual(context.exception.options["key"], "a")

    def testAliasCollisionRejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            interpret({"threads": 1, "t": 2}, {"threads": "t"})
        self.assertEqual(context.exception.options["code"], FaultCode.ALIAS_COLLISION)

    def testNestedMappingRejectedWithKey(self):
        with self.assertRaises(InvalidArgumentError) as context:
            interpret({"ok": 1, "bad": {"nested": True}})
        self.assertEqual(context.exception.options["code"], FaultCode.UNREPRESENTABLE_VALUE)
        self.assertEqual(context.exception.options["key"], "bad")
        self.assertIn("'bad'", str(context.exception))

    def testOtherUnrepresentableValuesRejected(self):
        for value in ({1, 2}, b"raw", object(), 1j, [1, None], [True, False], [[1, 2]]):
            with self.subTest(value=value):
                with self.assertRaises(InvalidArgumentError):
                    interpret({"bad": value})

    def testNonStringNamesRejected(self):
        with self.assertRaises(InvalidArgumentError):
            interpret({1: "x"})

    def testInvalidAliasTableRejected(self):
        with self.assertRaises(InvalidArgumentError):
            interpret({"a": 1}, {"a": ""})
        with self.assertRaises(InvalidArgumentError):
            interpret({"a": 1}, [("a", "b")])


class TestSerialize(TestCase):
    """Behavioral tests for serialize()."""

    def testReferenceScenario(self):
        tokens = serialize({"arg1": "input", "bool": "", "vals": "1,2,3"})
        self.assertEqual(tokens, ["-arg1", "input", "-bool", "-vals", "1,2,3"])

    def testCustomPrefix(self):
        self.assertEqual(serialize({"out": "x", "v": ""}, prefix="--"), ["--out", "x", "--v"])

    def testEmptyMapping(self):
        self.assertEqual(serialize({}), [])

    def testPairSequenceKeepsOrder(self):
        self.assertEqual(serialize([("b", "2"), ("a", "1")]), ["-b", "2", "-a", "1"])

    def testValuesAreNotEscaped(self):
        tokens = serialize({"name": "x; rm -rf ~", "glob": "*.txt"})
        self.assertEqual(tokens, ["-name", "x; rm -rf ~", "-glob", "*.txt"])

    def testSequenceValueIsOneToken(self):
        tokens = serialize(interpret({"k": [15, 17, 21]}))
        self.assertEqual(len(tokens), 2)
        self.assertEqual(tokens[1].count(","), 2)

    def testNonStringValueRejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            serialize({"threads": 4})
        self.assertEqual(context.exception.options["code"], FaultCode.UNREPRESENTABLE_VALUE)

    def testNonStringPrefixRejected(self):
        with self.assertRaises(InvalidArgumentError):
            serialize({"a": ""}, prefix=None)


class TestSuggestions(TestCase):
    """Behavioral tests for similar() and suggest()."""

    def testSimilarFindsClosestValidFlag(self):
        suggestions = similar(["threads", "output", "verbose"], ["thread", "output", "zzzz"])
        self.assertEqual(suggestions, {"thread": "threads"})

    def testSimilarTransformsValidNames(self):
        valid = ["max-threads", "out-dir"]
        suggestions = similar(valid, ["max_thread", "out_dir"], transform=lambda name: name.replace("-", "_"))
        self.assertEqual(suggestions, {"max_thread": "max_threads"})

    def testSimilarAcceptsMappingKeys(self):
        self.assertEqual(similar(["verbose"], {"verbos": True}), {"verbos": "verbose"})

    def testSuggestNoOpWhenEmpty(self):
        self.assertIsNone(suggest({}))

    def testSuggestRaisesWithHint(self):
        with self.assertRaises(UnknownFlagError) as context:
            suggest({"thread": "threads"})
        fault = context.exception
        self.assertIsInstance(fault, InvalidArgumentError)
        self.assertEqual(fault.options["code"], FaultCode.UNKNOWN_FLAG)
        self.assertIn("'thread'", str(fault))
        self.assertIn("'threads'", fault.options["hint"])
        self.assertEqual(dict(fault.options["suggestions"]), {"thread": "threads"})


if __name__ == "__main__":
    unittest.main()
