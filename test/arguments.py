"""
Arguments module behavioral tests (capturing the caller's parameters).

Scope
- Validate args_named/args_dots/args_all ordering and contents.
- Validate keep/drop restriction and its conflict fault.
- Validate edge cases: positional-only parameters, *args, methods, module level.

Conventions
- Test method names follow CamelCase per project convention.
- Wrappers are defined inline so each test shows the signature it captures.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from flagship import args_all, args_named, args_dots, interpret, serialize
from flagship.faults import InvalidArgumentError


class TestCapture(TestCase):
    """Behavioral tests for argument capture."""

    def testAllCapturesNamedThenExtras(self):
        def tool(input, threads=1, *, verbose=False, **extra):
            return args_all()

        captured = tool("in.fq", threads=2, mode="fast", k=[15, 17])
        self.assertEqual(captured, {"input": "in.fq", "threads": 2, "verbose": False, "mode": "fast", "k": [15, 17]})
        self.assertEqual(list(captured), ["input", "threads", "verbose", "mode", "k"])

    def testNamedOnly(self):
        def tool(input, *, verbose=True, **extra):
            return args_named()

        self.assertEqual(tool("x", other=1), {"input": "x", "verbose": True})

    def testDotsOnly(self):
        def tool(input, **extra):
            return args_dots()

        self.assertEqual(tool("x", b=2, a=1), {"b": 2, "a": 1})
        self.assertEqual(list(tool("x", b=2, a=1)), ["b", "a"])

    def testDotsWithoutKwargsParameter(self):
        def tool(input):
            return args_dots()

        self.assertEqual(tool("x"), {})

    def testPositionalOnlyParameters(self):
        def tool(input, /, output, *, force=False):
            return args_all()

        self.assertEqual(tool("a", "b"), {"input": "a", "output": "b", "force": False})

    def testVarargsAreNotCaptured(self):
        def tool(input, *files, verbose=False, **extra):
            return args_all()

        self.assertEqual(tool("a", "f1", "f2", x=1), {"input": "a", "verbose": False, "x": 1})

    def testLocalsAreNotCaptured(self):
        def tool(input):
            scratch = input * 2  # NOQA: F-841
            return args_all()

        self.assertEqual(tool("a"), {"input": "a"})

    def testMethodSkipsSelf(self):
        class Tool:
            def run(self, input, threads=1):
                return args_all()

        self.assertEqual(Tool().run("x"), {"input": "x", "threads": 1})

    def testKeep(self):
        def tool(input, threads=1, verbose=False):
            return args_all(keep={"threads"})

        self.assertEqual(tool("x"), {"threads": 1})

    def testDrop(self):
        def tool(input, threads=1, **extra):
            return args_all(drop={"input"})

        self.assertEqual(tool("x", mode="fast"), {"threads": 1, "mode": "fast"})

    def testKeepAndDropRejected(self):
        def tool(input, threads=1):
            return args_all(keep={"input"}, drop={"threads"})

        with self.assertRaises(InvalidArgumentError):
            tool("x")

    def testModuleLevelRejected(self):
        with self.assertRaises(InvalidArgumentError):
            exec("args_all()", {"args_all": args_all})

    def testPipeline(self):
        def align(input, threads=1, *, verbose=False, preset=None, **extra):
            flags = interpret(args_all(drop={"input"}), {"threads": "t", "verbose": "v"})
            return [*serialize(flags), input]

        self.assertEqual(
            align("reads.fq", threads=4, verbose=True, k=[15, 17]),
            ["-t", "4", "-v", "-k", "15,17", "reads.fq"],
        )


if __name__ == "__main__":
    unittest.main()
