"""
Tests for the internal helpers.

This module verifies the guarantees the rest of the package relies on:
- Unset is a falsy, final, process-wide singleton that survives copies and pickling.
- coalesce() replaces only Unset.
- rename() and view() behave as documented.
- pluralize()/counted() produce the message fragments used by faults.
"""
import copy
import pickle
import unittest
from types import MappingProxyType
from unittest import TestCase

from flagship.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the Unset sentinel.
    """

    def testSingleton(self) -> None:
        self.assertIs(Unset, UnsetType())

    def testFalsy(self) -> None:
        self.assertFalse(bool(Unset))
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, None)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testCopyDeepcopyPickle(self) -> None:
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testUnionAnnotations(self) -> None:
        self.assertEqual(Unset | str, UnsetType | str)
        self.assertEqual(str | Unset, str | UnsetType)


class HelpersTest(TestCase):
    """
    Test suite for coalesce(), rename(), view(), pluralize() and counted().
    """

    def testCoalesce(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 5), 0)

    def testRenameBothForms(self) -> None:
        def first():
            pass

        self.assertIs(rename(first, "renamed"), first)
        self.assertEqual(first.__name__, "renamed")
        self.assertEqual(first.__qualname__, "renamed")

        @rename("decorated")
        def second():
            pass

        self.assertEqual(second.__name__, "decorated")

    def testRenameRejectsBadArguments(self) -> None:
        with self.assertRaises(TypeError):
            rename("not callable", "name")
        with self.assertRaises(TypeError):
            rename(len, "builtin")
        with self.assertRaises(TypeError):
            rename()

    def testViewReturnsImmutableContainers(self) -> None:
        class Holder:
            items = view("items")
            table = view("table")
            names = view("names")
            label = view("label")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}
                self._names = {"x"}
                self._label = "text"

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        self.assertEqual(holder.names, frozenset({"x"}))
        self.assertEqual(holder.label, "text")
        with self.assertRaises(AttributeError):
            holder.items = []

    def testPluralize(self) -> None:
        self.assertEqual(pluralize("file"), "files")
        self.assertEqual(pluralize("missing file"), "missing files")
        self.assertEqual(pluralize("utility"), "utilities")
        self.assertEqual(pluralize("key"), "keys")
        self.assertEqual(pluralize("box"), "boxes")
        self.assertEqual(pluralize("Source"), "Sources")
        self.assertEqual(pluralize("FLAG"), "FLAGS")

    def testCounted(self) -> None:
        self.assertEqual(counted(1, "source"), "1 source")
        self.assertEqual(counted(3, "source"), "3 sources")
        self.assertEqual(counted(0, "missing file"), "0 missing files")


if __name__ == '__main__':
    unittest.main()
