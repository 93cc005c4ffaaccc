"""
Tests for transpiler options.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from auralite.config import TranspilerOptions, DEFAULT_OPTIONS


class TestTranspilerOptions(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(DEFAULT_OPTIONS.indent, "  ")
        self.assertTrue(DEFAULT_OPTIONS.cumulative_indent)
        self.assertEqual(DEFAULT_OPTIONS.loop_variable, "item")
        self.assertFalse(DEFAULT_OPTIONS.strict_blocks)
        self.assertEqual(DEFAULT_OPTIONS.statement_terminator, ";")

    def test_indent_must_be_whitespace(self):
        with self.assertRaises(ValueError):
            TranspilerOptions(indent="--")

    def test_loop_variable_must_be_identifier(self):
        for bad in ["1x", "my item", ""]:
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    TranspilerOptions(loop_variable=bad)

    def test_from_dict(self):
        options = TranspilerOptions.from_dict({"indent": "\t", "strict_blocks": True})
        self.assertEqual(options.indent, "\t")
        self.assertTrue(options.strict_blocks)

    def test_from_dict_rejects_unknown_keys(self):
        with self.assertRaises(ValueError) as ctx:
            TranspilerOptions.from_dict({"indnet": "  "})
        self.assertIn("indnet", str(ctx.exception))

    def test_options_are_immutable(self):
        with self.assertRaises(AttributeError):
            DEFAULT_OPTIONS.indent = "    "


if __name__ == '__main__':
    unittest.main()
