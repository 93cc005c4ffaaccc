"""
Tests for the Auralite parser.

Tests cover:
- Each construct and its terminator handling
- Phrase introducers (`create a function`, `repeat until`, ...)
- Statement sequencing and nesting
- Every parse error kind

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from auralite.lexer import tokenize
from auralite.parser import (
    Parser, ParseError, ParseErrorKind, ASTNodeType,
    FunctionDecl, ClassDecl, Conditional, Loop, Expression, render_tokens, parse_string
)


class ParserTestCase(unittest.TestCase):

    def _parse(self, code: str, strict_blocks: bool = False):
        """Helper to parse a code snippet."""
        return Parser(tokenize(code), strict_blocks=strict_blocks).parse()

    def _parse_error(self, code: str, strict_blocks: bool = False) -> ParseError:
        with self.assertRaises(ParseError) as ctx:
            self._parse(code, strict_blocks)
        return ctx.exception


class TestDeclarations(ParserTestCase):

    def test_function_with_parameters(self):
        program = self._parse("create function add(a, b) give back a + b end")

        self.assertEqual(len(program.body), 1)
        func = program.body[0]
        self.assertIsInstance(func, FunctionDecl)
        self.assertEqual(func.name, "add")
        self.assertEqual(func.parameters, ["a", "b"])
        self.assertFalse(func.is_method)
        self.assertEqual(len(func.body), 1)
        self.assertEqual(func.body[0].text, "give back a + b")

    def test_method_with_empty_body(self):
        func = self._parse("create method run end").body[0]

        self.assertEqual(func.node_type, ASTNodeType.FUNCTION_DECL)
        self.assertEqual(func.name, "run")
        self.assertEqual(func.parameters, [])
        self.assertEqual(func.body, [])
        self.assertTrue(func.is_method)

    def test_non_identifier_parameters_are_ignored(self):
        func = self._parse('create function f(a, 1, "s", b) end').body[0]
        self.assertEqual(func.parameters, ["a", "b"])

    def test_function_phrase_introducer(self):
        code = """
        create a function calculateSum
          give back a + b
        end
        """
        func = self._parse(code).body[0]

        self.assertIsInstance(func, FunctionDecl)
        self.assertEqual(func.name, "calculateSum")
        self.assertEqual(func.body[0].text, "give back a + b")

    def test_class_with_methods(self):
        code = """
        build class Dog
          create method bark()
            send output "woof"
          end
          create method sit() end
        end
        """
        cls = self._parse(code).body[0]

        self.assertIsInstance(cls, ClassDecl)
        self.assertEqual(cls.name, "Dog")
        self.assertEqual([m.name for m in cls.methods], ["bark", "sit"])
        self.assertIs(cls.methods[0].parent, cls)

    def test_class_phrase_introducer(self):
        cls = self._parse("build a class Cat end").body[0]
        self.assertIsInstance(cls, ClassDecl)
        self.assertEqual(cls.name, "Cat")


class TestControlFlow(ParserTestCase):

    def test_conditional(self):
        cond = self._parse("when x > 5 then send output x end").body[0]

        self.assertIsInstance(cond, Conditional)
        self.assertEqual(cond.condition_text, "x > 5")
        self.assertFalse(cond.negate)
        self.assertEqual(cond.body[0].text, "send output x")

    def test_negated_conditional(self):
        cond = self._parse("unless ready then x = 1 end").body[0]

        self.assertTrue(cond.negate)
        self.assertEqual(cond.condition_text, "ready")
        self.assertEqual(cond.body[0].text, "x = 1")

    def test_iterate_loop(self):
        loop = self._parse("loop items do send output item end").body[0]

        self.assertIsInstance(loop, Loop)
        self.assertEqual(loop.condition_text, "items")
        self.assertFalse(loop.repeat_form)

    def test_repeat_loop(self):
        loop = self._parse("repeat count < 3 do count += 1 end").body[0]

        self.assertTrue(loop.repeat_form)
        self.assertEqual(loop.condition_text, "count < 3")
        self.assertEqual(loop.body[0].text, "count += 1")

    def test_loop_phrase_introducers_keep_their_tail(self):
        repeat = self._parse('repeat until done do send output "waiting" end').body[0]
        self.assertTrue(repeat.repeat_form)
        self.assertEqual(repeat.condition_text, "until done")

        through = self._parse("loop through items do x end").body[0]
        self.assertFalse(through.repeat_form)
        self.assertEqual(through.condition_text, "through items")

    def test_conditional_phrase_introducers_drop_their_tail(self):
        cond = self._parse("when condition x > 5 then send output x end").body[0]
        self.assertFalse(cond.negate)
        self.assertEqual(cond.condition_text, "x > 5")

        cond = self._parse("unless condition ready then x = 1 end").body[0]
        self.assertTrue(cond.negate)
        self.assertEqual(cond.condition_text, "ready")

    def test_nested_blocks(self):
        outer = self._parse("when a then when b then c end end").body[0]

        inner = outer.body[0]
        self.assertIsInstance(inner, Conditional)
        self.assertEqual(inner.condition_text, "b")
        self.assertEqual(inner.body[0].text, "c")
        self.assertIs(inner.parent, outer)


class TestSequencing(ParserTestCase):

    def test_statement_separator(self):
        program = self._parse("x = 1; y = 2")

        self.assertEqual([s.text for s in program.body], ["x = 1", "y = 2"])

    def test_expression_leaves_end_to_its_block(self):
        code = """
        create function a() give back 1 end
        create function b() give back 2 end
        """
        program = self._parse(code)

        self.assertEqual([f.name for f in program.body], ["a", "b"])
        self.assertEqual(program.body[1].body[0].text, "give back 2")

    def test_stray_terminators_are_skipped(self):
        program = self._parse("end ; ; x")

        self.assertEqual(len(program.body), 1)
        self.assertIsInstance(program.body[0], Expression)
        self.assertEqual(program.body[0].text, "x")

    def test_source_order_is_preserved(self):
        code = "build class A end\nwhen x then y end\nloop xs do z end\nw"
        kinds = [s.node_type for s in self._parse(code).body]

        self.assertEqual(kinds, [
            ASTNodeType.CLASS_DECL, ASTNodeType.CONDITIONAL,
            ASTNodeType.LOOP, ASTNodeType.EXPRESSION,
        ])

    def test_raw_text_keeps_source_spacing(self):
        program = self._parse("send output greet(name, 2.5)")
        self.assertEqual(program.body[0].text, "send output greet(name, 2.5)")

    def test_render_tokens(self):
        self.assertEqual(render_tokens(tokenize("a  +   b")), "a + b")
        self.assertEqual(render_tokens(tokenize("done"), "until"), "until done")

    def test_empty_program(self):
        self.assertEqual(len(self._parse("")), 0)

    def test_parse_string(self):
        program = parse_string("when x then y end", filename="main.aura")

        self.assertEqual(len(program), 1)
        self.assertEqual(program.body[0].span.start.filename, "main.aura")

        with self.assertRaises(ParseError) as ctx:
            parse_string("when x then y", strict_blocks=True)
        self.assertEqual(ctx.exception.kind, ParseErrorKind.UNTERMINATED_BLOCK)


class TestParseErrors(ParserTestCase):

    def test_missing_construct_keyword_at_end_of_input(self):
        error = self._parse_error("create thing")
        self.assertEqual(error.kind, ParseErrorKind.MISSING_CONSTRUCT_KEYWORD)
        self.assertIsNone(error.token)

    def test_wrong_construct_keyword(self):
        error = self._parse_error("create new thing end")

        self.assertEqual(error.kind, ParseErrorKind.MISSING_CONSTRUCT_KEYWORD)
        self.assertEqual(error.token.value, "new")
        self.assertIn("A001", str(error))

    def test_class_requires_class_keyword(self):
        error = self._parse_error("build object Foo end")
        self.assertEqual(error.kind, ParseErrorKind.MISSING_CONSTRUCT_KEYWORD)

    def test_missing_function_name(self):
        error = self._parse_error("create function 42 end")

        self.assertEqual(error.kind, ParseErrorKind.MISSING_IDENTIFIER)
        self.assertEqual(error.location.line, 1)

    def test_missing_name_at_end_of_input(self):
        error = self._parse_error("create function")
        self.assertEqual(error.kind, ParseErrorKind.MISSING_IDENTIFIER)

    def test_missing_class_name(self):
        error = self._parse_error("build class when")
        self.assertEqual(error.kind, ParseErrorKind.MISSING_IDENTIFIER)

    def test_conditional_without_then(self):
        error = self._parse_error("when x > 5 send output x end")
        self.assertEqual(error.kind, ParseErrorKind.UNTERMINATED_CONDITIONAL)

    def test_loop_without_do(self):
        error = self._parse_error("loop items send output x end")
        self.assertEqual(error.kind, ParseErrorKind.UNTERMINATED_LOOP)

    def test_nested_error_propagates(self):
        error = self._parse_error("create function f() when x y end end")
        self.assertEqual(error.kind, ParseErrorKind.UNTERMINATED_CONDITIONAL)

    def test_empty_conditions(self):
        for code in ["repeat until do x end", "loop do x end",
                     "when then x end", "unless condition then x end"]:
            with self.subTest(code=code):
                error = self._parse_error(code)
                self.assertEqual(error.kind, ParseErrorKind.MISSING_CONDITION)
                self.assertIn("A006", str(error))

    def test_missing_end_is_lenient_by_default(self):
        cond = self._parse("when x then y").body[0]
        self.assertEqual(cond.body[0].text, "y")

    def test_missing_end_in_strict_mode(self):
        error = self._parse_error("when x then y", strict_blocks=True)
        self.assertEqual(error.kind, ParseErrorKind.UNTERMINATED_BLOCK)


if __name__ == '__main__':
    unittest.main()
