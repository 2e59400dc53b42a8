"""
Tests for individual recognizers and the priority list.
"""

import re
import unittest
import os
import sys

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from bytelex.lexer import Lexer, LexerConfig, LexErrorKind, TokenType, BangPolicy, OverflowPolicy
from bytelex.lexer.recognizers import (
    NumberRecognizer, PatternRecognizer, WhitespaceRecognizer, NumberOverflow, build_recognizers,
    boolean_recognizer, decode_decimal, double_char_recognizer, single_char_recognizer
)


class TestNumberRecognizer(unittest.TestCase):

    def setUp(self):
        self.recognizer = NumberRecognizer()

    def test_maximal_munch(self):
        match = self.recognizer.match(b"x1234+5", 1)
        self.assertEqual((match.length, match.lexeme, match.value), (4, b"1234", 1234))
        self.assertEqual(match.type, TokenType.NUMBER)

    def test_no_match(self):
        self.assertIsNone(self.recognizer.match(b"+1", 0))
        self.assertIsNone(self.recognizer.match(b"1", 1))

    def test_overflow_raises(self):
        with self.assertRaises(NumberOverflow) as ctx:
            self.recognizer.match(b"2147483648", 0)
        self.assertEqual(ctx.exception.lexeme, b"2147483648")
        self.assertIsInstance(ctx.exception, OverflowError)

    def test_decode_decimal(self):
        self.assertEqual(decode_decimal(b"000"), 0)
        self.assertEqual(decode_decimal(b"2147483647"), 2147483647)
        self.assertEqual(decode_decimal(b"2147483648", OverflowPolicy.SATURATE), 2147483647)
        self.assertEqual(decode_decimal(b"2147483648", OverflowPolicy.WRAP), -2147483648)

    def test_decode_decimal_wraps_past_several_multiples(self):
        self.assertEqual(decode_decimal(b"4294967297", OverflowPolicy.WRAP), 1)
        self.assertEqual(decode_decimal(b"99999999999", OverflowPolicy.WRAP), 1215752191)
        self.assertEqual(decode_decimal(b"00004294967295", OverflowPolicy.WRAP), -1)


class TestWhitespaceRecognizer(unittest.TestCase):

    def test_run_with_newlines(self):
        match = WhitespaceRecognizer().match(b"1 \t\n\r\x0b\x0c2", 1)
        self.assertEqual(match.length, 6)
        self.assertEqual(match.type, TokenType.WHITESPACE)
        self.assertIsNone(match.value)

    def test_no_match(self):
        self.assertIsNone(WhitespaceRecognizer().match(b"a ", 0))


class TestLiteralRecognizers(unittest.TestCase):

    def test_double_char(self):
        recognizer = double_char_recognizer()
        self.assertEqual(recognizer.match(b"&&", 0).type, TokenType.LOGICAL_AND)
        self.assertEqual(recognizer.match(b"a||", 1).type, TokenType.LOGICAL_OR)
        self.assertIsNone(recognizer.match(b"=", 0))
        self.assertIsNone(recognizer.match(b"&|", 0))

    def test_single_char(self):
        recognizer = single_char_recognizer()
        match = recognizer.match(b"==", 0)
        self.assertEqual((match.length, match.type), (1, TokenType.EQUAL))
        self.assertEqual(recognizer.match(b"!", 0).type, TokenType.NOT)
        self.assertIsNone(recognizer.match(b"&", 0))

    def test_single_char_legacy_bang(self):
        recognizer = single_char_recognizer(BangPolicy.LEGACY)
        self.assertEqual(recognizer.match(b"!", 0).type, TokenType.CLOSE_BRACE)
        self.assertEqual(recognizer.match(b"}", 0).type, TokenType.CLOSE_BRACE)

    def test_boolean(self):
        recognizer = boolean_recognizer()
        match = recognizer.match(b"False", 0)
        self.assertEqual((match.length, match.value), (5, False))
        self.assertEqual(recognizer.match(b"True", 0).value, True)
        self.assertIsNone(recognizer.match(b"Tru", 0))


class TestPriorityList(unittest.TestCase):

    def test_default_order(self):
        names = [r.name for r in build_recognizers()]
        self.assertEqual(names, ["number", "whitespace", "double-char", "single-char", "boolean"])

    def test_config_reaches_recognizers(self):
        config = LexerConfig(overflow=OverflowPolicy.WRAP, bang_policy=BangPolicy.LEGACY)
        number, _, _, single, _ = build_recognizers(config)
        self.assertIs(number.overflow, OverflowPolicy.WRAP)
        self.assertEqual(single.match(b"!", 0).type, TokenType.CLOSE_BRACE)

    def test_singles_before_doubles_split_double_equal(self):
        number, whitespace, doubles, singles, booleans = build_recognizers()
        lexer = Lexer(b"==", recognizers=[number, whitespace, singles, doubles, booleans])
        kinds = [t.type for t in lexer.tokenize()]
        self.assertEqual(kinds, [TokenType.EQUAL, TokenType.EQUAL])

    def test_empty_match_is_rejected(self):
        digits = PatternRecognizer("digits", re.compile(rb"[0-9]*"), TokenType.NUMBER)
        lexer = Lexer(b"12+", recognizers=[digits])
        with self.assertRaises(ValueError) as ctx:
            lexer.scan()
        self.assertIn("digits", str(ctx.exception))
        self.assertIn("offset 2", str(ctx.exception))

    def test_dropping_a_recognizer(self):
        recognizers = [r for r in build_recognizers() if r.name != "boolean"]
        result = Lexer(b"1 True", recognizers=recognizers).scan()
        self.assertEqual(result.error.kind, LexErrorKind.UNRECOGNIZED_TOKEN)
        self.assertEqual(result.error.column, 3)


if __name__ == '__main__':
    unittest.main()
