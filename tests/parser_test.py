# coding=UTF-8
#
# Copyright 2026 The BikeML Authors. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


from collections import OrderedDict
import io
import logging
import os
import tempfile
import unittest

import pytest

import bikeml
from bikeml.errors import (
    BikeMLError,
    ExpectedEquals,
    ExpectedKey,
    InvalidNumber,
    LexError,
    MismatchedBracket,
    ParseError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnterminatedBracket,
    UnterminatedString,
)
from bikeml.parser import Parser, load, loads
from bikeml.tokenizer import TokenKind, Tokenizer

BIKE_DATA = """\
'bikeML' = name
('fun' 'minimalistic' 'crazy') = features
{'foo' = bar  'bar' = baz} = lol ; yeah!
"""


class ParserTest(unittest.TestCase):
    def run_test(self, text, expected):
        parser = Parser(Tokenizer(text))
        self.assertEqual(parser.parse(), expected)

    def test_parse(self):
        self.run_test(
            BIKE_DATA,
            {
                "name": "bikeML",
                "features": ["fun", "minimalistic", "crazy"],
                "lol": {"bar": "foo", "baz": "bar"},
            },
        )

    def test_empty_document(self):
        self.run_test("", {})
        self.run_test("  ; only a comment\n", {})

    def test_postfix_assignment(self):
        self.run_test("'foo' = bar", {"bar": "foo"})

    def test_string_key(self):
        self.run_test("'v' = 'a key with spaces'", {"a key with spaces": "v"})

    def test_numbers(self):
        self.run_test("1 = one -2.5 = neg (0 1.5) = nums",
                      {"one": 1.0, "neg": -2.5, "nums": [0.0, 1.5]})

    def test_nested(self):
        self.run_test(
            "{ ( {} () ({ 'x' = y } 'z') ) = inner } = outer",
            {"outer": {"inner": [{}, [], [{"y": "x"}, "z"]]}},
        )

    def test_empty_containers(self):
        self.run_test("{} = d () = l", {"d": {}, "l": []})

    def test_last_assignment_wins(self):
        self.run_test("'a' = k 'b' = k", {"k": "b"})
        self.run_test("{ 1 = x 2 = x } = d", {"d": {"x": 2.0}})

    def test_keys_are_sorted(self):
        result = loads("1 = c 2 = a { 3 = z 4 = b } = b")
        self.assertEqual(list(result), ["a", "b", "c"])
        self.assertEqual(list(result["b"]), ["b", "z"])

    def test_dict_type(self):
        result = loads("{ 'v' = k } = d", dict_type=OrderedDict)
        self.assertIsInstance(result, OrderedDict)
        self.assertIsInstance(result["d"], OrderedDict)

    def test_deep_nesting_does_not_recurse(self):
        depth = 5000
        result = loads("(" * depth + ")" * depth + " = deep")
        value = result["deep"]
        for _ in range(depth - 1):
            self.assertEqual(len(value), 1)
            value = value[0]
        self.assertEqual(value, [])

    def test_with_utf8(self):
        self.run_test(b"'Don\xe2\x80\x99t crash' = mystr", {"mystr": "Don’t crash"})

    def test_stack_empty_after_parse(self):
        parser = Parser(Tokenizer("(1) = a"))
        parser.parse()
        self.assertEqual(parser.values, [])
        self.assertEqual(parser.brackets, [])


class ParserErrorTest(unittest.TestCase):
    def test_unterminated_bracket(self):
        with self.assertRaises(UnterminatedBracket) as cm:
            loads("{ (1 2) = a\n  ( 3")
        opener = cm.exception.opener
        self.assertIs(opener.kind, TokenKind.LPAREN)
        self.assertEqual((opener.line, opener.column), (2, 3))

    def test_unterminated_brace(self):
        with self.assertRaises(UnterminatedBracket) as cm:
            loads("{ 'a' = b")
        self.assertIs(cm.exception.opener.kind, TokenKind.LBRACE)

    def test_closer_without_opener(self):
        with self.assertRaises(MismatchedBracket) as cm:
            loads("'a' = b }")
        self.assertIs(cm.exception.found.kind, TokenKind.RBRACE)

    def test_brace_closes_paren(self):
        with self.assertRaises(MismatchedBracket) as cm:
            loads("( 1 }")
        self.assertIs(cm.exception.found.kind, TokenKind.RBRACE)
        self.assertEqual(cm.exception.found.column, 5)

    def test_paren_closes_brace(self):
        with self.assertRaises(MismatchedBracket) as cm:
            loads("{ )")
        self.assertIs(cm.exception.found.kind, TokenKind.RPAREN)

    def test_paren_without_opener(self):
        with self.assertRaises(MismatchedBracket):
            loads(")")

    def test_expected_equals(self):
        with self.assertRaises(ExpectedEquals) as cm:
            loads("'a' 'b'")
        self.assertEqual(cm.exception.found.value, "b")

    def test_missing_equals_in_nested_dict(self):
        with self.assertRaises(ExpectedEquals) as cm:
            loads("{ 'a' b } = c")
        self.assertIs(cm.exception.found.kind, TokenKind.IDENTIFIER)

    def test_expected_key(self):
        with self.assertRaises(ExpectedKey) as cm:
            loads("'a' = 5")
        self.assertIs(cm.exception.found.kind, TokenKind.NUMBER)

    def test_bracket_as_key(self):
        with self.assertRaises(ExpectedKey):
            loads("'a' = {")

    def test_unexpected_identifier(self):
        with self.assertRaises(UnexpectedToken) as cm:
            loads("name = 'bikeML'")
        self.assertEqual(cm.exception.token.value, "name")

    def test_unexpected_equals(self):
        with self.assertRaises(UnexpectedToken):
            loads("= a")

    def test_identifier_in_list(self):
        with self.assertRaises(UnexpectedToken):
            loads("(a b) = c")

    def test_end_of_input_before_equals(self):
        with self.assertRaises(ExpectedEquals) as cm:
            loads("'a'")
        self.assertIs(cm.exception.found.kind, TokenKind.EOF)
        self.assertEqual((cm.exception.found.line, cm.exception.found.column), (1, 4))
        self.assertIsInstance(cm.exception, UnexpectedEndOfInput)
        self.assertEqual(cm.exception.expected, "'='")

    def test_end_of_input_before_key(self):
        with self.assertRaises(ExpectedKey) as cm:
            loads("'a' =")
        self.assertIs(cm.exception.found.kind, TokenKind.EOF)
        self.assertEqual(cm.exception.found.column, 6)
        self.assertIsInstance(cm.exception, UnexpectedEndOfInput)

    def test_end_of_input_after_commented_key(self):
        with self.assertRaises(ExpectedKey) as cm:
            loads("(1 2) = ; key was commented out")
        self.assertIn("found end of input", str(cm.exception))

    def test_lex_error_is_wrapped(self):
        with self.assertRaises(LexError) as cm:
            loads("'a' = b\n'c")
        self.assertIsInstance(cm.exception.error, UnterminatedString)
        self.assertIs(cm.exception.__cause__, cm.exception.error)
        self.assertIn("line 2, column 1", str(cm.exception))

    def test_lex_error_in_key_position(self):
        with self.assertRaises(LexError) as cm:
            loads("'a' = @")
        self.assertIsInstance(cm.exception.error, UnexpectedCharacter)


@pytest.mark.parametrize(
    "text, error",
    [
        ("(", UnterminatedBracket),
        ("{} = a {", UnterminatedBracket),
        ("}", MismatchedBracket),
        ("({) = a", MismatchedBracket),
        ("'a' b", ExpectedEquals),
        ("'a' = (", ExpectedKey),
        ("'a' = =", ExpectedKey),
        ("x", UnexpectedToken),
        ("1", ExpectedEquals),
        ("1 =", ExpectedKey),
        ("{ 1 = }", ExpectedKey),
        ("{ 'a'", ExpectedEquals),
        ("1 = 1.5.0", LexError),
    ],
)
def test_errors_are_value_errors(text, error):
    with pytest.raises(error) as excinfo:
        loads(text)
    assert isinstance(excinfo.value, ParseError)
    assert isinstance(excinfo.value, BikeMLError)
    assert isinstance(excinfo.value, ValueError)


def test_invalid_number_through_parser():
    with pytest.raises(LexError) as excinfo:
        loads("(1 2x) = a")
    assert isinstance(excinfo.value.error, InvalidNumber)
    assert excinfo.value.error.text == "2x"


class LoadTest(unittest.TestCase):
    def test_load_file_object(self):
        self.assertEqual(load(io.BytesIO(BIKE_DATA.encode("utf-8")))["name"], "bikeML")

    def test_load_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.bike")
            with open(path, "wb") as f:
                f.write(BIKE_DATA.encode("utf-8"))
            self.assertEqual(load(path)["features"], ["fun", "minimalistic", "crazy"])

    def test_package_level_api(self):
        self.assertIs(bikeml.loads, loads)
        self.assertEqual(bikeml.loads("'v' = k"), {"k": "v"})


def test_loads_logs(caplog):
    with caplog.at_level(logging.INFO, logger="bikeml"):
        loads("'v' = k")
    assert "Parsing BikeML document" in caplog.text


if __name__ == "__main__":
    unittest.main()
