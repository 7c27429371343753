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

"""Exceptions raised while reading BikeML documents."""

__all__ = [
    "BikeMLError",
    "TokenError",
    "IoFailure",
    "InvalidNumber",
    "UnterminatedString",
    "InvalidEncoding",
    "UnexpectedCharacter",
    "ParseError",
    "LexError",
    "UnterminatedBracket",
    "MismatchedBracket",
    "ExpectedEquals",
    "ExpectedKey",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "EndBeforeEquals",
    "EndBeforeKey",
]


def _where(line, column):
    if line is None:
        return ""
    return " at line %d, column %d" % (line, column)


class BikeMLError(ValueError):
    """Base class of everything the tokenizer and parser raise."""


# tokenizer errors


class TokenError(BikeMLError):
    """The input could not be split into tokens."""

    reason = "invalid input"

    def __init__(self, line=None, column=None, detail=None):
        self.line = line
        self.column = column
        message = self.reason
        if detail:
            message = "%s %s" % (message, detail)
        super().__init__(message + _where(line, column))


class IoFailure(TokenError):
    reason = "failed to read input"

    def __init__(self, cause, line=None, column=None):
        self.cause = cause
        super().__init__(line, column, "(%s)" % cause)


class InvalidNumber(TokenError):
    reason = "invalid number"

    def __init__(self, text, line=None, column=None):
        self.text = text
        super().__init__(line, column, repr(text))


class UnterminatedString(TokenError):
    reason = "unterminated string starting"


class InvalidEncoding(TokenError):
    reason = "input is not valid UTF-8"


class UnexpectedCharacter(TokenError):
    reason = "unexpected character"

    def __init__(self, char, line=None, column=None):
        self.char = char
        super().__init__(line, column, repr(char))


# parser errors


class ParseError(BikeMLError):
    """The tokens do not form a valid document."""


class LexError(ParseError):
    """A tokenizer error raised while parsing."""

    def __init__(self, error):
        self.error = error
        super().__init__(str(error))


class UnterminatedBracket(ParseError):
    def __init__(self, opener):
        self.opener = opener
        super().__init__(
            "unclosed %r" % opener.text + _where(opener.line, opener.column)
        )


class MismatchedBracket(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(
            "unmatched %r" % found.text + _where(found.line, found.column)
        )


class ExpectedEquals(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(
            "expected '=' after value, found %s" % found.describe()
            + _where(found.line, found.column)
        )


class ExpectedKey(ParseError):
    def __init__(self, found):
        self.found = found
        super().__init__(
            "expected identifier or string as key, found %s" % found.describe()
            + _where(found.line, found.column)
        )


class UnexpectedToken(ParseError):
    def __init__(self, token):
        self.token = token
        super().__init__(
            "unexpected %s" % token.describe() + _where(token.line, token.column)
        )


class UnexpectedEndOfInput(ParseError):
    """The document ended in the middle of an assignment."""

    expected = None


class EndBeforeEquals(ExpectedEquals, UnexpectedEndOfInput):
    expected = "'='"


class EndBeforeKey(ExpectedKey, UnexpectedEndOfInput):
    expected = "a key"
