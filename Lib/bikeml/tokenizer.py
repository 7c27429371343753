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

"""Character level scanner turning BikeML source into tokens.

The tokenizer reads its source forward, one UTF-8 character at a time, and
keeps at most one decoded character pending between calls. Tokens are
produced lazily by `Tokenizer.next_token`.
"""

import codecs
import enum
import io
import re

from bikeml.errors import (
    InvalidEncoding,
    InvalidNumber,
    IoFailure,
    UnexpectedCharacter,
    UnterminatedString,
)

__all__ = ["TokenKind", "Token", "Tokenizer"]


RESERVED = frozenset(";{}()'=")
NUMBER_RE = re.compile(r"-?[0-9]+(?:\.[0-9]+)?\Z")

# Identifiers start at any code point from "A" upwards, which also admits
# "[", "_", "~" and all non-ASCII text.
IDENTIFIER_START = ord("A")

# str.isspace() also accepts the information separators U+001C..U+001F,
# which are not Unicode White_Space.
SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(ch):
    return ch.isspace() and ch not in SEPARATORS


class TokenKind(enum.Enum):
    LBRACE = "{"
    RBRACE = "}"
    LPAREN = "("
    RPAREN = ")"
    EQUALS = "="
    STRING = "string"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    EOF = "end of input"


_PUNCTUATION = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.EQUALS,
}


class Token:
    """A lexical token and the position where it starts.

    Two tokens compare equal when kind and value match; the position is
    informational only.
    """

    __slots__ = ("kind", "value", "line", "column")

    def __init__(self, kind, value=None, line=None, column=None):
        self.kind = kind
        self.value = value
        self.line = line
        self.column = column

    @property
    def text(self):
        """Source-like spelling of the token, for error messages."""
        if self.kind in (TokenKind.STRING, TokenKind.NUMBER, TokenKind.IDENTIFIER):
            return str(self.value)
        return self.kind.value

    def describe(self):
        if self.kind is TokenKind.EOF:
            return "end of input"
        if self.kind is TokenKind.STRING:
            return "string %r" % self.value
        if self.kind is TokenKind.NUMBER:
            return "number %r" % self.value
        if self.kind is TokenKind.IDENTIFIER:
            return "identifier %r" % self.value
        return repr(self.kind.value)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.value is None:
            return "<Token %s>" % self.kind.name
        return "<Token %s %r>" % (self.kind.name, self.value)


def _as_stream(source):
    if isinstance(source, str):
        return io.BytesIO(source.encode("utf-8"))
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    if hasattr(source, "read"):
        return source
    raise TypeError(
        "expected bytes, str or a binary file object, not %s"
        % type(source).__name__
    )


class Tokenizer:
    """Produces `Token` objects from a byte source on demand."""

    def __init__(self, source):
        self._source = _as_stream(source)
        self._decoder = codecs.getincrementaldecoder("utf-8")()
        self._pending = None
        self._done = False
        # position of the next character to be read from the source
        self._line = 1
        self._column = 1
        # position of the pending character
        self._pending_line = 1
        self._pending_column = 1

    def __iter__(self):
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token

    @property
    def position(self):
        """(line, column) of the next unread character."""
        if self._pending is not None:
            return self._pending_line, self._pending_column
        return self._line, self._column

    def next_token(self):
        """Return the next token, or an EOF token once the input is exhausted."""
        while True:
            ch = self._peek()
            if ch is None:
                self._done = True
                line, column = self.position
                return Token(TokenKind.EOF, line=line, column=column)
            line, column = self._pending_line, self._pending_column

            if ch == ";":
                self._pending = None
                self._skip_line()
            elif is_whitespace(ch):
                self._pending = None
            elif ch in _PUNCTUATION:
                self._pending = None
                return Token(_PUNCTUATION[ch], line=line, column=column)
            elif ch == "'":
                self._pending = None
                return self._string_token(line, column)
            elif ch == "-" or "0" <= ch <= "9":
                return self._number_token(line, column)
            elif ord(ch) >= IDENTIFIER_START and ch not in RESERVED:
                return self._identifier_token(line, column)
            else:
                raise UnexpectedCharacter(ch, line, column)

    # character source

    def _read_byte(self):
        try:
            b = self._source.read(1)
        except OSError as e:
            raise IoFailure(e, self._line, self._column) from e
        if isinstance(b, str):
            raise TypeError("file object must be opened in binary mode")
        if b and b[0] == 0x0A:
            self._line += 1
            self._column = 1
        elif b and b[0] & 0xC0 != 0x80:
            # continuation bytes do not start a new column
            self._column += 1
        return b

    def _read_char(self):
        """Decode and return the next character, or None at end of input."""
        line, column = self._line, self._column
        while True:
            b = self._read_byte()
            try:
                if not b:
                    self._decoder.decode(b"", final=True)
                    return None
                ch = self._decoder.decode(b)
            except UnicodeDecodeError:
                raise InvalidEncoding(line, column) from None
            if ch:
                self._pending_line, self._pending_column = line, column
                return ch

    def _peek(self):
        if self._pending is None and not self._done:
            self._pending = self._read_char()
        return self._pending

    def _skip_line(self):
        while True:
            b = self._read_byte()
            if not b or b == b"\n":
                self._decoder.reset()
                return

    # token scanners

    def _string_token(self, line, column):
        data = bytearray()
        while True:
            b = self._read_byte()
            if not b:
                raise UnterminatedString(line, column)
            if b != b"'":
                data += b
                continue
            ch = self._read_char()
            if ch == "'":
                data += b"'"
                continue
            self._pending = ch
            break
        try:
            value = data.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidEncoding(line, column) from None
        return Token(TokenKind.STRING, value, line, column)

    def _scan_word(self):
        chars = []
        ch = self._peek()
        while ch is not None and not is_whitespace(ch) and ch not in RESERVED:
            chars.append(ch)
            self._pending = None
            ch = self._peek()
        return "".join(chars)

    def _number_token(self, line, column):
        text = self._scan_word()
        if not NUMBER_RE.match(text):
            raise InvalidNumber(text, line, column)
        return Token(TokenKind.NUMBER, float(text), line, column)

    def _identifier_token(self, line, column):
        return Token(TokenKind.IDENTIFIER, self._scan_word(), line, column)
