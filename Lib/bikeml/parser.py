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


import logging

from bikeml.errors import (
    EndBeforeEquals,
    EndBeforeKey,
    ExpectedEquals,
    ExpectedKey,
    LexError,
    MismatchedBracket,
    TokenError,
    UnexpectedToken,
    UnterminatedBracket,
)
from bikeml.tokenizer import Tokenizer, TokenKind


logger = logging.getLogger(__name__)


class _Completed:
    """A finished value waiting to be folded into its enclosing container."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value


class Parser:
    """Builds a Python dictionary from the tokens of a BikeML document.

    The parser is a shift-reduce loop over two explicit stacks: the bracket
    stack holds the opening tokens still waiting for their closer, the value
    stack holds the containers under construction. The bottom of the value
    stack is always the implicit root dictionary.
    """

    def __init__(self, tokenizer, dict_type=dict):
        self.tokenizer = tokenizer
        self.dict_type = dict_type
        self.brackets = []
        self.values = [{}]

    def parse(self):
        """Consume the whole token stream and return the root dictionary."""
        while True:
            token = self._shift()
            kind = token.kind

            if kind is TokenKind.EOF:
                if self.brackets:
                    raise UnterminatedBracket(self.brackets[-1])
                root = self.values.pop()
                assert not self.values and isinstance(root, dict)
                return self._finish_dict(root)
            elif kind is TokenKind.STRING or kind is TokenKind.NUMBER:
                self.values.append(_Completed(token.value))
            elif kind is TokenKind.LBRACE:
                self.brackets.append(token)
                self.values.append({})
                logger.debug("Opened dictionary at line %s", token.line)
            elif kind is TokenKind.LPAREN:
                self.brackets.append(token)
                self.values.append([])
                logger.debug("Opened list at line %s", token.line)
            elif kind is TokenKind.RBRACE:
                self._close(token, TokenKind.LBRACE)
                d = self.values.pop()
                self.values.append(_Completed(self._finish_dict(d)))
            elif kind is TokenKind.RPAREN:
                self._close(token, TokenKind.LPAREN)
                self.values.append(_Completed(self.values.pop()))
            else:
                raise UnexpectedToken(token)

            if isinstance(self.values[-1], _Completed):
                self._reduce()

    def _shift(self):
        try:
            return self.tokenizer.next_token()
        except TokenError as e:
            raise LexError(e) from e

    def _close(self, closer, opener_kind):
        if not self.brackets or self.brackets[-1].kind is not opener_kind:
            raise MismatchedBracket(closer)
        opener = self.brackets.pop()
        logger.debug(
            "Closed %r from line %s at line %s", opener.text, opener.line, closer.line
        )

    def _reduce(self):
        value = self.values.pop().value
        container = self.values[-1]
        if isinstance(container, list):
            container.append(value)
            return
        self._expect((TokenKind.EQUALS,), ExpectedEquals, EndBeforeEquals)
        key = self._expect(
            (TokenKind.IDENTIFIER, TokenKind.STRING), ExpectedKey, EndBeforeKey
        ).value
        # later assignments overwrite earlier ones
        container[key] = value

    def _expect(self, kinds, error, end_error):
        token = self._shift()
        if token.kind not in kinds:
            if token.kind is TokenKind.EOF:
                raise end_error(token)
            raise error(token)
        return token

    def _finish_dict(self, d):
        return self.dict_type(sorted(d.items()))


def _parse(source, dict_type):
    return Parser(Tokenizer(source), dict_type=dict_type).parse()


def load(file_or_path, dict_type=dict):
    """Read a BikeML document. 'file_or_path' should be a readable binary
    file object or a file name.
    Return the root dictionary.
    """
    logger.info("Parsing BikeML document")
    if hasattr(file_or_path, "read"):
        return _parse(file_or_path, dict_type)
    with open(file_or_path, "rb") as fp:
        return _parse(fp, dict_type)


def loads(s, dict_type=dict):
    """Read a BikeML document from a (unicode) str object, or from
    a UTF-8 encoded bytes object.
    Return the root dictionary.
    """
    logger.info("Parsing BikeML document")
    return _parse(s, dict_type)
