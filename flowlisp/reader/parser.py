"""
  flow Reader, Lexer and Parser

- Streaming, lazy lexing: only the text needed for the next expression is read.
- Emits flow values directly:

    - integers (optionally signed)   -> int, 64-bit signed range
    - true / false                    -> bool
    - identifiers and operator runs   -> Symbol
    - double-quoted strings           -> str
    - parenthesised lists             -> list
    - 'expr                           -> Quoted(expr)
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from flowlisp import Value
from flowlisp.errors import ParseError
from flowlisp.types.kind import INT_MAX, INT_MIN
from flowlisp.types.quoted import Quoted
from flowlisp.types.symbol import Symbol

# (token_type, token_text, start_position)
Token = tuple[str, str, int]

TOKEN_RE = re.compile(
    r"(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<number>[+-]?\d+)"  # signed decimal integers
    r"|(?P<operator>[<>+\-*/%=]+)"  # operator symbols
    r"|(?P<identifier>[A-Za-z_][A-Za-z0-9_]*[?!]?)",  # identifiers
    re.DOTALL,
)

SKIP_RE = re.compile(r"(?:\s+|;[^\n]*)*")

BOOLEANS: dict[str, bool] = {"true": True, "false": False}

SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    "/": "/",
    '"': '"',
}

UNICODE_ESCAPE_RE = re.compile(r"u\{([0-9A-Fa-f]{1,6})\}")


def skip_blank(source: str, pos: int) -> int:
    """Skip whitespace and `;` comments starting at `pos`."""
    return SKIP_RE.match(source, pos).end()


def lex(source: str, pos: int = 0) -> Iterator[Token]:
    """Token generator: yields (token_type, token_text, start) tuples."""
    n = len(source)
    while True:
        pos = skip_blank(source, pos)
        if pos >= n:
            return
        match = TOKEN_RE.match(source, pos)
        if not match:
            if source[pos] == '"':
                raise ParseError("Unterminated string literal", pos)
            raise ParseError(f"Unexpected character {source[pos]!r}", pos)
        yield match.lastgroup, match.group(), pos
        pos = match.end()


def unescape(body: str, start: int) -> str:
    """Decode the escapes of a string literal body (without its quotes)."""
    out = []
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue
        i += 1
        escape = body[i]
        if escape in SIMPLE_ESCAPES:
            out.append(SIMPLE_ESCAPES[escape])
            i += 1
            continue
        m = UNICODE_ESCAPE_RE.match(body, i)
        if m:
            code = int(m.group(1), 16)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                raise ParseError(f"Invalid unicode escape \\{m.group()}", start + i)
            out.append(chr(code))
            i = m.end()
            continue
        raise ParseError(f"Unknown escape sequence \\{escape}", start + i)
    return "".join(out)


class TokenStream:
    def __init__(self, source: str, pos: int = 0):
        self.source = source
        self.tokens = lex(source, pos)
        self.buffer: list[Token] = []
        # End of the last consumed token
        self.position = pos

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        token = self.peek()
        if token is None:
            raise ParseError("Unexpected end of input", len(self.source))
        self.buffer.pop(0)
        self.position = token[2] + len(token[1])
        return token

    def remainder(self) -> str:
        return self.source[skip_blank(self.source, self.position):]

    def parse_expr(self) -> Value:
        tok_type, tok_val, start = self.advance()

        if tok_type == "quote":
            return Quoted(self.parse_expr())

        if tok_type == "lparen":
            items = []
            while True:
                token = self.peek()
                if token is None:
                    raise ParseError("Unmatched '('", start)
                if token[0] == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise ParseError("Unexpected ')'", start)

        if tok_type == "number":
            value = int(tok_val)
            if not INT_MIN <= value <= INT_MAX:
                raise ParseError("Integer literal out of range", start)
            return value

        if tok_type == "string":
            return unescape(tok_val[1:-1], start + 1)

        if tok_type == "identifier" and tok_val in BOOLEANS:
            return BOOLEANS[tok_val]

        # identifiers and operators
        return Symbol(tok_val)

    def parse_all(self) -> Iterator[Value]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(source: str) -> tuple[Value, str]:
    """Read one expression from `source`; return it with the unread remainder.

    Raises ParseError when no complete expression can be read.
    """
    stream = TokenStream(source)
    expr = stream.parse_expr()
    return expr, stream.remainder()


def parse_all(source: str) -> Iterator[Value]:
    """Yield every expression in `source`, in order."""
    return TokenStream(source).parse_all()
