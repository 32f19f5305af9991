"""
Parser for first-order terms.

Recursive-descent parser for the term syntax:

    term            := VAR | functor_or_atom
    functor_or_atom := IDENT ( '(' [ term (',' term)* ] ')' )?
    VAR             := uppercase-letter alnum*
    IDENT           := lowercase-letter alnum*

Whitespace between tokens is ignored. The first character of a name
decides between Var and Atom/Struct; a following '(' makes a Struct.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .term import Term, Var, Atom, Struct


class TokenType(Enum):
    """Token types for the lexer."""
    VARIABLE = auto()
    ATOM = auto()

    LPAREN = auto()      # (
    RPAREN = auto()      # )
    COMMA = auto()       # ,

    EOF = auto()


@dataclass
class Token:
    """A lexical token."""
    type: TokenType
    value: str
    line: int
    col: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"


class ParseError(Exception):
    """Error during parsing."""
    def __init__(self, message: str, line: int = 0, col: int = 0):
        self.line = line
        self.col = col
        super().__init__(f"{message} at line {line}, col {col}")


class Lexer:
    """
    Tokenizer for term syntax.

    Holds the cursor into the source; each call to next_token() advances it.
    """

    PUNCTUATION = {
        '(': TokenType.LPAREN,
        ')': TokenType.RPAREN,
        ',': TokenType.COMMA,
    }

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 1
        self.length = len(source)

    def peek(self, offset: int = 0) -> str:
        """Look at character at current position + offset."""
        pos = self.pos + offset
        if pos >= self.length:
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return current character."""
        if self.pos >= self.length:
            return ''
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def skip_whitespace(self) -> None:
        while self.pos < self.length and self.peek().isspace():
            self.advance()

    def read_name(self) -> Token:
        """Read an identifier; its first letter decides VARIABLE or ATOM."""
        start_line, start_col = self.line, self.col

        value = ''
        while self.pos < self.length:
            ch = self.peek()
            if ch.isascii() and ch.isalnum():
                value += self.advance()
            else:
                break

        if value[0].isupper():
            return Token(TokenType.VARIABLE, value, start_line, start_col)
        return Token(TokenType.ATOM, value, start_line, start_col)

    def next_token(self) -> Token:
        """Get the next token."""
        self.skip_whitespace()

        if self.pos >= self.length:
            return Token(TokenType.EOF, '', self.line, self.col)

        start_line, start_col = self.line, self.col
        ch = self.peek()

        if ch in self.PUNCTUATION:
            self.advance()
            return Token(self.PUNCTUATION[ch], ch, start_line, start_col)

        if ch.isascii() and ch.isalpha():
            return self.read_name()

        raise ParseError(f"Unexpected character: {ch!r}", start_line, start_col)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source."""
        tokens = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens


class Parser:
    """
    Recursive-descent parser for terms.

    The parser keeps one token of lookahead. parse_term() consumes exactly
    one term, so repeated calls read consecutive terms from the same source.
    """

    def __init__(self, source: str):
        self.lexer = Lexer(source)
        self.current: Optional[Token] = None
        self.advance()

    def advance(self) -> Token:
        """Move to the next token."""
        prev = self.current
        self.current = self.lexer.next_token()
        return prev

    def expect(self, token_type: TokenType) -> Token:
        """Expect a specific token type."""
        if self.current.type != token_type:
            raise ParseError(
                f"Expected {token_type.name}, got {self.current.type.name}",
                self.current.line, self.current.col
            )
        return self.advance()

    def at_end(self) -> bool:
        """True when no tokens remain."""
        return self.current.type == TokenType.EOF

    def parse_term(self) -> Term:
        """
        Parse a single term starting at the current token.

        Raises:
            ParseError: On malformed input, or when the term is nested
                deeper than the interpreter recursion limit allows
        """
        token = self.current
        try:
            return self._parse_term()
        except RecursionError:
            raise ParseError("Term nested too deeply", token.line, token.col) from None

    def _parse_term(self) -> Term:
        token = self.current

        if token.type == TokenType.VARIABLE:
            self.advance()
            return Var(token.value)

        if token.type == TokenType.ATOM:
            return self.parse_atom_or_struct()

        raise ParseError(
            f"Unexpected token: {token.type.name}",
            token.line, token.col
        )

    def parse_atom_or_struct(self) -> Term:
        """Parse an atom or structure (atom with arguments)."""
        token = self.advance()
        name = token.value

        if self.current.type != TokenType.LPAREN:
            return Atom(name)

        self.advance()
        # Empty args: foo()
        if self.current.type == TokenType.RPAREN:
            self.advance()
            return Struct(name, ())
        args = self.parse_arg_list()
        self.expect(TokenType.RPAREN)
        return Struct(name, tuple(args))

    def parse_arg_list(self) -> list[Term]:
        """Parse comma-separated arguments inside parentheses."""
        args = [self._parse_term()]

        while self.current.type == TokenType.COMMA:
            self.advance()
            args.append(self._parse_term())

        return args


def parse_term(source: str) -> Term:
    """
    Parse a string into a Term.

    Args:
        source: Term syntax, e.g. "f(X, g(a))"

    Returns:
        The parsed Term

    Raises:
        ParseError: If parsing fails or input remains after the term
    """
    parser = Parser(source)
    term = parser.parse_term()

    # Check that we consumed all input
    if not parser.at_end():
        raise ParseError(
            f"Unexpected token after term: {parser.current.type.name}",
            parser.current.line, parser.current.col
        )

    return term


def parse_terms(source: str) -> list[Term]:
    """
    Parse whitespace-separated terms until end of input.

    Args:
        source: Zero or more terms, e.g. "f(X) g(Y, a)"

    Returns:
        List of parsed Terms, in source order
    """
    parser = Parser(source)
    terms = []

    while not parser.at_end():
        terms.append(parser.parse_term())

    return terms
