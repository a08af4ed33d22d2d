"""
Recursive descent parser for the line-oriented key/value configuration syntax.

Each grammar rule is a method of StatementParser consuming characters from a
shared Cursor. Ordered alternatives are tried one after another, rewinding
the cursor after each failed attempt; the first alternative that matches
wins and is never revisited.
"""

from dataclasses import dataclass
from typing import Callable, TypeVar

from ..const import (
    ASSIGN,
    BOOLEAN_LITERALS,
    COMMENT_MARKER,
    DEFAULT_FILENAME,
    INT64_MAX,
    INT64_MIN,
    MINUS,
    NEWLINE,
    QUOTE,
)
from ..logging import get_logger
from .charclass import is_alphanumeric, is_white_space
from .cursor import ConfigSyntaxError, Cursor, ParseError
from .model import (
    Assignment,
    BoolValue,
    Comment,
    Document,
    IntValue,
    Statement,
    StrValue,
    Value,
)

logger = get_logger("grammar")

T = TypeVar("T")

# Longest digit run (leading zeros aside) that can still fit in 64 bits
_MAX_DIGITS = len(str(INT64_MAX))


@dataclass
class ParserOptions:
    """Document-level parsing switches."""

    # Unconsumed input after the last statement is an error
    require_full_consumption: bool = True
    # Accept and consume a single "\n" at the very end of the input
    allow_trailing_newline: bool = False


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_key_char(char: str) -> bool:
    return not is_white_space(char) and char != ASSIGN


def _is_space(char: str) -> bool:
    return char == " "


class StatementParser:
    """
    Recursive descent parser for key/value configuration text.

    Grammar:
        document    := statement (NEWLINE statement)*
        statement   := comment | assignment
        comment     := '#' any_char_except_newline*
        assignment  := ' '* key '=' value ' '*
        key         := (not_whitespace_not_equals)+
        value       := dquoted | integer | boolean | free_string
        dquoted     := '"' any_char_except_dquote* '"'
        integer     := '-'? digit+
        boolean     := 'true' | 'false'
        free_string := alphanumeric*

    Rules raise ConfigSyntaxError to signal a failed match. Only ``parse``
    and ``parse_rule`` turn that into an error for the caller, picking the
    furthest failure recorded by the cursor.
    """

    def __init__(
        self,
        source: str,
        filename: str = DEFAULT_FILENAME,
        options: ParserOptions | None = None,
    ):
        self.cursor = Cursor(source, filename)
        self.filename = filename
        self.options = options or ParserOptions()

    def _attempt(self, rule: Callable[[], T]) -> T | None:
        """Run rule, rewinding and returning None if it does not match."""
        start = self.cursor.pos
        try:
            return rule()
        except ConfigSyntaxError:
            self.cursor.reset(start)
            return None

    def _choice(self, *alternatives: Callable[[], T]) -> T:
        """Return the result of the first matching alternative."""
        for rule in alternatives:
            result = self._attempt(rule)
            if result is not None:
                return result
        raise self.cursor.error()

    # Values

    def value(self) -> Value:
        """Parse one value; quoting wins over numbers, numbers over booleans."""
        return self._choice(
            self._quoted_string,
            self._integer,
            self._boolean,
            self._free_string,
        )

    def _quoted_string(self) -> StrValue:
        self.cursor.expect(QUOTE)
        body = self.cursor.take_while(lambda c: c != QUOTE)
        if self.cursor.at_end():
            raise self.cursor.fail((repr(QUOTE),), reason="unterminated string")
        self.cursor.advance()
        return StrValue(body)

    def _integer(self) -> IntValue:
        start = self.cursor.pos
        negative = self.cursor.match(MINUS)
        digits = self.cursor.take_while(_is_digit)
        if not digits:
            raise self.cursor.fail(("digit",))

        literal = self.cursor.source[start:self.cursor.pos]
        if len(digits.lstrip("0")) > _MAX_DIGITS:
            raise self.cursor.overflow(literal, start)

        number = -int(digits) if negative else int(digits)
        if not INT64_MIN <= number <= INT64_MAX:
            raise self.cursor.overflow(literal, start)
        return IntValue(number)

    def _boolean(self) -> BoolValue:
        for literal, flag in BOOLEAN_LITERALS:
            if self.cursor.match(literal):
                return BoolValue(flag)
        raise self.cursor.fail(tuple(repr(literal) for literal, _ in BOOLEAN_LITERALS))

    def _free_string(self) -> StrValue:
        return StrValue(self.cursor.take_while(is_alphanumeric))

    # Statements

    def assignment(self) -> Assignment:
        """Parse ``key=value`` with optional surrounding spaces."""
        self.cursor.take_while(_is_space)

        key = self.cursor.take_while(_is_key_char)
        if not key:
            raise self.cursor.fail(("key",))

        self.cursor.expect(ASSIGN)
        value = self.value()
        self.cursor.take_while(_is_space)

        return Assignment(key=key, value=value)

    def comment(self) -> Comment:
        """Parse ``#`` and the rest of the line, kept verbatim."""
        self.cursor.expect(COMMENT_MARKER)
        return Comment(self.cursor.take_while(lambda c: c != NEWLINE))

    def statement(self) -> Statement:
        return self._choice(self.comment, self.assignment)

    def document(self) -> Document:
        """Parse newline-separated statements."""
        statements: list[Statement] = []

        first = self._attempt(self.statement)
        if first is not None:
            statements.append(first)
            while True:
                mark = self.cursor.pos
                if not self.cursor.match(NEWLINE):
                    break
                statement = self._attempt(self.statement)
                if statement is None:
                    # Leave the separator for the end-of-input check
                    self.cursor.reset(mark)
                    break
                statements.append(statement)

        if (
            self.options.allow_trailing_newline
            and self.cursor.current() == NEWLINE
            and self.cursor.peek() == ""
        ):
            self.cursor.advance()

        if self.options.require_full_consumption and not self.cursor.at_end():
            self.cursor.fail((repr(NEWLINE), "end of input"))
            raise self.cursor.error()

        return Document(
            statements=tuple(statements),
            filename=self.filename,
            consumed=self.cursor.pos,
        )

    # Entry points

    def parse(self) -> Document:
        """Parse the entire source as a document."""
        try:
            document = self.document()
        except ParseError as e:
            logger.debug("Failed to parse %s: %s", self.filename, e)
            raise

        logger.debug(
            "Parsed %d statement(s) from %s (%d/%d characters)",
            len(document),
            self.filename,
            document.consumed,
            len(self.cursor.source),
        )
        return document

    def parse_rule(self, rule: Callable[[], T]) -> T:
        """
        Run a single rule over the whole source.

        Args:
            rule: One of this parser's rule methods, e.g. ``parser.value``

        Returns:
            The rule's result

        Raises:
            ConfigSyntaxError: If the rule fails or leaves input unconsumed
            IntegerOverflowError: If an integer literal is out of range
        """
        try:
            result = rule()
        except ConfigSyntaxError:
            raise self.cursor.error() from None

        if not self.cursor.at_end():
            self.cursor.fail(("end of input",))
            raise self.cursor.error()

        return result


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    filename: str = DEFAULT_FILENAME,
) -> Document:
    """
    Parse configuration text into a Document.

    Args:
        text: Configuration source text
        options: Document-level switches (defaults if None)
        filename: Name used in error messages

    Returns:
        Parsed Document

    Raises:
        ConfigSyntaxError: At the first point the text does not match
        IntegerOverflowError: If an integer literal is out of range
    """
    return StatementParser(text, filename, options).parse()


def parse_statement(text: str) -> Statement:
    """Parse a single comment or assignment line."""
    parser = StatementParser(text)
    return parser.parse_rule(parser.statement)


def parse_assignment(text: str) -> Assignment:
    """Parse a single ``key=value`` line."""
    parser = StatementParser(text)
    return parser.parse_rule(parser.assignment)


def parse_comment(text: str) -> str:
    """Parse a ``#`` line and return its body."""
    parser = StatementParser(text)
    return parser.parse_rule(parser.comment).text


def parse_value(text: str) -> Value:
    """Parse a single value literal."""
    parser = StatementParser(text)
    return parser.parse_rule(parser.value)
