"""
Character cursor over configuration source text, and the parse error types.

The cursor is the only mutable state of a parse. Rules read and consume
characters through it, rewind it when an alternative fails, and report
failures to it. It keeps the failure with the furthest offset, merging the
expectations of alternatives that gave up at the same position, so the
error finally raised describes the first point the input could not be
matched.
"""

from typing import Callable

from ..const import DEFAULT_FILENAME


class ParseError(Exception):
    """Base exception for all parse failures."""

    def __init__(
        self,
        message: str,
        offset: int,
        line: int,
        column: int,
        filename: str = DEFAULT_FILENAME,
    ):
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(f"{filename}: Line {line}, column {column}: {message}")


class ConfigSyntaxError(ParseError):
    """
    The input does not match the grammar.

    Attributes:
        expected: Human-readable descriptions of what would have matched
        found: The offending character, or None at end of input
        reason: Specific explanation overriding the generic message
    """

    def __init__(
        self,
        expected: tuple[str, ...],
        found: str | None,
        offset: int,
        line: int,
        column: int,
        filename: str = DEFAULT_FILENAME,
        reason: str | None = None,
    ):
        self.expected = expected
        self.found = found
        self.reason = reason
        super().__init__(
            reason or _describe(expected, found),
            offset,
            line,
            column,
            filename,
        )


class IntegerOverflowError(ParseError):
    """An integer literal does not fit in a signed 64-bit integer."""

    def __init__(self, literal: str, offset: int, line: int, column: int, filename: str = DEFAULT_FILENAME):
        self.literal = literal
        super().__init__(
            f"integer {literal} is out of the signed 64-bit range",
            offset,
            line,
            column,
            filename,
        )


def _describe(expected: tuple[str, ...], found: str | None) -> str:
    if not expected:
        wanted = "nothing"
    elif len(expected) == 1:
        wanted = expected[0]
    else:
        wanted = ", ".join(expected[:-1]) + f" or {expected[-1]}"
    return f"expected {wanted}, found {_show(found)}"


def _show(char: str | None) -> str:
    if char is None:
        return "end of input"
    return repr(char)


class Cursor:
    """
    Position within a source string.

    Offsets are 0-based character indexes; lines and columns reported in
    errors are 1-based.
    """

    def __init__(self, source: str, filename: str = DEFAULT_FILENAME):
        self.source = source
        self.filename = filename
        self.pos = 0
        self._failure: ConfigSyntaxError | None = None

    def __repr__(self) -> str:
        return f"Cursor({self.filename!r}, pos={self.pos})"

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str:
        """Peek at character at offset from current position."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def advance(self) -> str:
        """Advance position and return the consumed character."""
        char = self.current()
        if char:
            self.pos += 1
        return char

    def reset(self, pos: int) -> None:
        """Rewind (or fast-forward) to an earlier mark."""
        self.pos = pos

    def match(self, literal: str) -> bool:
        """Consume literal if the input continues with it."""
        if self.source.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def expect(self, literal: str) -> None:
        """Consume literal or fail with it as the expectation."""
        if not self.match(literal):
            raise self.fail((repr(literal),))

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        """Consume the longest run of characters satisfying predicate."""
        start = self.pos
        source = self.source
        end = len(source)
        pos = start
        while pos < end and predicate(source[pos]):
            pos += 1
        self.pos = pos
        return source[start:pos]

    def location(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of an offset."""
        line = self.source.count("\n", 0, offset) + 1
        line_start = self.source.rfind("\n", 0, offset) + 1
        return line, offset - line_start + 1

    def fail(
        self,
        expected: tuple[str, ...],
        offset: int | None = None,
        reason: str | None = None,
    ) -> ConfigSyntaxError:
        """
        Record a failed expectation and return the error describing it.

        The returned error is meant to be raised by the calling rule; the
        cursor separately remembers the furthest failure seen so far, which
        is what ``error()`` hands back once every alternative is exhausted.
        """
        if offset is None:
            offset = self.pos
        found = self.source[offset] if offset < len(self.source) else None
        line, column = self.location(offset)
        error = ConfigSyntaxError(expected, found, offset, line, column, self.filename, reason)

        previous = self._failure
        if previous is None or offset > previous.offset:
            self._failure = error
        elif offset == previous.offset:
            merged = previous.expected + tuple(e for e in expected if e not in previous.expected)
            self._failure = ConfigSyntaxError(
                merged,
                found,
                offset,
                line,
                column,
                self.filename,
                previous.reason or reason,
            )
        return error

    def overflow(self, literal: str, offset: int) -> IntegerOverflowError:
        line, column = self.location(offset)
        return IntegerOverflowError(literal, offset, line, column, self.filename)

    def error(self) -> ConfigSyntaxError:
        """Return the furthest recorded failure."""
        if self._failure is None:
            return self.fail(("end of input",))
        return self._failure
