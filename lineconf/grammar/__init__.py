"""
Grammar for line-oriented key/value configuration text.
"""

from .cursor import ConfigSyntaxError, Cursor, IntegerOverflowError, ParseError
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
from .parser import (
    ParserOptions,
    StatementParser,
    parse_assignment,
    parse_comment,
    parse_document,
    parse_statement,
    parse_value,
)

__all__ = [
    "Assignment",
    "BoolValue",
    "Comment",
    "ConfigSyntaxError",
    "Cursor",
    "Document",
    "IntValue",
    "IntegerOverflowError",
    "ParseError",
    "ParserOptions",
    "Statement",
    "StatementParser",
    "StrValue",
    "Value",
    "parse_assignment",
    "parse_comment",
    "parse_document",
    "parse_statement",
    "parse_value",
]
