"""
Parser for a small line-oriented key/value configuration format.
"""

from .const import APP_VERSION as __version__
from .grammar import (
    Assignment,
    BoolValue,
    Comment,
    ConfigSyntaxError,
    Document,
    IntValue,
    IntegerOverflowError,
    ParseError,
    ParserOptions,
    Statement,
    StrValue,
    Value,
    parse_assignment,
    parse_comment,
    parse_document,
    parse_statement,
    parse_value,
)

__all__ = [
    "__version__",
    "Assignment",
    "BoolValue",
    "Comment",
    "ConfigSyntaxError",
    "Document",
    "IntValue",
    "IntegerOverflowError",
    "ParseError",
    "ParserOptions",
    "Statement",
    "StrValue",
    "Value",
    "parse_assignment",
    "parse_comment",
    "parse_document",
    "parse_statement",
    "parse_value",
]
