"""
Application constants and grammar metadata.
"""

# Application info
APP_NAME = "lineconf"
APP_VERSION = "0.1.0"

# Signed 64-bit integer range for integer values
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Grammar characters
COMMENT_MARKER = "#"
ASSIGN = "="
QUOTE = '"'
NEWLINE = "\n"
MINUS = "-"

# Literal -> value, tried in this order
BOOLEAN_LITERALS = (("true", True), ("false", False))

DEFAULT_FILENAME = "<string>"
