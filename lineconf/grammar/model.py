"""
Parsed representation of a configuration document.

Every class here is a frozen dataclass: parsing builds them once and nothing
mutates them afterwards.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from ..const import DEFAULT_FILENAME


@dataclass(frozen=True)
class IntValue:
    """Signed 64-bit integer literal, e.g. ``-42``."""

    value: int


@dataclass(frozen=True)
class StrValue:
    """Quoted (``"John Doe"``) or bare alphanumeric (``b``) string."""

    value: str


@dataclass(frozen=True)
class BoolValue:
    """``true`` or ``false``."""

    value: bool


Value = IntValue | StrValue | BoolValue


@dataclass(frozen=True)
class Comment:
    """
    A ``#`` line.

    Examples:
        # Hello world  -> Comment(text=" Hello world")
        #Hello         -> Comment(text="Hello")
    """

    text: str


@dataclass(frozen=True)
class Assignment:
    """
    A key bound to a typed value.

    Examples:
        a=b              -> Assignment(key="a", value=StrValue("b"))
        count=-42        -> Assignment(key="count", value=IntValue(-42))
        name="John Doe"  -> Assignment(key="name", value=StrValue("John Doe"))
    """

    key: str
    value: Value


Statement = Comment | Assignment


@dataclass(frozen=True)
class Document:
    """
    Ordered statements of a parsed text, one per source line.

    Keys may repeat; every assignment is kept in source order and the lookup
    helpers below never merge them.
    """

    statements: tuple[Statement, ...] = ()
    filename: str = DEFAULT_FILENAME
    consumed: int = 0  # offset parsing stopped at

    def __repr__(self) -> str:
        return f"Document({self.filename!r}, statements={len(self.statements)})"

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index: int) -> Statement:
        return self.statements[index]

    def assignments(self) -> list[Assignment]:
        """All assignments in source order."""
        return [s for s in self.statements if isinstance(s, Assignment)]

    def comments(self) -> list[Comment]:
        """All comments in source order."""
        return [s for s in self.statements if isinstance(s, Comment)]

    def keys(self) -> list[str]:
        """Assigned keys in source order, repeats included."""
        return [a.key for a in self.assignments()]

    def get_assignment(self, key: str) -> Assignment | None:
        """Get first assignment with given key."""
        for assignment in self.assignments():
            if assignment.key == key:
                return assignment
        return None

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get the plain Python value of the first assignment to key."""
        assignment = self.get_assignment(key)
        if assignment is None:
            return default
        return assignment.value.value

    def get_all_values(self, key: str) -> list[Any]:
        """
        Get plain values of every assignment to key.

        Useful for keys that are repeated on purpose:
            path=usr
            path=opt
        Returns: ["usr", "opt"]
        """
        return [a.value.value for a in self.assignments() if a.key == key]
