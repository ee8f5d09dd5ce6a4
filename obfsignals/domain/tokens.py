"""Tokens extracted from a source file by an external tokenizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class IdentifierType(Enum):
    """Syntactic role of an identifier."""

    FUNCTION = "function"
    VARIABLE = "variable"
    PARAMETER = "parameter"
    CLASS = "class"
    MEMBER = "member"
    PROPERTY = "property"
    STATEMENT_LABEL = "statement_label"
    OTHER = "other"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> IdentifierType:
        """Return the matching type, or UNKNOWN for anything unrecognised."""
        if value is None:
            return cls.UNKNOWN
        try:
            return cls(value.lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Position:
    row: int
    col: int


@dataclass(frozen=True)
class StringLiteral:
    """A string literal; value is the parsed content, raw the source text."""

    value: str
    raw: str = ""
    pos: Position | None = None


@dataclass(frozen=True)
class Identifier:
    name: str
    type: IdentifierType = IdentifierType.UNKNOWN
    pos: Position | None = None


@dataclass
class FileData:
    """Symbols collected from a single source file."""

    string_literals: list[StringLiteral] = field(default_factory=list)
    identifiers: list[Identifier] = field(default_factory=list)

    def literal_values(self) -> list[str]:
        return [literal.value for literal in self.string_literals]

    def identifier_names(self) -> list[str]:
        return [identifier.name for identifier in self.identifiers]
