#!/usr/bin/env python3
"""
Token Dump Schemas

Validation models for the JSON token dumps produced by an external
tokenizer.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..domain import FileData, Identifier, IdentifierType, Position, StringLiteral


class PositionModel(BaseModel):
    """
    Location of a token in its source file.

    Accepts either an object with row/col keys or a two-element [row, col]
    array.
    """

    row: int = Field(..., ge=0, description="Line number of the token")
    col: int = Field(..., ge=0, description="Column of the token")

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ValueError("position must be [row, col]")
            return {"row": value[0], "col": value[1]}
        return value

    def to_domain(self) -> Position:
        return Position(row=self.row, col=self.col)


class StringLiteralModel(BaseModel):
    """String literal token; value is the parsed literal content."""

    value: str = Field(..., description="Parsed value of the literal")
    raw: str = Field("", description="Literal as written in the source")
    pos: PositionModel | None = Field(None, description="Position of the literal")

    @field_validator("pos", mode="before")
    @classmethod
    def validate_pos(cls, v: Any) -> Any:
        return PositionModel.coerce(v)

    def to_domain(self) -> StringLiteral:
        return StringLiteral(
            value=self.value,
            raw=self.raw,
            pos=self.pos.to_domain() if self.pos else None,
        )


class IdentifierModel(BaseModel):
    """Identifier token."""

    name: str = Field(..., description="Identifier name")
    type: str = Field(IdentifierType.UNKNOWN.value, description="Syntactic role of the identifier")
    pos: PositionModel | None = Field(None, description="Position of the identifier")

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> str:
        """Unknown identifier types are kept as 'unknown'"""
        return IdentifierType.parse(v if isinstance(v, str) else None).value

    @field_validator("pos", mode="before")
    @classmethod
    def validate_pos(cls, v: Any) -> Any:
        return PositionModel.coerce(v)

    def to_domain(self) -> Identifier:
        return Identifier(
            name=self.name,
            type=IdentifierType(self.type),
            pos=self.pos.to_domain() if self.pos else None,
        )


class FileDataModel(BaseModel):
    """
    Symbols extracted from a single source file.

    Example:
        >>> dump = FileDataModel(
        ...     string_literals=[{"value": "hello"}],
        ...     identifiers=[{"name": "_0x1234", "type": "variable"}],
        ... )
        >>> dump.to_domain().identifier_names()
        ['_0x1234']
    """

    string_literals: list[StringLiteralModel] = Field(default_factory=list)
    identifiers: list[IdentifierModel] = Field(default_factory=list)

    def to_domain(self) -> FileData:
        return FileData(
            string_literals=[literal.to_domain() for literal in self.string_literals],
            identifiers=[identifier.to_domain() for identifier in self.identifiers],
        )
