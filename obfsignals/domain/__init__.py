"""Domain records for token input and signal output."""

from .results import FileSignals
from .tokens import FileData, Identifier, IdentifierType, Position, StringLiteral

__all__ = [
    "FileData",
    "FileSignals",
    "Identifier",
    "IdentifierType",
    "Position",
    "StringLiteral",
]
