#!/usr/bin/env python3
"""
obfsignals - Heuristic obfuscation signals from source code tokens

Computes entropy, length and pattern-based signals from the string
literals and identifier names of a source file.

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __author_email__, __license__, __url__, __version__

__description__ = "Heuristic obfuscation signals from source code tokens"

from .domain import FileData, FileSignals, Identifier, IdentifierType, Position, StringLiteral
from .patterns import SUSPICIOUS_IDENTIFIER_RULES
from .signals import compute_signals, no_signals, remove_nans
from .stats import SampleStatistics, no_data, summarise

__all__ = [
    "FileData",
    "FileSignals",
    "Identifier",
    "IdentifierType",
    "Position",
    "SampleStatistics",
    "StringLiteral",
    "SUSPICIOUS_IDENTIFIER_RULES",
    "compute_signals",
    "no_data",
    "no_signals",
    "remove_nans",
    "summarise",
    "__version__",
    "__author__",
    "__author_email__",
    "__license__",
    "__url__",
    "__description__",
]
