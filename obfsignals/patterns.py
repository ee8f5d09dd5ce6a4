#!/usr/bin/env python3
"""
Pattern rules for suspicious identifiers and embedded base64 data

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Protocol


class IdentifierMatcher(Protocol):
    """Anything that can tell whether an identifier name looks suspicious."""

    def matches(self, name: str) -> bool: ...


class RegexRule:
    """Identifier rule that must match the whole name."""

    def __init__(self, pattern: str):
        self.pattern = re.compile(pattern, re.ASCII)

    def matches(self, name: str) -> bool:
        return self.pattern.fullmatch(name) is not None

    def __repr__(self) -> str:
        return f"RegexRule({self.pattern.pattern!r})"


SUSPICIOUS_IDENTIFIER_RULES: Mapping[str, IdentifierMatcher] = MappingProxyType(
    {
        # minifier-style names such as _0x1f2a
        "hex": RegexRule(r"_0x\d{3,}"),
        "numeric": RegexRule(r"[A-Za-z_]?\d{3,}"),
    }
)

# Adapted from https://stackoverflow.com/a/5885097 to only match
# base64 strings with at least 12 characters
LONG_BASE64_STRING = re.compile(
    r"(?:[A-Za-z0-9+/]{4}){3,}(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})"
)

DIGIT = re.compile(r"[0-9]")
NON_HEX_LETTER = re.compile(r"[G-Zg-z]")


def find_suspicious_identifiers(
    names: Iterable[str],
    rules: Mapping[str, IdentifierMatcher] = SUSPICIOUS_IDENTIFIER_RULES,
) -> dict[str, list[str]]:
    """Map every rule name to the names it matches, in input order."""
    names = list(names)
    return {
        rule_name: [name for name in names if rule.matches(name)]
        for rule_name, rule in rules.items()
    }


def looks_encoded(candidate: str) -> bool:
    """Reject long words, hex strings and paths that only look like base64."""
    return DIGIT.search(candidate) is not None and NON_HEX_LETTER.search(candidate) is not None


def base64_candidates(literal: str) -> list[str]:
    return LONG_BASE64_STRING.findall(literal)


def find_base64_strings(literals: Iterable[str], strict: bool = False) -> list[str]:
    """
    Collect base64-like substrings from string literals.

    By default every candidate of a literal is reported once for each of
    its candidates that passes looks_encoded(), so a literal with two
    passing candidates contributes its full candidate list twice. With
    strict=True only the passing candidates are reported, once each.
    """
    found: list[str] = []
    for literal in literals:
        candidates = base64_candidates(literal)
        if strict:
            found.extend(c for c in candidates if looks_encoded(c))
        else:
            for candidate in candidates:
                if looks_encoded(candidate):
                    found.extend(candidates)
    return found
