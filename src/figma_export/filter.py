"""Name pattern matching for ``--filter``."""
from __future__ import annotations

import fnmatch
from typing import Protocol


class NamePatternMatcher(Protocol):
    """Decides whether an asset name is selected by a filter expression."""

    def match(self, name: str) -> bool: ...


class AssetsFilter:
    """Comma separated list of wildcard patterns.

    ``"colors/*, background?"`` matches ``colors/primary`` and
    ``background1``. Matching is case-sensitive.
    """

    def __init__(self, filter: str) -> None:
        self.patterns = tuple(p.strip() for p in filter.split(",") if p.strip())

    def match(self, name: str) -> bool:
        return any(fnmatch.fnmatchcase(name, pattern) for pattern in self.patterns)

    def __repr__(self) -> str:
        return f"AssetsFilter({', '.join(self.patterns)!r})"
