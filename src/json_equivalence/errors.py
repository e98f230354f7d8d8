"""Errors raised by json-equivalence.

``EquivalenceError`` is the aggregated failure raised when an actual document
does not satisfy an expected one. ``MalformedJsonError`` is the standard
library's ``json.JSONDecodeError``, re-exported so callers can catch parse
failures without importing ``json``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from json_equivalence.issue import Issue

__all__ = ["EquivalenceError", "MalformedJsonError"]

MalformedJsonError = json.JSONDecodeError


class EquivalenceError(AssertionError):
    """One or more mismatches between an actual and an expected document.

    Subclasses ``AssertionError`` so test runners report it as a test failure
    rather than an error. The message is every issue's rendered line, in
    discovery order, joined by a single newline.

    Attributes:
        issues: The issues that caused the failure, in discovery order.
    """

    def __init__(self, issues: Iterable[Issue]) -> None:
        self.issues: tuple[Issue, ...] = tuple(issues)
        if not self.issues:
            raise ValueError("EquivalenceError requires at least one issue")
        super().__init__("\n".join(issue.render() for issue in self.issues))
