"""EquivalenceComparator: recursive structural diff between two JsonNode trees.

The comparison is one-directional: ``actual`` must satisfy everything
``expected`` requires, while members present only in ``actual`` are ignored.

Architecture:
- compare() is a generator that walks both trees in lockstep and yields an
  Issue for every mismatch, in discovery order. It never stops at the first
  issue; only the subtree where a kind or value mismatch occurred is skipped.
- Arrays report a length mismatch once, then compare the overlapping prefix
  index by index. Indices past the shorter array are not compared.
- Objects are walked in the expected object's member order.
- Scalars are compared by scalars_equal().
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

import numpy as np

from json_equivalence.issue import Issue
from json_equivalence.tree.nodes import JsonNode, ValueKind

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["EquivalenceComparator", "scalars_equal"]

# Smallest positive double: two floats closer than this are equal.
_FLOAT_RESOLUTION = float(np.finfo(np.float64).smallest_subnormal)

_NUMBER_TYPES = (int, float, Decimal)


def _is_finite(value: int | float | Decimal) -> bool:
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def scalars_equal(actual: JsonNode, expected: JsonNode) -> bool:
    """Return True if two scalar nodes of the same kind hold equal values.

    Rules, in order:
    - strings: exact equality
    - booleans: exact equality
    - integers on both sides: arbitrary-precision integer equality
    - non-finite numbers (``inf``, ``nan``): never equal
    - either side a ``Decimal`` (a literal too long for ``int`` or out of
      double range): exact equality
    - any other pair of numbers: float equality, tolerating a difference
      below the smallest representable positive double (so ``2.0 == 2``
      and ``-0.0 == 0.0``)
    - null vs null: equal

    Anything that matches none of the rules is unequal.

    Args:
        actual:   Scalar node from the actual document.
        expected: Scalar node from the expected document.

    Returns:
        True when the values are equal under the rules above.
    """
    a, e = actual.value, expected.value

    if isinstance(a, str) and isinstance(e, str):
        return a == e

    # bool MUST be checked before int — bool subclasses int in Python
    if isinstance(a, bool) or isinstance(e, bool):
        return isinstance(a, bool) and isinstance(e, bool) and a == e

    if isinstance(a, int) and isinstance(e, int):
        return a == e

    if isinstance(a, _NUMBER_TYPES) and isinstance(e, _NUMBER_TYPES):
        if not (_is_finite(a) and _is_finite(e)):
            return False
        if isinstance(a, Decimal) or isinstance(e, Decimal):
            # beyond int or double range: exact comparison only
            return Decimal(a) == Decimal(e)
        try:
            fa, fe = float(a), float(e)
        except OverflowError:
            # an integer beyond double range cannot equal any finite float
            return False
        return fa == fe or abs(fa - fe) < _FLOAT_RESOLUTION

    if actual.kind is ValueKind.NULL and expected.kind is ValueKind.NULL:
        return True

    return False


class EquivalenceComparator:
    """Recursive tree-diff engine.

    Stateless: one instance may be shared freely, including across threads.

    Example::

        from json_equivalence.comparator import EquivalenceComparator
        from json_equivalence.tree import parse_document

        cmp = EquivalenceComparator()
        issues = list(cmp.compare(parse_document("[1, 2, 3]"), parse_document("[1, 2, 4]")))
        print(issues[0].render())   # Expected 4 (Number) but got 3 (Number) at $[2]
    """

    def compare(
        self, actual: JsonNode | None, expected: JsonNode | None
    ) -> Iterator[Issue]:
        """Yield every way ``actual`` fails to satisfy ``expected``.

        Args:
            actual:   Node from the actual document, or None when absent.
            expected: Node from the expected document, or None when absent.

        Yields:
            Issues in discovery order. Nothing is yielded for equivalent trees.
        """
        if actual is None and expected is None:
            return

        if actual is None or expected is None or actual.kind != expected.kind:
            yield Issue.different_values(actual, expected)
            return

        if expected.kind is ValueKind.ARRAY:
            yield from self._compare_arrays(actual, expected)
        elif expected.kind is ValueKind.OBJECT:
            yield from self._compare_objects(actual, expected)
        elif not scalars_equal(actual, expected):
            yield Issue.different_values(actual, expected)

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def _compare_arrays(self, actual: JsonNode, expected: JsonNode) -> Iterator[Issue]:
        if len(actual.items) != len(expected.items):
            yield Issue.different_array_lengths(actual, expected)

        # zip stops at the shorter array; indices past it are not compared
        for actual_item, expected_item in zip(actual.items, expected.items):
            yield from self.compare(actual_item, expected_item)

    def _compare_objects(self, actual: JsonNode, expected: JsonNode) -> Iterator[Issue]:
        for key, expected_value in expected.members.items():
            actual_value = actual.get(key)
            if actual_value is None:
                yield Issue.missing_key(key, expected)
            else:
                yield from self.compare(actual_value, expected_value)
