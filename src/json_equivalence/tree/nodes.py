"""JsonNode dataclass and ValueKind StrEnum for parsed JSON documents.

Every node knows its own location path within its root document, so the
comparator can tag issues without threading paths through its recursion.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Mapping

_EMPTY_MEMBERS: Mapping[str, JsonNode] = MappingProxyType({})


class ValueKind(StrEnum):
    """The value kind of a JSON node.

    Booleans are split into ``TRUE`` and ``FALSE`` so that ``true`` vs
    ``false`` is reported as a kind mismatch.  Values are the names shown
    in issue messages, e.g. ``Expected true (True) but got 1 (Number)``.
    """

    OBJECT = "Object"
    ARRAY = "Array"
    STRING = "String"
    NUMBER = "Number"
    TRUE = "True"
    FALSE = "False"
    NULL = "Null"


@dataclass(frozen=True, slots=True)
class JsonNode:
    """An immutable node in a parsed JSON document.

    Attributes:
        kind:     Which kind of value this node holds (see ValueKind).
        path:     Location within the root document, e.g. ``$.data[0].id``.
        label:    Single-line display text used in issue messages.
        value:    The decoded Python value for scalar nodes; None for
                  containers and for JSON null.
        items:    Element nodes of an ARRAY, in document order.
        members:  Member nodes of an OBJECT, in document order.
    """

    kind: ValueKind
    path: str
    label: str
    value: Any = None
    items: tuple[JsonNode, ...] = ()
    members: Mapping[str, JsonNode] = field(default_factory=lambda: _EMPTY_MEMBERS)

    def has(self, key: str) -> bool:
        """Return True if this OBJECT node has a member named ``key``."""
        return key in self.members

    def get(self, key: str) -> JsonNode | None:
        """Return the member node named ``key``, or None when absent."""
        return self.members.get(key)


@dataclass(frozen=True, slots=True)
class NumberLiteral:
    """The source text of a JSON number, as handed over by the decoder.

    Keeping the text lets issue messages show numbers exactly as written
    (``1e2`` rather than ``100.0``) and lets values that do not fit a Python
    ``int`` or a finite double keep their exact magnitude.
    """

    text: str

    @property
    def is_integer(self) -> bool:
        return not any(ch in self.text for ch in ".eE")

    def to_number(self) -> int | float | Decimal:
        """Return the numeric value of the literal.

        Integer literals become ``int``, unless they are longer than the
        interpreter's integer string conversion limit. Other literals become
        ``float`` when finite. Everything else is an exact ``Decimal``.
        """
        if self.is_integer:
            limit = sys.get_int_max_str_digits()
            if limit == 0 or len(self.text.lstrip("-")) <= limit:
                return int(self.text)
            return Decimal(self.text)

        value = float(self.text)
        if math.isfinite(value):
            return value
        return Decimal(self.text)
