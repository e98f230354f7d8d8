"""Issue: one reported mismatch between an actual and an expected document.

Issues are only created through the construction helpers below, which own
the exact wording of every message template.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_equivalence.tree.nodes import JsonNode, ValueKind
from json_equivalence.tree.paths import is_root, single_line

__all__ = ["Issue"]


def _describe(node: JsonNode | None) -> str:
    if node is None:
        return f"null ({ValueKind.NULL})"
    return f"{node.label} ({node.kind})"


@dataclass(frozen=True, slots=True)
class Issue:
    """A single mismatch found while comparing two documents.

    Attributes:
        message: Human-readable description. Never contains a line break.
        path:    Location of the mismatch, ``$``-rooted. The root path (or an
                 empty path) is omitted from the rendered line.
    """

    message: str
    path: str

    @classmethod
    def different_values(cls, actual: JsonNode | None, expected: JsonNode | None) -> Issue:
        """Build an issue for two values of different kind or different content.

        The path is taken from ``expected`` when present, else from ``actual``.
        An absent side is described as ``null (Null)``.
        """
        if expected is not None:
            path = expected.path
        elif actual is not None:
            path = actual.path
        else:
            path = ""
        return cls(f"Expected {_describe(expected)} but got {_describe(actual)}", path)

    @classmethod
    def different_array_lengths(cls, actual: JsonNode, expected: JsonNode) -> Issue:
        """Build an issue for two arrays whose lengths differ."""
        return cls(
            f"Expected array of length {len(expected.items)} but got {len(actual.items)}",
            expected.path,
        )

    @classmethod
    def missing_key(cls, key: str, expected: JsonNode) -> Issue:
        """Build an issue for an expected object member that actual lacks."""
        return cls(f"key '{single_line(key)}' was not found", expected.path)

    def render(self) -> str:
        """Return the report line: the message, plus ``at <path>`` off the root."""
        if is_root(self.path):
            return self.message
        return f"{self.message} at {self.path}"

    def __str__(self) -> str:
        return self.render()
