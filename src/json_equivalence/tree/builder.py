"""TreeBuilder: converts any decoded JSON value into an immutable JsonNode tree.

Uses recursive dispatch to convert JSON dicts, lists, and scalar values into
JsonNode objects. Every node is stamped with its location path during
traversal:

- Root is ``$``
- Object members append ``.key`` (or ``['key']`` for keys that need quoting)
- Array elements append ``[index]``
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from json_equivalence.tree.nodes import JsonNode, NumberLiteral, ValueKind
from json_equivalence.tree.paths import ROOT_PATH, index_path, member_path, single_line

# Type alias for valid JSON values
JsonValue = (
    dict[str, Any] | list[Any] | str | int | float | bool | NumberLiteral | None
)


def _json_text(node: JsonNode) -> str:
    """Return ``node`` as it appears inside a container label."""
    if node.kind is ValueKind.STRING:
        # json.dumps escapes control characters, so the result is one line
        return json.dumps(node.value, ensure_ascii=False)
    return node.label


@dataclass
class TreeBuilder:
    """Converts any decoded JSON value into a JsonNode tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Labels:
        Strings are shown unquoted, ``true``/``false``/``null`` in lowercase,
        numbers as written in the document (``NumberLiteral``) or via
        ``str()`` for decoded Python numbers, and containers as compact JSON.
        Line breaks are escaped so every label fits on one line.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"data": [1, 2]})
        # tree: OBJECT($) -> ARRAY($.data) -> NUMBER($.data[0]), NUMBER($.data[1])
    """

    def build(self, value: JsonValue, path: str = ROOT_PATH) -> JsonNode:
        """Convert a JSON value to a JsonNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool,
                   NumberLiteral, None).
            path:  Location path of this node. Defaults to ``$`` (root).

        Returns:
            A JsonNode tree rooted at the appropriate value kind.

        Raises:
            TypeError: If value (or anything nested in it) is not a valid JSON type.
        """
        # CRITICAL: bool MUST be checked before int
        if isinstance(value, bool):
            if value:
                return JsonNode(ValueKind.TRUE, path, "true", value=True)
            return JsonNode(ValueKind.FALSE, path, "false", value=False)

        if isinstance(value, dict):
            return self._build_object(value, path)

        if isinstance(value, list):
            return self._build_array(value, path)

        if isinstance(value, str):
            return JsonNode(ValueKind.STRING, path, single_line(value), value=value)

        if isinstance(value, NumberLiteral):
            return JsonNode(ValueKind.NUMBER, path, value.text, value=value.to_number())

        if isinstance(value, (int, float)):
            return JsonNode(ValueKind.NUMBER, path, str(value), value=value)

        if value is None:
            return JsonNode(ValueKind.NULL, path, "null")

        raise TypeError(f"Unsupported JSON value type at {path}: {type(value)!r}")

    def _build_object(self, obj: dict[str, Any], path: str) -> JsonNode:
        members: dict[str, JsonNode] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"Unsupported JSON object key at {path}: {key!r} is not a str"
                )
            members[key] = self.build(val, path=member_path(path, key))

        label = ", ".join(
            f"{json.dumps(key, ensure_ascii=False)}: {_json_text(member)}"
            for key, member in members.items()
        )
        return JsonNode(
            ValueKind.OBJECT,
            path,
            f"{{{label}}}",
            members=MappingProxyType(members),
        )

    def _build_array(self, arr: list[Any], path: str) -> JsonNode:
        items = tuple(
            self.build(item, path=index_path(path, idx)) for idx, item in enumerate(arr)
        )
        label = ", ".join(_json_text(item) for item in items)
        return JsonNode(ValueKind.ARRAY, path, f"[{label}]", items=items)
