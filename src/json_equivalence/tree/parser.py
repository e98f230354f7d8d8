"""Parse JSON text into a JsonNode tree.

Decoding is delegated to the standard ``json`` module; malformed text raises
``json.JSONDecodeError`` unchanged. The non-standard constants ``NaN``,
``Infinity`` and ``-Infinity`` that ``json`` accepts by default are rejected
so that only documents conforming to the JSON grammar parse.

Numbers are decoded as ``NumberLiteral`` tokens: the text as written is
kept for messages, and no literal can trip the interpreter's integer
string conversion limit or silently overflow to ``inf``.
"""

from __future__ import annotations

import json
import logging
from typing import NoReturn

from json_equivalence.tree.builder import TreeBuilder
from json_equivalence.tree.nodes import JsonNode, NumberLiteral

logger = logging.getLogger(__name__)

_builder = TreeBuilder()


def _decode(text: str | bytes | bytearray) -> str:
    if isinstance(text, (bytes, bytearray)):
        # json.detect_encoding handles UTF-8, UTF-16 and UTF-32 with or without BOM
        return text.decode(json.detect_encoding(text), "surrogatepass")
    return text


def parse_document(text: str | bytes | bytearray) -> JsonNode:
    """Parse a JSON document and return its root node.

    Args:
        text: The JSON document. ``bytes`` input is decoded as UTF-8, UTF-16
              or UTF-32 according to its leading bytes.

    Returns:
        The root JsonNode with location paths stamped on every node.

    Raises:
        json.JSONDecodeError: If the text is empty, whitespace only, or does
            not conform to the JSON grammar.
    """
    document = _decode(text)

    def reject_constant(name: str) -> NoReturn:
        raise json.JSONDecodeError(
            f"Invalid JSON constant {name!r}", document, document.find(name)
        )

    value = json.loads(
        document,
        parse_int=NumberLiteral,
        parse_float=NumberLiteral,
        parse_constant=reject_constant,
    )
    logger.debug("Parsed JSON document of %d characters", len(document))
    return _builder.build(value)
