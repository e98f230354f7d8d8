"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- JsonNode: immutable dataclass representing a node in a parsed JSON document
- NumberLiteral: the source text of a JSON number
- ValueKind: StrEnum of the seven value kinds (Object, Array, String, Number, True, False, Null)
- TreeBuilder: converts any decoded JSON value into a JsonNode tree
- parse_document: parses JSON text into a JsonNode tree
"""

from json_equivalence.tree.builder import TreeBuilder
from json_equivalence.tree.nodes import JsonNode, NumberLiteral, ValueKind
from json_equivalence.tree.parser import parse_document
from json_equivalence.tree.paths import ROOT_PATH

__all__ = [
    "ROOT_PATH",
    "JsonNode",
    "NumberLiteral",
    "TreeBuilder",
    "ValueKind",
    "parse_document",
]
