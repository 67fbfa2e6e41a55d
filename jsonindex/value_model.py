"""In-memory JSON node tree consumed by index accessors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Mapping
import math

from jsonindex.error_msg import JsonIndexError, UnsupportedJsonValueError


class JsonNode(ABC):
    """Base node of a materialized JSON document."""

    node_type: str = "unknown"

    @property
    def is_value_node(self) -> bool:
        return False

    @property
    def is_container_node(self) -> bool:
        return False

    @property
    def is_null(self) -> bool:
        return False

    @abstractmethod
    def to_json_native(self) -> Any:
        """Return the plain Python value ``json.dumps`` accepts."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_json_native()!r})"


class ValueNode(JsonNode):
    """Leaf node holding a single scalar."""

    def __init__(self, raw: Any):
        self.raw = raw

    @property
    def is_value_node(self) -> bool:
        return True

    def to_json_native(self) -> Any:
        return self.raw

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.raw == other.raw  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))


class TextNode(ValueNode):
    node_type = "string"

    def __init__(self, raw: str):
        super().__init__(str(raw))


class IntNode(ValueNode):
    node_type = "integer"

    def __init__(self, raw: int):
        super().__init__(int(raw))


class FloatNode(ValueNode):
    node_type = "number"

    def __init__(self, raw: float):
        number = float(raw)
        if not math.isfinite(number):
            raise UnsupportedJsonValueError(raw, f"Non-finite number {raw!r} is not valid JSON")
        super().__init__(number)


class BooleanNode(ValueNode):
    node_type = "boolean"

    def __init__(self, raw: bool):
        super().__init__(bool(raw))


class NullNode(ValueNode):
    """Explicit JSON ``null``; a single shared instance."""

    node_type = "null"
    _instance: "NullNode | None" = None

    def __new__(cls) -> "NullNode":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        super().__init__(None)

    @property
    def is_null(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "NullNode"


NULL_NODE = NullNode()


class ArrayNode(JsonNode):
    """Ordered JSON array.

    ``get`` follows JSON semantics rather than Python list semantics: a
    negative or out-of-range position is simply absent.
    """

    node_type = "array"

    def __init__(self, items: Iterable[JsonNode] = ()):
        self._items: list[JsonNode] = list(items)

    @property
    def is_container_node(self) -> bool:
        return True

    def get(self, index: int) -> JsonNode | None:
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def size(self) -> int:
        return len(self._items)

    def add(self, node: JsonNode) -> "ArrayNode":
        self._items.append(node)
        return self

    def to_json_native(self) -> Any:
        return [item.to_json_native() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonNode]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayNode):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]


class ObjectNode(JsonNode):
    """JSON object with insertion-ordered string keys."""

    node_type = "object"

    def __init__(self, fields: Mapping[str, JsonNode] | None = None):
        self._fields: dict[str, JsonNode] = dict(fields or {})

    @property
    def is_container_node(self) -> bool:
        return True

    def get(self, name: str) -> JsonNode | None:
        return self._fields.get(name)

    def set(self, name: str, node: JsonNode) -> "ObjectNode":
        self._fields[name] = node
        return self

    def field_names(self) -> list[str]:
        return list(self._fields)

    def size(self) -> int:
        return len(self._fields)

    def to_json_native(self) -> Any:
        return {name: node.to_json_native() for name, node in self._fields.items()}

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectNode):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]


def node_from_native(value: Any) -> JsonNode:
    """Build a node tree from the plain values produced by ``json.loads``."""
    if isinstance(value, JsonNode):
        return value
    if value is None:
        return NULL_NODE
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BooleanNode(value)
    if isinstance(value, int):
        return IntNode(value)
    if isinstance(value, float):
        return FloatNode(value)
    if isinstance(value, str):
        return TextNode(value)
    if isinstance(value, (list, tuple)):
        return ArrayNode(node_from_native(item) for item in value)
    if isinstance(value, Mapping):
        fields: dict[str, JsonNode] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedJsonValueError(key, f"JSON object keys must be strings, got {key!r}")
            fields[key] = node_from_native(item)
        return ObjectNode(fields)
    raise UnsupportedJsonValueError(value)


def decode_value_node(node: JsonNode) -> Any:
    """Return the native scalar held by a value node."""
    if not node.is_value_node:
        raise JsonIndexError(f"Cannot decode container node of type '{node.node_type}' as a scalar")
    return node.to_json_native()
