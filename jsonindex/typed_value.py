"""Typed result wrapper returned by index accessors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Literal

from jsonindex.value_model import JsonNode

ValueKind = Literal["null", "scalar", "node"]


@dataclass(frozen=True)
class TypedValue:
    """Result of an index read, tagged as null, decoded scalar or raw node."""

    value: Any
    kind: ValueKind

    NULL: ClassVar["TypedValue"]

    @classmethod
    def scalar(cls, value: Any) -> "TypedValue":
        return cls(value=value, kind="scalar")

    @classmethod
    def node(cls, node: JsonNode) -> "TypedValue":
        return cls(value=node, kind="node")

    @property
    def is_null(self) -> bool:
        return self.kind == "null"

    @property
    def is_node(self) -> bool:
        return self.kind == "node"

    def to_json_native(self) -> Any:
        if isinstance(self.value, JsonNode):
            return self.value.to_json_native()
        return self.value


TypedValue.NULL = TypedValue(value=None, kind="null")
