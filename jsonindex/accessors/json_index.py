"""
Index accessor reading elements of JSON arrays.

Supports indexes given as an integer (``array[1]``) or as a string made only
of decimal digits (``array['1']``). Writes are never supported.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import logging
import re

from jsonindex.accessors.api import IndexAccessor
from jsonindex.error_msg import AccessException, UnsupportedOperationError
from jsonindex.typed_value import TypedValue
from jsonindex.value_model import ArrayNode, JsonNode, decode_value_node

if TYPE_CHECKING:
    from jsonindex.context import EvaluationContext

logger = logging.getLogger(__name__)

# Indexes are 32-bit signed integers; larger numeric strings fail on read.
MAX_INDEX = 2**31 - 1

_SUPPORTED_CLASSES: tuple[type, ...] = (ArrayNode,)
_NUMERIC_STRING = re.compile(r"[0-9]+")


def is_numeric_string(index: Any) -> bool:
    """Return True if *index* is a non-empty string of ASCII digits."""
    return isinstance(index, str) and _NUMERIC_STRING.fullmatch(index) is not None


def _is_native_int(index: Any) -> bool:
    return isinstance(index, int) and not isinstance(index, bool)


def _to_int_index(index: Any) -> int:
    if _is_native_int(index):
        return index
    if not is_numeric_string(index):
        raise AccessException(f"Index {index!r} is neither an integer nor a numeric string")
    digits = index.lstrip("0") or "0"
    # Length first: int() refuses very long digit strings
    if len(digits) > len(str(MAX_INDEX)) or int(digits) > MAX_INDEX:
        raise AccessException(f"Index string of {len(index)} digits is out of integer range")
    return int(digits)


def typed_value(node: JsonNode | None) -> TypedValue:
    """Wrap a looked-up element: null, decoded scalar or raw container."""
    if node is None or node.is_null:
        return TypedValue.NULL
    if node.is_value_node:
        return TypedValue.scalar(decode_value_node(node))
    return TypedValue.node(node)


class JsonIndexAccessor(IndexAccessor):
    """Reads indexes from JSON arrays"""

    def get_specific_target_classes(self) -> tuple[type, ...]:
        return _SUPPORTED_CLASSES

    def can_read(self, context: "EvaluationContext", target: Any, index: Any) -> bool:
        return isinstance(target, ArrayNode) and (_is_native_int(index) or is_numeric_string(index))

    def read(self, context: "EvaluationContext", target: Any, index: Any) -> TypedValue:
        if not isinstance(target, ArrayNode):
            raise AccessException(f"Cannot index into non-array target of type '{type(target).__name__}'")
        int_index = _to_int_index(index)
        logger.debug("Reading JSON array element %d of %d", int_index, target.size())
        return typed_value(target.get(int_index))

    def can_write(self, context: "EvaluationContext", target: Any, index: Any) -> bool:
        return False

    def write(self, context: "EvaluationContext", target: Any, index: Any, new_value: Any) -> None:
        raise UnsupportedOperationError("Write is not supported")
