"""jsonindex - index access into JSON arrays for expression evaluation contexts."""

from .version import __version__
from .accessors import IndexAccessor, IndexAccessorRegistry, JsonIndexAccessor
from .context import EvaluationContext, default_context
from .error_msg import (
    AccessException,
    IndexNotReadableError,
    IndexNotWritableError,
    JsonIndexError,
    UnsupportedJsonValueError,
    UnsupportedOperationError,
)
from .typed_value import TypedValue
from .value_model import (
    NULL_NODE,
    ArrayNode,
    BooleanNode,
    FloatNode,
    IntNode,
    JsonNode,
    NullNode,
    ObjectNode,
    TextNode,
    decode_value_node,
    node_from_native,
)

__all__ = [
    "__version__",
    "IndexAccessor",
    "IndexAccessorRegistry",
    "JsonIndexAccessor",
    "EvaluationContext",
    "default_context",
    "AccessException",
    "IndexNotReadableError",
    "IndexNotWritableError",
    "JsonIndexError",
    "UnsupportedJsonValueError",
    "UnsupportedOperationError",
    "TypedValue",
    "NULL_NODE",
    "ArrayNode",
    "BooleanNode",
    "FloatNode",
    "IntNode",
    "JsonNode",
    "NullNode",
    "ObjectNode",
    "TextNode",
    "decode_value_node",
    "node_from_native",
]
