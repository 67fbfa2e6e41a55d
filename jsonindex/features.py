"""
Feature handlers shared by the jsonindex command line.
Each handler returns an OperationResult instead of raising.
"""

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Optional,
    TypeVar,
)
from dataclasses import dataclass
import json
import logging

from jsonindex.context import EvaluationContext, default_context
from jsonindex.error_msg import JsonIndexError
from jsonindex.typed_value import TypedValue
from jsonindex.value_model import node_from_native

logger = logging.getLogger("jsonindex.features")

T = TypeVar("T")


class OperationResult(Generic[T]):
    """Wrapper for operation results with success/error handling"""

    def __init__(
        self, success: bool, data: Optional[T] = None, error: Optional[str] = None
    ):
        self.success = success
        self.data = data
        self.error = error

    @classmethod
    def ok(cls, data: Optional[T] = None) -> "OperationResult[T]":
        return cls(True, data=data)

    @classmethod
    def fail(cls, error: str) -> "OperationResult[T]":
        return cls(False, error=error)


@dataclass
class Feature:
    """A named command line feature"""

    name: str
    description: str
    handler: Callable[..., OperationResult]


class FeatureRegistry:
    """Registry for all jsonindex features"""

    _features: Dict[str, Feature] = {}

    @classmethod
    def register(cls, feature: Feature) -> Feature:
        cls._features[feature.name] = feature
        return feature

    @classmethod
    def get_feature(cls, name: str) -> Optional[Feature]:
        return cls._features.get(name)

    @classmethod
    def get_all_features(cls) -> Dict[str, Feature]:
        return cls._features.copy()


# ----------------- Feature Handlers -----------------


def handle_version(**kwargs) -> OperationResult[Dict[str, str]]:
    """Handle version request"""
    from jsonindex.version import get_version

    return OperationResult.ok({"version": get_version()})


def handle_read(
    document: str,
    indexes: List[Any],
    context: Optional[EvaluationContext] = None,
    **kwargs,
) -> OperationResult[Dict[str, Any]]:
    """Apply *indexes* in turn to the JSON *document* text"""
    try:
        native = json.loads(document)
    except json.JSONDecodeError as e:
        return OperationResult.fail(f"Invalid JSON document: {e}")

    ctx = context or default_context()
    try:
        current = TypedValue.node(node_from_native(native))
        for position, index in enumerate(indexes):
            if current.is_null:
                return OperationResult.fail(
                    f"Cannot apply index [{index!r}] at step {position + 1}: value is null"
                )
            current = ctx.read_index(current.value, index)
            logger.debug("Step %d: [%r] -> %s", position + 1, index, current.kind)
    except JsonIndexError as e:
        return OperationResult.fail(str(e))

    return OperationResult.ok({"kind": current.kind, "value": current.to_json_native()})


def handle_list_accessors(
    context: Optional[EvaluationContext] = None, **kwargs
) -> OperationResult[Dict[str, Any]]:
    """List the index accessors of the default context"""
    ctx = context or default_context()
    return OperationResult.ok({"accessors": ctx.registry.list_accessors()})


FeatureRegistry.register(
    Feature(name="version", description="Show the jsonindex version", handler=handle_version)
)
FeatureRegistry.register(
    Feature(name="read", description="Read indexes from a JSON document", handler=handle_read)
)
FeatureRegistry.register(
    Feature(
        name="list-accessors",
        description="List registered index accessors",
        handler=handle_list_accessors,
    )
)
