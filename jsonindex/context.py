"""Evaluation context dispatching index access to registered accessors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
import logging

from jsonindex.accessors.api import IndexAccessor
from jsonindex.accessors.json_index import JsonIndexAccessor
from jsonindex.accessors.registry import IndexAccessorRegistry
from jsonindex.error_msg import (
    AccessException,
    IndexNotReadableError,
    IndexNotWritableError,
)
from jsonindex.typed_value import TypedValue

logger = logging.getLogger(__name__)


@dataclass
class EvaluationContext:
    """Host-side state for evaluating index expressions.

    ``variables`` is carried for accessors that need it; none of the bundled
    accessors read it.
    """

    registry: IndexAccessorRegistry = field(default_factory=IndexAccessorRegistry)
    variables: dict[str, Any] = field(default_factory=dict)

    @property
    def index_accessors(self) -> tuple[IndexAccessor, ...]:
        return self.registry.accessors

    def add_index_accessor(self, accessor: IndexAccessor) -> None:
        self.registry.register(accessor)

    def remove_index_accessor(self, accessor: IndexAccessor) -> bool:
        return self.registry.unregister(accessor)

    def read_index(self, target: Any, index: Any) -> TypedValue:
        """Read ``target[index]`` through the first accessor able to do it."""
        for accessor in self.registry.accessors_to_try(target):
            if not accessor.can_read(self, target, index):
                continue
            logger.debug("Reading index %r with %s", index, accessor.name)
            try:
                return accessor.read(self, target, index)
            except AccessException as exc:
                raise IndexNotReadableError(target, index, exc.msg) from exc
        raise IndexNotReadableError(target, index)

    def write_index(self, target: Any, index: Any, new_value: Any) -> None:
        """Write ``target[index] = new_value`` through the first willing accessor."""
        for accessor in self.registry.accessors_to_try(target):
            if not accessor.can_write(self, target, index):
                continue
            logger.debug("Writing index %r with %s", index, accessor.name)
            try:
                accessor.write(self, target, index, new_value)
            except AccessException as exc:
                raise IndexNotWritableError(target, index, exc.msg) from exc
            return
        raise IndexNotWritableError(target, index)


def default_context() -> EvaluationContext:
    """Return a context with the JSON array accessor registered."""
    context = EvaluationContext()
    context.add_index_accessor(JsonIndexAccessor())
    return context
