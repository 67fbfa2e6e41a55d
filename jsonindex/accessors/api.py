"""Stable index accessor API contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

from jsonindex.typed_value import TypedValue

if TYPE_CHECKING:
    from jsonindex.context import EvaluationContext


class IndexAccessor(ABC):
    """Plugin that reads and writes indexed positions on a target value.

    The host asks ``can_read``/``can_write`` first and only then calls
    ``read``/``write`` with the same target and index.
    """

    @abstractmethod
    def get_specific_target_classes(self) -> tuple[type, ...]:
        """Target types this accessor handles; empty means any type."""

    @abstractmethod
    def can_read(self, context: "EvaluationContext", target: Any, index: Any) -> bool:
        ...

    @abstractmethod
    def read(self, context: "EvaluationContext", target: Any, index: Any) -> TypedValue:
        ...

    @abstractmethod
    def can_write(self, context: "EvaluationContext", target: Any, index: Any) -> bool:
        ...

    @abstractmethod
    def write(self, context: "EvaluationContext", target: Any, index: Any, new_value: Any) -> None:
        ...

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def description(self) -> str:
        doc = (type(self).__doc__ or "").strip()
        return doc.split("\n")[0] if doc else "Index accessor"
