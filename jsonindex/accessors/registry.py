"""Ordered index accessor registry and candidate resolution."""

from __future__ import annotations

from typing import Any
import logging

from jsonindex.accessors.api import IndexAccessor

logger = logging.getLogger(__name__)


class IndexAccessorRegistry:
    """Registry keeping accessors in registration order."""

    def __init__(self, accessors: list[IndexAccessor] | tuple[IndexAccessor, ...] = ()) -> None:
        self._accessors: list[IndexAccessor] = []
        for accessor in accessors:
            self.register(accessor)

    @property
    def accessors(self) -> tuple[IndexAccessor, ...]:
        return tuple(self._accessors)

    def register(self, accessor: IndexAccessor) -> None:
        if not isinstance(accessor, IndexAccessor):
            raise TypeError(f"Expected IndexAccessor, got {type(accessor).__name__}")
        if accessor in self._accessors:
            raise ValueError(f"Index accessor already registered: {accessor.name}")
        self._accessors.append(accessor)
        logger.debug("Registered index accessor %s", accessor.name)

    def unregister(self, accessor: IndexAccessor) -> bool:
        try:
            self._accessors.remove(accessor)
        except ValueError:
            return False
        logger.debug("Unregistered index accessor %s", accessor.name)
        return True

    def accessors_to_try(self, target: Any) -> list[IndexAccessor]:
        """Return candidate accessors for *target*, most specific first.

        Accessors naming the exact target class come first, then those naming
        one of its superclasses, then general accessors. Registration order
        is kept inside each group.
        """
        target_type = type(target)
        exact: list[IndexAccessor] = []
        inherited: list[IndexAccessor] = []
        general: list[IndexAccessor] = []

        for accessor in self._accessors:
            classes = accessor.get_specific_target_classes()
            if not classes:
                general.append(accessor)
            elif target_type in classes:
                exact.append(accessor)
            elif any(issubclass(target_type, cls) for cls in classes):
                inherited.append(accessor)

        return exact + inherited + general

    def list_accessors(self) -> dict[str, str]:
        output: dict[str, str] = {}
        for accessor in self._accessors:
            classes = accessor.get_specific_target_classes()
            targets = ", ".join(cls.__name__ for cls in classes) if classes else "*"
            output[accessor.name] = f"[{targets}] {accessor.description}"
        return output

    def __len__(self) -> int:
        return len(self._accessors)
