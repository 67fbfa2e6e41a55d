"""Index accessors available to evaluation contexts."""

from jsonindex.accessors.api import IndexAccessor
from jsonindex.accessors.json_index import JsonIndexAccessor
from jsonindex.accessors.registry import IndexAccessorRegistry

__all__ = ["IndexAccessor", "IndexAccessorRegistry", "JsonIndexAccessor"]
