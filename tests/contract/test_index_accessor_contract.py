from __future__ import annotations

import pytest

from jsonindex.accessors.api import IndexAccessor
from jsonindex.context import default_context
from jsonindex.error_msg import UnsupportedOperationError
from jsonindex.typed_value import TypedValue
from jsonindex.value_model import node_from_native

_TARGETS = [
    node_from_native([]),
    node_from_native([1, "two", [3], {"four": 4}, None]),
    node_from_native({"0": 1}),
    [1, 2],
    "12",
    None,
]
_INDEXES = [0, 1, 4, -1, 2**33, "0", "4", "-1", "1.0", "", " 1", "one", True, 1.5, None]


@pytest.mark.contract
def test_registered_accessors_implement_the_interface():
    context = default_context()
    assert context.index_accessors
    for accessor in context.index_accessors:
        assert isinstance(accessor, IndexAccessor)
        classes = accessor.get_specific_target_classes()
        assert isinstance(classes, tuple)
        assert all(isinstance(cls, type) for cls in classes)


@pytest.mark.contract
def test_can_read_never_raises_and_read_honours_it():
    context = default_context()
    for accessor in context.index_accessors:
        for target in _TARGETS:
            for index in _INDEXES:
                readable = accessor.can_read(context, target, index)
                assert isinstance(readable, bool)
                if readable:
                    result = accessor.read(context, target, index)
                    assert isinstance(result, TypedValue)
                    assert result.kind in {"null", "scalar", "node"}
                    if result.kind == "null":
                        assert result is TypedValue.NULL


@pytest.mark.contract
def test_json_accessors_are_read_only():
    context = default_context()
    for accessor in context.index_accessors:
        for target in _TARGETS:
            for index in _INDEXES:
                assert accessor.can_write(context, target, index) is False
        with pytest.raises(UnsupportedOperationError):
            accessor.write(context, _TARGETS[1], 0, "value")
