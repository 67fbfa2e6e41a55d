"""
jsonindex error types
"""

from typing import Any, Optional


class JsonIndexError(RuntimeError):
    """Base error for JSON index access"""

    code = "E_JSON_INDEX"

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(msg)


class AccessException(JsonIndexError):
    """Raised when an accessor cannot complete a read it agreed to perform"""

    code = "E_ACCESS"


class UnsupportedOperationError(JsonIndexError, NotImplementedError):
    """Raised by accessors for operations they never permit"""

    code = "E_UNSUPPORTED_OPERATION"


class UnsupportedJsonValueError(JsonIndexError):
    """Raised when a Python value has no JSON node representation."""

    code = "E_UNSUPPORTED_JSON_VALUE"

    def __init__(self, value: Any, message: Optional[str] = None):
        type_name = f"{type(value).__module__}.{type(value).__name__}"
        super().__init__(message or f"Value type '{type_name}' has no JSON node representation")
        self.value_type = type_name


class _IndexDispatchError(JsonIndexError):
    verb = "accessed"

    def __init__(self, target: Any, index: Any, reason: Optional[str] = None):
        self.target_type = type(target).__name__
        self.index = index
        msg = f"Index [{index!r}] cannot be {self.verb} on object of type '{self.target_type}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class IndexNotReadableError(_IndexDispatchError):
    """Raised by the host when no registered accessor can read an index"""

    code = "E_INDEX_NOT_READABLE"
    verb = "read"


class IndexNotWritableError(_IndexDispatchError):
    """Raised by the host when no registered accessor can write an index"""

    code = "E_INDEX_NOT_WRITABLE"
    verb = "written"
