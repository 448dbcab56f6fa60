"""
Exception classes for fieldtree.

This module defines the error conditions raised while building the field
tree, introspecting component types and accessing the default scene model.
"""


class FieldTreeError(Exception):
    """Base exception for all fieldtree errors."""

    pass


class InvalidOperationError(FieldTreeError):
    """Raised when an operation is applied to a row kind that does not support it."""

    def __init__(self, node_kind: str, operation: str):
        """
        Initialize the exception.

        Params:
            node_kind: Kind of the row the operation was applied to
            operation: Name of the rejected operation (e.g. "expand", "activate")
        """
        self.node_kind = node_kind
        self.operation = operation
        super().__init__(f"Cannot {operation} a row of kind '{node_kind}'")


class FieldTypeError(FieldTreeError):
    """Raised when a type cannot be introspected for fields."""

    def __init__(self, type_name: str, reason: str = "is not a pydantic model"):
        """
        Initialize the exception.

        Params:
            type_name: Name of the type that failed introspection
            reason: Why the type cannot be introspected
        """
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Type '{type_name}' {reason}")


class ObjectDestroyedError(FieldTreeError):
    """Raised when a destroyed scene object is accessed."""

    def __init__(self, name: str):
        """
        Initialize the exception.

        Params:
            name: Name the scene object had when it was destroyed
        """
        self.name = name
        super().__init__(f"Scene object '{name}' has been destroyed")
