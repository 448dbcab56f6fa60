"""
fieldtree exception classes.

This package provides all exception types used throughout fieldtree for
consistent error handling and reporting.
"""

from fieldtree.exceptions.core import (
    FieldTreeError,
    FieldTypeError,
    InvalidOperationError,
    ObjectDestroyedError,
)

__all__ = [
    "FieldTreeError",
    "FieldTypeError",
    "InvalidOperationError",
    "ObjectDestroyedError",
]
