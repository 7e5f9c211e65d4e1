"""Common utilities shared across rowtidy modules."""
from .columns import (
    MISSING,
    ColumnRef,
    col,
    column_name,
    grouping_columns,
    is_nested_column,
    nested_columns,
    object_column,
)
from .errors import ArgumentError, TidierNotFoundError

__all__ = [
    'MISSING',
    'ColumnRef',
    'col',
    'column_name',
    'grouping_columns',
    'is_nested_column',
    'nested_columns',
    'object_column',
    'ArgumentError',
    'TidierNotFoundError',
]
