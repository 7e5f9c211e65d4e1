"""
Column references and column classification for rowwise frames.

A rowwise frame mixes two kinds of columns:
    - scalar columns ("cyl", "region") used as grouping keys
    - nested columns holding arbitrary objects (fitted models, sub-frames)

Column arguments can be given as a plain string or as a ColumnRef built
from the ``col`` namespace, which stands in for a bare column name:

    >>> tidy(regressions, col.mod)
    >>> tidy_(regressions, "mod")
"""
import enum
from typing import Any, Iterable, Optional, Union

import numpy as np
import pandas as pd

from .errors import ArgumentError

# Sentinel for optional arguments the caller did not pass.
MISSING = object()


class ColumnRef:
    """
    Reference to a DataFrame column by name.

    Example:
        >>> ref = col.mod
        >>> ref.name
        'mod'
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ArgumentError(f"Column name must be a non-empty string, got {name!r}")
        self.name = name

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, ColumnRef) and other.name == self.name

    def __hash__(self) -> int:
        return hash(("ColumnRef", self.name))

    def __repr__(self) -> str:
        return f"col.{self.name}" if self.name.isidentifier() else f"col({self.name!r})"


class _ColumnNamespace:
    """Builds ColumnRefs by attribute access (``col.mod``) or call (``col("my mod")``)."""

    def __getattr__(self, name: str) -> ColumnRef:
        if name.startswith("__"):
            raise AttributeError(name)
        return ColumnRef(name)

    def __call__(self, name: str) -> ColumnRef:
        return ColumnRef(name)

    def __repr__(self) -> str:
        return "col"


col = _ColumnNamespace()

ColumnLike = Union[str, ColumnRef]


def column_name(ref: ColumnLike) -> str:
    """
    Resolve a column argument to its textual name.

    Args:
        ref: Column name string or ColumnRef.

    Returns:
        The column name.

    Raises:
        ArgumentError: If ref is neither a string nor a ColumnRef.
    """
    if isinstance(ref, ColumnRef):
        return ref.name
    if isinstance(ref, str):
        return ref
    raise ArgumentError(
        f"Expected a column name or col.<name> reference, got {type(ref).__name__}"
    )


def is_nested_value(value: Any, nested_types: tuple = (), scalar_types: tuple = ()) -> bool:
    """
    Return True if a single cell value is a nested object rather than a scalar.

    ``nested_types`` is checked first, then ``scalar_types`` and Enum
    members (always scalar), then pandas' own scalar test.
    """
    if nested_types and isinstance(value, nested_types):
        return True
    if isinstance(value, (enum.Enum,) + tuple(scalar_types)):
        return False
    return not pd.api.types.is_scalar(value)


def is_nested_column(
    series: pd.Series,
    nested_types: tuple = (),
    scalar_types: tuple = (),
) -> bool:
    """
    Classify a column as nested (holds objects) or scalar.

    Without extra nested_types only object-dtype columns can be nested.
    A column is nested when any value in it is not a scalar; all-missing
    columns count as scalar.
    """
    if series.dtype != object and not nested_types:
        return False
    return any(is_nested_value(value, nested_types, scalar_types) for value in series)


def nested_columns(
    df: pd.DataFrame,
    nested_types: Iterable[type] = (),
    scalar_types: Iterable[type] = (),
) -> list[str]:
    """List the nested columns of a DataFrame in column order."""
    nested_types = tuple(nested_types)
    scalar_types = tuple(scalar_types)
    return [c for c in df.columns if is_nested_column(df[c], nested_types, scalar_types)]


def grouping_columns(
    df: pd.DataFrame,
    exclude: Optional[ColumnLike] = None,
    nested_types: Iterable[type] = (),
    scalar_types: Iterable[type] = (),
) -> list[str]:
    """
    Infer grouping columns: every scalar column except ``exclude``.

    Args:
        df: Rowwise DataFrame.
        exclude: Column left out even if it is scalar (the object column).
        nested_types: Extra types to treat as nested.
        scalar_types: Extra types to treat as scalar grouping keys.

    Returns:
        Scalar column names in column order.
    """
    nested = set(nested_columns(df, nested_types, scalar_types))
    excluded = column_name(exclude) if exclude is not None else None
    return [c for c in df.columns if c not in nested and c != excluded]


def object_column(values: Iterable[Any]) -> np.ndarray:
    """
    Pack arbitrary objects into a 1-d object array, one object per cell.

    Building the array cell by cell keeps numpy from broadcasting
    same-shaped sub-frames or lists into extra dimensions.
    """
    values = list(values)
    packed = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        packed[i] = value
    return packed
