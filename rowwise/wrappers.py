"""
Calling forms for rowwise tidy, augment and glance.

Each operation comes in two forms that return identical results:

    tidy(regressions, col.mod)     # column given as a reference
    tidy_(regressions, "mod")      # column given by name

The reference form resolves the column to its name and delegates to the
named form, which runs the dispatcher with the registered tidier.
"""
from typing import Any, Callable, Optional

import pandas as pd

from common.columns import ColumnLike, column_name
from common.errors import ArgumentError
from tidiers.registry import OPERATIONS

from . import dispatcher as dispatcher_module
from .dispatcher import RowwiseTidyDispatcher


def make_rowwise_tidiers(
    operation: str,
    dispatcher: Optional[RowwiseTidyDispatcher] = None,
) -> tuple[Callable[..., pd.DataFrame], Callable[..., pd.DataFrame]]:
    """
    Build the (reference, named) pair of rowwise functions for an operation.

    Args:
        operation: One of "tidy", "augment", "glance".
        dispatcher: Dispatcher to run. Defaults to the module-level one,
                    looked up at call time.

    Returns:
        Tuple of (function taking a ColumnRef, function taking a column name).
    """
    if operation not in OPERATIONS:
        raise ArgumentError(
            f"Unknown tidying operation '{operation}'. Expected one of {OPERATIONS}"
        )

    def named(x: pd.DataFrame, object: str, /, **kwargs: Any) -> pd.DataFrame:
        if not isinstance(object, str):
            raise ArgumentError(
                f"{operation}_() takes the column name as a string; "
                f"use {operation}() for col.<name> references"
            )
        active = dispatcher if dispatcher is not None else dispatcher_module.default_dispatcher
        return active.run(operation, x, object, **kwargs)

    def bare(x: pd.DataFrame, object: ColumnLike, /, **kwargs: Any) -> pd.DataFrame:
        return named(x, column_name(object), **kwargs)

    named.__name__ = f"{operation}_"
    named.__qualname__ = named.__name__
    named.__doc__ = (
        f"Rowwise {operation} with the object column given by name, e.g. "
        f"{operation}_(df, \"mod\")."
    )
    bare.__name__ = operation
    bare.__qualname__ = bare.__name__
    bare.__doc__ = (
        f"Rowwise {operation} with the object column given as col.<name>, e.g. "
        f"{operation}(df, col.mod)."
    )
    return bare, named


tidy, tidy_ = make_rowwise_tidiers("tidy")
augment, augment_ = make_rowwise_tidiers("augment")
glance, glance_ = make_rowwise_tidiers("glance")
