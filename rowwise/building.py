"""
Build rowwise frames: one row per group, one object column per builder.

    >>> regressions = rowwise_do(cars, "cyl", mod=fit_mpg_on_wt, original=lambda d: d)
    >>> regressions
       cyl               mod     original
    0    6  <LinearFit ...>  <DataFrame>
    1    4  <LinearFit ...>  <DataFrame>
"""
import logging
from typing import Any, Callable, Iterable, Union

import pandas as pd

from common.columns import ColumnLike, ColumnRef, column_name, object_column
from common.errors import ArgumentError

logger = logging.getLogger(__name__)


def rowwise_do(
    df: pd.DataFrame,
    by: Union[ColumnLike, Iterable[ColumnLike]],
    **builders: Callable[[pd.DataFrame], Any],
) -> pd.DataFrame:
    """
    Group a frame and store one object per group for each builder.

    Args:
        df: Input data.
        by: Grouping column(s), as names or ColumnRefs.
        **builders: Output column name -> function of the group's sub-frame.

    Returns:
        DataFrame with the key columns (groups in order of first
        occurrence) followed by one object column per builder.
    """
    if isinstance(by, (str, ColumnRef)):
        by = [by]
    keys = [column_name(b) for b in by]

    missing = [k for k in keys if k not in df.columns]
    if missing:
        raise ArgumentError(f"Grouping columns not found: {missing}")
    if not keys:
        raise ArgumentError("rowwise_do() needs at least one grouping column")
    if not builders:
        raise ArgumentError("rowwise_do() needs at least one named builder")
    for name, builder in builders.items():
        if not callable(builder):
            raise ArgumentError(f"Builder '{name}' is not callable")
        if name in keys:
            raise ArgumentError(f"Builder '{name}' clashes with a grouping column")

    key_rows = []
    built: dict[str, list[Any]] = {name: [] for name in builders}
    for _, group in df.groupby(keys, sort=False, dropna=False, observed=True):
        key_rows.append(group[keys].iloc[[0]])
        for name, builder in builders.items():
            built[name].append(builder(group))

    if key_rows:
        out = pd.concat(key_rows, ignore_index=True)
    else:
        out = df[keys].iloc[:0].reset_index(drop=True)

    for name, values in built.items():
        out[name] = object_column(values)

    logger.debug(f"Built rowwise frame with {len(out)} groups and columns {list(builders)}")
    return out
