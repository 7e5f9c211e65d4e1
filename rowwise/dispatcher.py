"""
Rowwise tidying: apply a tidier to the model in each row and recombine.

A rowwise frame holds one model per row next to the scalar columns that
identify the group it was fit on:

    cyl  mod
    4    <LinearFit>
    6    <LinearFit>
    8    <LinearFit>

RowwiseTidyDispatcher groups the frame by every scalar column, runs the
tidier on each row's model, and stacks the results with the grouping
values repeated on every output row.
"""
import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, Optional

import pandas as pd

from common.columns import MISSING, ColumnRef, column_name, grouping_columns
from common.errors import ArgumentError
from tidiers.registry import OPERATIONS, TidierRegistry, default_registry

logger = logging.getLogger(__name__)


def group_vars(df: pd.DataFrame, attr: str = "group_vars") -> list[str]:
    """Grouping columns recorded on a rowwise tidy result ([] if none)."""
    return list(df.attrs.get(attr, []))


class RowwiseTidyDispatcher:
    """
    Applies a per-object tidying function to every row of a rowwise frame.

    Args:
        registry: TidierRegistry used by run(). Defaults to the shared registry.
        nested_types: Extra types to treat as nested when inferring
                      grouping columns.
        scalar_types: Extra types to treat as scalar grouping keys.
        group_attr: Key in ``DataFrame.attrs`` under which the grouping
                    columns of a result are recorded.

    Example:
        >>> dispatcher = RowwiseTidyDispatcher()
        >>> dispatcher.apply(regressions, "mod", lambda m: m.coefficients())
        >>> dispatcher.run("glance", regressions, "mod")
    """

    DEFAULT_GROUP_ATTR = "group_vars"

    def __init__(
        self,
        registry: Optional[TidierRegistry] = None,
        nested_types: Optional[Iterable[type]] = None,
        scalar_types: Optional[Iterable[type]] = None,
        group_attr: str = DEFAULT_GROUP_ATTR,
    ):
        self.registry = registry if registry is not None else default_registry
        self.nested_types = tuple(nested_types or ())
        self.scalar_types = tuple(scalar_types or ())
        self.group_attr = group_attr

    def grouping_columns(self, x: pd.DataFrame, object: str) -> list[str]:
        """Scalar columns of ``x`` other than ``object``."""
        return grouping_columns(
            x,
            exclude=object,
            nested_types=self.nested_types,
            scalar_types=self.scalar_types,
        )

    def apply(
        self,
        x: pd.DataFrame,
        object: str,
        func: Callable[..., Any],
        /,
        data: Any = MISSING,
        **kwargs: Any,
    ) -> pd.DataFrame:
        """
        Tidy the object column of every row and recombine the results.

        Args:
            x: Rowwise DataFrame.
            object: Name of the column holding the objects to tidy.
            func: Tidying function ``(obj, [data=...], **kwargs) -> DataFrame``.
            data: Optional column name (str or ColumnRef) whose per-row value
                  is passed as ``data=``. A value that does not name a column
                  is passed to every call unchanged.
            **kwargs: Forwarded to ``func``.

        Returns:
            DataFrame with the grouping columns followed by the tidier's
            columns, grouping columns recorded in ``attrs``.

        Raises:
            ArgumentError: If ``object`` is not a column of ``x`` or ``func``
                           returns something that is not table-like.
        """
        self._validate(x, object, func)

        groupers = self.grouping_columns(x, object)
        data_column = self._data_column(x, data)
        logger.debug(f"Tidying column '{object}' grouped by {groupers}")

        pieces = []
        empty_columns: list[str] = []
        partition_count = 0
        for partition in self._partitions(x, groupers):
            partition_count += 1
            for i in range(len(partition)):
                call_kwargs = dict(kwargs)
                if data_column is not None:
                    call_kwargs["data"] = partition[data_column].iloc[i]
                elif data is not MISSING:
                    call_kwargs["data"] = data

                result = func(partition[object].iloc[i], **call_kwargs)
                table = self._as_table(result, object)
                if table.empty:
                    empty_columns = empty_columns or [c for c in table.columns if c not in groupers]
                    continue
                pieces.append(self._attach_groups(table, partition, i, groupers))

        logger.debug(f"Tidied {len(x)} rows in {partition_count} partitions")

        if pieces:
            out = pd.concat(pieces, ignore_index=True)
        else:
            out = pd.DataFrame({g: x[g].iloc[:0] for g in groupers})
            for c in empty_columns:
                out[c] = pd.Series(dtype=object)

        out.attrs[self.group_attr] = list(groupers)
        return out

    def run(
        self,
        operation: str,
        x: pd.DataFrame,
        object: str,
        /,
        data: Any = MISSING,
        **kwargs: Any,
    ) -> pd.DataFrame:
        """apply() with the registered tidier for ``operation`` as ``func``."""
        if operation not in OPERATIONS:
            raise ArgumentError(
                f"Unknown tidying operation '{operation}'. Expected one of {OPERATIONS}"
            )
        func = functools.partial(self.registry.call, operation)
        return self.apply(x, object, func, data=data, **kwargs)

    def _validate(self, x: Any, object: Any, func: Any) -> None:
        if not isinstance(x, pd.DataFrame):
            raise ArgumentError(f"Expected a pandas DataFrame, got {type(x).__name__}")
        if not isinstance(object, str):
            raise ArgumentError(
                f"Object column must be given by name as a string, got {type(object).__name__}"
            )
        if object not in x.columns:
            raise ArgumentError(
                f"Column '{object}' not found. Available columns: {list(x.columns)}"
            )
        if not callable(func):
            raise ArgumentError("func must be callable")

    def _data_column(self, x: pd.DataFrame, data: Any) -> Optional[str]:
        """Column to read ``data=`` from, or None to pass ``data`` through as is."""
        if data is MISSING or not isinstance(data, (str, ColumnRef)):
            return None
        name = column_name(data)
        if name in x.columns:
            return name
        logger.debug(f"data={data!r} is not a column; passing it through unchanged")
        return None

    def _partitions(self, x: pd.DataFrame, groupers: list[str]) -> Iterator[pd.DataFrame]:
        """Yield row partitions in order of first occurrence of each grouping key."""
        if not groupers:
            if len(x):
                yield x
            return

        grouped = x.groupby(groupers, sort=False, dropna=False, observed=True)
        for _, partition in grouped:
            yield partition

    def _as_table(self, result: Any, object: str) -> pd.DataFrame:
        """Coerce a tidier result to a DataFrame."""
        if isinstance(result, pd.DataFrame):
            return result
        if isinstance(result, pd.Series):
            return pd.DataFrame([result.to_dict()])

        is_records = isinstance(result, list) and all(isinstance(r, Mapping) for r in result)
        if not (isinstance(result, Mapping) or is_records):
            raise ArgumentError(
                f"Tidying column '{object}' returned {type(result).__name__}, "
                "expected a DataFrame"
            )

        try:
            if isinstance(result, Mapping) and all(pd.api.types.is_scalar(v) for v in result.values()):
                return pd.DataFrame([dict(result)])
            return pd.DataFrame(result)
        except (ValueError, TypeError) as e:
            raise ArgumentError(
                f"Tidying column '{object}' returned a value that is not table-like: {e}"
            ) from e

    def _attach_groups(
        self,
        table: pd.DataFrame,
        partition: pd.DataFrame,
        position: int,
        groupers: list[str],
    ) -> pd.DataFrame:
        """Prefix every row of ``table`` with the grouping values of one source row."""
        table = table.reset_index(drop=True)

        collisions = [g for g in groupers if g in table.columns]
        if collisions:
            logger.warning(
                f"Tidier output has columns {collisions} that clash with grouping "
                "columns; keeping the grouping values"
            )
            table = table.drop(columns=collisions)

        keys = partition[groupers].iloc[[position] * len(table)].reset_index(drop=True)
        return pd.concat([keys, table], axis=1)


default_dispatcher = RowwiseTidyDispatcher()


def apply_rowwise(
    x: pd.DataFrame,
    object: str,
    func: Callable[..., Any],
    /,
    data: Any = MISSING,
    **kwargs: Any,
) -> pd.DataFrame:
    """Run ``func`` on each row's ``object`` column with the default dispatcher."""
    return default_dispatcher.apply(x, object, func, data=data, **kwargs)
