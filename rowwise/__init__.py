"""
Rowwise - tidy, augment and glance the models stored in a rowwise frame.

Example:
    >>> from common import col
    >>> from rowwise import rowwise_do, tidy, augment, glance_
    >>>
    >>> regressions = rowwise_do(cars, "cyl", mod=fit, original=lambda d: d)
    >>> tidy(regressions, col.mod)
    >>> augment(regressions, col.mod, data=col.original)
    >>> glance_(regressions, "mod")
"""
from .building import rowwise_do
from .dispatcher import RowwiseTidyDispatcher, apply_rowwise, default_dispatcher, group_vars
from .wrappers import (
    augment,
    augment_,
    glance,
    glance_,
    make_rowwise_tidiers,
    tidy,
    tidy_,
)

__all__ = [
    'RowwiseTidyDispatcher',
    'apply_rowwise',
    'augment',
    'augment_',
    'default_dispatcher',
    'glance',
    'glance_',
    'group_vars',
    'make_rowwise_tidiers',
    'rowwise_do',
    'tidy',
    'tidy_',
]
