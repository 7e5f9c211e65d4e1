"""
Tidiers - tidy/augment/glance dispatch for model objects.

Example:
    >>> from tidiers import register_tidier, tidy
    >>> register_tidier(LinearFit, tidy=tidy_linear_fit)
    >>> tidy(fit)
"""
from .registry import (
    OPERATIONS,
    Tidyable,
    TidierRegistry,
    augment,
    default_registry,
    glance,
    register_tidier,
    tidy,
)

__all__ = [
    'OPERATIONS',
    'Tidyable',
    'TidierRegistry',
    'augment',
    'default_registry',
    'glance',
    'register_tidier',
    'tidy',
]
