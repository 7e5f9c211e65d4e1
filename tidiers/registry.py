"""
Tidier registry: resolves tidy/augment/glance for a model object.

A model type gets its tidiers either by implementing the Tidyable
protocol itself or by registering plain functions with a TidierRegistry.
Registered functions take precedence over methods on the object.
"""
import logging
from typing import Any, Callable, Optional, Protocol, runtime_checkable

import pandas as pd

from common.columns import MISSING
from common.errors import ArgumentError, TidierNotFoundError

logger = logging.getLogger(__name__)

OPERATIONS = ("tidy", "augment", "glance")


@runtime_checkable
class Tidyable(Protocol):
    """Protocol for model objects that summarize themselves as DataFrames."""

    def tidy(self, **kwargs: Any) -> pd.DataFrame:
        """One row per model term (estimates, standard errors, ...)."""
        ...

    def augment(self, data: Any = None, **kwargs: Any) -> pd.DataFrame:
        """One row per observation, with fitted values and residuals added."""
        ...

    def glance(self, **kwargs: Any) -> pd.DataFrame:
        """A single row of model-level statistics."""
        ...


def _check_operation(operation: str) -> None:
    if operation not in OPERATIONS:
        raise ArgumentError(
            f"Unknown tidying operation '{operation}'. Expected one of {OPERATIONS}"
        )


class TidierRegistry:
    """
    Maps model types to their tidy/augment/glance functions.

    Lookup walks the MRO of the object's type, so a function registered
    for a base class also serves its subclasses.

    Example:
        >>> registry = TidierRegistry()
        >>> registry.register(LinearFit, tidy=tidy_linear_fit)
        >>> registry.resolve("tidy", fit)(fit)

        >>> @registry.tidier("glance", LinearFit)
        ... def glance_linear_fit(fit):
        ...     return pd.DataFrame({"r_squared": [fit.r_squared]})
    """

    def __init__(self):
        self._tidiers: dict[str, dict[type, Callable[..., Any]]] = {
            operation: {} for operation in OPERATIONS
        }

    def register(
        self,
        model_type: type,
        *,
        tidy: Optional[Callable[..., Any]] = None,
        augment: Optional[Callable[..., Any]] = None,
        glance: Optional[Callable[..., Any]] = None,
    ) -> None:
        """
        Register tidying functions for a model type.

        Args:
            model_type: Class whose instances the functions handle.
            tidy: Function ``(model, **kwargs) -> DataFrame``.
            augment: Function ``(model, data=..., **kwargs) -> DataFrame``.
            glance: Function ``(model, **kwargs) -> DataFrame``.
        """
        if not isinstance(model_type, type):
            raise ArgumentError(f"model_type must be a class, got {model_type!r}")

        funcs = {"tidy": tidy, "augment": augment, "glance": glance}
        for operation, func in funcs.items():
            if func is None:
                continue
            if not callable(func):
                raise ArgumentError(f"{operation} tidier for {model_type.__name__} is not callable")
            self._tidiers[operation][model_type] = func
            logger.debug(f"Registered {operation} tidier for {model_type.__name__}")

    def tidier(self, operation: str, model_type: type) -> Callable:
        """Decorator form of register() for a single operation."""
        _check_operation(operation)

        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            self.register(model_type, **{operation: func})
            return func

        return decorator

    def unregister(self, model_type: type, operation: Optional[str] = None) -> None:
        """Remove the tidiers of a model type (one operation, or all of them)."""
        operations = OPERATIONS if operation is None else (operation,)
        for op in operations:
            _check_operation(op)
            self._tidiers[op].pop(model_type, None)

    def lookup(self, operation: str, model_type: type) -> Optional[Callable[..., Any]]:
        """Return the registered function for the nearest class in the MRO, or None."""
        _check_operation(operation)
        registered = self._tidiers[operation]
        for klass in model_type.__mro__:
            if klass in registered:
                return registered[klass]
        return None

    def resolve(self, operation: str, obj: Any) -> Callable[..., Any]:
        """
        Find the function that performs ``operation`` on ``obj``.

        Resolution order:
            1. Function registered for the object's type (or a base class)
            2. Method of the same name on the object (Tidyable)

        Raises:
            TidierNotFoundError: If neither exists.
        """
        func = self.lookup(operation, type(obj))
        if func is not None:
            return func

        method = getattr(obj, operation, None)
        if callable(method):
            logger.debug(f"Using {type(obj).__name__}.{operation} method")
            return lambda _obj, /, *args, **kwargs: method(*args, **kwargs)

        raise TidierNotFoundError(operation, type(obj))

    def call(self, operation: str, obj: Any, /, *args: Any, **kwargs: Any) -> Any:
        """Resolve and invoke ``operation`` on ``obj``."""
        return self.resolve(operation, obj)(obj, *args, **kwargs)

    def registered_types(self, operation: str) -> list[type]:
        """Model types with a registered function for ``operation``."""
        _check_operation(operation)
        return list(self._tidiers[operation])


default_registry = TidierRegistry()


def register_tidier(
    model_type: type,
    *,
    tidy: Optional[Callable[..., Any]] = None,
    augment: Optional[Callable[..., Any]] = None,
    glance: Optional[Callable[..., Any]] = None,
) -> None:
    """Register tidying functions with the default registry."""
    default_registry.register(model_type, tidy=tidy, augment=augment, glance=glance)


def tidy(x: Any, /, **kwargs: Any) -> Any:
    """Per-term summary of a model object."""
    return default_registry.call("tidy", x, **kwargs)


def augment(x: Any, /, data: Any = MISSING, **kwargs: Any) -> Any:
    """Per-observation summary of a model object, optionally joined to ``data``."""
    if data is not MISSING:
        kwargs["data"] = data
    return default_registry.call("augment", x, **kwargs)


def glance(x: Any, /, **kwargs: Any) -> Any:
    """Single-row model-level summary of a model object."""
    return default_registry.call("glance", x, **kwargs)
