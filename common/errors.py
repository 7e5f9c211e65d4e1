"""Error types shared by the rowtidy packages."""


class ArgumentError(ValueError):
    """Raised when a column reference or tidier argument is invalid."""


class TidierNotFoundError(ArgumentError, TypeError):
    """Raised when no tidy/augment/glance implementation exists for an object."""

    def __init__(self, operation: str, obj_type: type):
        self.operation = operation
        self.obj_type = obj_type
        super().__init__(
            f"No '{operation}' tidier registered for {obj_type.__module__}.{obj_type.__qualname__}"
        )
