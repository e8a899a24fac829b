class TreeSelectError(Exception):
    """Base class for widget errors."""


class ConfigurationError(TreeSelectError):
    def __init__(self, option: str, message: str):
        self.option = option
        super().__init__(f"{option}: {message}")


class MissingFieldError(TreeSelectError):
    """A tree node has no label or no value."""

    def __init__(self, field: str, path: tuple[int, ...] = ()):
        self.field = field
        self.path = path
        where = "root" if not path else "root" + "".join(f"[{i}]" for i in path)
        super().__init__(f"Missing required field '{field}' at {where}")


class UnbalancedRowsError(TreeSelectError):
    pass
