"""Errors raised by cart operations."""


class InvalidArgumentError(ValueError):
    """Raised when an item field is outside its allowed range."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Illegal {field}: {message}")
        self.field = field
        self.message = message


class CartFileError(ValueError):
    """Raised when a cart file cannot be read or has the wrong shape."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message
