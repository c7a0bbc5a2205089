"""
Cinedex exceptions.

Both concrete errors subclass ValueError so the application's ValueError
handler reports them as 422 validation errors.
"""


class CinedexError(Exception):
    """Base class for Cinedex errors."""


class InvalidArgumentError(CinedexError, ValueError):
    """A pagination argument is out of range."""

    def __init__(self, name: str, value: int, constraint: str):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be {constraint}, got {value}")


class InvalidFieldError(CinedexError, ValueError):
    """An order field does not name a sortable column."""

    def __init__(self, field: str, entity: str | None = None):
        self.field = field
        self.entity = entity
        target = f" on {entity}" if entity else ""
        super().__init__(f"Unknown sort field{target}: {field!r}")
