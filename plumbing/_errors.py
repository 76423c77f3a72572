from __future__ import annotations

class PreconditionError(ValueError):
    """A guarded callable was called with arguments it does not accept."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

__all__ = ("PreconditionError",)
