"""Signature error types."""


class InvalidTokenError(ValueError):
    """Raised when a raw token contains a reserved combination character."""

    def __init__(self, token: str, message: str | None = None):
        self.token = token
        super().__init__(message or f"Invalid style token: {token!r}")
