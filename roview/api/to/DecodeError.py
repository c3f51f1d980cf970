"""Decode error."""


class DecodeError(Exception):
    """Raised when a hypermedia document cannot be decoded."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Document decode failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
