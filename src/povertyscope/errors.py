"""Custom exceptions for the poverty/crime analysis pipeline."""

from __future__ import annotations


class PovertyScopeError(ValueError):
    """Raised when input or parameters cannot be turned into metrics."""

    error_code = "PS_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.error_code}: {message}")


class EmptyInputError(PovertyScopeError):
    """Raised when the input text has no non-blank lines."""

    error_code = "PS_EMPTY_INPUT"


class MissingColumnError(PovertyScopeError):
    """Raised when the header lacks one or more required columns."""

    error_code = "PS_MISSING_COLUMN"

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        names = ", ".join(f"'{name}'" for name in missing)
        super().__init__(f"missing required column(s) {names}")


class NoValidRowsError(PovertyScopeError):
    """Raised when every data row was dropped during parsing."""

    error_code = "PS_NO_VALID_ROWS"


class InvalidParameterError(PovertyScopeError):
    """Raised when a numeric parameter is missing, non-finite, or non-positive."""

    error_code = "PS_INVALID_PARAMETER"

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(f"{name} {message}")


class InsufficientDataError(PovertyScopeError):
    """Raised when too few records survive parsing to compute metrics."""

    error_code = "PS_INSUFFICIENT_DATA"


class ConfigError(PovertyScopeError):
    """Raised when ``povertyscope.toml`` contains malformed values."""

    error_code = "PS_CONFIG"
