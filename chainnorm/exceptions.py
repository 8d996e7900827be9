"""Custom exceptions for chainnorm."""

from typing import Any


class ChainNormError(Exception):
    """Base exception for chainnorm errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FormattingError(ChainNormError):
    """A value could not be rendered for display.

    Carries the formatting category, the raw value that was passed in and the
    options record used, so callers can log the full context.
    """

    def __init__(
        self,
        message: str,
        category: str,
        value: Any = None,
        options: Any = None,
    ):
        super().__init__(message)
        self.category = category
        self.value = value
        self.options = options

    def __str__(self) -> str:
        return f"{self.message} (category={self.category}, value={self.value!r})"


class ChainNotFoundError(ChainNormError, LookupError):
    """No chain configuration for the requested identifier."""

    def __init__(self, chain_id: Any):
        super().__init__(f"Chain configuration not found for chainId: {chain_id}")
        self.chain_id = chain_id


class RegistryError(ChainNormError):
    """Chain configuration is missing data or could not be loaded."""

    pass
