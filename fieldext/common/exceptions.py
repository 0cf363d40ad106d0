"""Common exceptions for fieldext.

This module defines all exception types used throughout fieldext so that
pipeline assembly, contract enforcement, registry lookups and file loading
report failures consistently.
"""

from typing import Any


class FieldExtError(Exception):
    """Base exception for all fieldext-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(FieldExtError):
    """Raised when a pipeline is assembled from invalid parts or options."""

    def __init__(
        self,
        message: str,
        extender_name: str | None = None,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.extender_name = extender_name
        self.config_key = config_key


class ContractViolationError(FieldExtError):
    """Raised when an extender breaks the binding or transition contract.

    Either the bind stage invoked the downstream transition while it was
    still being bound, or the per-action transition returned ``None``
    instead of a state.
    """

    def __init__(
        self,
        message: str,
        extender_name: str | None = None,
        action_type: Any | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize contract violation with details."""
        super().__init__(message, context)
        self.extender_name = extender_name
        self.action_type = action_type


class RegistryError(FieldExtError):
    """Raised when registry operations fail."""

    def __init__(
        self,
        message: str,
        item_name: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize registry error with details."""
        super().__init__(message, context)
        self.item_name = item_name


class LoaderError(FieldExtError):
    """Raised when loading a pipeline definition fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        loader_type: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize loader error with details."""
        super().__init__(message, context)
        self.file_path = file_path
        self.loader_type = loader_type


__all__ = [
    'FieldExtError',
    'ConfigurationError',
    'ContractViolationError',
    'RegistryError',
    'LoaderError',
]
