"""Shared exceptions and type aliases for fieldext."""

from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    FieldExtError,
    LoaderError,
    RegistryError,
)
from .types import (
    FUTURE,
    PAST,
    PRESENT,
    Action,
    ActionPredicate,
    HistoryState,
    State,
    TransitionFn,
    empty_history,
    get_action_type,
)

__all__ = [
    # Exceptions
    "FieldExtError",
    "ConfigurationError",
    "ContractViolationError",
    "RegistryError",
    "LoaderError",
    # Types
    "Action",
    "ActionPredicate",
    "HistoryState",
    "State",
    "TransitionFn",
    "PAST",
    "PRESENT",
    "FUTURE",
    "empty_history",
    "get_action_type",
]
