"""Extender registry for fieldext.

Maps names to extender factories so pipelines can be declared in YAML or
JSON files and built without importing extender classes directly.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from fieldext.common.exceptions import ConfigurationError, RegistryError
from fieldext.core.extender import FieldExtender
from fieldext.extenders.action_type import ActionTypeField
from fieldext.extenders.flatten import FlattenState
from fieldext.extenders.nullify import NullifyFields
from fieldext.filters import exclude_action, include_action

logger = logging.getLogger(__name__)

ExtenderFactory = Callable[..., FieldExtender]


@dataclass
class RegisteredExtender:
    """Registry entry wrapping an extender factory."""

    name: str
    factory: ExtenderFactory
    description: str = ""
    expected_params: dict[str, str] = field(default_factory=dict)


class ExtenderRegistry:
    """
    Registry of named extender factories.

    Each ``create`` call runs the factory again, so two pipelines built from
    the same name never share an extender instance.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._extenders: dict[str, RegisteredExtender] = {}

    def register(
        self,
        name: str,
        factory: ExtenderFactory,
        description: str = "",
        expected_params: dict[str, str] | None = None,
    ) -> None:
        """
        Register an extender factory.

        Args:
            name: Unique name for the extender
            factory: Callable taking keyword options and returning a FieldExtender
            description: Human-readable description
            expected_params: Dictionary describing accepted options

        Raises:
            RegistryError: If the name is taken or the factory is not callable
        """
        if name in self._extenders:
            raise RegistryError(f"Extender '{name}' is already registered", item_name=name)
        if not callable(factory):
            raise RegistryError(f"Factory for '{name}' must be callable", item_name=name)

        self._extenders[name] = RegisteredExtender(
            name=name,
            factory=factory,
            description=description,
            expected_params=expected_params or {},
        )
        logger.debug("Registered extender '%s'", name)

    def unregister(self, name: str) -> None:
        """
        Remove a registered extender.

        Raises:
            RegistryError: If the extender is not registered
        """
        if name not in self._extenders:
            raise RegistryError(f"Extender '{name}' is not registered", item_name=name)
        del self._extenders[name]

    def get(self, name: str) -> RegisteredExtender:
        """
        Get a registry entry.

        Raises:
            RegistryError: If the extender is not registered
        """
        if name not in self._extenders:
            raise RegistryError(
                f"Extender '{name}' is not registered",
                item_name=name,
                context={"available": sorted(self._extenders)},
            )
        return self._extenders[name]

    def create(self, name: str, **options: Any) -> FieldExtender:
        """
        Build a fresh extender from a registered factory.

        Raises:
            RegistryError: If the extender is not registered
            ConfigurationError: If the options are rejected or the factory
                does not return a FieldExtender
        """
        entry = self.get(name)
        try:
            extender = entry.factory(**options)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid options for extender '{name}': {e}",
                extender_name=name,
                context={"options": sorted(options)},
            ) from e

        if not isinstance(extender, FieldExtender):
            raise ConfigurationError(
                f"Factory for '{name}' returned {type(extender).__name__}, not a FieldExtender",
                extender_name=name,
            )
        return extender

    def list_extenders(self) -> dict[str, str]:
        """Map registered names to their descriptions."""
        return {name: entry.description for name, entry in self._extenders.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._extenders

    def clear(self) -> None:
        """Clear all registered extenders."""
        self._extenders.clear()


def _action_type_from_options(
    ignore_types: Iterable[str] | None = None,
    only_types: Iterable[str] | None = None,
    field: str | None = None,
) -> ActionTypeField:
    """Build an ``ActionTypeField`` from data-file friendly options."""
    if ignore_types and only_types:
        raise ConfigurationError(
            "Use either 'ignore_types' or 'only_types', not both",
            extender_name=ActionTypeField.name,
        )

    ignore = None
    if ignore_types:
        ignore = exclude_action(*ignore_types)
    elif only_types:
        ignore = include_action(*only_types)

    if field is None:
        return ActionTypeField(ignore=ignore)
    return ActionTypeField(ignore=ignore, field=field)


def register_builtin_extenders(registry: ExtenderRegistry) -> ExtenderRegistry:
    """Register the reference extenders on ``registry`` and return it."""
    registry.register(
        ActionTypeField.name,
        _action_type_from_options,
        "Record the last action type on the history state",
        {
            "ignore_types": "list of action types that are not recorded",
            "only_types": "list of the only action types that are recorded",
            "field": "state key to write (default: actionType)",
        },
    )
    registry.register(
        FlattenState.name,
        FlattenState,
        "Merge the present value's fields onto the history state",
    )
    registry.register(
        NullifyFields.name,
        NullifyFields,
        "Clear fields on the history entry being left (in place)",
        {
            "fields": "list of field names to clear",
            "null_value": "value written to cleared fields (default: null)",
        },
    )
    return registry


# Global registry instance
_default_registry = register_builtin_extenders(ExtenderRegistry())


def get_default_registry() -> ExtenderRegistry:
    """Get the default extender registry."""
    return _default_registry


def register_extender(
    name: str,
    factory: ExtenderFactory,
    description: str = "",
    expected_params: dict[str, str] | None = None,
) -> None:
    """Register an extender factory on the default registry."""
    _default_registry.register(name, factory, description, expected_params)
