"""
Reference field extenders for fieldext.

This module provides the built-in extenders and the registry that lets
pipelines refer to them by name.
"""

from fieldext.extenders.action_type import ActionTypeField
from fieldext.extenders.flatten import FlattenState, present_fields
from fieldext.extenders.nullify import NullifyFields, clear_fields_in_place
from fieldext.extenders.registry import (
    ExtenderRegistry,
    RegisteredExtender,
    get_default_registry,
    register_builtin_extenders,
    register_extender,
)

__all__ = [
    "ActionTypeField",
    "FlattenState",
    "NullifyFields",
    "clear_fields_in_place",
    "present_fields",
    "ExtenderRegistry",
    "RegisteredExtender",
    "get_default_registry",
    "register_builtin_extenders",
    "register_extender",
]
