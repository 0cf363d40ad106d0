"""Action filter helpers.

Each helper returns an ``ignore`` predicate: it answers ``True`` for actions
an extender should skip. They plug directly into ``ActionTypeField``.
"""

from typing import Any

from fieldext.common.types import Action, ActionPredicate, get_action_type


def never_ignore(action: Action) -> bool:
    """Default predicate: every action counts."""
    return False


def include_action(*action_types: Any) -> ActionPredicate:
    """Ignore every action whose type is not one of ``action_types``."""
    allowed = frozenset(action_types)

    def ignore(action: Action) -> bool:
        return get_action_type(action) not in allowed

    return ignore


def exclude_action(*action_types: Any) -> ActionPredicate:
    """Ignore actions whose type is one of ``action_types``."""
    excluded = frozenset(action_types)

    def ignore(action: Action) -> bool:
        return get_action_type(action) in excluded

    return ignore


def combine_filters(*predicates: ActionPredicate) -> ActionPredicate:
    """Ignore an action when any of ``predicates`` ignores it."""

    def ignore(action: Action) -> bool:
        return any(predicate(action) for predicate in predicates)

    return ignore
