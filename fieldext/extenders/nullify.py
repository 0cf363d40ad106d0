"""Extender that clears stale fields on the history entry being left.

This is the only extender that mutates history entries instead of copying
them. The mutation lives in ``clear_fields_in_place`` so it is easy to find
and review.
"""

import logging
from collections.abc import Iterable, MutableMapping, Sequence
from typing import Any

from fieldext.common.exceptions import ConfigurationError
from fieldext.common.types import FUTURE, PAST, Action, State, TransitionFn, get_action_type
from fieldext.core.config import PipelineConfig
from fieldext.core.extender import FieldExtender

logger = logging.getLogger(__name__)


def clear_fields_in_place(target: Any, fields: Iterable[str], null_value: Any = None) -> None:
    """
    Set ``fields`` on ``target`` to ``null_value``, mutating ``target`` itself.

    Mutable mappings are updated by key and other objects by attribute.
    Fields that do not exist yet are created. Targets that cannot hold
    fields (``None``, numbers, strings, tuples, frozen dataclasses) are
    left alone.
    """
    if target is None:
        return

    if isinstance(target, MutableMapping):
        for name in fields:
            target[name] = null_value
        return

    for name in fields:
        try:
            setattr(target, name, null_value)
        except (AttributeError, TypeError):
            logger.debug(
                "Cannot clear field %r on %s entry", name, type(target).__name__
            )


def _first(entries: Sequence[Any] | None) -> Any:
    return entries[0] if entries else None


def _last(entries: Sequence[Any] | None) -> Any:
    return entries[-1] if entries else None


class NullifyFields(FieldExtender):
    """
    Clear selected fields on the history entry adjacent to the transition.

    On a redo action the first ``future`` entry is cleared; on any other
    action the most recent ``past`` entry is. The entry object is changed in
    place, so anything sharing a reference to it observes the cleared fields.
    When the relevant sequence is empty nothing happens.
    """

    name = "nullify_fields"

    def __init__(self, fields: Iterable[str] = (), null_value: Any = None):
        """
        Initialize the nullifier.

        Args:
            fields: Names of the fields to clear
            null_value: Value written to the cleared fields
        """
        if isinstance(fields, str):
            fields = (fields,)
        self.fields = tuple(fields)
        if not all(isinstance(name, str) for name in self.fields):
            raise ConfigurationError(
                "fields must be strings", extender_name=self.name, config_key="fields"
            )
        self.null_value = null_value

    def bind(self, next_transition: TransitionFn, config: PipelineConfig) -> TransitionFn:
        redo_type = config.redo_type
        fields = self.fields
        null_value = self.null_value

        def nullify(state: State, action: Action) -> State:
            new_state = dict(state)

            if get_action_type(action) == redo_type:
                target = _first(new_state.get(FUTURE))
                side = FUTURE
            else:
                target = _last(new_state.get(PAST))
                side = PAST

            if target is None:
                logger.debug("No %s entry to clear for action %r", side, get_action_type(action))
            else:
                clear_fields_in_place(target, fields, null_value)

            return next_transition(new_state, action)

        return nullify

    def __repr__(self) -> str:
        return f"NullifyFields(fields={list(self.fields)!r}, null_value={self.null_value!r})"
