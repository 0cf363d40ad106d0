"""Extender that lifts the present value's fields onto the history state."""

from collections.abc import Mapping
from typing import Any

from fieldext.common.types import PRESENT, Action, State, TransitionFn
from fieldext.core.config import PipelineConfig
from fieldext.core.extender import FieldExtender


def present_fields(present: Any) -> dict[str, Any]:
    """Return the fields of a present value that can be merged onto a state.

    Mappings contribute their items and plain objects their instance
    attributes. Scalars, ``None`` and slot-only objects contribute nothing.
    """
    if isinstance(present, Mapping):
        return dict(present)
    try:
        return dict(vars(present))
    except TypeError:
        return {}


class FlattenState(FieldExtender):
    """
    Merge ``present`` over the state so ``state["count"]`` reads the present count.

    Base fields are copied first and the present value's fields over them,
    so the present value wins on a name clash. ``present`` itself stays in
    the state.
    """

    name = "flatten_state"

    def bind(self, next_transition: TransitionFn, config: PipelineConfig) -> TransitionFn:
        def flatten(state: State, action: Action) -> State:
            return next_transition({**state, **present_fields(state.get(PRESENT))}, action)

        return flatten
