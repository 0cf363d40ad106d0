"""Extender that records the type of the last dispatched action."""

from fieldext.common.exceptions import ConfigurationError
from fieldext.common.types import Action, ActionPredicate, State, TransitionFn, get_action_type
from fieldext.core.config import PipelineConfig
from fieldext.core.constants import DEFAULT_ACTION_TYPE_FIELD
from fieldext.core.extender import FieldExtender
from fieldext.filters import never_ignore


class ActionTypeField(FieldExtender):
    """
    Write the current action's type into the history state.

    After a dispatch the ``actionType`` field holds the type of the most
    recent action the ``ignore`` predicate let through. Before any such
    action the field is not set.
    """

    name = "action_type"

    def __init__(
        self,
        ignore: ActionPredicate | None = None,
        field: str = DEFAULT_ACTION_TYPE_FIELD,
    ):
        """
        Initialize the recorder.

        Args:
            ignore: Predicate returning True for actions that must not be
                recorded (see ``fieldext.filters``). Defaults to recording all.
            field: State key to write the action type to
        """
        if ignore is not None and not callable(ignore):
            raise ConfigurationError(
                "ignore must be a callable predicate", extender_name=self.name, config_key="ignore"
            )
        if not field:
            raise ConfigurationError(
                "field must be a non-empty string", extender_name=self.name, config_key="field"
            )
        self.ignore = ignore or never_ignore
        self.field = field

    def bind(self, next_transition: TransitionFn, config: PipelineConfig) -> TransitionFn:
        ignore = self.ignore
        field = self.field

        def record_action_type(state: State, action: Action) -> State:
            new_state = dict(state)
            if not ignore(action):
                new_state[field] = get_action_type(action)
            return next_transition(new_state, action)

        return record_action_type

    def __repr__(self) -> str:
        return f"ActionTypeField(field={self.field!r})"
