"""
Pipeline composition for fieldext.

``compose`` chains an ordered list of field extenders in front of a terminal
transition function (the host's history-aware reducer). Extenders are bound
right to left so that the first listed extender is the outermost function
on dispatch and sees every state before the others do.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from fieldext.common.exceptions import ConfigurationError, ContractViolationError
from fieldext.common.types import Action, State, TransitionFn, get_action_type
from fieldext.core.config import PipelineConfig
from fieldext.core.extender import BindFn, FieldExtender, as_extender

logger = logging.getLogger(__name__)


class _DownstreamLink:
    """Downstream transition handed to ``bind``; refuses calls until bound."""

    __slots__ = ("_next", "_extender_name", "_armed")

    def __init__(self, next_transition: TransitionFn, extender_name: str):
        self._next = next_transition
        self._extender_name = extender_name
        self._armed = False

    def arm(self) -> None:
        self._armed = True

    def __call__(self, state: State, action: Action) -> State:
        if not self._armed:
            raise ContractViolationError(
                f"Extender '{self._extender_name}' called the next transition while being bound",
                extender_name=self._extender_name,
                action_type=get_action_type(action),
            )
        return self._next(state, action)


def _require_state(transition: TransitionFn, extender_name: str | None) -> TransitionFn:
    """Wrap a transition so a ``None`` result fails loudly.

    ``extender_name`` is ``None`` when wrapping the terminal.
    """
    source = f"Extender '{extender_name}'" if extender_name is not None else "Terminal transition"

    def checked_transition(state: State, action: Action) -> State:
        result = transition(state, action)
        if result is None:
            raise ContractViolationError(
                f"{source} returned no state",
                extender_name=extender_name,
                action_type=get_action_type(action),
            )
        return result

    return checked_transition


def bind_extender(
    extender: FieldExtender, next_transition: TransitionFn, config: PipelineConfig
) -> TransitionFn:
    """
    Bind one extender in front of ``next_transition``.

    Raises:
        ConfigurationError: If binding does not produce a callable
        ContractViolationError: If binding invokes ``next_transition``
    """
    name = extender.display_name
    link = _DownstreamLink(next_transition, name)
    transition = extender.bind(link, config)
    link.arm()

    if not callable(transition):
        raise ConfigurationError(
            f"Extender '{name}' did not return a callable transition from bind()",
            extender_name=name,
            context={"returned": type(transition).__name__},
        )
    return _require_state(transition, name)


def compose(
    extenders: Iterable[FieldExtender | BindFn],
    terminal: TransitionFn,
    config: PipelineConfig | None = None,
) -> TransitionFn:
    """
    Compose extenders and a terminal into one transition function.

    The last extender wraps ``terminal`` directly and each earlier extender
    wraps the binding of its successor. With no extenders the terminal is
    returned unchanged; otherwise a terminal that returns ``None`` raises
    ``ContractViolationError`` with no extender name.

    Args:
        extenders: Ordered extenders, outermost first
        terminal: Innermost transition function
        config: Shared pipeline configuration (defaults apply when omitted)

    Returns:
        Transition function ``(state, action) -> new_state``

    Raises:
        ConfigurationError: If the terminal or any extender is malformed
    """
    if not callable(terminal):
        raise ConfigurationError(
            f"Terminal transition must be callable, got {type(terminal).__name__}"
        )

    units = tuple(as_extender(extender) for extender in extenders)
    if not units:
        return terminal

    config = config if config is not None else PipelineConfig()

    transition = _require_state(terminal, None)
    for extender in reversed(units):
        transition = bind_extender(extender, transition, config)

    logger.debug(
        "Composed pipeline: %s",
        " -> ".join([unit.display_name for unit in units] + ["terminal"]),
    )
    return transition


class Pipeline:
    """
    An assembled, immutable chain of field extenders around a terminal.

    The extender order is fixed once built; use ``rebuild`` to get a pipeline
    with a different order or configuration. Instances are callable and can
    be used anywhere a transition function is expected.
    """

    def __init__(
        self,
        extenders: Sequence[FieldExtender | BindFn],
        terminal: TransitionFn,
        config: PipelineConfig | None = None,
    ):
        """
        Initialize and compose the pipeline.

        Args:
            extenders: Ordered extenders, outermost first
            terminal: Innermost transition function (the wrapped reducer)
            config: Shared pipeline configuration (defaults apply when omitted)

        Raises:
            ConfigurationError: If any part is malformed
        """
        self._extenders = tuple(as_extender(extender) for extender in extenders)
        self._terminal = terminal
        self._config = config if config is not None else PipelineConfig()
        self._transition = compose(self._extenders, terminal, self._config)

    @property
    def extenders(self) -> tuple[FieldExtender, ...]:
        """Bound extenders, outermost first."""
        return self._extenders

    @property
    def terminal(self) -> TransitionFn:
        return self._terminal

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def dispatch(self, state: State, action: Action) -> State:
        """Run one action through the pipeline and return the new state."""
        logger.debug("Dispatching action %r", get_action_type(action))
        return self._transition(state, action)

    __call__ = dispatch

    def replay(self, state: State, actions: Iterable[Action]) -> State:
        """Dispatch actions one after another, in order, and return the last state."""
        for action in actions:
            state = self.dispatch(state, action)
        return state

    def rebuild(
        self,
        extenders: Sequence[FieldExtender | BindFn] | None = None,
        terminal: TransitionFn | None = None,
        config: PipelineConfig | None = None,
    ) -> "Pipeline":
        """Build a new pipeline, reusing any part that is not replaced."""
        return Pipeline(
            extenders if extenders is not None else self._extenders,
            terminal if terminal is not None else self._terminal,
            config if config is not None else self._config,
        )

    def describe(self) -> list[dict[str, Any]]:
        """Describe the chain in dispatch order."""
        return [
            {"position": index, "name": extender.display_name, "extender": repr(extender)}
            for index, extender in enumerate(self._extenders)
        ]

    def __repr__(self) -> str:
        names = ", ".join(extender.display_name for extender in self._extenders)
        return f"Pipeline([{names}])"
