"""Field extender contract for fieldext.

A field extender is a two-stage value:

1. Construction: ``SomeExtender(**unit_options)`` captures unit-specific
   configuration. Constructing twice gives two independent extenders.
2. Binding: ``extender.bind(next_transition, config)`` returns the
   per-action transition ``(state, action) -> new_state``.

The per-action transition either forwards a (copied, possibly modified)
state to ``next_transition`` and returns its result, or short-circuits by
returning a state without calling it.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from fieldext.common.exceptions import ConfigurationError
from fieldext.common.types import TransitionFn
from fieldext.core.config import PipelineConfig

BindFn = Callable[[TransitionFn, PipelineConfig], TransitionFn]


class FieldExtender(ABC):
    """Abstract base class for pipeline extenders.

    Subclasses implement ``bind``. Binding must not call ``next_transition``;
    only the returned transition may, once per dispatch on the forwarding
    path. States are copied before they are modified.
    """

    name: ClassVar[str] = ""

    @abstractmethod
    def bind(self, next_transition: TransitionFn, config: PipelineConfig) -> TransitionFn:
        """
        Bind this extender in front of ``next_transition``.

        Args:
            next_transition: Everything downstream (later extenders and the terminal)
            config: Shared read-only pipeline configuration

        Returns:
            The per-action transition function
        """
        pass

    @property
    def display_name(self) -> str:
        """Name used in logs and error messages."""
        return self.name or type(self).__name__

    def __call__(self, next_transition: TransitionFn, config: PipelineConfig) -> TransitionFn:
        return self.bind(next_transition, config)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FunctionExtender(FieldExtender):
    """Adapts a plain ``(next_transition, config) -> transition`` callable."""

    def __init__(self, bind_fn: BindFn, name: str | None = None):
        if not callable(bind_fn):
            raise ConfigurationError(
                f"Extender must be callable, got {type(bind_fn).__name__}"
            )
        self._bind_fn = bind_fn
        self._name = name or getattr(bind_fn, "__name__", type(bind_fn).__name__)

    @property
    def display_name(self) -> str:
        return self._name

    def bind(self, next_transition: TransitionFn, config: PipelineConfig) -> TransitionFn:
        return self._bind_fn(next_transition, config)

    def __repr__(self) -> str:
        return f"FunctionExtender({self._name!r})"


def as_extender(unit: FieldExtender | BindFn) -> FieldExtender:
    """
    Normalize a pipeline entry into a ``FieldExtender``.

    Raises:
        ConfigurationError: If the entry is neither an extender nor callable
    """
    if isinstance(unit, FieldExtender):
        return unit
    if isinstance(unit, type) and issubclass(unit, FieldExtender):
        raise ConfigurationError(
            f"Extender class {unit.__name__} was given instead of an instance",
            extender_name=unit.__name__,
        )
    if callable(unit):
        return FunctionExtender(unit)
    raise ConfigurationError(
        f"Pipeline entries must be FieldExtender instances or callables, "
        f"got {type(unit).__name__}",
        context={"entry": repr(unit)},
    )
