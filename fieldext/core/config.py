"""Pipeline configuration for fieldext."""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any

from fieldext.common.exceptions import ConfigurationError
from fieldext.core.constants import (
    DEFAULT_CLEAR_HISTORY_TYPE,
    DEFAULT_INIT_TYPES,
    DEFAULT_JUMP_TO_FUTURE_TYPE,
    DEFAULT_JUMP_TO_PAST_TYPE,
    DEFAULT_JUMP_TYPE,
    DEFAULT_REDO_TYPE,
    DEFAULT_UNDO_TYPE,
    get_clear_history_type,
    get_init_types,
    get_jump_to_future_type,
    get_jump_to_past_type,
    get_jump_type,
    get_limit,
    get_redo_type,
    get_undo_type,
)

_ACTION_TYPE_FIELDS = (
    "undo_type",
    "redo_type",
    "jump_type",
    "jump_to_past_type",
    "jump_to_future_type",
    "clear_history_type",
)


@dataclass(frozen=True)
class PipelineConfig:
    """
    Options shared read-only by every extender while a pipeline is bound.

    Carries the action types the host's history container reacts to, plus
    any extra pass-through options in ``options``. The same instance is
    handed to each extender's ``bind``; nothing in a pipeline may modify it.
    """

    undo_type: str = DEFAULT_UNDO_TYPE
    redo_type: str = DEFAULT_REDO_TYPE
    jump_type: str = DEFAULT_JUMP_TYPE
    jump_to_past_type: str = DEFAULT_JUMP_TO_PAST_TYPE
    jump_to_future_type: str = DEFAULT_JUMP_TO_FUTURE_TYPE
    clear_history_type: str = DEFAULT_CLEAR_HISTORY_TYPE
    init_types: tuple[str, ...] = DEFAULT_INIT_TYPES
    limit: int | None = None
    # Excluded from hashing; the read-only proxy is not hashable.
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        """Validate and freeze configuration after initialization."""
        for name in _ACTION_TYPE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(
                    f"'{name}' must be a non-empty string, got {value!r}",
                    config_key=name,
                )

        init_types = self.init_types
        if isinstance(init_types, str):
            init_types = (init_types,)
        init_types = tuple(init_types)
        if not all(isinstance(item, str) for item in init_types):
            raise ConfigurationError(
                "'init_types' must contain only strings", config_key="init_types"
            )
        object.__setattr__(self, "init_types", init_types)

        if self.limit is not None and (
            isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 0
        ):
            raise ConfigurationError(
                f"'limit' must be a non-negative integer or None, got {self.limit!r}",
                config_key="limit",
            )

        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "PipelineConfig":
        """
        Create configuration from a mapping.

        Known keys become fields; every other key is kept in ``options``.
        A nested ``options`` mapping is merged with those extra keys.

        Raises:
            ConfigurationError: If ``data`` is not a mapping or a value is invalid
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Pipeline options must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)} - {"options"}
        kwargs = {key: value for key, value in data.items() if key in known}
        nested = data.get("options") or {}
        if not isinstance(nested, Mapping):
            raise ConfigurationError(
                f"'options' must be a mapping, got {type(nested).__name__}",
                config_key="options",
            )
        options = dict(nested)
        options.update(
            {key: value for key, value in data.items() if key not in known and key != "options"}
        )
        return cls(**kwargs, options=options)

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Create configuration from ``FIELDEXT_*`` environment variables."""
        return cls(
            undo_type=get_undo_type(),
            redo_type=get_redo_type(),
            jump_type=get_jump_type(),
            jump_to_past_type=get_jump_to_past_type(),
            jump_to_future_type=get_jump_to_future_type(),
            clear_history_type=get_clear_history_type(),
            init_types=get_init_types(),
            limit=get_limit(),
        )

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a named field first, then a pass-through option."""
        if key != "options" and key in self.__dataclass_fields__:
            return getattr(self, key)
        return self.options.get(key, default)

    def is_init_action(self, action_type: Any) -> bool:
        """Check whether an action type is one of the initialization types."""
        return action_type in self.init_types

    def with_options(self, **changes: Any) -> "PipelineConfig":
        """Return a copy with fields or pass-through options replaced."""
        known = {f.name for f in fields(self)} - {"options"}
        field_changes = {key: value for key, value in changes.items() if key in known}
        options = dict(self.options)
        options.update({key: value for key, value in changes.items() if key not in known})
        return replace(self, **field_changes, options=options)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (options flattened to the top level)."""
        data = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "options"}
        data["init_types"] = list(self.init_types)
        data.update(self.options)
        return data
