"""
fieldext: field extender pipelines for undo/redo history state.

fieldext layers optional behaviours onto a history container's state
(``past`` / ``present`` / ``future``) without touching the container itself.
Each behaviour is a field extender; an ordered list of extenders is composed
into a single transition function that runs on every dispatched action
before the host's reducer.

Core Components:
    - FieldExtender: The two-stage extender contract (construct, then bind)
    - Pipeline / compose: Chain extenders around a terminal reducer
    - PipelineConfig: Read-only options shared by every extender
    - ActionTypeField, FlattenState, NullifyFields: Reference extenders

Example Usage:
    ```python
    from fieldext import ActionTypeField, FlattenState, Pipeline, PipelineConfig

    pipeline = Pipeline(
        [ActionTypeField(), FlattenState()],
        history_reducer,
        PipelineConfig(redo_type="REDO"),
    )

    state = pipeline(state, {"type": "INCREMENT"})
    print(state["actionType"])
    ```
"""

__version__ = "0.1.0"

from .common.exceptions import (
    ConfigurationError,
    ContractViolationError,
    FieldExtError,
    LoaderError,
    RegistryError,
)
from .common.types import HistoryState, TransitionFn, empty_history, get_action_type
from .core.config import PipelineConfig
from .core.extender import FieldExtender, FunctionExtender, as_extender
from .core.pipeline import Pipeline, compose
from .extenders import (
    ActionTypeField,
    ExtenderRegistry,
    FlattenState,
    NullifyFields,
    clear_fields_in_place,
    get_default_registry,
    register_extender,
)
from .filters import combine_filters, exclude_action, include_action
from .loader import PipelineDefinition, PipelineLoader, load_pipeline

__all__ = [
    # Core functionality
    "FieldExtender",
    "FunctionExtender",
    "Pipeline",
    "PipelineConfig",
    "compose",
    "as_extender",
    "__version__",
    # Reference extenders
    "ActionTypeField",
    "FlattenState",
    "NullifyFields",
    "clear_fields_in_place",
    # Registry and loading
    "ExtenderRegistry",
    "get_default_registry",
    "register_extender",
    "PipelineDefinition",
    "PipelineLoader",
    "load_pipeline",
    # Filters
    "include_action",
    "exclude_action",
    "combine_filters",
    # Types
    "HistoryState",
    "TransitionFn",
    "empty_history",
    "get_action_type",
    # Exceptions
    "FieldExtError",
    "ConfigurationError",
    "ContractViolationError",
    "RegistryError",
    "LoaderError",
]
