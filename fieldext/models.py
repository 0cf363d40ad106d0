"""Data contracts for pipeline definition files.

These TypedDicts describe the raw structures read from YAML or JSON before
they are turned into ``PipelineConfig`` and extender instances.

Example definition:
    >>> definition: PipelineFileConfig = {
    ...     "options": {"redo_type": "REDO", "init_types": ["INIT"]},
    ...     "field_extenders": [
    ...         "action_type",
    ...         {"name": "nullify_fields", "fields": ["b"], "null_value": None},
    ...     ],
    ... }
"""

from typing import Any, Union

from typing_extensions import NotRequired, TypedDict


class PipelineOptionsConfig(TypedDict):
    """Options block of a pipeline definition; unknown keys pass through."""

    undo_type: NotRequired[str]
    redo_type: NotRequired[str]
    jump_type: NotRequired[str]
    jump_to_past_type: NotRequired[str]
    jump_to_future_type: NotRequired[str]
    clear_history_type: NotRequired[str]
    init_types: NotRequired[list[str]]
    limit: NotRequired[int | None]
    options: NotRequired[dict[str, Any]]


class ExtenderEntryConfig(TypedDict, total=False):
    """A field extender entry given as a mapping.

    ``name`` selects the registered factory; every other key is passed to it
    as a keyword option.
    """

    name: str


AnyExtenderEntry = Union[str, ExtenderEntryConfig]


class PipelineFileConfig(TypedDict):
    """Top-level structure of a pipeline definition file."""

    options: NotRequired[PipelineOptionsConfig]
    field_extenders: NotRequired[list[AnyExtenderEntry]]
    description: NotRequired[str]
