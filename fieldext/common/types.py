"""Common types and type definitions for fieldext.

History states are plain mappings and actions are opaque records carrying a
``type`` discriminator; the aliases below name those shapes so signatures
across the package stay readable.
"""

from collections.abc import Callable, Mapping
from typing import Any, NotRequired, TypedDict

State = Mapping[str, Any]
Action = Any
TransitionFn = Callable[[State, Action], State]
ActionPredicate = Callable[[Action], bool]

PAST = "past"
PRESENT = "present"
FUTURE = "future"


class HistoryState(TypedDict):
    """Known keys of a history state.

    Extenders contribute further keys next to these (``actionType`` is the
    one the recorder adds).
    """

    past: list[Any]
    present: Any
    future: list[Any]
    actionType: NotRequired[str]


def get_action_type(action: Action) -> Any:
    """Return the ``type`` discriminator of an action.

    Mappings are read by key and any other object by attribute, so both
    ``{"type": "INC"}`` and dataclass actions work. Returns ``None`` when the
    action carries no type.
    """
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


def empty_history(present: Any = None) -> dict[str, Any]:
    """Build a fresh history state around a present value."""
    return {PAST: [], PRESENT: present, FUTURE: []}
