"""Constants and default values for fieldext pipeline configuration.

This module centralizes the default action types and the environment
variable settings read by ``PipelineConfig.from_env``.
"""

import os
from typing import Final

# =============================================================================
# Environment Variable Names
# =============================================================================

ENV_VAR_PREFIX: Final[str] = "FIELDEXT_"

ENV_UNDO_TYPE: Final[str] = f"{ENV_VAR_PREFIX}UNDO_TYPE"
ENV_REDO_TYPE: Final[str] = f"{ENV_VAR_PREFIX}REDO_TYPE"
ENV_JUMP_TYPE: Final[str] = f"{ENV_VAR_PREFIX}JUMP_TYPE"
ENV_JUMP_TO_PAST_TYPE: Final[str] = f"{ENV_VAR_PREFIX}JUMP_TO_PAST_TYPE"
ENV_JUMP_TO_FUTURE_TYPE: Final[str] = f"{ENV_VAR_PREFIX}JUMP_TO_FUTURE_TYPE"
ENV_CLEAR_HISTORY_TYPE: Final[str] = f"{ENV_VAR_PREFIX}CLEAR_HISTORY_TYPE"
ENV_INIT_TYPES: Final[str] = f"{ENV_VAR_PREFIX}INIT_TYPES"
ENV_LIMIT: Final[str] = f"{ENV_VAR_PREFIX}LIMIT"


# =============================================================================
# Default Action Types
# =============================================================================

ACTION_PREFIX: Final[str] = "@@fieldext/"

DEFAULT_UNDO_TYPE: Final[str] = f"{ACTION_PREFIX}UNDO"
DEFAULT_REDO_TYPE: Final[str] = f"{ACTION_PREFIX}REDO"
DEFAULT_JUMP_TYPE: Final[str] = f"{ACTION_PREFIX}JUMP"
DEFAULT_JUMP_TO_PAST_TYPE: Final[str] = f"{ACTION_PREFIX}JUMP_TO_PAST"
DEFAULT_JUMP_TO_FUTURE_TYPE: Final[str] = f"{ACTION_PREFIX}JUMP_TO_FUTURE"
DEFAULT_CLEAR_HISTORY_TYPE: Final[str] = f"{ACTION_PREFIX}CLEAR_HISTORY"
DEFAULT_INIT_TYPES: Final[tuple[str, ...]] = (f"{ACTION_PREFIX}INIT",)

# Field written by the action type recorder
DEFAULT_ACTION_TYPE_FIELD: Final[str] = "actionType"

# Separator for list-valued environment variables
LIST_SEPARATOR: Final[str] = ","


# =============================================================================
# Helper Functions
# =============================================================================


def get_env_str(env_var: str, default: str) -> str:
    """
    Get string value from environment variable.

    Args:
        env_var: Environment variable name
        default: Default value if not set

    Returns:
        String value from environment or default
    """
    return os.getenv(env_var, default)


def get_env_list(env_var: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """
    Get a comma separated list from an environment variable.

    Blank items are dropped, so ``"A,,B "`` yields ``("A", "B")``.
    """
    value = os.getenv(env_var)
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(LIST_SEPARATOR) if item.strip())


def get_env_optional_int(env_var: str) -> int | None:
    """Get an optional integer, ``None`` when unset or not a number."""
    value = os.getenv(env_var)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


# =============================================================================
# Configuration Value Getters (reads from environment)
# =============================================================================


def get_undo_type() -> str:
    """Get undo action type from environment or default."""
    return get_env_str(ENV_UNDO_TYPE, DEFAULT_UNDO_TYPE)


def get_redo_type() -> str:
    """Get redo action type from environment or default."""
    return get_env_str(ENV_REDO_TYPE, DEFAULT_REDO_TYPE)


def get_jump_type() -> str:
    return get_env_str(ENV_JUMP_TYPE, DEFAULT_JUMP_TYPE)


def get_jump_to_past_type() -> str:
    return get_env_str(ENV_JUMP_TO_PAST_TYPE, DEFAULT_JUMP_TO_PAST_TYPE)


def get_jump_to_future_type() -> str:
    return get_env_str(ENV_JUMP_TO_FUTURE_TYPE, DEFAULT_JUMP_TO_FUTURE_TYPE)


def get_clear_history_type() -> str:
    return get_env_str(ENV_CLEAR_HISTORY_TYPE, DEFAULT_CLEAR_HISTORY_TYPE)


def get_init_types() -> tuple[str, ...]:
    """Get initialization action types from environment or default."""
    return get_env_list(ENV_INIT_TYPES, DEFAULT_INIT_TYPES)


def get_limit() -> int | None:
    """Get history limit from environment, ``None`` for unlimited."""
    return get_env_optional_int(ENV_LIMIT)


# =============================================================================
# Documentation
# =============================================================================

ENVIRONMENT_VARIABLE_DOCS = """
Environment Variables Reference:

Action Types:
  FIELDEXT_UNDO_TYPE            - Action type that signals undo
                                  Default: @@fieldext/UNDO
  FIELDEXT_REDO_TYPE            - Action type that signals redo
                                  Default: @@fieldext/REDO
  FIELDEXT_JUMP_TYPE            - Action type that signals a relative jump
                                  Default: @@fieldext/JUMP
  FIELDEXT_JUMP_TO_PAST_TYPE    - Default: @@fieldext/JUMP_TO_PAST
  FIELDEXT_JUMP_TO_FUTURE_TYPE  - Default: @@fieldext/JUMP_TO_FUTURE
  FIELDEXT_CLEAR_HISTORY_TYPE   - Default: @@fieldext/CLEAR_HISTORY
  FIELDEXT_INIT_TYPES           - Comma separated initialization types
                                  Default: @@fieldext/INIT

History:
  FIELDEXT_LIMIT                - Maximum number of past entries (unset = no limit)

Examples:
  export FIELDEXT_REDO_TYPE="REDO"
  export FIELDEXT_INIT_TYPES="@@INIT,@@app/INIT"
"""
