"""Pytest configuration and fixtures for fieldext tests.

This module provides shared fixtures for the fieldext test suite: sample
history states, a recording terminal and small helper extenders.
"""

from typing import Any

import pytest

from fieldext import FieldExtender, PipelineConfig


class RecordingTerminal:
    """Terminal transition that records every call and returns the state it got."""

    def __init__(self):
        self.calls: list[tuple[dict[str, Any], Any]] = []

    def __call__(self, state, action):
        self.calls.append((state, action))
        return state


class TagExtender(FieldExtender):
    """Appends its tag to the state's ``trail`` list (copy-on-write)."""

    def __init__(self, tag: str):
        self.tag = tag

    @property
    def display_name(self) -> str:
        return f"tag:{self.tag}"

    def bind(self, next_transition, config):
        tag = self.tag

        def transition(state, action):
            new_state = dict(state)
            new_state["trail"] = [*state.get("trail", []), tag]
            return next_transition(new_state, action)

        return transition


@pytest.fixture
def recording_terminal() -> RecordingTerminal:
    """Terminal that records calls."""
    return RecordingTerminal()


@pytest.fixture
def tag_extender():
    """Factory for tagging extenders."""
    return TagExtender


@pytest.fixture
def config() -> PipelineConfig:
    """Pipeline configuration with short action types."""
    return PipelineConfig(undo_type="UNDO", redo_type="REDO", init_types=("INIT",))


@pytest.fixture
def history() -> dict[str, Any]:
    """History state with two past entries and one future entry."""
    return {
        "past": [{"a": 1, "b": 2}, {"a": 3, "b": 4}],
        "present": {"a": 5, "b": 6},
        "future": [{"a": 7, "b": 8}],
    }


@pytest.fixture
def sample_pipeline_file(tmp_path):
    """Create a temporary YAML pipeline definition."""
    content = """\
description: sample pipeline
options:
  redo_type: REDO
  init_types: [INIT]
  app_name: demo
field_extenders:
  - action_type
  - name: nullify_fields
    fields: [b]
    null_value: null
"""
    path = tmp_path / "pipeline.yaml"
    path.write_text(content, encoding="utf-8")
    return path
