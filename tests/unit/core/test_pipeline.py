"""Unit tests for fieldext.core.pipeline.

Covers composition order, the empty pipeline, short-circuiting, contract
enforcement and the Pipeline wrapper.
"""

import logging

import pytest

from fieldext import (
    ActionTypeField,
    ConfigurationError,
    ContractViolationError,
    FieldExtender,
    Pipeline,
    PipelineConfig,
    compose,
)


class ShortCircuit(FieldExtender):
    """Returns a fixed state without forwarding."""

    def bind(self, next_transition, config):
        def transition(state, action):
            return {**state, "stopped": True}

        return transition


class ReturnsNone(FieldExtender):
    def bind(self, next_transition, config):
        def transition(state, action):
            next_transition(state, action)

        return transition


class CallsNextWhileBinding(FieldExtender):
    def bind(self, next_transition, config):
        next_transition({}, {"type": "EAGER"})
        return lambda state, action: next_transition(state, action)


class BindReturnsValue(FieldExtender):
    def bind(self, next_transition, config):
        return "not a function"


class TestComposeOrder:
    """Test suite for composition order."""

    def test_first_listed_extender_runs_first(self, tag_extender, recording_terminal):
        """Verify the terminal sees the trail in list order."""
        # Arrange
        transition = compose([tag_extender("A"), tag_extender("B"), tag_extender("C")], recording_terminal)

        # Act
        result = transition({}, {"type": "X"})

        # Assert
        assert result["trail"] == ["A", "B", "C"]
        assert len(recording_terminal.calls) == 1

    def test_composition_matches_manual_binding(self, tag_extender, recording_terminal, config):
        """Verify [A, B] around T equals A.bind(B.bind(T))."""
        # Arrange
        a, b = tag_extender("A"), tag_extender("B")
        composed = compose([a, b], recording_terminal, config)
        manual = a.bind(b.bind(recording_terminal, config), config)
        action = {"type": "X"}

        # Act & Assert
        assert composed({"n": 1}, action) == manual({"n": 1}, action)

    def test_terminal_called_once_per_dispatch(self, tag_extender, recording_terminal):
        """Verify the terminal runs exactly once per dispatch."""
        # Arrange
        transition = compose([tag_extender("A"), tag_extender("B")], recording_terminal)

        # Act
        transition({}, {"type": "ONE"})
        transition({}, {"type": "TWO"})

        # Assert
        assert [action["type"] for _, action in recording_terminal.calls] == ["ONE", "TWO"]

    def test_same_action_reaches_every_extender(self, recording_terminal):
        """Verify every extender and the terminal see the same action object."""
        # Arrange
        seen = []

        def spy(next_transition, config):
            def transition(state, action):
                seen.append(action)
                return next_transition(state, action)

            return transition

        action = {"type": "X"}

        # Act
        compose([spy, spy], recording_terminal)({}, action)

        # Assert
        assert all(item is action for item in seen)
        assert recording_terminal.calls[0][1] is action

    def test_caller_state_is_not_mutated(self, tag_extender, recording_terminal):
        """Verify copy-on-write extenders leave the caller's state untouched."""
        # Arrange
        state = {"trail": []}

        # Act
        compose([tag_extender("A")], recording_terminal)(state, {"type": "X"})

        # Assert
        assert state == {"trail": []}


class TestComposeEdgeCases:
    """Test suite for empty pipelines and short-circuiting."""

    def test_empty_pipeline_returns_terminal(self, recording_terminal):
        """Verify composing zero extenders yields the terminal itself."""
        assert compose([], recording_terminal) is recording_terminal

    def test_empty_pipeline_behaves_like_terminal(self):
        """Verify an empty pipeline gives the terminal's result."""

        def terminal(state, action):
            return {**state, "count": state.get("count", 0) + 1}

        pipeline = Pipeline([], terminal)

        assert pipeline({"count": 1}, {"type": "INC"}) == terminal({"count": 1}, {"type": "INC"})

    def test_short_circuit_skips_downstream(self, tag_extender, recording_terminal):
        """Verify an extender may stop the pipeline by not forwarding."""
        # Arrange
        transition = compose([tag_extender("A"), ShortCircuit(), tag_extender("B")], recording_terminal)

        # Act
        result = transition({}, {"type": "X"})

        # Assert
        assert result == {"trail": ["A"], "stopped": True}
        assert recording_terminal.calls == []

    def test_errors_from_extenders_propagate_unchanged(self, recording_terminal):
        """Verify extender exceptions are not wrapped."""

        def failing(next_transition, config):
            def transition(state, action):
                raise KeyError("boom")

            return transition

        transition = compose([failing], recording_terminal)

        with pytest.raises(KeyError, match="boom"):
            transition({}, {"type": "X"})

    def test_config_is_shared_by_every_extender(self, recording_terminal, config):
        """Verify the same configuration object is passed to each bind."""
        # Arrange
        received = []

        def capture(next_transition, pipeline_config):
            received.append(pipeline_config)
            return next_transition

        # Act
        compose([capture, capture], recording_terminal, config)

        # Assert
        assert received == [config, config]
        assert all(item is config for item in received)

    def test_default_config_when_omitted(self, recording_terminal):
        received = []

        def capture(next_transition, pipeline_config):
            received.append(pipeline_config)
            return next_transition

        compose([capture], recording_terminal)

        assert received == [PipelineConfig()]


class TestComposeErrors:
    """Test suite for assembly-time and contract errors."""

    def test_non_callable_terminal(self):
        """Verify a non-callable terminal is rejected at assembly time."""
        with pytest.raises(ConfigurationError, match="Terminal transition must be callable"):
            compose([], "reducer")

    def test_non_callable_extender(self, recording_terminal):
        """Verify non-callable entries are rejected at assembly time."""
        with pytest.raises(ConfigurationError):
            compose([ActionTypeField(), 42], recording_terminal)

    def test_bind_must_return_callable(self, recording_terminal):
        """Verify bind() returning a non-callable is rejected at assembly time."""
        with pytest.raises(ConfigurationError) as exc_info:
            compose([BindReturnsValue()], recording_terminal)

        assert exc_info.value.extender_name == "BindReturnsValue"

    def test_bind_must_not_call_next(self, recording_terminal):
        """Verify calling the downstream transition during bind is a violation."""
        with pytest.raises(ContractViolationError):
            compose([CallsNextWhileBinding()], recording_terminal)

        assert recording_terminal.calls == []

    def test_transition_returning_none(self, recording_terminal):
        """Verify a transition that returns nothing raises at dispatch."""
        transition = compose([ReturnsNone()], recording_terminal)

        with pytest.raises(ContractViolationError) as exc_info:
            transition({}, {"type": "X"})

        assert exc_info.value.extender_name == "ReturnsNone"
        assert exc_info.value.action_type == "X"

    def test_terminal_returning_none_is_not_blamed_on_extender(self):
        """Verify a terminal without a result is reported as the terminal."""
        transition = compose([ActionTypeField()], lambda state, action: None)

        with pytest.raises(ContractViolationError, match="Terminal transition returned no state") as exc_info:
            transition({}, {"type": "X"})

        assert exc_info.value.extender_name is None
        assert exc_info.value.action_type == "X"

    def test_extender_class_instead_of_instance(self, recording_terminal):
        with pytest.raises(ConfigurationError, match="instead of an instance"):
            compose([ActionTypeField], recording_terminal)


class TestPipeline:
    """Test suite for the Pipeline wrapper."""

    def test_extenders_are_fixed_tuple(self, tag_extender, recording_terminal):
        """Verify the bound extender order is exposed as an immutable tuple."""
        extenders = [tag_extender("A"), tag_extender("B")]
        pipeline = Pipeline(extenders, recording_terminal)

        extenders.reverse()

        assert isinstance(pipeline.extenders, tuple)
        assert [e.tag for e in pipeline.extenders] == ["A", "B"]
        assert pipeline({}, {"type": "X"})["trail"] == ["A", "B"]

    def test_function_entries_are_adapted(self, recording_terminal):
        def add_extra(next_transition, config):
            return lambda state, action: next_transition({**state, "extraField": "something"}, action)

        pipeline = Pipeline([add_extra], recording_terminal)

        assert pipeline.extenders[0].display_name == "add_extra"
        assert pipeline({}, {"type": "X"}) == {"extraField": "something"}

    def test_replay_processes_actions_in_order(self, recording_terminal):
        """Verify replay dispatches actions one after another."""
        pipeline = Pipeline([ActionTypeField()], recording_terminal)

        result = pipeline.replay({}, [{"type": "A"}, {"type": "B"}, {"type": "C"}])

        assert result == {"actionType": "C"}
        assert [action["type"] for _, action in recording_terminal.calls] == ["A", "B", "C"]

    def test_rebuild_changes_order(self, tag_extender, recording_terminal, config):
        """Verify reordering goes through rebuild and leaves the original intact."""
        pipeline = Pipeline([tag_extender("A"), tag_extender("B")], recording_terminal, config)

        reordered = pipeline.rebuild(list(reversed(pipeline.extenders)))

        assert reordered({}, {"type": "X"})["trail"] == ["B", "A"]
        assert pipeline({}, {"type": "X"})["trail"] == ["A", "B"]
        assert reordered.config is config
        assert reordered.terminal is recording_terminal

    def test_describe(self, tag_extender, recording_terminal):
        pipeline = Pipeline([tag_extender("A"), ActionTypeField()], recording_terminal)

        description = pipeline.describe()

        assert [item["name"] for item in description] == ["tag:A", "action_type"]
        assert [item["position"] for item in description] == [0, 1]
        assert repr(pipeline) == "Pipeline([tag:A, action_type])"

    def test_dispatch_is_logged(self, recording_terminal, caplog):
        """Verify dispatches are logged at DEBUG level."""
        pipeline = Pipeline([ActionTypeField()], recording_terminal)

        with caplog.at_level(logging.DEBUG, logger="fieldext.core.pipeline"):
            pipeline.dispatch({}, {"type": "LOGGED"})

        assert "LOGGED" in caplog.text
