"""fieldext CLI commands."""

from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table

from fieldext.common.exceptions import FieldExtError
from fieldext.common.types import Action, State, empty_history, get_action_type
from fieldext.extenders.registry import get_default_registry


def passthrough_transition(state: State, action: Action) -> State:
    """Terminal used by ``replay``: returns the extended state unchanged."""
    return state


def list_extenders_command(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """List the registered field extenders."""
    cli_ctx = ctx.obj
    cli_ctx.json_mode = json_output

    registry = get_default_registry()
    entries = [registry.get(name) for name in registry.list_extenders()]

    if json_output:
        cli_ctx.console.print_json(
            data=[
                {
                    "name": entry.name,
                    "description": entry.description,
                    "params": entry.expected_params,
                }
                for entry in entries
            ]
        )
        return

    table = Table(title="Field extenders")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    table.add_column("Options", style="dim")
    for entry in entries:
        table.add_row(entry.name, entry.description, ", ".join(entry.expected_params))
    cli_ctx.console.print(table)


def replay_command(
    ctx: typer.Context,
    pipeline_file: Annotated[
        Path, typer.Argument(help="Pipeline definition (YAML/JSON)", exists=True, dir_okay=False)
    ],
    actions_file: Annotated[
        Path, typer.Argument(help="List of actions to dispatch (YAML/JSON)", exists=True, dir_okay=False)
    ],
    state_file: Annotated[
        Path | None,
        typer.Option("--state", "-s", help="Initial history state (YAML/JSON)", exists=True, dir_okay=False),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the final state as JSON")
    ] = False,
):
    """
    Replay actions through a pipeline and print the resulting state.

    The pipeline wraps a pass-through terminal, so the output shows exactly
    what the extenders contributed.

    Example:
        fieldext replay pipeline.yaml actions.yaml --state initial.json
    """
    cli_ctx = ctx.obj
    cli_ctx.json_mode = json_output

    try:
        definition = cli_ctx.loader.load(pipeline_file)
    except FieldExtError as e:
        cli_ctx.fail(e)

    actions = cli_ctx.read_data(actions_file)
    if not isinstance(actions, list):
        cli_ctx.fail(ValueError(f"Actions file must contain a list: {actions_file}"))

    state: Any = empty_history()
    if state_file is not None:
        state = cli_ctx.read_data(state_file)
        if not isinstance(state, Mapping):
            cli_ctx.fail(ValueError(f"State file must contain a mapping: {state_file}"))

    pipeline = definition.build(passthrough_transition)
    cli_ctx.print_verbose(f"Pipeline: {pipeline!r}")

    try:
        for action in actions:
            cli_ctx.print_verbose(f"Dispatching {get_action_type(action)!r}")
            state = pipeline.dispatch(state, action)
    except FieldExtError as e:
        cli_ctx.fail(e)

    if json_output:
        cli_ctx.console.print_json(data=state, default=str)
    else:
        cli_ctx.console.print(
            Panel(Pretty(state), title=f"State after {len(actions)} action(s)")
        )
