"""Typer CLI: generate, describe."""

from __future__ import annotations

import sys

import typer

from txn_synth.config import get_config
from txn_synth.errors import SynthError
from txn_synth.export import write_chain, write_chain_file
from txn_synth.logging_config import setup_logging
from txn_synth.synthesize import describe_dataset, run_synthesis

app = typer.Typer(help="Synthetic transaction chain generator")


def _setup(config_path: str | None) -> None:
    try:
        cfg = get_config(config_path)
    except (OSError, ValueError) as e:
        typer.echo(f"Invalid config: {e}", err=True)
        raise typer.Exit(1) from e
    setup_logging(cfg.get("app", {}).get("log_level", "INFO"))


@app.command()
def generate(
    input_path: str = typer.Argument(..., help="Path to blockId,sender,recipient,amount file"),
    seed: int | None = typer.Option(None, "--seed", "-s", help="Random seed"),
    iterations: int | None = typer.Option(
        None, "--iterations", "-n", min=1, help="Number of transactions to generate"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write to this file instead of stdout"
    ),
    on_exhaustion: str | None = typer.Option(
        None, "--on-exhaustion", help="abort | reseed (when a key has no observations)"
    ),
    skip_repeats: bool | None = typer.Option(
        None,
        "--skip-repeats/--allow-repeats",
        help="Replace a sampled transaction identical to the previous one",
    ),
    merge: str | None = typer.Option(
        None, "--merge", help="endpoint | union_find (component merge strategy)"
    ),
    skip_incomplete: bool | None = typer.Option(
        None,
        "--skip-incomplete/--keep-incomplete",
        help="Exclude rows with an empty field from component extraction",
    ),
) -> None:
    """Generate a synthetic transaction chain mimicking INPUT_PATH."""
    _setup(config)
    try:
        result = run_synthesis(
            input_path,
            config_path=config,
            seed=seed,
            iterations=iterations,
            on_exhaustion=on_exhaustion,
            skip_repeats=skip_repeats,
            merge=merge,
            skip_incomplete=skip_incomplete,
        )
    except (OSError, SynthError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    if output:
        write_chain_file(result.chain, output)
        typer.echo(f"Wrote {len(result.chain)} transactions to {output}", err=True)
    else:
        write_chain(result.chain, sys.stdout)


@app.command()
def describe(
    input_path: str = typer.Argument(..., help="Path to blockId,sender,recipient,amount file"),
    config: str | None = typer.Option(None, "--config", "-c", help="Config YAML path"),
) -> None:
    """Show what the generator learns from INPUT_PATH (rows, components, table sizes)."""
    _setup(config)
    try:
        stats = describe_dataset(input_path, config_path=config)
    except (OSError, SynthError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    for key, value in stats.items():
        typer.echo(f"{key}: {value}")


if __name__ == "__main__":
    app()
