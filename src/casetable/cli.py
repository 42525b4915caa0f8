from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path

import typer

from casetable.app import TestApp
from casetable.config import RunConfig, load_config
from casetable.errors import ConfigurationError

app = typer.Typer(name="casetable", help="Run table-driven test suites")


def _load_app(target: str) -> TestApp:
    """Import ``package.module:attribute`` and return the TestApp it names."""
    module_name, _, attr = target.partition(":")
    attr = attr or "app"

    # resolve targets against the working directory, as `python -m` does
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    importlib.invalidate_caches()

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"cannot import '{module_name}': {e}") from e

    test_app = getattr(module, attr, None)
    if not isinstance(test_app, TestApp):
        raise ConfigurationError(
            f"'{module_name}:{attr}' is not a TestApp "
            f"(got {type(test_app).__name__})"
        )
    return test_app


def _resolve(target: str | None, config_file: str | None) -> tuple[TestApp, RunConfig]:
    config = RunConfig()
    if config_file is not None:
        config_path = Path(config_file)
        if not config_path.exists():
            raise ConfigurationError(f"config file not found: {config_file}")
        config = load_config(config_path)

    target = target or config.target
    if not target:
        raise ConfigurationError("no target given and none set in the config file")
    return _load_app(target), config


@app.command()
def run(
    target: str | None = typer.Argument(
        None, help="TestApp to run, as package.module:attribute"
    ),
    suite: list[str] | None = typer.Option(
        None, "--suite", "-s", help="Run only this suite (repeatable)"
    ),
    case: str | None = typer.Option(
        None, "--case", "-c", help="Run only this case of the selected suite"
    ),
    config: str | None = typer.Option(None, "--config", help="Path to YAML run config"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Write debug output to this file"
    ),
):
    """Run every registered suite (or a selection) and exit with the result."""
    try:
        test_app, run_config = _resolve(target, config)
        overrides = run_config.model_dump()
        if suite:
            overrides["suites"] = suite
        if case is not None:
            overrides["case"] = case
        if verbose:
            overrides["verbose"] = True
        if debug_log is not None:
            overrides["debug_log"] = Path(debug_log)
        test_app.config = RunConfig(**overrides)
    except (ConfigurationError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    raise typer.Exit(test_app.main())


@app.command("list")
def list_cases(
    target: str = typer.Argument(help="TestApp to inspect, as package.module:attribute"),
):
    """Print every registered case as suite::case."""
    try:
        test_app = _load_app(target)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for test_suite in test_app.suites:
        for case_name in test_suite.case_names():
            typer.echo(f"{test_suite.name}::{case_name}")


def main() -> None:
    app()
