"""Command-line interface for critpath."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import context
from .collect import InteractiveCollector
from .config import ReportFormat, UnifiedConfig, discover_config
from .datasets import dataset_names, dataset_specs, dataset_title, load_dataset
from .exceptions import CritpathError
from .graph import GraphGenerator, GraphView
from .loader import load_project, write_project_file
from .logger import setup_logger
from .models import Project
from .report import listed_chains, render_report
from .scheduler import BackwardStrategy, SchedulingService, ScheduleResult

app = typer.Typer(
    name="critpath",
    help="Critical Path Method scheduling for task dependency graphs",
    add_completion=False,
)

FileArgument = Annotated[
    Path | None, typer.Argument(help="Path to the project YAML file", show_default=False)
]
DatasetOption = Annotated[
    str | None, typer.Option("--dataset", "-d", help="Use a predefined dataset (a or b)")
]
OutputOption = Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")]


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: critpath_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for critpath commands."""
    setup_logger(verbose)
    context.set_config_path(config)


def _fail(message: str) -> typer.Exit:
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def _load_config(file: Path | None) -> UnifiedConfig:
    try:
        return discover_config(file)
    except (FileNotFoundError, ValueError) as e:
        raise _fail(str(e)) from None


def _load_input(file: Path | None, dataset: str | None) -> Project:
    """Load the project from exactly one of a file or a dataset."""
    if file is not None and dataset is not None:
        raise _fail("Cannot specify both a project file and --dataset")
    if file is None and dataset is None:
        raise _fail("Specify a project file or --dataset")

    if dataset is not None:
        return load_dataset(dataset)
    assert file is not None
    return load_project(file)


def _run_schedule(
    project: Project,
    config: UnifiedConfig,
    *,
    deadline: int | None = None,
    strategy: BackwardStrategy | None = None,
) -> ScheduleResult:
    updates: dict[str, object] = {}
    if deadline is not None:
        updates["deadline"] = deadline
    if strategy is not None:
        updates["backward_strategy"] = strategy
    scheduling_config = config.scheduler.model_copy(update=updates)
    return SchedulingService(scheduling_config).schedule(project)


def _emit(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Written to {output}")
    else:
        typer.echo(text, nl=False)


@app.command()
def schedule(  # noqa: PLR0913 - CLI command needs multiple options
    file: FileArgument = None,
    *,
    dataset: DatasetOption = None,
    report_format: Annotated[
        ReportFormat | None,
        typer.Option("--format", "-f", help="Report format (default from config: text)"),
    ] = None,
    deadline: Annotated[
        int | None,
        typer.Option("--deadline", min=0, help="Fixed project deadline instead of the horizon"),
    ] = None,
    strategy: Annotated[
        BackwardStrategy | None,
        typer.Option("--strategy", help="Backward pass strategy"),
    ] = None,
    output: OutputOption = None,
) -> None:
    """Compute earliest/latest windows, slack and the critical path."""
    config = _load_config(file)
    try:
        project = _load_input(file, dataset)
        result = _run_schedule(project, config, deadline=deadline, strategy=strategy)
    except CritpathError as e:
        raise _fail(str(e)) from None

    text = render_report(
        result,
        report_format or config.report.format,
        show_chains=config.report.show_chains,
    )
    _emit(text, output)


@app.command(name="critical-path")
def critical_path_command(
    file: FileArgument = None,
    *,
    dataset: DatasetOption = None,
    chains: Annotated[
        bool, typer.Option("--chains/--no-chains", help="Also print ordered critical chains")
    ] = True,
) -> None:
    """Print the zero-slack tasks."""
    config = _load_config(file)
    try:
        result = _run_schedule(_load_input(file, dataset), config)
    except CritpathError as e:
        raise _fail(str(e)) from None

    typer.echo(" ".join(result.critical_path))
    if chains:
        listed, hidden = listed_chains(result)
        for chain in listed:
            typer.echo(" -> ".join(chain))
        if hidden:
            typer.echo(f"... {hidden} more critical chains not shown")


@app.command()
def graph(
    file: FileArgument = None,
    *,
    dataset: DatasetOption = None,
    view: Annotated[
        GraphView, typer.Option("--view", help="Type of graph to generate")
    ] = GraphView.ALL,
    output: OutputOption = None,
) -> None:
    """Generate a DOT graph with the critical path highlighted."""
    config = _load_config(file)
    try:
        result = _run_schedule(_load_input(file, dataset), config)
    except CritpathError as e:
        raise _fail(str(e)) from None

    _emit(GraphGenerator(result).generate(view), output)


@app.command()
def datasets() -> None:
    """List the predefined datasets."""
    for name in dataset_names():
        typer.echo(f"{name}  {dataset_title(name)} ({len(dataset_specs(name))} tasks)")


@app.command()
def collect(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Save the collected tasks as a project file"),
    ] = None,
    name: Annotated[str, typer.Option("--name", help="Project name")] = "Project",
    report_format: Annotated[
        ReportFormat | None,
        typer.Option("--format", "-f", help="Report format (default from config: text)"),
    ] = None,
) -> None:
    """Enter tasks interactively, then print their schedule."""
    config = _load_config(None)
    specs = InteractiveCollector().collect()
    if not specs:
        raise _fail("No tasks entered")

    if output:
        write_project_file(output, specs, name=name)
        typer.echo(f"Project written to {output}")

    try:
        result = _run_schedule(Project.from_specs(specs, name=name), config)
    except CritpathError as e:
        raise _fail(str(e)) from None

    typer.echo()
    typer.echo(
        render_report(
            result,
            report_format or config.report.format,
            show_chains=config.report.show_chains,
        ),
        nl=False,
    )


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
