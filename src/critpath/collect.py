"""Interactive collection of task definitions from the terminal."""

from __future__ import annotations

import typer

from .exceptions import InvalidDurationError
from .models import TaskSpec, validate_duration


class InteractiveCollector:
    """Prompts for tasks one at a time until a blank ID is entered.

    Dependencies must name tasks entered earlier, so the collected list is
    already in a valid order.
    """

    def collect(self) -> list[TaskSpec]:
        """Prompt for tasks.

        Returns:
            Task descriptors in the order they were entered
        """
        typer.echo("Enter tasks. Leave the ID empty to finish.\n")
        specs: list[TaskSpec] = []
        known: set[str] = set()

        while True:
            task_id = self._prompt_id(known)
            if not task_id:
                break

            duration = self._prompt_duration(task_id)
            dependencies = self._prompt_dependencies(task_id, known)

            specs.append(TaskSpec(id=task_id, duration=duration, dependency_ids=dependencies))
            known.add(task_id)
            typer.echo(f"  → Added {task_id} ({duration}){self._format_deps(dependencies)}\n")

        typer.echo(f"Collected {len(specs)} tasks")
        return specs

    def _prompt_id(self, known: set[str]) -> str:
        while True:
            task_id = typer.prompt("Task ID", default="", show_default=False).strip()
            if task_id not in known:
                return task_id
            typer.echo(f"  Task '{task_id}' already exists. Choose another ID.")

    def _prompt_duration(self, task_id: str) -> int:
        while True:
            raw = typer.prompt(f"  Duration of {task_id}").strip()
            try:
                return validate_duration(task_id, int(raw))
            except ValueError:
                typer.echo(f"  '{raw}' is not a whole number.")
            except InvalidDurationError as e:
                typer.echo(f"  {e}")

    def _prompt_dependencies(self, task_id: str, known: set[str]) -> tuple[str, ...]:
        if not known:
            return ()
        while True:
            raw = typer.prompt(
                f"  Dependencies of {task_id} (comma-separated, empty for none)",
                default="",
                show_default=False,
            )
            dependencies = tuple(dict.fromkeys(d.strip() for d in raw.split(",") if d.strip()))
            unknown = [d for d in dependencies if d not in known]
            if not unknown:
                return dependencies
            typer.echo(
                f"  Unknown tasks: {', '.join(unknown)}. Known tasks: {', '.join(sorted(known))}"
            )

    def _format_deps(self, dependencies: tuple[str, ...]) -> str:
        if not dependencies:
            return ""
        return f" after {', '.join(dependencies)}"
