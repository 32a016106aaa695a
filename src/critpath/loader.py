"""Project file loading and writing."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError
from yaml.constructor import ConstructorError

from .exceptions import ParseError, ValidationError
from .models import Project, TaskSpec
from .schemas import ProjectSchema


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with a repeated key.

    Plain ``safe_load`` keeps the last value, which would silently drop a
    task declared twice.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)  # type: ignore[arg-type]
            try:
                duplicate = key in seen
            except TypeError:
                continue  # Unhashable; the base class reports it
            if duplicate:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def parse_project_data(data: dict[str, Any]) -> tuple[str, list[TaskSpec]]:
    """Turn loaded YAML data into a project name and task descriptors."""
    try:
        schema = ProjectSchema(**data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid project structure: {e}") from e

    specs = [
        TaskSpec.create(task_id, entry.duration, entry.depends_on)
        for task_id, entry in schema.tasks.items()
    ]
    return schema.name, specs


def read_project_file(path: Path | str) -> tuple[str, list[TaskSpec]]:
    """Read a project YAML file into a name and task descriptors.

    Raises:
        ParseError: If the file is missing or is not valid YAML
        ValidationError: If the structure or a duration is invalid
    """
    path = Path(path)
    if not path.exists():
        raise ParseError(f"File not found: {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.load(f, Loader=_UniqueKeyLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("YAML must contain a dictionary at the root level")

    return parse_project_data(data)  # type: ignore[arg-type]


def load_project(path: Path | str) -> Project:
    """Load a project file and build its graph.

    Tasks may reference tasks declared later in the file. Duplicate IDs and
    unknown references fail here; cycles fail when the project is scheduled.
    """
    name, specs = read_project_file(path)
    return Project.from_specs(specs, name=name)


def dump_project(specs: Sequence[TaskSpec], name: str = "Project") -> str:
    """Render task descriptors in the project file format."""
    tasks: dict[str, dict[str, Any]] = {}
    for spec in specs:
        entry: dict[str, Any] = {"duration": spec.duration}
        if spec.dependency_ids:
            entry["depends_on"] = list(spec.dependency_ids)
        tasks[spec.id] = entry
    return yaml.dump(
        {"name": name, "tasks": tasks},
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def write_project_file(path: Path | str, specs: Sequence[TaskSpec], name: str = "Project") -> None:
    """Write task descriptors as a project YAML file."""
    Path(path).write_text(dump_project(specs, name), encoding="utf-8")
