"""Graphviz DOT export of a scheduled project."""

from __future__ import annotations

from enum import Enum

from .scheduler.core import ScheduledTask, ScheduleResult

CRITICAL_FILL = "lightcoral"
DEFAULT_FILL = "lightblue"


class GraphView(Enum):
    """Types of graph views available."""

    ALL = "all"
    CRITICAL_PATH = "critical-path"


class GraphGenerator:
    """Generate dependency graphs in DOT format from a schedule result."""

    def __init__(self, result: ScheduleResult):
        self.result = result

    def generate(self, view: GraphView = GraphView.ALL) -> str:
        """Generate a DOT graph for the given view."""
        if view == GraphView.ALL:
            return self._generate(self.result.tasks, "Schedule")
        if view == GraphView.CRITICAL_PATH:
            critical = [task for task in self.result.tasks if task.critical]
            return self._generate(critical, "CriticalPath")
        raise ValueError(f"Unknown view: {view}")

    def _generate(self, tasks: list[ScheduledTask], graph_name: str) -> str:
        included = {task.task_id: task for task in tasks}

        lines = [f"digraph {graph_name} {{"]
        lines.append("  rankdir=LR;")
        lines.append("  node [shape=box];")
        lines.append("")

        for task in tasks:
            lines.append(f"  {self._format_node(task)}")
        lines.append("")

        # Edges point from dependency to dependent
        lines.append("  // Dependencies")
        for task in tasks:
            for dep_id in task.dependencies:
                dependency = included.get(dep_id)
                if dependency is None:
                    continue
                lines.append(f"  {self._format_edge(dependency, task)}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _escape_label(self, label: str) -> str:
        """Escape special characters in DOT labels."""
        return label.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")

    def _quote_id(self, task_id: str) -> str:
        return f'"{self._escape_label(task_id)}"'

    def _format_node(self, task: ScheduledTask) -> str:
        label = self._escape_label(
            f"{task.task_id} ({task.duration})\n"
            f"ES {task.earliest.start} EF {task.earliest.end}\n"
            f"LS {task.latest.start} LF {task.latest.end}\n"
            f"slack {task.slack}"
        )
        attrs = [f'label="{label}"', "style=filled"]
        if task.critical:
            attrs.append(f'fillcolor="{CRITICAL_FILL}"')
            attrs.append("penwidth=2")
        else:
            attrs.append(f'fillcolor="{DEFAULT_FILL}"')
        return f"{self._quote_id(task.task_id)} [{', '.join(attrs)}];"

    def _format_edge(self, dependency: ScheduledTask, task: ScheduledTask) -> str:
        edge = f"{self._quote_id(dependency.task_id)} -> {self._quote_id(task.task_id)}"
        # Critical edge: both ends critical and no gap between them
        if (
            dependency.critical
            and task.critical
            and dependency.earliest.end == task.earliest.start
        ):
            return f'{edge} [color="red", penwidth=2];'
        return f"{edge};"
