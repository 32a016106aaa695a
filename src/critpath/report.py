"""Report rendering for schedule results."""

from __future__ import annotations

import json
from typing import Any

from .config import ReportFormat
from .scheduler.core import ScheduledTask, ScheduleResult

_COLUMNS = ("Task", "Duration", "Earliest", "Latest", "Slack", "Critical")


def _row(task: ScheduledTask) -> tuple[str, ...]:
    return (
        task.task_id,
        str(task.duration),
        str(task.earliest),
        str(task.latest),
        str(task.slack),
        "*" if task.critical else "",
    )


def listed_chains(result: ScheduleResult) -> tuple[list[list[str]], int]:
    """Capped chain listing plus how many chains it leaves out."""
    chains = result.critical_chains()
    hidden = result.critical_chain_count() - len(chains)
    return chains, hidden


def format_text(result: ScheduleResult, *, show_chains: bool = True) -> str:
    """Render an aligned plain-text table followed by a summary."""
    rows = [_COLUMNS] + [_row(task) for task in result.tasks]
    widths = [max(len(row[i]) for row in rows) for i in range(len(_COLUMNS))]

    lines = [f"Project: {result.project_name}", ""]
    for n, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip())
        if n == 0:
            lines.append("  ".join("-" * width for width in widths))

    lines.append("")
    lines.append(f"Horizon: {result.horizon.end}")
    if result.deadline != result.horizon.end:
        lines.append(f"Deadline: {result.deadline}")
    lines.append(f"Critical path: {', '.join(result.critical_path) or '(none)'}")
    if show_chains:
        chains, hidden = listed_chains(result)
        for chain in chains:
            lines.append(f"  {' -> '.join(chain)}")
        if hidden:
            lines.append(f"  ... {hidden} more critical chains not shown")
    return "\n".join(lines) + "\n"


def format_markdown(result: ScheduleResult, *, show_chains: bool = True) -> str:
    """Render a Markdown document with a schedule table."""
    lines = [f"# {result.project_name}", ""]
    lines.append("| " + " | ".join(_COLUMNS) + " |")
    lines.append("|" + "|".join("-" * (len(col) + 2) for col in _COLUMNS) + "|")
    for task in result.tasks:
        cells = list(_row(task))
        if task.critical:
            cells[0] = f"**{task.task_id}**"
            cells[-1] = "yes"
        lines.append("| " + " | ".join(cells) + " |")

    lines.extend(["", f"**Horizon:** {result.horizon.end}"])
    if result.deadline != result.horizon.end:
        lines.extend(["", f"**Deadline:** {result.deadline}"])
    lines.extend(["", f"**Critical path:** {', '.join(result.critical_path) or '(none)'}"])
    if show_chains and result.critical_path:
        chains, hidden = listed_chains(result)
        lines.extend(["", "## Critical chains", ""])
        lines.extend(f"- {' → '.join(chain)}" for chain in chains)
        if hidden:
            lines.extend(["", f"*{hidden} more critical chains not shown.*"])
    return "\n".join(lines) + "\n"


def result_to_dict(result: ScheduleResult, *, show_chains: bool = True) -> dict[str, Any]:
    """Plain-data view of a result, suitable for JSON."""
    data: dict[str, Any] = {
        "project": result.project_name,
        "horizon": result.horizon.end,
        "deadline": result.deadline,
        "order": result.order,
        "tasks": [
            {
                "id": task.task_id,
                "duration": task.duration,
                "dependencies": list(task.dependencies),
                "earliest": {"start": task.earliest.start, "end": task.earliest.end},
                "latest": {"start": task.latest.start, "end": task.latest.end},
                "slack": task.slack,
                "critical": task.critical,
            }
            for task in result.tasks
        ],
        "critical_path": result.critical_path,
        "critical_edges": [list(edge) for edge in result.critical_edges],
        "metadata": result.metadata,
    }
    if show_chains:
        chains, hidden = listed_chains(result)
        data["critical_chains"] = chains
        data["critical_chain_count"] = len(chains) + hidden
    return data


def format_json(result: ScheduleResult, *, show_chains: bool = True) -> str:
    return json.dumps(result_to_dict(result, show_chains=show_chains), indent=2) + "\n"


def render_report(
    result: ScheduleResult,
    report_format: ReportFormat = ReportFormat.TEXT,
    *,
    show_chains: bool = True,
) -> str:
    """Render ``result`` in the requested format."""
    if report_format == ReportFormat.TEXT:
        return format_text(result, show_chains=show_chains)
    if report_format == ReportFormat.MARKDOWN:
        return format_markdown(result, show_chains=show_chains)
    if report_format == ReportFormat.JSON:
        return format_json(result, show_chains=show_chains)
    raise ValueError(f"Unknown report format: {report_format}")
