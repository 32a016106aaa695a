"""Tests for CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from critpath.cli import app
from critpath.loader import write_project_file
from critpath.models import TaskSpec
from critpath.scheduler import MAX_CRITICAL_CHAINS

from tests.conftest import layered_rows

runner = CliRunner()
WEBSITE = str(Path(__file__).parent.parent / "examples" / "website.yaml")


def _write_project(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "project.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestScheduleCommand:
    """Test the schedule command."""

    def test_dataset(self) -> None:
        result = runner.invoke(app, ["schedule", "--dataset", "b"])

        assert result.exit_code == 0
        assert "Project: Diamond network" in result.stdout
        assert "Horizon: 27" in result.stdout
        assert "Critical path: A, C, D, E" in result.stdout

    def test_project_file(self) -> None:
        result = runner.invoke(app, ["schedule", WEBSITE])

        assert result.exit_code == 0
        assert "Horizon: 23" in result.stdout

    def test_json_format(self) -> None:
        result = runner.invoke(app, ["schedule", "--dataset", "a", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["critical_path"] == ["C", "G", "I", "K"]

    def test_strategy_option(self) -> None:
        result = runner.invoke(
            app, ["schedule", "--dataset", "a", "--format", "json", "--strategy", "relaxation"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["metadata"]["strategy"] == "relaxation"

    def test_deadline_option(self) -> None:
        result = runner.invoke(app, ["schedule", "--dataset", "b", "--deadline", "30"])

        assert result.exit_code == 0
        assert "Deadline: 30" in result.stdout

    def test_infeasible_deadline(self) -> None:
        result = runner.invoke(app, ["schedule", "--dataset", "b", "--deadline", "20"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "would have to start at" in result.output

    def test_output_file(self, tmp_path: Path) -> None:
        output = tmp_path / "report.md"
        result = runner.invoke(
            app, ["schedule", "--dataset", "b", "--format", "markdown", "--output", str(output)]
        )

        assert result.exit_code == 0
        assert output.read_text().startswith("# Diamond network")

    def test_cycle_is_reported(self, tmp_path: Path) -> None:
        path = _write_project(
            tmp_path,
            "tasks:\n  A: {duration: 1, depends_on: [B]}\n  B: {duration: 1, depends_on: [A]}\n",
        )

        result = runner.invoke(app, ["schedule", str(path)])

        assert result.exit_code == 1
        assert "Circular dependency detected: A -> B -> A" in result.output

    def test_unknown_dataset(self) -> None:
        result = runner.invoke(app, ["schedule", "--dataset", "zzz"])

        assert result.exit_code == 1
        assert "Unknown dataset 'zzz'" in result.output

    def test_requires_exactly_one_input(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["schedule"])
        assert result.exit_code == 1
        assert "Specify a project file or --dataset" in result.output

        result = runner.invoke(app, ["schedule", WEBSITE, "--dataset", "a"])
        assert result.exit_code == 1
        assert "Cannot specify both" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["schedule", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_config_file_sets_format(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.yaml"
        config.write_text("report:\n  format: markdown\n")

        result = runner.invoke(app, ["--config", str(config), "schedule", "--dataset", "b"])

        assert result.exit_code == 0
        assert result.stdout.startswith("# Diamond network")

    def test_invalid_config_file(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.yaml"
        config.write_text("scheduler:\n  deadline: -5\n")

        result = runner.invoke(app, ["--config", str(config), "schedule", "--dataset", "b"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_verbose_logs_assignments(self) -> None:
        result = runner.invoke(app, ["-v", "1", "schedule", "--dataset", "b"])

        assert result.exit_code == 0
        assert "E: earliest [22, 27]" in result.output


class TestCriticalPathCommand:
    """Test the critical-path command."""

    def test_dataset_a(self) -> None:
        result = runner.invoke(app, ["critical-path", "--dataset", "a"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["C G I K", "C -> G -> I -> K"]

    def test_no_chains(self) -> None:
        result = runner.invoke(app, ["critical-path", "--dataset", "b", "--no-chains"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["A C D E"]

    def test_chain_listing_is_capped(self, tmp_path: Path) -> None:
        specs = [TaskSpec.create(task_id, d, deps) for task_id, d, deps in layered_rows(12)]
        path = tmp_path / "layers.yaml"
        write_project_file(path, specs, name="Layers")

        result = runner.invoke(app, ["critical-path", str(path)])

        lines = result.stdout.splitlines()
        assert result.exit_code == 0
        assert len(lines) == 1 + MAX_CRITICAL_CHAINS + 1
        assert lines[-1] == f"... {2**12 - MAX_CRITICAL_CHAINS} more critical chains not shown"


class TestGraphCommand:
    """Test the graph command."""

    def test_dot_output(self) -> None:
        result = runner.invoke(app, ["graph", "--dataset", "b"])

        assert result.exit_code == 0
        assert "digraph Schedule" in result.stdout
        assert '"A" -> "C" [color="red", penwidth=2];' in result.stdout

    def test_critical_view_to_file(self, tmp_path: Path) -> None:
        output = tmp_path / "critical.dot"
        result = runner.invoke(
            app, ["graph", "--dataset", "b", "--view", "critical-path", "-o", str(output)]
        )

        assert result.exit_code == 0
        assert output.read_text().startswith("digraph CriticalPath")


class TestDatasetsCommand:
    """Test the datasets command."""

    def test_lists_datasets(self) -> None:
        result = runner.invoke(app, ["datasets"])

        assert result.exit_code == 0
        assert "a  Twelve-task network (12 tasks)" in result.stdout
        assert "b  Diamond network (6 tasks)" in result.stdout


class TestCollectCommand:
    """Test the interactive collect command."""

    def test_collect_and_save(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "collected.yaml"

        result = runner.invoke(
            app,
            ["collect", "--output", str(output), "--name", "Typed"],
            input="A\n6\nB\n4\nA\n\n",
        )

        assert result.exit_code == 0, result.output
        assert "Collected 2 tasks" in result.stdout
        assert "Horizon: 10" in result.stdout
        assert output.read_text().startswith("name: Typed\n")

        # The saved file schedules identically
        rerun = runner.invoke(app, ["critical-path", str(output), "--no-chains"])
        assert rerun.stdout.splitlines() == ["A B"]

    def test_collect_nothing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["collect"], input="\n")

        assert result.exit_code == 1
        assert "No tasks entered" in result.output
