"""Tests for the predefined datasets."""

import pytest

from critpath.datasets import dataset_names, dataset_specs, dataset_title, load_dataset
from critpath.exceptions import UnknownDatasetError
from critpath.models import TimeWindow
from critpath.scheduler import SchedulingService


class TestDatasets:
    """Test dataset lookup and the expected schedules."""

    def test_names(self) -> None:
        assert dataset_names() == ["a", "b"]

    def test_lookup_is_case_insensitive(self) -> None:
        assert dataset_title("B") == dataset_title("b")

    def test_unknown_dataset(self) -> None:
        with pytest.raises(UnknownDatasetError, match="Available datasets: a, b"):
            dataset_specs("c")

    def test_each_call_returns_fresh_project(self) -> None:
        first = load_dataset("a")
        SchedulingService().schedule(first)
        second = load_dataset("a")

        assert first is not second
        assert all(task.earliest is None for task in second)

    def test_dataset_a(self) -> None:
        result = SchedulingService().schedule(load_dataset("a"))

        assert len(result.tasks) == 12
        assert result.horizon.end == 19
        assert result.critical_path == ["C", "G", "I", "K"]
        assert result.critical_chains() == [["C", "G", "I", "K"]]
        assert {t.task_id: t.slack for t in result.tasks} == {
            "A": 3,
            "B": 3,
            "C": 0,
            "D": 3,
            "E": 5,
            "F": 3,
            "G": 0,
            "H": 5,
            "I": 0,
            "J": 4,
            "K": 0,
            "L": 4,
        }
        assert result.get("I").earliest == TimeWindow(7, 15)
        assert result.get("A").latest == TimeWindow(3, 9)

    def test_dataset_b(self) -> None:
        result = SchedulingService().schedule(load_dataset("b"))

        assert result.horizon.end == 27
        assert result.critical_path == ["A", "C", "D", "E"]
        assert {t.task_id: t.earliest for t in result.tasks} == {
            "A": TimeWindow(0, 10),
            "B": TimeWindow(10, 14),
            "C": TimeWindow(10, 17),
            "D": TimeWindow(17, 22),
            "E": TimeWindow(22, 27),
            "F": TimeWindow(17, 20),
        }

    @pytest.mark.parametrize("name", ["a", "b"])
    def test_results_repeat(self, name: str) -> None:
        first = SchedulingService().schedule(load_dataset(name))
        second = SchedulingService().schedule(load_dataset(name))
        assert first == second
