"""Tests for interactive task collection."""

from collections.abc import Iterator

import pytest

from critpath.collect import InteractiveCollector
from critpath.models import TaskSpec


@pytest.fixture
def answers(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[str]]:
    """Queue of replies fed to typer.prompt."""
    queue: list[str] = []

    def fake_prompt(text: str, **kwargs: object) -> str:
        return queue.pop(0)

    monkeypatch.setattr("critpath.collect.typer.prompt", fake_prompt)
    yield queue
    assert queue == [], "not every prepared answer was used"


class TestInteractiveCollector:
    """Test the prompt loop."""

    def test_collects_until_blank_id(self, answers: list[str]) -> None:
        answers.extend(["A", "6", "B", "4", "A", "C", "5", "A, B", ""])

        specs = InteractiveCollector().collect()

        assert specs == [
            TaskSpec("A", 6, ()),
            TaskSpec("B", 4, ("A",)),
            TaskSpec("C", 5, ("A", "B")),
        ]

    def test_no_tasks(self, answers: list[str]) -> None:
        answers.append("")
        assert InteractiveCollector().collect() == []

    def test_reprompts_invalid_duration(
        self, answers: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers.extend(["A", "abc", "-3", "2", ""])

        specs = InteractiveCollector().collect()

        assert specs == [TaskSpec("A", 2, ())]
        out = capsys.readouterr().out
        assert "'abc' is not a whole number" in out
        assert "negative duration" in out

    def test_reprompts_unknown_dependency(
        self, answers: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers.extend(["A", "1", "B", "1", "Z", "A", ""])

        specs = InteractiveCollector().collect()

        assert specs[1] == TaskSpec("B", 1, ("A",))
        assert "Unknown tasks: Z" in capsys.readouterr().out

    def test_reprompts_duplicate_id(
        self, answers: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers.extend(["A", "1", "A", "B", "2", "", ""])

        specs = InteractiveCollector().collect()

        assert [s.id for s in specs] == ["A", "B"]
        assert "already exists" in capsys.readouterr().out
