"""
Unit Tests for the Experiment Runner
====================================
"""

import pytest

from experimentation.core.actions.base import ExperimentAction
from experimentation.core.data import DataHolder
from experimentation.core.experiment import Experiment
from experimentation.models.schemas import ActionStatus


class RecordingAction(ExperimentAction):
    """Appends its label to a shared list."""

    def __init__(self, label: str, calls: list):
        self.label = label
        self.calls = calls

    @property
    def name(self) -> str:
        return self.label

    async def execute(self) -> None:
        self.calls.append(self.label)


class CopyAction(ExperimentAction):
    """Copies the value of one holder into another."""

    def __init__(self, source: DataHolder, target: DataHolder):
        self.source = source
        self.target = target

    async def execute(self) -> None:
        self.target.set(self.source.get())


class BrokenAction(ExperimentAction):
    """Reports failure through its broken holder instead of raising."""

    def __init__(self, broken: DataHolder):
        self.broken = broken

    def is_broken(self) -> bool:
        return self.broken.is_set() and self.broken.get()

    async def execute(self) -> None:
        self.broken.set(True)


class FailingAction(ExperimentAction):
    async def execute(self) -> None:
        raise RuntimeError("boom")


class TestExperiment:
    """Test sequential execution."""

    @pytest.mark.asyncio
    async def test_runs_actions_in_order(self):
        """Test actions run in the order they were appended."""
        calls = []
        experiment = (
            Experiment("ordered")
            .append(RecordingAction("first", calls))
            .append(RecordingAction("second", calls))
            .append(RecordingAction("third", calls))
        )

        report = await experiment.run()

        assert calls == ["first", "second", "third"]
        assert [record.name for record in report.actions] == ["first", "second", "third"]
        assert report.succeeded
        assert report.finished_at is not None

    @pytest.mark.asyncio
    async def test_holders_pass_values_between_actions(self):
        """Test a value written by one action is visible to the next."""
        source = DataHolder("source", "abc123")
        middle: DataHolder[str] = DataHolder("middle")
        target: DataHolder[str] = DataHolder("target")

        await Experiment("pipeline", [CopyAction(source, middle), CopyAction(middle, target)]).run()

        assert target.get() == "abc123"

    @pytest.mark.asyncio
    async def test_raising_action_aborts(self):
        """Test an exception stops the experiment and propagates."""
        calls = []
        experiment = Experiment(
            "aborting",
            [RecordingAction("before", calls), FailingAction(), RecordingAction("after", calls)],
        )

        with pytest.raises(RuntimeError, match="boom"):
            await experiment.run()

        assert calls == ["before"]

    @pytest.mark.asyncio
    async def test_empty_experiment(self):
        """Test an experiment without actions succeeds trivially."""
        report = await Experiment("empty").run()

        assert report.actions == []
        assert report.succeeded

    @pytest.mark.asyncio
    async def test_records_status(self):
        """Test completed actions are recorded as such."""
        report = await Experiment("status", [RecordingAction("only", [])]).run()

        assert report.actions[0].status == ActionStatus.COMPLETED
        assert report.actions[0].duration >= 0.0

    @pytest.mark.asyncio
    async def test_broken_action_fails_report(self):
        """Test an action that marks its run broken is recorded as broken."""
        calls = []
        broken: DataHolder[bool] = DataHolder("broken")
        experiment = Experiment(
            "broken", [BrokenAction(broken), RecordingAction("after", calls)]
        )

        report = await experiment.run()

        assert [record.status for record in report.actions] == [
            ActionStatus.BROKEN,
            ActionStatus.COMPLETED,
        ]
        assert calls == ["after"]
        assert not report.succeeded
