"""
Experiment Runner
=================

Runs experiment actions one after another. Actions communicate through data
holders owned by whoever assembles the experiment.
"""

import time
from datetime import datetime, timezone
from typing import List, Optional

from experimentation.config.logging import get_logger
from experimentation.core.actions.base import ExperimentAction
from experimentation.models.schemas import ActionRecord, ActionStatus, ExperimentReport

logger = get_logger(__name__)


class Experiment:
    """An ordered sequence of experiment actions."""

    def __init__(self, name: str, actions: Optional[List[ExperimentAction]] = None):
        self.name = name
        self.actions: List[ExperimentAction] = list(actions or [])
        self.logger = logger.bind(component="experiment", experiment=name)

    def append(self, action: ExperimentAction) -> "Experiment":
        """Append an action and return the experiment for chaining."""
        self.actions.append(action)
        return self

    async def run(self) -> ExperimentReport:
        """
        Execute all actions in order.

        Returns:
            Report with one record per executed action

        Raises:
            Exception: Whatever an action raised; later actions are skipped
        """
        report = ExperimentReport(name=self.name, started_at=datetime.now(timezone.utc))
        self.logger.info("Experiment started", actions=len(self.actions))

        for action in self.actions:
            self.logger.info("Executing action", action=action.name)
            start_time = time.perf_counter()
            try:
                await action.execute()
            except Exception:
                report.actions.append(
                    ActionRecord(
                        name=action.name,
                        status=ActionStatus.FAILED,
                        duration=time.perf_counter() - start_time,
                    )
                )
                self.logger.error("Action raised, aborting experiment", action=action.name, exc_info=True)
                raise

            status = ActionStatus.BROKEN if action.is_broken() else ActionStatus.COMPLETED
            if status == ActionStatus.BROKEN:
                self.logger.warning("Action reported a broken run", action=action.name)
            report.actions.append(
                ActionRecord(
                    name=action.name,
                    status=status,
                    duration=time.perf_counter() - start_time,
                )
            )

        report.finished_at = datetime.now(timezone.utc)
        self.logger.info("Experiment finished", actions=len(report.actions))
        return report
