"""
Experiment Action Base
======================

Contract shared by every step of an experiment.
"""

from abc import ABC, abstractmethod


class ExperimentAction(ABC):
    """
    A single step of an experiment.

    Actions exchange values through data holders passed in at construction
    and report failures through them rather than by raising.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    def is_broken(self) -> bool:
        """Whether the last execution reported a failure through its holders."""
        return False

    @abstractmethod
    async def execute(self) -> None:
        """Execute the action once."""

    def __str__(self) -> str:
        return self.name
