"""
Pydantic Models and Schemas
===========================

Payloads exchanged with the ContinuITy frontend and the report produced by
an experiment run.
"""

from typing import Optional, List, Any
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Format of the fromDate/toDate query parameters expected by the frontend
DATE_PATTERN = "%Y/%m/%d/%H:%M:%S"


class ActionStatus(str, Enum):
    """Outcome of executing a single experiment action."""
    COMPLETED = "completed"
    BROKEN = "broken"
    FAILED = "failed"


class TimeRange(BaseModel):
    """Time window restricting the monitoring data of a workload model."""
    start: datetime
    stop: datetime

    def to_query(self) -> str:
        """Render the range as the query suffix appended to a data link."""
        return (
            f"?fromDate={self.start.strftime(DATE_PATTERN)}"
            f"&toDate={self.stop.strftime(DATE_PATTERN)}"
        )


class WorkloadModelCreationRequest(BaseModel):
    """Body of ``POST /workloadmodel/{type}/create``."""
    data: str
    tag: str


class WorkloadModelCreationResponse(BaseModel):
    """
    Response of the create call.

    Only ``message`` and ``link`` are interpreted. Present values of any JSON
    type are stringified; absent keys and nulls stay ``None``.
    """
    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None
    link: Optional[str] = None

    @field_validator("message", "link", mode="before")
    @classmethod
    def stringify(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        if isinstance(v, bool):
            # JSON booleans keep their JSON spelling
            return "true" if v else "false"
        return str(v)


class ActionRecord(BaseModel):
    """Execution record of one action within an experiment."""
    name: str
    status: ActionStatus
    duration: float = Field(..., ge=0.0, description="Execution time in seconds")


class ExperimentReport(BaseModel):
    """Summary of an experiment run."""
    name: str
    started_at: datetime
    finished_at: Optional[datetime] = None
    actions: List[ActionRecord] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True if no action raised or reported itself broken."""
        return all(record.status == ActionStatus.COMPLETED for record in self.actions)
