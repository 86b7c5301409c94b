"""
Experiment Actions
==================

Components:
- base: Contract of an experiment action
- rest: REST actions against the ContinuITy frontend
- workload_model: Workload model generation with create-then-wait polling
"""

from .base import ExperimentAction
from .rest import (
    HttpClientError,
    HttpServerError,
    HttpStatusError,
    RestAction,
    RestActionError,
)
from .workload_model import UnexpectedResponseError, WorkloadModelGeneration

__all__ = [
    "ExperimentAction",
    "HttpClientError",
    "HttpServerError",
    "HttpStatusError",
    "RestAction",
    "RestActionError",
    "UnexpectedResponseError",
    "WorkloadModelGeneration",
]
