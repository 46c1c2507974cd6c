"""Runtime snapshot models and execution tree"""

from .runtime import (
    Execution, EventSubscription, Job, JobDefinition
)
from .tree import ExecutionNode, JobEntry

__all__ = [
    "Execution",
    "EventSubscription",
    "Job",
    "JobDefinition",
    "ExecutionNode",
    "JobEntry"
]
