"""
Process State Inspector - 流程实例状态检查工具
"""

__version__ = "0.1.0"

from .core.inspector import ProcessStateInspector
from .core.tree_builder import ExecutionTreeBuilder
from .core.renderer import ProcessStateRenderer
from .models.runtime import Execution, EventSubscription, Job, JobDefinition
from .models.tree import ExecutionNode
from .storage.repository import RuntimeQueryService, InMemoryRuntimeQueryService

__all__ = [
    "ProcessStateInspector",
    "ExecutionTreeBuilder",
    "ProcessStateRenderer",
    "Execution",
    "EventSubscription",
    "Job",
    "JobDefinition",
    "ExecutionNode",
    "RuntimeQueryService",
    "InMemoryRuntimeQueryService"
]
