"""Core inspection components"""

from .tree_builder import ExecutionTreeBuilder
from .renderer import ProcessStateRenderer
from .inspector import ProcessStateInspector

__all__ = [
    "ExecutionTreeBuilder",
    "ProcessStateRenderer",
    "ProcessStateInspector"
]
