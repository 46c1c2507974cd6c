"""
执行树模型
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .runtime import Execution, EventSubscription, Job, JobDefinition


@dataclass
class JobEntry:
    """作业及其定义"""
    job: Job
    definition: JobDefinition


@dataclass
class ExecutionNode:
    """执行树节点"""
    execution: Execution
    variables: Dict[str, Any] = field(default_factory=dict)
    event_subscriptions: List[EventSubscription] = field(default_factory=list)
    jobs: List[JobEntry] = field(default_factory=list)
    children: List['ExecutionNode'] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.execution.id

    def iter_nodes(self) -> Iterator[Tuple['ExecutionNode', int]]:
        """先序遍历，返回 (节点, 深度)

        使用显式栈，深层链不会触及递归上限。
        """
        stack = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            # 逆序压栈，保证子节点按原顺序出栈
            for child in reversed(node.children):
                stack.append((child, depth + 1))

    def count(self) -> int:
        """子树中的执行数量（含自身）"""
        return sum(1 for _ in self.iter_nodes())

    def find(self, execution_id: str) -> Optional['ExecutionNode']:
        """按ID查找节点"""
        for node, _ in self.iter_nodes():
            if node.id == execution_id:
                return node
        return None

    def to_dict(self) -> Dict[str, Any]:
        """转换为可JSON序列化的字典"""
        result = self._own_dict()
        pending = [(self, result)]
        while pending:
            node, data = pending.pop()
            for child in node.children:
                child_data = child._own_dict()
                data["children"].append(child_data)
                pending.append((child, child_data))
        return result

    def _own_dict(self) -> Dict[str, Any]:
        execution = self.execution
        return {
            "id": execution.id,
            "parent_id": execution.parent_id,
            "activity_id": execution.activity_id,
            "transition_id": execution.transition_id,
            "variables": dict(self.variables),
            "event_subscriptions": [
                {
                    "id": subscription.id,
                    "event_name": subscription.event_name,
                    "activity_id": subscription.activity_id,
                    "event_type": subscription.event_type
                }
                for subscription in self.event_subscriptions
            ],
            "jobs": [
                {
                    "id": entry.job.id,
                    "job_definition_id": entry.definition.id,
                    "job_type": entry.definition.job_type,
                    "job_configuration": entry.definition.job_configuration
                }
                for entry in self.jobs
            ],
            "children": []
        }
