"""
流程状态文本渲染器
"""
from typing import Any, Optional

from ..models.runtime import Execution, EventSubscription
from ..models.tree import ExecutionNode, JobEntry


def _text(value: Any) -> str:
    """None 输出为 null，布尔值输出为 true/false"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ProcessStateRenderer:
    """把执行树渲染为缩进文本报告

    每个条目前都有一个换行符；属性行与所属执行行缩进相同，
    子执行比父执行多缩进 indent_step 列。
    """

    def __init__(self, indent_step: int = 4, base_indent: int = 0):
        if indent_step < 0 or base_indent < 0:
            raise ValueError("Indentation must not be negative")
        self.indent_step = indent_step
        self.base_indent = base_indent

    def render(self, root: Optional[ExecutionNode]) -> str:
        """渲染整棵执行树"""
        if root is None:
            return ""

        parts = []
        for node, depth in root.iter_nodes():
            prefix = " " * (self.base_indent + depth * self.indent_step)
            parts.append(f"\n{prefix}{self.format_execution(node.execution)}")
            for name, value in node.variables.items():
                parts.append(f"\n{prefix}{self.format_variable(name, value)}")
            for subscription in node.event_subscriptions:
                parts.append(f"\n{prefix}{self.format_event_subscription(subscription)}")
            for entry in node.jobs:
                parts.append(f"\n{prefix}{self.format_job(entry)}")
        return "".join(parts)

    def format_execution(self, execution: Execution) -> str:
        line = execution.id
        if execution.activity_id is not None:
            line += f" in {execution.activity_id}"
        if execution.transition_id is not None:
            line += f" at {execution.transition_id}"
        return line

    def format_variable(self, name: str, value: Any) -> str:
        return f"- Variable '{name}' = {_text(value)}"

    def format_event_subscription(self, subscription: EventSubscription) -> str:
        return (
            f"- EventSubscription[{subscription.id}] for {_text(subscription.event_name)} "
            f"in {_text(subscription.activity_id)}"
        )

    def format_job(self, entry: JobEntry) -> str:
        definition = entry.definition
        return (
            f"- Job[{entry.job.id}] {_text(definition.job_type)} "
            f"({_text(definition.job_configuration)})"
        )
