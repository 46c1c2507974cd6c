"""
流程状态检查器
"""
import logging
from typing import Any, Dict, Optional, TextIO

import click

from ..models.tree import ExecutionNode
from ..storage.repository import RuntimeQueryService
from .renderer import ProcessStateRenderer
from .tree_builder import ExecutionTreeBuilder


logger = logging.getLogger(__name__)


class ProcessStateInspector:
    """只读的流程实例状态快照工具

    多次查询之间没有事务一致性：实例被并发修改时，报告反映的是
    各查询时刻拼接出的快照。
    """

    def __init__(
        self,
        query_service: RuntimeQueryService,
        renderer: Optional[ProcessStateRenderer] = None,
        strict: bool = False
    ):
        self.query_service = query_service
        self.renderer = renderer or ProcessStateRenderer()
        self.tree_builder = ExecutionTreeBuilder(query_service, strict=strict)

    def build_tree(self, process_instance_id: str) -> Optional[ExecutionNode]:
        """构建执行树"""
        return self.tree_builder.build(process_instance_id)

    def render_process_state(self, process_instance_id: str) -> str:
        """渲染流程实例状态报告"""
        root = self.build_tree(process_instance_id)
        report = self.renderer.render(root)
        if root is not None:
            logger.debug(
                f"Rendered {root.count()} executions for process instance {process_instance_id}"
            )
        return report

    def describe_process_state(self, process_instance_id: str) -> Optional[Dict[str, Any]]:
        """返回执行树的字典形式，未找到根执行时为 None"""
        root = self.build_tree(process_instance_id)
        return root.to_dict() if root is not None else None

    def dump_process_state(self, process_instance_id: str, file: Optional[TextIO] = None) -> str:
        """渲染报告并输出到控制台（或指定流）"""
        report = self.render_process_state(process_instance_id)
        click.echo(report, file=file)
        return report
