"""
执行树构建器

把引擎返回的扁平执行列表（仅通过 parent_id 互相引用）重建为执行树，
并为每个执行挂载局部变量、事件订阅和作业。
"""
import logging
from collections import defaultdict
from typing import Dict, List, Optional

from ..exceptions import (
    JobDefinitionNotFoundError, OrphanedExecutionError, RootExecutionNotFoundError
)
from ..models.runtime import Execution, Job, JobDefinition
from ..models.tree import ExecutionNode, JobEntry
from ..storage.repository import RuntimeQueryService


logger = logging.getLogger(__name__)


class ExecutionTreeBuilder:
    """执行树构建器"""

    def __init__(self, query_service: RuntimeQueryService, strict: bool = False):
        self.query_service = query_service
        # 严格模式下结构异常抛出错误，否则记录警告
        self.strict = strict

    def build(self, process_instance_id: str) -> Optional[ExecutionNode]:
        """
        构建流程实例的执行树

        Args:
            process_instance_id: 流程实例ID

        Returns:
            Optional[ExecutionNode]: 根节点；未找到根执行且非严格模式时为 None
        """
        executions = list(self.query_service.list_executions(process_instance_id))
        logger.debug(
            f"Fetched {len(executions)} executions for process instance {process_instance_id}"
        )

        root = self.find_root(executions)
        if root is None:
            if self.strict:
                raise RootExecutionNotFoundError(process_instance_id)
            logger.warning(f"No root execution found for process instance {process_instance_id}")
            return None

        children_by_parent = self.group_by_parent(executions)

        root_node = self._create_node(root)
        visited = {root.id}
        stack = [root_node]

        while stack:
            node = stack.pop()
            for child in children_by_parent.get(node.id, []):
                if child.id in visited:
                    continue
                visited.add(child.id)
                child_node = self._create_node(child)
                node.children.append(child_node)
                stack.append(child_node)

        unreachable = [e.id for e in executions if e.id not in visited]
        if unreachable:
            if self.strict:
                raise OrphanedExecutionError(process_instance_id, unreachable)
            logger.warning(
                f"Dropping {len(unreachable)} executions unreachable from root "
                f"{root.id}: {', '.join(unreachable)}"
            )

        return root_node

    @staticmethod
    def find_root(executions: List[Execution]) -> Optional[Execution]:
        """按出现顺序返回第一个没有父执行的执行"""
        for execution in executions:
            if execution.is_root:
                return execution
        return None

    @staticmethod
    def group_by_parent(executions: List[Execution]) -> Dict[str, List[Execution]]:
        """按父执行ID分组，组内保持出现顺序"""
        groups: Dict[str, List[Execution]] = defaultdict(list)
        for execution in executions:
            if not execution.is_root:
                groups[execution.parent_id].append(execution)
        return groups

    def _create_node(self, execution: Execution) -> ExecutionNode:
        """查询执行的局部状态并创建节点"""
        return ExecutionNode(
            execution=execution,
            variables=dict(self.query_service.get_local_variables(execution.id)),
            event_subscriptions=list(self.query_service.list_event_subscriptions(execution.id)),
            jobs=[
                JobEntry(job=job, definition=self._resolve_job_definition(job))
                for job in self.query_service.list_jobs(execution.id)
            ]
        )

    def _resolve_job_definition(self, job: Job) -> JobDefinition:
        if job.job_definition_id is None:
            raise JobDefinitionNotFoundError(None, job_id=job.id)
        try:
            return self.query_service.get_job_definition(job.job_definition_id)
        except JobDefinitionNotFoundError as e:
            if e.job_id is None:
                raise JobDefinitionNotFoundError(job.job_definition_id, job_id=job.id) from e
            raise
