"""
流程状态检查器异常定义
"""
from typing import Iterable, Optional


class ProcessInspectorError(Exception):
    """检查器基础异常"""
    pass


class StructuralAnomalyError(ProcessInspectorError):
    """运行时数据结构异常"""
    pass


class RootExecutionNotFoundError(StructuralAnomalyError):
    """未找到根执行"""
    def __init__(self, process_instance_id: str):
        self.process_instance_id = process_instance_id
        super().__init__(
            f"No root execution found for process instance '{process_instance_id}'"
        )


class OrphanedExecutionError(StructuralAnomalyError):
    """执行无法从根执行到达（父执行缺失）"""
    def __init__(self, process_instance_id: str, execution_ids: Iterable[str]):
        self.process_instance_id = process_instance_id
        self.execution_ids = list(execution_ids)
        super().__init__(
            f"Process instance '{process_instance_id}' has executions unreachable "
            f"from its root: {', '.join(self.execution_ids)}"
        )


class JobDefinitionNotFoundError(StructuralAnomalyError):
    """作业定义不存在"""
    def __init__(self, job_definition_id: Optional[str], job_id: Optional[str] = None):
        self.job_definition_id = job_definition_id
        self.job_id = job_id
        msg = f"Job definition '{job_definition_id}' not found"
        if job_id:
            msg += f" for job '{job_id}'"
        super().__init__(msg)


class SnapshotFormatError(ProcessInspectorError):
    """快照文件格式错误"""
    pass
