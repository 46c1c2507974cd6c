"""
流程引擎运行时实体快照
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Execution:
    """执行实例（流程实例中的一个控制流分支）"""
    id: str
    process_instance_id: str
    parent_id: Optional[str] = None
    activity_id: Optional[str] = None
    transition_id: Optional[str] = None

    @property
    def is_root(self) -> bool:
        """是否为根执行"""
        return self.parent_id is None


@dataclass(frozen=True)
class EventSubscription:
    """事件订阅"""
    id: str
    execution_id: str
    event_name: Optional[str] = None
    activity_id: Optional[str] = None
    event_type: Optional[str] = None


@dataclass(frozen=True)
class Job:
    """待执行作业"""
    id: str
    execution_id: str
    job_definition_id: Optional[str] = None


@dataclass(frozen=True)
class JobDefinition:
    """作业定义"""
    id: str
    job_type: str
    job_configuration: Optional[str] = None
    activity_id: Optional[str] = None
