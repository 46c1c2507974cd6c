"""
运行时查询接口定义
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..exceptions import JobDefinitionNotFoundError
from ..models.runtime import Execution, EventSubscription, Job, JobDefinition


class RuntimeQueryService(ABC):
    """流程引擎只读查询接口"""

    @abstractmethod
    def list_executions(self, process_instance_id: str) -> List[Execution]:
        """列出流程实例的全部执行"""
        pass

    @abstractmethod
    def get_local_variables(self, execution_id: str) -> Dict[str, Any]:
        """获取执行的局部变量"""
        pass

    @abstractmethod
    def list_event_subscriptions(self, execution_id: str) -> List[EventSubscription]:
        """列出执行的事件订阅"""
        pass

    @abstractmethod
    def list_jobs(self, execution_id: str) -> List[Job]:
        """列出执行的作业"""
        pass

    @abstractmethod
    def get_job_definition(self, job_definition_id: str) -> JobDefinition:
        """获取作业定义，不存在时抛出 JobDefinitionNotFoundError"""
        pass


# 内存实现（用于测试和快照文件）
class InMemoryRuntimeQueryService(RuntimeQueryService):
    """内存查询服务实现"""

    def __init__(self):
        self.executions: List[Execution] = []
        self.variables: Dict[str, Dict[str, Any]] = {}
        self.event_subscriptions: List[EventSubscription] = []
        self.jobs: List[Job] = []
        self.job_definitions: Dict[str, JobDefinition] = {}

    def add_execution(self, execution: Execution) -> Execution:
        self.executions.append(execution)
        return execution

    def set_variable_local(self, execution_id: str, name: str, value: Any):
        self.variables.setdefault(execution_id, {})[name] = value

    def add_event_subscription(self, subscription: EventSubscription) -> EventSubscription:
        self.event_subscriptions.append(subscription)
        return subscription

    def add_job(self, job: Job) -> Job:
        self.jobs.append(job)
        return job

    def add_job_definition(self, definition: JobDefinition) -> JobDefinition:
        self.job_definitions[definition.id] = definition
        return definition

    def list_executions(self, process_instance_id: str) -> List[Execution]:
        return [
            execution for execution in self.executions
            if execution.process_instance_id == process_instance_id
        ]

    def get_local_variables(self, execution_id: str) -> Dict[str, Any]:
        return dict(self.variables.get(execution_id, {}))

    def list_event_subscriptions(self, execution_id: str) -> List[EventSubscription]:
        return [s for s in self.event_subscriptions if s.execution_id == execution_id]

    def list_jobs(self, execution_id: str) -> List[Job]:
        return [job for job in self.jobs if job.execution_id == execution_id]

    def get_job_definition(self, job_definition_id: str) -> JobDefinition:
        definition = self.job_definitions.get(job_definition_id)
        if definition is None:
            raise JobDefinitionNotFoundError(job_definition_id)
        return definition
