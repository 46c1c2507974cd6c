"""
Pytest 配置和公共 fixtures
"""
import pytest
from typing import Generator

from process_inspector.models.runtime import Execution, EventSubscription, Job, JobDefinition
from process_inspector.storage.repository import InMemoryRuntimeQueryService
from process_inspector.storage.sqlalchemy_repository import DatabaseManager


def make_chain(service: InMemoryRuntimeQueryService, process_instance_id: str, length: int):
    """创建一条 R -> C1 -> C2 ... 的执行链"""
    parent_id = None
    ids = []
    for index in range(length):
        execution_id = process_instance_id if index == 0 else f"C{index}"
        service.add_execution(Execution(
            id=execution_id,
            process_instance_id=process_instance_id,
            parent_id=parent_id
        ))
        ids.append(execution_id)
        parent_id = execution_id
    return ids


@pytest.fixture
def empty_service() -> InMemoryRuntimeQueryService:
    """空的内存查询服务"""
    return InMemoryRuntimeQueryService()


@pytest.fixture
def fork_service() -> InMemoryRuntimeQueryService:
    """根执行 R 下两个分支 A、B：A 有局部变量，B 有一个待执行作业"""
    service = InMemoryRuntimeQueryService()
    service.add_execution(Execution(id="R", process_instance_id="R"))
    service.add_execution(Execution(id="A", process_instance_id="R", parent_id="R"))
    service.add_execution(Execution(id="B", process_instance_id="R", parent_id="R"))
    service.set_variable_local("A", "var", "val")
    service.add_job_definition(JobDefinition(
        id="D", job_type="async-continuation", job_configuration="cfg-1"
    ))
    service.add_job(Job(id="job-1", execution_id="B", job_definition_id="D"))
    return service


@pytest.fixture
def signal_service() -> InMemoryRuntimeQueryService:
    """并行网关 + 信号中间事件的流程实例"""
    service = InMemoryRuntimeQueryService()
    service.add_execution(Execution(id="pi-1", process_instance_id="pi-1"))
    service.add_execution(Execution(
        id="ex-2", process_instance_id="pi-1", parent_id="pi-1", activity_id="UserTask_1"
    ))
    service.add_execution(Execution(
        id="ex-3", process_instance_id="pi-1", parent_id="pi-1", activity_id="UserTask_2"
    ))
    service.add_execution(Execution(
        id="ex-4", process_instance_id="pi-1", parent_id="ex-3",
        activity_id="IntermediateCatchEvent_1"
    ))
    service.set_variable_local("ex-3", "var", "val")
    service.add_event_subscription(EventSubscription(
        id="es-1", execution_id="ex-4", event_name="alert",
        activity_id="IntermediateCatchEvent_1", event_type="signal"
    ))
    # 另一个流程实例的数据不应出现在报告中
    service.add_execution(Execution(id="pi-9", process_instance_id="pi-9"))
    service.set_variable_local("pi-9", "other", 1)
    return service


@pytest.fixture
def test_database(tmp_path) -> Generator[DatabaseManager, None, None]:
    """创建测试数据库"""
    # 使用临时 SQLite 文件数据库进行测试
    db_manager = DatabaseManager(f"sqlite:///{tmp_path / 'engine.db'}")
    db_manager.initialize(create_schema=True)

    yield db_manager

    db_manager.close()


@pytest.fixture
def chain_builder():
    """执行链构造函数"""
    return make_chain
