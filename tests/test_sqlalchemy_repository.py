"""
SQLAlchemy 查询服务测试
"""
import pytest

from process_inspector.core import ProcessStateInspector
from process_inspector.exceptions import JobDefinitionNotFoundError
from process_inspector.storage.sqlalchemy_models import (
    RuntimeExecution, RuntimeVariable, RuntimeEventSubscription, RuntimeJob, JobDefinitionRecord
)
from process_inspector.storage.sqlalchemy_repository import DatabaseManager, SQLAlchemyRuntimeQueryService


@pytest.fixture
def populated_database(test_database):
    """写入一个流程实例的运行时数据"""
    with test_database.get_session() as session:
        session.add_all([
            RuntimeExecution(id="pi-1", process_instance_id="pi-1"),
            RuntimeExecution(id="ex-2", process_instance_id="pi-1", parent_id="pi-1", activity_id="UserTask_1"),
            RuntimeExecution(id="ex-3", process_instance_id="pi-1", parent_id="ex-2",
                             activity_id="ServiceTask_1", transition_id="Flow_3"),
            RuntimeExecution(id="pi-9", process_instance_id="pi-9"),
            RuntimeVariable(id="v1", execution_id="ex-2", name="var", value="val"),
            RuntimeVariable(id="v2", execution_id="ex-2", name="amount", value=42),
            RuntimeEventSubscription(id="es-1", execution_id="ex-2", event_type="message",
                                     event_name="cancel", activity_id="Boundary_1"),
            JobDefinitionRecord(id="jd-1", job_type="async-continuation", job_configuration="async-before"),
            RuntimeJob(id="job-1", execution_id="ex-3", job_definition_id="jd-1"),
        ])
    return test_database


class TestSQLAlchemyRuntimeQueryService:
    """SQLAlchemy 查询服务测试类"""

    def test_list_executions(self, populated_database):
        """测试按流程实例查询执行"""
        service = SQLAlchemyRuntimeQueryService(populated_database)

        executions = service.list_executions("pi-1")

        assert sorted(e.id for e in executions) == ["ex-2", "ex-3", "pi-1"]
        ex3 = next(e for e in executions if e.id == "ex-3")
        assert ex3.parent_id == "ex-2"
        assert ex3.transition_id == "Flow_3"

    def test_get_local_variables(self, populated_database):
        """测试查询局部变量"""
        service = SQLAlchemyRuntimeQueryService(populated_database)

        assert service.get_local_variables("ex-2") == {"amount": 42, "var": "val"}
        assert service.get_local_variables("pi-1") == {}

    def test_event_subscriptions_and_jobs(self, populated_database):
        """测试查询事件订阅和作业"""
        service = SQLAlchemyRuntimeQueryService(populated_database)

        subscriptions = service.list_event_subscriptions("ex-2")
        assert [(s.id, s.event_name, s.event_type) for s in subscriptions] == [("es-1", "cancel", "message")]

        jobs = service.list_jobs("ex-3")
        assert [(j.id, j.job_definition_id) for j in jobs] == [("job-1", "jd-1")]
        assert service.list_jobs("ex-2") == []

    def test_get_job_definition(self, populated_database):
        """测试查询作业定义"""
        service = SQLAlchemyRuntimeQueryService(populated_database)

        definition = service.get_job_definition("jd-1")
        assert definition.job_type == "async-continuation"
        assert definition.job_configuration == "async-before"

        with pytest.raises(JobDefinitionNotFoundError):
            service.get_job_definition("missing")

    def test_render_from_database(self, populated_database):
        """测试从数据库渲染完整报告"""
        inspector = ProcessStateInspector(SQLAlchemyRuntimeQueryService(populated_database))

        report = inspector.render_process_state("pi-1")

        assert report == (
            "\npi-1"
            "\n    ex-2 in UserTask_1"
            "\n    - Variable 'amount' = 42"
            "\n    - Variable 'var' = val"
            "\n    - EventSubscription[es-1] for cancel in Boundary_1"
            "\n        ex-3 in ServiceTask_1 at Flow_3"
            "\n        - Job[job-1] async-continuation (async-before)"
        )


def test_session_requires_initialize():
    db_manager = DatabaseManager("sqlite://")

    with pytest.raises(RuntimeError):
        with db_manager.get_session():
            pass
