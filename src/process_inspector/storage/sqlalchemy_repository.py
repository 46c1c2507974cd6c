"""
SQLAlchemy 查询服务实现
"""
import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..exceptions import JobDefinitionNotFoundError
from ..models.runtime import Execution, EventSubscription, Job, JobDefinition
from .repository import RuntimeQueryService
from .sqlalchemy_models import (
    RuntimeExecution as RuntimeExecutionDB,
    RuntimeVariable as RuntimeVariableDB,
    RuntimeEventSubscription as RuntimeEventSubscriptionDB,
    RuntimeJob as RuntimeJobDB,
    JobDefinitionRecord as JobDefinitionDB,
    Base
)


logger = logging.getLogger(__name__)


class DatabaseManager:
    """数据库管理器"""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine: Optional[Engine] = None
        self.session_maker = None

    def initialize(self, create_schema: bool = False):
        """初始化数据库连接"""
        self.engine = create_engine(
            self.database_url,
            echo=False,
            pool_pre_ping=True
        )

        self.session_maker = sessionmaker(
            bind=self.engine,
            expire_on_commit=False
        )

        # 创建表（开发和测试环境）
        if create_schema:
            Base.metadata.create_all(self.engine)

        logger.debug(f"Database initialized: {self.engine.url.render_as_string(hide_password=True)}")

    def close(self):
        """关闭数据库连接"""
        if self.engine:
            self.engine.dispose()

    @contextmanager
    def get_session(self) -> Session:
        """获取数据库会话"""
        if self.session_maker is None:
            raise RuntimeError("DatabaseManager is not initialized")

        session = self.session_maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


class SQLAlchemyRuntimeQueryService(RuntimeQueryService):
    """SQLAlchemy 运行时查询服务"""

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def list_executions(self, process_instance_id: str) -> List[Execution]:
        """列出流程实例的全部执行"""
        with self.db.get_session() as session:
            result = session.execute(
                select(RuntimeExecutionDB).where(
                    RuntimeExecutionDB.process_instance_id == process_instance_id
                )
            )
            return [self._db_to_execution(row) for row in result.scalars().all()]

    def get_local_variables(self, execution_id: str) -> Dict[str, Any]:
        """获取执行的局部变量"""
        with self.db.get_session() as session:
            result = session.execute(
                select(RuntimeVariableDB)
                .where(RuntimeVariableDB.execution_id == execution_id)
                .order_by(RuntimeVariableDB.name)
            )
            return {row.name: row.value for row in result.scalars().all()}

    def list_event_subscriptions(self, execution_id: str) -> List[EventSubscription]:
        """列出执行的事件订阅"""
        with self.db.get_session() as session:
            result = session.execute(
                select(RuntimeEventSubscriptionDB).where(
                    RuntimeEventSubscriptionDB.execution_id == execution_id
                )
            )
            return [
                EventSubscription(
                    id=row.id,
                    execution_id=row.execution_id,
                    event_name=row.event_name,
                    activity_id=row.activity_id,
                    event_type=row.event_type
                )
                for row in result.scalars().all()
            ]

    def list_jobs(self, execution_id: str) -> List[Job]:
        """列出执行的作业"""
        with self.db.get_session() as session:
            result = session.execute(
                select(RuntimeJobDB).where(RuntimeJobDB.execution_id == execution_id)
            )
            return [
                Job(
                    id=row.id,
                    execution_id=row.execution_id,
                    job_definition_id=row.job_definition_id
                )
                for row in result.scalars().all()
            ]

    def get_job_definition(self, job_definition_id: str) -> JobDefinition:
        """获取作业定义"""
        with self.db.get_session() as session:
            result = session.execute(
                select(JobDefinitionDB).where(JobDefinitionDB.id == job_definition_id)
            )
            row = result.scalar_one_or_none()

            if row is None:
                raise JobDefinitionNotFoundError(job_definition_id)

            return JobDefinition(
                id=row.id,
                job_type=row.job_type,
                job_configuration=row.job_configuration,
                activity_id=row.activity_id
            )

    def _db_to_execution(self, row: RuntimeExecutionDB) -> Execution:
        """数据库模型转换为执行快照"""
        return Execution(
            id=row.id,
            process_instance_id=row.process_instance_id,
            parent_id=row.parent_id,
            activity_id=row.activity_id,
            transition_id=row.transition_id
        )
