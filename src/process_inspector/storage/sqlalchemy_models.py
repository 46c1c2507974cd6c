"""
SQLAlchemy 运行时表模型定义
"""
from sqlalchemy import Column, String, ForeignKey, UniqueConstraint, Index, JSON
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class RuntimeExecution(Base):
    """运行时执行表"""
    __tablename__ = 'runtime_executions'

    id = Column(String(64), primary_key=True)
    process_instance_id = Column(String(64), nullable=False)
    parent_id = Column(String(64), ForeignKey('runtime_executions.id'))
    activity_id = Column(String(255))
    transition_id = Column(String(255))

    # 约束
    __table_args__ = (
        Index('idx_runtime_executions_process_instance', 'process_instance_id'),
        Index('idx_runtime_executions_parent', 'parent_id'),
    )


class RuntimeVariable(Base):
    """运行时局部变量表"""
    __tablename__ = 'runtime_variables'

    id = Column(String(64), primary_key=True)
    execution_id = Column(String(64), ForeignKey('runtime_executions.id', ondelete='CASCADE'), nullable=False)
    name = Column(String(255), nullable=False)
    value = Column(JSON)

    __table_args__ = (
        UniqueConstraint('execution_id', 'name', name='unique_execution_variable'),
        Index('idx_runtime_variables_execution', 'execution_id'),
    )


class RuntimeEventSubscription(Base):
    """运行时事件订阅表"""
    __tablename__ = 'runtime_event_subscriptions'

    id = Column(String(64), primary_key=True)
    execution_id = Column(String(64), ForeignKey('runtime_executions.id', ondelete='CASCADE'), nullable=False)
    event_type = Column(String(50))
    event_name = Column(String(255))
    activity_id = Column(String(255))

    __table_args__ = (
        Index('idx_runtime_event_subscriptions_execution', 'execution_id'),
    )


class JobDefinitionRecord(Base):
    """作业定义表"""
    __tablename__ = 'job_definitions'

    id = Column(String(64), primary_key=True)
    job_type = Column(String(255), nullable=False)
    job_configuration = Column(String(255))
    activity_id = Column(String(255))


class RuntimeJob(Base):
    """运行时作业表"""
    __tablename__ = 'runtime_jobs'

    id = Column(String(64), primary_key=True)
    execution_id = Column(String(64), ForeignKey('runtime_executions.id', ondelete='CASCADE'), nullable=False)
    job_definition_id = Column(String(64), ForeignKey('job_definitions.id'))

    __table_args__ = (
        Index('idx_runtime_jobs_execution', 'execution_id'),
    )
