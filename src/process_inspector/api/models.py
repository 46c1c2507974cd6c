"""
API 响应模型
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime


class EventSubscriptionResponse(BaseModel):
    """事件订阅"""
    id: str = Field(..., description="订阅ID")
    event_name: Optional[str] = Field(None, description="事件名称")
    activity_id: Optional[str] = Field(None, description="活动ID")
    event_type: Optional[str] = Field(None, description="事件类型")


class JobResponse(BaseModel):
    """作业"""
    id: str = Field(..., description="作业ID")
    job_definition_id: str = Field(..., description="作业定义ID")
    job_type: str = Field(..., description="作业类型")
    job_configuration: Optional[str] = Field(None, description="作业配置")


class ExecutionNodeResponse(BaseModel):
    """执行树节点"""
    id: str = Field(..., description="执行ID")
    parent_id: Optional[str] = Field(None, description="父执行ID")
    activity_id: Optional[str] = Field(None, description="当前活动ID")
    transition_id: Optional[str] = Field(None, description="当前转移ID")
    variables: Dict[str, Any] = Field(default_factory=dict, description="局部变量")
    event_subscriptions: List[EventSubscriptionResponse] = Field(default_factory=list, description="事件订阅")
    jobs: List[JobResponse] = Field(default_factory=list, description="作业")
    children: List['ExecutionNodeResponse'] = Field(default_factory=list, description="子执行")


ExecutionNodeResponse.model_rebuild()


class ProcessTreeResponse(BaseModel):
    """流程实例执行树"""
    process_instance_id: str = Field(..., description="流程实例ID")
    execution_count: int = Field(..., description="执行数量")
    tree: ExecutionNodeResponse = Field(..., description="执行树")


class HealthCheckResponse(BaseModel):
    """健康检查响应"""
    status: str = Field(..., description="健康状态", examples=["healthy", "unhealthy"])
    version: str = Field(..., description="版本号")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="时间戳")
    checks: Dict[str, bool] = Field(default_factory=dict, description="各组件检查结果")


class ErrorResponse(BaseModel):
    """错误响应"""
    error: str = Field(..., description="错误类型")
    message: str = Field(..., description="错误信息")
    details: Optional[Dict[str, Any]] = Field(None, description="错误详情")


class HTTPErrorResponse(BaseModel):
    """HTTPException 错误响应体"""
    detail: ErrorResponse = Field(..., description="错误内容")
