"""
FastAPI 依赖注入
"""
from fastapi import HTTPException, status
from typing import Dict, Any
import logging

from ..core.inspector import ProcessStateInspector


logger = logging.getLogger(__name__)


# 全局实例
app_state: Dict[str, Any] = {}


def get_app_state() -> Dict[str, Any]:
    """获取应用状态"""
    return app_state


def get_inspector() -> ProcessStateInspector:
    """获取流程状态检查器"""
    inspector = get_app_state().get("inspector")

    if not inspector:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "service_unavailable",
                "message": "Process state inspector not initialized"
            }
        )

    return inspector
