"""
监控 API 路由
"""
from fastapi import APIRouter
from datetime import datetime
import logging

from ..models import HealthCheckResponse
from ..dependencies import get_app_state
from ... import __version__


logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
def health_check() -> HealthCheckResponse:
    """健康检查"""
    app_state = get_app_state()
    checks = {
        "query_service": app_state.get("query_service") is not None,
        "inspector": app_state.get("inspector") is not None
    }

    db_manager = app_state.get("db_manager")
    if db_manager is not None:
        # 检查数据库连接
        try:
            with db_manager.engine.connect():
                checks["database"] = True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            checks["database"] = False

    all_healthy = all(checks.values())

    return HealthCheckResponse(
        status="healthy" if all_healthy else "unhealthy",
        version=__version__,
        timestamp=datetime.utcnow(),
        checks=checks
    )
