"""
API 中间件
"""
import time
import uuid
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger(__name__)


class InspectionLoggingMiddleware(BaseHTTPMiddleware):
    """检查请求日志中间件

    沿用调用方传入的 X-Request-ID，便于与引擎客户端日志关联；
    记录被检查的流程实例ID和处理耗时（毫秒）。
    """

    REQUEST_ID_HEADER = "X-Request-ID"
    TIMING_HEADER = "X-Inspection-Time-Ms"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        response.headers[self.REQUEST_ID_HEADER] = request_id
        response.headers[self.TIMING_HEADER] = f"{elapsed_ms:.1f}"

        # 路由匹配后 scope 中才有路径参数
        process_instance_id = request.scope.get("path_params", {}).get("process_instance_id")
        target = f" process_instance={process_instance_id}" if process_instance_id else ""
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}"
            f"{target} [request_id={request_id}] [{elapsed_ms:.1f}ms]"
        )

        return response
