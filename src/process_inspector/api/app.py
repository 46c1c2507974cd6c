"""
FastAPI 应用主文件
"""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from .routers import process_instances, monitoring
from .middleware import InspectionLoggingMiddleware
from .dependencies import app_state
from .. import __version__
from ..config import InspectorSettings
from ..core import ProcessStateInspector, ProcessStateRenderer
from ..storage.sqlalchemy_repository import DatabaseManager, SQLAlchemyRuntimeQueryService


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info("Starting Process State Inspector API...")

    settings = InspectorSettings.from_env()

    # 初始化数据库（只读访问，不创建表）
    db_manager = DatabaseManager(settings.database_url)
    db_manager.initialize()

    query_service = SQLAlchemyRuntimeQueryService(db_manager)
    inspector = ProcessStateInspector(
        query_service,
        renderer=ProcessStateRenderer(
            indent_step=settings.indent_step,
            base_indent=settings.base_indent
        ),
        strict=settings.strict
    )

    app_state.update({
        "settings": settings,
        "db_manager": db_manager,
        "query_service": query_service,
        "inspector": inspector
    })

    logger.info("Process State Inspector API started successfully")

    yield

    logger.info("Shutting down Process State Inspector API...")
    db_manager.close()
    app_state.clear()


app = FastAPI(
    title="Process State Inspector API",
    description="流程实例运行时状态只读查询 API",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(InspectionLoggingMiddleware)

# 注册路由
app.include_router(process_instances.router, prefix="/api/v1/process-instances", tags=["process-instances"])
app.include_router(monitoring.router, prefix="/api/v1/monitoring", tags=["monitoring"])


# 全局异常处理
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """全局异常处理器"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request.state.request_id if hasattr(request.state, "request_id") else None
        }
    )


@app.get("/", tags=["root"])
async def root():
    """API根路径"""
    return {
        "name": "Process State Inspector API",
        "version": __version__,
        "docs": "/docs",
        "health": "/api/v1/monitoring/health"
    }
