"""
流程实例状态 API 路由
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
import logging

from ..models import ProcessTreeResponse, ErrorResponse, HTTPErrorResponse
from ..dependencies import get_inspector
from ...core.inspector import ProcessStateInspector
from ...exceptions import OrphanedExecutionError, StructuralAnomalyError


logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": HTTPErrorResponse, "description": "未找到根执行"},
    status.HTTP_409_CONFLICT: {"model": HTTPErrorResponse, "description": "运行时数据结构异常"},
}


def _not_found(process_instance_id: str) -> HTTPException:
    error = ErrorResponse(
        error="process_instance_not_found",
        message=f"No root execution found for process instance '{process_instance_id}'",
        details={"process_instance_id": process_instance_id}
    )
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.model_dump())


def _conflict(process_instance_id: str, exc: StructuralAnomalyError) -> HTTPException:
    details = {"process_instance_id": process_instance_id}
    if isinstance(exc, OrphanedExecutionError):
        details["execution_ids"] = exc.execution_ids
    error = ErrorResponse(
        error="inconsistent_runtime_state",
        message=str(exc),
        details=details
    )
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=error.model_dump())


@router.get("/{process_instance_id}/state", response_class=PlainTextResponse, responses=ERROR_RESPONSES)
def get_process_state(
    process_instance_id: str,
    inspector: ProcessStateInspector = Depends(get_inspector)
) -> PlainTextResponse:
    """获取流程实例状态文本报告"""
    try:
        root = inspector.build_tree(process_instance_id)
    except StructuralAnomalyError as e:
        logger.warning(f"Cannot render process instance {process_instance_id}: {e}")
        raise _conflict(process_instance_id, e)

    if root is None:
        raise _not_found(process_instance_id)

    return PlainTextResponse(inspector.renderer.render(root))


@router.get("/{process_instance_id}/tree", response_model=ProcessTreeResponse, responses=ERROR_RESPONSES)
def get_process_tree(
    process_instance_id: str,
    inspector: ProcessStateInspector = Depends(get_inspector)
) -> ProcessTreeResponse:
    """获取流程实例执行树"""
    try:
        root = inspector.build_tree(process_instance_id)
    except StructuralAnomalyError as e:
        logger.warning(f"Cannot build tree for process instance {process_instance_id}: {e}")
        raise _conflict(process_instance_id, e)

    if root is None:
        raise _not_found(process_instance_id)

    return ProcessTreeResponse(
        process_instance_id=process_instance_id,
        execution_count=root.count(),
        tree=root.to_dict()
    )
