"""
上报 API

接收矿机上报数据。
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...models import ReportAccepted, ReportPayload, ReportStore
from ...validation import ReportValidationError, validate_report
from ..dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reports"])


@router.post("/report", response_model=ReportAccepted)
async def post_report(
    payload: ReportPayload,
    store: ReportStore = Depends(get_store)
):
    """
    提交矿机上报

    结构/类型错误由 FastAPI 返回 422；业务规则不满足返回 400，记录不会写入。
    """
    try:
        report = validate_report(payload)
    except ReportValidationError as e:
        logger.warning(f"Rejected report from worker {payload.worker_id!r}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )

    store.append(report)
    logger.debug(f"Accepted report: worker={report.worker_id} pool={report.pool}")
    return ReportAccepted()
