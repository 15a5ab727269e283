"""
上报数据校验

按顺序检查业务规则，第一个失败的规则决定拒绝原因。
"""

from .models import ReportPayload, WorkerReport


class ReportValidationError(ValueError):
    """上报数据不满足业务规则"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


def validate_report(payload: ReportPayload) -> WorkerReport:
    """
    校验上报数据

    规则：
    - worker_id 非空（不做 strip）
    - pool 非空
    - hashrate >= 0
    - timestamp > 0

    温度不做任何限制。

    Args:
        payload: 已通过结构校验的请求体

    Returns:
        可写入存储的 WorkerReport

    Raises:
        ReportValidationError: 任一规则不满足
    """
    if not payload.worker_id:
        raise ReportValidationError("worker_id", "worker_id cannot be empty")

    if not payload.pool:
        raise ReportValidationError("pool", "pool cannot be empty")

    if payload.hashrate < 0.0:
        raise ReportValidationError("hashrate", "hashrate cannot be negative")

    if payload.timestamp <= 0:
        raise ReportValidationError("timestamp", "timestamp must be positive")

    return WorkerReport(
        worker_id=payload.worker_id,
        pool=payload.pool,
        hashrate=payload.hashrate,
        temperature=payload.temperature,
        timestamp=payload.timestamp,
    )
