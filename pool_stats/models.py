"""
数据模型定义

包括：
- Pydantic 请求/响应模型
- 内存中的上报记录存储
- 全局状态管理
"""

import threading
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr


# =============================================================================
# Pydantic 模型（用于 API 和数据验证）
# =============================================================================

class ReportPayload(BaseModel):
    """POST /report 请求体（只校验结构与类型，业务规则见 validation）"""
    worker_id: StrictStr = Field(..., description="矿机 ID")
    pool: StrictStr = Field(..., description="矿池名称")
    hashrate: StrictFloat = Field(..., allow_inf_nan=False, description="算力（单位由上报方决定，如 MH/s）")
    temperature: StrictInt = Field(..., ge=-2**31, le=2**31 - 1, description="温度（32 位整数）")
    timestamp: StrictInt = Field(..., ge=-2**63, le=2**63 - 1, description="上报时间（Unix 秒，矿机侧生成，64 位整数）")


class WorkerReport(BaseModel):
    """已通过校验的矿机上报记录（存储在内存中）"""
    model_config = ConfigDict(frozen=True)

    worker_id: str
    pool: str
    hashrate: float
    temperature: int
    timestamp: int


class PoolStats(BaseModel):
    """单个矿池的统计结果"""
    workers: int = Field(..., description="窗口内不同 worker_id 的数量")
    avg_hashrate: float = Field(..., description="平均算力")
    avg_temp: float = Field(..., description="平均温度")


class StatsResponse(BaseModel):
    """GET /stats 响应"""
    pools: Dict[str, PoolStats] = Field(default_factory=dict)


class ReportAccepted(BaseModel):
    """POST /report 成功响应"""
    status: str = "accepted"


# =============================================================================
# 内存存储（全局状态）
# =============================================================================

class ReportStore:
    """
    上报记录存储

    只追加，不淘汰：过期记录仍保留在内存中，只是不再参与统计。
    所有读写都经过同一把锁，读取时返回副本，调用方拿不到内部列表。
    """

    def __init__(self):
        # 上报记录：[WorkerReport, ...]，按到达顺序
        self._reports: List[WorkerReport] = []

        # 线程安全锁（临界区内不 await，事件循环与线程池共用）
        self._lock = threading.Lock()

    def append(self, report: WorkerReport):
        """追加一条已校验的记录"""
        with self._lock:
            self._reports.append(report)

    def snapshot(self) -> List[WorkerReport]:
        """获取当前所有记录的副本"""
        with self._lock:
            return list(self._reports)

    def size(self) -> int:
        """当前记录数"""
        with self._lock:
            return len(self._reports)

    def clear(self):
        """清空所有记录（主要用于测试）"""
        with self._lock:
            self._reports.clear()


# 全局存储实例
store = ReportStore()
