"""
矿池统计聚合

每次查询都从存储快照重新计算，不缓存结果。
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List, Optional

from .models import PoolStats, ReportStore, WorkerReport

logger = logging.getLogger(__name__)

# 统计窗口：5 分钟
DEFAULT_WINDOW_SECONDS = 300


def filter_recent(
    reports: List[WorkerReport],
    now: int,
    window: int = DEFAULT_WINDOW_SECONDS
) -> List[WorkerReport]:
    """
    保留窗口内的记录

    条件为 now - timestamp <= window，时间戳晚于 now 的记录（时钟偏差）同样保留。
    """
    return [r for r in reports if now - r.timestamp <= window]


def calculate_pool_stats(reports: List[WorkerReport]) -> PoolStats:
    """
    计算单个矿池的统计指标

    Args:
        reports: 同一矿池的记录，至少一条

    Returns:
        PoolStats（均值不取整）
    """
    count = len(reports)

    # 先除后加，避免接近 float 上限的算力求和溢出为 inf
    return PoolStats(
        workers=len({r.worker_id for r in reports}),
        avg_hashrate=sum(r.hashrate / count for r in reports),
        avg_temp=sum(float(r.temperature) / count for r in reports),
    )


def aggregate_pools(
    reports: List[WorkerReport],
    now: int,
    window: int = DEFAULT_WINDOW_SECONDS
) -> Dict[str, PoolStats]:
    """
    过滤、分组并汇总

    窗口内没有记录的矿池不会出现在结果中。
    """
    grouped: Dict[str, List[WorkerReport]] = defaultdict(list)
    for report in filter_recent(reports, now, window):
        grouped[report.pool].append(report)

    return {pool: calculate_pool_stats(items) for pool, items in grouped.items()}


def compute_stats(
    store: ReportStore,
    now: Optional[int] = None,
    window: Optional[int] = None
) -> Dict[str, PoolStats]:
    """
    基于存储快照计算当前各矿池统计

    Args:
        store: 上报记录存储
        now: 当前时间（Unix 秒），默认取系统时间
        window: 窗口长度（秒），默认 300
    """
    if now is None:
        now = int(time.time())
    if window is None:
        window = DEFAULT_WINDOW_SECONDS

    reports = store.snapshot()
    result = aggregate_pools(reports, now, window)
    logger.debug(f"Computed stats for {len(result)} pools from {len(reports)} reports")
    return result
