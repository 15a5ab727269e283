"""
统计 API

返回最近窗口内各矿池的汇总数据。
"""

import math
from typing import Dict, Optional

from fastapi import APIRouter, Depends

from ...aggregator import compute_stats
from ...config import AppConfig
from ...models import PoolStats, ReportStore, StatsResponse
from ..dependencies import get_app_config, get_store

router = APIRouter(tags=["stats"])


def round_half_away(value: float, digits: int) -> float:
    """
    四舍五入（0.5 远离零进位）

    放大后超出 float 精确整数范围的值本身已无小数部分，原样返回。
    """
    scale = 10.0 ** digits
    scaled = abs(value * scale)
    if not math.isfinite(scaled) or scaled >= 2.0 ** 52:
        return value
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole / scale, value)


def round_pool_stats(pools: Dict[str, PoolStats], digits: Optional[int]) -> Dict[str, PoolStats]:
    """展示层取整（digits 为 None 时原样返回）"""
    if digits is None:
        return pools
    return {
        name: PoolStats(
            workers=s.workers,
            avg_hashrate=round_half_away(s.avg_hashrate, digits),
            avg_temp=round_half_away(s.avg_temp, digits),
        )
        for name, s in pools.items()
    }


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    store: ReportStore = Depends(get_store),
    config: AppConfig = Depends(get_app_config)
):
    """
    获取矿池统计

    只统计最近 window_seconds 秒内的上报，没有数据的矿池不返回。
    """
    pools = compute_stats(store, window=config.stats.window_seconds)
    return StatsResponse(pools=round_pool_stats(pools, config.stats.round_digits))
