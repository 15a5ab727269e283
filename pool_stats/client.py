"""
上报客户端

供矿机或脚本调用服务接口。
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .models import StatsResponse

logger = logging.getLogger(__name__)


async def submit_report(
    base_url: str,
    report: Dict[str, Any],
    timeout: float = 2.0,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> None:
    """
    提交一条上报

    Args:
        base_url: 服务地址，如 http://127.0.0.1:5000
        report: 上报字段（worker_id, pool, hashrate, temperature, timestamp）
        timeout: 超时时间（秒）
        transport: 自定义传输层（测试用）

    Raises:
        httpx.HTTPStatusError: 服务拒绝（400/422）
    """
    async with httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport) as client:
        response = await client.post("/report", json=report)
        if response.is_error:
            logger.warning(f"Report rejected ({response.status_code}): {response.text}")
        response.raise_for_status()


async def fetch_stats(
    base_url: str,
    timeout: float = 2.0,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> StatsResponse:
    """拉取当前矿池统计"""
    async with httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport) as client:
        response = await client.get("/stats")
        response.raise_for_status()
        return StatsResponse(**response.json())


async def check_health(
    base_url: str,
    timeout: float = 2.0,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> bool:
    """健康检查，连接失败时返回 False"""
    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport) as client:
            response = await client.get("/health")
            return response.status_code == 200
    except httpx.HTTPError as e:
        logger.warning(f"Health check failed for {base_url}: {e}")
        return False
