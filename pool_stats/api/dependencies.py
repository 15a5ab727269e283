"""
依赖注入模块

提供 FastAPI 依赖项。
"""

from ..config import AppConfig, get_config
from ..models import ReportStore, store


async def get_store() -> ReportStore:
    """获取上报记录存储"""
    return store


async def get_app_config() -> AppConfig:
    """获取应用配置"""
    return get_config()
