"""
FastAPI 应用配置

配置 CORS、静态文件托管、路由注册。
"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..config import get_config
from .routers import health, reports, stats

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    创建 FastAPI 应用实例

    配置：
    - CORS 中间件
    - API 路由
    - 静态文件托管（前端）
    """
    config = get_config()

    app = FastAPI(
        title="Pool Stats",
        description="矿机上报接收与矿池统计服务",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json"
    )

    # CORS 中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 注册路由
    app.include_router(reports.router)
    app.include_router(stats.router)
    app.include_router(health.router)

    # 静态文件托管（前端），需在路由之后挂载
    if config.frontend.enabled:
        frontend_path = Path(config.frontend.resolved_path)
        if frontend_path.exists():
            app.mount("/", StaticFiles(directory=str(frontend_path), html=True), name="frontend")
            logger.info(f"Serving frontend from {frontend_path}")
        else:
            logger.warning(f"Frontend path not found: {frontend_path}")

    @app.on_event("startup")
    async def startup_event():
        logger.info("Pool Stats starting up...")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Pool Stats shutting down...")

    return app


# 默认应用实例
app = create_app()
