"""
主程序入口

启动 REST API 服务（uvicorn）。
"""

import asyncio
import logging
import sys
from pathlib import Path

import uvicorn

from . import __version__
from .config import get_config


def setup_logging():
    """配置日志"""
    config = get_config()

    # 日志格式
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 获取日志级别
    level = getattr(logging, config.logging.level.upper(), logging.INFO)

    # 配置根日志
    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # 如果配置了文件日志
    if config.logging.file:
        log_path = Path(config.logging.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(log_path), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(log_format))
        logging.getLogger().addHandler(file_handler)

    # 降低第三方库日志级别
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


async def run_api_server():
    """运行 API 服务器"""
    from .api.app import create_app

    config = get_config()
    app = create_app()

    server_config = uvicorn.Config(
        app=app,
        host=config.api.host,
        port=config.api.port,
        log_level="info",
        access_log=False  # 我们用自己的日志
    )
    server = uvicorn.Server(server_config)
    await server.serve()


async def main():
    """主函数：启动 API 服务"""
    logger = logging.getLogger(__name__)

    # 设置日志
    setup_logging()
    logger.info("=" * 60)
    logger.info(f"Pool Stats v{__version__}")
    logger.info("=" * 60)

    config = get_config()
    logger.info(f"Listening on http://{config.api.host}:{config.api.port}")
    logger.info("Using in-memory storage")
    logger.info(f"Stats window: {config.stats.window_seconds}s")
    logger.info("Endpoints:")
    logger.info("  POST /report - Submit worker report")
    logger.info("  GET /stats - Get pool statistics")
    logger.info("  GET /health - Health check")

    try:
        await run_api_server()
    except asyncio.CancelledError:
        logger.info("Server cancelled, shutting down...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise


def cli():
    """命令行入口"""
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutdown requested, exiting...")
        sys.exit(0)
    except Exception as e:
        # 配置加载失败时日志尚未初始化，由 logging 的默认处理器输出到 stderr
        logger.error(f"Startup failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
