"""
配置加载模块

从 config.yaml 加载配置，支持 Pydantic 验证和环境变量覆盖。
"""

import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 包内自带的前端目录
DEFAULT_FRONTEND_PATH = str(Path(__file__).parent / "static")


class APIConfig(BaseModel):
    """API 服务配置"""
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["http://localhost:5000", "http://127.0.0.1:5000"]


class StatsConfig(BaseModel):
    """统计配置"""
    window_seconds: int = Field(default=300, ge=1, description="统计窗口（秒）")
    round_digits: Optional[int] = Field(default=1, ge=0, le=15, description="返回均值保留的小数位，null 表示不取整")


class FrontendConfig(BaseModel):
    """前端配置"""
    path: Optional[str] = None
    enabled: bool = True

    @property
    def resolved_path(self) -> str:
        return self.path or DEFAULT_FRONTEND_PATH


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = "INFO"
    file: Optional[str] = None


class AppConfig(BaseSettings):
    """
    应用配置（完整配置）

    环境变量优先于配置文件，例如 POOL_STATS_API__PORT=9000。
    """
    model_config = SettingsConfigDict(
        env_prefix="POOL_STATS_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    api: APIConfig = Field(default_factory=APIConfig)
    stats: StatsConfig = Field(default_factory=StatsConfig)
    frontend: FrontendConfig = Field(default_factory=FrontendConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # 环境变量 > 配置文件 > 默认值
        return env_settings, init_settings


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    加载配置文件

    优先级：
    1. 参数指定的路径
    2. 环境变量 POOL_STATS_CONFIG_PATH
    3. 默认路径 config.yaml（当前工作目录）
    """
    if config_path is None:
        config_path = os.environ.get("POOL_STATS_CONFIG_PATH", "config.yaml")

    config_file = Path(config_path)

    if config_file.exists():
        with open(config_file, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
            if raw_config:
                # 相对路径按配置文件所在目录解析，避免依赖 CWD
                base_dir = config_file.resolve().parent

                def _resolve_path(value: Optional[str]) -> Optional[str]:
                    if not value:
                        return value
                    path = Path(value)
                    if path.is_absolute():
                        return str(path)
                    return str((base_dir / path).resolve())

                raw_config.setdefault("frontend", {})
                raw_config["frontend"]["path"] = _resolve_path(raw_config["frontend"].get("path"))

                raw_config.setdefault("logging", {})
                raw_config["logging"]["file"] = _resolve_path(raw_config["logging"].get("file"))

                return AppConfig(**raw_config)

    # 配置文件不存在时使用默认配置
    return AppConfig()


# 全局配置实例（延迟加载）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例模式）"""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config():
    """重置配置（主要用于测试）"""
    global _config
    _config = None
