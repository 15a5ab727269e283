"""
测试命令行入口
"""

import logging
import sys
from pathlib import Path

import pytest

# 添加项目路径到 sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pool_stats import main as main_module


class TestCli:
    """cli() 退出码与日志"""

    def test_startup_error_logged(self, monkeypatch, caplog):
        """测试：启动失败记录日志并以 1 退出"""
        async def _broken():
            raise ValueError("bad config")

        monkeypatch.setattr(main_module, "main", _broken)

        with caplog.at_level(logging.ERROR, logger="pool_stats.main"):
            with pytest.raises(SystemExit) as exc_info:
                main_module.cli()

        assert exc_info.value.code == 1
        assert "Startup failed: bad config" in caplog.text

    def test_keyboard_interrupt_exits_cleanly(self, monkeypatch):
        """测试：Ctrl-C 以 0 退出"""
        async def _interrupted():
            raise KeyboardInterrupt

        monkeypatch.setattr(main_module, "main", _interrupted)

        with pytest.raises(SystemExit) as exc_info:
            main_module.cli()

        assert exc_info.value.code == 0
