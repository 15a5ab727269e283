"""
单元测试：上报校验规则
"""

import sys
from pathlib import Path

import pytest

# 添加项目路径到 sys.path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pool_stats.models import ReportPayload, WorkerReport
from pool_stats.validation import ReportValidationError, validate_report


def make_payload(**overrides):
    data = {
        "worker_id": "worker-123",
        "pool": "us-east",
        "hashrate": 50.5,
        "temperature": 68,
        "timestamp": 1700000000,
    }
    data.update(overrides)
    return ReportPayload(**data)


class TestValidateReport:
    """校验规则测试"""

    def test_valid_report(self):
        """测试：合法数据原样转换为 WorkerReport"""
        report = validate_report(make_payload())

        assert isinstance(report, WorkerReport)
        assert report.worker_id == "worker-123"
        assert report.pool == "us-east"
        assert report.hashrate == 50.5
        assert report.temperature == 68
        assert report.timestamp == 1700000000

    @pytest.mark.parametrize("overrides,field,message", [
        ({"worker_id": ""}, "worker_id", "worker_id cannot be empty"),
        ({"pool": ""}, "pool", "pool cannot be empty"),
        ({"hashrate": -0.1}, "hashrate", "hashrate cannot be negative"),
        ({"timestamp": 0}, "timestamp", "timestamp must be positive"),
        ({"timestamp": -5}, "timestamp", "timestamp must be positive"),
    ])
    def test_rejections(self, overrides, field, message):
        """测试：各条规则的拒绝原因"""
        with pytest.raises(ReportValidationError) as exc_info:
            validate_report(make_payload(**overrides))

        assert exc_info.value.field == field
        assert exc_info.value.message == message
        assert str(exc_info.value) == message

    def test_first_failing_rule_wins(self):
        """测试：多条规则同时不满足时报告第一条"""
        with pytest.raises(ReportValidationError) as exc_info:
            validate_report(make_payload(worker_id="", pool="", hashrate=-1.0, timestamp=0))

        assert exc_info.value.field == "worker_id"

        with pytest.raises(ReportValidationError) as exc_info:
            validate_report(make_payload(hashrate=-1.0, timestamp=0))

        assert exc_info.value.field == "hashrate"

    def test_zero_hashrate_allowed(self):
        """测试：算力为 0 合法"""
        assert validate_report(make_payload(hashrate=0.0)).hashrate == 0.0

    @pytest.mark.parametrize("temperature", [-40, 0, 150, 10000])
    def test_temperature_unrestricted(self, temperature):
        """测试：温度不做范围限制"""
        assert validate_report(make_payload(temperature=temperature)).temperature == temperature

    def test_whitespace_ids_not_trimmed(self):
        """测试：只含空白的 ID 视为非空"""
        report = validate_report(make_payload(worker_id="  ", pool=" "))

        assert report.worker_id == "  "
        assert report.pool == " "
