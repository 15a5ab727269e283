"""
Pool Stats - 矿池统计服务

负责：
- 接收矿机定期上报的运行数据（POST /report）
- 在内存中保存所有上报记录
- 按矿池汇总最近 5 分钟的数据（GET /stats）
- 提供健康检查（GET /health）
"""

__version__ = "1.0.0"
