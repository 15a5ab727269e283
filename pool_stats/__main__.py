"""
使用方式:
    python -m pool_stats
    或
    uvicorn pool_stats.api.app:app --host 0.0.0.0 --port 5000
"""

from pool_stats.main import cli

if __name__ == "__main__":
    cli()
