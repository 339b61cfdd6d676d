import logging
import sys


def setup_logging(level: int = logging.INFO):
    """配置全局日志"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def is_interactive() -> bool:
    """stdin 是否连接到终端"""
    try:
        return sys.stdin is not None and sys.stdin.isatty()
    except ValueError:
        # stdin 已关闭
        return False
