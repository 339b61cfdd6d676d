# progress.py
"""
[V1.0] 运行进度记录
每条进度同时输出到控制台和 .commitblog/last-run.log (每次运行开始时清空)。
"""
import logging
import os
import sys
from datetime import datetime, timezone

PROGRESS_LOGGER_NAME = "commitblog.progress"


class ISOTimestampFormatter(logging.Formatter):
    """[2025-02-10T10:00:00.000+00:00] message"""

    def __init__(self):
        super().__init__("[%(asctime)s] %(message)s")

    def formatTime(self, record, datefmt=None):
        return datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(
            timespec="milliseconds"
        )


class ProgressReporter:
    """
    进度记录器。使用独立的 logger，不向 root logger 传播，
    避免与普通诊断日志重复输出。
    """

    def __init__(self, log_path: str, echo: bool = True):
        self.log_path = log_path
        os.makedirs(os.path.dirname(log_path), exist_ok=True)

        self.logger = logging.getLogger(PROGRESS_LOGGER_NAME)
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        self._reset_handlers()

        formatter = ISOTimestampFormatter()
        # mode="w": 每次运行截断日志
        file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

        if echo:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def _reset_handlers(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def log(self, message: str):
        self.logger.info(message)

    def close(self):
        self._reset_handlers()
