# context.py
"""
[V1.0] 运行时上下文的数据模型
"""
from dataclasses import dataclass, field
from typing import List

from data_sources.base import DataSource
from notifiers.base import BaseNotifier
from progress import ProgressReporter


@dataclass
class RunContext:
    """
    封装一次运行所需的依赖。
    这是从 CLI 传递到 Orchestrator 的唯一对象。
    """

    # --- 核心路径 ---
    repo_root: str

    # --- 依赖 ---
    data_source: DataSource
    reporter: ProgressReporter
    notifiers: List[BaseNotifier] = field(default_factory=list)

    # --- 标志 ---
    # 仅在连接到终端时提供重试提示
    interactive: bool = False
