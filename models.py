# models.py
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ProjectConfig:
    """仓库级配置 (默认值 + .commitblog.json 覆盖)"""

    model: str
    output_dir: str
    skip_patterns: Tuple[str, ...]


@dataclass(frozen=True)
class CommitContext:
    """最近一次提交的只读快照"""

    commit_message: str
    commit_body: str
    author: str
    date: str
    hash: str
    branch: str
    diff: str
    diff_stat: str
    files_changed: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def short_date(self) -> str:
        # ISO-8601 的 YYYY-MM-DD 部分
        return self.date[:10]

    @property
    def diff_line_count(self) -> int:
        return len(self.diff.split("\n")) if self.diff else 0


@dataclass(frozen=True)
class ProviderSpec:
    """从 "provider/model-name" 解析出的供应商描述"""

    provider: str
    model_name: str
    api_key_env: str

    @property
    def model_id(self) -> str:
        return f"{self.provider}/{self.model_name}"


@dataclass(frozen=True)
class SkipDecision:
    """提交过滤结果"""

    skip: bool
    reason: str = ""
