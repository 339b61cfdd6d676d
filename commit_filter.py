# commit_filter.py
"""
[V1.0] 提交过滤: 判断一次提交是否需要生成博客。
"""
import re
from typing import Iterable

from models import CommitContext, ProjectConfig, SkipDecision


def match_skip_pattern(subject: str, patterns: Iterable[str]):
    """返回第一个命中提交标题的模式 (re.search，区分大小写)，没有则返回 None"""
    for pattern in patterns:
        if re.search(pattern, subject):
            return pattern
    return None


def evaluate_skip(commit: CommitContext, config: ProjectConfig) -> SkipDecision:
    """
    命中任一 skipPatterns 或 diff 为空时跳过。
    跳过不是失败，调用方应以成功状态结束本次运行。
    """
    pattern = match_skip_pattern(commit.commit_message, config.skip_patterns)
    if pattern is not None:
        return SkipDecision(
            skip=True,
            reason=f'Skipping commit: "{commit.commit_message}" (matches {pattern!r})',
        )

    if not commit.diff:
        return SkipDecision(skip=True, reason="No diff found, skipping.")

    return SkipDecision(skip=False)
