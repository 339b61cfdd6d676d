import logging
import os

from .base import DataSource
from models import CommitContext
import git_utils

logger = logging.getLogger(__name__)


class LocalGitDataSource(DataSource):
    """
    [V1.0] 本地 Git 数据源实现。
    通过调用 git 命令行工具读取 HEAD 提交。
    """

    def __init__(self, repo_path: str):
        self.repo_path = repo_path

    def validate(self) -> bool:
        if not os.path.exists(self.repo_path):
            logger.error(f"❌ 路径不存在: {self.repo_path}")
            return False
        if not git_utils.is_git_repository(self.repo_path):
            logger.error(f"❌ 指定路径不是 Git 仓库: {self.repo_path}")
            return False
        return True

    def get_commit_context(self) -> CommitContext:
        commit = git_utils.get_commit_context(self.repo_path)
        logger.info(
            f"✅ [DataSource] 已读取提交 {commit.hash or '(unknown)'}: "
            f"{len(commit.files_changed)} 个文件, {commit.diff_line_count} 行 diff"
        )
        return commit
