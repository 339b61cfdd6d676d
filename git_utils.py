# git_utils.py
import subprocess
import logging
from typing import Optional, List

from config import GlobalConfig
from models import CommitContext

logger = logging.getLogger(__name__)

# 最近一次提交 (HEAD) 相对其父提交的查询命令
GIT_SUBJECT_CMD = 'git log -1 --format="%s"'
GIT_BODY_CMD = 'git log -1 --format="%b"'
GIT_AUTHOR_CMD = 'git log -1 --format="%an"'
GIT_DATE_CMD = 'git log -1 --format="%aI"'
GIT_HASH_CMD = 'git log -1 --format="%h"'
GIT_BRANCH_CMD = "git branch --show-current"
GIT_DIFF_CMD = "git diff HEAD~1..HEAD --no-color"
GIT_DIFF_STAT_CMD = "git diff HEAD~1..HEAD --stat --no-color"
GIT_DIFF_NAMES_CMD = "git diff HEAD~1..HEAD --name-only"


def run_git_command(
    cmd: str, repo_path: str, context: str = "执行Git命令"
) -> Optional[str]:
    """
    统一的Git命令执行函数
    - 在 repo_path 下执行
    - 非零退出码、超时或其它 OS 错误都返回 None，由调用方降级处理
    """
    try:
        logger.debug(f"在 {repo_path} 中执行命令: {cmd}")
        result = subprocess.run(
            cmd,
            shell=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=GlobalConfig.GIT_COMMAND_TIMEOUT,
            cwd=repo_path,
        )
        if result.returncode != 0:
            logger.debug(f"{context}失败: {result.stderr.strip()}")
            return None
        return result.stdout
    except subprocess.TimeoutExpired:
        logger.warning(f"⚠️ {context}超时")
        return None
    except OSError as e:
        logger.warning(f"⚠️ {context}出错: {e}")
        return None


def git_output(cmd: str, repo_path: str, context: str = "执行Git命令") -> str:
    """执行命令并返回去除首尾空白的输出，失败时返回空字符串"""
    output = run_git_command(cmd, repo_path, context)
    return output.strip() if output else ""


def is_git_repository(repo_path: str) -> bool:
    """检查指定路径是否位于 Git 工作区内"""
    return (
        git_output("git rev-parse --is-inside-work-tree", repo_path, "检查Git仓库")
        == "true"
    )


def get_repo_root(path: str) -> Optional[str]:
    """返回包含 path 的仓库根目录；不在仓库中时返回 None"""
    root = git_output("git rev-parse --show-toplevel", path, "获取仓库根目录")
    return root or None


def get_changed_files(repo_path: str) -> List[str]:
    names = git_output(GIT_DIFF_NAMES_CMD, repo_path, "获取变更文件列表")
    return [line for line in names.split("\n") if line]


def get_commit_context(repo_path: str) -> CommitContext:
    """
    读取 HEAD 提交的元数据和 diff。
    每个查询独立执行；首个提交没有父提交时 diff 相关字段为空。
    """
    return CommitContext(
        commit_message=git_output(GIT_SUBJECT_CMD, repo_path, "获取提交标题"),
        commit_body=git_output(GIT_BODY_CMD, repo_path, "获取提交正文"),
        author=git_output(GIT_AUTHOR_CMD, repo_path, "获取提交作者"),
        date=git_output(GIT_DATE_CMD, repo_path, "获取提交日期"),
        hash=git_output(GIT_HASH_CMD, repo_path, "获取提交哈希"),
        branch=git_output(GIT_BRANCH_CMD, repo_path, "获取当前分支"),
        diff=git_output(GIT_DIFF_CMD, repo_path, "获取Diff"),
        diff_stat=git_output(GIT_DIFF_STAT_CMD, repo_path, "获取Diff统计"),
        files_changed=tuple(get_changed_files(repo_path)),
    )
