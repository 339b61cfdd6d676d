# cli.py
"""
[V1.0] 命令行界面 (Interface) 层
由 post-commit 钩子在仓库根目录下后台调用，不需要任何参数。
"""
import argparse
import logging
import os

from config import GlobalConfig
from context import RunContext
from data_sources.local_git import LocalGitDataSource
from notifiers.factory import get_active_notifiers
from orchestrator import BlogOrchestrator, RetryOrchestrator, RunState
from progress import ProgressReporter
import git_utils
import utils

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitblog",
        description="根据最近一次提交生成工程博客草稿",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-r",
        "--repo-path",
        type=str,
        default=None,
        help="Git 仓库内的任意路径。\n(默认: 当前工作目录)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run_cli(argv=None) -> int:
    """
    主入口点。
    :return: 进程退出码 (成功或跳过为 0，未恢复的失败为 1)
    """
    args = setup_parser().parse_args(argv)

    start_path = os.path.abspath(args.repo_path or os.getcwd())
    repo_root = git_utils.get_repo_root(start_path)
    if not repo_root:
        logger.error(f"❌ Unable to resolve repository root from {start_path}")
        return 1

    data_source = LocalGitDataSource(repo_root)
    if not data_source.validate():
        return 1

    reporter = ProgressReporter(GlobalConfig(repo_root).progress_log_path)
    reporter.log("commitblog started")

    run_context = RunContext(
        repo_root=repo_root,
        data_source=data_source,
        reporter=reporter,
        notifiers=get_active_notifiers(),
        interactive=utils.is_interactive(),
    )

    try:
        final_state = RetryOrchestrator(BlogOrchestrator(run_context)).run()
    finally:
        reporter.close()

    return 0 if final_state is RunState.SUCCESS else 1
