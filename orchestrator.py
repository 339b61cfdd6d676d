# orchestrator.py
"""
[V1.0] 业务逻辑编排器
- BlogOrchestrator: 单次尝试 (配置 -> 提交上下文 -> 过滤 -> 截断 -> 提示词 -> 供应商 -> 生成 -> 写入)
- RetryOrchestrator: 失败后的交互式重试状态机
"""
import logging
import os
from enum import Enum
from typing import Callable, Optional

from context import RunContext
from config import GlobalConfig
from models import CommitContext
from errors import CommitBlogError

import config_manager
import post_writer
from ai_generator import AIService, check_api_key, get_llm_provider, resolve_provider_spec
from commit_filter import evaluate_skip
from diff_processor import truncate_diff
from notifiers.factory import notify_all
from prompt_builder import SYSTEM_PROMPT, build_user_prompt

logger = logging.getLogger(__name__)

NOTIFY_TITLE = "commitblog"
RETRY_PROMPT = "Fix the issue, then type 'r' to retry (anything else to exit): "


class BlogOrchestrator:
    """
    负责执行一次博客生成尝试。
    提交上下文只在第一次尝试时读取，重试时复用同一个快照。
    """

    def __init__(self, context: RunContext):
        self.context = context
        self._commit: Optional[CommitContext] = None

    def log(self, message: str):
        self.context.reporter.log(message)

    def notify(self, message: str):
        notify_all(self.context.notifiers, NOTIFY_TITLE, message)

    def get_commit_context(self) -> CommitContext:
        if self._commit is None:
            self._commit = self.context.data_source.get_commit_context()
        return self._commit

    def run_once(self) -> Optional[str]:
        """
        执行一次完整流程。
        :return: 写入的博客路径；提交被跳过时返回 None
        :raises CommitBlogError: 任一阶段失败
        """
        repo_root = self.context.repo_root

        self.log("1/5 Loading config")
        global_config = GlobalConfig.load(repo_root)
        project_config = config_manager.load_project_config(repo_root)

        self.log("2/5 Reading commit context")
        commit = self.get_commit_context()

        decision = evaluate_skip(commit, project_config)
        if decision.skip:
            self.log(decision.reason)
            return None

        diff = truncate_diff(commit.diff, global_config.MAX_DIFF_LINES)
        user_prompt = build_user_prompt(commit, diff)

        logger.info("=" * 50)
        logger.info(f'   [Commit]: "{commit.commit_message}"')
        logger.info(f"   [Model]:  {project_config.model}")
        logger.info(f"   [Files]:  {len(commit.files_changed)} changed")
        logger.info(f"   [Diff]:   {commit.diff_line_count} lines")
        logger.info("=" * 50)

        self.log("3/5 Resolving model")
        spec = resolve_provider_spec(project_config.model)
        check_api_key(spec, global_config)
        provider = get_llm_provider(spec, global_config)

        self.log("4/5 Generating blog draft")
        raw_text = AIService(provider).generate_post(SYSTEM_PROMPT, user_prompt)
        content = post_writer.clean_generated_markdown(raw_text)

        full_path = post_writer.save_post(
            content, repo_root, project_config.output_dir, commit
        )
        self.log(f"5/5 Done -> {full_path}")
        self.notify(f"Blog generated: {os.path.basename(full_path)}")
        return full_path


class RunState(Enum):
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    PROMPT = "prompt"
    ABORTED = "aborted"


TERMINAL_STATES = (RunState.SUCCESS, RunState.ABORTED)


def ask_for_retry(prompt_func: Callable[[str], str] = input) -> bool:
    try:
        answer = prompt_func(RETRY_PROMPT)
    except (EOFError, KeyboardInterrupt):
        return False
    return answer.strip().lower() == "r"


class RetryOrchestrator:
    """
    RUNNING -> SUCCESS
    RUNNING -> FAILED -> PROMPT -> RUNNING | ABORTED   (仅交互式终端)
    RUNNING -> FAILED -> ABORTED                       (非交互式或不可恢复的错误)
    没有重试次数上限，每次重试都由操作者确认。
    """

    def __init__(
        self,
        pipeline: BlogOrchestrator,
        ask: Callable[[], bool] = ask_for_retry,
    ):
        self.pipeline = pipeline
        self.context = pipeline.context
        self.ask = ask
        self.state = RunState.RUNNING
        self.last_error: Optional[CommitBlogError] = None
        self.result_path: Optional[str] = None

    def step(self) -> RunState:
        if self.state is RunState.RUNNING:
            try:
                self.result_path = self.pipeline.run_once()
                self.state = RunState.SUCCESS
            except CommitBlogError as e:
                self.last_error = e
                self.pipeline.log(f"Failed: {e}")
                self.pipeline.notify(f"Failed: {e}")
                self.state = RunState.FAILED

        elif self.state is RunState.FAILED:
            if self.context.interactive and self.last_error.recoverable:
                self.state = RunState.PROMPT
            else:
                self.state = RunState.ABORTED

        elif self.state is RunState.PROMPT:
            if self.ask():
                self.pipeline.log("Re-running after user requested retry")
                self.state = RunState.RUNNING
            else:
                self.state = RunState.ABORTED

        return self.state

    def run(self) -> RunState:
        while self.state not in TERMINAL_STATES:
            self.step()
        return self.state
