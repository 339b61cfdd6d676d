# config.py
"""
[V1.0] 全局配置
- 常量 (文件名、默认值、供应商 Base URL)
- [V1.1] 密钥不再在导入时从 os.environ 读取，而是由 GlobalConfig.load()
  在每次尝试开始时从仓库根目录的 .env 加载一次，再向下传递。
"""
import logging
import os
from typing import Dict, List, Optional

from dotenv import load_dotenv

from errors import ConfigError

logger = logging.getLogger(__name__)


class GlobalConfig:
    """
    (V1.0) commitblog 的全局应用配置。
    """

    # --- 文件名 ---
    ENV_FILE_NAME: str = ".env"
    PROJECT_CONFIG_FILE: str = ".commitblog.json"
    RUN_DIR_NAME: str = ".commitblog"
    PROGRESS_LOG_FILE: str = "last-run.log"

    # --- 项目配置默认值 ---
    DEFAULT_MODEL: str = "anthropic/claude-sonnet-4-20250514"
    DEFAULT_OUTPUT_DIR: str = "blogs"
    DEFAULT_SKIP_PATTERNS: List[str] = ["^Merge ", "^WIP", "^fixup!", "^chore:"]

    # --- Diff 截断 ---
    MAX_DIFF_LINES: int = 400

    # --- Git 命令 ---
    GIT_COMMAND_TIMEOUT: int = 30

    # =================================================================
    # --- 供应商配置 ---
    # =================================================================

    # 1. 供应商 API 密钥对应的环境变量名
    GOOGLE_API_KEY_ENV: str = "GOOGLE_GENERATIVE_AI_API_KEY"
    OPENAI_API_KEY_ENV: str = "OPENAI_API_KEY"
    ANTHROPIC_API_KEY_ENV: str = "ANTHROPIC_API_KEY"
    GROQ_API_KEY_ENV: str = "GROQ_API_KEY"
    OPENROUTER_API_KEY_ENV: str = "OPENROUTER_API_KEY"

    # 2. OpenAI 兼容供应商的 Base URL
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"

    # 3. 生成参数
    MAX_OUTPUT_TOKENS: int = 4096
    REQUEST_TIMEOUT: float = 120.0

    def __init__(self, repo_root: str, api_keys: Optional[Dict[str, str]] = None):
        self.repo_root = repo_root
        self.api_keys: Dict[str, str] = dict(api_keys or {})

    @classmethod
    def secret_names(cls) -> List[str]:
        return [
            cls.GOOGLE_API_KEY_ENV,
            cls.OPENAI_API_KEY_ENV,
            cls.ANTHROPIC_API_KEY_ENV,
            cls.GROQ_API_KEY_ENV,
            cls.OPENROUTER_API_KEY_ENV,
        ]

    @classmethod
    def load(cls, repo_root: str) -> "GlobalConfig":
        """
        从 <repo_root>/.env 加载密钥 (文件中的值覆盖已有环境变量)，
        并把所有供应商密钥固定到一个 GlobalConfig 实例中。
        """
        env_path = os.path.join(repo_root, cls.ENV_FILE_NAME)
        if os.path.exists(env_path):
            try:
                load_dotenv(env_path, override=True)
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"❌ 加载 .env 失败 ({env_path}): {e}")
                raise ConfigError(f"Unable to read secrets file {env_path}: {e}") from e
            logger.debug(f"✅ 已从仓库根目录加载 .env: {env_path}")
        else:
            logger.debug(f"⚠️ 未找到 .env，仅使用当前环境变量: {env_path}")

        api_keys = {name: os.getenv(name, "") for name in cls.secret_names()}
        return cls(repo_root, api_keys)

    @property
    def env_path(self) -> str:
        return os.path.join(self.repo_root, self.ENV_FILE_NAME)

    @property
    def project_config_path(self) -> str:
        return os.path.join(self.repo_root, self.PROJECT_CONFIG_FILE)

    @property
    def progress_log_path(self) -> str:
        return os.path.join(self.repo_root, self.RUN_DIR_NAME, self.PROGRESS_LOG_FILE)

    def get_api_key(self, env_name: str) -> str:
        return self.api_keys.get(env_name, "").strip()

    def is_secret_configured(self, env_name: str) -> bool:
        """检查某个供应商密钥是否非空"""
        return bool(self.get_api_key(env_name))
