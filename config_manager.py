# config_manager.py
"""
[V1.0] 项目配置管理器
- 负责读取仓库级覆盖文件 (.commitblog.json)
- 与内置默认值做浅合并: 覆盖文件中的键替换默认值，缺失的键保留默认值，未知键忽略
"""

import os
import json
import logging
import re
from typing import Dict, Any

from config import GlobalConfig
from errors import ConfigError
from models import ProjectConfig

logger = logging.getLogger(__name__)

# 覆盖文件中的键 -> ProjectConfig 字段
CONFIG_KEYS = {
    "model": "model",
    "outputDir": "output_dir",
    "skipPatterns": "skip_patterns",
}


def default_config_data() -> Dict[str, Any]:
    """内置默认值 (JSON 键名)"""
    return {
        "model": GlobalConfig.DEFAULT_MODEL,
        "outputDir": GlobalConfig.DEFAULT_OUTPUT_DIR,
        "skipPatterns": list(GlobalConfig.DEFAULT_SKIP_PATTERNS),
    }


def read_override_file(config_path: str) -> Dict[str, Any]:
    """读取覆盖文件；文件不存在时返回空字典，格式错误时抛出 ConfigError"""
    if not os.path.exists(config_path):
        return {}
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"❌ 解析项目配置 {config_path} 失败: {e}")
        raise ConfigError(f"Malformed config file {config_path}: {e}") from e
    except OSError as e:
        logger.error(f"❌ 读取项目配置 {config_path} 失败: {e}")
        raise ConfigError(f"Unable to read config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a JSON object, "
            f"got {type(data).__name__}"
        )
    return data


def _validate(merged: Dict[str, Any], config_path: str):
    for key in ("model", "outputDir"):
        if not isinstance(merged[key], str) or not merged[key].strip():
            raise ConfigError(f'"{key}" in {config_path} must be a non-empty string')

    patterns = merged["skipPatterns"]
    if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
        raise ConfigError(f'"skipPatterns" in {config_path} must be a list of strings')

    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ConfigError(
                f'Invalid skip pattern "{pattern}" in {config_path}: {e}'
            ) from e


def load_project_config(repo_root: str) -> ProjectConfig:
    """(V1.0) 加载仓库 (repo_root/.commitblog.json) 的项目配置"""
    config_path = os.path.join(repo_root, GlobalConfig.PROJECT_CONFIG_FILE)

    merged = default_config_data()
    overrides = read_override_file(config_path)
    for key in CONFIG_KEYS:
        if key in overrides:
            merged[key] = overrides[key]

    ignored = sorted(set(overrides) - set(CONFIG_KEYS))
    if ignored:
        logger.info(f"ℹ️ 忽略未知的配置项: {', '.join(ignored)}")

    _validate(merged, config_path)

    return ProjectConfig(
        model=merged["model"].strip(),
        output_dir=merged["outputDir"],
        skip_patterns=tuple(merged["skipPatterns"]),
    )
