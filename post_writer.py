# post_writer.py
"""
[V1.0] 博客文件输出
- 去除 LLM 可能输出的 markdown 代码块包裹
- 根据提交日期和标题生成确定的文件名，重复运行会覆盖同一文件
"""
import logging
import os
import re

from errors import WriteError
from models import CommitContext

logger = logging.getLogger(__name__)

SLUG_MAX_LENGTH = 60

FENCE_START_PATTERN = re.compile(r"^```(?:markdown|md)?\s*\n", re.IGNORECASE)


def clean_generated_markdown(text: str) -> str:
    """
    去除开头的 ```markdown / ```md / ``` 以及与之配对的结尾 ```。
    没有开头包裹时保留结尾的 ```，它属于正文中的代码片段。
    只做包裹层清洗，不校验内容。
    """
    if not text:
        return text

    cleaned = text.strip()
    unwrapped = FENCE_START_PATTERN.sub("", cleaned, count=1)
    if unwrapped != cleaned:
        cleaned = unwrapped.rstrip()
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3]
    cleaned = cleaned.strip()

    if cleaned != text.strip():
        logger.info("🧹 已去除 AI 回复中的 Markdown 代码块包裹。")
    return cleaned


def slugify(subject: str) -> str:
    slug = re.sub(r"[^a-z0-9\s-]", "", subject.lower()).strip()
    slug = re.sub(r"\s+", "-", slug)
    return slug[:SLUG_MAX_LENGTH]


def build_post_filename(commit: CommitContext) -> str:
    """<YYYY-MM-DD>-<slug>.md；标题全被过滤掉时退回提交哈希"""
    slug = slugify(commit.commit_message) or slugify(commit.hash) or "commit"
    return f"{commit.short_date}-{slug}.md"


def save_post(
    content: str, repo_root: str, output_dir: str, commit: CommitContext
) -> str:
    """写入完整文件内容 (覆盖)，返回文件路径"""
    target_dir = os.path.join(repo_root, output_dir)
    full_path = os.path.join(target_dir, build_post_filename(commit))

    try:
        os.makedirs(target_dir, exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"❌ 保存博客失败 ({full_path}): {e}")
        raise WriteError(f"Unable to write {full_path}: {e}") from e

    logger.info(f"✅ 博客已保存: {full_path}")
    return full_path
