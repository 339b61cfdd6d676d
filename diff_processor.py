# diff_processor.py
from config import GlobalConfig

OMITTED_MARKER = "... ({count} lines omitted for brevity) ..."


def truncate_diff(diff: str, max_lines: int = GlobalConfig.MAX_DIFF_LINES) -> str:
    """
    将 diff 限制在 max_lines 行以内。

    超出预算时保留前 max_lines // 2 行和后 max_lines // 2 行，
    中间插入一行标记，说明省略了多少行。按原始行数截断，可能切开某个 hunk。
    """
    if max_lines < 0:
        raise ValueError(f"max_lines must be >= 0, got {max_lines}")

    lines = diff.split("\n")
    if len(lines) <= max_lines:
        return diff

    half = max_lines // 2
    head = lines[:half]
    tail = lines[len(lines) - half:]
    omitted = len(lines) - len(head) - len(tail)
    return "\n".join(head + [OMITTED_MARKER.format(count=omitted)] + tail)
