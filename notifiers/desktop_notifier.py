import logging
import shutil
import subprocess
import sys

from .base import BaseNotifier

logger = logging.getLogger(__name__)


def escape_applescript(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class DesktopNotifier(BaseNotifier):
    """
    [V1.0] 桌面通知
    - macOS: osascript display notification
    - Linux: notify-send
    """

    TIMEOUT = 10

    @property
    def name(self) -> str:
        return "Desktop"

    def _command(self, title: str, message: str):
        if sys.platform == "darwin" and shutil.which("osascript"):
            script = (
                f'display notification "{escape_applescript(message)}" '
                f'with title "{escape_applescript(title)}"'
            )
            return ["osascript", "-e", script]
        if shutil.which("notify-send"):
            return ["notify-send", title, message]
        return None

    def is_enabled(self) -> bool:
        return self._command("", "") is not None

    def send(self, title: str, message: str) -> bool:
        cmd = self._command(title, message)
        if cmd is None:
            return False
        try:
            subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.TIMEOUT,
                check=True,
            )
            return True
        except (subprocess.SubprocessError, OSError) as e:
            logger.debug(f"桌面通知发送失败 (已忽略): {e}")
            return False
