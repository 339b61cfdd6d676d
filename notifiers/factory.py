from typing import List
import logging
from .base import BaseNotifier
from .desktop_notifier import DesktopNotifier

# --- 在这里注册新的通知渠道 ---
AVAILABLE_NOTIFIERS_CLASSES = [
    DesktopNotifier,
]

logger = logging.getLogger(__name__)


def get_active_notifiers() -> List[BaseNotifier]:
    """
    工厂方法：实例化并返回所有在当前环境下可用的 notifiers。
    """
    active_list = []
    for notifier_cls in AVAILABLE_NOTIFIERS_CLASSES:
        try:
            notifier = notifier_cls()
            if notifier.is_enabled():
                active_list.append(notifier)
                logger.debug(f"🔌 已激活通知渠道: {notifier.name}")
        except Exception as e:
            logger.warning(f"⚠️ 初始化通知渠道 {notifier_cls.__name__} 失败: {e}")

    return active_list


def notify_all(notifiers: List[BaseNotifier], title: str, message: str):
    """尽力而为地发送到所有渠道，任何失败都被记录并忽略"""
    for notifier in notifiers:
        try:
            notifier.send(title, message)
        except Exception as e:
            logger.debug(f"通知渠道 {notifier.name} 发送失败 (已忽略): {e}")
