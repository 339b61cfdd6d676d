from abc import ABC, abstractmethod
import logging

logger = logging.getLogger(__name__)


class BaseNotifier(ABC):
    """
    [V1.0] 通知渠道抽象基类
    通知是尽力而为的旁路: send() 失败只返回 False，不影响运行结果。
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """返回通知渠道的名称 (日志显示用)"""
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        """
        判断此通知器在当前环境下是否可用。
        例如：DesktopNotifier 检查 osascript / notify-send 是否存在。
        """
        pass

    @abstractmethod
    def send(self, title: str, message: str) -> bool:
        """
        执行发送逻辑。
        :param title: 通知标题
        :param message: 通知正文
        :return: 是否发送成功
        """
        pass
