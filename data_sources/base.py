from abc import ABC, abstractmethod
from models import CommitContext


class DataSource(ABC):
    """
    [V1.0] 提交数据源抽象基类
    流水线只依赖这个接口读取提交上下文，测试可以替换为内存实现。
    """

    @abstractmethod
    def validate(self) -> bool:
        """
        验证数据源是否可用。
        例如：本地路径是否存在且为 Git 仓库。
        """
        pass

    @abstractmethod
    def get_commit_context(self) -> CommitContext:
        """
        读取最近一次提交的上下文快照。
        单个字段读取失败时应降级为空值，而不是抛出异常。
        """
        pass
