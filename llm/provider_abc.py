"""
[V1.0] 所有 LLM 供应商的抽象基类 (ABC)。
供应商通过 @register_provider 注册到 PROVIDER_REGISTRY，
注册表即 "provider 名称 -> 适配器类" 的封闭查找表。
"""
from abc import ABC, abstractmethod
from typing import Type, Dict

from config import GlobalConfig

# 全局注册表，存储 "provider_id" -> Provider Class 的映射
PROVIDER_REGISTRY: Dict[str, Type["LLMProvider"]] = {}


def register_provider(provider_id: str):
    """
    类装饰器：用于将具体的 Provider 实现类注册到全局注册表中。

    使用示例:
        @register_provider("google")
        class GeminiProvider(LLMProvider):
            ...
    """

    def decorator(cls):
        if provider_id in PROVIDER_REGISTRY:
            raise ValueError(
                f"Provider id '{provider_id}' 已经被注册过 ({PROVIDER_REGISTRY[provider_id].__name__})"
            )
        cls.provider_id = provider_id
        PROVIDER_REGISTRY[provider_id] = cls
        return cls

    return decorator


class LLMProvider(ABC):
    """
    LLM 供应商的统一接口: generate(system, prompt) -> text。
    """

    provider_id: str = ""
    # 保存该供应商密钥的环境变量名
    api_key_env: str = ""

    def __init__(self, model_name: str, global_config: GlobalConfig):
        self.model_name = model_name
        self.global_config = global_config

    @property
    def api_key(self) -> str:
        return self.global_config.get_api_key(self.api_key_env)

    @abstractmethod
    def generate(self, system_prompt: str, user_prompt: str) -> str:
        """调用远端模型并返回原始文本；任何失败都直接抛出"""
        pass
