"""
[V1.0] OpenAI 及 OpenAI 兼容供应商 (Groq, OpenRouter)。
三者共用同一个适配器，只是 Base URL 和密钥环境变量不同。
"""
import logging
from typing import Optional

from openai import OpenAI

from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(LLMProvider):
    """
    基于 openai SDK 的 Chat Completions 适配器。
    子类只需覆盖 api_key_env 和 base_url。
    """

    # None 表示使用 SDK 默认的 api.openai.com
    base_url: Optional[str] = None

    def __init__(self, model_name: str, global_config: GlobalConfig):
        super().__init__(model_name, global_config)
        if not self.api_key:
            logger.error(f"❌ {self.api_key_env} 未设置。请检查您的 .env 文件。")
            raise ValueError(f"{self.api_key_env} 未设置。")

        self.client = OpenAI(
            api_key=self.api_key,
            base_url=self.resolve_base_url(),
            timeout=global_config.REQUEST_TIMEOUT,
        )
        logger.info(
            f"✅ {self.__class__.__name__} 初始化成功 (model={model_name}, "
            f"base_url={self.client.base_url})"
        )

    def resolve_base_url(self) -> Optional[str]:
        return self.base_url

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]
        try:
            response = self.client.chat.completions.create(
                model=self.model_name, messages=messages
            )
        except Exception as e:
            logger.error(f"❌ [{self.__class__.__name__} 错误] 生成内容失败: {e}")
            raise

        if response.choices and response.choices[0].message.content:
            return response.choices[0].message.content
        raise ValueError(f"未从 {self.provider_id} API 收到内容")


@register_provider("openai")
class OpenAIProvider(OpenAICompatibleProvider):
    api_key_env = GlobalConfig.OPENAI_API_KEY_ENV


@register_provider("groq")
class GroqProvider(OpenAICompatibleProvider):
    api_key_env = GlobalConfig.GROQ_API_KEY_ENV
    base_url = GlobalConfig.GROQ_BASE_URL


@register_provider("openrouter")
class OpenRouterProvider(OpenAICompatibleProvider):
    api_key_env = GlobalConfig.OPENROUTER_API_KEY_ENV
    base_url = GlobalConfig.OPENROUTER_BASE_URL
