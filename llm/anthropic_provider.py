"""
[V1.0] LLMProvider 针对 Anthropic Claude 的具体实现。
"""
import logging

import anthropic

from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig

logger = logging.getLogger(__name__)


@register_provider("anthropic")
class AnthropicProvider(LLMProvider):
    """
    Claude 策略实现 (Messages API)。
    """

    api_key_env = GlobalConfig.ANTHROPIC_API_KEY_ENV

    def __init__(self, model_name: str, global_config: GlobalConfig):
        super().__init__(model_name, global_config)
        if not self.api_key:
            logger.error(f"❌ {self.api_key_env} 未设置。请检查您的 .env 文件。")
            raise ValueError(f"{self.api_key_env} 未设置。")

        self.client = anthropic.Anthropic(
            api_key=self.api_key,
            timeout=global_config.REQUEST_TIMEOUT,
        )
        logger.info(f"✅ AnthropicProvider 初始化成功 (model={model_name})")

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self.client.messages.create(
                model=self.model_name,
                max_tokens=self.global_config.MAX_OUTPUT_TOKENS,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except Exception as e:
            logger.error(f"❌ [AnthropicProvider 错误] 生成内容失败: {e}")
            raise

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
        if not text:
            raise ValueError(
                f"API 调用成功，但回复内容为空 (stop_reason={response.stop_reason})"
            )
        return text
