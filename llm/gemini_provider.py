"""
[V1.0] LLMProvider 针对 Google Gemini 的具体实现。
"""
import logging

from google import genai
from google.genai import types

from llm.provider_abc import LLMProvider, register_provider
from config import GlobalConfig

logger = logging.getLogger(__name__)


@register_provider("google")
class GeminiProvider(LLMProvider):
    """
    Gemini 策略实现 (genai.Client)。
    """

    api_key_env = GlobalConfig.GOOGLE_API_KEY_ENV

    def __init__(self, model_name: str, global_config: GlobalConfig):
        super().__init__(model_name, global_config)
        if not self.api_key:
            logger.error(f"❌ {self.api_key_env} 未设置。请检查您的 .env 文件。")
            raise ValueError(f"{self.api_key_env} 未设置。")

        self.client = genai.Client(api_key=self.api_key)
        logger.info(f"✅ GeminiProvider (genai.Client 模式) 初始化成功 (model={model_name})")

    def generate(self, system_prompt: str, user_prompt: str) -> str:
        try:
            response = self.client.models.generate_content(
                model=self.qualified_model_name,
                contents=user_prompt,
                config=types.GenerateContentConfig(system_instruction=system_prompt),
            )
        except Exception as e:
            logger.error(f"❌ [GeminiProvider 错误] 生成内容失败: {e}")
            raise

        if not response or not response.text:
            raise ValueError("API 调用成功，但回复内容为空")
        return response.text

    @property
    def qualified_model_name(self) -> str:
        if self.model_name.startswith("models/"):
            return self.model_name
        return f"models/{self.model_name}"
