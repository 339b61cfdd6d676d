# ai_generator.py
import logging
import importlib
from typing import List

from config import GlobalConfig
from errors import (
    GenerationError,
    InvalidModelFormatError,
    MissingSecretError,
    UnknownProviderError,
)
from models import ProviderSpec

from llm.provider_abc import LLMProvider, PROVIDER_REGISTRY

logger = logging.getLogger(__name__)

# 内置供应商模块；导入时通过 @register_provider 注册
BUILTIN_PROVIDER_MODULES = (
    "llm.gemini_provider",
    "llm.openai_provider",
    "llm.anthropic_provider",
)


def load_providers():
    """导入所有内置供应商模块，触发注册"""
    for module_name in BUILTIN_PROVIDER_MODULES:
        importlib.import_module(module_name)


def supported_providers() -> List[str]:
    load_providers()
    return list(PROVIDER_REGISTRY.keys())


def resolve_provider_spec(model_id: str) -> ProviderSpec:
    """
    将 "provider/model-name" 解析为 ProviderSpec。
    只在第一个 "/" 处切分，model-name 本身可以包含 "/" (如 openrouter)。
    """
    provider, sep, model_name = model_id.partition("/")
    if not sep or not provider or not model_name:
        raise InvalidModelFormatError(model_id)

    load_providers()
    if provider not in PROVIDER_REGISTRY:
        logger.error(f"❌ 未知的 LLM 供应商: '{provider}'")
        logger.error(f"   可用供应商: {list(PROVIDER_REGISTRY.keys())}")
        raise UnknownProviderError(provider, PROVIDER_REGISTRY.keys())

    provider_class = PROVIDER_REGISTRY[provider]
    return ProviderSpec(
        provider=provider,
        model_name=model_name,
        api_key_env=provider_class.api_key_env,
    )


def check_api_key(spec: ProviderSpec, global_config: GlobalConfig):
    """在任何网络调用之前检查密钥是否已配置"""
    if not global_config.is_secret_configured(spec.api_key_env):
        logger.error(f"❌ 供应商 '{spec.provider}' 未配置 API Key ({spec.api_key_env})。")
        raise MissingSecretError(spec.api_key_env, global_config.env_path)


def get_llm_provider(spec: ProviderSpec, global_config: GlobalConfig) -> LLMProvider:
    """
    工厂函数：从 PROVIDER_REGISTRY 查找并实例化适配器。
    调用方应先执行 check_api_key。
    """
    logger.info(f"ℹ️ 正在初始化 LLM 供应商: {spec.model_id}")

    provider_class = PROVIDER_REGISTRY[spec.provider]
    try:
        return provider_class(spec.model_name, global_config)
    except Exception as e:
        logger.error(f"❌ 实例化供应商 '{spec.provider}' 失败: {e}")
        raise GenerationError(f"Failed to initialise {spec.provider}: {e}") from e


class AIService:
    """
    封装对 LLM 的调用。所有供应商异常统一转换为 GenerationError。
    """

    def __init__(self, provider: LLMProvider):
        self.provider = provider
        logger.info(
            f"✅ 🤖 AI 服务已成功初始化 (Provider: {self.provider.__class__.__name__})"
        )

    def generate_post(self, system_prompt: str, user_prompt: str) -> str:
        try:
            text = self.provider.generate(system_prompt, user_prompt)
        except Exception as e:
            raise GenerationError(str(e) or e.__class__.__name__) from e

        if not text or not text.strip():
            raise GenerationError("Provider returned an empty response")
        return text
