# errors.py
"""
[V1.0] commitblog 的异常分类。
- recoverable=True 的错误会进入交互式重试流程 (仅限 TTY)。
- ConfigError 为致命错误，不提供重试。
"""


class CommitBlogError(Exception):
    """所有流水线错误的基类"""

    recoverable: bool = True


class ConfigError(CommitBlogError):
    """.commitblog.json 格式错误或字段类型不正确"""

    recoverable = False


class MissingSecretError(CommitBlogError):
    """所选供应商需要的 API 密钥为空"""

    def __init__(self, env_name: str, env_path: str):
        self.env_name = env_name
        self.env_path = env_path
        super().__init__(f"Missing {env_name} in {env_path}")


class InvalidModelFormatError(CommitBlogError):
    """model 字段不是 "provider/model-name" 格式"""

    def __init__(self, model_id: str):
        self.model_id = model_id
        super().__init__(
            f'Invalid model format: "{model_id}". Use "provider/model-name".'
        )


class UnknownProviderError(CommitBlogError):
    """model 字段中的 provider 不在支持列表中"""

    def __init__(self, provider: str, supported):
        self.provider = provider
        self.supported = list(supported)
        super().__init__(
            f'Unknown provider: "{provider}". Supported: {", ".join(self.supported)}'
        )


class GenerationError(CommitBlogError):
    """供应商调用失败或返回了不可用的内容"""


class WriteError(CommitBlogError):
    """博客文件写入失败"""
