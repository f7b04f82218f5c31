from .assistant import BadiniAssistant, fix_grammar, generate_seminar, translate_text
from .config import GatewayConfig
from .credentials import DEFAULT_API_KEY_ENV_VARS, resolve_api_key
from .errors import (
    BadiniError,
    ConfigurationError,
    MissingApiKeyError,
    ProviderError,
    TranslationFailed,
)
from .invoker import CompletionInvoker
from .models import CompletionRequest, CompletionResult, InlineImage, TextOnly, TextWithImage

__all__ = [
    "BadiniAssistant",
    "BadiniError",
    "CompletionInvoker",
    "CompletionRequest",
    "CompletionResult",
    "ConfigurationError",
    "DEFAULT_API_KEY_ENV_VARS",
    "GatewayConfig",
    "InlineImage",
    "MissingApiKeyError",
    "ProviderError",
    "TextOnly",
    "TextWithImage",
    "TranslationFailed",
    "fix_grammar",
    "generate_seminar",
    "resolve_api_key",
    "translate_text",
]
