from .base import LLMClient
from .factory import build_llm_client

__all__ = ["LLMClient", "build_llm_client"]
