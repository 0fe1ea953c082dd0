from .call_llm import LLMService

__all__ = ["LLMService"]
