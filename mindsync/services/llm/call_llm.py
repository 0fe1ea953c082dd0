from typing import Any, Dict, List, Optional, Type, TypeVar, cast

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from pydantic import BaseModel

from mindsync.config import LLM_MODEL

T = TypeVar('T', bound=BaseModel)


def to_lc_messages(messages: List[Dict[str, Any]]) -> List[BaseMessage]:
    """Convert role/content dicts to LangChain messages.

    ``content`` may be a string or a list of content parts (text / image_url).
    """
    return [
        SystemMessage(content=msg["content"]) if msg["role"] == "system"
        else HumanMessage(content=msg["content"]) if msg["role"] == "user"
        else AIMessage(content=msg["content"])
        for msg in messages
    ]


class LLMService:
    def __init__(self, model: Optional[str] = None, temperature: float = 0.3):
        self.llm = ChatOpenAI(
            model=model or LLM_MODEL,
            temperature=temperature,
            max_retries=0,  # failures are surfaced to the caller, not retried
        )

    async def structured_invoke(self, messages: List[Dict[str, Any]], schema: Type[T], **kwargs) -> T:
        """
        Invoke the LLM with structured output parsing.

        The schema is bound as a forced tool call, so the model must answer
        with arguments matching it.

        Args:
            messages: List of message dictionaries with 'role' and 'content' keys
            schema: Pydantic model class to parse the response into

        Returns:
            Instance of the provided Pydantic model with parsed response
        """
        structured_llm = self.llm.with_structured_output(schema, method="function_calling")
        response = await structured_llm.ainvoke(to_lc_messages(messages))
        return cast(T, response)

    async def structured_chain_invoke(
        self, prompt: ChatPromptTemplate, variables: Dict[str, Any], schema: Type[T]
    ) -> T:
        """Run ``prompt | structured llm`` with the given template variables"""
        chain = prompt | self.llm.with_structured_output(schema, method="function_calling")
        response = await chain.ainvoke(variables)
        return cast(T, response)
