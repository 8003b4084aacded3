"""
Portfolio assistant system prompt.

Persona and style directive plus the retrieved portfolio text as context.

Dependencies: langchain_core.prompts
System role: Prompt template for generated answers
"""

from collections.abc import Iterable

from langchain_core.prompts import PromptTemplate

from backend.models.retrieval import RetrievedChunk

SYSTEM_PROMPT = """You are a helpful assistant for a portfolio website. Answer questions based on the provided context about the portfolio owner. Be concise, friendly, and professional.

If the question cannot be answered from the context, politely say you don't have that information.

Context:
{context}"""

PORTFOLIO_SYSTEM_PROMPT = PromptTemplate.from_template(SYSTEM_PROMPT)


def build_system_prompt(chunks: Iterable[RetrievedChunk]) -> str:
    """
    Render the system prompt for a set of retrieved chunks.

    Args:
        chunks: Retrieved chunks, highest relevance first

    Returns:
        str: System instruction with the chunk texts as context
    """
    context = "\n\n".join(chunk.text for chunk in chunks)
    return PORTFOLIO_SYSTEM_PROMPT.format(context=context)
