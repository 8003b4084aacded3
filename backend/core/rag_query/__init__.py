"""RAG query business logic.

Chunking, embedding cache, retrieval and answering for portfolio questions.
"""

from .chunker import chunk_portfolio
from .embedding_store import EmbeddingStore, cosine_similarity
from .responder import AnswerSource, Responder, ResponderAnswer, fallback_answer
from .retriever import Retriever

__all__ = [
    "AnswerSource",
    "EmbeddingStore",
    "Responder",
    "ResponderAnswer",
    "Retriever",
    "chunk_portfolio",
    "cosine_similarity",
    "fallback_answer",
]
