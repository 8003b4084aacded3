"""
Chat service for portfolio Q&A.

Orchestrates one stateless chat turn: validate the message, retrieve the
relevant portfolio chunks, and compose the answer. Retrieval and answering
absorb every provider failure, so a valid message always gets a response.

Dependencies: backend.core.rag_query, backend.models.chat
System role: Chat service orchestration layer
"""

import logging

from backend.core.exceptions import ValidationError
from backend.core.rag_query.responder import Responder
from backend.core.rag_query.retriever import Retriever
from backend.models.chat import ChatResponse
from backend.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for portfolio questions.

    Coordinates message validation, retrieval over the shared embedding
    cache, and generative or templated answering.
    """

    def __init__(
        self,
        retriever: Retriever,
        responder: Responder,
    ) -> None:
        """
        Initialize chat service.

        Args:
            retriever: Retriever over the embedding store
            responder: Answer composer
        """
        self.retriever = retriever
        self.responder = responder

    async def process_chat(self, message: object) -> ChatResponse:
        """
        Answer one chat message.

        Flow:
        1. Validate the message is a non-empty string
        2. Retrieve the top chunks for the message
        3. Compose the answer (generated or templated)

        Args:
            message: User's message as received from the client

        Returns:
            ChatResponse: Answer text

        Raises:
            ValidationError: Message missing, not a string, or blank
        """
        if not isinstance(message, str) or not message.strip():
            raise ValidationError("Message is required", field="message")

        logger.info(f"{__name__}:process_chat - START message={safe_log_value(message, max_length=80)!r}")

        result = await self.retriever.retrieve(message)
        answer = await self.responder.compose(message, result)

        logger.info(
            f"{__name__}:process_chat - END retrieval_mode={result.mode.value}, "
            f"chunks={len(result)}, answer_source={answer.source.value}, answer_len={len(answer.text)}"
        )
        return ChatResponse(response=answer.text)
