"""
Test suite for the responder.

Covers generated answers, every fallback trigger, topic template priority
and the system prompt context.

System role: Verification of answer composition
"""

import asyncio

import pytest

from backend.core.rag_query.responder import AnswerSource, Responder, fallback_answer
from backend.core.rag_query.responder_prompt import build_system_prompt
from backend.core.rag_query.topic_keywords import NO_CONTEXT_ANSWER
from backend.models.retrieval import RetrievedChunk

PROFILE_TEXT = "Profile: Jane is a software engineer based in Lisbon."
PROJECT_TEXT = "Project: Foo. A bar tool. Technologies used: Python."
SKILL_TEXT = "Skills - Languages: Python, Go"
CERTIFICATION_TEXT = "Certification: CKA issued by CNCF (2024)."
INTERESTS_TEXT = "Interests and hobbies: Sailing, Chess."


@pytest.fixture
def chunks() -> list[RetrievedChunk]:
    """Provide retrieved chunks of mixed types, best first."""
    return [
        RetrievedChunk(text=SKILL_TEXT, type="skill", score=0.9),
        RetrievedChunk(text=PROFILE_TEXT, type="profile", score=0.8),
        RetrievedChunk(text=PROJECT_TEXT, type="project", score=0.7),
    ]


class TestFallbackAnswer:
    """Test suite for fallback_answer."""

    def test_identity_query_returns_profile_text_verbatim(self, chunks: list[RetrievedChunk]):
        assert fallback_answer("who are you", chunks) == PROFILE_TEXT

    def test_no_chunks_returns_fixed_message(self):
        assert fallback_answer("anything", []) == NO_CONTEXT_ANSWER

    def test_project_topic_wins_over_identity(self, chunks: list[RetrievedChunk]):
        """Test topic priority: project is checked before who/about."""
        answer = fallback_answer("tell me about your projects", chunks)

        assert answer == f"Here's information about a project: {PROJECT_TEXT}"

    def test_skill_topic(self, chunks: list[RetrievedChunk]):
        assert fallback_answer("what do you know", chunks) == f"Here are some skills: {SKILL_TEXT}"

    def test_matched_topic_without_chunk_falls_through(self, chunks: list[RetrievedChunk]):
        """Test a topic with no chunk of its type defers to later topics."""
        answer = fallback_answer("what experience do you have and who are you", chunks)

        assert answer == PROFILE_TEXT

    def test_certification_topic(self, chunks: list[RetrievedChunk]):
        certification = RetrievedChunk(text=CERTIFICATION_TEXT, type="certification", score=0.1)

        answer = fallback_answer("any certifications?", [*chunks, certification])

        assert answer == f"Here's a certification: {CERTIFICATION_TEXT}"

    def test_interests_topic(self, chunks: list[RetrievedChunk]):
        interests = RetrievedChunk(text=INTERESTS_TEXT, type="interests", score=0.1)

        answer = fallback_answer("what are your hobbies", [*chunks, interests])

        assert answer == f"Here are some interests: {INTERESTS_TEXT}"

    def test_no_topic_uses_top_chunk(self, chunks: list[RetrievedChunk]):
        assert fallback_answer("hello there", chunks) == f"Based on the portfolio: {SKILL_TEXT}"


class TestResponder:
    """Test suite for Responder.compose."""

    @pytest.mark.asyncio
    async def test_generated_text_returned_unmodified(self, make_provider, chunks: list[RetrievedChunk]):
        # Arrange
        provider = make_provider(completion="  Jane builds things.\n")
        responder = Responder(provider)

        # Act
        answer = await responder.compose("who are you", chunks)

        # Assert
        assert answer.source == AnswerSource.GENERATED
        assert answer.text == "  Jane builds things.\n"
        system_prompt, user_message = provider.complete_calls[0]
        assert user_message == "who are you"
        assert PROFILE_TEXT in system_prompt

    @pytest.mark.asyncio
    async def test_unconfigured_provider_uses_template(self, make_provider, chunks: list[RetrievedChunk]):
        """Test an unconfigured provider is never called."""
        provider = make_provider(configured=False)
        responder = Responder(provider)

        answer = await responder.answer("who are you", chunks)

        assert answer == PROFILE_TEXT
        assert provider.complete_calls == []

    @pytest.mark.asyncio
    async def test_provider_failure_uses_template(self, make_provider, chunks: list[RetrievedChunk]):
        responder = Responder(make_provider(complete_error=RuntimeError("503")))

        answer = await responder.compose("who are you", chunks)

        assert answer.source == AnswerSource.TEMPLATE
        assert answer.text == PROFILE_TEXT

    @pytest.mark.asyncio
    async def test_empty_completion_uses_template(self, make_provider, chunks: list[RetrievedChunk]):
        responder = Responder(make_provider(completion="   "))

        answer = await responder.compose("hello", chunks)

        assert answer.source == AnswerSource.TEMPLATE

    @pytest.mark.asyncio
    async def test_timeout_uses_template(self, make_provider, chunks: list[RetrievedChunk]):
        # Arrange
        provider = make_provider()

        async def slow_complete(*args) -> str:
            await asyncio.sleep(1)
            return "too late"

        provider.complete = slow_complete
        responder = Responder(provider, timeout_seconds=0.01)

        # Act
        answer = await responder.compose("who are you", chunks)

        # Assert
        assert answer.source == AnswerSource.TEMPLATE

    @pytest.mark.asyncio
    async def test_no_chunks_without_provider(self, make_provider):
        responder = Responder(make_provider(configured=False))

        assert await responder.answer("anything", []) == NO_CONTEXT_ANSWER


def test_system_prompt_lists_chunk_texts(chunks: list[RetrievedChunk]):
    prompt = build_system_prompt(chunks)

    assert f"{SKILL_TEXT}\n\n{PROFILE_TEXT}\n\n{PROJECT_TEXT}" in prompt
