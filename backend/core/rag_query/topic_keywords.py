"""
Topic vocabularies for keyword retrieval and templated answers.

Chunk types are an open set, but keyword scoring and the fallback answer
templates only know the types listed here. A new chunk type needs an entry
in TYPE_KEYWORDS to be boosted and, optionally, an ANSWER_TOPICS entry to
get its own answer template.

Dependencies: backend.core.rag_query.chunker
System role: Manually maintained topic lexicon for the degraded RAG tiers
"""

from dataclasses import dataclass

from backend.core.rag_query.chunker import (
    CERTIFICATION,
    EDUCATION,
    EXPERIENCE,
    INTERESTS,
    PROFILE,
    PROJECT,
    SKILL,
    SOCIAL,
)

# Query tokens that boost chunks of the keyed type during keyword retrieval
TYPE_KEYWORDS: dict[str, tuple[str, ...]] = {
    PROJECT: ("project", "built", "created", "developed", "app", "website", "pipeline", "system"),
    SKILL: ("skill", "know", "technology", "language", "framework", "tool", "tech", "stack"),
    EXPERIENCE: ("work", "job", "company", "role", "position", "experience", "career", "employed"),
    EDUCATION: ("education", "degree", "university", "school", "study", "college", "bachelor", "master"),
    PROFILE: ("who", "about", "name", "contact", "email", "summary", "introduce"),
    SOCIAL: ("social", "link", "github", "linkedin", "twitter", "medium", "portfolio", "website"),
    CERTIFICATION: ("certification", "certified", "certificate", "credential", "badge", "qualification"),
    INTERESTS: ("interest", "hobby", "hobbies", "like", "enjoy", "passion", "free time", "fun"),
}


@dataclass(frozen=True)
class AnswerTopic:
    """Fallback answer rule: query triggers, chunk type and sentence template."""

    chunk_type: str
    triggers: tuple[str, ...]
    template: str


# Checked in order; the first topic with a trigger in the query and a chunk
# of its type among the retrieved chunks wins.
ANSWER_TOPICS: tuple[AnswerTopic, ...] = (
    AnswerTopic(PROJECT, ("project",), "Here's information about a project: {text}"),
    AnswerTopic(SKILL, ("skill", "know", "technology"), "Here are some skills: {text}"),
    AnswerTopic(EXPERIENCE, ("experience", "work", "job"), "Here's work experience: {text}"),
    AnswerTopic(PROFILE, ("who", "about", "name"), "{text}"),
    AnswerTopic(CERTIFICATION, ("certif", "credential", "badge"), "Here's a certification: {text}"),
    AnswerTopic(INTERESTS, ("interest", "hobby", "hobbies", "enjoy", "passion"), "Here are some interests: {text}"),
)

DEFAULT_ANSWER_TEMPLATE = "Based on the portfolio: {text}"

NO_CONTEXT_ANSWER = (
    "I don't have enough information to answer that question. Please try asking "
    "about the portfolio owner's skills, projects, or experience."
)
