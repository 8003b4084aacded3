"""
Portfolio chunker.

Turns the portfolio document into labelled natural-language chunks: one per
skill category, project, experience entry, education entry and
certification, plus aggregate chunks for the profile, the certification
list, interests and social links. Each chunk is a single self-contained
sentence or short paragraph built from a fixed per-section template.

Dependencies: backend.models.chunk
System role: Leaf stage of the RAG pipeline (document -> chunks)
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from backend.models.chunk import PortfolioChunk

logger = logging.getLogger(__name__)

PROFILE = "profile"
SKILL = "skill"
PROJECT = "project"
EXPERIENCE = "experience"
EDUCATION = "education"
CERTIFICATION = "certification"
INTERESTS = "interests"
SOCIAL = "social"


def _text(value: Any) -> str:
    """Render a scalar field as stripped text; non-scalars become empty."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _clause(value: Any) -> str:
    """Text without a trailing period, so templates can add their own."""
    return _text(value).rstrip(".").strip()


def _names(values: Any, key: str = "name") -> list[str]:
    """Strings from a list of strings or of objects carrying `key`."""
    if not isinstance(values, list):
        return []
    names = []
    for value in values:
        text = _text(value.get(key)) if isinstance(value, dict) else _text(value)
        if text:
            names.append(text)
    return names


def _records(document: dict[str, Any], section: str) -> list[dict[str, Any]]:
    """Object records of a list section; anything else contributes nothing."""
    value = document.get(section)
    if not isinstance(value, list):
        return []
    return [record for record in value if isinstance(record, dict)]


def _profile_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    profile = document.get("profile")
    if not isinstance(profile, dict):
        return

    name = _text(profile.get("name"))
    title = _clause(profile.get("title"))
    location = _clause(profile.get("location"))
    email = _clause(profile.get("email"))
    summary = _text(profile.get("summary"))
    if not any((name, title, location, email, summary)):
        return

    text = f"Profile: {name or 'The portfolio owner'}"
    if title:
        text += f" is a {title}"
    if location:
        text += f" based in {location}"
    text += "."
    if email:
        text += f" Email: {email}."
    if summary:
        text += f" {summary}"
    yield PortfolioChunk(id="profile", type=PROFILE, text=text)


def _skill_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    for index, category in enumerate(_records(document, "skills")):
        label = _clause(category.get("category")) or "General"
        items = _names(category.get("items"))
        if not items:
            continue
        yield PortfolioChunk(
            id=f"skill-{index}",
            type=SKILL,
            text=f"Skills - {label}: {', '.join(items)}",
        )


def _project_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    for index, project in enumerate(_records(document, "projects")):
        title = _clause(project.get("title")) or _clause(project.get("name"))
        description = _clause(project.get("description"))
        technologies = _names(project.get("technologies"))
        if not (title or description):
            continue

        text = f"Project: {title or 'Untitled'}."
        if description:
            text += f" {description}."
        if technologies:
            text += f" Technologies used: {', '.join(technologies)}."
        yield PortfolioChunk(id=f"project-{index}", type=PROJECT, text=text)


def _experience_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    for index, entry in enumerate(_records(document, "experience")):
        role = _clause(entry.get("role")) or _clause(entry.get("title"))
        company = _clause(entry.get("company"))
        period = _clause(entry.get("period"))
        if not (role or company):
            continue

        text = f"Experience: {role or 'Role'}"
        if company:
            text += f" at {company}"
        if period:
            text += f" ({period})"
        text += "."

        # Highlights win over the free-text description
        highlights = [_clause(item) for item in _names(entry.get("highlights"))]
        description = _text(entry.get("description"))
        if highlights:
            text += f" Key achievements: {'; '.join(highlights)}."
        elif description:
            text += f" {description}"
        yield PortfolioChunk(id=f"experience-{index}", type=EXPERIENCE, text=text)


def _education_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    for index, entry in enumerate(_records(document, "education")):
        degree = _clause(entry.get("degree"))
        institution = _clause(entry.get("institution"))
        year = _clause(entry.get("year"))
        if not (degree or institution):
            continue

        text = f"Education: {degree or 'Studies'}"
        if institution:
            text += f" from {institution}"
        if year:
            text += f" ({year})"
        yield PortfolioChunk(id=f"education-{index}", type=EDUCATION, text=text)


def _certification_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    summary = []
    for index, cert in enumerate(_records(document, "certifications")):
        name = _clause(cert.get("name")) or _clause(cert.get("title"))
        if not name:
            continue
        issuer = _clause(cert.get("issuer"))
        date = _clause(cert.get("date")) or _clause(cert.get("year"))

        text = f"Certification: {name}"
        if issuer:
            text += f" issued by {issuer}"
        if date:
            text += f" ({date})"
        text += "."
        yield PortfolioChunk(id=f"certification-{index}", type=CERTIFICATION, text=text)
        summary.append(f"{name} ({issuer})" if issuer else name)

    if summary:
        yield PortfolioChunk(
            id="certifications-summary",
            type=CERTIFICATION,
            text=f"Certifications and credentials: {', '.join(summary)}.",
        )


def _interest_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    interests = _names(document.get("interests"))
    if interests:
        yield PortfolioChunk(
            id="interests",
            type=INTERESTS,
            text=f"Interests and hobbies: {', '.join(interests)}.",
        )


def _social_chunks(document: dict[str, Any]) -> Iterable[PortfolioChunk]:
    links = []
    for social in _records(document, "socials"):
        platform = _text(social.get("platform"))
        url = _text(social.get("url"))
        if platform and url:
            links.append(f"{platform}: {url}")
        elif url:
            links.append(url)
    if links:
        yield PortfolioChunk(id="socials", type=SOCIAL, text=f"Social Links: {', '.join(links)}")


SECTION_BUILDERS: tuple[Callable[[dict[str, Any]], Iterable[PortfolioChunk]], ...] = (
    _profile_chunks,
    _skill_chunks,
    _project_chunks,
    _experience_chunks,
    _education_chunks,
    _certification_chunks,
    _interest_chunks,
    _social_chunks,
)


def chunk_portfolio(document: Any) -> list[PortfolioChunk]:
    """
    Split a portfolio document into labelled text chunks.

    Pure function of the document. Missing or malformed sections contribute
    no chunks; a document that is not a JSON object yields an empty list.

    Args:
        document: Parsed portfolio document

    Returns:
        list[PortfolioChunk]: Chunks in section order
    """
    if not isinstance(document, dict):
        logger.warning(f"{__name__}:chunk_portfolio - Document is not an object, nothing to chunk")
        return []

    chunks: list[PortfolioChunk] = []
    for build in SECTION_BUILDERS:
        chunks.extend(build(document))

    logger.info(f"{__name__}:chunk_portfolio - Created {len(chunks)} chunks")
    return chunks
