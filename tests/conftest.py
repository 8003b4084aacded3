"""
Shared test fixtures and configuration for entire test suite.

Provides: Fake LLM provider, sample portfolio document, temp data directory,
settings and a wired service cache
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import json
from pathlib import Path

import pytest

from backend.api.deps.dependencies import ServiceCache
from backend.boundary.llm.base import LLMProvider
from backend.boundary.storage import PortfolioStore
from backend.configs.admin import AdminSettings
from backend.configs.portfolio import PortfolioSettings
from backend.configs.settings import Settings
from backend.core.exceptions import EmbeddingError, GenerationError

TOPIC_AXES = ("project", "skill", "experience", "education", "profile", "certification", "interest", "social")


def topic_vector(text: str) -> list[float]:
    """Deterministic bag-of-topics embedding: one axis per topic word."""
    lowered = text.lower()
    vector = [float(lowered.count(axis)) for axis in TOPIC_AXES]
    # Constant axis keeps every vector non-zero
    vector.append(0.1)
    return vector


class FakeProvider(LLMProvider):
    """In-memory provider with switchable capabilities and failures."""

    provider = "fake"
    name = "Fake"

    def __init__(
        self,
        configured: bool = True,
        embeddings: bool = True,
        completion: str | None = "Generated answer.",
        embed_error: Exception | None = None,
        complete_error: Exception | None = None,
        fail_embed_after: int | None = None,
    ) -> None:
        self.configured = configured
        self.embeddings = embeddings
        self.completion = completion
        self.embed_error = embed_error
        self.complete_error = complete_error
        self.fail_embed_after = fail_embed_after
        self.embed_calls: list[str] = []
        self.complete_calls: list[tuple[str, str]] = []

    def is_configured(self) -> bool:
        return self.configured

    def supports_embeddings(self) -> bool:
        return self.embeddings

    async def embed(self, text: str) -> list[float]:
        self.embed_calls.append(text)
        if self.embed_error is not None:
            raise self.embed_error
        if self.fail_embed_after is not None and len(self.embed_calls) > self.fail_embed_after:
            raise EmbeddingError("embedding quota exceeded", self.provider)
        return topic_vector(text)

    async def complete(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> str:
        self.complete_calls.append((system_prompt, user_message))
        if self.complete_error is not None:
            raise self.complete_error
        if self.completion is None:
            raise GenerationError("no completion", self.provider)
        return self.completion

    @property
    def chat_model(self) -> str | None:
        return "fake-chat"

    @property
    def embedding_model(self) -> str | None:
        return "fake-embed" if self.embeddings else None


@pytest.fixture
def sample_portfolio() -> dict:
    """Provide a portfolio document touching every section."""
    return {
        "profile": {
            "name": "Alex Doe",
            "title": "Data Engineer",
            "location": "Berlin",
            "email": "alex@example.com",
            "summary": "Builds reliable data platforms.",
        },
        "skills": [
            {"category": "Languages", "items": ["Python", "SQL"]},
            {"category": "Cloud", "items": ["AWS", "Terraform"]},
        ],
        "projects": [
            {
                "title": "ETL Pipeline",
                "description": "Streaming ingestion for sensor data",
                "technologies": ["Python", "Kafka"],
            }
        ],
        "experience": [
            {
                "role": "Senior Engineer",
                "company": "Acme",
                "period": "2020-2024",
                "highlights": ["Cut costs by 30%", "Led a team of four"],
            }
        ],
        "education": [
            {"degree": "MSc Computer Science", "institution": "TU Berlin", "year": "2019"}
        ],
        "certifications": [
            {"name": "AWS Solutions Architect", "issuer": "Amazon", "date": "2023"}
        ],
        "interests": ["Climbing", "Chess"],
        "socials": [
            {"platform": "GitHub", "url": "https://github.com/alexdoe"},
        ],
    }


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide an empty data directory."""
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture
def portfolio_path(data_dir: Path, sample_portfolio: dict) -> Path:
    """Write the sample portfolio and return its path."""
    path = data_dir / "portfolio.json"
    path.write_text(json.dumps(sample_portfolio), encoding="utf-8")
    return path


@pytest.fixture
def portfolio_store(portfolio_path: Path) -> PortfolioStore:
    """Provide a store over the sample portfolio."""
    return PortfolioStore(portfolio_path)


@pytest.fixture
def fake_provider() -> FakeProvider:
    """Provide a fully capable fake provider."""
    return FakeProvider()


@pytest.fixture
def test_settings(data_dir: Path) -> Settings:
    """Provide settings pointing at the temp data directory."""
    return Settings(
        portfolio=PortfolioSettings(data_dir=data_dir),
        admin=AdminSettings(username="admin", password="s3cret"),
    )


@pytest.fixture
def service_cache(test_settings: Settings, portfolio_path: Path, fake_provider: FakeProvider) -> ServiceCache:
    """Provide a service cache wired to temp files and the fake provider."""
    return ServiceCache(settings=test_settings, provider=fake_provider)


@pytest.fixture
def make_provider():
    """Provide the FakeProvider factory for tests needing custom capabilities."""
    return FakeProvider
