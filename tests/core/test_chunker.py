"""
Test suite for the portfolio chunker.

Covers per-section templates, aggregate chunks, highlight preference and
tolerance of missing or malformed sections.

System role: Verification of document -> chunk conversion
"""

import pytest

from backend.core.rag_query.chunker import chunk_portfolio


class TestChunkPortfolio:
    """Test suite for chunk_portfolio."""

    def test_emits_chunks_in_section_order(self, sample_portfolio: dict):
        """Test every section contributes its chunks in document order."""
        # Act
        chunks = chunk_portfolio(sample_portfolio)

        # Assert
        assert [chunk.id for chunk in chunks] == [
            "profile",
            "skill-0",
            "skill-1",
            "project-0",
            "experience-0",
            "education-0",
            "certification-0",
            "certifications-summary",
            "interests",
            "socials",
        ]

    def test_section_templates(self, sample_portfolio: dict):
        """Test each chunk text follows its section template."""
        # Act
        texts = {chunk.id: chunk.text for chunk in chunk_portfolio(sample_portfolio)}

        # Assert
        assert texts["profile"] == (
            "Profile: Alex Doe is a Data Engineer based in Berlin. "
            "Email: alex@example.com. Builds reliable data platforms."
        )
        assert texts["skill-0"] == "Skills - Languages: Python, SQL"
        assert texts["project-0"] == (
            "Project: ETL Pipeline. Streaming ingestion for sensor data. "
            "Technologies used: Python, Kafka."
        )
        assert texts["education-0"] == "Education: MSc Computer Science from TU Berlin (2019)"
        assert texts["certification-0"] == "Certification: AWS Solutions Architect issued by Amazon (2023)."
        assert texts["certifications-summary"] == "Certifications and credentials: AWS Solutions Architect (Amazon)."
        assert texts["interests"] == "Interests and hobbies: Climbing, Chess."
        assert texts["socials"] == "Social Links: GitHub: https://github.com/alexdoe"

    def test_chunk_types(self, sample_portfolio: dict):
        """Test aggregate chunks carry the type of their section."""
        # Act
        types = {chunk.id: chunk.type for chunk in chunk_portfolio(sample_portfolio)}

        # Assert
        assert types["certifications-summary"] == "certification"
        assert types["socials"] == "social"
        assert types["interests"] == "interests"

    def test_experience_prefers_highlights_over_description(self):
        """Test highlights win when both highlights and description exist."""
        # Arrange
        document = {
            "experience": [
                {
                    "role": "Engineer",
                    "company": "Acme",
                    "period": "2021",
                    "description": "Did things.",
                    "highlights": ["Shipped v2"],
                }
            ]
        }

        # Act
        (chunk,) = chunk_portfolio(document)

        # Assert
        assert chunk.text == "Experience: Engineer at Acme (2021). Key achievements: Shipped v2."
        assert "Did things" not in chunk.text

    def test_experience_falls_back_to_description(self):
        """Test description is used when no highlights are present."""
        # Arrange
        document = {"experience": [{"role": "Engineer", "company": "Acme", "description": "Did things."}]}

        # Act
        (chunk,) = chunk_portfolio(document)

        # Assert
        assert chunk.text == "Experience: Engineer at Acme. Did things."

    @pytest.mark.parametrize(
        "document",
        [
            {},
            {"skills": "not a list", "projects": {"title": "x"}},
            {"projects": [], "interests": []},
            {"projects": ["just a string", 42]},
        ],
    )
    def test_missing_or_malformed_sections_contribute_nothing(self, document: dict):
        """Test absent, empty and non-array sections are skipped silently."""
        assert chunk_portfolio(document) == []

    def test_non_object_document_yields_no_chunks(self):
        """Test a document that is not a JSON object yields an empty list."""
        assert chunk_portfolio(["profile"]) == []
        assert chunk_portfolio(None) == []

    def test_is_pure(self, sample_portfolio: dict):
        """Test the same document always yields the same chunks."""
        assert chunk_portfolio(sample_portfolio) == chunk_portfolio(sample_portfolio)
