"""Shared test fixtures for the skill evidence engine."""

from __future__ import annotations

from typing import Any

import pytest

from app.config import Environment, Settings
from services.evidence_collector import (
    EvidencePolicy,
    EvidenceSignal,
    EvidenceSource,
    RepositoryEvidenceInput,
)
from services.evidence_knowledge import EvidenceKnowledgeBase, get_knowledge_base
from services.skill_taxonomy import BACKEND, SkillCategory


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with safe defaults."""
    return Settings(
        _env_file=None,
        environment=Environment.TESTING,
    )


@pytest.fixture(scope="session")
def knowledge_base() -> EvidenceKnowledgeBase:
    """The shared knowledge base; built once for the whole session."""
    return get_knowledge_base()


@pytest.fixture
def default_policy() -> EvidencePolicy:
    return EvidencePolicy()


@pytest.fixture
def make_repository():
    """Factory for repository inputs with neutral defaults."""

    def _make(name: str = "sample", **overrides: Any) -> RepositoryEvidenceInput:
        data: dict[str, Any] = {
            "owner": "octocat",
            "name": name,
            "full_name": f"octocat/{name}",
            "description": None,
            "primary_language": None,
            "language_bytes": {},
            "topics": [],
            "is_fork": False,
            "is_archived": False,
            "is_disabled": False,
            "has_wiki": False,
            "has_pages": False,
        }
        data.update(overrides)
        return RepositoryEvidenceInput(**data)

    return _make


@pytest.fixture
def make_signal():
    """Factory for hand-built evidence signals."""

    def _make(
        language: str,
        source: EvidenceSource,
        score: float = 0.5,
        confidence: float = 0.8,
        token: str | None = None,
        category: SkillCategory = BACKEND,
        subject: str | None = None,
        detail: str = "",
    ) -> EvidenceSignal:
        return EvidenceSignal(
            language=language,
            category=category,
            source=source,
            score=score,
            confidence=confidence,
            detail=detail or f"{source.value} evidence for {language}",
            token=token,
            subject=subject,
        )

    return _make


@pytest.fixture
def scenario_a_repository(make_repository) -> RepositoryEvidenceInput:
    """A TypeScript Next.js dashboard."""
    return make_repository(
        "my-app",
        primary_language="TypeScript",
        language_bytes={"TypeScript": 50000, "JavaScript": 10000},
        topics=["nextjs", "react"],
        description="A Next.js dashboard",
    )
