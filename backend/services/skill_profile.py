"""Skill Profile Builder.

Runs a user's repositories through the evidence collector and aggregator and
renders the result as ordered skill records. This is the only layer that
reads settings, logs and records metrics; the evidence modules underneath
stay pure.
"""

from __future__ import annotations

import time
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from app.config import Settings, get_settings
from app.exceptions import ValidationError
from app.logging_config import get_logger
from app.metrics import (
    PROFILE_BUILD_DURATION,
    REPOSITORIES_PROCESSED,
    SIGNALS_COLLECTED,
    SKILLS_EMITTED,
)
from services.category_inference import build_inference_cache, configure_inference_cache
from services.evidence_aggregator import EvidenceAggregator, LanguageEvidenceResult
from services.evidence_collector import (
    EvidenceCollector,
    EvidencePolicy,
    RepositoryEvidenceInput,
    coerce_repository,
)
from services.evidence_knowledge import EvidenceKnowledgeBase
from services.skill_taxonomy import SkillCategory

logger = get_logger(__name__)


class SkillRecord(BaseModel):
    """One inferred skill, ready for display."""

    name: str
    category: SkillCategory
    confidence: int = Field(..., ge=0, le=100)
    score: int = Field(..., ge=0, le=100)
    evidence_penalty: float = Field(0.0, ge=0.0, le=1.0)
    highlights: list[str] = Field(default_factory=list)
    repository_count: int = 0
    matched_token_count: int = 0
    sources: list[str] = Field(default_factory=list)


class SkillProfile(BaseModel):
    """Ordered skills plus collection diagnostics."""

    skills: list[SkillRecord] = Field(default_factory=list)
    total_repositories: int = 0
    repositories_with_evidence: int = 0
    signal_count: int = 0
    signals_by_source: dict[str, int] = Field(default_factory=dict)


def _percentage(value: float) -> int:
    return max(0, min(100, round(value * 100)))


def to_skill_record(result: LanguageEvidenceResult) -> SkillRecord:
    return SkillRecord(
        name=result.language,
        category=result.category,
        confidence=_percentage(result.confidence),
        score=_percentage(result.display_score),
        evidence_penalty=round(result.penalty, 4),
        highlights=list(result.highlights),
        repository_count=result.repository_count,
        matched_token_count=result.matched_token_count,
        sources=[source.value for source in result.sources],
    )


class SkillProfileBuilder:
    """Builds skill profiles from repository metadata."""

    def __init__(
        self,
        policy: EvidencePolicy | None = None,
        max_highlights: int = 4,
        knowledge_base: EvidenceKnowledgeBase | None = None,
        record_metrics: bool = True,
    ) -> None:
        self._collector = EvidenceCollector(policy, knowledge_base)
        self._knowledge_base = knowledge_base
        self._max_highlights = max(1, max_highlights)
        self._record_metrics = record_metrics

    @property
    def policy(self) -> EvidencePolicy:
        return self._collector.policy

    def build(
        self,
        repositories: Iterable[RepositoryEvidenceInput | Mapping[str, Any]],
        total_repositories: int | None = None,
        limit: int | None = None,
        min_confidence: float = 0.0,
    ) -> SkillProfile:
        """Infer a skill profile.

        Args:
            repositories: Repository inputs or raw mappings in either key style.
            total_repositories: Repositories scanned for the user; defaults to
                the number of repositories given.
            limit: Maximum number of skills to return.
            min_confidence: Drop skills whose raw confidence is below this.

        Raises:
            ValidationError: If limit is negative or min_confidence is outside [0, 1].
        """
        if limit is not None and limit < 0:
            raise ValidationError("limit must be non-negative", details={"limit": limit})
        if not 0.0 <= min_confidence <= 1.0:
            raise ValidationError(
                "min_confidence must be between 0 and 1",
                details={"min_confidence": min_confidence},
            )

        start = time.perf_counter()
        inputs = [coerce_repository(repo) for repo in repositories]
        total = len(inputs) if total_repositories is None else max(0, total_repositories)
        aggregator = EvidenceAggregator(total, knowledge_base=self._knowledge_base)

        by_source: Counter = Counter()
        with_evidence = 0
        for index, repo in enumerate(inputs):
            signals = self._collector.collect(repo)
            if any(not s.is_context for s in signals):
                with_evidence += 1
            by_source.update(s.source.value for s in signals)
            aggregator.add_repository(repo.full_name or repo.name or f"#{index}", signals)

        results = [
            r for r in aggregator.results(self._max_highlights)
            if r.confidence >= min_confidence
        ]
        if limit is not None:
            results = results[:limit]
        skills = [to_skill_record(r) for r in results]

        if self._record_metrics:
            PROFILE_BUILD_DURATION.observe(time.perf_counter() - start)
            REPOSITORIES_PROCESSED.inc(len(inputs))
            for source, count in by_source.items():
                SIGNALS_COLLECTED.labels(source=source).inc(count)
            for skill in skills:
                SKILLS_EMITTED.labels(category=skill.category.value).inc()

        logger.info(
            "skill_profile_built",
            repositories=len(inputs),
            total_repositories=total,
            repositories_with_evidence=with_evidence,
            signals=sum(by_source.values()),
            skills=len(skills),
        )
        return SkillProfile(
            skills=skills,
            total_repositories=total,
            repositories_with_evidence=with_evidence,
            signal_count=sum(by_source.values()),
            signals_by_source=dict(sorted(by_source.items())),
        )


def policy_from_settings(settings: Settings | None = None) -> EvidencePolicy:
    """Map the evidence_* settings onto a collection policy."""
    settings = settings or get_settings()
    return EvidencePolicy(
        include_topic_signals=settings.evidence_include_topics,
        include_text_signals=settings.evidence_include_text,
        include_license_signals=settings.evidence_include_license,
        minimum_signal_score=settings.evidence_min_signal_score,
        max_signals_per_repo=settings.evidence_max_signals_per_repo,
    )


def builder_from_settings(settings: Settings | None = None) -> SkillProfileBuilder:
    """Build a profile builder from settings, installing the configured inference cache."""
    settings = settings or get_settings()
    configure_inference_cache(build_inference_cache(settings.inference_cache_size))
    return SkillProfileBuilder(
        policy=policy_from_settings(settings),
        max_highlights=settings.evidence_max_highlights,
        record_metrics=settings.metrics_enabled,
    )
