"""Evidence Aggregator & Confidence Scorer.

Folds every repository's evidence signals into one aggregate per language
and reduces each aggregate to a calibrated confidence.

Confidence blends four terms, each clamped to [0, 1]:
- density: share of the accumulated score that was itself high-confidence
- coverage: contributing repositories / repositories scanned
- source diversity: distinct skill sources used / skill sources available
- token diversity: log2(1 + distinct matched tokens) / 3.5

Negative context (forks, templates, demos, ...) never removes evidence. It
builds a small capped penalty that only lowers the displayed score, so the
raw confidence stays explainable.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from services.category_inference import CategoryInferenceEngine, get_inference_engine
from services.evidence_collector import SKILL_SOURCES, EvidenceSignal, EvidenceSource
from services.evidence_knowledge import EvidenceKnowledgeBase, get_knowledge_base
from services.evidence_tables import FORKED_REPOSITORY_TAG, INACTIVE_REPOSITORY_TAG
from services.skill_taxonomy import SkillCategory

DENSITY_WEIGHT = 0.46
COVERAGE_WEIGHT = 0.24
SOURCE_DIVERSITY_WEIGHT = 0.18
TOKEN_DIVERSITY_WEIGHT = 0.12

REPOSITORY_DENSITY_PRIOR = 0.15
TOKEN_DIVERSITY_SCALE = 3.5

MAX_CONTEXT_PENALTY = 0.24
REPOSITORY_PENALTY_DISCOUNT = 0.35
CATEGORY_OVERRIDE_CONFIDENCE = 0.62

# Per-occurrence penalty for the common archetypes
CONTEXT_TAG_WEIGHTS: dict[str, float] = {
    FORKED_REPOSITORY_TAG: 0.015,
    INACTIVE_REPOSITORY_TAG: 0.025,
    "TemplateRepository": 0.022,
    "ExampleRepository": 0.016,
    "ExperimentalRepository": 0.014,
    "ConfigRepository": 0.012,
    "CuratedListRepository": 0.015,
    "LegacyRepository": 0.020,
}

# Other archetypes weigh their profile penalty divided by this
CONTEXT_PENALTY_DIVISOR = 20


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


@dataclass
class LanguageEvidenceAggregate:
    """Running evidence for one language across a user's repositories."""

    language: str
    category: SkillCategory
    score_sum: float = 0.0
    confidence_weighted_score: float = 0.0
    contribution_weighted_score: float = 0.0
    source_counts: Counter = field(default_factory=Counter)
    tokens: set[str] = field(default_factory=set)
    highlights: dict[str, None] = field(default_factory=dict)
    repositories: dict[str, None] = field(default_factory=dict)
    context_tags: Counter = field(default_factory=Counter)

    @property
    def repository_count(self) -> int:
        return len(self.repositories)

    @property
    def has_skill_evidence(self) -> bool:
        return bool(self.repositories)

    def add_signal(self, repository: str, signal: EvidenceSignal, discount: float) -> None:
        self.score_sum += signal.score
        self.confidence_weighted_score += signal.score * signal.confidence
        self.contribution_weighted_score += signal.score * discount
        self.source_counts[signal.source] += 1
        if signal.token:
            self.tokens.add(signal.token)
        if signal.detail:
            self.highlights.setdefault(signal.detail, None)
        self.repositories.setdefault(repository, None)

    def add_context(self, signal: EvidenceSignal) -> None:
        self.context_tags[signal.language] += 1


@dataclass(frozen=True)
class LanguageEvidenceResult:
    """Final per-language evidence, ready to be rendered as a skill."""

    language: str
    category: SkillCategory
    confidence: float
    penalty: float
    display_score: float
    contribution_weighted_score: float
    highlights: tuple[str, ...]
    repository_count: int
    matched_token_count: int
    sources: tuple[EvidenceSource, ...]
    context_tags: Mapping[str, int]


# ---------------------------------------------------------------------------
# Confidence terms
# ---------------------------------------------------------------------------


def evidence_density(aggregate: LanguageEvidenceAggregate) -> float:
    denominator = aggregate.score_sum + aggregate.repository_count * REPOSITORY_DENSITY_PRIOR
    if denominator <= 0:
        return 0.0
    return _clamp(aggregate.confidence_weighted_score / denominator)


def repository_coverage(repository_count: int, total_repositories: int) -> float:
    if total_repositories <= 0:
        return 0.0
    return _clamp(repository_count / total_repositories)


def source_diversity(source_counts: Mapping[EvidenceSource, int]) -> float:
    used = sum(1 for source in SKILL_SOURCES if source_counts.get(source, 0) > 0)
    return _clamp(used / len(SKILL_SOURCES))


def token_diversity(token_count: int) -> float:
    return _clamp(math.log2(1 + max(0, token_count)) / TOKEN_DIVERSITY_SCALE)


def evidence_confidence(
    aggregate: LanguageEvidenceAggregate, total_repositories: int
) -> float:
    """Calibrated confidence in [0, 1] for one language aggregate."""
    return _clamp(
        DENSITY_WEIGHT * evidence_density(aggregate)
        + COVERAGE_WEIGHT * repository_coverage(aggregate.repository_count, total_repositories)
        + SOURCE_DIVERSITY_WEIGHT * source_diversity(aggregate.source_counts)
        + TOKEN_DIVERSITY_WEIGHT * token_diversity(len(aggregate.tokens))
    )


def context_penalty(
    tag_counts: Mapping[str, int],
    category: SkillCategory | None = None,
    knowledge_base: EvidenceKnowledgeBase | None = None,
) -> float:
    """Capped penalty from context tag occurrences.

    Without a category every archetype counts; with one, archetypes restricted
    to other categories are skipped.
    """
    kb = knowledge_base or get_knowledge_base()
    total = 0.0
    for tag, count in tag_counts.items():
        if count <= 0:
            continue
        profile = kb.negative_profile(tag)
        if category is not None and profile is not None and not profile.affects(category):
            continue
        weight = CONTEXT_TAG_WEIGHTS.get(tag)
        if weight is None:
            weight = profile.penalty / CONTEXT_PENALTY_DIVISOR if profile else 0.0
        total += weight * count
    return min(MAX_CONTEXT_PENALTY, total)


def display_score(confidence: float, penalty: float) -> float:
    return _clamp(confidence * (1 - _clamp(penalty, 0.0, MAX_CONTEXT_PENALTY)))


def merge_category(
    current: SkillCategory, candidate: SkillCategory, confidence: float
) -> SkillCategory:
    """Only let inference replace a category once the evidence is convincing."""
    if confidence >= CATEGORY_OVERRIDE_CONFIDENCE:
        return candidate
    return current


def summarize_highlights(highlights: Iterable[str], limit: int) -> tuple[str, ...]:
    cleaned = (h.strip() for h in highlights)
    return tuple(h for h in cleaned if h)[: max(1, limit)]


# ---------------------------------------------------------------------------
# Aggregator
# ---------------------------------------------------------------------------


class EvidenceAggregator:
    """Sequential fold of one user's repositories into language aggregates.

    Instances are private to one profile computation and not thread-safe;
    run independent users on independent aggregators.
    """

    def __init__(
        self,
        total_repositories: int,
        knowledge_base: EvidenceKnowledgeBase | None = None,
        inference: CategoryInferenceEngine | None = None,
    ) -> None:
        self._total = max(0, total_repositories)
        self._kb = knowledge_base or get_knowledge_base()
        self._inference = inference or get_inference_engine()
        self._aggregates: dict[str, LanguageEvidenceAggregate] = {}

    @property
    def total_repositories(self) -> int:
        return self._total

    def add_repository(self, full_name: str, signals: Iterable[EvidenceSignal]) -> None:
        """Fold one repository's collected signals."""
        skill_signals: dict[str, list[EvidenceSignal]] = {}
        context_signals: list[EvidenceSignal] = []
        for signal in signals:
            if signal.is_context:
                context_signals.append(signal)
            else:
                skill_signals.setdefault(signal.language, []).append(signal)

        repository_penalty = context_penalty(
            Counter(s.language for s in context_signals), knowledge_base=self._kb
        )
        discount = 1 - repository_penalty * REPOSITORY_PENALTY_DISCOUNT

        for language, group in skill_signals.items():
            aggregate = self._aggregate(language, group[0].category)
            for signal in group:
                aggregate.add_signal(full_name, signal, discount)

        # Context attaches to the declared language and every language evidenced here
        targets = dict.fromkeys(skill_signals)
        for signal in context_signals:
            if signal.subject:
                targets.setdefault(signal.subject, None)
        for language in targets:
            aggregate = self._aggregate(language, self._kb.category_for(language))
            for signal in context_signals:
                aggregate.add_context(signal)

        for language in skill_signals:
            aggregate = self._aggregates[language]
            confidence = evidence_confidence(aggregate, self._total)
            candidate = self._inference.infer(language).category
            aggregate.category = merge_category(aggregate.category, candidate, confidence)

    def _aggregate(self, language: str, category: SkillCategory) -> LanguageEvidenceAggregate:
        aggregate = self._aggregates.get(language)
        if aggregate is None:
            aggregate = LanguageEvidenceAggregate(language=language, category=category)
            self._aggregates[language] = aggregate
        return aggregate

    def aggregates(self) -> list[LanguageEvidenceAggregate]:
        """Aggregates with at least one real skill signal, in first-seen order."""
        return [a for a in self._aggregates.values() if a.has_skill_evidence]

    def results(self, max_highlights: int = 4) -> list[LanguageEvidenceResult]:
        """Reduce every aggregate, ordered by display score then confidence then name."""
        results = []
        for aggregate in self.aggregates():
            confidence = evidence_confidence(aggregate, self._total)
            penalty = context_penalty(aggregate.context_tags, aggregate.category, self._kb)
            results.append(
                LanguageEvidenceResult(
                    language=aggregate.language,
                    category=aggregate.category,
                    confidence=confidence,
                    penalty=penalty,
                    display_score=display_score(confidence, penalty),
                    contribution_weighted_score=aggregate.contribution_weighted_score,
                    highlights=summarize_highlights(aggregate.highlights, max_highlights),
                    repository_count=aggregate.repository_count,
                    matched_token_count=len(aggregate.tokens),
                    sources=tuple(s for s in SKILL_SOURCES if aggregate.source_counts.get(s)),
                    context_tags=dict(aggregate.context_tags),
                )
            )
        results.sort(key=lambda r: (-r.display_score, -r.confidence, r.language))
        return results
