"""Tests for evidence aggregation and confidence scoring."""

from collections import Counter

import pytest

from services.category_inference import infer_language_category
from services.evidence_aggregator import (
    CATEGORY_OVERRIDE_CONFIDENCE,
    MAX_CONTEXT_PENALTY,
    EvidenceAggregator,
    LanguageEvidenceAggregate,
    context_penalty,
    display_score,
    evidence_confidence,
    evidence_density,
    merge_category,
    repository_coverage,
    source_diversity,
    summarize_highlights,
    token_diversity,
)
from services.evidence_collector import EvidenceSource, collect_repository_evidence
from services.skill_taxonomy import BACKEND, DATABASE, FRONTEND


@pytest.fixture
def scenario_c_signals(make_signal):
    """Go evidence spread thinly across four of ten repositories."""
    def go(source, score, confidence, token):
        return make_signal("Go", source, score, confidence, token=token, category=FRONTEND)

    return [
        ("octo/svc", [go(EvidenceSource.PRIMARY_LANGUAGE, 0.7, 0.9, "go")]),
        ("octo/tools", [go(EvidenceSource.TOPICS, 0.3, 0.8, "golang")]),
        ("octo/notes", [go(EvidenceSource.ECOSYSTEM_KEYWORDS, 0.2, 0.7, "go")]),
        (
            "octo/go-template",
            [
                make_signal(
                    "TemplateRepository",
                    EvidenceSource.NEGATIVE_CONTEXT,
                    0.42,
                    0.23,
                    token="template-repository",
                    subject="Go",
                )
            ],
        ),
    ]


def _aggregate(**kwargs) -> LanguageEvidenceAggregate:
    aggregate = LanguageEvidenceAggregate(language="Go", category=BACKEND)
    for key, value in kwargs.items():
        setattr(aggregate, key, value)
    return aggregate


class TestConfidenceTerms:
    """Test suite for the individual confidence terms."""

    def test_density(self):
        aggregate = _aggregate(
            score_sum=1.0, confidence_weighted_score=0.6, repositories={"a": None}
        )
        assert evidence_density(aggregate) == pytest.approx(0.6 / 1.15)

    def test_density_of_empty_aggregate(self):
        assert evidence_density(_aggregate()) == 0.0

    def test_coverage(self):
        assert repository_coverage(3, 10) == pytest.approx(0.3)
        assert repository_coverage(5, 2) == 1.0
        assert repository_coverage(1, 0) == 0.0

    def test_source_diversity_ignores_context_sources(self):
        counts = Counter({EvidenceSource.TOPICS: 2, EvidenceSource.REPO_FLAGS: 5})
        assert source_diversity(counts) == pytest.approx(0.1)
        assert source_diversity({}) == 0.0

    def test_token_diversity(self):
        assert token_diversity(0) == 0.0
        assert token_diversity(3) == pytest.approx(2 / 3.5)
        assert token_diversity(1000) == 1.0

    def test_display_score(self):
        assert display_score(0.8, 0.1) == pytest.approx(0.72)
        # Penalty is capped before it is applied
        assert display_score(0.8, 0.9) == pytest.approx(0.8 * (1 - MAX_CONTEXT_PENALTY))

    def test_summarize_highlights(self):
        assert summarize_highlights([" a ", "", "b", "c"], 2) == ("a", "b")
        assert summarize_highlights(["a", "b"], 0) == ("a",)


class TestContextPenalty:
    """Test suite for context tag penalties."""

    def test_listed_weights(self):
        assert context_penalty({"ForkedRepository": 2}) == pytest.approx(0.03)
        counts = {"InactiveRepository": 1, "TemplateRepository": 1}
        assert context_penalty(counts) == pytest.approx(0.047)

    def test_capped(self):
        assert context_penalty({"ForkedRepository": 20}) == MAX_CONTEXT_PENALTY

    def test_unlisted_tag_uses_profile_penalty(self):
        assert context_penalty({"AcademicRepository": 1}) == pytest.approx(0.3 / 20)

    def test_category_restriction(self):
        counts = {"StaticSiteRepository": 1}
        assert context_penalty(counts) == pytest.approx(0.009)
        assert context_penalty(counts, BACKEND) == pytest.approx(0.009)
        assert context_penalty(counts, FRONTEND) == 0.0

    def test_unknown_and_zero_counts(self):
        assert context_penalty({"Unknown": 3}) == 0.0
        assert context_penalty({"ForkedRepository": 0}) == 0.0
        assert context_penalty({}) == 0.0


class TestMergeCategory:
    def test_low_confidence_keeps_current(self):
        assert merge_category(FRONTEND, BACKEND, 0.5) == FRONTEND

    def test_threshold_switches(self):
        assert merge_category(FRONTEND, DATABASE, CATEGORY_OVERRIDE_CONFIDENCE) == DATABASE


class TestEvidenceAggregator:
    """Test suite for the repository fold."""

    def test_sparse_evidence(self, scenario_c_signals):
        aggregator = EvidenceAggregator(10)
        for full_name, signals in scenario_c_signals:
            aggregator.add_repository(full_name, signals)

        [go] = aggregator.results()
        assert go.language == "Go"
        assert go.repository_count == 3
        assert go.matched_token_count == 2
        assert go.confidence == pytest.approx(0.461917, abs=1e-5)
        assert go.penalty == pytest.approx(0.022)
        assert go.display_score == pytest.approx(0.451755, abs=1e-5)
        # Confidence below the override threshold keeps the signalled category
        assert go.category == FRONTEND
        assert go.context_tags == {"TemplateRepository": 1}
        assert go.sources == (
            EvidenceSource.PRIMARY_LANGUAGE,
            EvidenceSource.TOPICS,
            EvidenceSource.ECOSYSTEM_KEYWORDS,
        )

    def test_confident_evidence_takes_inferred_category(self, make_signal):
        aggregator = EvidenceAggregator(1)
        aggregator.add_repository(
            "octo/svc",
            [
                make_signal(
                    "Go", EvidenceSource.PRIMARY_LANGUAGE, 0.9, 0.95, token="go", category=FRONTEND
                ),
                make_signal(
                    "Go", EvidenceSource.LANGUAGE_BYTES, 0.9, 0.94, token="go", category=FRONTEND
                ),
                make_signal(
                    "Go", EvidenceSource.TOPICS, 0.3, 0.8, token="golang", category=FRONTEND
                ),
            ],
        )
        [go] = aggregator.results()
        assert go.confidence >= CATEGORY_OVERRIDE_CONFIDENCE
        assert go.category == infer_language_category("Go").category

    def test_context_only_repository_emits_nothing(self, make_repository):
        aggregator = EvidenceAggregator(2)
        repo = make_repository("v3", is_fork=True, is_archived=True)
        aggregator.add_repository(repo.full_name, collect_repository_evidence(repo))
        assert aggregator.aggregates() == []
        assert aggregator.results() == []

    def test_context_subject_without_evidence_is_hidden(self, make_signal):
        aggregator = EvidenceAggregator(2)
        aggregator.add_repository(
            "octo/fork",
            [make_signal("ForkedRepository", EvidenceSource.REPO_FLAGS, 0.04, 0.2, subject="Rust")],
        )
        aggregator.add_repository(
            "octo/svc", [make_signal("Go", EvidenceSource.PRIMARY_LANGUAGE, 0.7, 0.9, token="go")]
        )
        assert [r.language for r in aggregator.results()] == ["Go"]

    def test_fork_penalizes_display_only(self, make_repository):
        repo = make_repository("v3", is_fork=True, primary_language="Go")
        aggregator = EvidenceAggregator(2)
        aggregator.add_repository(repo.full_name, collect_repository_evidence(repo))

        [go] = aggregator.results()
        assert go.category == BACKEND
        assert go.confidence == pytest.approx(0.50977, abs=1e-4)
        assert go.penalty == pytest.approx(0.015)
        assert go.display_score == pytest.approx(go.confidence * 0.985)
        assert go.sources == (EvidenceSource.PRIMARY_LANGUAGE,)

    def test_nextjs_dashboard(self, scenario_a_repository):
        aggregator = EvidenceAggregator(1)
        aggregator.add_repository(
            scenario_a_repository.full_name, collect_repository_evidence(scenario_a_repository)
        )
        results = aggregator.results()

        assert [r.language for r in results] == ["TypeScript", "JavaScript"]
        typescript, javascript = results
        assert typescript.category == FRONTEND
        assert typescript.confidence == pytest.approx(0.8199, abs=1e-3)
        assert typescript.matched_token_count == 5
        assert javascript.confidence == pytest.approx(0.6792, abs=1e-3)
        assert len(typescript.highlights) == 4

    def test_template_lowers_display_and_contribution(self, make_repository):
        def reduce(name):
            repo = make_repository(
                name, primary_language="TypeScript", language_bytes={"TypeScript": 1000}
            )
            aggregator = EvidenceAggregator(1)
            aggregator.add_repository(repo.full_name, collect_repository_evidence(repo))
            return aggregator.results()[0]

        plain = reduce("foo")
        template = reduce("foo-template-starter")

        assert plain.confidence == pytest.approx(template.confidence)
        assert plain.confidence == pytest.approx(0.7102, abs=1e-3)
        assert plain.penalty == 0.0
        assert template.penalty == pytest.approx(0.022)
        assert template.display_score < plain.display_score
        assert plain.contribution_weighted_score == pytest.approx(1.5662, abs=1e-3)
        assert template.contribution_weighted_score == pytest.approx(1.5541, abs=1e-3)

    def test_more_evidence_never_lowers_confidence(self, make_repository):
        aggregator = EvidenceAggregator(5)
        for name in ("svc1", "svc2"):
            repo = make_repository(name, primary_language="Go", language_bytes={"Go": 5000})
            aggregator.add_repository(repo.full_name, collect_repository_evidence(repo))
        before = aggregator.results()[0]

        tools = make_repository("tools", topics=["golang"])
        aggregator.add_repository(tools.full_name, collect_repository_evidence(tools))
        after = aggregator.results()[0]

        assert before.language == after.language == "Go"
        assert before.confidence == pytest.approx(0.5683, abs=1e-3)
        assert after.confidence == pytest.approx(0.6543, abs=1e-3)
        assert after.repository_count == 3

    def test_results_ordering(self, make_signal):
        aggregator = EvidenceAggregator(1)
        aggregator.add_repository(
            "octo/a",
            [
                make_signal("Rust", EvidenceSource.TOPICS, 0.3, 0.8, token="rust"),
                make_signal("Go", EvidenceSource.TOPICS, 0.3, 0.8, token="go"),
                make_signal("Zig", EvidenceSource.PRIMARY_LANGUAGE, 0.9, 0.95, token="zig"),
            ],
        )
        assert [r.language for r in aggregator.results()] == ["Zig", "Go", "Rust"]

    def test_negative_total_is_zero(self):
        assert EvidenceAggregator(-3).total_repositories == 0

    def test_confidence_matches_aggregate(self, scenario_c_signals):
        aggregator = EvidenceAggregator(10)
        for full_name, signals in scenario_c_signals:
            aggregator.add_repository(full_name, signals)
        [aggregate] = aggregator.aggregates()
        assert evidence_confidence(aggregate, 10) == pytest.approx(aggregator.results()[0].confidence)
