"""Tests for the repository evidence collector."""

import math

import pytest
from pydantic import ValidationError

from services.evidence_collector import (
    SKILL_SOURCES,
    SOURCE_RELIABILITY,
    EvidenceCollector,
    EvidencePolicy,
    EvidenceSource,
    RepositoryEvidenceInput,
    blend_reliability,
    collect_repository_evidence,
    dedupe_signals,
    language_entropy,
    rank_signals,
)
from services.skill_taxonomy import BACKEND, FRONTEND, INFRASTRUCTURE


def _languages(signals, *, context=False):
    return {s.language for s in signals if s.is_context == context}


def _sources(signals, language):
    return {s.source for s in signals if s.language == language}


class TestScenarios:
    """End-to-end collector behaviour on representative repositories."""

    def test_typescript_nextjs_dashboard(self, scenario_a_repository):
        """Declared TypeScript with a Next.js topic and description."""
        signals = collect_repository_evidence(scenario_a_repository)
        typescript = [s for s in signals if s.language == "TypeScript"]

        assert {
            EvidenceSource.PRIMARY_LANGUAGE,
            EvidenceSource.LANGUAGE_BYTES,
            EvidenceSource.TOPICS,
            EvidenceSource.ECOSYSTEM_KEYWORDS,
        } <= _sources(signals, "TypeScript")
        assert any(s.source == EvidenceSource.TOPICS and s.token == "nextjs" for s in typescript)
        assert any(
            s.source == EvidenceSource.REPO_DESCRIPTION and s.token == "next" for s in typescript
        )
        assert all(s.category == FRONTEND for s in typescript)
        assert _languages(signals, context=True) == set()

    def test_fork_and_archive_only(self, make_repository):
        """A bare archived fork yields only context tags."""
        repo = make_repository("v3", is_fork=True, is_archived=True)
        signals = collect_repository_evidence(repo)

        assert {s.language for s in signals} == {"ForkedRepository", "InactiveRepository"}
        assert all(s.is_context for s in signals)
        assert all(s.source == EvidenceSource.REPO_FLAGS for s in signals)
        assert all(s.subject is None and s.category == BACKEND for s in signals)

    def test_disabled_counts_as_inactive(self, make_repository):
        signals = collect_repository_evidence(make_repository("old", is_disabled=True))
        assert [s.language for s in signals] == ["InactiveRepository"]

    def test_hard_noise_name_contributes_nothing(self, make_repository):
        signals = collect_repository_evidence(make_repository("test-repo"))
        assert _languages(signals) == set()

    def test_template_name_is_flagged(self, make_repository):
        repo = make_repository(
            "foo-template-starter",
            primary_language="TypeScript",
            language_bytes={"TypeScript": 1000},
        )
        signals = collect_repository_evidence(repo)
        template = [s for s in signals if s.language == "TemplateRepository"]

        assert len(template) == 1
        assert template[0].source == EvidenceSource.NEGATIVE_CONTEXT
        assert template[0].score == pytest.approx(0.42)
        assert template[0].subject == "TypeScript"
        assert _languages(signals) == {"TypeScript"}

    def test_alias_topics_agree(self, make_repository):
        short = collect_repository_evidence(make_repository("infra", topics=["k8s"]))
        full = collect_repository_evidence(make_repository("infra", topics=["kubernetes"]))

        assert _languages(short) == _languages(full) == {"Kubernetes"}
        assert {s.category for s in short + full} == {INFRASTRUCTURE}
        assert {(s.source, s.token) for s in short} == {
            (EvidenceSource.TOPICS, "k8s"),
            (EvidenceSource.TOPIC_SYNONYMS, "kubernetes"),
        }

    def test_idempotent(self, scenario_a_repository):
        first = collect_repository_evidence(scenario_a_repository)
        second = collect_repository_evidence(scenario_a_repository)
        assert first == second


class TestStructuredSources:
    """Test suite for primary-language and language-bytes signals."""

    def test_primary_language_score_and_confidence(self, scenario_a_repository):
        signals = collect_repository_evidence(scenario_a_repository)
        primary = next(s for s in signals if s.source == EvidenceSource.PRIMARY_LANGUAGE)

        scale = math.log2(1 + 60000) / 22
        entropy = language_entropy({"TypeScript": 50000, "JavaScript": 10000})
        raw_confidence = 0.97 * (1 - entropy * 0.22)

        assert primary.language == "TypeScript"
        assert primary.token == "type-script"
        assert primary.score == pytest.approx(scale * 0.72 + 0.24)
        assert primary.confidence == pytest.approx((raw_confidence + 0.98) / 2)

    def test_primary_language_scale_floor(self, make_repository):
        signals = collect_repository_evidence(make_repository("x", primary_language="Go"))
        primary = next(s for s in signals if s.source == EvidenceSource.PRIMARY_LANGUAGE)
        assert primary.score == pytest.approx(0.3 * 0.72 + 0.24)
        assert primary.confidence == pytest.approx((0.97 + 0.98) / 2)

    def test_language_bytes_share_detail(self, scenario_a_repository):
        signals = collect_repository_evidence(scenario_a_repository)
        details = [s.detail for s in signals if s.source == EvidenceSource.LANGUAGE_BYTES]
        assert "Language bytes observed for TypeScript (50000 bytes, 83.3% share)" in details
        assert any(d.startswith("Language bytes observed for JavaScript") for d in details)

    def test_language_bytes_merge_aliases(self, make_repository):
        repo = make_repository("x", language_bytes={"typescript": 100, "TypeScript": 300})
        byte_signals = [
            s for s in collect_repository_evidence(repo)
            if s.source == EvidenceSource.LANGUAGE_BYTES
        ]
        assert len(byte_signals) == 1
        assert "400 bytes, 100.0% share" in byte_signals[0].detail

    def test_language_bytes_capped(self, make_repository):
        repo = make_repository(
            "poly", language_bytes={f"Lang{i}": 1000 + i for i in range(20)}
        )
        signals = collect_repository_evidence(repo)
        assert len([s for s in signals if s.source == EvidenceSource.LANGUAGE_BYTES]) == 16
        assert signals[0].language == "Lang19"

    def test_zero_bytes_ignored(self, make_repository):
        repo = make_repository("x", language_bytes={"Go": 0, "Rust": 500})
        assert _languages(collect_repository_evidence(repo)) == {"Rust"}

    def test_subject_falls_back_to_largest_language(self, make_repository):
        repo = make_repository(
            "foo-template-starter", language_bytes={"Go": 10, "Rust": 50}
        )
        template = next(
            s for s in collect_repository_evidence(repo) if s.language == "TemplateRepository"
        )
        assert template.subject == "Rust"


class TestOptionalSources:
    """Test suite for policy-gated signal families."""

    def test_topics_disabled(self, scenario_a_repository):
        policy = EvidencePolicy(include_topic_signals=False)
        sources = {s.source for s in collect_repository_evidence(scenario_a_repository, policy)}
        assert EvidenceSource.TOPICS not in sources
        assert EvidenceSource.TOPIC_SYNONYMS not in sources

    def test_text_disabled(self, scenario_a_repository):
        policy = EvidencePolicy(include_text_signals=False)
        sources = {s.source for s in collect_repository_evidence(scenario_a_repository, policy)}
        assert sources.isdisjoint(
            {
                EvidenceSource.REPO_NAME,
                EvidenceSource.REPO_DESCRIPTION,
                EvidenceSource.LANGUAGE_ALIAS,
                EvidenceSource.ECOSYSTEM_KEYWORDS,
            }
        )

    def test_regex_and_alias_disabled(self, scenario_a_repository):
        policy = EvidencePolicy(include_regex_signals=False, include_alias_signals=False)
        sources = {s.source for s in collect_repository_evidence(scenario_a_repository, policy)}
        assert EvidenceSource.ECOSYSTEM_KEYWORDS not in sources
        assert EvidenceSource.LANGUAGE_ALIAS not in sources
        assert EvidenceSource.REPO_DESCRIPTION in sources

    def test_negative_context_disabled(self, make_repository):
        policy = EvidencePolicy(include_negative_signals=False)
        signals = collect_repository_evidence(make_repository("foo-template-starter"), policy)
        assert "TemplateRepository" not in {s.language for s in signals}

    def test_license_off_by_default(self, make_repository):
        repo = make_repository("widget", license="MIT")
        assert collect_repository_evidence(repo) == []

    def test_license_enabled(self, make_repository):
        repo = make_repository("widget", license="MIT")
        signals = collect_repository_evidence(repo, EvidencePolicy(include_license_signals=True))
        assert [(s.language, s.source, s.token) for s in signals] == [
            ("TypeScript", EvidenceSource.LICENSE, "mit")
        ]
        assert signals[0].score == pytest.approx(0.08)
        assert signals[0].confidence == pytest.approx((0.30 + 0.35) / 2)

    def test_pages_metadata(self, make_repository):
        signals = collect_repository_evidence(make_repository("widget", has_pages=True))
        assert [(s.language, s.token, s.category) for s in signals] == [
            ("HTML", "has-pages", FRONTEND)
        ]

    def test_wiki_below_default_floor(self, make_repository):
        repo = make_repository("widget", has_wiki=True)
        assert collect_repository_evidence(repo) == []
        relaxed = collect_repository_evidence(repo, EvidencePolicy(minimum_signal_score=0))
        assert [s.language for s in relaxed] == ["Markdown"]


class TestInputCoercion:
    """Malformed repository fields degrade to no evidence."""

    def test_malformed_fields(self):
        repo = RepositoryEvidenceInput.model_validate(
            {
                "name": 42,
                "description": 7,
                "primary_language": "",
                "topics": "rust",
                "language_bytes": {"Go": "lots", "Rust": -5, "C": float("nan"), "Zig": 1200, 3: 9},
                "is_fork": "yes",
            }
        )
        assert repo.name == ""
        assert repo.description is None
        assert repo.primary_language is None
        assert repo.topics == ()
        assert repo.language_bytes == {"Zig": 1200.0}
        assert repo.is_fork is False
        assert _languages(collect_repository_evidence(repo)) == {"Zig"}

    def test_camel_case_mapping(self):
        signals = collect_repository_evidence(
            {"fullName": "octo/svc", "primaryLanguage": "Go", "languageBytes": {"Go": 100}}
        )
        assert _languages(signals) == {"Go"}

    def test_empty_mapping(self):
        assert collect_repository_evidence({}) == []

    def test_topics_filtered(self):
        repo = RepositoryEvidenceInput(topics=["go", "", None, "  rust "])
        assert repo.topics == ("go", "rust")

    def test_repository_name_fallback(self):
        assert RepositoryEvidenceInput(full_name="octo/go-tools").repository_name == "go-tools"
        assert RepositoryEvidenceInput(name="x", full_name="octo/y").repository_name == "x"

    def test_from_github(self):
        payload = {
            "name": "svc",
            "full_name": "octo/svc",
            "owner": {"login": "octo"},
            "description": "Payments service",
            "language": "Go",
            "topics": ["golang"],
            "license": {"key": "mit", "spdx_id": "MIT"},
            "fork": False,
            "archived": True,
            "disabled": False,
            "has_wiki": True,
            "has_pages": False,
            "stargazers_count": 3,
        }
        repo = RepositoryEvidenceInput.from_github(payload, {"Go": 1000})

        assert repo.owner == "octo"
        assert repo.full_name == "octo/svc"
        assert repo.primary_language == "Go"
        assert repo.language_bytes == {"Go": 1000.0}
        assert repo.topics == ("golang",)
        assert repo.license == "MIT"
        assert repo.is_archived is True
        assert repo.has_wiki is True

    def test_from_github_license_variants(self):
        no_assertion = {"license": {"key": "other", "spdx_id": "NOASSERTION"}}
        assert RepositoryEvidenceInput.from_github(no_assertion).license == "other"
        assert RepositoryEvidenceInput.from_github({"license": None}).license is None
        assert RepositoryEvidenceInput.from_github({}).language_bytes == {}


class TestEvidencePolicy:
    """Out-of-range policy values are clamped, not rejected."""

    def test_defaults(self):
        policy = EvidencePolicy()
        assert policy.include_text_signals is True
        assert policy.include_license_signals is False
        assert policy.minimum_signal_score == 0.06
        assert policy.max_signals_per_repo == 40

    @pytest.mark.parametrize(
        "field,value,expected",
        [
            ("max_signals_per_repo", 1000, 200),
            ("max_signals_per_repo", 0, 1),
            ("max_topic_signals", -3, 1),
            ("token_min_length", 1, 2),
            ("token_min_length", 99, 16),
            ("topic_signal_weight", 5, 2.2),
            ("text_signal_weight", 0, 0.2),
            ("minimum_signal_score", 1.5, 1.0),
            ("minimum_signal_confidence", -1, 0.0),
            ("regex_signal_weight", "heavy", 1.0),
            ("max_text_signals", float("inf"), 80),
        ],
    )
    def test_clamping(self, field, value, expected):
        assert getattr(EvidencePolicy(**{field: value}), field) == pytest.approx(expected)

    def test_camel_case_keys(self):
        assert EvidencePolicy(**{"maxSignalsPerRepo": 5}).max_signals_per_repo == 5

    def test_frozen(self):
        policy = EvidencePolicy()
        with pytest.raises(ValidationError):
            policy.max_signals_per_repo = 3

    def test_max_signals_truncates(self, scenario_a_repository):
        signals = collect_repository_evidence(
            scenario_a_repository, EvidencePolicy(max_signals_per_repo=1)
        )
        assert len(signals) == 1
        assert (signals[0].language, signals[0].source) == (
            "TypeScript",
            EvidenceSource.LANGUAGE_BYTES,
        )

    @pytest.mark.parametrize("max_signals", [40, 5])
    def test_context_signals_survive_truncation(self, make_repository, max_signals):
        languages = [
            "TypeScript", "JavaScript", "Python", "Go", "Rust", "Java", "Kotlin", "Swift",
            "Ruby", "PHP", "C#", "C++", "Shell", "HTML", "CSS", "Dockerfile",
        ]
        repo = make_repository(
            "foo-template-starter",
            primary_language="TypeScript",
            topics=[
                "react", "nextjs", "nodejs", "docker", "kubernetes", "postgresql", "redis",
                "graphql", "tailwindcss", "vite", "django", "fastapi", "golang", "rust",
                "spring", "flutter", "terraform", "aws", "mongodb", "vue",
            ],
            language_bytes={name: 16000 - i * 500 for i, name in enumerate(languages)},
        )
        signals = collect_repository_evidence(
            repo, EvidencePolicy(max_signals_per_repo=max_signals)
        )
        skill_signals = [s for s in signals if not s.is_context]

        assert len(skill_signals) == max_signals
        assert signals[-1].language == "TemplateRepository"
        assert signals[-1].subject == "TypeScript"

    def test_confidence_floor(self, scenario_a_repository):
        policy = EvidencePolicy(minimum_signal_confidence=0.99)
        assert collect_repository_evidence(scenario_a_repository, policy) == []

    def test_collector_keeps_policy(self):
        policy = EvidencePolicy(max_topic_signals=3)
        assert EvidenceCollector(policy).policy is policy


class TestPipelineHelpers:
    """Test suite for the pure dedupe/rank helpers."""

    def test_language_entropy(self):
        assert language_entropy({}) == 0.0
        assert language_entropy({"Go": 10}) == 0.0
        assert language_entropy({"Go": 10, "Rust": 0}) == 0.0
        assert language_entropy({"Go": 5, "Rust": 5}) == pytest.approx(1.0)
        expected = -(0.75 * math.log2(0.75) + 0.25 * math.log2(0.25))
        assert language_entropy({"Go": 3, "Rust": 1}) == pytest.approx(expected)

    def test_dedupe_keeps_strongest(self, make_signal):
        weak = make_signal("Go", EvidenceSource.TOPICS, 0.2, 0.5, token="go")
        strong = make_signal("Go", EvidenceSource.TOPICS, 0.4, 0.5, token="go")
        other = make_signal("Go", EvidenceSource.TOPICS, 0.1, 0.5, token="golang")
        assert dedupe_signals([weak, other, strong]) == [strong, other]

    def test_dedupe_tie_keeps_first(self, make_signal):
        first = make_signal("Go", EvidenceSource.TOPICS, 0.2, 0.5, detail="first")
        second = make_signal("Go", EvidenceSource.TOPICS, 0.2, 0.5, detail="second")
        assert dedupe_signals([first, second]) == [first]

    def test_blend_reliability(self, make_signal):
        signal = make_signal("Go", EvidenceSource.PRIMARY_LANGUAGE, 0.5, 0.8)
        blended = blend_reliability(signal)
        assert blended.confidence == pytest.approx(0.89)
        assert blended.score == signal.score

    def test_rank_order_and_floor(self, make_signal):
        low = make_signal("Go", EvidenceSource.REPO_NAME, 0.05, 0.9)
        mid = make_signal("Go", EvidenceSource.TOPICS, 0.3, 0.8)
        high = make_signal("Go", EvidenceSource.LANGUAGE_BYTES, 0.9, 0.9)
        flag = make_signal("ForkedRepository", EvidenceSource.REPO_FLAGS, 0.04, 0.2)

        ranked = rank_signals([low, mid, flag, high], EvidencePolicy())
        assert [s.source for s in ranked] == [
            EvidenceSource.LANGUAGE_BYTES,
            EvidenceSource.TOPICS,
            EvidenceSource.REPO_FLAGS,
        ]

    def test_source_tables(self):
        assert set(SOURCE_RELIABILITY) == set(EvidenceSource)
        assert len(SKILL_SOURCES) == 10
        assert EvidenceSource.REPO_FLAGS not in SKILL_SOURCES
