"""Tests for the skill profile builder."""

import pytest
from prometheus_client import REGISTRY
from pydantic import ValidationError as PydanticValidationError

from app.config import Settings
from app.exceptions import ValidationError
from services.category_inference import (
    LRUInferenceCache,
    configure_inference_cache,
    get_inference_engine,
)
from services.evidence_collector import EvidencePolicy
from services.skill_profile import (
    SkillProfileBuilder,
    SkillRecord,
    builder_from_settings,
    policy_from_settings,
)
from services.skill_taxonomy import BACKEND, FRONTEND


@pytest.fixture
def repositories(make_repository, scenario_a_repository):
    return [
        scenario_a_repository,
        make_repository("v3", is_fork=True, is_archived=True),
        make_repository("svc", primary_language="Go", language_bytes={"Go": 5000}),
    ]


class TestSkillProfileBuilder:
    """Test suite for SkillProfileBuilder.build."""

    def setup_method(self):
        self.builder = SkillProfileBuilder(record_metrics=False)

    def test_build(self, repositories):
        profile = self.builder.build(repositories)

        assert [s.name for s in profile.skills] == ["TypeScript", "Go", "JavaScript"]
        assert [s.confidence for s in profile.skills] == [66, 55, 52]
        assert [s.score for s in profile.skills] == [66, 55, 52]
        assert profile.total_repositories == 3
        assert profile.repositories_with_evidence == 2
        assert profile.signal_count == 17
        assert profile.signals_by_source["repo-flags"] == 2
        assert list(profile.signals_by_source) == sorted(profile.signals_by_source)

    def test_skill_record_fields(self, repositories):
        typescript = self.builder.build(repositories).skills[0]
        assert typescript.category == FRONTEND
        assert typescript.repository_count == 1
        assert typescript.matched_token_count == 5
        assert typescript.evidence_penalty == 0.0
        assert typescript.sources[0] == "primary-language"
        assert len(typescript.highlights) == 4

    def test_total_repositories_override(self, repositories):
        profile = self.builder.build(repositories, total_repositories=30)
        assert profile.total_repositories == 30
        # Lower coverage lowers every confidence
        baseline = {s.name: s.confidence for s in self.builder.build(repositories).skills}
        for skill in profile.skills:
            assert skill.confidence <= baseline[skill.name]

    def test_limit(self, repositories):
        profile = self.builder.build(repositories, limit=1)
        assert [s.name for s in profile.skills] == ["TypeScript"]
        assert self.builder.build(repositories, limit=0).skills == []

    def test_min_confidence(self, repositories):
        profile = self.builder.build(repositories, min_confidence=0.6)
        assert [s.name for s in profile.skills] == ["TypeScript"]

    @pytest.mark.parametrize("kwargs", [{"limit": -1}, {"min_confidence": 1.5}])
    def test_invalid_arguments(self, repositories, kwargs):
        with pytest.raises(ValidationError) as exc_info:
            self.builder.build(repositories, **kwargs)
        assert exc_info.value.code == "VALIDATION_ERROR"

    def test_raw_mappings(self):
        profile = self.builder.build(
            [{"fullName": "octocat/svc", "primaryLanguage": "Go", "languageBytes": {"Go": 5000}}]
        )
        assert [(s.name, s.category) for s in profile.skills] == [("Go", BACKEND)]

    def test_empty(self):
        profile = self.builder.build([])
        assert profile.skills == []
        assert profile.total_repositories == 0
        assert profile.signal_count == 0

    def test_context_only_profile(self, make_repository):
        profile = self.builder.build([make_repository("v3", is_fork=True)])
        assert profile.skills == []
        assert profile.repositories_with_evidence == 0
        assert profile.signals_by_source == {"repo-flags": 1}

    def test_policy_is_used(self, scenario_a_repository):
        builder = SkillProfileBuilder(
            EvidencePolicy(include_text_signals=False, include_topic_signals=False),
            record_metrics=False,
        )
        typescript = builder.build([scenario_a_repository]).skills[0]
        assert typescript.sources == ["primary-language", "language-bytes"]

    def test_metrics_recorded(self, repositories):
        def processed():
            return REGISTRY.get_sample_value("skills_repositories_processed_total") or 0.0

        before = processed()
        SkillProfileBuilder().build(repositories)
        assert processed() == before + 3

        SkillProfileBuilder(record_metrics=False).build(repositories)
        assert processed() == before + 3


class TestSkillRecord:
    def test_percent_bounds(self):
        with pytest.raises(PydanticValidationError):
            SkillRecord(name="Go", category=BACKEND, confidence=101, score=50)

    def test_serializes_category_value(self):
        record = SkillRecord(name="Go", category=BACKEND, confidence=50, score=40)
        assert record.model_dump(mode="json")["category"] == "backend"


class TestFromSettings:
    """Test suite for settings-driven construction."""

    def test_policy_from_settings(self, test_settings):
        policy = policy_from_settings(test_settings)
        assert policy == EvidencePolicy()

    def test_policy_overrides(self):
        settings = Settings(
            _env_file=None,
            evidence_include_license=True,
            evidence_include_topics=False,
            evidence_min_signal_score=0.1,
            evidence_max_signals_per_repo=12,
        )
        policy = policy_from_settings(settings)
        assert policy.include_license_signals is True
        assert policy.include_topic_signals is False
        assert policy.minimum_signal_score == 0.1
        assert policy.max_signals_per_repo == 12

    def test_builder_installs_inference_cache(self):
        engine = get_inference_engine()
        original = engine.cache
        settings = Settings(
            _env_file=None,
            inference_cache_size=16,
            evidence_max_highlights=2,
            metrics_enabled=False,
        )
        try:
            builder = builder_from_settings(settings)
            assert isinstance(engine.cache, LRUInferenceCache)
            assert builder.policy == EvidencePolicy()
            skill = builder.build(
                [{"name": "svc", "primary_language": "Go", "topics": ["golang", "grpc"]}]
            ).skills[0]
            assert len(skill.highlights) <= 2
        finally:
            configure_inference_cache(original)
