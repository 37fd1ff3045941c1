"""Tests for settings, error format and logging setup."""

import logging

import pytest
import structlog
from pydantic import ValidationError as PydanticValidationError

from app.config import Environment, Settings, get_settings
from app.exceptions import (
    KnowledgeBaseError,
    SkillScopeError,
    TaxonomyDefinitionError,
    ValidationError,
)
from app.logging_config import (
    _filter_pii,
    _filter_sensitive_data,
    _round_scores,
    get_logger,
    setup_logging,
)


class TestSettings:
    def test_defaults(self, test_settings):
        assert test_settings.environment == Environment.TESTING
        assert test_settings.inference_cache_size == 0
        assert test_settings.evidence_min_signal_score == 0.06
        assert test_settings.is_testing
        assert not test_settings.is_production

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("SKILLS_EVIDENCE_MAX_SIGNALS_PER_REPO", "12")
        monkeypatch.setenv("SKILLS_ENVIRONMENT", "PRODUCTION")
        settings = Settings(_env_file=None)
        assert settings.evidence_max_signals_per_repo == 12
        assert settings.is_production

    def test_log_level_normalized(self):
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_only_engine_fields(self):
        assert {"app_name", "app_version", "debug"}.isdisjoint(Settings.model_fields)

    def test_cached(self):
        assert get_settings() is get_settings()


class TestExceptions:
    """All errors share the {"error": {...}} format."""

    def test_to_dict(self):
        error = SkillScopeError("SOME_CODE", "Something broke", {"field": "x"})
        assert error.to_dict() == {
            "error": {"code": "SOME_CODE", "message": "Something broke", "details": {"field": "x"}}
        }

    def test_details_omitted_when_empty(self):
        assert "details" not in ValidationError("bad input").to_dict()["error"]

    def test_knowledge_base_error_names_table(self):
        error = KnowledgeBaseError("aliases", "duplicate alias", {"alias": "ts"})
        assert error.code == "KNOWLEDGE_BASE_ERROR"
        assert error.details == {"table": "aliases", "alias": "ts"}
        assert str(error) == "duplicate alias"

    def test_hierarchy(self):
        assert issubclass(TaxonomyDefinitionError, SkillScopeError)
        assert issubclass(KnowledgeBaseError, SkillScopeError)


class TestLogging:
    """Test suite for the structlog configuration."""

    def test_sensitive_keys_redacted(self):
        event = _filter_sensitive_data(None, "info", {"api_key": "abc", "event": "x"})
        assert event == {"api_key": "[REDACTED]", "event": "x"}

    def test_evidence_tokens_kept(self):
        event = _filter_sensitive_data(None, "info", {"token": "nextjs"})
        assert event == {"token": "nextjs"}

    def test_repository_owner_redacted(self):
        event = _filter_pii(
            None, "info", {"owner": "octocat", "full_name": "octocat/x", "skills": 3}
        )
        assert event == {"owner": "[PII_REDACTED]", "full_name": "[PII_REDACTED]", "skills": 3}

    def test_scores_rounded(self):
        event = _round_scores(None, "info", {"confidence": 0.461917123, "skills": 3})
        assert event == {"confidence": 0.4619, "skills": 3}

    def test_setup_logging_installs_handler(self, test_settings):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        try:
            setup_logging(test_settings)
            assert len(root.handlers) == 1
            assert root.level == logging.INFO
            assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
            get_logger(__name__).info("logging_configured", skills=1)
        finally:
            root.handlers[:] = handlers
            root.setLevel(level)
            structlog.reset_defaults()
