"""Tests for the category inference engine."""

import pytest

from services.category_inference import (
    TIE_BREAK_ORDER,
    CategoryInferenceEngine,
    LRUInferenceCache,
    NullInferenceCache,
    UnboundedInferenceCache,
    WeightedKeyword,
    build_inference_cache,
    confidence_from_scores,
    configure_inference_cache,
    explain_language_category,
    get_inference_engine,
    get_language_alias_map,
    get_language_category_hints,
    infer_language_category,
    pick_winner,
    supported_languages,
)
from services.skill_taxonomy import (
    AI_ML,
    BACKEND,
    CATEGORIES,
    DATABASE,
    DEVOPS,
    FRONTEND,
    INFRASTRUCTURE,
)


def _scores(**values: float) -> dict:
    table = {category: 0.0 for category in CATEGORIES}
    for category in CATEGORIES:
        key = category.name.lower()
        if key in values:
            table[category] = values[key]
    return table


class TestInferCategory:
    """Test suite for infer_language_category."""

    def test_known_frontend_language(self):
        result = infer_language_category("TypeScript")
        assert result.category == FRONTEND
        assert result.normalized_language == "TypeScript"
        assert result.confidence == pytest.approx(0.7231, abs=1e-3)

    def test_infrastructure_language(self):
        assert infer_language_category("Kubernetes").category == INFRASTRUCTURE

    def test_alias_resolves_to_profile(self):
        assert infer_language_category("k8s").normalized_language == "Kubernetes"
        assert infer_language_category("golang").normalized_language == "Go"

    def test_empty_falls_back_to_backend(self):
        result = infer_language_category("")
        assert result.category == BACKEND
        # Default path: full dominance and margin scaled by 0.82
        assert result.confidence == pytest.approx(0.82)
        assert any("fallback" in reason for reason in result.winner.reasons)

    def test_none_is_accepted(self):
        assert infer_language_category(None).category == BACKEND

    @pytest.mark.parametrize(
        "language",
        [
            "",
            " ",
            "!!!",
            "---",
            "x" * 5000,
            "Ünïcödé",
            "react native + graphql api",
            "Jupyter Notebook",
            "ForkedRepository",
            "C#",
            "\n\t",
        ],
    )
    def test_any_string_yields_valid_result(self, language):
        result = infer_language_category(language)
        assert result.category in CATEGORIES
        assert 0.2 <= result.confidence <= 0.99
        assert len(result.breakdown) == len(CATEGORIES)

    def test_breakdown_sorted_descending(self):
        scores = [row.score for row in infer_language_category("Python").breakdown]
        assert scores == sorted(scores, reverse=True)

    def test_profile_reason_recorded(self):
        winner = infer_language_category("TypeScript").winner
        assert winner.reasons[0] == "profile(TypeScript) +0.860"
        assert len(winner.reasons) <= 6

    def test_memoized_by_normalized_name(self):
        engine = CategoryInferenceEngine()
        first = engine.infer("TypeScript")
        assert engine.infer("typescript") is not first
        assert engine.infer("TypeScript") is first
        assert engine.infer("Type_Script") is first
        assert len(engine.cache) == 2

    def test_custom_keyword_table(self):
        engine = CategoryInferenceEngine(
            keywords=(WeightedKeyword("zzz", DATABASE, 0.9, "test marker"),),
            regex_rules=(),
        )
        result = engine.infer("zzz")
        assert result.category == DATABASE
        assert result.confidence == pytest.approx(0.99)
        assert result.winner.reasons == ("keyword(zzz:test marker) +0.900",)

    def test_tied_breakdown_follows_tie_break_order(self):
        engine = CategoryInferenceEngine(
            keywords=(
                WeightedKeyword("zzfront", FRONTEND, 0.5, "front marker"),
                WeightedKeyword("zzback", BACKEND, 0.5, "back marker"),
            ),
            regex_rules=(),
        )
        result = engine.infer("zzfront zzback")

        assert result.winner.score == result.runner_up.score
        assert result.category == result.winner.category == BACKEND
        assert result.runner_up.category == FRONTEND
        assert engine.explain("zzfront zzback")[1].startswith("winner=backend:")


class TestConfidenceFromScores:
    """Test suite for the confidence calibration."""

    def test_dominance_and_margin(self):
        scores = _scores(frontend=0.6, backend=0.2)
        # 0.32 + 0.38 * 0.75 + 0.30 * (0.4 / 0.6)
        assert confidence_from_scores(scores, FRONTEND) == pytest.approx(0.805)

    def test_weak_backend_is_scaled_down(self):
        scores = _scores(backend=0.3, frontend=0.1)
        assert confidence_from_scores(scores, BACKEND) == pytest.approx(0.805 * 0.82)

    def test_strong_backend_is_not_scaled(self):
        scores = _scores(backend=0.6, frontend=0.2)
        assert confidence_from_scores(scores, BACKEND) == pytest.approx(0.805)

    def test_all_zero_is_minimum(self):
        assert confidence_from_scores(_scores(), BACKEND) == 0.2

    def test_clamped_to_max(self):
        assert confidence_from_scores(_scores(devops=1.0), DEVOPS) == 0.99


class TestPickWinner:
    def test_argmax(self):
        assert pick_winner(_scores(ai_ml=0.4, frontend=0.3)) == AI_ML

    def test_tie_break_order(self):
        assert TIE_BREAK_ORDER[0] == BACKEND
        assert pick_winner(_scores(frontend=0.5, database=0.5)) == FRONTEND
        assert pick_winner(_scores(backend=0.5, frontend=0.5)) == BACKEND
        assert pick_winner(_scores(infrastructure=0.5, devops=0.5)) == INFRASTRUCTURE

    def test_all_zero_is_backend(self):
        assert pick_winner(_scores()) == BACKEND


class TestInferenceCaches:
    """Test suite for the pluggable memoization strategies."""

    def test_lru_evicts_least_recently_used(self):
        engine = CategoryInferenceEngine(cache=LRUInferenceCache(maxsize=2))
        go = engine.infer("Go")
        engine.infer("Rust")
        engine.infer("Go")
        engine.infer("Python")
        assert len(engine.cache) == 2
        assert engine.cache.get("go") is go
        assert engine.cache.get("rust") is None

    def test_lru_requires_positive_size(self):
        with pytest.raises(ValueError):
            LRUInferenceCache(maxsize=0)

    def test_null_cache_recomputes(self):
        engine = CategoryInferenceEngine(cache=NullInferenceCache())
        first = engine.infer("Go")
        second = engine.infer("Go")
        assert first == second
        assert first is not second
        assert len(engine.cache) == 0

    def test_clear(self):
        cache = UnboundedInferenceCache()
        engine = CategoryInferenceEngine(cache=cache)
        engine.infer("Go")
        cache.clear()
        assert len(cache) == 0

    @pytest.mark.parametrize(
        "size,expected",
        [(0, UnboundedInferenceCache), (16, LRUInferenceCache), (-1, NullInferenceCache)],
    )
    def test_build_inference_cache(self, size, expected):
        assert isinstance(build_inference_cache(size), expected)

    def test_configure_shared_engine(self):
        engine = get_inference_engine()
        original = engine.cache
        replacement = LRUInferenceCache(maxsize=8)
        try:
            configure_inference_cache(replacement)
            assert engine.cache is replacement
            infer_language_category("Go")
            assert len(replacement) == 1
        finally:
            configure_inference_cache(original)


class TestModuleHelpers:
    def test_explain(self):
        lines = explain_language_category("TypeScript")
        assert lines[0] == "language=TypeScript"
        assert lines[1].startswith("winner=frontend:")
        assert lines[3].startswith("confidence=")

    def test_category_hints(self):
        hints = get_language_category_hints()
        assert hints["TypeScript"] == FRONTEND
        assert hints["Kubernetes"] == INFRASTRUCTURE

    def test_alias_map(self):
        assert get_language_alias_map()["k8s"] == "Kubernetes"

    def test_supported_languages(self):
        assert "TypeScript" in supported_languages()
