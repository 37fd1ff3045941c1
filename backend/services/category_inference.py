"""Category inference engine.

Maps any language or technology name to one of the six skill categories plus
a confidence. Scores start from the matching taxonomy profile's weights and are
then accumulated from a generic weighted-keyword table and a set of regex rules
run over the name together with the profile's aliases, ecosystems and tags.

Confidence = 0.32 + 0.38 * dominance + 0.30 * margin, clamped to [0.2, 0.99]
(dominance = winner / total, margin = (winner - runner_up) / winner). A
backend win with a backend score under 0.5 is scaled by 0.82 so default-path
answers never look certain.

Inference is a pure function of the fixed taxonomy; results are memoized by
normalized name through an injectable cache.
"""

from __future__ import annotations

import re
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass

from app.logging_config import get_logger
from services.skill_taxonomy import (
    AI_ML,
    BACKEND,
    CATEGORIES,
    DATABASE,
    DEVOPS,
    FRONTEND,
    INFRASTRUCTURE,
    LanguageTaxonomy,
    SkillCategory,
    get_taxonomy,
    normalize_token,
    split_tokens,
)

logger = get_logger(__name__)

# Ties resolve toward the first category in this order
TIE_BREAK_ORDER: tuple[SkillCategory, ...] = (
    BACKEND,
    FRONTEND,
    INFRASTRUCTURE,
    DATABASE,
    AI_ML,
    DEVOPS,
)

FALLBACK_CATEGORY = BACKEND
FALLBACK_WEIGHT = 0.22
DEFAULT_PATH_THRESHOLD = 0.5
DEFAULT_PATH_SCALE = 0.82
MIN_CONFIDENCE = 0.2
MAX_CONFIDENCE = 0.99
MAX_REASONS = 6


@dataclass(frozen=True)
class WeightedKeyword:
    """A domain term pushing a name toward one category."""

    token: str
    category: SkillCategory
    weight: float
    reason: str


@dataclass(frozen=True)
class RegexRule:
    """A multi-word or alternation pattern pushing a name toward one category."""

    pattern: re.Pattern[str]
    category: SkillCategory
    weight: float
    reason: str


def _rule(pattern: str, category: SkillCategory, weight: float, reason: str) -> RegexRule:
    return RegexRule(re.compile(pattern, re.IGNORECASE), category, weight, reason)


_WEIGHTED_KEYWORD_ROWS: tuple[tuple[str, SkillCategory, float, str], ...] = (
    ("frontend", FRONTEND, 0.56, "frontend marker"),
    ("web", FRONTEND, 0.24, "web surface marker"),
    ("ui", FRONTEND, 0.52, "ui marker"),
    ("ux", FRONTEND, 0.42, "ux marker"),
    ("dom", FRONTEND, 0.5, "dom marker"),
    ("component", FRONTEND, 0.48, "component marker"),
    ("tailwind", FRONTEND, 0.44, "tailwind marker"),
    ("css", FRONTEND, 0.52, "css marker"),
    ("scss", FRONTEND, 0.48, "scss marker"),
    ("sass", FRONTEND, 0.44, "sass marker"),
    ("html", FRONTEND, 0.56, "html marker"),
    ("react", FRONTEND, 0.56, "react marker"),
    ("nextjs", FRONTEND, 0.56, "nextjs marker"),
    ("next", FRONTEND, 0.34, "next marker"),
    ("vue", FRONTEND, 0.54, "vue marker"),
    ("nuxt", FRONTEND, 0.46, "nuxt marker"),
    ("svelte", FRONTEND, 0.5, "svelte marker"),
    ("astro", FRONTEND, 0.46, "astro marker"),
    ("angular", FRONTEND, 0.5, "angular marker"),
    ("vite", FRONTEND, 0.38, "vite marker"),
    ("webpack", FRONTEND, 0.28, "webpack marker"),
    ("rollup", FRONTEND, 0.24, "rollup marker"),
    ("storybook", FRONTEND, 0.42, "storybook marker"),
    ("design-system", FRONTEND, 0.46, "design-system marker"),
    ("chakra", FRONTEND, 0.34, "chakra marker"),
    ("material", FRONTEND, 0.26, "material marker"),
    ("backend", BACKEND, 0.56, "backend marker"),
    ("api", BACKEND, 0.42, "api marker"),
    ("server", BACKEND, 0.46, "server marker"),
    ("service", BACKEND, 0.34, "service marker"),
    ("microservice", BACKEND, 0.52, "microservice marker"),
    ("http", BACKEND, 0.24, "http marker"),
    ("rest", BACKEND, 0.42, "rest marker"),
    ("graphql", BACKEND, 0.38, "graphql marker"),
    ("grpc", BACKEND, 0.42, "grpc marker"),
    ("auth", BACKEND, 0.26, "auth marker"),
    ("oauth", BACKEND, 0.32, "oauth marker"),
    ("jwt", BACKEND, 0.28, "jwt marker"),
    ("express", BACKEND, 0.42, "express marker"),
    ("nestjs", BACKEND, 0.44, "nestjs marker"),
    ("django", BACKEND, 0.44, "django marker"),
    ("flask", BACKEND, 0.38, "flask marker"),
    ("fastapi", BACKEND, 0.46, "fastapi marker"),
    ("spring", BACKEND, 0.44, "spring marker"),
    ("laravel", BACKEND, 0.42, "laravel marker"),
    ("symfony", BACKEND, 0.4, "symfony marker"),
    ("rails", BACKEND, 0.4, "rails marker"),
    ("phoenix", BACKEND, 0.4, "phoenix marker"),
    ("actix", BACKEND, 0.34, "actix marker"),
    ("axum", BACKEND, 0.34, "axum marker"),
    ("gin", BACKEND, 0.34, "gin marker"),
    ("fiber", BACKEND, 0.34, "fiber marker"),
    ("database", DATABASE, 0.58, "database marker"),
    ("db", DATABASE, 0.4, "db marker"),
    ("sql", DATABASE, 0.54, "sql marker"),
    ("postgres", DATABASE, 0.58, "postgres marker"),
    ("postgresql", DATABASE, 0.58, "postgresql marker"),
    ("mysql", DATABASE, 0.54, "mysql marker"),
    ("mariadb", DATABASE, 0.52, "mariadb marker"),
    ("sqlite", DATABASE, 0.52, "sqlite marker"),
    ("mongodb", DATABASE, 0.56, "mongodb marker"),
    ("mongo", DATABASE, 0.46, "mongo marker"),
    ("redis", DATABASE, 0.5, "redis marker"),
    ("cassandra", DATABASE, 0.5, "cassandra marker"),
    ("dynamodb", DATABASE, 0.46, "dynamodb marker"),
    ("clickhouse", DATABASE, 0.5, "clickhouse marker"),
    ("snowflake", DATABASE, 0.46, "snowflake marker"),
    ("bigquery", DATABASE, 0.46, "bigquery marker"),
    ("redshift", DATABASE, 0.44, "redshift marker"),
    ("prisma", DATABASE, 0.44, "prisma marker"),
    ("typeorm", DATABASE, 0.44, "typeorm marker"),
    ("sequelize", DATABASE, 0.42, "sequelize marker"),
    ("sqlalchemy", DATABASE, 0.42, "sqlalchemy marker"),
    ("dbt", DATABASE, 0.42, "dbt marker"),
    ("warehouse", DATABASE, 0.4, "warehouse marker"),
    ("vector", DATABASE, 0.34, "vector store marker"),
    ("milvus", DATABASE, 0.5, "milvus marker"),
    ("qdrant", DATABASE, 0.5, "qdrant marker"),
    ("pinecone", DATABASE, 0.46, "pinecone marker"),
    ("weaviate", DATABASE, 0.48, "weaviate marker"),
    ("infra", INFRASTRUCTURE, 0.54, "infra marker"),
    ("infrastructure", INFRASTRUCTURE, 0.56, "infrastructure marker"),
    ("iac", INFRASTRUCTURE, 0.52, "iac marker"),
    ("terraform", INFRASTRUCTURE, 0.62, "terraform marker"),
    ("pulumi", INFRASTRUCTURE, 0.6, "pulumi marker"),
    ("bicep", INFRASTRUCTURE, 0.58, "bicep marker"),
    ("ansible", INFRASTRUCTURE, 0.58, "ansible marker"),
    ("helm", INFRASTRUCTURE, 0.6, "helm marker"),
    ("kubernetes", INFRASTRUCTURE, 0.64, "kubernetes marker"),
    ("k8s", INFRASTRUCTURE, 0.62, "k8s marker"),
    ("nomad", INFRASTRUCTURE, 0.54, "nomad marker"),
    ("consul", INFRASTRUCTURE, 0.48, "consul marker"),
    ("vault", INFRASTRUCTURE, 0.48, "vault marker"),
    ("cloud", INFRASTRUCTURE, 0.46, "cloud marker"),
    ("aws", INFRASTRUCTURE, 0.54, "aws marker"),
    ("azure", INFRASTRUCTURE, 0.54, "azure marker"),
    ("gcp", INFRASTRUCTURE, 0.54, "gcp marker"),
    ("opentelemetry", INFRASTRUCTURE, 0.26, "otel infra marker"),
    ("mesh", INFRASTRUCTURE, 0.38, "mesh marker"),
    ("istio", INFRASTRUCTURE, 0.56, "istio marker"),
    ("envoy", INFRASTRUCTURE, 0.5, "envoy marker"),
    ("gateway", INFRASTRUCTURE, 0.34, "gateway marker"),
    ("devops", DEVOPS, 0.62, "devops marker"),
    ("ci", DEVOPS, 0.48, "ci marker"),
    ("cd", DEVOPS, 0.48, "cd marker"),
    ("pipeline", DEVOPS, 0.44, "pipeline marker"),
    ("workflow", DEVOPS, 0.44, "workflow marker"),
    ("github-actions", DEVOPS, 0.62, "gha marker"),
    ("githubactions", DEVOPS, 0.62, "gha marker"),
    ("gitlab-ci", DEVOPS, 0.62, "gitlab ci marker"),
    ("jenkins", DEVOPS, 0.58, "jenkins marker"),
    ("circleci", DEVOPS, 0.56, "circleci marker"),
    ("docker", DEVOPS, 0.58, "docker marker"),
    ("dockerfile", DEVOPS, 0.6, "dockerfile marker"),
    ("compose", DEVOPS, 0.5, "compose marker"),
    ("shell", DEVOPS, 0.52, "shell marker"),
    ("bash", DEVOPS, 0.52, "bash marker"),
    ("powershell", DEVOPS, 0.5, "powershell marker"),
    ("yaml", DEVOPS, 0.46, "yaml marker"),
    ("nix", DEVOPS, 0.46, "nix marker"),
    ("makefile", DEVOPS, 0.48, "makefile marker"),
    ("monitoring", DEVOPS, 0.38, "monitoring marker"),
    ("prometheus", DEVOPS, 0.5, "prometheus marker"),
    ("grafana", DEVOPS, 0.48, "grafana marker"),
    ("tracing", DEVOPS, 0.36, "tracing marker"),
    ("logging", DEVOPS, 0.34, "logging marker"),
    ("gitops", DEVOPS, 0.46, "gitops marker"),
    ("ai", AI_ML, 0.54, "ai marker"),
    ("ml", AI_ML, 0.54, "ml marker"),
    ("machine-learning", AI_ML, 0.58, "machine-learning marker"),
    ("machinelearning", AI_ML, 0.58, "machinelearning marker"),
    ("deep-learning", AI_ML, 0.58, "deep-learning marker"),
    ("deeplearning", AI_ML, 0.58, "deeplearning marker"),
    ("llm", AI_ML, 0.6, "llm marker"),
    ("rag", AI_ML, 0.58, "rag marker"),
    ("nlp", AI_ML, 0.56, "nlp marker"),
    ("inference", AI_ML, 0.5, "inference marker"),
    ("training", AI_ML, 0.54, "training marker"),
    ("cuda", AI_ML, 0.56, "cuda marker"),
    ("gpu", AI_ML, 0.52, "gpu marker"),
    ("tensor", AI_ML, 0.48, "tensor marker"),
    ("tensorflow", AI_ML, 0.62, "tensorflow marker"),
    ("pytorch", AI_ML, 0.64, "pytorch marker"),
    ("sklearn", AI_ML, 0.58, "sklearn marker"),
    ("xgboost", AI_ML, 0.56, "xgboost marker"),
    ("lightgbm", AI_ML, 0.56, "lightgbm marker"),
    ("catboost", AI_ML, 0.56, "catboost marker"),
    ("jupyter", AI_ML, 0.56, "jupyter marker"),
    ("notebook", AI_ML, 0.52, "notebook marker"),
    ("transformers", AI_ML, 0.58, "transformers marker"),
    ("huggingface", AI_ML, 0.58, "huggingface marker"),
    ("langchain", AI_ML, 0.56, "langchain marker"),
    ("llamaindex", AI_ML, 0.56, "llamaindex marker"),
    ("vector-db", AI_ML, 0.42, "vector marker"),
    ("retrieval", AI_ML, 0.42, "retrieval marker"),
    ("embedding", AI_ML, 0.48, "embedding marker"),
    ("feature-store", AI_ML, 0.38, "feature-store marker"),
)

WEIGHTED_KEYWORDS: tuple[WeightedKeyword, ...] = tuple(
    WeightedKeyword(token, category, weight, reason)
    for token, category, weight, reason in _WEIGHTED_KEYWORD_ROWS
)

REGEX_RULES: tuple[RegexRule, ...] = (
    _rule(
        r"\b(front|ui|ux|component|spa|ssr|ssg)\b",
        FRONTEND,
        0.24,
        "frontend regex marker",
    ),
    _rule(
        r"\b(next(?:\.js)?|react|vue|svelte|astro|angular)\b",
        FRONTEND,
        0.34,
        "frontend framework marker",
    ),
    _rule(
        r"\b(css|sass|scss|tailwind|postcss|dom|html)\b",
        FRONTEND,
        0.28,
        "frontend styling marker",
    ),
    _rule(
        r"\b(api|backend|server|microservice|auth|rest|graphql|grpc)\b",
        BACKEND,
        0.28,
        "backend regex marker",
    ),
    _rule(
        r"\b(express|nestjs|django|flask|fastapi|spring|laravel|rails|phoenix)\b",
        BACKEND,
        0.32,
        "backend framework marker",
    ),
    _rule(
        r"\b(sql|postgres|mysql|sqlite|mongo|redis|cassandra|warehouse|db)\b",
        DATABASE,
        0.34,
        "database marker",
    ),
    _rule(
        r"\b(prisma|typeorm|sequelize|sqlalchemy|dbt|clickhouse|bigquery|redshift)\b",
        DATABASE,
        0.3,
        "database ecosystem marker",
    ),
    _rule(
        r"\b(terraform|pulumi|ansible|helm|kubernetes|k8s|cloud|iac|infra)\b",
        INFRASTRUCTURE,
        0.34,
        "infrastructure marker",
    ),
    _rule(
        r"\b(aws|azure|gcp|nomad|consul|vault|bicep|hcl|istio|envoy)\b",
        INFRASTRUCTURE,
        0.3,
        "infrastructure ecosystem marker",
    ),
    _rule(
        r"\b(devops|ci|cd|pipeline|workflow|github actions|jenkins|gitops)\b",
        DEVOPS,
        0.34,
        "devops marker",
    ),
    _rule(
        r"\b(docker|compose|shell|bash|powershell|yaml|nix|makefile|prometheus|grafana)\b",
        DEVOPS,
        0.3,
        "devops tooling marker",
    ),
    _rule(
        r"\b(ai|ml|llm|rag|nlp|inference|training|deep learning|machine learning)\b",
        AI_ML,
        0.36,
        "ai-ml marker",
    ),
    _rule(
        r"\b(pytorch|tensorflow|sklearn|xgboost|jupyter|cuda"
        r"|transformers|huggingface|langchain|llamaindex)\b",
        AI_ML,
        0.34,
        "ai-ml ecosystem marker",
    ),
)


@dataclass(frozen=True)
class CategoryScore:
    """One row of an inference breakdown."""

    category: SkillCategory
    score: float
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class CategoryInference:
    """Result of resolving a language name to a category."""

    category: SkillCategory
    confidence: float
    normalized_language: str
    breakdown: tuple[CategoryScore, ...]

    @property
    def winner(self) -> CategoryScore:
        return self.breakdown[0]

    @property
    def runner_up(self) -> CategoryScore:
        return self.breakdown[1]


class InferenceCache(ABC):
    """Storage strategy for memoized inference results.

    Entries never go stale, so eviction only bounds memory.
    """

    @abstractmethod
    def get(self, key: str) -> CategoryInference | None:
        """Return the cached result for a normalized name."""

    @abstractmethod
    def put(self, key: str, value: CategoryInference) -> None:
        """Store a result for a normalized name."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""

    @abstractmethod
    def __len__(self) -> int: ...


class UnboundedInferenceCache(InferenceCache):
    """Keeps every result for the life of the process."""

    def __init__(self) -> None:
        self._entries: dict[str, CategoryInference] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> CategoryInference | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: CategoryInference) -> None:
        with self._lock:
            self._entries.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class LRUInferenceCache(InferenceCache):
    """Keeps the ``maxsize`` most recently used results."""

    def __init__(self, maxsize: int = 1024) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1")
        self.maxsize = maxsize
        self._entries: OrderedDict[str, CategoryInference] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> CategoryInference | None:
        with self._lock:
            value = self._entries.get(key)
            if value is not None:
                self._entries.move_to_end(key)
            return value

    def put(self, key: str, value: CategoryInference) -> None:
        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class NullInferenceCache(InferenceCache):
    """Disables memoization."""

    def get(self, key: str) -> CategoryInference | None:
        return None

    def put(self, key: str, value: CategoryInference) -> None:
        return None

    def clear(self) -> None:
        return None

    def __len__(self) -> int:
        return 0


def build_inference_cache(size: int) -> InferenceCache:
    """Cache for a configured size: 0 unbounded, positive LRU, negative disabled."""
    if size == 0:
        return UnboundedInferenceCache()
    if size > 0:
        return LRUInferenceCache(size)
    return NullInferenceCache()


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def confidence_from_scores(scores: dict[SkillCategory, float], winner: SkillCategory) -> float:
    """Calibrated confidence for a finished score table."""
    ordered = sorted(scores.values(), reverse=True)
    top = ordered[0] if ordered else 0.0
    second = ordered[1] if len(ordered) > 1 else 0.0
    total = sum(scores.values())
    if top <= 0 or total <= 0:
        return MIN_CONFIDENCE

    dominance = top / total
    margin = (top - second) / top
    confidence = 0.32 + dominance * 0.38 + margin * 0.30

    if winner == FALLBACK_CATEGORY and scores[FALLBACK_CATEGORY] < DEFAULT_PATH_THRESHOLD:
        confidence *= DEFAULT_PATH_SCALE

    return _clamp(confidence, MIN_CONFIDENCE, MAX_CONFIDENCE)


def pick_winner(scores: dict[SkillCategory, float]) -> SkillCategory:
    """Argmax over the scores, ties broken by TIE_BREAK_ORDER."""
    best = TIE_BREAK_ORDER[0]
    for category in TIE_BREAK_ORDER[1:]:
        if scores[category] > scores[best]:
            best = category
    return best


class CategoryInferenceEngine:
    """Resolves language names to skill categories."""

    def __init__(
        self,
        taxonomy: LanguageTaxonomy | None = None,
        cache: InferenceCache | None = None,
        keywords: tuple[WeightedKeyword, ...] = WEIGHTED_KEYWORDS,
        regex_rules: tuple[RegexRule, ...] = REGEX_RULES,
    ) -> None:
        self.taxonomy = taxonomy or get_taxonomy()
        self.cache = cache if cache is not None else UnboundedInferenceCache()
        self._keywords = keywords
        self._regex_rules = regex_rules

        by_token: dict[str, list[WeightedKeyword]] = {}
        for keyword in keywords:
            by_token.setdefault(normalize_token(keyword.token), []).append(keyword)
        self._keywords_by_token = {token: tuple(group) for token, group in by_token.items()}

    @property
    def keywords(self) -> tuple[WeightedKeyword, ...]:
        return self._keywords

    @property
    def regex_rules(self) -> tuple[RegexRule, ...]:
        return self._regex_rules

    def infer(self, language: str | None) -> CategoryInference:
        """Infer the category of a language name. Never raises."""
        raw = language or ""
        cache_key = normalize_token(raw)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        result = self._compute(raw)
        self.cache.put(cache_key, result)
        return result

    def _compute(self, raw: str) -> CategoryInference:
        normalized_language = self.taxonomy.canonicalize(raw)
        profile = self.taxonomy.profile(normalized_language)
        scores: dict[SkillCategory, float] = {category: 0.0 for category in CATEGORIES}
        reasons: dict[SkillCategory, list[str]] = {category: [] for category in CATEGORIES}

        if profile:
            for category in CATEGORIES:
                weight = profile.weight(category)
                if weight <= 0:
                    continue
                scores[category] += weight
                reasons[category].append(f"profile({profile.name}) +{weight:.3f}")

        corpus_parts = [normalized_language, raw]
        if profile:
            corpus_parts.extend(profile.aliases)
            corpus_parts.extend(profile.ecosystems)
            corpus_parts.extend(profile.tags)
        corpus = " ".join(corpus_parts).strip()

        for token in split_tokens(corpus):
            for keyword in self._keywords_by_token.get(token, ()):
                scores[keyword.category] += keyword.weight
                reasons[keyword.category].append(
                    f"keyword({token}:{keyword.reason}) +{keyword.weight:.3f}"
                )

        for rule in self._regex_rules:
            if rule.pattern.search(corpus):
                scores[rule.category] += rule.weight
                reasons[rule.category].append(f"regex({rule.reason}) +{rule.weight:.3f}")

        if all(value <= 0 for value in scores.values()):
            scores[FALLBACK_CATEGORY] += FALLBACK_WEIGHT
            reasons[FALLBACK_CATEGORY].append(
                f"fallback(default-{FALLBACK_CATEGORY.value}) +{FALLBACK_WEIGHT:.3f}"
            )

        winner = pick_winner(scores)
        breakdown = sorted(
            (
                CategoryScore(
                    category=category,
                    score=round(scores[category], 6),
                    reasons=tuple(reasons[category][:MAX_REASONS]),
                )
                for category in CATEGORIES
            ),
            key=lambda row: (-scores[row.category], TIE_BREAK_ORDER.index(row.category)),
        )

        return CategoryInference(
            category=winner,
            confidence=confidence_from_scores(scores, winner),
            normalized_language=normalized_language,
            breakdown=tuple(breakdown),
        )

    def explain(self, language: str | None) -> list[str]:
        """Human-readable summary of why a name landed in its category."""
        inferred = self.infer(language)
        winner = inferred.winner
        runner_up = inferred.runner_up
        return [
            f"language={inferred.normalized_language}",
            f"winner={winner.category.value}:{winner.score:.4f}",
            f"runner-up={runner_up.category.value}:{runner_up.score:.4f}",
            f"confidence={inferred.confidence:.4f}",
            *winner.reasons[:4],
        ]

    def category_hints(self) -> dict[str, SkillCategory]:
        """Inferred category of every taxonomy profile, keyed by name."""
        return {
            profile.name: self.infer(profile.name).category for profile in self.taxonomy.profiles
        }


_engine: CategoryInferenceEngine | None = None
_engine_lock = threading.Lock()


def get_inference_engine() -> CategoryInferenceEngine:
    """Return the process-wide inference engine."""
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = CategoryInferenceEngine()
    return _engine


def configure_inference_cache(cache: InferenceCache) -> None:
    """Swap the memoization strategy of the shared engine."""
    engine = get_inference_engine()
    with _engine_lock:
        engine.cache = cache
    logger.info("inference_cache_configured", cache=type(cache).__name__)


def infer_language_category(language: str | None) -> CategoryInference:
    return get_inference_engine().infer(language)


def explain_language_category(language: str | None) -> list[str]:
    return get_inference_engine().explain(language)


def get_language_category_hints() -> dict[str, SkillCategory]:
    return get_inference_engine().category_hints()


def get_language_alias_map() -> dict[str, str]:
    return get_taxonomy().alias_map()


def supported_languages() -> list[str]:
    return get_taxonomy().supported_languages()
