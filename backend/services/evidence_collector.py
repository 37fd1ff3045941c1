"""Repository Evidence Collector.

Turns one repository's metadata into a ranked list of weighted evidence
signals. Each signal claims a language (or a context tag), carries a score
and a confidence in [0, 1], and records the source it came from.

Sources, from most to least reliable:
- primary language and language byte counts
- owner-curated topics and their synonyms
- repository name and description (tokens, aliases, regex hints)
- license and repository metadata (pages, wiki)
- negative context and repository flags (penalty only, never a skill)

Collection is deterministic and never raises on malformed repository data.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from app.logging_config import get_logger
from services.evidence_knowledge import (
    EvidenceKnowledgeBase,
    get_knowledge_base,
    normalize_license_key,
)
from services.evidence_tables import (
    CONTEXT_ONLY_TAGS,
    FORKED_REPOSITORY_TAG,
    INACTIVE_REPOSITORY_TAG,
    WeightedHint,
)
from services.skill_taxonomy import BACKEND, SkillCategory, normalize_token, split_tokens

logger = get_logger(__name__)


class EvidenceSource(str, Enum):
    """Where an evidence signal was observed."""

    PRIMARY_LANGUAGE = "primary-language"
    LANGUAGE_BYTES = "language-bytes"
    TOPICS = "topics"
    TOPIC_SYNONYMS = "topic-synonyms"
    REPO_NAME = "repo-name"
    LANGUAGE_ALIAS = "language-alias"
    ECOSYSTEM_KEYWORDS = "ecosystem-keywords"
    REPO_DESCRIPTION = "repo-description"
    REPO_METADATA = "repo-metadata"
    LICENSE = "license"
    NEGATIVE_CONTEXT = "negative-context"
    REPO_FLAGS = "repo-flags"


SOURCE_RELIABILITY: dict[EvidenceSource, float] = {
    EvidenceSource.PRIMARY_LANGUAGE: 0.98,
    EvidenceSource.LANGUAGE_BYTES: 0.95,
    EvidenceSource.TOPICS: 0.80,
    EvidenceSource.TOPIC_SYNONYMS: 0.76,
    EvidenceSource.REPO_NAME: 0.72,
    EvidenceSource.LANGUAGE_ALIAS: 0.70,
    EvidenceSource.ECOSYSTEM_KEYWORDS: 0.68,
    EvidenceSource.REPO_DESCRIPTION: 0.64,
    EvidenceSource.REPO_METADATA: 0.48,
    EvidenceSource.LICENSE: 0.35,
    EvidenceSource.NEGATIVE_CONTEXT: 0.24,
    EvidenceSource.REPO_FLAGS: 0.20,
}

# Sources that only ever describe the repository, never a skill
CONTEXT_SOURCES = frozenset({EvidenceSource.REPO_FLAGS, EvidenceSource.NEGATIVE_CONTEXT})

SKILL_SOURCES: tuple[EvidenceSource, ...] = tuple(
    source for source in EvidenceSource if source not in CONTEXT_SOURCES
)

MAX_LANGUAGE_BYTE_SIGNALS = 16
NEGATIVE_CONTEXT_CONFIDENCE = 0.22


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


@dataclass(frozen=True)
class EvidenceSignal:
    """One weighted observation about a repository."""

    language: str
    category: SkillCategory
    source: EvidenceSource
    score: float
    confidence: float
    detail: str = ""
    token: str | None = None
    # Declared language a context signal is attributed to
    subject: str | None = None

    @property
    def power(self) -> float:
        return self.score * self.confidence

    @property
    def is_context(self) -> bool:
        return self.source in CONTEXT_SOURCES or self.language in CONTEXT_ONLY_TAGS

    @property
    def dedupe_key(self) -> tuple[str, str, str]:
        return (self.language, self.source.value, self.token or "")


# ---------------------------------------------------------------------------
# Input and policy models
# ---------------------------------------------------------------------------


class RepositoryEvidenceInput(BaseModel):
    """Repository metadata the collector reads.

    Accepts snake_case or camelCase keys. Malformed values degrade to their
    empty default instead of failing validation.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    owner: str = ""
    name: str = ""
    full_name: str = ""
    description: str | None = None
    primary_language: str | None = None
    language_bytes: dict[str, float] = Field(default_factory=dict)
    topics: tuple[str, ...] = ()
    license: str | None = None
    is_fork: bool = False
    is_archived: bool = False
    is_disabled: bool = False
    has_wiki: bool = False
    has_pages: bool = False

    @field_validator("owner", "name", "full_name", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        return v.strip() if isinstance(v, str) else ""

    @field_validator("description", "primary_language", "license", mode="before")
    @classmethod
    def coerce_optional_text(cls, v: Any) -> str | None:
        if not isinstance(v, str):
            return None
        return v.strip() or None

    @field_validator("language_bytes", mode="before")
    @classmethod
    def coerce_language_bytes(cls, v: Any) -> dict[str, float]:
        if not isinstance(v, Mapping):
            return {}
        cleaned: dict[str, float] = {}
        for language, count in v.items():
            if not isinstance(language, str) or not language.strip():
                continue
            if isinstance(count, bool) or not isinstance(count, (int, float)):
                continue
            if not math.isfinite(count) or count < 0:
                continue
            cleaned[language.strip()] = float(count)
        return cleaned

    @field_validator("topics", mode="before")
    @classmethod
    def coerce_topics(cls, v: Any) -> tuple[str, ...]:
        if isinstance(v, str) or not isinstance(v, Iterable):
            return ()
        return tuple(t.strip() for t in v if isinstance(t, str) and t.strip())

    @field_validator(
        "is_fork", "is_archived", "is_disabled", "has_wiki", "has_pages", mode="before"
    )
    @classmethod
    def coerce_flag(cls, v: Any) -> bool:
        return v if isinstance(v, bool) else False

    @property
    def repository_name(self) -> str:
        """Repository name without the owner, falling back to full_name."""
        if self.name:
            return self.name
        return self.full_name.rsplit("/", 1)[-1]

    @classmethod
    def from_github(
        cls,
        payload: Mapping[str, Any],
        language_bytes: Mapping[str, Any] | None = None,
    ) -> RepositoryEvidenceInput:
        """Build an input from a GitHub REST repository payload.

        ``language_bytes`` is the body of the repository languages endpoint.
        """
        owner = payload.get("owner")
        license_info = payload.get("license")
        if isinstance(license_info, Mapping):
            license_name = license_info.get("spdx_id") or license_info.get("key")
            if license_name == "NOASSERTION":
                license_name = license_info.get("key")
        else:
            license_name = license_info

        return cls(
            owner=owner.get("login") if isinstance(owner, Mapping) else owner,
            name=payload.get("name"),
            full_name=payload.get("full_name"),
            description=payload.get("description"),
            primary_language=payload.get("language"),
            language_bytes=language_bytes or {},
            topics=payload.get("topics") or (),
            license=license_name,
            is_fork=payload.get("fork"),
            is_archived=payload.get("archived"),
            is_disabled=payload.get("disabled"),
            has_wiki=payload.get("has_wiki"),
            has_pages=payload.get("has_pages"),
        )


def _bounded_float(v: Any, low: float, high: float, default: float) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
        return default
    return _clamp(float(v), low, high)


def _bounded_int(v: Any, low: int, high: int, default: int) -> int:
    if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
        return default
    return max(low, min(high, int(v)))


class EvidencePolicy(BaseModel):
    """Tunable collection policy.

    Out-of-range numbers are clamped into their valid range rather than
    rejected. Non-numeric values fall back to the default.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    include_topic_signals: bool = True
    include_text_signals: bool = True
    include_license_signals: bool = False
    include_regex_signals: bool = True
    include_alias_signals: bool = True
    include_negative_signals: bool = True
    include_metadata_signals: bool = True

    primary_language_signal_weight: float = 1.0
    language_byte_signal_weight: float = 1.0
    topic_signal_weight: float = 1.0
    text_signal_weight: float = 1.0
    regex_signal_weight: float = 1.0

    minimum_signal_score: float = 0.06
    minimum_signal_confidence: float = 0.0
    max_signals_per_repo: int = 40
    max_topic_signals: int = 50
    max_text_signals: int = 80
    max_regex_signals: int = 50
    token_min_length: int = 2
    prefer_precision_over_recall: bool = True

    @field_validator(
        "primary_language_signal_weight",
        "language_byte_signal_weight",
        "topic_signal_weight",
        "text_signal_weight",
        "regex_signal_weight",
        mode="before",
    )
    @classmethod
    def clamp_weight(cls, v: Any, info: ValidationInfo) -> float:
        return _bounded_float(v, 0.2, 2.2, cls.model_fields[info.field_name].default)

    @field_validator("minimum_signal_score", "minimum_signal_confidence", mode="before")
    @classmethod
    def clamp_threshold(cls, v: Any, info: ValidationInfo) -> float:
        return _bounded_float(v, 0.0, 1.0, cls.model_fields[info.field_name].default)

    @field_validator(
        "max_signals_per_repo",
        "max_topic_signals",
        "max_text_signals",
        "max_regex_signals",
        mode="before",
    )
    @classmethod
    def clamp_limit(cls, v: Any, info: ValidationInfo) -> int:
        return _bounded_int(v, 1, 200, cls.model_fields[info.field_name].default)

    @field_validator("token_min_length", mode="before")
    @classmethod
    def clamp_token_length(cls, v: Any) -> int:
        return _bounded_int(v, 2, 16, 2)


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def language_entropy(language_bytes: Mapping[str, float]) -> float:
    """Normalized Shannon entropy of the positive byte counts, in [0, 1]."""
    values = [v for v in language_bytes.values() if v > 0]
    if len(values) <= 1:
        return 0.0
    total = sum(values)
    entropy = -sum((v / total) * math.log2(v / total) for v in values)
    return _clamp(entropy / math.log2(len(values)))


def dedupe_signals(signals: Iterable[EvidenceSignal]) -> list[EvidenceSignal]:
    """Keep the strongest signal per (language, source, token).

    Ties keep the first seen; output preserves first-seen key order.
    """
    best: dict[tuple[str, str, str], EvidenceSignal] = {}
    for signal in signals:
        current = best.get(signal.dedupe_key)
        if current is None or signal.power > current.power:
            best[signal.dedupe_key] = signal
    return list(best.values())


def blend_reliability(signal: EvidenceSignal) -> EvidenceSignal:
    """Average a signal's confidence with the reliability of its source."""
    blended = (signal.confidence + SOURCE_RELIABILITY[signal.source]) / 2
    return replace(signal, confidence=_clamp(blended))


def _rank_key(signal: EvidenceSignal) -> tuple[float, float]:
    return (-signal.power, -signal.score)


def _top(signals: Iterable[EvidenceSignal], limit: int) -> list[EvidenceSignal]:
    return sorted(signals, key=_rank_key)[:limit]


def rank_signals(signals: Iterable[EvidenceSignal], policy: EvidencePolicy) -> list[EvidenceSignal]:
    """Apply the score floors, blend reliability, sort and truncate.

    Context signals are exempt from the score floors and from
    ``max_signals_per_repo``: they rank below every skill signal, so a
    busy repository would otherwise lose its repository-level penalties.
    They follow the truncated skill signals.
    """
    kept: list[EvidenceSignal] = []
    context: list[EvidenceSignal] = []
    for signal in signals:
        if signal.is_context:
            context.append(blend_reliability(signal))
            continue
        if signal.score < policy.minimum_signal_score:
            continue
        blended = blend_reliability(signal)
        if blended.confidence < policy.minimum_signal_confidence:
            continue
        kept.append(blended)
    return _top(kept, policy.max_signals_per_repo) + sorted(context, key=_rank_key)


# ---------------------------------------------------------------------------
# Collector
# ---------------------------------------------------------------------------


class EvidenceCollector:
    """Collects evidence signals from repositories under one policy."""

    def __init__(
        self,
        policy: EvidencePolicy | None = None,
        knowledge_base: EvidenceKnowledgeBase | None = None,
    ) -> None:
        self._policy = policy or EvidencePolicy()
        self._kb = knowledge_base or get_knowledge_base()

    @property
    def policy(self) -> EvidencePolicy:
        return self._policy

    def collect(
        self, repository: RepositoryEvidenceInput | Mapping[str, Any]
    ) -> list[EvidenceSignal]:
        """Return the ranked, deduplicated signals for one repository."""
        repo = coerce_repository(repository)
        policy = self._policy
        subject = self._subject_language(repo)

        signals: list[EvidenceSignal] = []
        signals.extend(self._from_primary_language(repo))
        signals.extend(self._from_language_bytes(repo))
        signals.extend(self._from_repo_flags(repo, subject))
        if policy.include_topic_signals:
            signals.extend(self._from_topics(repo))
        if policy.include_text_signals:
            signals.extend(self._from_repo_text(repo))
        if policy.include_license_signals:
            signals.extend(self._from_license(repo))
        if policy.include_metadata_signals:
            signals.extend(self._from_repo_metadata(repo))
        if policy.include_negative_signals:
            signals.extend(self._from_negative_context(repo, subject))

        ranked = rank_signals(dedupe_signals(signals), policy)
        logger.debug(
            "repository_evidence_collected",
            candidates=len(signals),
            signals=len(ranked),
            context_signals=sum(1 for s in ranked if s.is_context),
        )
        return ranked

    # Signal construction

    def _signal(
        self,
        language: str,
        source: EvidenceSource,
        score: float,
        confidence: float,
        detail: str,
        token: str | None = None,
    ) -> EvidenceSignal:
        canonical = self._kb.canonical_language(language)
        return EvidenceSignal(
            language=canonical,
            category=self._kb.category_for(canonical),
            source=source,
            score=_clamp(score),
            confidence=_clamp(confidence),
            detail=detail,
            token=token,
        )

    def _context_signal(
        self,
        tag: str,
        source: EvidenceSource,
        score: float,
        confidence: float,
        detail: str,
        subject: str | None,
    ) -> EvidenceSignal:
        # Tags keep their spelling; title-casing would detach them from their penalty.
        return EvidenceSignal(
            language=tag,
            category=self._kb.category_for(subject) if subject else BACKEND,
            source=source,
            score=_clamp(score),
            confidence=_clamp(confidence),
            detail=detail,
            token=normalize_token(tag),
            subject=subject,
        )

    def _subject_language(self, repo: RepositoryEvidenceInput) -> str | None:
        if repo.primary_language:
            return self._kb.canonical_language(repo.primary_language)
        positive = {k: v for k, v in repo.language_bytes.items() if v > 0}
        if positive:
            return self._kb.canonical_language(max(positive, key=positive.__getitem__))
        return None

    # Structured sources

    def _from_primary_language(self, repo: RepositoryEvidenceInput) -> list[EvidenceSignal]:
        if not repo.primary_language:
            return []
        language = self._kb.canonical_language(repo.primary_language)
        total = sum(v for v in repo.language_bytes.values() if v > 0)
        scale = _clamp(math.log2(1 + total) / 22, 0.3, 1.0)
        entropy = language_entropy(repo.language_bytes)
        confidence = 0.97 * _clamp(1 - entropy * 0.22, 0.75, 1.0)
        score = (scale * 0.72 + 0.24) * self._policy.primary_language_signal_weight
        return [
            self._signal(
                language,
                EvidenceSource.PRIMARY_LANGUAGE,
                score,
                confidence,
                f"Primary language declared as {language}",
                token=normalize_token(language),
            )
        ]

    def _from_language_bytes(self, repo: RepositoryEvidenceInput) -> list[EvidenceSignal]:
        merged: dict[str, float] = {}
        for raw, count in repo.language_bytes.items():
            if count <= 0:
                continue
            language = self._kb.canonical_language(raw)
            merged[language] = merged.get(language, 0.0) + count
        if not merged:
            return []

        ordered = sorted(merged.items(), key=lambda item: -item[1])
        total = sum(merged.values())
        top = ordered[0][1]
        concentration = 1 - language_entropy(merged)
        weight = self._policy.language_byte_signal_weight

        signals = []
        for language, count in ordered[:MAX_LANGUAGE_BYTE_SIGNALS]:
            share = count / max(1.0, total)
            dominance = count / max(1.0, top)
            score = (0.32 + share * 0.48 + dominance * 0.2 + concentration * 0.08) * weight
            signals.append(
                self._signal(
                    language,
                    EvidenceSource.LANGUAGE_BYTES,
                    score,
                    0.93,
                    f"Language bytes observed for {language} "
                    f"({int(count)} bytes, {share * 100:.1f}% share)",
                    token=normalize_token(language),
                )
            )
        return signals

    def _from_repo_flags(
        self, repo: RepositoryEvidenceInput, subject: str | None
    ) -> list[EvidenceSignal]:
        signals = []
        if repo.is_fork:
            signals.append(
                self._context_signal(
                    FORKED_REPOSITORY_TAG,
                    EvidenceSource.REPO_FLAGS,
                    0.04,
                    0.2,
                    "Repository is a fork",
                    subject,
                )
            )
        if repo.is_archived or repo.is_disabled:
            signals.append(
                self._context_signal(
                    INACTIVE_REPOSITORY_TAG,
                    EvidenceSource.REPO_FLAGS,
                    0.05,
                    0.25,
                    "Repository is archived or disabled",
                    subject,
                )
            )
        return signals

    def _from_repo_metadata(self, repo: RepositoryEvidenceInput) -> list[EvidenceSignal]:
        signals = []
        if repo.has_pages:
            signals.append(
                self._signal(
                    "HTML",
                    EvidenceSource.REPO_METADATA,
                    0.08,
                    0.4,
                    "GitHub Pages enabled",
                    token="has-pages",
                )
            )
        if repo.has_wiki:
            signals.append(
                self._signal(
                    "Markdown",
                    EvidenceSource.REPO_METADATA,
                    0.05,
                    0.3,
                    "Repository wiki enabled",
                    token="has-wiki",
                )
            )
        return signals

    # Curated topics

    def _from_topics(self, repo: RepositoryEvidenceInput) -> list[EvidenceSignal]:
        policy = self._policy
        seen: set[tuple[str, str]] = set()
        signals = []
        for topic in repo.topics:
            normalized = normalize_token(topic)
            for token in self._topic_variants(normalized):
                if (normalized, token) in seen:
                    continue
                seen.add((normalized, token))
                hint = self._kb.topic_hints.get(token)
                if hint is None:
                    continue
                precision = 1.0
                if policy.prefer_precision_over_recall:
                    precision = _clamp(0.85 + hint.specificity * 0.2, 0.72, 1.15)
                source = (
                    EvidenceSource.TOPICS if token == normalized else EvidenceSource.TOPIC_SYNONYMS
                )
                signals.append(
                    self._signal(
                        hint.language,
                        source,
                        hint.score * policy.topic_signal_weight * precision,
                        hint.confidence,
                        f"Topic '{topic}' suggests {hint.language}",
                        token=token,
                    )
                )
        return _top(signals, policy.max_topic_signals)

    def _topic_variants(self, normalized: str) -> list[str]:
        if not normalized:
            return []
        variants = [normalized]
        variants.extend(part for part in normalized.split("-") if len(part) >= 2)
        variants.extend(part for part in normalized.split("+") if len(part) >= 2)
        alias = self._kb.aliases.get(normalized)
        if alias:
            variants.append(normalize_token(alias))
        return list(dict.fromkeys(v for v in variants if v))

    # Free text

    def _from_repo_text(self, repo: RepositoryEvidenceInput) -> list[EvidenceSignal]:
        policy = self._policy
        name_text = repo.repository_name
        description = repo.description or ""
        name_weight = policy.text_signal_weight * 1.05
        description_weight = policy.text_signal_weight * 0.92

        signals: list[EvidenceSignal] = []
        signals.extend(
            self._from_token_frequency(
                name_text, EvidenceSource.REPO_NAME, name_weight, "name"
            )
        )
        signals.extend(
            self._from_token_frequency(
                description, EvidenceSource.REPO_DESCRIPTION, description_weight, "description"
            )
        )
        if policy.include_regex_signals:
            regex_signals = self._from_regex_hints(
                name_text, policy.text_signal_weight * 1.04, "name"
            )
            regex_signals += self._from_regex_hints(
                description, policy.text_signal_weight * 0.95, "description"
            )
            signals.extend(_top(dedupe_signals(regex_signals), policy.max_regex_signals))

        return _top(dedupe_signals(signals), policy.max_text_signals)

    def _from_token_frequency(
        self, text: str, source: EvidenceSource, source_weight: float, label: str
    ) -> list[EvidenceSignal]:
        if not text:
            return []
        policy = self._policy
        counts: dict[str, float] = {}
        penalties: dict[str, float] = {}
        for token in split_tokens(text, min_length=policy.token_min_length, unique=False):
            penalty = self._kb.noise_penalty(token)
            if self._kb.is_hard_noise(token):
                continue
            if token in self._kb.noise_tokens and penalty >= 0.9:
                continue
            counts[token] = counts.get(token, 0.0) + _clamp(1 - penalty * 0.72, 0.08, 1.0)
            penalties[token] = max(penalties.get(token, 0.0), penalty)

        signals = []
        for token, count in counts.items():
            hint = self._kb.match_token(token)
            if hint is None:
                continue
            signals.extend(
                self._token_signals(
                    token, hint, count, penalties[token], source, source_weight, label
                )
            )
        return signals

    def _token_signals(
        self,
        token: str,
        hint: WeightedHint,
        count: float,
        penalty: float,
        source: EvidenceSource,
        source_weight: float,
        label: str,
    ) -> list[EvidenceSignal]:
        policy = self._policy
        repetition = _clamp(1 + math.log2(1 + count) * 0.2, 1.0, 1.4)
        precision = 1.0
        if policy.prefer_precision_over_recall:
            precision = _clamp(0.8 + hint.specificity * 0.28, 0.72, 1.2)
        noise_score = _clamp(1 - penalty * 0.65, 0.22, 1.0)
        noise_confidence = _clamp(1 - penalty * 0.45, 0.35, 1.0)

        score = _clamp(
            hint.score * repetition * source_weight * precision * noise_score, 0.05, 0.42
        )
        offset = 0.05 if source == EvidenceSource.REPO_NAME else -0.02
        confidence = _clamp((hint.confidence + offset) * noise_confidence)

        signals = [
            self._signal(
                hint.language,
                source,
                score,
                confidence,
                f"Repository {label} token '{token}' suggests {hint.language}",
                token=token,
            )
        ]
        if policy.include_alias_signals and token in self._kb.aliases:
            signals.append(
                self._signal(
                    hint.language,
                    EvidenceSource.LANGUAGE_ALIAS,
                    _clamp(score * 0.78, 0.04, 0.35),
                    confidence * 0.9,
                    f"Alias '{token}' resolves to {hint.language}",
                    token=token,
                )
            )
        return signals

    def _from_regex_hints(
        self, text: str, source_weight: float, label: str
    ) -> list[EvidenceSignal]:
        if not text:
            return []
        policy = self._policy
        signals = []
        for hint in self._kb.regex_hints:
            if not hint.pattern.search(text):
                continue
            precision = 1.0
            if policy.prefer_precision_over_recall:
                precision = _clamp(0.84 + hint.specificity * 0.2, 0.72, 1.16)
            signals.append(
                self._signal(
                    hint.language,
                    EvidenceSource.ECOSYSTEM_KEYWORDS,
                    hint.score * source_weight * policy.regex_signal_weight * precision,
                    hint.confidence,
                    f"Repository {label} matches an ecosystem pattern for {hint.language}",
                    token=normalize_token(hint.language),
                )
            )
        return signals

    # Weak and context sources

    def _from_license(self, repo: RepositoryEvidenceInput) -> list[EvidenceSignal]:
        text = normalize_license_key(
            " ".join(filter(None, (repo.license, repo.repository_name, repo.description)))
        )
        if not text:
            return []
        bounded = f"-{text}-"
        signals = []
        for key, language in self._kb.license_hints.items():
            if f"-{key}-" not in bounded:
                continue
            signals.append(
                self._signal(
                    language,
                    EvidenceSource.LICENSE,
                    0.08,
                    0.30,
                    f"License hint '{key}' points to {language}",
                    token=normalize_token(key),
                )
            )
        return signals

    def _from_negative_context(
        self, repo: RepositoryEvidenceInput, subject: str | None
    ) -> list[EvidenceSignal]:
        text = " ".join(
            filter(None, (repo.repository_name, repo.description, *repo.topics))
        ).lower()
        if not text:
            return []
        signals = []
        for profile in self._kb.negative_contexts:
            if not profile.matches(text):
                continue
            signals.append(
                self._context_signal(
                    profile.tag,
                    EvidenceSource.NEGATIVE_CONTEXT,
                    profile.penalty,
                    NEGATIVE_CONTEXT_CONFIDENCE,
                    profile.reason,
                    subject,
                )
            )
        return signals


def coerce_repository(
    repository: RepositoryEvidenceInput | Mapping[str, Any],
) -> RepositoryEvidenceInput:
    """Accept a model or a raw mapping; anything else reads as an empty repository."""
    if isinstance(repository, RepositoryEvidenceInput):
        return repository
    if isinstance(repository, Mapping):
        return RepositoryEvidenceInput.model_validate(dict(repository))
    return RepositoryEvidenceInput()


def collect_repository_evidence(
    repository: RepositoryEvidenceInput | Mapping[str, Any],
    policy: EvidencePolicy | None = None,
) -> list[EvidenceSignal]:
    """Collect ranked evidence signals for a single repository."""
    return EvidenceCollector(policy).collect(repository)
