"""Evidence Knowledge Base.

Weak-signal lookup tables used to read free-text repository metadata:

- token hints (repository names and descriptions)
- topic hints (owner-curated topic tags, trusted above free text)
- regex hints (multi-word and punctuated patterns)
- alias table, noise tokens, negative-context archetypes and license hints

Token and topic hints are generated from every taxonomy profile in tiers
(canonical name > aliases > ecosystem keywords > tags). When two tiers claim the
same token the stronger score * confidence wins, ties go to the more specific
hint. The curated tables in evidence_tables are then laid over the generated
ones and always win.

The knowledge base is built once through get_knowledge_base() and never
mutated afterwards; every table is exposed read-only.
"""

from __future__ import annotations

import math
import re
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from app.exceptions import KnowledgeBaseError
from app.logging_config import get_logger
from app.metrics import KNOWLEDGE_BASE_BUILD_DURATION
from services.category_inference import (
    CategoryInferenceEngine,
    get_inference_engine,
    pick_winner,
)
from services.evidence_tables import (
    ALIAS_OVERRIDES,
    CATEGORY_SUBSTRING_HINTS,
    CONTEXT_ONLY_TAGS,
    LICENSE_PROFILES,
    NEGATIVE_CONTEXT_PROFILES,
    NOISE_TOKEN_PROFILES,
    REGEX_HINT_OVERRIDES,
    SUBSTRING_HEURISTICS,
    SUFFIX_HEURISTICS,
    TOKEN_HINT_OVERRIDES,
    TOPIC_HINT_OVERRIDES,
    LicenseProfile,
    NegativeContextProfile,
    NoiseSeverity,
    RegexHint,
    WeightedHint,
)
from services.skill_taxonomy import (
    BACKEND,
    CATEGORIES,
    VERBATIM_LANGUAGE_NAMES,
    LanguageTaxonomy,
    SkillCategory,
    normalize_token,
    title_case_language,
)

logger = get_logger(__name__)

# (score, confidence, specificity) per generation tier
TOKEN_NAME_TIER = (0.20, 0.74, 0.76)
TOKEN_ALIAS_TIER = (0.18, 0.68, 0.62)
TOKEN_SHORT_ALIAS_TIER = (0.12, 0.52, 0.34)
TOKEN_ECOSYSTEM_TIER = (0.16, 0.62, 0.58)
TOKEN_TAG_TIER = (0.12, 0.54, 0.46)

TOPIC_NAME_TIER = (0.24, 0.78, 0.84)
TOPIC_ALIAS_TIER = (0.22, 0.74, 0.80)
TOPIC_ECOSYSTEM_TIER = (0.20, 0.70, 0.72)
TOPIC_TAG_TIER = (0.16, 0.60, 0.54)

REGEX_PROFILE_TIER = (0.20, 0.72, 0.78)
REGEX_ECOSYSTEM_TIER = (0.14, 0.58, 0.52)

# Hint used when a text token only resolves through the alias table
ALIAS_FALLBACK_TIER = (0.16, 0.58, 0.46)

HARD_NOISE_PENALTY = 0.95
CATEGORY_HINT_MIN_CONFIDENCE = 0.45

_NOISE_SEPARATORS = re.compile(r"[_./]+")
_NOISE_DISALLOWED = re.compile(r"[^a-z0-9#+\-]")
_LICENSE_DISALLOWED = re.compile(r"[^a-z0-9]+")
_DASH_RUNS = re.compile(r"-+")
_VERSION_TOKEN = re.compile(r"^v\d+$")
_PLACEHOLDER_PREFIX = re.compile(r"^(test|demo|sample|example)-")
_TEMP_SEGMENT = re.compile(r"(^|-)(tmp|temp)($|-)")


def normalize_noise_token(value: str) -> str:
    """Like normalize_token but without splitting camelCase."""
    token = _NOISE_SEPARATORS.sub("-", value.strip().lower())
    token = _NOISE_DISALLOWED.sub("", token)
    return _DASH_RUNS.sub("-", token).strip("-")


def normalize_license_key(value: str) -> str:
    return _LICENSE_DISALLOWED.sub("-", value.strip().lower()).strip("-")


def _tier(language: str, tier: tuple[float, float, float]) -> WeightedHint:
    score, confidence, specificity = tier
    return WeightedHint(language, score, confidence, specificity)


def _prefer(current: WeightedHint | None, candidate: WeightedHint) -> WeightedHint:
    """Keep the stronger hint; equal strength goes to the more specific one."""
    if current is None:
        return candidate
    if candidate.power > current.power:
        return candidate
    if candidate.power == current.power and candidate.specificity > current.specificity:
        return candidate
    return current


def merge_weighted_hints(entries: Iterable[tuple[str, WeightedHint]]) -> dict[str, WeightedHint]:
    """Fold (token, hint) pairs into one hint per normalized token."""
    merged: dict[str, WeightedHint] = {}
    for token, hint in entries:
        key = normalize_token(token)
        if key:
            merged[key] = _prefer(merged.get(key), hint)
    return merged


def _normalized_keys(table: Mapping[str, object]) -> dict:
    return {key: value for key, value in ((normalize_token(k), v) for k, v in table.items()) if key}


def calibrate_votes(votes: Mapping[SkillCategory, float]) -> dict[SkillCategory, float]:
    """Density-lift calibration of raw category votes.

    Each positive vote is scaled by ``0.78 + 0.44 * sqrt(share)`` where share is
    its fraction of the positive total, so a category that dominates the
    distribution pulls further ahead while scattered votes are damped.
    """
    positive = {category: max(0.0, votes.get(category, 0.0)) for category in CATEGORIES}
    total = sum(positive.values())
    calibrated: dict[SkillCategory, float] = {}
    for category in CATEGORIES:
        share = positive[category] / total if total > 0 else 0.0
        calibrated[category] = positive[category] * (0.78 + math.sqrt(share) * 0.44)
    return calibrated


class EvidenceKnowledgeBase:
    """Frozen weak-signal tables derived from the taxonomy plus curated overrides."""

    def __init__(
        self,
        inference: CategoryInferenceEngine | None = None,
    ) -> None:
        self._inference = inference or get_inference_engine()
        taxonomy = self._inference.taxonomy

        self._aliases: Mapping[str, str] = MappingProxyType(self._build_aliases(taxonomy))
        self._token_hints: Mapping[str, WeightedHint] = MappingProxyType(
            {**self._build_token_hints(taxonomy), **_normalized_keys(TOKEN_HINT_OVERRIDES)}
        )
        self._topic_hints: Mapping[str, WeightedHint] = MappingProxyType(
            {**self._build_topic_hints(taxonomy), **_normalized_keys(TOPIC_HINT_OVERRIDES)}
        )
        self._regex_hints: tuple[RegexHint, ...] = (
            *self._build_regex_hints(taxonomy),
            *REGEX_HINT_OVERRIDES,
        )

        penalties, hard = self._build_noise_tables()
        self._noise_penalties: Mapping[str, float] = MappingProxyType(penalties)
        self._hard_noise: frozenset[str] = frozenset(hard)
        self._noise_tokens: frozenset[str] = frozenset(penalties)

        self._license_hints: Mapping[str, str] = MappingProxyType(self._build_license_hints())
        self._negative_by_tag: Mapping[str, NegativeContextProfile] = MappingProxyType(
            {profile.tag: profile for profile in NEGATIVE_CONTEXT_PROFILES}
        )

        self._validate()
        self._category_hints: Mapping[str, SkillCategory] = MappingProxyType(
            self._build_category_hints()
        )

    # Construction

    @staticmethod
    def _build_aliases(taxonomy: LanguageTaxonomy) -> dict[str, str]:
        aliases: dict[str, str] = {}
        for profile in taxonomy.profiles:
            aliases[normalize_token(profile.name)] = profile.name
            for alias in profile.aliases:
                key = normalize_token(alias)
                if key:
                    aliases[key] = profile.name
        aliases.update(_normalized_keys(ALIAS_OVERRIDES))
        return aliases

    @staticmethod
    def _build_token_hints(taxonomy: LanguageTaxonomy) -> dict[str, WeightedHint]:
        entries: list[tuple[str, WeightedHint]] = []
        for profile in taxonomy.profiles:
            entries.append((profile.name, _tier(profile.name, TOKEN_NAME_TIER)))
            for alias in profile.aliases:
                short = len(normalize_token(alias)) <= 2
                tier = TOKEN_SHORT_ALIAS_TIER if short else TOKEN_ALIAS_TIER
                entries.append((alias, _tier(profile.name, tier)))
            for ecosystem in profile.ecosystems:
                entries.append((ecosystem, _tier(profile.name, TOKEN_ECOSYSTEM_TIER)))
            for tag in profile.tags:
                entries.append((tag, _tier(profile.name, TOKEN_TAG_TIER)))
        return merge_weighted_hints(entries)

    @staticmethod
    def _build_topic_hints(taxonomy: LanguageTaxonomy) -> dict[str, WeightedHint]:
        entries: list[tuple[str, WeightedHint]] = []
        for profile in taxonomy.profiles:
            entries.append((profile.name, _tier(profile.name, TOPIC_NAME_TIER)))
            for alias in profile.aliases:
                entries.append((alias, _tier(profile.name, TOPIC_ALIAS_TIER)))
            for ecosystem in profile.ecosystems:
                entries.append((ecosystem, _tier(profile.name, TOPIC_ECOSYSTEM_TIER)))
            for tag in profile.tags:
                entries.append((tag, _tier(profile.name, TOPIC_TAG_TIER)))
        return merge_weighted_hints(entries)

    @staticmethod
    def _build_regex_hints(taxonomy: LanguageTaxonomy) -> list[RegexHint]:
        hints: list[RegexHint] = []
        for profile in taxonomy.profiles:
            terms = dict.fromkeys(
                re.escape(token)
                for token in (normalize_token(t) for t in (profile.name, *profile.aliases))
                if len(token) > 1
            )
            if terms:
                pattern = rf"\b({'|'.join(terms)})\b"
                hints.append(_compile_regex_hint(pattern, profile.name, REGEX_PROFILE_TIER))

            for ecosystem in profile.ecosystems:
                key = normalize_token(ecosystem)
                if len(key) <= 1:
                    continue
                pattern = rf"\b{re.escape(key)}\b"
                hints.append(_compile_regex_hint(pattern, profile.name, REGEX_ECOSYSTEM_TIER))
        return hints

    @staticmethod
    def _build_noise_tables() -> tuple[dict[str, float], set[str]]:
        penalties: dict[str, float] = {}
        hard: set[str] = set()
        for profile in NOISE_TOKEN_PROFILES:
            is_hard = (
                profile.severity == NoiseSeverity.HARD or profile.penalty >= HARD_NOISE_PENALTY
            )
            for raw in (profile.token, *profile.aliases):
                token = normalize_noise_token(raw)
                if not token:
                    continue
                penalties[token] = max(penalties.get(token, 0.0), profile.penalty)
                if is_hard:
                    hard.add(token)
        return penalties, hard

    @staticmethod
    def _build_license_hints() -> dict[str, str]:
        hints: dict[str, str] = {}
        for profile in LICENSE_PROFILES:
            language = profile.primary_language
            if not language:
                continue
            for raw in (profile.license, *profile.aliases):
                key = normalize_license_key(raw)
                if key:
                    hints[key] = language
        return hints

    def _validate(self) -> None:
        for token, hint in self._token_hints.items():
            _check_hint("token_hints", token, hint)
        for token, hint in self._topic_hints.items():
            _check_hint("topic_hints", token, hint)
        for regex_hint in self._regex_hints:
            _check_hint("regex_hints", regex_hint.pattern.pattern, regex_hint)
        for token, penalty in self._noise_penalties.items():
            if not 0.0 <= penalty <= 1.0:
                raise KnowledgeBaseError(
                    "noise_tokens", "Noise penalty out of range", {"token": token}
                )
        for profile in NEGATIVE_CONTEXT_PROFILES:
            if not profile.patterns or not 0.0 <= profile.penalty <= 1.0:
                raise KnowledgeBaseError(
                    "negative_context", "Invalid negative-context profile", {"tag": profile.tag}
                )

    def _build_category_hints(self) -> dict[str, SkillCategory]:
        """Expert language -> category map from weighted, calibrated votes.

        Every known language (taxonomy names, hint targets, alias targets and the
        aliases themselves) collects votes from taxonomy inference and from each
        hint table that points at it; the calibrated winner is recorded for the
        language, its canonical spelling and any alias not yet decided.
        """
        infer = self._inference.infer
        output: dict[str, SkillCategory] = dict(self._inference.category_hints())

        aliases_by_target: dict[str, list[tuple[str, str]]] = {}
        for alias, canonical in self._aliases.items():
            aliases_by_target.setdefault(normalize_token(canonical), []).append((alias, canonical))
        regex_by_target: dict[str, list[RegexHint]] = {}
        for regex_hint in self._regex_hints:
            regex_by_target.setdefault(normalize_token(regex_hint.language), []).append(regex_hint)

        languages = dict.fromkeys(output)
        for table in (self._token_hints, self._topic_hints):
            languages.update(dict.fromkeys(hint.language for hint in table.values()))
        languages.update(dict.fromkeys(hint.language for hint in self._regex_hints))
        for alias, canonical in self._aliases.items():
            languages.setdefault(canonical)
            languages.setdefault(alias)

        for language in languages:
            normalized = normalize_token(language)
            if not normalized:
                continue

            votes = {category: 0.0 for category in CATEGORIES}
            inferred = infer(language)
            votes[inferred.category] += max(0.12, inferred.confidence) * 2.3
            for row in inferred.breakdown[:3]:
                if row.score > 0:
                    votes[row.category] += min(0.85, row.score / 3.4)

            token_hint = self._token_hints.get(normalized)
            if token_hint:
                self._add_hint_vote(votes, token_hint.language, 1.35 * token_hint.confidence)
            topic_hint = self._topic_hints.get(normalized)
            if topic_hint:
                self._add_hint_vote(votes, topic_hint.language, 1.2 * topic_hint.confidence)
            for regex_hint in regex_by_target.get(normalized, ()):
                self._add_hint_vote(votes, regex_hint.language, 0.82 * regex_hint.confidence)

            targets = aliases_by_target.get(normalized, ())
            for alias, canonical in targets:
                alias_category = infer(canonical).category
                votes[alias_category] += 0.34
                output.setdefault(alias, alias_category)

            decided = pick_winner(calibrate_votes(votes))
            output[language] = decided
            if targets:
                output[targets[0][1]] = decided

        return output

    def _add_hint_vote(
        self, votes: dict[SkillCategory, float], target: str, weight: float
    ) -> None:
        inferred = self._inference.infer(target)
        votes[inferred.category] += weight * max(0.2, inferred.confidence)

    # Read-only accessors

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    @property
    def token_hints(self) -> Mapping[str, WeightedHint]:
        return self._token_hints

    @property
    def topic_hints(self) -> Mapping[str, WeightedHint]:
        return self._topic_hints

    @property
    def regex_hints(self) -> tuple[RegexHint, ...]:
        return self._regex_hints

    @property
    def noise_tokens(self) -> frozenset[str]:
        return self._noise_tokens

    @property
    def hard_noise_tokens(self) -> frozenset[str]:
        return self._hard_noise

    @property
    def license_hints(self) -> Mapping[str, str]:
        return self._license_hints

    @property
    def negative_contexts(self) -> tuple[NegativeContextProfile, ...]:
        return NEGATIVE_CONTEXT_PROFILES

    @property
    def license_profiles(self) -> tuple[LicenseProfile, ...]:
        return LICENSE_PROFILES

    @property
    def category_hints(self) -> Mapping[str, SkillCategory]:
        return self._category_hints

    # Lookups

    def negative_profile(self, tag: str) -> NegativeContextProfile | None:
        return self._negative_by_tag.get(tag)

    def is_context_only(self, language: str) -> bool:
        return language in CONTEXT_ONLY_TAGS

    def noise_penalty(self, token: str) -> float:
        """Penalty in [0, 1] for a token; 0 means the token is clean."""
        normalized = normalize_noise_token(token)
        if not normalized:
            return 1.0
        direct = self._noise_penalties.get(normalized)
        if direct is not None:
            return direct
        if _VERSION_TOKEN.match(normalized):
            return 1.0
        if _PLACEHOLDER_PREFIX.match(normalized):
            return 0.92
        if _TEMP_SEGMENT.search(normalized):
            return 0.95
        if len(normalized) <= 2:
            return 0.26
        return 0.0

    def is_hard_noise(self, token: str) -> bool:
        normalized = normalize_noise_token(token)
        if not normalized:
            return True
        return normalized in self._hard_noise or bool(_VERSION_TOKEN.match(normalized))

    def canonical_language(self, name: str) -> str:
        """Canonical spelling of a language name through the alias table.

        Short all-caps names ("SCSS", "TOML") are kept as written.
        """
        direct = self._aliases.get(normalize_token(name))
        if direct:
            return direct
        if name in VERBATIM_LANGUAGE_NAMES:
            return name
        if len(name) <= 4 and name == name.upper():
            return name
        return title_case_language(name)

    def match_token(self, token: str) -> WeightedHint | None:
        """Best hint for a normalized free-text token.

        Token hints first, then the alias table, then substring and suffix
        heuristics.
        """
        direct = self._token_hints.get(token)
        if direct:
            return direct
        alias = self._aliases.get(token)
        if alias:
            return _tier(alias, ALIAS_FALLBACK_TIER)
        for heuristic in (*SUBSTRING_HEURISTICS, *SUFFIX_HEURISTICS):
            if heuristic.matches(token):
                return heuristic.hint
        return None

    def category_for(self, language: str) -> SkillCategory:
        """Category of a signal's language.

        Taxonomy inference when it is confident, then the expert hint map, then
        substring guesses, finally backend.
        """
        canonical = self.canonical_language(language)
        inferred = self._inference.infer(canonical)
        if inferred.confidence >= CATEGORY_HINT_MIN_CONFIDENCE:
            return inferred.category
        hinted = self._category_hints.get(canonical)
        if hinted:
            return hinted
        key = normalize_token(canonical)
        for category, needles in CATEGORY_SUBSTRING_HINTS:
            if any(needle in key for needle in needles):
                return category
        return BACKEND


def _compile_regex_hint(pattern: str, language: str, tier: tuple[float, float, float]) -> RegexHint:
    score, confidence, specificity = tier
    try:
        compiled = re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        raise KnowledgeBaseError(
            "regex_hints",
            "Generated regex hint does not compile",
            {"language": language, "error": str(exc)},
        ) from exc
    return RegexHint(compiled, language, score, confidence, specificity)


def _check_hint(table: str, key: str, hint: WeightedHint | RegexHint) -> None:
    if not hint.language:
        raise KnowledgeBaseError(table, "Hint without a target language", {"key": key})
    for value in (hint.score, hint.confidence, hint.specificity):
        if not 0.0 <= value <= 1.0:
            raise KnowledgeBaseError(
                table, "Hint weight out of range", {"key": key, "language": hint.language}
            )


_knowledge_base: EvidenceKnowledgeBase | None = None
_knowledge_base_lock = threading.Lock()


def get_knowledge_base() -> EvidenceKnowledgeBase:
    """Return the process-wide knowledge base, building it exactly once."""
    global _knowledge_base
    if _knowledge_base is None:
        with _knowledge_base_lock:
            if _knowledge_base is None:
                with KNOWLEDGE_BASE_BUILD_DURATION.time():
                    knowledge_base = EvidenceKnowledgeBase()
                logger.info(
                    "knowledge_base_built",
                    token_hints=len(knowledge_base.token_hints),
                    topic_hints=len(knowledge_base.topic_hints),
                    regex_hints=len(knowledge_base.regex_hints),
                    aliases=len(knowledge_base.aliases),
                )
                _knowledge_base = knowledge_base
    return _knowledge_base
