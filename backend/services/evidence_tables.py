"""Curated weak-signal tables for the evidence knowledge base.

Everything here is hand-tuned and overlaid on top of the defaults the
knowledge base derives from the taxonomy: curated aliases and token/topic
hints replace colliding generated keys, curated regex hints are appended.
Noise tokens, license hints and negative-context archetypes only exist here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from services.skill_taxonomy import (
    AI_ML,
    BACKEND,
    DATABASE,
    DEVOPS,
    FRONTEND,
    INFRASTRUCTURE,
    SkillCategory,
)


@dataclass(frozen=True)
class WeightedHint:
    """Repository-independent association between a token and a language."""

    language: str
    score: float
    confidence: float
    specificity: float

    @property
    def power(self) -> float:
        return self.score * self.confidence


@dataclass(frozen=True)
class RegexHint:
    """Pattern over free text implying a language."""

    pattern: re.Pattern[str]
    language: str
    score: float
    confidence: float
    specificity: float

    @property
    def power(self) -> float:
        return self.score * self.confidence


class NoiseSeverity(str, Enum):
    """How strongly a filler token is distrusted."""

    HARD = "hard"
    SOFT = "soft"
    CONTEXTUAL = "contextual"


HARD = NoiseSeverity.HARD
SOFT = NoiseSeverity.SOFT
CONTEXTUAL = NoiseSeverity.CONTEXTUAL


@dataclass(frozen=True)
class NoiseTokenProfile:
    token: str
    severity: NoiseSeverity
    penalty: float
    aliases: tuple[str, ...] = ()


class ContextSeverity(str, Enum):
    """Severity tier of a negative-context archetype."""

    CRITICAL = "critical"
    HIGH = "high"
    MODERATE = "moderate"
    LOW = "low"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class NegativeContextProfile:
    """Regex archetype detector for repositories that weaken skill evidence."""

    tag: str
    penalty: float
    severity: ContextSeverity
    reason: str
    patterns: tuple[re.Pattern[str], ...]
    affects_categories: frozenset[SkillCategory] | None = None

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)

    def affects(self, category: SkillCategory) -> bool:
        """Whether the archetype weighs on skills of the given category."""
        return self.affects_categories is None or category in self.affects_categories


@dataclass(frozen=True)
class LicenseLanguageHint:
    language: str
    weight: float
    reason: str


@dataclass(frozen=True)
class LicenseProfile:
    """License id with the languages whose ecosystems favor it, strongest first."""

    license: str
    aliases: tuple[str, ...]
    language_hints: tuple[LicenseLanguageHint, ...]
    ecosystem_marker: str | None = None
    era: str | None = None

    @property
    def primary_language(self) -> str | None:
        return self.language_hints[0].language if self.language_hints else None


@dataclass(frozen=True)
class TokenHeuristic:
    """Fallback rule for tokens no hint table knows.

    ``suffix`` rules need the token to end with (and differ from) a needle,
    ``prefix`` rules to start with one, ``contains`` rules to contain one.
    """

    mode: str
    needles: tuple[str, ...]
    hint: WeightedHint

    def matches(self, token: str) -> bool:
        if self.mode == "suffix":
            return any(token.endswith(n) and token != n for n in self.needles)
        if self.mode == "prefix":
            return any(token.startswith(n) for n in self.needles)
        return any(n in token for n in self.needles)


def _hint(language: str, score: float, confidence: float, specificity: float) -> WeightedHint:
    return WeightedHint(language, score, confidence, specificity)


def _regex(
    pattern: str, language: str, score: float, confidence: float, specificity: float
) -> RegexHint:
    return RegexHint(re.compile(pattern, re.IGNORECASE), language, score, confidence, specificity)


def _noise(
    token: str, severity: NoiseSeverity, penalty: float, aliases: str = ""
) -> NoiseTokenProfile:
    return NoiseTokenProfile(token, severity, penalty, tuple(aliases.split()))


def _negative(
    tag: str,
    penalty: float,
    severity: ContextSeverity,
    reason: str,
    patterns: tuple[str, ...],
    affects: tuple[SkillCategory, ...] | None = None,
) -> NegativeContextProfile:
    return NegativeContextProfile(
        tag=tag,
        penalty=penalty,
        severity=severity,
        reason=reason,
        patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns),
        affects_categories=frozenset(affects) if affects else None,
    )


def _heuristic(mode: str, needles: str, hint: WeightedHint) -> TokenHeuristic:
    return TokenHeuristic(mode, tuple(needles.split()), hint)


# Context tags emitted from repository flags
FORKED_REPOSITORY_TAG = "ForkedRepository"
INACTIVE_REPOSITORY_TAG = "InactiveRepository"

ALIAS_OVERRIDES: dict[str, str] = {
    "js": "JavaScript",
    "javascript": "JavaScript",
    "node": "JavaScript",
    "nodejs": "JavaScript",
    "express": "JavaScript",
    "koa": "JavaScript",
    "hapi": "JavaScript",
    "denojs": "TypeScript",
    "ts": "TypeScript",
    "typescript": "TypeScript",
    "deno": "TypeScript",
    "bun": "TypeScript",
    "nest": "TypeScript",
    "nestjs": "TypeScript",
    "react": "TypeScript",
    "next": "TypeScript",
    "nextjs": "TypeScript",
    "tsc": "TypeScript",
    "vue": "Vue",
    "vuejs": "Vue",
    "nuxt": "Vue",
    "nuxtjs": "Vue",
    "svelte": "Svelte",
    "astro": "Astro",
    "angular": "TypeScript",
    "angularjs": "TypeScript",
    "solidjs": "Solid",
    "solid": "Solid",
    "html": "HTML",
    "css": "CSS",
    "scss": "SCSS",
    "sass": "Sass",
    "less": "Less",
    "stylus": "Stylus",
    "tailwind": "CSS",
    "postcss": "CSS",
    "py": "Python",
    "python": "Python",
    "django": "Python",
    "flask": "Python",
    "fastapi": "Python",
    "pandas": "Python",
    "numpy": "Python",
    "pydantic": "Python",
    "poetry": "Python",
    "uv": "Python",
    "pip": "Python",
    "jupyter": "Jupyter",
    "ipynb": "Jupyter",
    "pytorch": "Python",
    "tensorflow": "Python",
    "sklearn": "Python",
    "xgboost": "Python",
    "airflow": "Python",
    "spark": "Python",
    "go": "Go",
    "golang": "Go",
    "gin": "Go",
    "fiber": "Go",
    "grpc": "Go",
    "echo": "Go",
    "rust": "Rust",
    "cargo": "Rust",
    "tokio": "Rust",
    "axum": "Rust",
    "actix": "Rust",
    "bevy": "Rust",
    "java": "Java",
    "spring": "Java",
    "kotlin": "Kotlin",
    "gradle": "Java",
    "maven": "Java",
    "quarkus": "Java",
    "csharp": "C#",
    "dotnet": "C#",
    "aspnet": "C#",
    "net": "C#",
    "cs": "C#",
    "cpp": "C++",
    "c++": "C++",
    "cmake": "C++",
    "c": "C",
    "ruby": "Ruby",
    "rails": "Ruby",
    "ror": "Ruby",
    "php": "PHP",
    "laravel": "PHP",
    "symfony": "PHP",
    "swift": "Swift",
    "ios": "Swift",
    "dart": "Dart",
    "flutter": "Dart",
    "sql": "SQL",
    "postgres": "PostgreSQL",
    "postgresql": "PostgreSQL",
    "mysql": "MySQL",
    "sqlite": "SQLite",
    "mongodb": "MongoDB",
    "mongo": "MongoDB",
    "redis": "Redis",
    "prisma": "SQL",
    "orm": "SQL",
    "clickhouse": "ClickHouse",
    "cassandra": "Cassandra",
    "dynamodb": "DynamoDB",
    "docker": "Dockerfile",
    "dockerfile": "Dockerfile",
    "compose": "YAML",
    "kubernetes": "Kubernetes",
    "k8s": "Kubernetes",
    "helm": "Helm",
    "terraform": "Terraform",
    "hcl": "HCL",
    "ansible": "Ansible",
    "pulumi": "Pulumi",
    "bicep": "Bicep",
    "nix": "Nix",
    "bash": "Bash",
    "shell": "Shell",
    "sh": "Shell",
    "zsh": "Shell",
    "powershell": "PowerShell",
    "ps1": "PowerShell",
    "make": "Makefile",
    "makefile": "Makefile",
    "yaml": "YAML",
    "yml": "YAML",
    "githubactions": "YAML",
    "cuda": "CUDA",
    "triton": "Python",
    "llm": "Python",
    "rag": "Python",
    "ml": "Python",
    "ai": "Python",
    "r": "R",
    "matlab": "Python",
}

TOKEN_HINT_OVERRIDES: dict[str, WeightedHint] = {
    "nextjs": _hint("TypeScript", 0.24, 0.8, 0.9),
    "vite": _hint("TypeScript", 0.2, 0.74, 0.72),
    "webpack": _hint("JavaScript", 0.19, 0.68, 0.68),
    "rollup": _hint("JavaScript", 0.19, 0.68, 0.68),
    "turborepo": _hint("TypeScript", 0.22, 0.76, 0.8),
    "nx": _hint("TypeScript", 0.12, 0.48, 0.4),
    "django": _hint("Python", 0.25, 0.82, 0.92),
    "flask": _hint("Python", 0.22, 0.78, 0.86),
    "fastapi": _hint("Python", 0.25, 0.84, 0.94),
    "pydantic": _hint("Python", 0.22, 0.76, 0.82),
    "celery": _hint("Python", 0.2, 0.7, 0.72),
    "airflow": _hint("Python", 0.22, 0.72, 0.78),
    "springboot": _hint("Java", 0.26, 0.84, 0.94),
    "spring": _hint("Java", 0.23, 0.8, 0.86),
    "quarkus": _hint("Java", 0.22, 0.74, 0.78),
    "dotnet": _hint("C#", 0.24, 0.82, 0.88),
    "aspnet": _hint("C#", 0.24, 0.82, 0.9),
    "blazor": _hint("C#", 0.22, 0.76, 0.8),
    "rails": _hint("Ruby", 0.24, 0.82, 0.9),
    "laravel": _hint("PHP", 0.24, 0.82, 0.9),
    "symfony": _hint("PHP", 0.22, 0.76, 0.8),
    "postgres": _hint("PostgreSQL", 0.22, 0.78, 0.84),
    "mysql": _hint("MySQL", 0.2, 0.74, 0.78),
    "mongodb": _hint("MongoDB", 0.22, 0.78, 0.84),
    "redis": _hint("Redis", 0.22, 0.78, 0.84),
    "sqlite": _hint("SQLite", 0.2, 0.72, 0.76),
    "prisma": _hint("SQL", 0.16, 0.62, 0.6),
    "docker": _hint("Dockerfile", 0.21, 0.78, 0.8),
    "kubernetes": _hint("Kubernetes", 0.24, 0.84, 0.92),
    "helm": _hint("Helm", 0.24, 0.84, 0.92),
    "terraform": _hint("Terraform", 0.24, 0.84, 0.92),
    "ansible": _hint("Ansible", 0.23, 0.8, 0.88),
    "pulumi": _hint("Pulumi", 0.23, 0.8, 0.88),
    "bicep": _hint("Bicep", 0.23, 0.8, 0.88),
    "nomad": _hint("HCL", 0.2, 0.72, 0.76),
    "githubactions": _hint("YAML", 0.19, 0.66, 0.66),
    "githubaction": _hint("YAML", 0.19, 0.66, 0.66),
    "workflow": _hint("YAML", 0.12, 0.45, 0.35),
    "pytorch": _hint("Python", 0.24, 0.82, 0.9),
    "tensorflow": _hint("Python", 0.24, 0.82, 0.9),
    "huggingface": _hint("Python", 0.22, 0.74, 0.78),
    "langchain": _hint("Python", 0.22, 0.74, 0.78),
    "llamaindex": _hint("Python", 0.22, 0.74, 0.78),
    "triton": _hint("Python", 0.2, 0.68, 0.7),
    "onnx": _hint("Python", 0.18, 0.64, 0.62),
    "cuda": _hint("CUDA", 0.24, 0.82, 0.9),
}

# Topics are curated by repository owners and trusted above free text
TOPIC_HINT_OVERRIDES: dict[str, WeightedHint] = {
    "typescript": _hint("TypeScript", 0.3, 0.84, 0.94),
    "javascript": _hint("JavaScript", 0.28, 0.8, 0.9),
    "nodejs": _hint("JavaScript", 0.28, 0.8, 0.9),
    "react": _hint("TypeScript", 0.24, 0.74, 0.76),
    "nextjs": _hint("TypeScript", 0.28, 0.82, 0.92),
    "vue": _hint("Vue", 0.28, 0.8, 0.9),
    "svelte": _hint("Svelte", 0.28, 0.8, 0.9),
    "astro": _hint("Astro", 0.28, 0.8, 0.9),
    "frontend": _hint("TypeScript", 0.14, 0.5, 0.32),
    "python": _hint("Python", 0.3, 0.84, 0.94),
    "fastapi": _hint("Python", 0.29, 0.83, 0.92),
    "django": _hint("Python", 0.29, 0.83, 0.92),
    "flask": _hint("Python", 0.27, 0.78, 0.82),
    "backend": _hint("Python", 0.14, 0.5, 0.32),
    "go": _hint("Go", 0.3, 0.84, 0.94),
    "golang": _hint("Go", 0.3, 0.84, 0.94),
    "rust": _hint("Rust", 0.3, 0.84, 0.94),
    "java": _hint("Java", 0.3, 0.84, 0.94),
    "kotlin": _hint("Kotlin", 0.3, 0.84, 0.94),
    "csharp": _hint("C#", 0.3, 0.84, 0.94),
    "dotnet": _hint("C#", 0.28, 0.8, 0.88),
    "ruby": _hint("Ruby", 0.3, 0.84, 0.94),
    "rails": _hint("Ruby", 0.28, 0.8, 0.88),
    "php": _hint("PHP", 0.3, 0.84, 0.94),
    "laravel": _hint("PHP", 0.28, 0.8, 0.88),
    "swift": _hint("Swift", 0.3, 0.84, 0.94),
    "dart": _hint("Dart", 0.3, 0.84, 0.94),
    "flutter": _hint("Dart", 0.28, 0.8, 0.88),
    "devops": _hint("Shell", 0.16, 0.52, 0.36),
    "infra": _hint("Terraform", 0.18, 0.58, 0.46),
    "infrastructure": _hint("Terraform", 0.18, 0.58, 0.46),
    "kubernetes": _hint("Kubernetes", 0.3, 0.84, 0.94),
    "k8s": _hint("Kubernetes", 0.3, 0.84, 0.94),
    "helm": _hint("Helm", 0.3, 0.84, 0.94),
    "terraform": _hint("Terraform", 0.3, 0.84, 0.94),
    "ansible": _hint("Ansible", 0.3, 0.84, 0.94),
    "pulumi": _hint("Pulumi", 0.3, 0.84, 0.94),
    "bicep": _hint("Bicep", 0.3, 0.84, 0.94),
    "docker": _hint("Dockerfile", 0.28, 0.8, 0.9),
    "postgresql": _hint("PostgreSQL", 0.29, 0.83, 0.92),
    "mysql": _hint("MySQL", 0.29, 0.83, 0.92),
    "sqlite": _hint("SQLite", 0.27, 0.78, 0.82),
    "mongodb": _hint("MongoDB", 0.29, 0.83, 0.92),
    "redis": _hint("Redis", 0.29, 0.83, 0.92),
    "sql": _hint("SQL", 0.2, 0.62, 0.58),
    "database": _hint("SQL", 0.17, 0.56, 0.44),
    "ai": _hint("Python", 0.18, 0.6, 0.48),
    "ml": _hint("Python", 0.19, 0.62, 0.52),
    "machinelearning": _hint("Python", 0.21, 0.66, 0.58),
    "deeplearning": _hint("Python", 0.22, 0.68, 0.64),
    "llm": _hint("Python", 0.21, 0.66, 0.6),
    "rag": _hint("Python", 0.2, 0.64, 0.58),
    "jupyter": _hint("Jupyter", 0.28, 0.8, 0.88),
    "cuda": _hint("CUDA", 0.28, 0.8, 0.88),
}

REGEX_HINT_OVERRIDES: tuple[RegexHint, ...] = (
    _regex(r"\b(next(?:\.js)?|nextjs)\b", "TypeScript", 0.22, 0.78, 0.84),
    _regex(r"\b(react|reactjs|jsx|tsx)\b", "TypeScript", 0.18, 0.66, 0.64),
    _regex(r"\b(vue|nuxt)\b", "Vue", 0.2, 0.72, 0.74),
    _regex(r"\b(svelte|sveltekit)\b", "Svelte", 0.2, 0.72, 0.74),
    _regex(r"\b(astro)\b", "Astro", 0.2, 0.72, 0.74),
    _regex(r"\b(typescript|type-script)\b", "TypeScript", 0.2, 0.74, 0.8),
    _regex(r"\b(javascript|node(?:\.js)?|express|koa|bun|deno)\b", "JavaScript", 0.16, 0.62, 0.56),
    _regex(
        r"\b(python|django|flask|fastapi|pydantic|poetry|pandas|numpy|scikit|sklearn)\b",
        "Python",
        0.21,
        0.76,
        0.82,
    ),
    _regex(r"\b(golang|\bgo\b|gin|fiber|goroutine|grpc)\b", "Go", 0.2, 0.72, 0.74),
    _regex(r"\b(rust|tokio|axum|actix|cargo)\b", "Rust", 0.21, 0.76, 0.84),
    _regex(r"\b(java|spring(?:boot)?|maven|gradle|quarkus)\b", "Java", 0.2, 0.72, 0.76),
    _regex(r"\b(kotlin)\b", "Kotlin", 0.22, 0.78, 0.88),
    _regex(r"\b(c\#|csharp|dotnet|asp\.?net|blazor)\b", "C#", 0.22, 0.78, 0.86),
    _regex(r"\b(c\+\+|cpp|cmake)\b", "C++", 0.2, 0.72, 0.8),
    _regex(r"\b\bc\b\b", "C", 0.08, 0.42, 0.2),
    _regex(r"\b(ruby|rails)\b", "Ruby", 0.2, 0.72, 0.78),
    _regex(r"\b(php|laravel|symfony)\b", "PHP", 0.2, 0.72, 0.78),
    _regex(r"\b(swift|ios|xcode)\b", "Swift", 0.2, 0.72, 0.78),
    _regex(r"\b(dart|flutter)\b", "Dart", 0.2, 0.72, 0.78),
    _regex(r"\b(postgres|postgresql)\b", "PostgreSQL", 0.2, 0.72, 0.8),
    _regex(r"\b(mysql|mariadb)\b", "MySQL", 0.18, 0.68, 0.74),
    _regex(r"\b(sqlite)\b", "SQLite", 0.18, 0.68, 0.74),
    _regex(r"\b(mongo|mongodb|mongoose)\b", "MongoDB", 0.2, 0.72, 0.8),
    _regex(r"\b(redis|cache)\b", "Redis", 0.16, 0.6, 0.56),
    _regex(r"\b(sql|orm|migration|schema)\b", "SQL", 0.12, 0.5, 0.38),
    _regex(r"\b(docker|dockerfile|container)\b", "Dockerfile", 0.2, 0.74, 0.82),
    _regex(r"\b(kubernetes|k8s|kubectl)\b", "Kubernetes", 0.22, 0.78, 0.88),
    _regex(r"\b(helm|chart)\b", "Helm", 0.22, 0.78, 0.88),
    _regex(r"\b(terraform|\.tf\b|hcl)\b", "Terraform", 0.22, 0.78, 0.88),
    _regex(r"\b(ansible|playbook)\b", "Ansible", 0.22, 0.78, 0.88),
    _regex(r"\b(pulumi)\b", "Pulumi", 0.22, 0.78, 0.88),
    _regex(r"\b(bicep)\b", "Bicep", 0.22, 0.78, 0.88),
    _regex(r"\b(github actions|workflow|ci\/cd|pipeline)\b", "YAML", 0.14, 0.56, 0.46),
    _regex(r"\b(shell|bash|zsh|powershell|pwsh|makefile|nix)\b", "Shell", 0.14, 0.54, 0.42),
    _regex(
        r"\b(machine learning|deep learning|computer vision|nlp|llm|rag|inference|training)\b",
        "Python",
        0.18,
        0.62,
        0.52,
    ),
    _regex(r"\b(jupyter|notebook|ipynb)\b", "Jupyter", 0.2, 0.72, 0.78),
    _regex(r"\b(cuda|gpu|kernel)\b", "CUDA", 0.18, 0.62, 0.56),
)

# Fallback heuristics, tried in order after the hint and alias tables.
# Suffixes short enough to end ordinary words ("users", "docs", "algo") are left out.
SUFFIX_HEURISTICS: tuple[TokenHeuristic, ...] = (
    _heuristic("suffix", "swift", _hint("Swift", 0.12, 0.5, 0.36)),
    _heuristic("suffix", "scala", _hint("Scala", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "proto", _hint("Protobuf", 0.1, 0.46, 0.32)),
    _heuristic("suffix", "java", _hint("Java", 0.12, 0.5, 0.36)),
    _heuristic("suffix", "dart", _hint("Dart", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "cljs clj", _hint("Clojure", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "yaml yml", _hint("YAML", 0.09, 0.44, 0.28)),
    _heuristic("suffix", "json", _hint("JSON", 0.08, 0.42, 0.26)),
    _heuristic("suffix", "toml", _hint("TOML", 0.09, 0.44, 0.28)),
    _heuristic("suffix", "php", _hint("PHP", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "cpp cxx", _hint("C++", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "exs", _hint("Elixir", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "lua", _hint("Lua", 0.1, 0.46, 0.32)),
    _heuristic("suffix", "ps1", _hint("PowerShell", 0.1, 0.46, 0.32)),
    _heuristic("suffix", "sql", _hint("SQL", 0.1, 0.46, 0.32)),
    _heuristic("suffix", "xml", _hint("XML", 0.08, 0.42, 0.26)),
    _heuristic("suffix", "js", _hint("JavaScript", 0.13, 0.52, 0.38)),
    _heuristic("suffix", "py", _hint("Python", 0.12, 0.5, 0.36)),
    _heuristic("suffix", "rb", _hint("Ruby", 0.11, 0.48, 0.34)),
    _heuristic("suffix", "kt", _hint("Kotlin", 0.12, 0.5, 0.36)),
    _heuristic("suffix", "jl", _hint("Julia", 0.1, 0.46, 0.32)),
    _heuristic("suffix", "tf", _hint("Terraform", 0.11, 0.48, 0.34)),
)

SUBSTRING_HEURISTICS: tuple[TokenHeuristic, ...] = (
    _heuristic("contains", "k8s kube", _hint("Kubernetes", 0.14, 0.58, 0.5)),
    _heuristic("contains", "terraform", _hint("Terraform", 0.14, 0.58, 0.52)),
    _heuristic("contains", "python", _hint("Python", 0.13, 0.56, 0.44)),
    _heuristic("contains", "rust", _hint("Rust", 0.13, 0.56, 0.44)),
    _heuristic("contains", "typescript", _hint("TypeScript", 0.13, 0.56, 0.44)),
    _heuristic("contains", "javascript", _hint("JavaScript", 0.13, 0.56, 0.44)),
    _heuristic("contains", "golang", _hint("Go", 0.13, 0.56, 0.46)),
    _heuristic("contains", "docker", _hint("Dockerfile", 0.14, 0.58, 0.5)),
    _heuristic("contains", "react", _hint("TypeScript", 0.13, 0.54, 0.42)),
    _heuristic("contains", "vue", _hint("Vue", 0.13, 0.54, 0.42)),
    _heuristic("contains", "svelte", _hint("Svelte", 0.13, 0.54, 0.42)),
    _heuristic("contains", "angular", _hint("TypeScript", 0.13, 0.54, 0.42)),
    _heuristic("prefix", "next", _hint("TypeScript", 0.12, 0.52, 0.38)),
    _heuristic("contains", "django flask fastapi", _hint("Python", 0.14, 0.58, 0.5)),
    _heuristic("contains", "spring hibernate", _hint("Java", 0.14, 0.58, 0.5)),
    _heuristic("contains", "rails", _hint("Ruby", 0.14, 0.58, 0.52)),
    _heuristic("contains", "laravel symfony", _hint("PHP", 0.14, 0.58, 0.5)),
    _heuristic("contains", "dotnet aspnet", _hint("C#", 0.14, 0.58, 0.5)),
    _heuristic("contains", "postgres", _hint("PostgreSQL", 0.13, 0.56, 0.48)),
    _heuristic("contains", "mysql", _hint("MySQL", 0.13, 0.56, 0.48)),
    _heuristic("contains", "mongo", _hint("MongoDB", 0.13, 0.56, 0.48)),
    _heuristic("contains", "redis", _hint("Redis", 0.13, 0.56, 0.48)),
    _heuristic("contains", "ansible", _hint("Ansible", 0.14, 0.58, 0.52)),
    _heuristic("contains", "puppet", _hint("Puppet", 0.13, 0.56, 0.5)),
    _heuristic("contains", "chef", _hint("Ruby", 0.12, 0.54, 0.44)),
    _heuristic("prefix", "helm", _hint("Helm", 0.14, 0.58, 0.52)),
    _heuristic("contains", "pulumi", _hint("Pulumi", 0.14, 0.58, 0.52)),
    _heuristic("contains", "jupyter notebook", _hint("Jupyter", 0.13, 0.56, 0.48)),
    _heuristic("contains", "pytorch torch", _hint("Python", 0.14, 0.58, 0.52)),
    _heuristic("contains", "tensorflow", _hint("Python", 0.14, 0.58, 0.52)),
    _heuristic("contains", "cuda gpu", _hint("CUDA", 0.12, 0.54, 0.46)),
    _heuristic("contains", "bash shell", _hint("Shell", 0.11, 0.52, 0.4)),
    _heuristic("contains", "powershell pwsh", _hint("PowerShell", 0.12, 0.54, 0.44)),
    _heuristic("contains", "graphql gql", _hint("GraphQL", 0.12, 0.54, 0.44)),
    _heuristic("contains", "grpc", _hint("Protobuf", 0.12, 0.54, 0.44)),
    _heuristic("contains", "webpack rollup vite", _hint("JavaScript", 0.11, 0.52, 0.38)),
    _heuristic("contains", "tailwind postcss", _hint("CSS", 0.11, 0.52, 0.38)),
    _heuristic("contains", "sass scss", _hint("SCSS", 0.11, 0.52, 0.38)),
)

# Filler words. Hard tokens (or penalty >= 0.95) never match a language;
# the rest discount whatever they match.
NOISE_TOKEN_PROFILES: tuple[NoiseTokenProfile, ...] = (
    _noise("repo", HARD, 1.0, "repository repos repositories"),
    _noise("project", HARD, 1.0, "projects proj"),
    _noise("service", HARD, 0.98, "services svc"),
    _noise("app", HARD, 0.98, "apps application applications"),
    _noise("api", SOFT, 0.64, "apis endpoint endpoints"),
    _noise("web", SOFT, 0.54, "website site frontend-app"),
    _noise("server", SOFT, 0.6, "servers srv"),
    _noise("client", SOFT, 0.58, "clients"),
    _noise("tool", HARD, 0.94, "tools utility utilities"),
    _noise("code", HARD, 0.92, "source src"),
    _noise("sample", HARD, 0.95, "samples"),
    _noise("internal", SOFT, 0.52, "private-internal"),
    _noise("personal", SOFT, 0.56, "personal-use"),
    _noise("private", SOFT, 0.58, "public shared"),
    _noise("production", CONTEXTUAL, 0.36, "prod"),
    _noise("development", CONTEXTUAL, 0.34, "dev"),
    _noise("test", HARD, 0.88, "tests testing spec specs"),
    _noise("tmp", HARD, 1.0, "temp temporary"),
    _noise("misc", HARD, 1.0, "miscellaneous other others"),
    _noise("work", SOFT, 0.5, "workspace working"),
    _noise("note", HARD, 0.9, "notes"),
    _noise("study", HARD, 0.86, "learn learning tutorial tutorials"),
    _noise("playground", HARD, 0.96, "sandbox experiment experiments experimental"),
    _noise("starter", HARD, 0.96, "starterkit starter-kit template templates boilerplate scaffold"),
    _noise("example", HARD, 0.96, "examples demo demos showcase"),
    _noise("proof", HARD, 0.94, "poc prototype prototypes"),
    _noise("archive", HARD, 0.98, "archived legacy deprecated"),
    _noise("old", HARD, 0.92, "new latest"),
    _noise("build", CONTEXTUAL, 0.34, "dist artifact artifacts"),
    _noise("docs", SOFT, 0.58, "doc documentation"),
    _noise("config", SOFT, 0.52, "configs configuration settings"),
    _noise("infra", CONTEXTUAL, 0.22, "infrastructure"),
    _noise("module", SOFT, 0.44, "modules package packages"),
    _noise("core", CONTEXTUAL, 0.28, "base common shared"),
    _noise("platform", CONTEXTUAL, 0.28, "system systems"),
    _noise("engine", CONTEXTUAL, 0.26, "runtime"),
    _noise("manager", CONTEXTUAL, 0.28, "management"),
    _noise("service-api", CONTEXTUAL, 0.24, "api-service"),
    _noise("backend-api", CONTEXTUAL, 0.24, "api-backend"),
    _noise("frontend-app", CONTEXTUAL, 0.2, "app-frontend"),
    _noise("data", CONTEXTUAL, 0.32, "dataset datasets"),
    _noise("assets", SOFT, 0.62, "asset static"),
    _noise("scripts", SOFT, 0.58, "script"),
    _noise("helper", SOFT, 0.56, "helpers utils util"),
    _noise("v1", HARD, 1.0, "v2 v3 v4 v5 v6 v7 v8 v9 v10"),
)

# License id or alias -> languages whose ecosystems commonly pick it
LICENSE_PROFILES: tuple[LicenseProfile, ...] = (
    LicenseProfile(
        license="MIT",
        aliases=("mit-license", "expat"),
        language_hints=(
            LicenseLanguageHint("TypeScript", 0.38, "Modern JS ecosystem default"),
            LicenseLanguageHint("JavaScript", 0.32, "NPM ecosystem preference"),
            LicenseLanguageHint("Python", 0.24, "PyPI common choice"),
            LicenseLanguageHint("Ruby", 0.18, "Ruby gems common"),
        ),
        ecosystem_marker="permissive-open-source",
        era="2000s-present",
    ),
    LicenseProfile(
        license="Apache-2.0",
        aliases=("apache license 2.0", "apache", "asl", "apache-2"),
        language_hints=(
            LicenseLanguageHint("Java", 0.52, "ASF ecosystem standard"),
            LicenseLanguageHint("Scala", 0.42, "JVM Scala projects"),
            LicenseLanguageHint("Kotlin", 0.38, "Android/JVM ecosystem"),
            LicenseLanguageHint("Go", 0.32, "Cloud-native tools preference"),
            LicenseLanguageHint("Rust", 0.24, "Systems projects"),
        ),
        ecosystem_marker="enterprise-friendly",
        era="2004-present",
    ),
    LicenseProfile(
        license="GPL-3.0",
        aliases=("gnu general public license v3", "gpl3", "gplv3", "gnu gpl"),
        language_hints=(
            LicenseLanguageHint("C", 0.48, "GNU project heritage"),
            LicenseLanguageHint("C++", 0.42, "GNU toolchain ecosystem"),
            LicenseLanguageHint("Python", 0.28, "FSF-aligned projects"),
            LicenseLanguageHint("Bash", 0.24, "GNU utilities"),
        ),
        ecosystem_marker="copyleft-strong",
        era="2007-present",
    ),
    LicenseProfile(
        license="GPL-2.0",
        aliases=("gnu general public license v2", "gpl2", "gplv2"),
        language_hints=(
            LicenseLanguageHint("C", 0.56, "Linux kernel era"),
            LicenseLanguageHint("C++", 0.38, "Legacy GNU projects"),
        ),
        ecosystem_marker="copyleft-classical",
        era="1991-present",
    ),
    LicenseProfile(
        license="LGPL-2.1",
        aliases=("lgpl", "gnu lesser general public license", "lesser gpl"),
        language_hints=(
            LicenseLanguageHint("C", 0.52, "Library-focused GPL variant"),
            LicenseLanguageHint("C++", 0.46, "Shared library projects"),
        ),
        ecosystem_marker="copyleft-library",
        era="1999-present",
    ),
    LicenseProfile(
        license="BSD-3-Clause",
        aliases=("bsd 3-clause", "modified bsd", "new bsd"),
        language_hints=(
            LicenseLanguageHint("C", 0.48, "BSD Unix heritage"),
            LicenseLanguageHint("C++", 0.38, "Systems programming tradition"),
            LicenseLanguageHint("Go", 0.24, "Go standard library influence"),
        ),
        ecosystem_marker="permissive-academic",
        era="1999-present",
    ),
    LicenseProfile(
        license="BSD-2-Clause",
        aliases=("bsd 2-clause", "simplified bsd", "freebsd license"),
        language_hints=(
            LicenseLanguageHint("C", 0.52, "FreeBSD ecosystem"),
            LicenseLanguageHint("C++", 0.42, "Minimalist BSD projects"),
        ),
        ecosystem_marker="permissive-minimal",
        era="1999-present",
    ),
    LicenseProfile(
        license="MPL-2.0",
        aliases=("mozilla public license", "mpl", "mpl2"),
        language_hints=(
            LicenseLanguageHint("Rust", 0.58, "Mozilla Rust projects"),
            LicenseLanguageHint("JavaScript", 0.32, "Firefox/Mozilla web tech"),
            LicenseLanguageHint("C++", 0.24, "Firefox legacy components"),
        ),
        ecosystem_marker="copyleft-file-level",
        era="2012-present",
    ),
    LicenseProfile(
        license="ISC",
        aliases=("isc license",),
        language_hints=(
            LicenseLanguageHint("JavaScript", 0.46, "NPM alternative to MIT"),
            LicenseLanguageHint("TypeScript", 0.38, "Node.js ecosystem"),
        ),
        ecosystem_marker="permissive-simple",
        era="2000s-present",
    ),
    LicenseProfile(
        license="Unlicense",
        aliases=("unlicense", "public domain"),
        language_hints=(
            LicenseLanguageHint("JavaScript", 0.28, "Permissive JS projects"),
            LicenseLanguageHint("Python", 0.24, "Public domain Python"),
            LicenseLanguageHint("C", 0.22, "Single-file libraries"),
        ),
        ecosystem_marker="public-domain",
        era="2010-present",
    ),
    LicenseProfile(
        license="CC0-1.0",
        aliases=("cc0", "creative commons zero", "cc zero"),
        language_hints=(
            LicenseLanguageHint("Python", 0.24, "Data/documentation projects"),
            LicenseLanguageHint("JavaScript", 0.22, "Public datasets"),
        ),
        ecosystem_marker="public-domain-data",
        era="2009-present",
    ),
    LicenseProfile(
        license="AGPL-3.0",
        aliases=("agpl", "affero gpl", "gnu affero"),
        language_hints=(
            LicenseLanguageHint("Python", 0.42, "Web service copyleft"),
            LicenseLanguageHint("JavaScript", 0.32, "Network service apps"),
            LicenseLanguageHint("Go", 0.24, "Server-side services"),
        ),
        ecosystem_marker="copyleft-network",
        era="2007-present",
    ),
    LicenseProfile(
        license="EPL-2.0",
        aliases=("eclipse public license", "epl"),
        language_hints=(
            LicenseLanguageHint("Java", 0.56, "Eclipse ecosystem"),
            LicenseLanguageHint("Scala", 0.32, "JVM tooling"),
        ),
        ecosystem_marker="copyleft-weak-enterprise",
        era="2017-present",
    ),
    LicenseProfile(
        license="EUPL-1.2",
        aliases=("european union public license", "eupl"),
        language_hints=(
            LicenseLanguageHint("Java", 0.38, "EU government projects"),
            LicenseLanguageHint("Python", 0.28, "EU public sector"),
        ),
        ecosystem_marker="copyleft-european",
        era="2017-present",
    ),
    LicenseProfile(
        license="WTFPL",
        aliases=("do what the fuck you want to public license", "wtf public license"),
        language_hints=(
            LicenseLanguageHint("C", 0.32, "Humorous permissive projects"),
            LicenseLanguageHint("Python", 0.28, "Small utilities"),
        ),
        ecosystem_marker="permissive-humorous",
        era="2004-present",
    ),
    LicenseProfile(
        license="Zlib",
        aliases=("zlib license",),
        language_hints=(
            LicenseLanguageHint("C", 0.52, "Compression library heritage"),
            LicenseLanguageHint("C++", 0.42, "Game engine libraries"),
        ),
        ecosystem_marker="permissive-game-dev",
        era="1995-present",
    ),
    LicenseProfile(
        license="Artistic-2.0",
        aliases=("artistic license", "perl artistic license"),
        language_hints=(
            LicenseLanguageHint("Perl", 0.72, "Perl community standard"),
            LicenseLanguageHint("Ruby", 0.24, "Perl-influenced projects"),
        ),
        ecosystem_marker="copyleft-artistic",
        era="2000-present",
    ),
    LicenseProfile(
        license="Python-2.0",
        aliases=("python software foundation license", "psf license"),
        language_hints=(
            LicenseLanguageHint("Python", 0.82, "Python core/stdlib"),
        ),
        ecosystem_marker="language-specific-python",
        era="2001-present",
    ),
    LicenseProfile(
        license="Ruby",
        aliases=("ruby license",),
        language_hints=(
            LicenseLanguageHint("Ruby", 0.78, "Ruby language ecosystem"),
        ),
        ecosystem_marker="language-specific-ruby",
        era="1993-present",
    ),
    LicenseProfile(
        license="PHP-3.01",
        aliases=("php license",),
        language_hints=(
            LicenseLanguageHint("PHP", 0.74, "PHP core ecosystem"),
        ),
        ecosystem_marker="language-specific-php",
        era="1999-present",
    ),
    LicenseProfile(
        license="Vim",
        aliases=("vim license", "charityware"),
        language_hints=(
            LicenseLanguageHint("Vim script", 0.68, "Vim plugin ecosystem"),
            LicenseLanguageHint("C", 0.22, "Vim-influenced tools"),
        ),
        ecosystem_marker="charityware",
        era="2002-present",
    ),
    LicenseProfile(
        license="0BSD",
        aliases=("zero-clause bsd", "free public license 1.0.0"),
        language_hints=(
            LicenseLanguageHint("C", 0.42, "Minimal embedded code"),
            LicenseLanguageHint("Rust", 0.32, "Public domain alternative"),
        ),
        ecosystem_marker="permissive-zero-clause",
        era="2006-present",
    ),
    LicenseProfile(
        license="BSL-1.0",
        aliases=("boost software license", "boost license"),
        language_hints=(
            LicenseLanguageHint("C++", 0.72, "Boost library ecosystem"),
        ),
        ecosystem_marker="permissive-cpp",
        era="2003-present",
    ),
    LicenseProfile(
        license="MS-PL",
        aliases=("microsoft public license", "ms public license"),
        language_hints=(
            LicenseLanguageHint("C#", 0.58, "Microsoft OSS projects"),
            LicenseLanguageHint("F#", 0.38, ".NET ecosystem"),
        ),
        ecosystem_marker="permissive-microsoft",
        era="2007-present",
    ),
    LicenseProfile(
        license="MS-RL",
        aliases=("microsoft reciprocal license", "ms reciprocal license"),
        language_hints=(
            LicenseLanguageHint("C#", 0.54, "MS copyleft variant"),
        ),
        ecosystem_marker="copyleft-microsoft",
        era="2007-present",
    ),
    LicenseProfile(
        license="OFL-1.1",
        aliases=("sil open font license", "open font license"),
        language_hints=(
            LicenseLanguageHint("CSS", 0.32, "Font projects"),
            LicenseLanguageHint("JavaScript", 0.24, "Web font tooling"),
        ),
        ecosystem_marker="font-specific",
        era="2007-present",
    ),
    LicenseProfile(
        license="NCL",
        aliases=("non-commercial license",),
        language_hints=(
            LicenseLanguageHint("Python", 0.28, "Research software"),
            LicenseLanguageHint("MATLAB", 0.24, "Academic toolboxes"),
        ),
        ecosystem_marker="non-commercial",
        era="various",
    ),
)

NEGATIVE_CONTEXT_PROFILES: tuple[NegativeContextProfile, ...] = (
    _negative(
        "TemplateRepository",
        penalty=0.42,
        severity=ContextSeverity.HIGH,
        reason="Template/starter repositories signal setup tools rather than production usage",
        patterns=(
            r"\b(template|boilerplate|starter[-\s]?kit|scaffold|cookiecutter|generator)\b",
            r"\b(project[-\s]?template|starter[-\s]?project|template[-\s]?repo)\b",
            r"\b(initialize|init[-\s]?project|bootstrap[-\s]?project)\b",
        ),
    ),
    _negative(
        "ExampleRepository",
        penalty=0.38,
        severity=ContextSeverity.HIGH,
        reason=(
            "Example/demo repositories demonstrate concepts rather than solve production problems"
        ),
        patterns=(
            r"\b(example|examples|sample|samples|demo|demos|showcase)\b",
            r"\b(tutorial|tutorials|walkthrough|guide|learning[-\s]?resource)\b",
            r"\b(code[-\s]?sample|demo[-\s]?app|example[-\s]?project)\b",
            r"\b(getting[-\s]?started|hello[-\s]?world|quick[-\s]?start)\b",
        ),
    ),
    _negative(
        "ExperimentalRepository",
        penalty=0.36,
        severity=ContextSeverity.HIGH,
        reason=(
            "Experimental repositories indicate exploration rather than stable production systems"
        ),
        patterns=(
            r"\b(playground|sandbox|experiment|experimental|scratchpad)\b",
            r"\b(poc|proof[-\s]?of[-\s]?concept|prototype|prototyping)\b",
            r"\b(test[-\s]?bed|lab|research|exploration)\b",
            r"\b(spike|trial|trial[-\s]?run|feasibility)\b",
        ),
    ),
    _negative(
        "PersonalSiteRepository",
        penalty=0.32,
        severity=ContextSeverity.MODERATE,
        reason="Personal portfolio sites may overstate breadth vs. depth of real-world experience",
        patterns=(
            r"\b(personal[-\s]?site|portfolio|resume|cv|curriculum)\b",
            r"\b(homepage|blog|website|personal[-\s]?page)\b",
            r"\b(about[-\s]?me|my[-\s]?profile|profile[-\s]?site)\b",
        ),
    ),
    _negative(
        "ConfigRepository",
        penalty=0.28,
        severity=ContextSeverity.MODERATE,
        reason=(
            "Configuration repositories reflect personal tooling rather than software engineering "
            "skills"
        ),
        patterns=(
            r"\b(dotfiles|rc[-\s]?files|config[-\s]?files|configurations?)\b",
            r"\b(settings|preferences|setup|environment)\b",
            r"\b(vim|nvim|emacs|zsh|bash[-\s]?config)\b",
        ),
    ),
    _negative(
        "CuratedListRepository",
        penalty=0.34,
        severity=ContextSeverity.MODERATE,
        reason="Curated lists indicate curation rather than software development skills",
        patterns=(
            r"\b(awesome[-\s]?list|curated[-\s]?list|link[-\s]?collection)\b",
            r"\b(resources|bookmarks|references|reading[-\s]?list)\b",
            r"\b(list[-\s]?of[-\s]?tools|tool[-\s]?list|framework[-\s]?list)\b",
        ),
    ),
    _negative(
        "LegacyRepository",
        penalty=0.4,
        severity=ContextSeverity.HIGH,
        reason="Legacy/archived repositories may not reflect current skills or best practices",
        patterns=(
            r"\b(archive|archived|legacy|deprecated|obsolete|unmaintained)\b",
            r"\b(old[-\s]?version|historical|retired|discontinued)\b",
            r"\b(no[-\s]?longer[-\s]?maintained|end[-\s]?of[-\s]?life)\b",
        ),
    ),
    _negative(
        "ForkedRepository",
        penalty=0.26,
        severity=ContextSeverity.MODERATE,
        reason="Forked repositories may not indicate original authorship or deep contribution",
        patterns=(
            r"\b(fork|forked[-\s]?from|clone|cloned[-\s]?repo)\b",
            r"\b(upstream|mirror|copy[-\s]?of)\b",
        ),
    ),
    _negative(
        "AcademicRepository",
        penalty=0.3,
        severity=ContextSeverity.MODERATE,
        reason=(
            "Academic projects are learning exercises with different constraints than production "
            "systems"
        ),
        patterns=(
            r"\b(school[-\s]?project|university|college|course[-\s]?work)\b",
            r"\b(homework|assignment|class[-\s]?project|academic)\b",
            r"\b(semester[-\s]?project|capstone|thesis)\b",
        ),
    ),
    _negative(
        "DocumentationRepository",
        penalty=0.24,
        severity=ContextSeverity.LOW,
        reason=(
            "Documentation-only repositories indicate knowledge organization rather than "
            "development"
        ),
        patterns=(
            r"\b(notes|note[-\s]?taking|documentation[-\s]?only|readme[-\s]?collection)\b",
            r"\b(cheat[-\s]?sheet|reference[-\s]?guide|quick[-\s]?reference)\b",
            r"\b(snippets|gists|code[-\s]?snippets)\b",
        ),
    ),
    _negative(
        "PracticeRepository",
        penalty=0.34,
        severity=ContextSeverity.MODERATE,
        reason=(
            "Practice/challenge repositories focus on algorithms rather than system design skills"
        ),
        patterns=(
            r"\b(practice|练习|coding[-\s]?practice|exercises?)\b",
            r"\b(kata|challenge|challenges|problem[-\s]?solving)\b",
            r"\b(leetcode|hackerrank|codewars|advent[-\s]?of[-\s]?code)\b",
            r"\b(interview[-\s]?prep|interview[-\s]?questions)\b",
        ),
    ),
    _negative(
        "ToyRepository",
        penalty=0.3,
        severity=ContextSeverity.MODERATE,
        reason=(
            "Toy projects may lack production considerations like scale, security, observability"
        ),
        patterns=(
            r"\b(toy[-\s]?project|toy[-\s]?app|mini[-\s]?project|micro[-\s]?project)\b",
            r"\b(simple[-\s]?app|basic[-\s]?app|trivial|minimal[-\s]?example)\b",
            r"\b(for[-\s]?fun|hobby[-\s]?project|weekend[-\s]?project)\b",
        ),
    ),
    _negative(
        "IncompleteRepository",
        penalty=0.44,
        severity=ContextSeverity.CRITICAL,
        reason="Incomplete/broken repositories indicate lack of delivery or follow-through",
        patterns=(
            r"\b(broken|not[-\s]?working|work[-\s]?in[-\s]?progress|wip)\b",
            r"\b(incomplete|unfinished|abandoned|on[-\s]?hold)\b",
            r"\b(failed[-\s]?experiment|didn't[-\s]?work|stopped[-\s]?development)\b",
        ),
    ),
    _negative(
        "TestRepository",
        penalty=0.48,
        severity=ContextSeverity.CRITICAL,
        reason="Test/placeholder repositories contain no real work",
        patterns=(
            r"\b(test[-\s]?repo|testing[-\s]?repo|dummy[-\s]?repo|placeholder)\b",
            r"\b(ignore[-\s]?this|delete[-\s]?me|temporary[-\s]?repo)\b",
            r"\b(scratch|throwaway|junk)\b",
        ),
    ),
    _negative(
        "StaticSiteRepository",
        penalty=0.18,
        severity=ContextSeverity.LOW,
        reason="Simple static sites may not demonstrate backend or infrastructure skills",
        patterns=(
            r"\b(static[-\s]?site|landing[-\s]?page|single[-\s]?page|brochure[-\s]?site)\b",
            r"\b(marketing[-\s]?site|coming[-\s]?soon|under[-\s]?construction)\b",
        ),
        affects=(BACKEND, INFRASTRUCTURE, DATABASE),
    ),
    _negative(
        "DataRepository",
        penalty=0.22,
        severity=ContextSeverity.LOW,
        reason="Data-only repositories may not demonstrate software development skills",
        patterns=(
            r"\b(data[-\s]?only|dataset|data[-\s]?collection|raw[-\s]?data)\b",
            r"\b(corpus|training[-\s]?data|benchmark[-\s]?data)\b",
        ),
        affects=(FRONTEND, BACKEND, INFRASTRUCTURE),
    ),
    _negative(
        "GeneratedRepository",
        penalty=0.26,
        severity=ContextSeverity.MODERATE,
        reason="Auto-generated code may not reflect manual engineering skills",
        patterns=(
            r"\b(auto[-\s]?generated|generated[-\s]?code|code[-\s]?gen|codegen)\b",
            r"\b(scaffolded[-\s]?by|created[-\s]?with[-\s]?generator)\b",
        ),
    ),
    _negative(
        "MonorepoTemplateRepository",
        penalty=0.38,
        severity=ContextSeverity.HIGH,
        reason="Monorepo templates are setup tools rather than production implementations",
        patterns=(
            r"\b(monorepo[-\s]?template|workspace[-\s]?template|nx[-\s]?example)\b",
            r"\b(turborepo[-\s]?starter|lerna[-\s]?example)\b",
        ),
    ),
    _negative(
        "AssetRepository",
        penalty=0.28,
        severity=ContextSeverity.MODERATE,
        reason="Asset-only repositories don't demonstrate coding skills",
        patterns=(
            r"\b(icon[-\s]?pack|icon[-\s]?library|svg[-\s]?collection|assets[-\s]?only)\b",
            r"\b(fonts|typography[-\s]?collection|image[-\s]?assets)\b",
        ),
        affects=(BACKEND, INFRASTRUCTURE, DATABASE, DEVOPS, AI_ML),
    ),
    _negative(
        "MigratedRepository",
        penalty=0.36,
        severity=ContextSeverity.HIGH,
        reason="Migrated repositories may be outdated or placeholder references",
        patterns=(
            r"\b(migrated[-\s]?to|moved[-\s]?to|now[-\s]?at|see[-\s]?new[-\s]?repo)\b",
            r"\b(redirect|relocated|transferred)\b",
        ),
    ),
)

# Pseudo-languages that carry repository context, never a real skill
CONTEXT_ONLY_TAGS: frozenset[str] = frozenset(
    {FORKED_REPOSITORY_TAG, INACTIVE_REPOSITORY_TAG}
    | {profile.tag for profile in NEGATIVE_CONTEXT_PROFILES}
)

# Last-resort category guesses for names inference is unsure about, checked in order
CATEGORY_SUBSTRING_HINTS: tuple[tuple[SkillCategory, tuple[str, ...]], ...] = tuple(
    (category, tuple(needles.split()))
    for category, needles in (
        (DATABASE, "sql postgres mysql sqlite mongo redis clickhouse cassandra dynamodb"),
        (INFRASTRUCTURE, "terraform kubernetes helm ansible pulumi bicep hcl iac"),
        (DEVOPS, "docker shell bash powershell yaml nix make ci workflow"),
        (FRONTEND, "typescript javascript html css react vue svelte astro angular solid"),
        (AI_ML, "jupyter cuda ai ml tensor torch notebook nlp"),
    )
)
