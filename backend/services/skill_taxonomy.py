"""Language & technology taxonomy.

Static table of technology profiles used to classify languages and tools into
one of six skill categories. Each profile carries partial category weights
(they need not sum to 1, a technology may score in several categories), the
aliases it is known by, and the ecosystem keywords, paradigms and tags that
feed the weak-signal tables of the evidence knowledge base.

The table is validated and indexed once, then shared read-only through
get_taxonomy().
"""

from __future__ import annotations

import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from app.exceptions import TaxonomyDefinitionError
from app.logging_config import get_logger

logger = get_logger(__name__)


class SkillCategory(str, Enum):
    """Closed set of skill categories."""

    FRONTEND = "frontend"
    BACKEND = "backend"
    INFRASTRUCTURE = "infrastructure"
    DATABASE = "database"
    AI_ML = "ai-ml"
    DEVOPS = "devops"


FRONTEND = SkillCategory.FRONTEND
BACKEND = SkillCategory.BACKEND
INFRASTRUCTURE = SkillCategory.INFRASTRUCTURE
DATABASE = SkillCategory.DATABASE
AI_ML = SkillCategory.AI_ML
DEVOPS = SkillCategory.DEVOPS

# Declaration order, used for score breakdowns and vote tables
CATEGORIES: tuple[SkillCategory, ...] = (
    FRONTEND,
    BACKEND,
    INFRASTRUCTURE,
    DATABASE,
    AI_ML,
    DEVOPS,
)

# Names whose canonical spelling survives normalization untouched
VERBATIM_LANGUAGE_NAMES = frozenset({"C#", "C++", "Dockerfile"})

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[_./]+")
_DISALLOWED = re.compile(r"[^a-z0-9#+\-]")
_DASH_RUNS = re.compile(r"-+")
_TOKEN_DELIMITERS = re.compile(r"[^a-zA-Z0-9#+.]+")


def normalize_token(value: str) -> str:
    """Case-fold a name and collapse its separators into single dashes.

    ``"NextJS"`` -> ``"next-js"``, ``"scikit_learn"`` -> ``"scikit-learn"``,
    ``"C#"`` -> ``"c#"``. Characters outside ``[a-z0-9#+-]`` are dropped.
    """
    token = _CAMEL_BOUNDARY.sub(r"\1-\2", value.strip()).lower()
    token = _SEPARATORS.sub("-", token)
    token = _DISALLOWED.sub("", token)
    token = _DASH_RUNS.sub("-", token)
    return token.strip("-")


def split_tokens(
    text: str,
    min_length: int = 1,
    part_min_length: int = 2,
    unique: bool = True,
) -> list[str]:
    """Tokenize free text on delimiters, expanding dashed tokens into parts.

    Every normalized token is kept, followed by its dash-separated parts of at
    least ``part_min_length`` characters. With ``unique=False`` repeated tokens
    are preserved so callers can count them.
    """
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", text)
    base = [normalize_token(raw) for raw in _TOKEN_DELIMITERS.split(spaced)]

    expanded: list[str] = []
    for token in base:
        if len(token) < max(1, min_length):
            continue
        expanded.append(token)
        if "-" in token:
            expanded.extend(part for part in token.split("-") if len(part) >= part_min_length)

    if unique:
        return list(dict.fromkeys(expanded))
    return expanded


def title_case_language(name: str) -> str:
    """Title-case each whitespace separated word of an unknown language name."""
    compact = name.strip()
    if not compact:
        return name
    return " ".join(part.capitalize() for part in compact.split())


@dataclass(frozen=True)
class LanguageProfile:
    """Immutable description of one language or technology."""

    name: str
    aliases: tuple[str, ...]
    category_weights: Mapping[SkillCategory, float]
    ecosystems: tuple[str, ...] = ()
    paradigms: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    def weight(self, category: SkillCategory) -> float:
        return self.category_weights.get(category, 0.0)


def _profile(
    name: str,
    aliases: str,
    weights: dict[SkillCategory, float],
    ecosystems: str = "",
    paradigms: str = "",
    tags: str = "",
) -> LanguageProfile:
    return LanguageProfile(
        name=name,
        aliases=tuple(aliases.split()),
        category_weights=MappingProxyType(dict(weights)),
        ecosystems=tuple(ecosystems.split()),
        paradigms=tuple(paradigms.split()),
        tags=tuple(tags.split()),
    )


LANGUAGE_PROFILES: tuple[LanguageProfile, ...] = (
    _profile(
        "TypeScript",
        aliases="typescript ts tsx tsc",
        weights={FRONTEND: 0.86, BACKEND: 0.68, DEVOPS: 0.26},
        ecosystems="node deno bun nextjs nestjs angular react",
        paradigms="typed-javascript oop fp",
        tags="web fullstack runtime",
    ),
    _profile(
        "JavaScript",
        aliases="javascript js jsx nodejs node",
        weights={FRONTEND: 0.84, BACKEND: 0.66, DEVOPS: 0.24},
        ecosystems="node express koa react vue svelte",
        paradigms="scripting oop fp",
        tags="web runtime",
    ),
    _profile(
        "HTML",
        aliases="html xhtml",
        weights={FRONTEND: 0.98},
        ecosystems="web dom",
        paradigms="markup",
        tags="ui document",
    ),
    _profile(
        "CSS",
        aliases="css postcss",
        weights={FRONTEND: 0.98},
        ecosystems="tailwind bootstrap postcss",
        paradigms="styling",
        tags="ui layout",
    ),
    _profile(
        "Sass",
        aliases="sass",
        weights={FRONTEND: 0.95},
        ecosystems="scss webpack vite",
        paradigms="preprocessor",
        tags="styles",
    ),
    _profile(
        "SCSS",
        aliases="scss",
        weights={FRONTEND: 0.95},
        ecosystems="sass vite webpack",
        paradigms="preprocessor",
        tags="styles",
    ),
    _profile(
        "Less",
        aliases="less",
        weights={FRONTEND: 0.92},
        ecosystems="webpack antd",
        paradigms="preprocessor",
        tags="styles",
    ),
    _profile(
        "Stylus",
        aliases="stylus",
        weights={FRONTEND: 0.9},
        ecosystems="webpack vite",
        paradigms="preprocessor",
        tags="styles",
    ),
    _profile(
        "Vue",
        aliases="vue vuejs nuxt nuxtjs",
        weights={FRONTEND: 0.94},
        ecosystems="vuex pinia vite",
        paradigms="component",
        tags="web-ui",
    ),
    _profile(
        "Svelte",
        aliases="svelte sveltekit",
        weights={FRONTEND: 0.92},
        ecosystems="vite kit",
        paradigms="component",
        tags="web-ui",
    ),
    _profile(
        "Astro",
        aliases="astro",
        weights={FRONTEND: 0.9},
        ecosystems="vite islands",
        paradigms="component ssg",
        tags="web-ui",
    ),
    _profile(
        "React",
        aliases="react reactjs",
        weights={FRONTEND: 0.94},
        ecosystems="nextjs vite redux",
        paradigms="component declarative",
        tags="web-ui",
    ),
    _profile(
        "Solid",
        aliases="solid solidjs",
        weights={FRONTEND: 0.9},
        ecosystems="vite",
        paradigms="component reactive",
        tags="web-ui",
    ),
    _profile(
        "Angular",
        aliases="angular angularjs",
        weights={FRONTEND: 0.9},
        ecosystems="rxjs cli",
        paradigms="component mvc",
        tags="web-ui",
    ),
    _profile(
        "Elm",
        aliases="elm",
        weights={FRONTEND: 0.88},
        ecosystems="browser",
        paradigms="functional",
        tags="web-ui",
    ),
    _profile(
        "Reason",
        aliases="reason reasonml",
        weights={FRONTEND: 0.76, BACKEND: 0.42},
        ecosystems="rescript bucklescript",
        paradigms="functional",
        tags="typed",
    ),
    _profile(
        "ReScript",
        aliases="rescript",
        weights={FRONTEND: 0.82, BACKEND: 0.44},
        ecosystems="react",
        paradigms="functional",
        tags="typed",
    ),
    _profile(
        "Python",
        aliases="python py cpython pypy",
        weights={BACKEND: 0.84, AI_ML: 0.86, DEVOPS: 0.3},
        ecosystems="django flask fastapi pytorch tensorflow",
        paradigms="scripting oop scientific",
        tags="data automation",
    ),
    _profile(
        "Go",
        aliases="go golang",
        weights={BACKEND: 0.9, INFRASTRUCTURE: 0.52, DEVOPS: 0.42},
        ecosystems="gin fiber grpc kubernetes",
        paradigms="compiled concurrency",
        tags="systems services",
    ),
    _profile(
        "Rust",
        aliases="rust",
        weights={BACKEND: 0.86, INFRASTRUCTURE: 0.58, DEVOPS: 0.34},
        ecosystems="tokio axum actix wasm",
        paradigms="systems memory-safe",
        tags="high-performance",
    ),
    _profile(
        "Java",
        aliases="java jdk",
        weights={BACKEND: 0.9},
        ecosystems="spring quarkus maven gradle",
        paradigms="oop jvm",
        tags="enterprise",
    ),
    _profile(
        "Kotlin",
        aliases="kotlin kt",
        weights={BACKEND: 0.8, FRONTEND: 0.22},
        ecosystems="ktor spring android",
        paradigms="jvm functional",
        tags="mobile backend",
    ),
    _profile(
        "Swift",
        aliases="swift",
        weights={BACKEND: 0.46, FRONTEND: 0.52},
        ecosystems="ios swiftui vapor",
        paradigms="mobile compiled",
        tags="apple",
    ),
    _profile(
        "C",
        aliases="c gnu-c",
        weights={BACKEND: 0.74, INFRASTRUCTURE: 0.54},
        ecosystems="gcc clang cmake",
        paradigms="systems",
        tags="native",
    ),
    _profile(
        "C++",
        aliases="c++ cpp cxx",
        weights={BACKEND: 0.78, INFRASTRUCTURE: 0.5},
        ecosystems="cmake qt boost",
        paradigms="systems oop",
        tags="native",
    ),
    _profile(
        "C#",
        aliases="c# csharp dotnet aspnet",
        weights={BACKEND: 0.86, FRONTEND: 0.2},
        ecosystems="aspnet blazor entityframework",
        paradigms="oop jitted",
        tags="enterprise",
    ),
    _profile(
        "Ruby",
        aliases="ruby rb",
        weights={BACKEND: 0.8},
        ecosystems="rails sinatra sidekiq",
        paradigms="scripting oop",
        tags="web",
    ),
    _profile(
        "PHP",
        aliases="php",
        weights={BACKEND: 0.82},
        ecosystems="laravel symfony wordpress",
        paradigms="scripting",
        tags="web",
    ),
    _profile(
        "Scala",
        aliases="scala",
        weights={BACKEND: 0.76, AI_ML: 0.24},
        ecosystems="akka play spark",
        paradigms="functional jvm",
        tags="data",
    ),
    _profile(
        "Haskell",
        aliases="haskell hs",
        weights={BACKEND: 0.68},
        ecosystems="stack cabal",
        paradigms="functional",
        tags="compiler",
    ),
    _profile(
        "Elixir",
        aliases="elixir ex",
        weights={BACKEND: 0.8, INFRASTRUCTURE: 0.24},
        ecosystems="phoenix beam",
        paradigms="functional concurrency",
        tags="realtime",
    ),
    _profile(
        "Erlang",
        aliases="erlang erl",
        weights={BACKEND: 0.76, INFRASTRUCTURE: 0.22},
        ecosystems="otp beam",
        paradigms="functional concurrency",
        tags="reliability",
    ),
    _profile(
        "Zig",
        aliases="zig",
        weights={BACKEND: 0.66, INFRASTRUCTURE: 0.56},
        ecosystems="llvm",
        paradigms="systems",
        tags="native",
    ),
    _profile(
        "Lua",
        aliases="lua",
        weights={BACKEND: 0.58, DEVOPS: 0.36},
        ecosystems="openresty neovim",
        paradigms="scripting",
        tags="embedded",
    ),
    _profile(
        "Dart",
        aliases="dart",
        weights={FRONTEND: 0.72, BACKEND: 0.42},
        ecosystems="flutter dartfrog",
        paradigms="mobile web",
        tags="cross-platform",
    ),
    _profile(
        "Perl",
        aliases="perl pl",
        weights={BACKEND: 0.64, DEVOPS: 0.36},
        ecosystems="cpan",
        paradigms="scripting",
        tags="automation",
    ),
    _profile(
        "OCaml",
        aliases="ocaml ml",
        weights={BACKEND: 0.62},
        ecosystems="opam dune",
        paradigms="functional",
        tags="compiler",
    ),
    _profile(
        "FSharp",
        aliases="fsharp f#",
        weights={BACKEND: 0.7, AI_ML: 0.2},
        ecosystems="dotnet",
        paradigms="functional jitted",
        tags="enterprise",
    ),
    _profile(
        "SQL",
        aliases="sql ansi-sql",
        weights={DATABASE: 0.98},
        ecosystems="dbt warehouse etl",
        paradigms="query",
        tags="data",
    ),
    _profile(
        "PostgreSQL",
        aliases="postgres postgresql psql",
        weights={DATABASE: 0.96},
        ecosystems="postgis timescaledb",
        paradigms="relational",
        tags="data",
    ),
    _profile(
        "MySQL",
        aliases="mysql mariadb",
        weights={DATABASE: 0.94},
        ecosystems="innodb",
        paradigms="relational",
        tags="data",
    ),
    _profile(
        "SQLite",
        aliases="sqlite",
        weights={DATABASE: 0.92},
        ecosystems="mobile embedded",
        paradigms="relational",
        tags="embedded",
    ),
    _profile(
        "MongoDB",
        aliases="mongodb mongo mongoose",
        weights={DATABASE: 0.94},
        ecosystems="atlas",
        paradigms="document",
        tags="nosql",
    ),
    _profile(
        "Redis",
        aliases="redis",
        weights={DATABASE: 0.88, DEVOPS: 0.24},
        ecosystems="cache queue",
        paradigms="key-value",
        tags="nosql",
    ),
    _profile(
        "ClickHouse",
        aliases="clickhouse",
        weights={DATABASE: 0.9, AI_ML: 0.14},
        ecosystems="columnar analytics",
        paradigms="olap",
        tags="warehouse",
    ),
    _profile(
        "Cassandra",
        aliases="cassandra",
        weights={DATABASE: 0.9},
        ecosystems="nosql",
        paradigms="wide-column",
        tags="distributed",
    ),
    _profile(
        "DynamoDB",
        aliases="dynamodb",
        weights={DATABASE: 0.86, INFRASTRUCTURE: 0.18},
        ecosystems="aws",
        paradigms="key-value document",
        tags="managed",
    ),
    _profile(
        "MariaDB",
        aliases="mariadb",
        weights={DATABASE: 0.9},
        ecosystems="mysql",
        paradigms="relational",
        tags="data",
    ),
    _profile(
        "Dockerfile",
        aliases="docker dockerfile container",
        weights={DEVOPS: 0.92, INFRASTRUCTURE: 0.3},
        ecosystems="docker compose containerd",
        paradigms="packaging",
        tags="containers",
    ),
    _profile(
        "Shell",
        aliases="shell sh zsh",
        weights={DEVOPS: 0.86, INFRASTRUCTURE: 0.26},
        ecosystems="linux unix",
        paradigms="scripting",
        tags="automation",
    ),
    _profile(
        "Bash",
        aliases="bash",
        weights={DEVOPS: 0.9, INFRASTRUCTURE: 0.24},
        ecosystems="linux ci",
        paradigms="scripting",
        tags="automation",
    ),
    _profile(
        "PowerShell",
        aliases="powershell pwsh ps1",
        weights={DEVOPS: 0.9, INFRASTRUCTURE: 0.24},
        ecosystems="azure windows",
        paradigms="scripting",
        tags="automation",
    ),
    _profile(
        "YAML",
        aliases="yaml yml",
        weights={DEVOPS: 0.88, INFRASTRUCTURE: 0.42},
        ecosystems="github-actions kubernetes ansible",
        paradigms="configuration",
        tags="config",
    ),
    _profile(
        "Nix",
        aliases="nix",
        weights={DEVOPS: 0.76, INFRASTRUCTURE: 0.44},
        ecosystems="nixos flakes",
        paradigms="reproducibility",
        tags="configuration",
    ),
    _profile(
        "Makefile",
        aliases="make makefile",
        weights={DEVOPS: 0.82},
        ecosystems="build ci",
        paradigms="build-system",
        tags="automation",
    ),
    _profile(
        "Groovy",
        aliases="groovy jenkinsfile",
        weights={DEVOPS: 0.72, BACKEND: 0.4},
        ecosystems="jenkins gradle",
        paradigms="scripting",
        tags="ci",
    ),
    _profile(
        "HCL",
        aliases="hcl",
        weights={INFRASTRUCTURE: 0.9, DEVOPS: 0.32},
        ecosystems="terraform nomad",
        paradigms="configuration",
        tags="iac",
    ),
    _profile(
        "Terraform",
        aliases="terraform tf",
        weights={INFRASTRUCTURE: 0.96, DEVOPS: 0.34},
        ecosystems="aws azure gcp",
        paradigms="iac",
        tags="cloud",
    ),
    _profile(
        "Helm",
        aliases="helm",
        weights={INFRASTRUCTURE: 0.9, DEVOPS: 0.32},
        ecosystems="kubernetes",
        paradigms="packaging",
        tags="k8s",
    ),
    _profile(
        "Ansible",
        aliases="ansible playbook",
        weights={INFRASTRUCTURE: 0.86, DEVOPS: 0.42},
        ecosystems="automation yaml",
        paradigms="configuration-management",
        tags="ops",
    ),
    _profile(
        "Pulumi",
        aliases="pulumi",
        weights={INFRASTRUCTURE: 0.88, DEVOPS: 0.3},
        ecosystems="cloud typescript python go",
        paradigms="iac",
        tags="ops",
    ),
    _profile(
        "Bicep",
        aliases="bicep",
        weights={INFRASTRUCTURE: 0.86, DEVOPS: 0.26},
        ecosystems="azure",
        paradigms="iac",
        tags="ops",
    ),
    _profile(
        "Kubernetes",
        aliases="kubernetes k8s kubectl",
        weights={INFRASTRUCTURE: 0.95, DEVOPS: 0.42},
        ecosystems="helm istio prometheus",
        paradigms="orchestration",
        tags="containers",
    ),
    _profile(
        "Jupyter",
        aliases="jupyter ipynb notebook",
        weights={AI_ML: 0.92, BACKEND: 0.24},
        ecosystems="python pandas",
        paradigms="notebook",
        tags="analysis",
    ),
    _profile(
        "CUDA",
        aliases="cuda",
        weights={AI_ML: 0.8, BACKEND: 0.24},
        ecosystems="gpu nvidia",
        paradigms="parallel",
        tags="acceleration",
    ),
    _profile(
        "R",
        aliases="r rstudio",
        weights={AI_ML: 0.76, DATABASE: 0.18},
        ecosystems="tidyverse caret",
        paradigms="statistics",
        tags="analysis",
    ),
    _profile(
        "MATLAB",
        aliases="matlab",
        weights={AI_ML: 0.62, BACKEND: 0.2},
        ecosystems="simulink",
        paradigms="numerical",
        tags="analysis",
    ),
    _profile(
        "GraphQL",
        aliases="graphql gql",
        weights={BACKEND: 0.5, FRONTEND: 0.48},
        ecosystems="apollo urql",
        paradigms="api",
        tags="query",
    ),
    _profile(
        "gRPC",
        aliases="grpc protobuf proto",
        weights={BACKEND: 0.74, INFRASTRUCTURE: 0.24},
        ecosystems="go java python",
        paradigms="rpc",
        tags="api",
    ),
    _profile(
        "Protocol Buffers",
        aliases="protobuf proto3 proto",
        weights={BACKEND: 0.58, INFRASTRUCTURE: 0.28},
        ecosystems="grpc",
        paradigms="serialization",
        tags="api",
    ),
    _profile(
        "Apache Spark",
        aliases="spark pyspark",
        weights={AI_ML: 0.5, BACKEND: 0.46, DATABASE: 0.22},
        ecosystems="scala python",
        paradigms="distributed-processing",
        tags="data",
    ),
    _profile(
        "Apache Kafka",
        aliases="kafka",
        weights={BACKEND: 0.56, INFRASTRUCTURE: 0.32, DEVOPS: 0.18},
        ecosystems="streaming",
        paradigms="event-stream",
        tags="data",
    ),
    _profile(
        "RabbitMQ",
        aliases="rabbitmq",
        weights={BACKEND: 0.52, INFRASTRUCTURE: 0.3},
        ecosystems="amqp",
        paradigms="messaging",
        tags="queue",
    ),
    _profile(
        "Nginx",
        aliases="nginx",
        weights={DEVOPS: 0.54, INFRASTRUCTURE: 0.54},
        ecosystems="reverse-proxy",
        paradigms="network",
        tags="gateway",
    ),
    _profile(
        "Apache HTTP Server",
        aliases="apache-httpd httpd",
        weights={DEVOPS: 0.52, INFRASTRUCTURE: 0.42},
        ecosystems="web-server",
        paradigms="network",
        tags="gateway",
    ),
    _profile(
        "Istio",
        aliases="istio service-mesh",
        weights={INFRASTRUCTURE: 0.74, DEVOPS: 0.34},
        ecosystems="kubernetes envoy",
        paradigms="mesh",
        tags="network",
    ),
    _profile(
        "Envoy",
        aliases="envoy",
        weights={INFRASTRUCTURE: 0.62, DEVOPS: 0.3},
        ecosystems="mesh gateway",
        paradigms="proxy",
        tags="network",
    ),
    _profile(
        "Prometheus",
        aliases="prometheus",
        weights={DEVOPS: 0.64, INFRASTRUCTURE: 0.4},
        ecosystems="grafana kubernetes",
        paradigms="monitoring",
        tags="observability",
    ),
    _profile(
        "Grafana",
        aliases="grafana",
        weights={DEVOPS: 0.58, INFRASTRUCTURE: 0.34},
        ecosystems="prometheus loki",
        paradigms="observability",
        tags="monitoring",
    ),
    _profile(
        "OpenTelemetry",
        aliases="opentelemetry otel",
        weights={DEVOPS: 0.6, BACKEND: 0.24},
        ecosystems="tracing metrics",
        paradigms="observability",
        tags="telemetry",
    ),
    _profile(
        "Bun",
        aliases="bun",
        weights={BACKEND: 0.56, FRONTEND: 0.44, DEVOPS: 0.18},
        ecosystems="typescript javascript",
        paradigms="runtime",
        tags="web",
    ),
    _profile(
        "Deno",
        aliases="deno",
        weights={BACKEND: 0.58, FRONTEND: 0.36, DEVOPS: 0.2},
        ecosystems="typescript javascript",
        paradigms="runtime",
        tags="web",
    ),
    _profile(
        "WebAssembly",
        aliases="wasm webassembly",
        weights={FRONTEND: 0.42, BACKEND: 0.42, INFRASTRUCTURE: 0.2},
        ecosystems="rust go c++",
        paradigms="binary",
        tags="performance",
    ),
    _profile(
        "Hugging Face",
        aliases="huggingface transformers",
        weights={AI_ML: 0.76, BACKEND: 0.22},
        ecosystems="python pytorch",
        paradigms="inference",
        tags="llm",
    ),
    _profile(
        "LangChain",
        aliases="langchain",
        weights={AI_ML: 0.68, BACKEND: 0.26},
        ecosystems="python typescript",
        paradigms="agentic",
        tags="llm",
    ),
    _profile(
        "LlamaIndex",
        aliases="llamaindex",
        weights={AI_ML: 0.66, BACKEND: 0.24},
        ecosystems="python",
        paradigms="rag",
        tags="llm",
    ),
    _profile(
        "TensorFlow",
        aliases="tensorflow tf",
        weights={AI_ML: 0.84},
        ecosystems="python keras",
        paradigms="deep-learning",
        tags="training",
    ),
    _profile(
        "PyTorch",
        aliases="pytorch torch",
        weights={AI_ML: 0.86},
        ecosystems="python",
        paradigms="deep-learning",
        tags="training",
    ),
    _profile(
        "ONNX",
        aliases="onnx",
        weights={AI_ML: 0.62, BACKEND: 0.2},
        ecosystems="runtime",
        paradigms="inference",
        tags="model",
    ),
    _profile(
        "Triton",
        aliases="triton triton-inference-server",
        weights={AI_ML: 0.66, BACKEND: 0.24},
        ecosystems="nvidia cuda",
        paradigms="inference",
        tags="gpu",
    ),
    _profile(
        "DuckDB",
        aliases="duckdb",
        weights={DATABASE: 0.76, AI_ML: 0.2},
        ecosystems="analytics",
        paradigms="olap",
        tags="embedded",
    ),
    _profile(
        "Snowflake",
        aliases="snowflake",
        weights={DATABASE: 0.84, AI_ML: 0.14},
        ecosystems="warehouse",
        paradigms="olap",
        tags="managed",
    ),
    _profile(
        "BigQuery",
        aliases="bigquery",
        weights={DATABASE: 0.84, INFRASTRUCTURE: 0.18},
        ecosystems="gcp",
        paradigms="olap",
        tags="managed",
    ),
    _profile(
        "Redshift",
        aliases="redshift",
        weights={DATABASE: 0.84, INFRASTRUCTURE: 0.16},
        ecosystems="aws",
        paradigms="olap",
        tags="managed",
    ),
    _profile(
        "dbt",
        aliases="dbt",
        weights={DATABASE: 0.62, AI_ML: 0.16, BACKEND: 0.16},
        ecosystems="sql warehouse",
        paradigms="transform",
        tags="analytics",
    ),
    _profile(
        "Airflow",
        aliases="airflow",
        weights={BACKEND: 0.4, DEVOPS: 0.28, AI_ML: 0.24},
        ecosystems="python",
        paradigms="orchestration",
        tags="pipelines",
    ),
    _profile(
        "Dagster",
        aliases="dagster",
        weights={BACKEND: 0.36, AI_ML: 0.26, DEVOPS: 0.2},
        ecosystems="python",
        paradigms="orchestration",
        tags="pipelines",
    ),
    _profile(
        "Prefect",
        aliases="prefect",
        weights={BACKEND: 0.34, AI_ML: 0.24, DEVOPS: 0.22},
        ecosystems="python",
        paradigms="orchestration",
        tags="pipelines",
    ),
    _profile(
        "Supabase",
        aliases="supabase",
        weights={DATABASE: 0.42, BACKEND: 0.36, FRONTEND: 0.24},
        ecosystems="postgres typescript",
        paradigms="baas",
        tags="fullstack",
    ),
    _profile(
        "Firebase",
        aliases="firebase firestore",
        weights={DATABASE: 0.44, BACKEND: 0.3, FRONTEND: 0.22},
        ecosystems="gcp",
        paradigms="baas",
        tags="fullstack",
    ),
    _profile(
        "Prisma",
        aliases="prisma",
        weights={DATABASE: 0.46, BACKEND: 0.3},
        ecosystems="typescript postgres mysql",
        paradigms="orm",
        tags="data-access",
    ),
    _profile(
        "Drizzle",
        aliases="drizzle drizzle-orm",
        weights={DATABASE: 0.46, BACKEND: 0.28},
        ecosystems="typescript sql",
        paradigms="orm",
        tags="data-access",
    ),
    _profile(
        "Sequelize",
        aliases="sequelize",
        weights={DATABASE: 0.42, BACKEND: 0.3},
        ecosystems="node sql",
        paradigms="orm",
        tags="data-access",
    ),
    _profile(
        "TypeORM",
        aliases="typeorm",
        weights={DATABASE: 0.44, BACKEND: 0.32},
        ecosystems="typescript",
        paradigms="orm",
        tags="data-access",
    ),
    _profile(
        "SQLAlchemy",
        aliases="sqlalchemy",
        weights={DATABASE: 0.46, BACKEND: 0.3},
        ecosystems="python",
        paradigms="orm",
        tags="data-access",
    ),
    _profile(
        "Entity Framework",
        aliases="entityframework efcore ef",
        weights={DATABASE: 0.42, BACKEND: 0.34},
        ecosystems="dotnet",
        paradigms="orm",
        tags="data-access",
    ),
    _profile(
        "Linux",
        aliases="linux",
        weights={DEVOPS: 0.54, INFRASTRUCTURE: 0.42},
        ecosystems="kernel",
        paradigms="os",
        tags="systems",
    ),
    _profile(
        "Windows",
        aliases="windows",
        weights={DEVOPS: 0.42, INFRASTRUCTURE: 0.34},
        ecosystems="powershell",
        paradigms="os",
        tags="systems",
    ),
    _profile(
        "AWS",
        aliases="aws",
        weights={INFRASTRUCTURE: 0.72, DEVOPS: 0.38},
        ecosystems="cloud",
        paradigms="managed-services",
        tags="cloud",
    ),
    _profile(
        "Azure",
        aliases="azure",
        weights={INFRASTRUCTURE: 0.72, DEVOPS: 0.38},
        ecosystems="cloud",
        paradigms="managed-services",
        tags="cloud",
    ),
    _profile(
        "GCP",
        aliases="gcp google-cloud",
        weights={INFRASTRUCTURE: 0.72, DEVOPS: 0.38},
        ecosystems="cloud",
        paradigms="managed-services",
        tags="cloud",
    ),
    _profile(
        "OpenAPI",
        aliases="openapi swagger",
        weights={BACKEND: 0.34, DEVOPS: 0.22},
        ecosystems="rest",
        paradigms="specification",
        tags="api",
    ),
    _profile(
        "REST",
        aliases="rest restful",
        weights={BACKEND: 0.42},
        ecosystems="http",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "OpenSearch",
        aliases="opensearch elasticsearch elastic",
        weights={DATABASE: 0.56, BACKEND: 0.26, INFRASTRUCTURE: 0.16},
        ecosystems="search",
        paradigms="index",
        tags="analytics",
    ),
    _profile(
        "Neo4j",
        aliases="neo4j",
        weights={DATABASE: 0.82},
        ecosystems="graph",
        paradigms="graph-db",
        tags="data",
    ),
    _profile(
        "JanusGraph",
        aliases="janusgraph",
        weights={DATABASE: 0.78},
        ecosystems="graph",
        paradigms="graph-db",
        tags="data",
    ),
    _profile(
        "Milvus",
        aliases="milvus",
        weights={DATABASE: 0.62, AI_ML: 0.24},
        ecosystems="vector",
        paradigms="vector-db",
        tags="retrieval",
    ),
    _profile(
        "Qdrant",
        aliases="qdrant",
        weights={DATABASE: 0.62, AI_ML: 0.24},
        ecosystems="vector",
        paradigms="vector-db",
        tags="retrieval",
    ),
    _profile(
        "Pinecone",
        aliases="pinecone",
        weights={DATABASE: 0.6, AI_ML: 0.22},
        ecosystems="vector",
        paradigms="vector-db",
        tags="retrieval",
    ),
    _profile(
        "Chroma",
        aliases="chroma chromadb",
        weights={DATABASE: 0.58, AI_ML: 0.24},
        ecosystems="vector",
        paradigms="vector-db",
        tags="retrieval",
    ),
    _profile(
        "Weaviate",
        aliases="weaviate",
        weights={DATABASE: 0.62, AI_ML: 0.26},
        ecosystems="vector",
        paradigms="vector-db",
        tags="retrieval",
    ),
    _profile(
        "FAISS",
        aliases="faiss",
        weights={AI_ML: 0.52, DATABASE: 0.26},
        ecosystems="python c++",
        paradigms="vector-index",
        tags="retrieval",
    ),
    _profile(
        "NumPy",
        aliases="numpy",
        weights={AI_ML: 0.62, BACKEND: 0.2},
        ecosystems="python",
        paradigms="numeric",
        tags="science",
    ),
    _profile(
        "Pandas",
        aliases="pandas",
        weights={AI_ML: 0.6, DATABASE: 0.18},
        ecosystems="python",
        paradigms="analytics",
        tags="science",
    ),
    _profile(
        "Polars",
        aliases="polars",
        weights={AI_ML: 0.56, DATABASE: 0.18},
        ecosystems="python rust",
        paradigms="analytics",
        tags="science",
    ),
    _profile(
        "scikit-learn",
        aliases="sklearn scikit-learn",
        weights={AI_ML: 0.7},
        ecosystems="python",
        paradigms="ml",
        tags="training",
    ),
    _profile(
        "XGBoost",
        aliases="xgboost",
        weights={AI_ML: 0.68},
        ecosystems="python",
        paradigms="ml",
        tags="training",
    ),
    _profile(
        "LightGBM",
        aliases="lightgbm",
        weights={AI_ML: 0.68},
        ecosystems="python",
        paradigms="ml",
        tags="training",
    ),
    _profile(
        "CatBoost",
        aliases="catboost",
        weights={AI_ML: 0.66},
        ecosystems="python",
        paradigms="ml",
        tags="training",
    ),
    _profile(
        "Keras",
        aliases="keras",
        weights={AI_ML: 0.72},
        ecosystems="tensorflow",
        paradigms="deep-learning",
        tags="training",
    ),
    _profile(
        "MLflow",
        aliases="mlflow",
        weights={AI_ML: 0.52, DEVOPS: 0.24},
        ecosystems="python",
        paradigms="mlops",
        tags="tracking",
    ),
    _profile(
        "Kubeflow",
        aliases="kubeflow",
        weights={AI_ML: 0.54, INFRASTRUCTURE: 0.3, DEVOPS: 0.2},
        ecosystems="kubernetes",
        paradigms="mlops",
        tags="pipelines",
    ),
    _profile(
        "Argo",
        aliases="argo argocd argo-cd argo-workflows",
        weights={DEVOPS: 0.56, INFRASTRUCTURE: 0.4},
        ecosystems="kubernetes",
        paradigms="gitops",
        tags="delivery",
    ),
    _profile(
        "Flux",
        aliases="flux fluxcd flux-cd",
        weights={DEVOPS: 0.56, INFRASTRUCTURE: 0.4},
        ecosystems="kubernetes",
        paradigms="gitops",
        tags="delivery",
    ),
    _profile(
        "Jenkins",
        aliases="jenkins",
        weights={DEVOPS: 0.68},
        ecosystems="groovy ci",
        paradigms="ci-cd",
        tags="delivery",
    ),
    _profile(
        "GitHub Actions",
        aliases="githubactions github-action workflow workflows",
        weights={DEVOPS: 0.72, INFRASTRUCTURE: 0.18},
        ecosystems="yaml ci",
        paradigms="ci-cd",
        tags="delivery",
    ),
    _profile(
        "GitLab CI",
        aliases="gitlab-ci gitlabci",
        weights={DEVOPS: 0.72, INFRASTRUCTURE: 0.16},
        ecosystems="yaml",
        paradigms="ci-cd",
        tags="delivery",
    ),
    _profile(
        "CircleCI",
        aliases="circleci",
        weights={DEVOPS: 0.68},
        ecosystems="yaml",
        paradigms="ci-cd",
        tags="delivery",
    ),
    _profile(
        "Azure DevOps",
        aliases="azure-devops azdo",
        weights={DEVOPS: 0.66, INFRASTRUCTURE: 0.2},
        ecosystems="yaml",
        paradigms="ci-cd",
        tags="delivery",
    ),
    _profile(
        "Nomad",
        aliases="nomad",
        weights={INFRASTRUCTURE: 0.72, DEVOPS: 0.24},
        ecosystems="hashicorp",
        paradigms="orchestration",
        tags="scheduling",
    ),
    _profile(
        "Consul",
        aliases="consul",
        weights={INFRASTRUCTURE: 0.68, DEVOPS: 0.24},
        ecosystems="hashicorp",
        paradigms="service-discovery",
        tags="network",
    ),
    _profile(
        "Vault",
        aliases="vault hashicorp-vault",
        weights={INFRASTRUCTURE: 0.66, DEVOPS: 0.26},
        ecosystems="hashicorp",
        paradigms="secrets-management",
        tags="security",
    ),
    _profile(
        "OPA",
        aliases="opa open-policy-agent rego",
        weights={INFRASTRUCTURE: 0.62, DEVOPS: 0.24},
        ecosystems="kubernetes",
        paradigms="policy",
        tags="security",
    ),
    _profile(
        "Trivy",
        aliases="trivy",
        weights={DEVOPS: 0.58, INFRASTRUCTURE: 0.2},
        ecosystems="containers",
        paradigms="security",
        tags="scanning",
    ),
    _profile(
        "Snyk",
        aliases="snyk",
        weights={DEVOPS: 0.56, INFRASTRUCTURE: 0.2},
        ecosystems="dependencies",
        paradigms="security",
        tags="scanning",
    ),
    _profile(
        "SonarQube",
        aliases="sonarqube sonar",
        weights={DEVOPS: 0.46, BACKEND: 0.18},
        ecosystems="ci",
        paradigms="quality",
        tags="analysis",
    ),
    _profile(
        "Playwright",
        aliases="playwright",
        weights={FRONTEND: 0.36, BACKEND: 0.2, DEVOPS: 0.22},
        ecosystems="typescript javascript",
        paradigms="testing",
        tags="e2e",
    ),
    _profile(
        "Cypress",
        aliases="cypress",
        weights={FRONTEND: 0.34, DEVOPS: 0.2},
        ecosystems="javascript",
        paradigms="testing",
        tags="e2e",
    ),
    _profile(
        "Jest",
        aliases="jest",
        weights={FRONTEND: 0.22, BACKEND: 0.24, DEVOPS: 0.16},
        ecosystems="javascript typescript",
        paradigms="testing",
        tags="unit-test",
    ),
    _profile(
        "Vitest",
        aliases="vitest",
        weights={FRONTEND: 0.24, BACKEND: 0.2, DEVOPS: 0.16},
        ecosystems="typescript vite",
        paradigms="testing",
        tags="unit-test",
    ),
    _profile(
        "Pytest",
        aliases="pytest",
        weights={BACKEND: 0.24, AI_ML: 0.16, DEVOPS: 0.14},
        ecosystems="python",
        paradigms="testing",
        tags="unit-test",
    ),
    _profile(
        "JUnit",
        aliases="junit",
        weights={BACKEND: 0.24, DEVOPS: 0.12},
        ecosystems="java",
        paradigms="testing",
        tags="unit-test",
    ),
    _profile(
        "Postman",
        aliases="postman",
        weights={BACKEND: 0.24, DEVOPS: 0.16},
        ecosystems="api",
        paradigms="testing",
        tags="api-test",
    ),
    _profile(
        "Insomnia",
        aliases="insomnia",
        weights={BACKEND: 0.22, DEVOPS: 0.14},
        ecosystems="api",
        paradigms="testing",
        tags="api-test",
    ),
    _profile(
        "FastAPI",
        aliases="fastapi",
        weights={BACKEND: 0.72, AI_ML: 0.26},
        ecosystems="python pydantic",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Django",
        aliases="django",
        weights={BACKEND: 0.74},
        ecosystems="python orm",
        paradigms="mvc",
        tags="web",
    ),
    _profile(
        "Flask",
        aliases="flask",
        weights={BACKEND: 0.68},
        ecosystems="python",
        paradigms="microframework",
        tags="web",
    ),
    _profile(
        "Express",
        aliases="express",
        weights={BACKEND: 0.66},
        ecosystems="node",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "NestJS",
        aliases="nestjs nest",
        weights={BACKEND: 0.72},
        ecosystems="typescript node",
        paradigms="modular",
        tags="web",
    ),
    _profile(
        "Spring Boot",
        aliases="spring springboot",
        weights={BACKEND: 0.76},
        ecosystems="java",
        paradigms="enterprise",
        tags="web",
    ),
    _profile(
        "Quarkus",
        aliases="quarkus",
        weights={BACKEND: 0.66},
        ecosystems="java",
        paradigms="microservices",
        tags="web",
    ),
    _profile(
        "Ktor",
        aliases="ktor",
        weights={BACKEND: 0.64},
        ecosystems="kotlin",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "ASP.NET",
        aliases="aspnet asp.net",
        weights={BACKEND: 0.74},
        ecosystems="dotnet",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Laravel",
        aliases="laravel",
        weights={BACKEND: 0.68},
        ecosystems="php",
        paradigms="mvc",
        tags="web",
    ),
    _profile(
        "Symfony",
        aliases="symfony",
        weights={BACKEND: 0.66},
        ecosystems="php",
        paradigms="mvc",
        tags="web",
    ),
    _profile(
        "Rails",
        aliases="rails",
        weights={BACKEND: 0.7},
        ecosystems="ruby",
        paradigms="mvc",
        tags="web",
    ),
    _profile(
        "Phoenix",
        aliases="phoenix",
        weights={BACKEND: 0.66},
        ecosystems="elixir",
        paradigms="realtime",
        tags="web",
    ),
    _profile(
        "Actix",
        aliases="actix",
        weights={BACKEND: 0.64},
        ecosystems="rust",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Axum",
        aliases="axum",
        weights={BACKEND: 0.64},
        ecosystems="rust",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Gin",
        aliases="gin",
        weights={BACKEND: 0.64},
        ecosystems="go",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Fiber",
        aliases="fiber",
        weights={BACKEND: 0.64},
        ecosystems="go",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "gofiber",
        aliases="gofiber",
        weights={BACKEND: 0.64},
        ecosystems="go",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Echo",
        aliases="echo",
        weights={BACKEND: 0.62},
        ecosystems="go",
        paradigms="api",
        tags="web",
    ),
    _profile(
        "Serverless",
        aliases="serverless lambda cloud-function cloudfunctions",
        weights={INFRASTRUCTURE: 0.42, BACKEND: 0.36, DEVOPS: 0.26},
        ecosystems="aws gcp azure",
        paradigms="faas",
        tags="cloud",
    ),
    _profile(
        "Cloudflare Workers",
        aliases="cloudflare-workers workers",
        weights={BACKEND: 0.48, INFRASTRUCTURE: 0.24, FRONTEND: 0.22},
        ecosystems="edge",
        paradigms="serverless",
        tags="cdn",
    ),
    _profile(
        "Vercel",
        aliases="vercel",
        weights={FRONTEND: 0.34, INFRASTRUCTURE: 0.24, DEVOPS: 0.22},
        ecosystems="nextjs",
        paradigms="deployment",
        tags="platform",
    ),
    _profile(
        "Netlify",
        aliases="netlify",
        weights={FRONTEND: 0.32, INFRASTRUCTURE: 0.24, DEVOPS: 0.22},
        ecosystems="jamstack",
        paradigms="deployment",
        tags="platform",
    ),
    _profile(
        "CDK",
        aliases="cdk aws-cdk",
        weights={INFRASTRUCTURE: 0.72, DEVOPS: 0.26},
        ecosystems="aws typescript python",
        paradigms="iac",
        tags="cloud",
    ),
    _profile(
        "Pulumi ESC",
        aliases="pulumi-esc esc",
        weights={INFRASTRUCTURE: 0.58, DEVOPS: 0.28},
        ecosystems="pulumi",
        paradigms="secrets",
        tags="cloud",
    ),
    _profile(
        "Clojure",
        aliases="clojure clj",
        weights={BACKEND: 0.62},
        ecosystems="lein babashka",
        paradigms="functional",
        tags="jvm",
    ),
    _profile(
        "ClojureScript",
        aliases="clojurescript cljs",
        weights={FRONTEND: 0.64, BACKEND: 0.26},
        ecosystems="reagent",
        paradigms="functional",
        tags="web",
    ),
    _profile(
        "Nim",
        aliases="nim",
        weights={BACKEND: 0.6, INFRASTRUCTURE: 0.36},
        ecosystems="nimble",
        paradigms="compiled",
        tags="systems",
    ),
    _profile(
        "Crystal",
        aliases="crystal",
        weights={BACKEND: 0.62},
        ecosystems="shards",
        paradigms="compiled",
        tags="web",
    ),
    _profile(
        "Fortran",
        aliases="fortran",
        weights={BACKEND: 0.42, AI_ML: 0.28},
        ecosystems="hpc",
        paradigms="scientific",
        tags="numeric",
    ),
    _profile(
        "COBOL",
        aliases="cobol",
        weights={BACKEND: 0.54},
        ecosystems="mainframe",
        paradigms="enterprise",
        tags="legacy",
    ),
    _profile(
        "ABAP",
        aliases="abap",
        weights={BACKEND: 0.56},
        ecosystems="sap",
        paradigms="enterprise",
        tags="erp",
    ),
    _profile(
        "SAS",
        aliases="sas",
        weights={AI_ML: 0.42, DATABASE: 0.2},
        ecosystems="analytics",
        paradigms="statistics",
        tags="data",
    ),
    _profile(
        "Julia",
        aliases="julia",
        weights={AI_ML: 0.64, BACKEND: 0.24},
        ecosystems="flux",
        paradigms="numerical",
        tags="science",
    ),
    _profile(
        "Apache Beam",
        aliases="beam apache-beam",
        weights={AI_ML: 0.34, BACKEND: 0.3, DATABASE: 0.2},
        ecosystems="python java",
        paradigms="pipelines",
        tags="data",
    ),
    _profile(
        "Flink",
        aliases="flink",
        weights={BACKEND: 0.38, DATABASE: 0.24, AI_ML: 0.18},
        ecosystems="java scala",
        paradigms="streaming",
        tags="data",
    ),
    _profile(
        "Beam SQL",
        aliases="beam-sql",
        weights={DATABASE: 0.34, BACKEND: 0.18, AI_ML: 0.16},
        ecosystems="beam",
        paradigms="query",
        tags="data",
    ),
    _profile(
        "Celery",
        aliases="celery",
        weights={BACKEND: 0.42, DEVOPS: 0.18},
        ecosystems="python redis rabbitmq",
        paradigms="task-queue",
        tags="jobs",
    ),
    _profile(
        "Temporal",
        aliases="temporal",
        weights={BACKEND: 0.46, DEVOPS: 0.2},
        ecosystems="go java typescript",
        paradigms="workflow",
        tags="jobs",
    ),
    _profile(
        "Camunda",
        aliases="camunda",
        weights={BACKEND: 0.4, DEVOPS: 0.18},
        ecosystems="java",
        paradigms="workflow",
        tags="jobs",
    ),
    _profile(
        "OpenCV",
        aliases="opencv",
        weights={AI_ML: 0.54, BACKEND: 0.22},
        ecosystems="python c++",
        paradigms="computer-vision",
        tags="cv",
    ),
    _profile(
        "PCL",
        aliases="pcl point-cloud-library",
        weights={AI_ML: 0.44, BACKEND: 0.2},
        ecosystems="c++",
        paradigms="computer-vision",
        tags="cv",
    ),
    _profile(
        "ROS",
        aliases="ros ros2",
        weights={AI_ML: 0.38, INFRASTRUCTURE: 0.18, BACKEND: 0.24},
        ecosystems="python c++",
        paradigms="robotics",
        tags="automation",
    ),
)


class LanguageTaxonomy:
    """Validated, indexed view over a set of language profiles."""

    def __init__(self, profiles: tuple[LanguageProfile, ...] = LANGUAGE_PROFILES) -> None:
        self._validate(profiles)
        self._profiles = profiles
        self._by_name: Mapping[str, LanguageProfile] = MappingProxyType(
            {profile.name: profile for profile in profiles}
        )

        aliases: dict[str, str] = {}
        for profile in profiles:
            aliases[normalize_token(profile.name)] = profile.name
            for alias in profile.aliases:
                aliases[normalize_token(alias)] = profile.name
        self._alias_to_language: Mapping[str, str] = MappingProxyType(aliases)

        logger.debug("taxonomy_indexed", profiles=len(profiles), aliases=len(aliases))

    @staticmethod
    def _validate(profiles: tuple[LanguageProfile, ...]) -> None:
        seen: set[str] = set()
        for profile in profiles:
            if not profile.name.strip():
                raise TaxonomyDefinitionError("Language profile without a name")
            if profile.name in seen:
                raise TaxonomyDefinitionError(
                    "Duplicate language profile", details={"language": profile.name}
                )
            seen.add(profile.name)
            if not profile.category_weights:
                raise TaxonomyDefinitionError(
                    "Language profile has no category weights",
                    details={"language": profile.name},
                )
            for category, weight in profile.category_weights.items():
                if not isinstance(category, SkillCategory) or not 0.0 < weight <= 1.0:
                    raise TaxonomyDefinitionError(
                        "Category weight out of range",
                        details={"language": profile.name, "category": str(category)},
                    )

    @property
    def profiles(self) -> tuple[LanguageProfile, ...]:
        return self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def profile(self, name: str) -> LanguageProfile | None:
        return self._by_name.get(name)

    def resolve_alias(self, token: str) -> str | None:
        """Canonical profile name for an already normalized token."""
        return self._alias_to_language.get(token)

    def canonicalize(self, name: str) -> str:
        """Resolve a raw language name to its canonical spelling."""
        direct = self._alias_to_language.get(normalize_token(name))
        if direct:
            return direct
        if name in VERBATIM_LANGUAGE_NAMES:
            return name
        return title_case_language(name)

    def alias_map(self) -> dict[str, str]:
        """Normalized alias -> canonical name, aliases only."""
        return {
            normalize_token(alias): profile.name
            for profile in self._profiles
            for alias in profile.aliases
        }

    def supported_languages(self) -> list[str]:
        return sorted((profile.name for profile in self._profiles), key=str.casefold)


_taxonomy: LanguageTaxonomy | None = None
_taxonomy_lock = threading.Lock()


def get_taxonomy() -> LanguageTaxonomy:
    """Return the process-wide taxonomy, building it on first use."""
    global _taxonomy
    if _taxonomy is None:
        with _taxonomy_lock:
            if _taxonomy is None:
                _taxonomy = LanguageTaxonomy()
    return _taxonomy
