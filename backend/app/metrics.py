"""Prometheus metrics for monitoring.

Tracks skill profile build latency, signal volume per evidence source,
and the categories of emitted skills.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# Knowledge base
KNOWLEDGE_BASE_BUILD_DURATION = Histogram(
    "skills_knowledge_base_build_duration_seconds",
    "Evidence knowledge base construction duration",
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Profile building
PROFILE_BUILD_DURATION = Histogram(
    "skills_profile_build_duration_seconds",
    "Skill profile build duration",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

REPOSITORIES_PROCESSED = Counter(
    "skills_repositories_processed_total",
    "Repositories run through the evidence collector",
)

SIGNALS_COLLECTED = Counter(
    "skills_signals_collected_total",
    "Evidence signals collected",
    ["source"],
)

SKILLS_EMITTED = Counter(
    "skills_emitted_total",
    "Skill records emitted",
    ["category"],
)
