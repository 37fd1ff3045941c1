"""Custom exception classes for the skill evidence engine.

All exceptions follow the same error format:
{
    "error": {
        "code": "ERROR_CODE",
        "message": "Human-readable message",
        "details": {}  # optional
    }
}

The evidence pipeline itself never raises on repository data: malformed
fields degrade to "no evidence". These errors only surface when the static
taxonomy or knowledge tables fail validation while being built.
"""

from __future__ import annotations

from typing import Any


class SkillScopeError(Exception):
    """Base exception for the skill evidence engine."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result


class TaxonomyDefinitionError(SkillScopeError):
    """A language profile or keyword rule is malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="TAXONOMY_DEFINITION_ERROR",
            message=message,
            details=details,
        )


class KnowledgeBaseError(SkillScopeError):
    """A knowledge-base table failed validation during construction."""

    def __init__(self, table: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="KNOWLEDGE_BASE_ERROR",
            message=message,
            details={"table": table, **(details or {})},
        )


class ValidationError(SkillScopeError):
    """Input validation error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            details=details,
        )
