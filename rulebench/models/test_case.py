"""Test case and extraction report models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .rule import Rule


class Polarity(str, Enum):
    """Classification of an example label."""

    GOOD = "good"
    BAD = "bad"
    EXCLUDED = "excluded"


class TestCase(BaseModel):
    """A classified example, serialized with camelCase field names."""

    __test__ = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rule_id: str = Field(alias="ruleId")
    rule_title: str = Field(alias="ruleTitle")
    type: Polarity
    code: str
    language: str
    description: str

    @field_validator("type")
    @classmethod
    def _reject_excluded(cls, value: Polarity) -> Polarity:
        if value is Polarity.EXCLUDED:
            raise ValueError("excluded examples do not produce test cases")
        return value

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class DocumentFailure(BaseModel):
    """A rule file that was skipped, with the reason."""

    filename: str
    reason: str


class DocumentOutcome(BaseModel):
    """Result of processing one document: a rule or a failure reason."""

    filename: str
    rule: Optional[Rule] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, filename: str, rule: Rule) -> "DocumentOutcome":
        return cls(filename=filename, rule=rule)

    @classmethod
    def failure(cls, filename: str, reason: str) -> "DocumentOutcome":
        return cls(filename=filename, reason=reason)

    @property
    def ok(self) -> bool:
        return self.rule is not None


class ExtractionReport(BaseModel):
    """Aggregate output of one extraction run."""

    profile: str
    test_cases: List[TestCase] = Field(default_factory=list)
    failures: List[DocumentFailure] = Field(default_factory=list)
    documents_parsed: int = 0

    @property
    def good_count(self) -> int:
        return sum(1 for case in self.test_cases if case.type is Polarity.GOOD)

    @property
    def bad_count(self) -> int:
        return sum(1 for case in self.test_cases if case.type is Polarity.BAD)

    @property
    def total(self) -> int:
        return len(self.test_cases)

    @property
    def degraded(self) -> bool:
        return bool(self.failures)
