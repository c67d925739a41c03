"""Rule-level data models produced by the document parser."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class RuleDocument(BaseModel):
    """Raw content of a single rule file."""

    filename: str
    text: str


class Example(BaseModel):
    """One labeled code snippet inside a rule."""

    label: str
    language: str
    code: str
    description: str


class Rule(BaseModel):
    """A parsed style-guide rule with its ordered examples."""

    id: str
    title: str
    section: str
    section_title: Optional[str] = None
    impact: Optional[str] = None
    impact_description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    examples: List[Example] = Field(default_factory=list)
