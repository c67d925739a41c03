"""Typed models shared across the application."""

from .profile import Profile
from .rule import Example, Rule, RuleDocument
from .test_case import (
    DocumentFailure,
    DocumentOutcome,
    ExtractionReport,
    Polarity,
    TestCase,
)

__all__ = [
    "DocumentFailure",
    "DocumentOutcome",
    "Example",
    "ExtractionReport",
    "Polarity",
    "Profile",
    "Rule",
    "RuleDocument",
    "TestCase",
]
