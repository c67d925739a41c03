"""Classify example labels and turn rules into test cases."""

from __future__ import annotations

from typing import List, Tuple

from rulebench.models.rule import Example, Rule
from rulebench.models.test_case import Polarity, TestCase

# Checked first: a label matching both lists is negative.
NEGATIVE_KEYWORDS: Tuple[str, ...] = ("incorrect", "wrong", "bad")
POSITIVE_KEYWORDS: Tuple[str, ...] = ("correct", "good")


def classify(label: str) -> Polarity:
    """Return the polarity of an example label."""
    lowered = label.lower()
    if any(keyword in lowered for keyword in NEGATIVE_KEYWORDS):
        return Polarity.BAD
    if any(keyword in lowered for keyword in POSITIVE_KEYWORDS):
        return Polarity.GOOD
    return Polarity.EXCLUDED


def build_test_case(rule: Rule, example: Example, polarity: Polarity) -> TestCase:
    return TestCase(
        rule_id=rule.id,
        rule_title=rule.title,
        type=polarity,
        code=example.code,
        language=example.language,
        description=example.description,
    )


def to_test_cases(rule: Rule) -> List[TestCase]:
    """Test cases for every classified example of ``rule``, in document order."""
    cases: List[TestCase] = []
    for example in rule.examples:
        polarity = classify(example.label)
        if polarity is Polarity.EXCLUDED:
            continue
        cases.append(build_test_case(rule, example, polarity))
    return cases
