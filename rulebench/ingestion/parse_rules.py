"""Parse rule documents into structured rules with labeled examples."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from rulebench.config import settings
from rulebench.errors import MalformedDocument
from rulebench.models.profile import Profile
from rulebench.models.rule import Example, Rule, RuleDocument
from rulebench.utils.text import filename_prefix, filename_slug, slugify

logger = logging.getLogger(__name__)

FRONTMATTER_OPEN = "---"
FRONTMATTER_CLOSE = {"---", "..."}
MAX_LABEL_LENGTH = 120

# Single asterisks are allowed inside a bold label; "**" always closes it.
BOLD_LABEL_PATTERN = re.compile(r"^ {0,3}\*\*(?P<label>(?:[^*]|\*(?!\*))+?:)\*\*\s*$")
BOLD_LABEL_COLON_AFTER_PATTERN = re.compile(r"^ {0,3}\*\*(?P<label>(?:[^*]|\*(?!\*))+?)\*\*:\s*$")
HEADER_LABEL_PATTERN = re.compile(r"^ {0,3}#{1,6}\s+(?P<label>.+?:)\s*$")
HEADER_PATTERN = re.compile(r"^ {0,3}#{1,6}(\s|$)")
FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
CAPTION_PATTERN = re.compile(r"^\s*(?:\*(?P<star>[^*\s][^*]*)\*|_(?P<under>[^_\s][^_]*)_)\s*$")


@dataclass
class _Fence:
    char: str
    length: int
    info: str
    line_number: int


@dataclass
class _PendingLabel:
    """A label heading waiting for its code fence."""

    label: str
    lines: List[str] = field(default_factory=list)
    paragraphs: int = 0
    in_paragraph: bool = False

    @property
    def description(self) -> Optional[str]:
        return " ".join(self.lines) if self.lines else None


def match_label(line: str) -> Optional[str]:
    """Return the label text if ``line`` is a short heading ending in a colon."""
    if len(line.strip()) > MAX_LABEL_LENGTH:
        return None
    match = BOLD_LABEL_PATTERN.match(line) or HEADER_LABEL_PATTERN.match(line)
    if match:
        return match.group("label").strip()
    match = BOLD_LABEL_COLON_AFTER_PATTERN.match(line)
    if match:
        return f"{match.group('label').strip()}:"
    return None


def default_description(label: str, title: str) -> str:
    return f"{label.rstrip().rstrip(':').rstrip()} example for {title}"


def _without_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def _open_fence(line: str, line_number: int) -> Optional[_Fence]:
    match = FENCE_OPEN_PATTERN.match(_without_cr(line))
    if not match:
        return None
    fence = match.group("fence")
    info = match.group("info").strip()
    if fence[0] == "`" and "`" in info:
        return None
    return _Fence(char=fence[0], length=len(fence), info=info, line_number=line_number)


def _closes(line: str, fence: _Fence) -> bool:
    line = _without_cr(line)
    stripped = line.strip()
    if not stripped or len(line) - len(line.lstrip(" ")) > 3:
        return False
    return set(stripped) == {fence.char} and len(stripped) >= fence.length


def _read_fence(
    lines: List[str], start: int, fence: _Fence, filename: str
) -> Tuple[str, int]:
    """Return the verbatim fence body and the index after the closing line.

    Lines are raw ``\\n``-split text, so a CRLF body keeps its inner ``\\r\\n``;
    only the terminator of the last body line is dropped, as with LF.
    """
    for index in range(start + 1, len(lines)):
        if _closes(lines[index], fence):
            body = lines[start + 1 : index]
            if body:
                body[-1] = _without_cr(body[-1])
            return "\n".join(body), index + 1
    raise MalformedDocument(
        filename, f"code fence opened on line {fence.line_number} is never closed"
    )


def _caption_after(lines: List[str], index: int) -> Optional[str]:
    """Look for an italic caption line right after a closing fence."""
    for offset in (0, 1):
        position = index + offset
        if position >= len(lines):
            return None
        line = lines[position]
        if not line.strip():
            continue
        match = CAPTION_PATTERN.match(line)
        if match:
            return (match.group("star") or match.group("under")).strip()
        return None
    return None


def split_frontmatter(lines: List[str], filename: str) -> Tuple[Dict[str, Any], int]:
    """Return the metadata mapping and the index where the body starts."""
    if not lines or lines[0].strip() != FRONTMATTER_OPEN:
        return {}, 0
    for index in range(1, len(lines)):
        if lines[index].strip() in FRONTMATTER_CLOSE:
            block = "\n".join(lines[1:index])
            try:
                data = yaml.safe_load(block)
            except yaml.YAMLError as exc:
                raise MalformedDocument(filename, f"invalid frontmatter: {exc}") from exc
            if data is None:
                return {}, index + 1
            if not isinstance(data, dict):
                raise MalformedDocument(filename, "frontmatter is not a key-value mapping")
            return data, index + 1
    raise MalformedDocument(filename, "frontmatter block is never closed")


def _text_field(meta: Dict[str, Any], key: str) -> Optional[str]:
    value = meta.get(key)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _tags(meta: Dict[str, Any]) -> List[str]:
    value = meta.get("tags")
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = [str(item) for item in value]
    else:
        items = str(value).split(",")
    return [item.strip() for item in items if item.strip()]


class RuleDocumentParser:
    """Turn rule documents of one profile into ``Rule`` records."""

    def __init__(self, profile: Profile, default_language: Optional[str] = None) -> None:
        self.profile = profile
        self.default_language = (
            profile.default_language or default_language or settings.default_language
        )

    def parse(self, document: RuleDocument) -> Rule:
        """Parse one document; raises ``MalformedDocument`` on fatal problems."""
        filename = document.filename
        # Split on "\n" only; code bodies may hold other line separators.
        lines = document.text.lstrip("\ufeff").split("\n")
        meta, body_start = split_frontmatter(lines, filename)

        title = _text_field(meta, "title")
        if not title:
            raise MalformedDocument(filename, "missing required metadata field 'title'")
        section = self._section(meta, filename)
        rule_id = self._rule_id(section, title, filename)

        examples = self._scan_examples(lines, body_start, title, filename)
        logger.debug("Parsed rule %s with %s examples from %s", rule_id, len(examples), filename)
        return Rule(
            id=rule_id,
            title=title,
            section=section,
            section_title=self.profile.section_title(section),
            impact=_text_field(meta, "impact"),
            impact_description=_text_field(meta, "impactDescription"),
            tags=_tags(meta),
            examples=examples,
        )

    def _section(self, meta: Dict[str, Any], filename: str) -> str:
        section = _text_field(meta, "section")
        if section:
            return section
        prefix = filename_prefix(filename)
        if self.profile.knows_section(prefix):
            return prefix
        raise MalformedDocument(filename, "missing section token in metadata and file name")

    def _rule_id(self, section: str, title: str, filename: str) -> str:
        if self.profile.knows_section(section):
            title_slug = slugify(title)
            if title_slug:
                return f"{section}-{title_slug}"
        rule_id = filename_slug(filename)
        if not rule_id:
            raise MalformedDocument(filename, "cannot derive a rule id")
        return rule_id

    def _scan_examples(
        self, lines: List[str], start: int, title: str, filename: str
    ) -> List[Example]:
        examples: List[Example] = []
        pending: Optional[_PendingLabel] = None
        index = start

        while index < len(lines):
            line = lines[index]
            fence = _open_fence(line, index + 1)
            if fence:
                code, index = _read_fence(lines, index, fence, filename)
                if pending is not None:
                    description = (
                        pending.description
                        or _caption_after(lines, index)
                        or default_description(pending.label, title)
                    )
                    examples.append(
                        Example(
                            label=pending.label,
                            language=fence.info.split()[0] if fence.info else self.default_language,
                            code=code,
                            description=description,
                        )
                    )
                pending = None
                continue

            label = match_label(line)
            if label:
                pending = _PendingLabel(label=label)
            elif pending is not None:
                pending = self._extend_pending(pending, line)
            index += 1

        return examples

    @staticmethod
    def _extend_pending(pending: _PendingLabel, line: str) -> Optional[_PendingLabel]:
        """Track prose after a label; more than one paragraph drops the label."""
        if HEADER_PATTERN.match(line):
            return None
        if not line.strip():
            pending.in_paragraph = False
            return pending
        if not pending.in_paragraph:
            if pending.paragraphs:
                return None
            pending.paragraphs += 1
            pending.in_paragraph = True
        pending.lines.append(line.strip())
        return pending


def parse_rule_document(
    document: RuleDocument, profile: Profile, default_language: Optional[str] = None
) -> Rule:
    return RuleDocumentParser(profile, default_language).parse(document)
