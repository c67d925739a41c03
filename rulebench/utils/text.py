"""Text normalization helpers shared by the parser and the scanner."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_]+")
_REPEATED_HYPHENS = re.compile(r"-{2,}")


def slugify(text: str) -> str:
    """Lower-case, ASCII-folded, hyphen-separated form of ``text``."""
    folded = unicodedata.normalize("NFKD", text)
    folded = folded.encode("ascii", "ignore").decode("ascii")
    folded = _NON_WORD.sub("", folded).strip().lower()
    folded = _SEPARATORS.sub("-", folded)
    folded = _REPEATED_HYPHENS.sub("-", folded)
    return folded.strip("-")


def filename_slug(filename: str) -> str:
    """Generate a deterministic identifier from a file name."""
    return slugify(Path(filename).stem)


def filename_prefix(filename: str) -> str:
    """Return the part of the file stem before the first hyphen."""
    return Path(filename).stem.split("-", 1)[0].lower()
