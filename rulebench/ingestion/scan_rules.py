"""Scan a profile's rule directory and load rule documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from rulebench.errors import ConfigurationError
from rulebench.models.profile import Profile
from rulebench.models.rule import RuleDocument

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".md"
INDEX_DOCUMENTS = {"readme.md", "index.md"}


def is_rule_file(path: Path) -> bool:
    """Rule documents are markdown files that are not private or index pages."""
    name = path.name
    if not path.is_file() or path.suffix.lower() != DOCUMENT_SUFFIX:
        return False
    if name.startswith("_"):
        return False
    return name.lower() not in INDEX_DOCUMENTS


def discover_rule_files(profile: Profile) -> List[Path]:
    """Return candidate rule files for ``profile`` sorted by file name."""
    root = profile.source_dir
    if not root.is_dir():
        raise ConfigurationError(
            f"Rules directory for profile {profile.name} does not exist: {root}"
        )
    files = sorted((path for path in root.iterdir() if is_rule_file(path)), key=lambda p: p.name)
    logger.info("Discovered %s rule documents in %s", len(files), root)
    return files


def read_document(path: Path) -> RuleDocument:
    """Read the whole file before parsing; line endings are left untouched."""
    return RuleDocument(filename=path.name, text=path.read_bytes().decode("utf-8"))
