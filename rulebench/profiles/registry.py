"""Static registry mapping profile names to rule corpora."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional

import yaml
from pydantic import ValidationError

from rulebench.config import Settings, settings as default_settings
from rulebench.errors import ConfigurationError, UnknownProfile
from rulebench.models.profile import Profile

logger = logging.getLogger(__name__)

REACT_SECTIONS: Dict[str, str] = {
    "async": "Eliminating Waterfalls",
    "bundle": "Bundle Size Optimization",
    "server": "Server-Side Performance",
    "client": "Client-Side Data Fetching",
    "rerender": "Re-render Optimization",
    "rendering": "Rendering Performance",
    "js": "JavaScript Performance",
    "advanced": "Advanced Patterns",
}

UNITY_ECS_SECTIONS: Dict[str, str] = {
    "arch": "Architecture",
    "comp": "Component Design",
    "sys": "System Design",
    "job": "Jobs and Burst",
    "mem": "Memory and Allocation",
    "query": "Entity Queries",
}


class ProfileRegistry:
    """Read-only lookup of profiles by name."""

    def __init__(self, profiles: Iterable[Profile]) -> None:
        table: Dict[str, Profile] = {}
        for profile in profiles:
            if profile.name in table:
                raise ConfigurationError(f"Duplicate profile name: {profile.name}")
            table[profile.name] = profile
        self._profiles: Mapping[str, Profile] = MappingProxyType(table)

    def resolve(self, name: str) -> Profile:
        """Return the profile registered under ``name``."""
        try:
            return self._profiles[name]
        except KeyError:
            raise UnknownProfile(name, self._profiles.keys()) from None

    def names(self) -> List[str]:
        return sorted(self._profiles)


def builtin_profiles(config: Settings) -> List[Profile]:
    root = config.skills_root_path
    return [
        Profile(
            name="react-best-practices",
            title="React Best Practices",
            source_dir=root / "react-best-practices" / "rules",
            sections=REACT_SECTIONS,
            default_language="typescript",
        ),
        Profile(
            name="unity-ecs",
            title="Unity ECS Best Practices",
            source_dir=root / "unity-ecs" / "rules",
            sections=UNITY_ECS_SECTIONS,
            default_language="csharp",
        ),
    ]


def load_profiles(path: Path) -> List[Profile]:
    """Read extra profiles from a YAML mapping of name -> profile fields."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read profiles file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in profiles file {path}: {exc}") from exc

    if raw is None:
        return []
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Profiles file {path} must contain a mapping")

    profiles: List[Profile] = []
    for name, fields in raw.items():
        if not isinstance(fields, dict):
            raise ConfigurationError(f"Profile {name!r} in {path} must be a mapping")
        payload = {"title": str(name), **fields, "name": str(name)}
        try:
            profiles.append(Profile(**payload))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid profile {name!r} in {path}: {exc}") from exc
    logger.debug("Loaded %s profiles from %s", len(profiles), path)
    return profiles


def build_default_registry(config: Optional[Settings] = None) -> ProfileRegistry:
    """Built-in profiles plus any declared in ``config.profiles_file``."""
    config = config or default_settings
    profiles = builtin_profiles(config)
    extra_path = config.profiles_file_path
    if extra_path is not None:
        profiles.extend(load_profiles(extra_path))
    return ProfileRegistry(profiles)
