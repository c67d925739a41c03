"""Profile registry."""

from .registry import ProfileRegistry, build_default_registry, load_profiles

__all__ = ["ProfileRegistry", "build_default_registry", "load_profiles"]
