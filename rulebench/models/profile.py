"""Profile models describing one corpus of rule documents."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """Named source directory plus its section taxonomy."""

    model_config = ConfigDict(frozen=True)

    name: str
    title: str
    source_dir: Path
    sections: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    default_language: Optional[str] = None

    @field_validator("sections")
    @classmethod
    def _freeze_sections(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    def knows_section(self, token: Optional[str]) -> bool:
        return bool(token) and token in self.sections

    def section_title(self, token: str) -> Optional[str]:
        return self.sections.get(token)

    @property
    def output_name(self) -> str:
        return f"test-cases-{self.name}.json"
