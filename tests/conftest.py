"""
Shared pytest fixtures.

Rule documents are written into ``tmp_path`` so every test works on its own
corpus; nothing touches the real skills directory.
"""

from pathlib import Path
from textwrap import dedent
from typing import Callable, Dict, Optional

import pytest

from rulebench.models.profile import Profile

SCENARIO_A = dedent(
    """\
    ---
    title: "Use X"
    section: "arch"
    ---

    ## Use X

    Prefer X over Y.

    **Incorrect:**

    ```ts
    foo();
    ```

    **Correct:**

    ```ts
    bar();
    ```
    """
)

MISSING_TITLE = dedent(
    """\
    ---
    section: "arch"
    impact: HIGH
    ---

    **Incorrect:**

    ```ts
    broken();
    ```
    """
)

ONLY_BEST = dedent(
    """\
    ---
    title: "Prefer Z"
    section: "arch"
    ---

    **Best:**

    ```ts
    best();
    ```
    """
)


@pytest.fixture
def scenario_a() -> str:
    return SCENARIO_A


@pytest.fixture
def missing_title() -> str:
    return MISSING_TITLE


@pytest.fixture
def only_best() -> str:
    return ONLY_BEST


@pytest.fixture
def make_profile(tmp_path: Path) -> Callable[..., Profile]:
    """Build a profile whose rules live under ``tmp_path/rules``."""

    def _make(
        name: str = "test-profile",
        sections: Optional[Dict[str, str]] = None,
        default_language: Optional[str] = "typescript",
    ) -> Profile:
        source_dir = tmp_path / "rules"
        source_dir.mkdir(exist_ok=True)
        return Profile(
            name=name,
            title="Test Profile",
            source_dir=source_dir,
            sections={"arch": "Architecture"} if sections is None else sections,
            default_language=default_language,
        )

    return _make


@pytest.fixture
def write_rule() -> Callable[[Path, str, str], Path]:
    def _write(directory: Path, filename: str, text: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write
