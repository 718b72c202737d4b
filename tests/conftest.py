"""Pytest configuration for the resbridge test suite.

Hypothesis profiles:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples, derandomized
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Shared fixtures build Android `res` trees under tmp_path.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# RESOURCE TREE FIXTURES
# =============================================================================

type WriteResource = Callable[[str, str, str], Path]


@pytest.fixture
def res_dir(tmp_path: Path) -> Path:
    """Empty Android resource root."""
    root = tmp_path / "res"
    root.mkdir()
    return root


@pytest.fixture
def write_resource(res_dir: Path) -> WriteResource:
    """Write `<resources>` XML into `res/<directory>/<filename>`.

    The body is wrapped in a <resources> element.
    """

    def _write(directory: str, body: str, filename: str = "strings.xml") -> Path:
        target = res_dir / directory
        target.mkdir(exist_ok=True)
        path = target / filename
        path.write_text(
            f'<?xml version="1.0" encoding="utf-8"?>\n<resources>\n{body}\n</resources>\n',
            encoding="utf-8",
        )
        return path

    return _write
