"""
Pytest configuration and fixtures
"""
import textwrap
from pathlib import Path

import pytest

from folio.portfolio.schemas import Portfolio, Project
from folio.styles.registry import StyleRegistry

SAMPLE_CONFIG = textwrap.dedent(
    """
    name: Ada
    email: ada@x.io
    about: Engineer.
    languages:
      Rust: https://rust-lang.org
      Python: https://python.org
      Go: https://go.dev
    technologies:
      Docker: https://docker.com
      WebAssembly: https://webassembly.org
    projects:
      - name: P1
        role: Lead
        languages: [Rust, Python, Go]
        technologies: [WebAssembly]
        description: Built it.
        video: media/p1
        url: https://p1.io
      - name: P2
        role: Contributor
        languages: []
        technologies: [Docker, WebAssembly]
        description: Helped.
        url: https://p2.io
    """
)


@pytest.fixture
def ada_portfolio() -> Portfolio:
    """Single-project portfolio with one language and no video."""
    return Portfolio(
        name="Ada",
        email="ada@x.io",
        about="Engineer.",
        languages={"Rust": "https://rust-lang.org"},
        technologies={},
        projects=[
            Project(
                name="P1",
                role="Lead",
                languages=["Rust"],
                technologies=[],
                description="Built it.",
                video=None,
                url="https://p1.io",
            )
        ],
    )


@pytest.fixture
def sample_config_text() -> str:
    return SAMPLE_CONFIG


@pytest.fixture
def sample_config_file(tmp_path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


@pytest.fixture
def style_registry() -> StyleRegistry:
    """A fresh registry over the packaged style sheets."""
    registry = StyleRegistry()
    registry.load()
    return registry
