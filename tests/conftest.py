"""Pytest configuration and shared fixtures for svg-fixup tests."""

from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = Path(__file__).parent / "fixtures"

ALL_FIXTURES = sorted(p.name for p in FIXTURES_DIR.glob("*.svg"))


def read_fixture(name: str) -> str:
    """Read a fixture file without newline translation."""
    with open(FIXTURES_DIR / name, encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def load_fixture() -> Callable[[str], str]:
    """Return a loader for fixture SVG files by name."""
    return read_fixture


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point config lookup at an empty location so a user config never leaks in."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.delenv("SVG_FIXUP_CONFIG", raising=False)
    monkeypatch.setattr("svg_fixup.config.DEFAULT_PATH", config_dir / "config.yaml")
    yield config_dir


@pytest.fixture
def temp_svg(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary SVG file that needs fixing."""
    svg_content = """<?xml version="1.0" encoding="UTF-8"?>
<svg:svg xmlns:svg="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <svg:script>alert("hi")</svg:script>
  <svg:rect x="10" y="10" width="50" height="50"/>
</svg:svg>"""
    svg_path = tmp_path / "test.svg"
    svg_path.write_text(svg_content, encoding="utf-8")
    yield svg_path


@pytest.fixture
def clean_svg_content() -> str:
    """Return an SVG string that needs no fixes."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="blue"/>
  <circle cx="50" cy="50" r="30" fill="red"/>
</svg>"""


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG that no pass can repair."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <text x="10" y="50">Unclosed text
</svg>"""


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
