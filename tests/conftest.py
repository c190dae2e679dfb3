"""Pytest fixtures and configuration for content-images tests.

This module provides shared fixtures: in-memory file collections shaped like a
site source tree, the same tree written to disk for CLI tests, and settings
overrides.
"""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from content_images.matchers.base import PatternMatcher

# Layout of a small site: three content files with image folders, one without,
# and a nested project that only a recursive pattern reaches.
SITE_PATHS = [
    "four/four.md",
    "one/images/Toadle.gif",
    "one/images/Toadle.png",
    "one/one.md",
    "projects/hello/images/Toadle.gif",
    "projects/hello/images/Toadle.png",
    "projects/hello/world.md",
    "three/images/listen.png",
    "three/images/now.png",
    "three/images/notes.txt",
    "three/three.md",
    "two/images/Toad.png",
    "two/two.md",
]


class PrefixMatcher(PatternMatcher):
    """Matcher stub treating the pattern as a literal path prefix."""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return "prefix"

    def matches(self, path: str, pattern: str) -> bool:
        self.calls.append((path, pattern))
        return path.startswith(pattern)


# --- Logging Fixtures ---


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI installed on captured streams."""
    yield
    logger.remove()


# --- Temporary Directory Fixtures ---


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def site_dir(temp_dir: Path) -> Path:
    """Write the sample site tree to disk."""
    source = temp_dir / "src"
    for relative in SITE_PATHS:
        path = source / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")
    return source


# --- Sample Data Fixtures ---


@pytest.fixture
def site_paths() -> list[str]:
    """Return the paths of the sample site."""
    return list(SITE_PATHS)


@pytest.fixture
def site_files() -> dict[str, dict]:
    """Create an in-memory file collection for the sample site."""
    return {path: {} for path in SITE_PATHS}


@pytest.fixture
def prefix_matcher() -> PrefixMatcher:
    """Create a matcher stub that records its calls."""
    return PrefixMatcher()


# --- Settings Override Fixtures ---


@pytest.fixture
def mock_settings(temp_dir: Path, monkeypatch):
    """Override settings with test values."""
    monkeypatch.setenv("SOURCE_DIR", str(temp_dir / "src"))
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    from content_images.config import Settings

    return Settings()
