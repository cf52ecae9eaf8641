"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from ui_styles_layout_builder.models import SectionComponent
from ui_styles_layout_builder.styles import StyleLoader, StylePluginManager


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def style_loader(temp_dir: Path) -> StyleLoader:
    """Loader over the built-in library with an empty project directory."""
    return StyleLoader(project_path=temp_dir / "styles")


@pytest.fixture
def style_manager(style_loader: StyleLoader) -> StylePluginManager:
    """Style manager over the built-in library."""
    return StylePluginManager(style_loader)


@pytest.fixture
def component() -> SectionComponent:
    """A block component with content and no styles."""
    return SectionComponent(
        uuid="c0ffee00-0000-4000-8000-000000000001",
        region="first",
        weight=3,
        configuration={"id": "inline_block:basic", "label": "Intro", "content": "Hello"},
    )
