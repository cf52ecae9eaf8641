"""
Style loader - discovers and loads style definitions.

Styles can come from:
1. Built-in library (shipped with package)
2. Project styles (user's project/styles directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ui_styles_layout_builder.constants import ErrorMessages
from ui_styles_layout_builder.models.style import StyleDefinition, StyleMetadata

logger = logging.getLogger(__name__)


class StyleLoader:
    """
    Discovers and loads style definitions.

    Styles are loaded from YAML files in the library and project directories.
    Project styles override library styles with the same id.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the style loader.

        Args:
            library_path: Path to built-in style library
            project_path: Path to project styles directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, StyleDefinition] = {}

    def list_styles(self) -> list[StyleMetadata]:
        """
        List all available styles.

        Returns styles from both library and project, with project
        styles taking precedence.
        """
        return [StyleMetadata.from_style(style) for style in self._discover().values()]

    def get_definitions(self) -> list[StyleDefinition]:
        """
        Get all enabled style definitions.

        Returns:
            Definitions sorted by weight, then id
        """
        styles = [style for style in self._discover().values() if style.enabled]
        return sorted(styles, key=lambda s: (s.weight, s.id))

    def get_style(self, style_id: str) -> StyleDefinition | None:
        """
        Get a style by id.

        Project styles take precedence over library styles.

        Args:
            style_id: Style id

        Returns:
            StyleDefinition if found, None otherwise
        """
        if style_id in self._cache:
            return self._cache[style_id]

        style = self._discover().get(style_id)
        if style:
            self._cache[style_id] = style
        return style

    def copy_to_project(self, style_id: str) -> Path | None:
        """
        Copy a library style to the project for customization.

        Args:
            style_id: Style id

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        style = self._discover_dir(self.library_path).get(style_id)
        if style is None:
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{style_id}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.STYLE_EXISTS.format(style_id=style_id))

        dest_file.write_text(yaml.safe_dump(style.model_dump(), sort_keys=False))

        # Invalidate cache
        self._cache.pop(style_id, None)

        return dest_file

    def _discover(self) -> dict[str, StyleDefinition]:
        """Load library styles, then project styles over them."""
        styles = self._discover_dir(self.library_path)
        if self.project_path:
            styles.update(self._discover_dir(self.project_path))
        return styles

    def _discover_dir(self, directory: Path) -> dict[str, StyleDefinition]:
        """Load every style file in a directory."""
        styles: dict[str, StyleDefinition] = {}
        if not directory.exists():
            return styles
        for path in sorted(directory.glob("*.yaml")):
            for style in self._load_style_file(path):
                styles[style.id] = style
        return styles

    def _load_style_file(self, path: Path) -> list[StyleDefinition]:
        """Load the styles declared in a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            styles = self._parse_styles(data, default_id=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return []

        logger.debug(f"Loaded {len(styles)} style(s) from {path}")
        return styles

    def _parse_styles(self, data: Any, default_id: str) -> list[StyleDefinition]:
        """
        Parse styles from YAML data.

        A file holds either a single definition (with an 'options' key)
        or a mapping of style id to definition.
        """
        if not data:
            return []
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")

        if "options" in data:
            return [StyleDefinition.model_validate({"id": default_id, **data})]

        return [
            StyleDefinition.model_validate({"id": style_id, **(definition or {})})
            for style_id, definition in data.items()
        ]

    def clear_cache(self) -> None:
        """Clear the style cache."""
        self._cache.clear()
