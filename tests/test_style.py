"""
Tests for the style system.

Tests cover:
- Style models
- StyleLoader discovery and loading
- StylePluginManager class merging
"""

import pytest
import yaml

from ui_styles_layout_builder.models import SectionComponent, StyleDefinition, StyleMetadata
from ui_styles_layout_builder.styles import StyleLoader, StylePluginManager, merge_classes


class TestStyleDefinition:
    """Tests for StyleDefinition model."""

    def test_minimal_style(self):
        """Can create style with just an id."""
        style = StyleDefinition(id="test")
        assert style.label == ""
        assert style.options == {}
        assert style.enabled is True

    def test_has_option(self):
        style = StyleDefinition(id="align", options={"text-start": "Start"})
        assert style.has_option("text-start") is True
        assert style.has_option("text-end") is False

    def test_metadata(self):
        """Metadata falls back to the id when there is no label."""
        style = StyleDefinition(id="align", category="Typography", options={"a": "A", "b": "B"})
        meta = StyleMetadata.from_style(style)
        assert meta.label == "align"
        assert meta.category == "Typography"
        assert meta.option_count == 2


class TestSectionComponent:
    """Tests for SectionComponent model."""

    def test_get_property(self, component):
        assert component.get("region") == "first"
        assert component.get("weight") == 3

    def test_get_additional(self, component):
        assert component.get("ui_styles") is None
        component.set("ui_styles", ["a"])
        assert component.get("ui_styles") == ["a"]
        assert component.additional == {"ui_styles": ["a"]}

    def test_set_property(self, component):
        component.set("region", "second")
        assert component.region == "second"
        assert "region" not in component.additional

    def test_plugin_id(self, component):
        assert component.get_plugin_id() == "inline_block:basic"
        assert SectionComponent(uuid="x").get_plugin_id() == ""


class TestStyleLoader:
    """Tests for StyleLoader."""

    def test_library_styles(self, style_loader):
        """Built-in library ships the basic styles."""
        ids = {meta.id for meta in style_loader.list_styles()}
        assert {"text_align", "padding", "margin_bottom", "background"} <= ids

    def test_get_style(self, style_loader):
        style = style_loader.get_style("text_align")
        assert style is not None
        assert style.options["text-center"] == "Center"
        assert style_loader.get_style("nonexistent") is None

    def test_definitions_sorted(self, style_loader):
        """Definitions are ordered by weight."""
        ids = [style.id for style in style_loader.get_definitions()]
        assert ids.index("text_align") < ids.index("padding") < ids.index("background")

    def test_project_overrides_library(self, style_loader, temp_dir):
        project = temp_dir / "styles"
        project.mkdir()
        (project / "text_align.yaml").write_text(
            yaml.safe_dump({"label": "Custom", "options": {"text-justify": "Justify"}})
        )

        style = style_loader.get_style("text_align")
        assert style.label == "Custom"
        assert list(style.options) == ["text-justify"]

    def test_disabled_styles_hidden(self, temp_dir):
        (temp_dir / "styles.yaml").write_text(
            yaml.safe_dump(
                {
                    "shown": {"options": {"a": "A"}},
                    "hidden": {"options": {"b": "B"}, "enabled": False},
                }
            )
        )
        loader = StyleLoader(library_path=temp_dir)
        assert [s.id for s in loader.get_definitions()] == ["shown"]
        assert len(loader.list_styles()) == 2

    def test_invalid_file_skipped(self, temp_dir):
        """Broken files are skipped without failing discovery."""
        (temp_dir / "broken.yaml").write_text("options: [unclosed")
        (temp_dir / "good.yaml").write_text(yaml.safe_dump({"options": {"a": "A"}}))
        loader = StyleLoader(library_path=temp_dir)
        assert [s.id for s in loader.get_definitions()] == ["good"]

    def test_copy_to_project(self, style_loader, temp_dir):
        dest = style_loader.copy_to_project("padding")
        assert dest == temp_dir / "styles" / "padding.yaml"
        assert StyleLoader(library_path=temp_dir / "styles").get_style("padding").options["p-3"] == "Medium"

        with pytest.raises(ValueError, match="already exists"):
            style_loader.copy_to_project("padding")

    def test_clear_cache(self, style_loader, temp_dir):
        """Cached styles are reloaded after clearing the cache."""
        assert style_loader.get_style("text_align").label == "Text alignment"

        project = temp_dir / "styles"
        project.mkdir()
        (project / "text_align.yaml").write_text(
            yaml.safe_dump({"label": "Edited", "options": {"text-start": "Start"}})
        )
        # Still served from cache
        assert style_loader.get_style("text_align").label == "Text alignment"

        style_loader.clear_cache()
        assert style_loader.get_style("text_align").label == "Edited"

    def test_copy_unknown_style(self, style_loader):
        assert style_loader.copy_to_project("nonexistent") is None

    def test_copy_without_project(self):
        with pytest.raises(ValueError, match="No project path"):
            StyleLoader(project_path=None).copy_to_project("padding")

    def test_missing_library(self, temp_dir):
        loader = StyleLoader(library_path=temp_dir / "missing")
        assert loader.list_styles() == []


class TestMergeClasses:
    """Tests for merge_classes()."""

    def test_merge(self):
        assert merge_classes(["a", "b"], "c  d") == ["a", "b", "c", "d"]

    def test_dedupe_and_empty(self):
        assert merge_classes(["a", "", "a"], " a b ") == ["a", "b"]

    def test_nothing(self):
        assert merge_classes([], "") == []


class TestStylePluginManager:
    """Tests for StylePluginManager."""

    def test_no_classes_returns_element(self, style_manager):
        element = {"#theme": "block"}
        assert style_manager.add_classes(element, [], "") is element

    def test_block_content(self, style_manager):
        """Classes go on the block content, not the wrapper."""
        element = {"#theme": "block", "content": {"#theme": "field"}}
        result = style_manager.add_classes(element, ["text-center"], "extra")

        assert result["content"]["#attributes"]["class"] == ["text-center", "extra"]
        assert "#attributes" not in result
        # Input is untouched
        assert element == {"#theme": "block", "content": {"#theme": "field"}}

    def test_bare_block_content_wrapped(self, style_manager):
        element = {"#theme": "block", "content": {"#markup": "Hi"}}
        result = style_manager.add_classes(element, ["p-3"])

        assert result["content"] == {
            "#type": "container",
            "content": {"#markup": "Hi"},
            "#attributes": {"class": ["p-3"]},
        }

    def test_block_without_content(self, style_manager):
        """A block without content is styled on itself."""
        result = style_manager.add_classes({"#theme": "block"}, ["p-3"])
        assert result["#attributes"]["class"] == ["p-3"]

    def test_other_element(self, style_manager):
        element = {"#type": "html_tag", "#attributes": {"class": "existing p-3"}}
        result = style_manager.add_classes(element, ["p-3", "mb-0"])
        assert result["#attributes"]["class"] == ["existing", "p-3", "mb-0"]

    def test_definitions(self, style_manager):
        groups = style_manager.get_grouped_definitions()
        assert [s.id for s in groups["Spacing"]] == ["padding", "margin_bottom"]
        assert style_manager.get_definition("background").label == "Background color"

    def test_is_known_class(self, style_manager):
        assert style_manager.is_known_class("bg-dark") is True
        assert style_manager.is_known_class("not-a-style") is False
