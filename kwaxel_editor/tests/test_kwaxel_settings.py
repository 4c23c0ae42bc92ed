#!/usr/bin/env python3
"""
Tests for editor settings loading and validation
"""

import json

from kwaxel_editor.core.kwaxel_constants import MAX_HISTORY, ZOOM_DEFAULT
from kwaxel_editor.core.kwaxel_settings import EditorSettings, load_settings


class TestEditorSettings:
    """Test the EditorSettings dataclass"""

    def test_defaults(self):
        settings = EditorSettings()

        assert settings.history_limit == MAX_HISTORY
        assert settings.zoom == ZOOM_DEFAULT
        assert settings.grid_visible is True
        assert settings.default_color == "#3b82f6"
        assert settings.brush_size == 1
        assert settings.tool == "pencil"
        assert settings.load_default_asset is True

    def test_invalid_values_fall_back(self):
        settings = EditorSettings(history_limit=0, brush_size=3, tool="lasso", default_color=42)

        assert settings.history_limit == MAX_HISTORY
        assert settings.brush_size == 1
        assert settings.tool == "pencil"
        assert settings.default_color == "#3b82f6"

    def test_bool_brush_size_falls_back(self):
        settings = EditorSettings(brush_size=True)
        assert settings.brush_size == 1
        assert type(settings.brush_size) is int

    def test_zoom_clamped_to_range(self):
        settings = EditorSettings(zoom=100, zoom_min=4, zoom_max=24)

        assert settings.zoom == 24
        assert (settings.zoom_min, settings.zoom_max) == (4, 24)

    def test_inverted_zoom_range(self):
        settings = EditorSettings(zoom_min=30, zoom_max=10)
        assert (settings.zoom_min, settings.zoom_max) == (8, 32)

    def test_from_dict_ignores_unknown(self):
        settings = EditorSettings.from_dict({"zoom": 20, "theme": "dark"})

        assert settings.zoom == 20
        assert not hasattr(settings, "theme")

    def test_round_trip_dict(self):
        settings = EditorSettings(zoom=12, grid_visible=False)
        assert EditorSettings.from_dict(settings.to_dict()) == settings


class TestLoadSettings:
    """Test loading settings from JSON files"""

    def test_no_path(self):
        assert load_settings() == EditorSettings()

    def test_load_file(self, tmp_path):
        path = tmp_path / "kwaxel.json"
        path.write_text(json.dumps({"history_limit": 10, "tool": "fill", "brush_size": 4}))

        settings = load_settings(path)

        assert settings.history_limit == 10
        assert settings.tool == "fill"
        assert settings.brush_size == 4

    def test_missing_file(self, tmp_path):
        assert load_settings(tmp_path / "missing.json") == EditorSettings()

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")

        assert load_settings(path) == EditorSettings()

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")

        assert load_settings(path) == EditorSettings()
