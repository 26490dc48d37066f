"""
Testy layout.config — walidacja i nadpisywanie przez zmienne SCG_*.
"""

import pytest

from layout import LayoutConfig, default_name_filter


class TestDefaults:
    def test_default_constants(self):
        cfg = LayoutConfig()
        assert (cfg.line_height, cfg.image_height, cfg.gap) == (30, 250, 50)
        assert (cfg.column_width, cfg.node_width, cfg.sub_x_offset) == (700, 500, 50)
        assert cfg.image_extensions == (".png", ".jpg")
        cfg.validate()

    def test_replace_ignores_none(self):
        cfg = LayoutConfig().replace(gap=None, node_width=300)
        assert cfg.gap == 50
        assert cfg.node_width == 300


class TestValidate:
    @pytest.mark.parametrize("changes", [
        {"line_height": 0},
        {"gap": -1},
        {"node_width": 0},
        {"column_width": 540},
        {"image_extensions": ()},
    ])
    def test_invalid_values_raise(self, changes):
        with pytest.raises(ValueError):
            LayoutConfig(**changes).validate()


class TestFromEnv:
    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SCG_GAP", "80")
        monkeypatch.setenv("SCG_COLUMN_WIDTH", "900")
        monkeypatch.setenv("SCG_IMAGE_EXTENSIONS", ".png, .webp")

        cfg = LayoutConfig.from_env()

        assert cfg.gap == 80
        assert cfg.column_width == 900
        assert cfg.line_height == 30
        assert cfg.image_extensions == (".png", ".webp")

    def test_malformed_number_names_variable(self, monkeypatch):
        monkeypatch.setenv("SCG_LINE_HEIGHT", "thirty")
        with pytest.raises(ValueError, match="SCG_LINE_HEIGHT"):
            LayoutConfig.from_env()

    def test_default_name_filter(self, monkeypatch):
        assert default_name_filter() == ""
        monkeypatch.setenv("SCG_FILTER", "SPL")
        assert default_name_filter() == "SPL"
