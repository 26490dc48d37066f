"""
Testy layout.metrics — heurystyka wysokości węzła.
"""

from layout import LayoutConfig, count_images, count_lines, measure


class TestMeasure:
    def test_height_formula_with_defaults(self):
        body = "line one\n![[diagram.png]]\nline three\nline four"
        assert measure(body) == 4 * 30 + 1 * 250

    def test_trailing_empty_line_counts(self):
        assert count_lines("a\n") == 2
        assert measure("a\n") == 60

    def test_empty_text_is_one_line(self):
        assert measure("") == 30

    def test_jpg_counts_and_match_is_case_sensitive(self):
        text = "photo.jpg\nPHOTO.PNG\nphoto.Png"
        assert count_images(text, (".png", ".jpg")) == 1

    def test_line_with_two_images_counts_once(self):
        assert count_images("a.png b.jpg", (".png", ".jpg")) == 1

    def test_custom_constants_and_extensions(self):
        cfg = LayoutConfig(line_height=10, image_height=100, image_extensions=(".gif",))
        assert measure("x.gif\ny.png", cfg) == 2 * 10 + 1 * 100
