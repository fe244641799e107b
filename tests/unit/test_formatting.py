"""Tests for distance formatting and title cleaning."""

import pytest

from placefinder.core.formatting import format_distance, strip_markup


class TestFormatDistance:
    """Test format_distance bands."""

    @pytest.mark.parametrize(
        "meters, expected",
        [
            (0, "0 meters"),
            (1, "1 meter"),
            (2, "2 meters"),
            (500, "500 meters"),
            (999, "999 meters"),
            (1000, "1 kilometer"),
            (1500, "1 kilometer"),
            (1999, "1 kilometer"),
            (2000, "2 kilometers"),
            (2500, "2 kilometers"),
            (12999, "12 kilometers"),
        ],
    )
    def test_bands(self, meters, expected):
        assert format_distance(meters) == expected


class TestStripMarkup:
    """Test strip_markup."""

    def test_removes_tags(self):
        assert strip_markup("<b>Corner</b> Cafe") == "Corner Cafe"

    def test_removes_entities(self):
        assert strip_markup("Tea &amp; Co") == "Tea  Co"

    def test_tags_removed_before_entities(self):
        # Removing the tag exposes an entity reference, which is then removed too
        assert strip_markup("A&amp<i>x</i>;B") == "AB"

    def test_plain_text_unchanged(self):
        assert strip_markup("Jollibee Ortigas") == "Jollibee Ortigas"

    def test_empty_string(self):
        assert strip_markup("") == ""

    @pytest.mark.parametrize(
        "title",
        [
            "<b>Cafe</b>",
            "<<b>>nested",
            "&a&b;;",
            "&;left",
            "Tom &amp Jerry",
            "<a href='x'>Link</a> &nbsp;&lt;b&gt;",
            "x<>y",
        ],
    )
    def test_idempotent(self, title):
        once = strip_markup(title)
        assert strip_markup(once) == once
