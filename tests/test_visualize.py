"""Tests for energy and seam rendering."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest
from seamcarve.picture import Picture
from seamcarve.visualize import energy_picture, seam_overlay

from conftest import make_corridor_picture, make_random_picture


class TestEnergyPicture:
    def test_border_is_white_and_corridor_black(self):
        rendered = energy_picture(make_corridor_picture())
        assert (rendered.width(), rendered.height()) == (5, 5)
        assert rendered.get(0, 0) == (255, 255, 255)
        assert rendered.get(2, 2) == (0, 0, 0)

    def test_is_grayscale(self):
        rendered = energy_picture(make_random_picture(7, 6))
        for x in range(7):
            r, g, b = rendered.get(x, 3)
            assert r == g == b


class TestSeamOverlay:
    def test_paints_vertical_seam(self):
        picture = Picture.blank(4, 3)
        painted = seam_overlay(picture, [1, 2, 2])
        assert painted.get(1, 0) == (255, 0, 0)
        assert painted.get(2, 1) == (255, 0, 0)
        assert painted.get(2, 2) == (255, 0, 0)
        assert painted.get(0, 0) == (0, 0, 0)
        assert picture.get(1, 0) == (0, 0, 0)

    def test_paints_horizontal_seam(self):
        picture = Picture.blank(4, 3)
        painted = seam_overlay(picture, [0, 1, 2, 2], direction='horizontal',
                               color=(0, 255, 0))
        assert [painted.get(x, y) for x, y in [(0, 0), (1, 1), (2, 2), (3, 2)]] == [(0, 255, 0)] * 4
        assert painted.get(3, 0) == (0, 0, 0)

    def test_rejects_invalid_seam(self):
        with pytest.raises(ValueError):
            seam_overlay(Picture.blank(4, 3), [0, 2, 2])
        with pytest.raises(ValueError):
            seam_overlay(Picture.blank(4, 3), [0, 0, 0], direction='sideways')
