import pygame
import pytest

from skychart.catalog import Star, StarCatalog
from skychart.renderer import Renderer, intensity_from_magnitude, star_points
from skychart.vector import Vec3, from_ra_dec

NORTH = Vec3(0.0, 0.0, 1.0)


def test_intensity_is_clamped_to_upper_bound():
    assert intensity_from_magnitude(0.0) == pytest.approx(1.0)
    assert intensity_from_magnitude(-5.0) == 1.0


def test_intensity_is_clamped_to_lower_bound():
    assert intensity_from_magnitude(20.0) == 0.2


def test_intensity_decreases_with_magnitude():
    values = [intensity_from_magnitude(m) for m in (0.5, 1.0, 1.5)]
    assert values[0] > values[1] > values[2]
    assert all(0.2 <= v <= 1.0 for v in values)


def test_star_at_pole_projects_to_screen_center():
    catalog = StarCatalog([Star(v=NORTH, mag=0.0)])
    points = list(star_points(catalog, NORTH, 100.0, (200, 100)))
    assert len(points) == 1
    (x, y), color = points[0]
    assert (x, y) == pytest.approx((100.0, 50.0))
    assert color == (255, 255, 255)


def test_star_behind_is_dropped():
    catalog = StarCatalog([Star(v=Vec3(0.0, 0.0, -1.0)), Star(v=Vec3(1.0, 0.0, 0.0))])
    assert list(star_points(catalog, NORTH, 100.0, (200, 200))) == []


def test_star_off_screen_is_dropped():
    star = Star(v=from_ra_dec(0.0, 80.0), mag=0.0)
    assert list(star_points([star], NORTH, 1000.0, (200, 200))) == []


def test_offset_star_lies_right_of_center_and_grey():
    star = Star(v=from_ra_dec(0.0, 89.0), mag=10.0)
    points = list(star_points([star], NORTH, 1.0, (800, 800)))
    assert len(points) == 1
    (x, y), color = points[0]
    assert x > 400.0
    assert y == pytest.approx(400.0)
    assert color[0] == color[1] == color[2]


def test_renderer_draws_pixel():
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    renderer = Renderer(surface)
    assert renderer.screen_center == (50.0, 50.0)
    renderer.draw_stars(StarCatalog([Star(v=NORTH, mag=0.0)]), NORTH, 10.0)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)