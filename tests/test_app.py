import pytest

from skychart.app import (
    Camera,
    color_from_magnitude,
    size_from_magnitude,
    visible_stars,
)
from skychart.catalog import Star, StarCatalog
from skychart.vector import from_ra_dec


def test_size_from_magnitude_bright_and_faint():
    assert size_from_magnitude(0.0) == pytest.approx(3.0)
    assert size_from_magnitude(20.0) == 0.4
    assert size_from_magnitude(1.0) < size_from_magnitude(0.0)


@pytest.mark.parametrize(
    "mag, expected",
    [
        (-1.0, (255, 255, 255)),
        (2.0, (255, 255, 255)),
        (3.0, (200, 200, 255)),
        (4.0, (200, 200, 255)),
        (5.0, (255, 255, 200)),
        (6.0, (255, 255, 200)),
        (7.0, (255, 180, 180)),
    ],
)
def test_color_bands(mag, expected):
    assert color_from_magnitude(mag) == expected


def test_camera_defaults_and_center():
    camera = Camera()
    assert camera.zoom == 300.0
    assert camera.mag_limit == 9.0
    assert tuple(camera.center_vector()) == pytest.approx((1.0, 0.0, 0.0))


def test_scroll_zooms_by_factor():
    camera = Camera()
    camera.scroll(1.0)
    assert camera.zoom / 300.0 == pytest.approx(1.15)
    camera = Camera()
    camera.scroll(-1.0)
    assert camera.zoom / 300.0 == pytest.approx(0.85)


def test_scroll_is_clamped():
    camera = Camera()
    for _ in range(100):
        camera.scroll(1.0)
    assert camera.zoom == 2000.0
    for _ in range(100):
        camera.scroll(-1.0)
    assert camera.zoom == 50.0


def test_move_shifts_center():
    camera = Camera()
    camera.move(0.5, -0.5)
    camera.move(0.5, 0.0)
    assert (camera.ra, camera.dec) == (1.0, -0.5)


def test_star_at_view_center_is_at_screen_center():
    catalog = StarCatalog([Star(v=from_ra_dec(0.0, 0.0), mag=0.0)])
    result = list(visible_stars(catalog, Camera(), 1200, 800))
    assert len(result) == 1
    x, y, radius, color = result[0]
    assert (x, y) == pytest.approx((600.0, 400.0))
    assert radius == pytest.approx(3.0)
    assert color == (255, 255, 255)


def test_stars_behind_or_faint_are_skipped():
    catalog = StarCatalog(
        [
            Star(v=from_ra_dec(180.0, 0.0), mag=0.0),
            Star(v=from_ra_dec(0.0, 0.0), mag=10.0),
        ]
    )
    assert list(visible_stars(catalog, Camera(), 1200, 800)) == []


def test_radius_scales_with_zoom():
    catalog = StarCatalog([Star(v=from_ra_dec(0.0, 0.0), mag=0.0)])
    near = list(visible_stars(catalog, Camera(zoom=600.0), 1200, 800))
    far = list(visible_stars(catalog, Camera(), 1200, 800))
    assert near[0][2] == pytest.approx(2 * far[0][2])


def test_pole_camera_needs_no_rotation():
    star = Star(v=from_ra_dec(0.0, 90.0), mag=0.0)
    result = list(visible_stars([star], Camera(dec=90.0), 100, 100))
    assert len(result) == 1
    assert result[0][:2] == pytest.approx((50.0, 50.0))