"""Drawing catalogue stars as single points on a pygame surface."""

from __future__ import annotations

from typing import Iterable, Iterator

import pygame

from .catalog import Star
from .projection import stereographic
from .vector import Vec3

Color = tuple[int, int, int]
Point = tuple[float, float]

_MIN_INTENSITY = 0.2
_MAX_INTENSITY = 1.0


def intensity_from_magnitude(mag: float) -> float:
    """Brightness in [0.2, 1.0] for an apparent magnitude."""
    intensity = 10.0 ** (-0.4 * mag)
    return max(_MIN_INTENSITY, min(_MAX_INTENSITY, intensity))


def _grey(intensity: float) -> Color:
    level = int(255 * intensity) & 0xFF
    return (level, level, level)


def star_points(
    catalog: Iterable[Star],
    center: Vec3,
    scale: float,
    size: tuple[int, int],
) -> Iterator[tuple[Point, Color]]:
    """Yield the screen position and colour of every star visible on screen."""
    width, height = size
    screen_center = (width * 0.5, height * 0.5)
    for star in catalog:
        point = stereographic(star.v, center, scale, screen_center)
        if point is None:
            continue
        x, y = point
        if x < 0 or x > width or y < 0 or y > height:
            continue
        yield point, _grey(intensity_from_magnitude(star.mag))


class Renderer:
    """Draws a star catalogue onto a surface with a stereographic projection."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        width, height = surface.get_size()
        self.screen_center = (width * 0.5, height * 0.5)

    def draw_stars(self, catalog: Iterable[Star], center: Vec3, scale: float) -> None:
        """Plot each visible star as one pixel."""
        for (x, y), color in star_points(
            catalog, center, scale, self.surface.get_size()
        ):
            # Pixels outside the surface are silently ignored by pygame.
            self.surface.set_at((int(x), int(y)), color)