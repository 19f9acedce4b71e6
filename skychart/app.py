"""Interactive star map window."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

from .catalog import CatalogError, Star, load_catalog
from .menu import Menu
from .vector import Vec3, cross, dot, from_ra_dec, normalize, rotate_rodrigues

Color = tuple[int, int, int]

WINDOW_SIZE = (1200, 800)
TITLE = "Mapa Estelar - Hipparcos"
FRAME_RATE = 60
MIN_ZOOM = 50.0
MAX_ZOOM = 2000.0
BASE_ZOOM = 300.0
STEP = 0.5
INFO_POSITION = (20, 400)

_NORTH = Vec3(0.0, 0.0, 1.0)
_MIN_AXIS = 1e-6


def size_from_magnitude(mag: float) -> float:
    """Disc radius in pixels at the base zoom for an apparent magnitude."""
    return max(0.4, 3.0 * 10.0 ** (-0.2 * mag))


def color_from_magnitude(mag: float) -> Color:
    """Display colour by magnitude band."""
    if mag <= 2.0:
        return (255, 255, 255)
    if mag <= 4.0:
        return (200, 200, 255)
    if mag <= 6.0:
        return (255, 255, 200)
    return (255, 180, 180)


@dataclass
class Camera:
    """Where the view is aimed, how far it is zoomed and how faint it shows."""

    ra: float = 0.0
    dec: float = 0.0
    zoom: float = BASE_ZOOM
    mag_limit: float = 9.0

    def center_vector(self) -> Vec3:
        """Unit vector of the view centre."""
        return from_ra_dec(self.ra, self.dec)

    def scroll(self, delta: float) -> None:
        """Zoom in for a positive wheel delta, out otherwise."""
        self.zoom *= 1.15 if delta > 0 else 0.85
        self.zoom = max(MIN_ZOOM, min(MAX_ZOOM, self.zoom))

    def move(self, d_ra: float, d_dec: float) -> None:
        """Shift the view centre by the given degrees."""
        self.ra += d_ra
        self.dec += d_dec


def visible_stars(
    catalog: Iterable[Star], camera: Camera, width: float, height: float
) -> Iterator[tuple[float, float, float, Color]]:
    """Yield ``(x, y, radius, colour)`` for each star in front of the camera."""
    center = camera.center_vector()
    axis = cross(center, _NORTH)
    rotate = axis.length() > _MIN_AXIS
    if rotate:
        axis = normalize(axis)
        angle = math.acos(max(-1.0, min(1.0, dot(center, _NORTH))))

    for star in catalog:
        if star.mag > camera.mag_limit:
            continue
        rv = rotate_rodrigues(star.v, axis, angle) if rotate else star.v
        if rv.z <= 0.0:
            continue
        x = width * 0.5 + rv.x * camera.zoom
        y = height * 0.5 - rv.y * camera.zoom
        radius = size_from_magnitude(star.mag) * (camera.zoom / BASE_ZOOM)
        yield x, y, radius, color_from_magnitude(star.mag)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show an interactive star map.")
    parser.add_argument("--catalog", default="data/hipparcos_full.csv")
    parser.add_argument("--font", default="data/NewRocker-Regular.ttf")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the star map window and run until it is closed."""
    import pygame

    args = _parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()

        try:
            font = pygame.font.Font(args.font, 18)
        except (OSError, FileNotFoundError):
            print("Error: no se pudo cargar la fuente", file=sys.stderr)
            return 1

        menu = Menu(20.0, 20.0)
        info_text = ""

        try:
            catalog = load_catalog(args.catalog)
        except CatalogError as exc:
            print(f"Error: no se pudo cargar el catálogo ({exc})", file=sys.stderr)
            return 1

        camera = Camera()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEWHEEL:
                    camera.scroll(event.y)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = menu.handle_click(tuple(map(float, event.pos)))
                    if clicked is not None:
                        info_text = clicked
            if not running:
                break

            keys = pygame.key.get_pressed()
            if keys[pygame.K_a]:
                camera.move(-STEP, 0.0)
            if keys[pygame.K_d]:
                camera.move(STEP, 0.0)
            if keys[pygame.K_w]:
                camera.move(0.0, STEP)
            if keys[pygame.K_s]:
                camera.move(0.0, -STEP)

            screen.fill((0, 0, 0))
            width, height = screen.get_size()
            for x, y, radius, color in visible_stars(catalog, camera, width, height):
                pygame.draw.circle(screen, color, (x, y), radius)

            menu.draw(screen, font)
            line_x, line_y = INFO_POSITION
            for line in info_text.splitlines():
                screen.blit(font.render(line, True, (255, 255, 255)), (line_x, line_y))
                line_y += font.get_linesize()

            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0