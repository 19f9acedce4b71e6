"""A column of clickable buttons that explain star properties."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)

BOX_WIDTH = 280.0
BOX_HEIGHT = 48.0
ITEM_SPACING = 70.0
HOVER_SCALE = 1.05
SMOOTHING = 0.15
LABEL_OFFSET = (20.0, 12.0)

MAGNITUDE = "Magnitud estelar"
TEMPERATURE = "Temperatura"
BV_INDEX = "Índice B-V"

INFO_TEXTS = {
    MAGNITUDE: (
        "Magnitud estelar:\n"
        "Mide el brillo aparente de una estrella.\n"
        "Valores bajos = más brillo\n"
        "Valores altos = menos brillo"
    ),
    TEMPERATURE: (
        "Temperatura superficial:\n"
        "Estrellas calientes: azul/blanco\n"
        "Estrellas frías: amarillas/rojas"
    ),
    BV_INDEX: (
        "Índice B-V:\n"
        "Relaciona color con temperatura.\n"
        "B-V bajo: azul\n"
        "B-V alto: rojo"
    ),
}

_ITEMS = (
    (MAGNITUDE, (40, 80, 160)),
    (TEMPERATURE, (180, 100, 40)),
    (BV_INDEX, (70, 150, 80)),
)


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Linear interpolation between two RGB colours, truncated to bytes."""
    return tuple(int(ca + (cb - ca) * t) & 0xFF for ca, cb in zip(a, b))  # type: ignore[return-value]


@dataclass
class MenuItem:
    """One button: its label, its top-left corner and its animation state."""

    text: str
    x: float
    y: float
    base_color: Color
    hover_color: Color
    scale: float = 1.0
    hovered: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + BOX_WIDTH / 2, self.y + BOX_HEIGHT / 2)

    @property
    def color(self) -> Color:
        return self.hover_color if self.hovered else self.base_color

    def bounds(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the box at its current scale."""
        cx, cy = self.center
        width = BOX_WIDTH * self.scale
        height = BOX_HEIGHT * self.scale
        return (cx - width / 2, cy - height / 2, width, height)

    def contains(self, point: tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the scaled box."""
        left, top, width, height = self.bounds()
        px, py = point
        return left <= px < left + width and top <= py < top + height


class Menu:
    """The three information buttons stacked from a starting corner."""

    def __init__(self, start_x: float, start_y: float) -> None:
        self.items = [
            MenuItem(
                text=text,
                x=start_x,
                y=start_y + index * ITEM_SPACING,
                base_color=base,
                hover_color=lerp_color(base, WHITE, 0.25),
            )
            for index, (text, base) in enumerate(_ITEMS)
        ]

    def update(self, mouse_pos: tuple[float, float]) -> None:
        """Advance the hover animation towards the mouse position."""
        for item in self.items:
            item.hovered = item.contains(mouse_pos)
            target = HOVER_SCALE if item.hovered else 1.0
            item.scale += (target - item.scale) * SMOOTHING

    def draw(self, target: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw every button with its label."""
        for item in self.items:
            pygame.draw.rect(target, item.color, pygame.Rect(item.bounds()))
            label = font.render(item.text, True, WHITE)
            target.blit(label, (item.x + LABEL_OFFSET[0], item.y + LABEL_OFFSET[1]))

    def handle_click(self, mouse_pos: tuple[float, float]) -> str | None:
        """Information text for the clicked button, or None if none was hit."""
        info = None
        for item in self.items:
            if item.contains(mouse_pos):
                info = INFO_TEXTS.get(item.text, info)
        return info