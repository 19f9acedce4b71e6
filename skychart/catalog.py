"""Star records and loading them from a CSV catalogue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .vector import Vec3, from_ra_dec

FIELD_COUNT = 6


class CatalogError(ValueError):
    """Raised when a catalogue cannot be read or a line cannot be parsed."""


@dataclass(frozen=True)
class Star:
    """A catalogued star and its position as a unit vector."""

    v: Vec3 = field(default_factory=Vec3)
    hip: int = 0
    mag: float = 0.0
    bv: float = 0.0
    temperature: float = 0.0
    ra: float = 0.0
    dec: float = 0.0
    name: str = ""


def parse_star(line: str) -> Star:
    """Parse one ``hip,ra,dec,mag,bv,temperature`` line into a Star."""
    fields = line.rstrip("\r\n").split(",")
    if len(fields) < FIELD_COUNT:
        raise CatalogError(
            f"expected {FIELD_COUNT} fields, found {len(fields)}: {line!r}"
        )
    try:
        hip = int(fields[0])
        ra, dec, mag, bv, temperature = (float(f) for f in fields[1:FIELD_COUNT])
    except ValueError as exc:
        raise CatalogError(f"invalid number in line {line!r}") from exc
    return Star(
        v=from_ra_dec(ra, dec),
        hip=hip,
        mag=mag,
        bv=bv,
        temperature=temperature,
        ra=ra,
        dec=dec,
    )


class StarCatalog:
    """An ordered, read-only collection of stars."""

    def __init__(self, stars: Iterable[Star] = ()) -> None:
        self._stars: tuple[Star, ...] = tuple(stars)

    def __iter__(self) -> Iterator[Star]:
        return iter(self._stars)

    def __len__(self) -> int:
        return len(self._stars)

    def __getitem__(self, index: int) -> Star:
        return self._stars[index]


def load_catalog(filename: str) -> StarCatalog:
    """Read a CSV catalogue whose first line is a header."""
    try:
        with open(filename, encoding="utf-8") as handle:
            next(handle, None)
            stars = []
            for number, line in enumerate(handle, start=2):
                if not line.strip():
                    continue
                try:
                    stars.append(parse_star(line))
                except CatalogError as exc:
                    raise CatalogError(f"{filename}, line {number}: {exc}") from exc
    except OSError as exc:
        raise CatalogError(f"cannot open catalogue {filename}: {exc}") from exc
    return StarCatalog(stars)