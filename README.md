# skychart

An interactive star map that draws stars from a Hipparcos-style catalogue.
It turns right ascension and declination into unit vectors, rotates the sky
so that the chosen view centre faces the viewer, and draws every visible star
as a disc whose size and colour depend on its magnitude.

## Installation

```
pip install .
```

## Running

```
skychart
```

By default the program reads its font from `data/NewRocker-Regular.ttf` and
its catalogue from `data/hipparcos_full.csv`, both relative to the current
directory. Other files can be given:

```
skychart --catalog path/to/stars.csv --font path/to/font.ttf
```

If the font or the catalogue cannot be loaded, an error is printed and the
command exits with status 1.

### Controls

- `A` / `D`: move the view centre in right ascension (0.5 degrees per frame)
- `W` / `S`: move the view centre in declination
- Mouse wheel: zoom in and out. The zoom stays between 50 and 2000.
- Left click on a menu button: show a short explanation (in Spanish) of
  stellar magnitude, surface temperature or the B-V colour index

Stars fainter than magnitude 9 are not drawn.

## Catalogue format

The catalogue is a CSV file with one header line. The first six columns of
each row after it are:

```
hip,ra,dec,mag,bv,temperature
```

`ra` and `dec` are in degrees. Blank lines are skipped; a row with too few
fields or a value that is not a number makes `load_catalog` raise
`CatalogError`.

## Library use

```python
from skychart.catalog import load_catalog
from skychart.projection import stereographic
from skychart.vector import from_ra_dec

catalog = load_catalog("data/hipparcos_full.csv")
center = from_ra_dec(0.0, 0.0)
for star in catalog:
    point = stereographic(star.v, center, 300.0, (600.0, 400.0))
    if point is not None:
        x, y = point
```

The modules:

- `skychart.vector`: the immutable `Vec3` and `dot`, `cross`, `normalize`,
  `rotate_rodrigues` and `from_ra_dec`.
- `skychart.catalog`: the `Star` record, `parse_star`, `load_catalog`,
  `StarCatalog` and `CatalogError` (raised also when the file cannot be
  opened).
- `skychart.projection`: `stereographic`, which returns screen coordinates,
  or `None` for a star on or behind the horizon of the view.
- `skychart.renderer`: `intensity_from_magnitude`, `star_points`, and
  `Renderer`, which plots each visible star as a single grey pixel on a
  pygame surface.
- `skychart.menu`: the `Menu` of three information buttons with hover
  animation; `Menu.handle_click` returns the text for the button hit, or
  `None`.
- `skychart.app`: `Camera`, `size_from_magnitude`, `color_from_magnitude`,
  `visible_stars` and the `main` command.

## What it does not do

No catalogue or font is shipped with the package; both files must be
supplied. The window has no star labels, no search and no way to change the
magnitude limit while running.

## Tests

```
pip install .[test]
pytest
```