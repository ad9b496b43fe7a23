"""The fixed set of bodies drawn on the chart: SPICE targets, glyphs and draw order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CelestialBody:
    """One chart body: name, SPICE target, Unicode symbol, ASCII fallback, draw rank.

    draw_rank 0 is drawn first (farthest); higher ranks are drawn over it.
    """

    name: str
    naif_name: str
    symbol: str
    abbrev: str
    draw_rank: int

    def glyph(self, unicode: bool) -> str:
        """Symbol in Unicode mode, otherwise the ASCII letter."""
        return self.symbol if unicode else self.abbrev


SUN = CelestialBody('sun', 'SUN', '☉', 'S', 5)
MERCURY = CelestialBody('mercury', 'MERCURY BARYCENTER', '☿', 'M', 7)
VENUS = CelestialBody('venus', 'VENUS BARYCENTER', '♀', 'v', 6)
MOON = CelestialBody('moon', 'MOON', '☽', 'L', 8)
MARS = CelestialBody('mars', 'MARS BARYCENTER', '♂', 'm', 4)
JUPITER = CelestialBody('jupiter', 'JUPITER BARYCENTER', '♃', 'j', 3)
SATURN = CelestialBody('saturn', 'SATURN BARYCENTER', '♄', 's', 2)
URANUS = CelestialBody('uranus', 'URANUS BARYCENTER', '♅', 'u', 1)
NEPTUNE = CelestialBody('neptune', 'NEPTUNE BARYCENTER', '♆', 'n', 0)

# Selection order (j/k cycle through these).
BODIES: tuple[CelestialBody, ...] = (
    SUN,
    MERCURY,
    VENUS,
    MOON,
    MARS,
    JUPITER,
    SATURN,
    URANUS,
    NEPTUNE,
)

# Farthest to nearest, so nearer bodies cover farther ones on the same cell.
DRAW_ORDER: tuple[CelestialBody, ...] = tuple(sorted(BODIES, key=lambda b: b.draw_rank))
