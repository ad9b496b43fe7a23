"""Terminal orrery: the Sun, Moon and planets on an azimuth/elevation chart.

The package draws the current (or a time-travelled) sky for one observer on
a curses terminal:
- Projection engine: azimuth/elevation to terminal row/column
- View state: live or frozen time, the selected body, the visible range
- Render pipeline: axes, body glyphs, info panel and status line as draw ops

Positions come from SPICE kernels via cspyce and rms-julian for time scales.
"""

__version__ = '1.0.0'

__all__: list[str] = ['__version__']
