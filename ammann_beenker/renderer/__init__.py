"""Rendering subpackage.

Turns terminal tiles into drawable output. The renderers focus on:

* A thin adapter from tiles to :class:`~ammann_beenker.renderer.svg.DrawablePolygon`
  primitives (vertices, fill, fixed black stroke).
* SVG document assembly in tile order.
* Lightweight Pillow + NumPy rasterization for PNG output.

See :mod:`ammann_beenker.renderer.svg` and :mod:`ammann_beenker.renderer.raster`.
"""
