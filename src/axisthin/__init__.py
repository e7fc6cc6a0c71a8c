"""axisthin - Scale-axis thinning of glyph and polygon outlines.

axisthin takes a forest of scale-axis transform trees (maximal inscribed
circles joined by boundary-contact curves) and reconstructs the boundary of a
shape at any thinning fraction between the original outline (0.0) and the
shape's skeleton (1.0).

Example:
    $ axisthin polygon 6 --percent 40

This prints the outline of a regular hexagon and the thinned path at 40%.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
