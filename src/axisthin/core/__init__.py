"""Core thinning algorithms for axisthin.

This module contains:

- Tree traversal (depth-first, each edge once, explicit work list)
- Fraction interpolation of boundary curves towards the axis
- Path serialization
- The thinning pipeline and erosion radius
- Scale-axis derivation and demo builders
- The thinning session holding interactive state

All functions except the session are pure and deterministic.

Key functions:
- get_thinned_path: Forest and fraction to path string
- get_axis_paths: Skeleton of a forest as path strings
- iter_edges / traverse: Tree traversal
- interpolate_curve / thin_edge: Per-edge interpolation
- serialize_loops: Loops to path string
- to_scale_axis: Scale every radius by s
- build_star_transform: Star transform for demo loops

Key classes:
- ThinningSession: Application state and event handlers
"""

from axisthin.core.interpolate import axis_curve, interpolate_curve, thin_edge
from axisthin.core.primitives import (
    cubic_path_str,
    curve_path_str,
    line_path_str,
    polygon_path_str,
    quad_path_str,
)
from axisthin.core.scale_axis import to_scale_axis
from axisthin.core.serializer import check_continuity, format_number, serialize_loops
from axisthin.core.session import RenderState, ThinningSession, view_box
from axisthin.core.star import build_star_forest, build_star_transform
from axisthin.core.thinning import (
    clamp_fraction,
    erosion_radius,
    get_axis_paths,
    get_thinned_path,
    max_radius,
    percent_to_fraction,
    thin_forest,
    thin_tree,
)
from axisthin.core.traversal import iter_edges, iter_nodes, traverse

__all__ = [
    # Session
    "RenderState",
    "ThinningSession",
    # Interpolation
    "axis_curve",
    # Builders
    "build_star_forest",
    "build_star_transform",
    "check_continuity",
    # Thinning
    "clamp_fraction",
    # Primitives
    "cubic_path_str",
    "curve_path_str",
    "erosion_radius",
    # Serialization
    "format_number",
    "get_axis_paths",
    "get_thinned_path",
    "interpolate_curve",
    # Traversal
    "iter_edges",
    "iter_nodes",
    "line_path_str",
    "max_radius",
    "percent_to_fraction",
    "polygon_path_str",
    "quad_path_str",
    "serialize_loops",
    "thin_edge",
    "thin_forest",
    "thin_tree",
    "to_scale_axis",
    "traverse",
    "view_box",
]
