"""Thinning pipeline: traversal, interpolation and serialization.

get_thinned_path is a pure function of (forest, fraction). It walks each
tree, thins every curve-bearing edge and serializes one closed sub-path per
tree. Calling it twice with the same inputs gives identical strings.
"""

import logging
import math
from collections.abc import Sequence

from axisthin.core.interpolate import axis_curve, thin_edge
from axisthin.core.primitives import curve_path_str
from axisthin.core.serializer import check_continuity, serialize_loops
from axisthin.core.traversal import iter_edges
from axisthin.domain import Curve, TransformTree
from axisthin.exceptions import FractionError

logger = logging.getLogger(__name__)


def clamp_fraction(value: float) -> float:
    """Clamp a fraction into [0, 1].

    Raises:
        FractionError: If the value is NaN or infinite
    """
    value = float(value)
    if not math.isfinite(value):
        raise FractionError(value)
    return min(1.0, max(0.0, value))


def percent_to_fraction(percent: float) -> float:
    """Map a 0-100 slider value to a clamped fraction."""
    percent = float(percent)
    if not math.isfinite(percent):
        raise FractionError(percent)
    return clamp_fraction(percent / 100.0)


def thin_tree(tree: TransformTree, fraction: float) -> list[Curve]:
    """Thin every curve of one tree.

    Args:
        tree: Transform tree of one loop
        fraction: Thinning fraction (clamped into [0, 1])

    Returns:
        Thinned curves in traversal order (empty for a terminating root)
    """
    f = clamp_fraction(fraction)
    curves: list[Curve] = []
    for source, edge in iter_edges(tree):
        curve = thin_edge(tree, source, edge, f)
        if curve is not None:
            curves.append(curve)
    return curves


def thin_forest(
    forest: Sequence[TransformTree],
    fraction: float,
    continuity_tolerance: float | None = None,
) -> list[list[Curve]]:
    """Thin every tree of a forest.

    Args:
        forest: One tree per loop
        fraction: Thinning fraction (clamped into [0, 1])
        continuity_tolerance: If given, gaps larger than this between
            consecutive curves are logged as warnings

    Returns:
        One list of curves per tree, in forest order
    """
    loops = [thin_tree(tree, fraction) for tree in forest]

    if continuity_tolerance is not None:
        for loop_index, loop in enumerate(loops):
            gaps = check_continuity(loop, continuity_tolerance)
            if gaps:
                logger.warning(
                    "Loop %d is discontinuous before curves %s", loop_index, gaps
                )

    logger.debug(
        "Thinned %d loops with %d curves at fraction %s",
        len(loops),
        sum(len(loop) for loop in loops),
        fraction,
    )
    return loops


def get_thinned_path(
    forest: Sequence[TransformTree],
    fraction: float,
    continuity_tolerance: float | None = None,
) -> str:
    """Get the path string of a forest thinned by ``fraction``.

    Args:
        forest: One tree per loop (MAT or SAT)
        fraction: Thinning fraction; values outside [0, 1] are clamped
        continuity_tolerance: Optional gap tolerance for warnings

    Returns:
        Path string with one closed sub-path per non-empty loop

    Raises:
        DataIntegrityError: If a tree is malformed
        FractionError: If the fraction is not finite
    """
    return serialize_loops(thin_forest(forest, fraction, continuity_tolerance))


def get_axis_paths(forest: Sequence[TransformTree]) -> list[str]:
    """Get one open path string per axis curve of a forest.

    Trees are walked like the thinning pipeline; curveless edges are
    skipped. Together the paths draw the skeleton the thinned outline
    converges to.

    Raises:
        DataIntegrityError: If a tree is malformed
    """
    return [
        curve_path_str(axis_curve(tree, source, edge))
        for tree in forest
        for source, edge in iter_edges(tree)
        if edge.has_curve()
    ]


def max_radius(forest: Sequence[TransformTree]) -> float:
    """Largest circle radius over all nodes of a forest (0.0 if empty)."""
    return max(
        (circle.radius for tree in forest for circle in tree.iter_circles()),
        default=0.0,
    )


def erosion_radius(forest: Sequence[TransformTree], erosion_fraction: float) -> float:
    """Erosion filter radius matching ``erosion_fraction`` of the thickest part."""
    return max_radius(forest) * clamp_fraction(erosion_fraction)
