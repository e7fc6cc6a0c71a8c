"""Thinning session: the state behind the interactive comparison.

A session holds everything the demo keeps between events (current outline,
its transforms and the two slider fractions) and exposes one handler per
event. Each handler returns the RenderState to draw. All geometry is
delegated to the pure pipeline in axisthin.core.thinning.
"""

from collections.abc import Callable
from dataclasses import dataclass

from axisthin.config import AxisThinSettings, get_default_settings
from axisthin.core.scale_axis import to_scale_axis
from axisthin.core.star import build_star_forest
from axisthin.core.thinning import (
    clamp_fraction,
    erosion_radius,
    get_thinned_path,
    max_radius,
    percent_to_fraction,
)
from axisthin.domain import Forest, Loop
from axisthin.exceptions import AxisThinError
from axisthin.io.outline import loops_bounding_box, parse_path_str
from axisthin.utils import SessionLogger, SessionStats

# (loops, resolution) -> one medial axis transform tree per loop
TransformBuilder = Callable[[list[Loop], float], Forest]


def star_builder(loops: list[Loop], resolution: float) -> Forest:  # noqa: ARG001
    """Default transform builder: one star transform per loop."""
    return build_star_forest(loops)


def view_box(loops: list[Loop]) -> str | None:
    """View box string ("x y width height") fitting all control points."""
    bbox = loops_bounding_box(loops)
    if bbox is None:
        return None
    min_x, min_y, max_x, max_y = bbox
    return f"{min_x:g} {min_y:g} {max_x - min_x:g} {max_y - min_y:g}"


@dataclass(frozen=True)
class RenderState:
    """What the display shows after an event.

    Attributes:
        outline: Path string of the original outline
        thinned: Path string of the thinned shape
        erosion_radius: Radius for the morphological erosion filter
        view_box: View box fitting the outline (None for empty shapes)
    """

    outline: str
    thinned: str
    erosion_radius: float
    view_box: str | None


class ThinningSession:
    """Explicit application state for the thinning comparison.

    The transform forests are replaced as a whole when the shape changes;
    a failed rebuild leaves the previous shape in place.

    Example:
        session = ThinningSession()
        session.on_shape_changed(polygon_path_str(5, radius=75))
        state = session.on_thin_percent_changed(40)
        print(state.thinned)
    """

    def __init__(
        self,
        settings: AxisThinSettings | None = None,
        builder: TransformBuilder | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            settings: Application settings (defaults if None)
            builder: Transform builder (star transforms if None)
            session_logger: Event logger (a new one if None)
        """
        self.settings = settings if settings is not None else get_default_settings()
        self._builder = builder if builder is not None else star_builder
        self._log = session_logger if session_logger is not None else SessionLogger()

        self.outline = ""
        self.mats: Forest = []
        self.sats: Forest = []
        self.thin_fraction = clamp_fraction(self.settings.thinning.thin_fraction)
        self.erode_fraction = clamp_fraction(self.settings.thinning.erode_fraction)
        self._thinned = ""
        self._view_box: str | None = None

    @property
    def stats(self) -> SessionStats:
        return self._log.stats

    @property
    def max_radius(self) -> float:
        """Largest circle radius of the current scale axis transforms."""
        return max_radius(self.sats)

    def _thin(self, sats: Forest, fraction: float) -> str:
        return get_thinned_path(
            sats,
            fraction,
            continuity_tolerance=self.settings.serializer.continuity_tolerance,
        )

    def on_shape_changed(self, path_str: str) -> RenderState:
        """Load a new outline and rebuild its transforms.

        Raises:
            OutlineError: If the path string cannot be parsed
            DataIntegrityError: If the builder returns malformed trees
        """
        thinning = self.settings.thinning
        try:
            loops = parse_path_str(path_str)
            mats = self._builder(loops, thinning.resolution)
            sats = [to_scale_axis(mat, thinning.scale_factor) for mat in mats]
            thinned = self._thin(sats, self.thin_fraction)
        except AxisThinError as e:
            self._log.log_error("shape", e)
            raise

        self.outline, self.mats, self.sats = path_str, mats, sats
        self._thinned = thinned
        self._view_box = view_box(loops)

        self._log.log_shape_changed(
            loop_count=len(sats),
            node_count=sum(len(sat) for sat in sats),
            max_radius=self.max_radius,
        )
        return self.render()

    def on_thin_percent_changed(self, percent: float) -> RenderState:
        """Recompute the thinned path for a new slider value (0-100)."""
        fraction = percent_to_fraction(percent)
        try:
            thinned = self._thin(self.sats, fraction)
        except AxisThinError as e:
            self._log.log_error("thin", e)
            raise

        self.thin_fraction = fraction
        self._thinned = thinned
        self._log.log_thinned(fraction, len(thinned))
        return self.render()

    def on_erode_percent_changed(self, percent: float) -> RenderState:
        """Update the erosion fraction for a new slider value (0-100)."""
        self.erode_fraction = percent_to_fraction(percent)
        state = self.render()
        self._log.log_eroded(self.erode_fraction, state.erosion_radius)
        return state

    def render(self) -> RenderState:
        """Current display state."""
        return RenderState(
            outline=self.outline,
            thinned=self._thinned,
            erosion_radius=erosion_radius(self.sats, self.erode_fraction),
            view_box=self._view_box,
        )
