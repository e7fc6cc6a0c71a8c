"""Exception hierarchy for axisthin."""


class AxisThinError(Exception):
    """Base exception for all axisthin errors."""

    pass


class DataIntegrityError(AxisThinError):
    """A transform tree is malformed.

    These are fatal: thinning stops and the error reaches the caller.
    """

    pass


class CurveDegreeError(DataIntegrityError):
    """Curve record with an unsupported number of control points."""

    def __init__(self, point_count: int, details: str | None = None) -> None:
        self.point_count = point_count
        message = f"Unsupported curve with {point_count} control points (expected 2, 3 or 4)"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


class MissingRootError(DataIntegrityError):
    """Tree root index does not refer to a stored node."""

    def __init__(self, root: int, node_count: int) -> None:
        self.root = root
        self.node_count = node_count
        super().__init__(f"Root {root} not found in tree with {node_count} nodes")


class MissingCircleError(DataIntegrityError):
    """Node reachable from the root carries no circle data."""

    def __init__(self, node_index: int) -> None:
        self.node_index = node_index
        super().__init__(f"Node {node_index} has no circle")


class InvalidRadiusError(DataIntegrityError):
    """Circle radius is negative or not finite."""

    def __init__(self, radius: float) -> None:
        self.radius = radius
        super().__init__(f"Invalid circle radius: {radius!r}")


class DanglingEdgeError(DataIntegrityError):
    """Edge points at a node index outside the node store."""

    def __init__(self, source: int, target: int) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge from node {source} targets missing node {target}")


class InputDomainError(AxisThinError):
    """Errors related to user-supplied parameters."""

    pass


class FractionError(InputDomainError):
    """Fraction that cannot be clamped into [0, 1]."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Fraction must be a finite number, got {value!r}")


class OutlineError(AxisThinError):
    """Errors related to outline parsing or loop construction."""

    pass


class OutlineParseError(OutlineError):
    """Error parsing a path description string."""

    def __init__(self, path_str: str, reason: str) -> None:
        self.path_str = path_str
        self.reason = reason
        preview = path_str if len(path_str) <= 40 else f"{path_str[:37]}..."
        super().__init__(f"Failed to parse path '{preview}': {reason}")


class EmptyLoopError(OutlineError):
    """Loop without any curves."""

    def __init__(self, loop_index: int) -> None:
        self.loop_index = loop_index
        super().__init__(f"Loop {loop_index} has no curves")


class TreeFormatError(AxisThinError):
    """Serialized transform forest could not be decoded."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid transform data in '{source}': {reason}")


class FontLoadError(AxisThinError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")
