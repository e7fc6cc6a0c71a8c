"""Transform tree model.

A transform tree describes one loop of a shape as a tree of maximal inscribed
circles. Nodes live in a flat list and refer to each other by index:

- CircleNode: a circle plus its ordered outgoing edges
- Edge: link to a target node, optionally carrying the boundary-contact
  curve between the two circles (and optionally an explicit axis curve)
- TransformTree: the node store and the index of its root

Medial axis (MAT) and scale axis (SAT) transforms share this structure; a SAT
only differs in its radii.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

from axisthin.domain.curve import Curve, same_degree
from axisthin.domain.geometry import Circle
from axisthin.exceptions import (
    CurveDegreeError,
    DanglingEdgeError,
    MissingCircleError,
    MissingRootError,
)


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed link from a node to ``target``.

    Attributes:
        target: Index of the target node in the tree's node store
        curve: Boundary-contact curve from the source contact point to the
            target contact point (None if the edge carries no curve)
        axis: Explicit axis curve reached at fraction 1 (None to derive it
            from the circle centers)
    """

    target: int
    curve: Curve | None = None
    axis: Curve | None = None

    def __post_init__(self) -> None:
        if self.curve is not None and self.axis is not None:
            if not same_degree(self.curve, self.axis):
                raise CurveDegreeError(
                    len(self.axis.points),
                    details=f"axis curve does not match {type(self.curve).__name__} boundary curve",
                )

    def has_curve(self) -> bool:
        return self.curve is not None


@dataclass
class CircleNode:
    """A node of the transform tree.

    Attributes:
        circle: Maximal inscribed circle (None only in malformed input)
        parent: Index of the parent node; traversal never follows it
        edges: Outgoing edges in creation order
    """

    circle: Circle | None
    parent: int | None = None
    edges: list[Edge] = field(default_factory=list)

    def is_terminating(self) -> bool:
        """Check if no outgoing edge carries a curve."""
        return not any(edge.has_curve() for edge in self.edges)


@dataclass
class TransformTree:
    """Array-backed tree of circle nodes for one loop.

    Trees are built once (via add_node/connect) and treated as read-only
    afterwards.

    Example:
        tree = TransformTree()
        root = tree.add_node(Circle(Point(0, 0), 5))
        leaf = tree.add_node(Circle(Point(5, 0), 0))
        tree.connect(root, leaf, Line(Point(0, 5), Point(5, 0)))
    """

    nodes: list[CircleNode] = field(default_factory=list)
    root: int = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, circle: Circle | None, parent: int | None = None) -> int:
        """Append a node and return its index."""
        self.nodes.append(CircleNode(circle=circle, parent=parent))
        return len(self.nodes) - 1

    def connect(
        self,
        source: int,
        target: int,
        curve: Curve | None = None,
        axis: Curve | None = None,
    ) -> Edge:
        """Add an edge from ``source`` to ``target``.

        The target's parent is set to ``source`` unless it already has one,
        in which case the edge is a back-reference.

        Returns:
            The new edge
        """
        source_node = self.node(source)
        target_node = self.get_target(source, target)
        edge = Edge(target=target, curve=curve, axis=axis)
        source_node.edges.append(edge)
        if target_node.parent is None and target != self.root:
            target_node.parent = source
        return edge

    def node(self, index: int) -> CircleNode:
        """Get a node by index.

        Raises:
            MissingRootError: If the index is outside the node store
        """
        if not 0 <= index < len(self.nodes):
            raise MissingRootError(index, len(self.nodes))
        return self.nodes[index]

    def get_target(self, source: int, target: int) -> CircleNode:
        """Get the target node of an edge.

        Raises:
            DanglingEdgeError: If ``target`` is outside the node store
        """
        if not 0 <= target < len(self.nodes):
            raise DanglingEdgeError(source, target)
        return self.nodes[target]

    def circle(self, index: int) -> Circle:
        """Get the circle of a node.

        Raises:
            MissingCircleError: If the node has no circle
        """
        circle = self.node(index).circle
        if circle is None:
            raise MissingCircleError(index)
        return circle

    @property
    def root_node(self) -> CircleNode:
        return self.node(self.root)

    def iter_circles(self) -> Iterator[Circle]:
        """Iterate over the circles of all stored nodes."""
        for node in self.nodes:
            if node.circle is not None:
                yield node.circle

    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self.nodes)
