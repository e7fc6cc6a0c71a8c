"""Tests for transform tree traversal."""

import pytest

from axisthin.core.traversal import iter_edges, iter_nodes, traverse
from axisthin.domain import Circle, CircleNode, Edge, Line, Point, TransformTree
from axisthin.exceptions import DanglingEdgeError, MissingCircleError, MissingRootError


def _line(i: int) -> Line:
    return Line(Point(i, 0), Point(i + 1, 0))


@pytest.fixture
def branching_tree() -> TransformTree:
    """Root 0 with children 1 and 2; node 1 has children 3 and 4."""
    tree = TransformTree()
    for i in range(5):
        tree.add_node(Circle(Point(i, i), 1.0))
    tree.connect(0, 1, _line(0))
    tree.connect(1, 3, _line(1))
    tree.connect(1, 4, _line(2))
    tree.connect(0, 2, _line(3))
    return tree


class TestIterEdges:
    """Tests for iter_edges."""

    def test_depth_first_order(self, branching_tree: TransformTree):
        """Test edges come depth-first, children in creation order."""
        visited = [(source, edge.target) for source, edge in iter_edges(branching_tree)]
        assert visited == [(0, 1), (1, 3), (1, 4), (0, 2)]

    def test_every_edge_once(self, branching_tree: TransformTree):
        """Test every edge is reported exactly once."""
        edges = [edge for _, edge in iter_edges(branching_tree)]
        assert len(edges) == branching_tree.edge_count()
        assert len({id(edge) for edge in edges}) == len(edges)

    def test_back_reference_not_followed(self):
        """Test a loop-closing edge is reported but not descended."""
        tree = TransformTree()
        for i in range(3):
            tree.add_node(Circle(Point(i, 0), 1.0))
        tree.connect(0, 1, _line(0))
        tree.connect(1, 2, _line(1))
        tree.connect(2, 0, _line(2))

        visited = [(source, edge.target) for source, edge in iter_edges(tree)]
        assert visited == [(0, 1), (1, 2), (2, 0)]

    def test_shared_node_entered_once(self):
        """Test a node reachable from two parents is entered once."""
        tree = TransformTree()
        for i in range(4):
            tree.add_node(Circle(Point(i, 0), 1.0))
        tree.connect(0, 1, _line(0))
        tree.connect(0, 2, _line(1))
        tree.connect(1, 3, _line(2))
        tree.connect(2, 3, _line(3))
        tree.connect(3, 0, _line(4))

        visited = [(source, edge.target) for source, edge in iter_edges(tree)]
        assert visited == [(0, 1), (1, 3), (3, 0), (0, 2), (2, 3)]

    def test_edge_without_curve_stops(self):
        """Test edges without curve records are reported but not followed."""
        tree = TransformTree()
        for i in range(3):
            tree.add_node(Circle(Point(i, 0), 1.0))
        tree.connect(0, 1)
        tree.connect(1, 2, _line(1))

        visited = [(source, edge.target) for source, edge in iter_edges(tree)]
        assert visited == [(0, 1)]

    def test_terminating_root(self):
        """Test a lone root yields nothing."""
        tree = TransformTree()
        tree.add_node(Circle(Point(0, 0), 1.0))
        assert list(iter_edges(tree)) == []

    def test_deep_chain_no_recursion_limit(self):
        """Test a very long chain is walked without recursion."""
        tree = TransformTree()
        depth = 5000
        for i in range(depth):
            tree.add_node(Circle(Point(i, 0), 1.0))
        for i in range(depth - 1):
            tree.connect(i, i + 1, _line(i))
        assert sum(1 for _ in iter_edges(tree)) == depth - 1

    def test_missing_root(self):
        """Test a missing root is a data-integrity error."""
        tree = TransformTree(nodes=[CircleNode(circle=Circle(Point(0, 0), 1))], root=3)
        with pytest.raises(MissingRootError):
            list(iter_edges(tree))

    def test_missing_circle(self):
        """Test a reachable node without circle data."""
        tree = TransformTree(
            nodes=[
                CircleNode(circle=Circle(Point(0, 0), 1), edges=[Edge(1, _line(0))]),
                CircleNode(circle=None, parent=0),
            ]
        )
        with pytest.raises(MissingCircleError):
            list(iter_edges(tree))

    def test_dangling_edge(self):
        """Test an edge pointing outside the node store."""
        tree = TransformTree(
            nodes=[CircleNode(circle=Circle(Point(0, 0), 1), edges=[Edge(9, _line(0))])]
        )
        with pytest.raises(DanglingEdgeError):
            list(iter_edges(tree))


class TestIterNodes:
    """Tests for iter_nodes and traverse."""

    def test_preorder(self, branching_tree: TransformTree):
        """Test nodes come in preorder."""
        assert list(iter_nodes(branching_tree)) == [0, 1, 3, 4, 2]

    def test_traverse_calls_visitor_once_per_node(self, branching_tree: TransformTree):
        """Test traverse invokes the visitor on every node once."""
        seen: list[int] = []

        def visitor(index: int, node: CircleNode) -> None:
            assert node is branching_tree.nodes[index]
            seen.append(index)

        count = traverse(branching_tree, visitor)
        assert count == 5
        assert seen == [0, 1, 3, 4, 2]

    def test_unreachable_nodes_skipped(self):
        """Test nodes not reachable from the root are not visited."""
        tree = TransformTree()
        tree.add_node(Circle(Point(0, 0), 1.0))
        tree.add_node(Circle(Point(1, 0), 1.0))
        assert list(iter_nodes(tree)) == [0]
