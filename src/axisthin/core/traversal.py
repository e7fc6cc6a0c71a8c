"""Depth-first traversal of transform trees.

Traversal starts at the tree's root and follows curve-bearing edges in
creation order. Every reachable edge is reported exactly once; an edge is
reported before the subtree below its target. Nodes are entered at most
once, so edges leading back to an already entered node (bookkeeping
back-references, loop closures) are reported but not followed.

The work list is explicit, so deep trees cannot exhaust the interpreter's
recursion limit.
"""

from collections.abc import Callable, Iterator

from axisthin.domain import CircleNode, Edge, TransformTree


def iter_edges(tree: TransformTree) -> Iterator[tuple[int, Edge]]:
    """Iterate over reachable edges in depth-first order.

    Args:
        tree: Transform tree to walk

    Yields:
        (source node index, edge) pairs

    Raises:
        MissingRootError: If the root is not in the node store
        MissingCircleError: If a reachable node has no circle
        DanglingEdgeError: If an edge targets a missing node
    """
    root = tree.root
    tree.circle(root)

    entered = {root}
    stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(tree.node(root).edges))]

    while stack:
        source, edges = stack[-1]
        edge = next(edges, None)
        if edge is None:
            stack.pop()
            continue

        target_node = tree.get_target(source, edge.target)
        yield source, edge

        # Terminating: no curve record, or the target was already entered
        if not edge.has_curve() or edge.target in entered:
            continue

        tree.circle(edge.target)
        entered.add(edge.target)
        stack.append((edge.target, iter(target_node.edges)))


def iter_nodes(tree: TransformTree) -> Iterator[int]:
    """Iterate over reachable node indices in preorder.

    Follows exactly the same path as iter_edges.

    Yields:
        Node indices, root first
    """
    tree.circle(tree.root)
    yield tree.root

    entered = {tree.root}
    for _, edge in iter_edges(tree):
        if edge.has_curve() and edge.target not in entered:
            entered.add(edge.target)
            yield edge.target


def traverse(tree: TransformTree, visitor: Callable[[int, CircleNode], None]) -> int:
    """Call ``visitor`` on every reachable node, before its children.

    Args:
        tree: Transform tree to walk
        visitor: Callback receiving (node index, node)

    Returns:
        Number of nodes visited
    """
    count = 0
    for index in iter_nodes(tree):
        visitor(index, tree.nodes[index])
        count += 1
    return count
