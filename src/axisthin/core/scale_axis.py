"""Scale-axis derivation from a medial axis transform."""

from axisthin.domain import CircleNode, TransformTree


def to_scale_axis(tree: TransformTree, s: float) -> TransformTree:
    """Scale every circle radius of a tree by ``s``.

    Topology, curves and centers are kept; the input tree is not modified.
    Pruning of branches covered by the scaled circles is left to the
    transform library that built the tree.

    Args:
        tree: Medial axis transform tree
        s: Scale factor (>= 1)

    Returns:
        New tree with scaled radii

    Raises:
        ValueError: If ``s`` is smaller than 1
    """
    if not s >= 1.0:
        raise ValueError(f"Scale factor must be >= 1, got {s}")

    nodes = [
        CircleNode(
            circle=node.circle.scaled(s) if node.circle is not None else None,
            parent=node.parent,
            edges=list(node.edges),
        )
        for node in tree.nodes
    ]
    return TransformTree(nodes=nodes, root=tree.root)
