"""JSON codec for transform forests.

Transform trees are produced by an external library; this module reads and
writes them in a plain JSON layout validated with Pydantic:

    {"trees": [{"root": 0, "nodes": [
        {"circle": {"center": [x, y], "radius": r},
         "parent": null,
         "edges": [{"target": 1, "curve": [[x, y], ...], "axis": null}]}
    ]}]}

Schema problems become TreeFormatError. Structurally valid data describing
a malformed tree (wrong curve degree, negative radius) raises the matching
DataIntegrityError.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from axisthin.domain import (
    Circle,
    CircleNode,
    Curve,
    Edge,
    Forest,
    Point,
    TransformTree,
    curve_from_points,
)
from axisthin.exceptions import TreeFormatError

Coord = tuple[float, float]


class CircleModel(BaseModel):
    center: Coord
    radius: float


class EdgeModel(BaseModel):
    target: int
    curve: list[Coord] | None = None
    axis: list[Coord] | None = None


class NodeModel(BaseModel):
    circle: CircleModel | None = None
    parent: int | None = None
    edges: list[EdgeModel] = Field(default_factory=list)


class TreeModel(BaseModel):
    root: int = 0
    nodes: list[NodeModel]


class ForestModel(BaseModel):
    trees: list[TreeModel] = Field(default_factory=list)


def _curve(points: list[Coord] | None) -> Curve | None:
    if points is None:
        return None
    return curve_from_points(points)


def _coords(curve: Curve | None) -> list[Coord] | None:
    if curve is None:
        return None
    return [p.to_tuple() for p in curve.points]


def _tree_from_model(model: TreeModel) -> TransformTree:
    nodes = [
        CircleNode(
            circle=(
                Circle(Point(*node.circle.center), node.circle.radius)
                if node.circle is not None
                else None
            ),
            parent=node.parent,
            edges=[
                Edge(target=edge.target, curve=_curve(edge.curve), axis=_curve(edge.axis))
                for edge in node.edges
            ],
        )
        for node in model.nodes
    ]
    return TransformTree(nodes=nodes, root=model.root)


def _tree_to_model(tree: TransformTree) -> TreeModel:
    return TreeModel(
        root=tree.root,
        nodes=[
            NodeModel(
                circle=(
                    CircleModel(center=node.circle.center.to_tuple(), radius=node.circle.radius)
                    if node.circle is not None
                    else None
                ),
                parent=node.parent,
                edges=[
                    EdgeModel(target=edge.target, curve=_coords(edge.curve), axis=_coords(edge.axis))
                    for edge in node.edges
                ],
            )
            for node in tree.nodes
        ],
    )


def forest_from_dict(data: dict[str, Any], source: str = "<dict>") -> Forest:
    """Build a forest from decoded JSON data.

    Raises:
        TreeFormatError: If the data does not match the schema
        DataIntegrityError: If the data describes a malformed tree
    """
    try:
        model = ForestModel.model_validate(data)
    except ValidationError as e:
        raise TreeFormatError(source, str(e)) from e
    return [_tree_from_model(tree) for tree in model.trees]


def forest_to_dict(forest: Forest) -> dict[str, Any]:
    """Convert a forest to JSON-compatible data."""
    return ForestModel(trees=[_tree_to_model(tree) for tree in forest]).model_dump(mode="json")


def load_forest(path: Path) -> Forest:
    """Load a forest from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        TreeFormatError: If the file is not valid transform JSON
        DataIntegrityError: If the file describes a malformed tree
    """
    text = path.read_text(encoding="utf-8")
    try:
        model = ForestModel.model_validate_json(text)
    except ValidationError as e:
        raise TreeFormatError(str(path), str(e)) from e
    return [_tree_from_model(tree) for tree in model.trees]


def dump_forest(forest: Forest, path: Path) -> None:
    """Write a forest to a JSON file."""
    model = ForestModel(trees=[_tree_to_model(tree) for tree in forest])
    path.write_text(model.model_dump_json(indent=2), encoding="utf-8")
