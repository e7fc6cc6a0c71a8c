"""Input/output layer for axisthin.

Key responsibilities:
- Parse path description strings into loops of curves (fontTools svgLib)
- Extract glyph outlines from TTF/OTF fonts (fontTools)
- Read and write transform forests as JSON (Pydantic)

Key classes and functions:
- FontReader: Load fonts and extract glyph path strings
- parse_path_str: Path string to loops
- load_forest / dump_forest: Transform forest JSON codec
"""

from axisthin.io.outline import loops_bounding_box, parse_path_str, recording_to_loops
from axisthin.io.reader import FontReader
from axisthin.io.tree_codec import dump_forest, forest_from_dict, forest_to_dict, load_forest

__all__ = [
    "FontReader",
    "dump_forest",
    "forest_from_dict",
    "forest_to_dict",
    "load_forest",
    "loops_bounding_box",
    "parse_path_str",
    "recording_to_loops",
]
