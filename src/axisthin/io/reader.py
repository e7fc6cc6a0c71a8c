"""Font reader for extracting glyph outlines.

Glyph outlines are the demo shapes: each glyph becomes a path string (and,
through the outline parser, a list of loops) ready for a transform builder.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from axisthin.core.serializer import format_number
from axisthin.domain import Loop
from axisthin.io.outline import parse_path_str

# Font units grow upwards, path coordinates grow downwards
FLIP_Y = (1, 0, 0, -1, 0, 0)


class FontReader:
    """Loads TTF/OTF fonts and extracts glyph outlines.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for char, path_str in reader.iter_glyph_path_strs("abc"):
                print(char, path_str)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return 'OpenType' for CFF-based fonts, 'TrueType' otherwise."""
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    def glyph_name_for_char(self, char: str) -> str | None:
        """Get the glyph name mapped to a character, if any."""
        cmap = self._require_font().getBestCmap() or {}
        return cmap.get(ord(char))

    def glyph_path_str(self, glyph_name: str, flip_y: bool = True) -> str | None:
        """Get the outline of a glyph as a path string.

        Composite glyphs are decomposed through the glyph set.

        Args:
            glyph_name: Name of the glyph
            flip_y: Convert from font (y-up) to path (y-down) coordinates

        Returns:
            Path string ("" for empty glyphs), or None if the glyph is missing
        """
        font = self._require_font()
        glyph_set = font.getGlyphSet()
        if glyph_name not in glyph_set:
            return None

        svg_pen = SVGPathPen(glyph_set, ntos=format_number)
        pen = TransformPen(svg_pen, FLIP_Y) if flip_y else svg_pen
        glyph_set[glyph_name].draw(pen)
        return svg_pen.getCommands()

    def glyph_loops(self, glyph_name: str, flip_y: bool = True) -> list[Loop] | None:
        """Get the outline of a glyph as loops of curves."""
        path_str = self.glyph_path_str(glyph_name, flip_y=flip_y)
        if path_str is None:
            return None
        return parse_path_str(path_str) if path_str else []

    def iter_glyph_path_strs(self, chars: Iterable[str]) -> Iterator[tuple[str, str]]:
        """Iterate over (character, path string) for mapped, non-empty glyphs."""
        for char in chars:
            glyph_name = self.glyph_name_for_char(char)
            if glyph_name is None:
                continue
            path_str = self.glyph_path_str(glyph_name)
            if path_str:
                yield char, path_str

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
