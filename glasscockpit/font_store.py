"""Pre-rendered bitmap fonts stored in a compact binary file.

A font file holds a texture atlas (8-bit alpha, one cell per glyph), the
metrics of each glyph and an optional kerning table, for the printable
ASCII range or any other contiguous run of character codes.
"""

from __future__ import annotations

import logging
import os
import struct
from dataclasses import dataclass, field
from typing import Optional, Union

__all__ = ["FontFormatError", "Glyph", "FontFileStore"]

logger = logging.getLogger(__name__)

DISK_HEADER = b"FONT"

_HEADER = struct.Struct("<4sfb7h")
_GLYPH = struct.Struct("<b4hf")

# Scale applied to glyph quads when building vertex coordinates.
_VERTEX_SCALE = 10.5


class FontFormatError(Exception):
    """Raised when a font file is malformed or cannot be used."""


@dataclass
class Glyph:
    """Metrics of one glyph in the texture atlas."""

    character: int = 0
    x_offset: int = 0
    y_offset: int = 0
    width: int = 0
    height: int = 0
    advance: float = 0.0


@dataclass
class FontFileStore:
    """A pre-rendered font: glyph metrics, kerning and texture atlas.

    Kerning pairs (i followed by j) are stored at ``[j * num_glyphs + i]``,
    indices counted from ``first_glyph``.
    """

    face_size: float
    first_glyph: int
    rows: int
    columns: int
    glyph_width: int
    glyph_height: int
    tex_width: int
    tex_height: int
    glyphs: list[Glyph] = field(default_factory=list)
    kerning: Optional[list[float]] = None
    bitmap: Optional[bytes] = None

    @property
    def num_glyphs(self) -> int:
        return len(self.glyphs)

    # ------------------------------------------------------------------ I/O

    @classmethod
    def read(cls, path: Union[str, os.PathLike]) -> "FontFileStore":
        """Load a font from a file written by :meth:`write`."""
        logger.info("Deserializing font %s", path)
        with open(path, "rb") as stream:
            data = stream.read()

        try:
            return cls._decode(data)
        except struct.error as exc:
            raise FontFormatError(f"truncated font file {path!s}") from exc

    @classmethod
    def _decode(cls, data: bytes) -> "FontFileStore":
        if data[: len(DISK_HEADER)] != DISK_HEADER:
            raise FontFormatError("file header does not match")

        (_, face_size, first_glyph, num_glyphs, rows, columns,
         glyph_width, glyph_height, tex_width, tex_height) = _HEADER.unpack_from(data, 0)
        offset = _HEADER.size

        if not (0 < face_size < 500 and 1 < rows < 100 and 1 < columns < 100):
            raise FontFormatError("data format error suspected")
        if num_glyphs < 0 or tex_width < 0 or tex_height < 0:
            raise FontFormatError("negative size in font header")

        glyphs = []
        for _ in range(num_glyphs):
            glyphs.append(Glyph(*_GLYPH.unpack_from(data, offset)))
            offset += _GLYPH.size

        pairs = num_glyphs * num_glyphs
        kerning = list(struct.unpack_from(f"<{pairs}f", data, offset))
        offset += 4 * pairs

        bitmap_size = tex_width * tex_height
        bitmap = data[offset:offset + bitmap_size]
        if len(bitmap) != bitmap_size:
            raise FontFormatError("truncated texture bitmap")
        offset += bitmap_size

        excess = len(data) - offset
        if excess > 1:
            raise FontFormatError(f"excess data at end of serialized font file: {excess} bytes")
        if excess == 1:
            logger.error("Font file has %d bytes more data than expected", excess)

        return cls(
            face_size=face_size,
            first_glyph=first_glyph,
            rows=rows,
            columns=columns,
            glyph_width=glyph_width,
            glyph_height=glyph_height,
            tex_width=tex_width,
            tex_height=tex_height,
            glyphs=glyphs,
            kerning=kerning,
            bitmap=bytes(bitmap),
        )

    def write(self, path: Union[str, os.PathLike]) -> None:
        """Write the font in its little-endian binary form."""
        pairs = self.num_glyphs * self.num_glyphs
        kerning = self.kerning if self.kerning is not None else [0.0] * pairs
        if len(kerning) != pairs:
            raise FontFormatError("kerning table size does not match glyph count")
        if self.bitmap is None:
            raise FontFormatError("texture bitmap has been taken")
        if len(self.bitmap) != self.tex_width * self.tex_height:
            raise FontFormatError("bitmap size does not match texture size")

        parts = [
            _HEADER.pack(
                DISK_HEADER, self.face_size, self.first_glyph, self.num_glyphs,
                self.rows, self.columns, self.glyph_width, self.glyph_height,
                self.tex_width, self.tex_height,
            )
        ]
        parts.extend(
            _GLYPH.pack(g.character, g.x_offset, g.y_offset, g.width, g.height, g.advance)
            for g in self.glyphs
        )
        parts.append(struct.pack(f"<{pairs}f", *kerning))
        parts.append(self.bitmap)

        logger.info("Serializing font to %s", path)
        with open(path, "wb") as stream:
            stream.write(b"".join(parts))

    # --------------------------------------------------------------- access

    def _index(self, char: Union[str, int]) -> int:
        code = ord(char) if isinstance(char, str) else char
        return code - self.first_glyph

    def _in_range(self, char: Union[str, int]) -> bool:
        return 0 <= self._index(char) < self.num_glyphs

    def _glyph(self, char: Union[str, int]) -> Glyph:
        if not self._in_range(char):
            raise ValueError(f"character {char!r} is not in this font")
        return self.glyphs[self._index(char)]

    def texture_cell(self, index: int) -> tuple[int, int]:
        """Column and row of the atlas cell that holds glyph ``index``."""
        return index % self.rows, index // self.rows

    def advance(self, char: Union[str, int], next_char: Union[str, int, None] = None) -> float:
        """Horizontal advance after ``char``, kerned against ``next_char`` if given."""
        if next_char is None or next_char in ("", "\0", 0):
            return self._glyph(char).advance
        if not (self._in_range(char) and self._in_range(next_char)):
            return 0.0
        advance = self._glyph(char).advance
        if self.kerning is not None:
            advance += self.kerning[self._index(next_char) * self.num_glyphs + self._index(char)]
        return advance

    def texture_coords(self, char: Union[str, int]) -> tuple[float, ...]:
        """Texture coordinates of the glyph's quad as four (u, v) pairs."""
        glyph = self._glyph(char)
        tx, ty = self.texture_cell(self._index(char))
        a = self.glyph_width / self.tex_width
        b = self.glyph_height / self.tex_height
        c = glyph.width / self.glyph_width
        d = glyph.height / self.glyph_height
        return (
            a * tx, b * (ty + d),
            a * (tx + c), b * (ty + d),
            a * tx, b * ty,
            a * (tx + c), b * ty,
        )

    def vertex_coords(self, char: Union[str, int]) -> tuple[float, ...]:
        """Vertex coordinates of the glyph's quad as four (x, y) pairs."""
        glyph = self._glyph(char)
        x_off = float(glyph.x_offset)
        y_off = float(glyph.y_offset)
        a = glyph.width / self.tex_width * self.face_size * _VERTEX_SCALE
        b = glyph.height / self.tex_height * self.face_size * _VERTEX_SCALE
        return (
            x_off, y_off,
            x_off + a, y_off,
            x_off, y_off + b,
            x_off + a, y_off + b,
        )

    def take_bitmap(self) -> Optional[tuple[bytes, int, int]]:
        """Hand over the texture bitmap with its width and height, once."""
        if self.bitmap is None:
            return None
        bitmap, self.bitmap = self.bitmap, None
        return bitmap, self.tex_width, self.tex_height