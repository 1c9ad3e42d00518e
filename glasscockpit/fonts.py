"""Shared, texture-mapped fonts for gauges.

Fonts are pre-rendered into font files. A :class:`FontManager` keeps one
:class:`Font` per file so gauges that ask for the same font share it.
Drawing itself belongs to the renderer: a font works out where and at
what scale a string goes, as a :class:`Placement`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional, Union

from glasscockpit.font_store import FontFileStore, FontFormatError
from glasscockpit.preferences import PreferenceManager

__all__ = ["TextureFont", "Placement", "Font", "FontManager"]

# Face size the fonts are pre-rendered at; sizing is relative to it.
FONT_TEXTURE_SIZE = 24.0
# Ratio between physical units and font units at unit size.
_SCALE_FACTOR = 1.35

DEFAULT_FONT = "bitstream_vera.glfont"


class TextureFont:
    """A pre-rendered ASCII font backed by a texture atlas."""

    def __init__(self, path: Union[str, os.PathLike]) -> None:
        self.store = FontFileStore.read(path)

    def check_face_size(self, size: float) -> None:
        """Raise unless the font was pre-rendered at ``size``."""
        if self.store.face_size != size:
            raise FontFormatError("prerendered font size disagreement")

    def advance(self, text: str) -> float:
        """Total kerned advance of ``text`` in font units."""
        return sum(
            self.store.advance(char, following)
            for char, following in zip_longest(text, text[1:], fillvalue=None)
        )


@dataclass(frozen=True)
class Placement:
    """Where a string is drawn: origin, scale and a shift in font units."""

    x: float
    y: float
    scale_x: float
    scale_y: float
    shift: float
    text: str

    @property
    def start_x(self) -> float:
        """Physical x coordinate at which the first glyph begins."""
        return self.x + self.shift * self.scale_x


class Font:
    """A named font with a physical size and alignment."""

    def __init__(self) -> None:
        self.name = ""
        self.right_aligned = False
        self.size: tuple[float, float] = (1.0, 1.0)
        self.texture_font: Optional[TextureFont] = None

    def load(self, path: Union[str, os.PathLike]) -> bool:
        """Load the font file at ``path``."""
        self.name = str(path)
        texture_font = TextureFont(path)
        texture_font.check_face_size(FONT_TEXTURE_SIZE)
        self.texture_font = texture_font
        return True

    def set_size(self, x: float, y: float) -> None:
        """Set the width and height of the font in physical units."""
        self.size = (x, y)

    def placement(self, x: float, y: float, text: str) -> Placement:
        """Where and how ``text`` is drawn with its anchor at (x, y)."""
        if self.texture_font is None:
            raise RuntimeError("font has not been loaded")
        width, height = self.size
        shift = -self.texture_font.advance(text) if self.right_aligned else 0.0
        return Placement(
            x=x,
            y=y,
            scale_x=_SCALE_FACTOR / FONT_TEXTURE_SIZE * width,
            scale_y=_SCALE_FACTOR / FONT_TEXTURE_SIZE * height,
            shift=shift,
            text=text,
        )


class FontManager:
    """Loads each font file once and hands out indices to share it."""

    _instance: Optional["FontManager"] = None

    def __init__(
        self,
        font_path: Optional[str] = None,
        preferences: Optional[PreferenceManager] = None,
    ) -> None:
        self.font_path = font_path or ""
        self._preferences = preferences
        self._fonts: list[Font] = []

    @classmethod
    def instance(cls) -> "FontManager":
        """The application-wide manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __len__(self) -> int:
        return len(self._fonts)

    def __getitem__(self, index: int) -> Font:
        return self._fonts[index]

    def load_default_font(self) -> int:
        """Load the font that gauges use unless they ask for another."""
        return self.load_font(DEFAULT_FONT)

    def load_font(self, name: str) -> int:
        """Load a font from the font directory; returns its index."""
        if not self.font_path:
            prefs = self._preferences if self._preferences is not None else PreferenceManager.instance()
            self.font_path = prefs.get_string("PathToData") + "Fonts/"

        name_with_path = self.font_path + name
        for index, font in enumerate(self._fonts):
            if font.name == name_with_path:
                return index

        font = Font()
        if not font.load(name_with_path):
            return -1
        self._fonts.append(font)
        return len(self._fonts) - 1

    def _font(self, font: int) -> Optional[Font]:
        return self._fonts[font] if 0 <= font < len(self._fonts) else None

    def set_size(self, font: int, x: float, y: float) -> None:
        """Set a font's physical size; unknown indices are ignored."""
        target = self._font(font)
        if target is not None:
            target.set_size(x, y)

    def set_right_aligned(self, font: int, right_aligned: bool) -> None:
        """Set whether a font is right-aligned; unknown indices are ignored."""
        target = self._font(font)
        if target is not None:
            target.right_aligned = right_aligned

    def placement(self, x: float, y: float, text: str, font: int) -> Optional[Placement]:
        """Placement of ``text`` in the given font, or None for an unknown index."""
        target = self._font(font)
        return target.placement(x, y, text) if target is not None else None