import os
import shutil
import subprocess

import numpy as np
from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from boxascii.errors import ProbeError

FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]

# A noncharacter no font maps, so it renders as the font's missing-glyph box
MISSING_GLYPH_PROBE = "\uffff"


def find_monospace_font() -> str | None:
    """Find a monospace font on the system, asking fontconfig as a last resort."""
    for path in FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    if shutil.which("fc-match") is None:
        return None
    result = subprocess.run(["fc-match", "-f", "%{file}", "monospace"], capture_output=True, text=True)
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None


class FontProbe:
    """Answers whether a font draws a character properly on a fixed-width grid."""

    def __init__(self, font_path: str, font_size: int = 16):
        try:
            self.font = ImageFont.truetype(font_path, font_size)
        except OSError as e:
            raise ProbeError(f"Cannot load font {font_path}: {e}") from e
        self.font_path = font_path
        self.font_size = font_size

        bbox = self.font.getbbox("M")
        self.cell_width = bbox[2] - bbox[0]
        self.cell_height = bbox[3] - bbox[1]
        self.y_offset = -bbox[1]
        self.advance = self.char_width("M")
        self.line_height = sum(self.font.getmetrics())

        self._missing = self.render_mask(MISSING_GLYPH_PROBE)
        self._cache: dict[str, bool] = {}
        logger.debug(
            f"Probing {font_path} at {font_size}px: cell {self.cell_width}x{self.cell_height}, advance {self.advance}"
        )

    def char_width(self, char: str) -> int:
        """Advance width of a character in pixels."""
        return round(self.font.getlength(char))

    def text_width(self, text: str) -> int:
        """Pixel width of the widest line in text."""
        return max((round(self.font.getlength(line)) for line in text.split("\n")), default=0)

    def render_mask(self, char: str) -> np.ndarray:
        """Render a character into a cell-sized float32 mask with values 0-1."""
        width = max(self.cell_width, self.char_width(char), 1)
        img = Image.new("L", (width, max(self.cell_height, 1)), 0)
        draw = ImageDraw.Draw(img)
        draw.text((0, self.y_offset), char, fill=255, font=self.font)
        return np.asarray(img, dtype=np.float32) / 255.0

    def can_display(self, char: str) -> bool:
        if char.isspace():
            return True
        if char not in self._cache:
            self._cache[char] = self._check(char)
        return self._cache[char]

    def _check(self, char: str) -> bool:
        try:
            if self.char_width(char) != self.advance:
                logger.debug(f"{char!r} is {self.char_width(char)}px wide, cell is {self.advance}px")
                return False
            mask = self.render_mask(char)
        except (OSError, ValueError) as e:
            raise ProbeError(f"Cannot render {char!r} with {self.font_path}: {e}") from e

        if mask.sum() == 0:
            return False
        # Same shape and pixels as the missing-glyph box means the font has no glyph
        if mask.shape == self._missing.shape and np.array_equal(mask, self._missing):
            logger.debug(f"{char!r} renders as the missing-glyph box")
            return False
        return True
