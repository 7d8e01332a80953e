from pathlib import Path

from PIL import Image, ImageDraw

from boxascii.errors import ProbeError, RenderError
from boxascii.glyph_probe import FontProbe


class ImageSurface:
    """Render surface that draws text onto a Pillow image on a fixed cell grid.

    Each character is placed in its own cell, so glyphs wider or narrower
    than the grid can't push later columns out of alignment. Characters the
    font can't show are rejected with RenderError. The image grows downwards
    as lines are drawn and widens past ``columns`` for longer lines.
    """

    def __init__(
        self,
        probe: FontProbe,
        columns: int = 80,
        foreground: int = 255,
        background: int = 0,
        ascii_only: bool = False,
    ):
        self.probe = probe
        self.columns = columns
        self.foreground = foreground
        self.background = background
        self.ascii_only = ascii_only
        self.row = 0
        self.image = Image.new("L", (columns * probe.advance, probe.line_height), background)

    def can_display(self, char: str) -> bool:
        if self.ascii_only and not char.isascii():
            return False
        return self.probe.can_display(char)

    def draw(self, text: str) -> None:
        lines = text.split("\n")
        self._ensure_size(max(len(line) for line in lines), self.row + len(lines))
        draw = ImageDraw.Draw(self.image)
        for line in lines:
            y = self.row * self.probe.line_height
            for col, char in enumerate(line):
                try:
                    displayable = self.can_display(char)
                except ProbeError as e:
                    raise RenderError(str(e), char=char) from e
                if not displayable:
                    raise RenderError(f"{self.probe.font_path} has no usable glyph for {char!r}", char=char)
                if not char.isspace():
                    draw.text((col * self.probe.advance, y), char, fill=self.foreground, font=self.probe.font)
            self.row += 1

    def _ensure_size(self, columns: int, rows: int) -> None:
        self.columns = max(self.columns, columns)
        width = self.columns * self.probe.advance
        height = rows * self.probe.line_height
        if width <= self.image.width and height <= self.image.height:
            return
        grown = Image.new("L", (max(width, self.image.width), max(height, self.image.height)), self.background)
        grown.paste(self.image, (0, 0))
        self.image = grown

    def snapshot(self) -> tuple[Image.Image, int, int]:
        return self.image.copy(), self.row, self.columns

    def restore(self, state: tuple[Image.Image, int, int]) -> None:
        image, self.row, self.columns = state
        self.image = image.copy()

    def crop(self) -> Image.Image:
        """The drawn area, without unused rows."""
        return self.image.crop((0, 0, self.image.width, max(self.row, 1) * self.probe.line_height))

    def save(self, path: str | Path) -> None:
        self.crop().save(path)
