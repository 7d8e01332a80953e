"""Render box-drawing tables, falling back to ASCII when the surface can't show them.

The preferred path probes every character before touching the surface, so a
fallback never leaves half a table behind. When the probe itself fails the
table is drawn optimistically inside ``scoped_render``, which restores the
surface's snapshot if drawing is rejected, and the ASCII version is drawn
in its place. Characters rejected even then become PLACEHOLDER, which keeps
the length of every line.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Protocol

from loguru import logger

from boxascii.errors import ProbeError, RenderError
from boxascii.terminal import can_encode, stdout_encoding
from boxascii.transliterate import transliterate

# Stands in for characters the surface rejects even after transliteration
PLACEHOLDER = "?"


@dataclass(frozen=True)
class TableRender:
    text: str
    fallback: bool  # True when text is the ASCII transliteration
    drawn: bool = True  # False when the surface rejected even the fallback

    @property
    def kept(self) -> bool:
        return not self.fallback


class RenderSurface(Protocol):
    def can_display(self, char: str) -> bool:
        """Return whether char can be drawn, or raise ProbeError if unknown."""
        ...

    def draw(self, text: str) -> None:
        """Draw text, raising RenderError if any character is rejected."""
        ...

    def snapshot(self) -> Any: ...

    def restore(self, state: Any) -> None: ...


def render_table(text: str, can_display: Callable[[str], bool]) -> TableRender:
    """Keep text if every character can be displayed, otherwise transliterate it.

    Raises ProbeError if can_display cannot answer.
    """
    for char in dict.fromkeys(text):
        if not can_display(char):
            logger.debug(f"Cannot display {char!r} (U+{ord(char):04X}), using ASCII fallback")
            return TableRender(transliterate(text), fallback=True)
    return TableRender(text, fallback=False)


@contextmanager
def scoped_render(surface: RenderSurface) -> Iterator[RenderSurface]:
    """Hold the surface for a drawing attempt, reverting it if drawing fails."""
    state = surface.snapshot()
    try:
        yield surface
    except RenderError:
        surface.restore(state)
        raise


def draw_table(surface: RenderSurface, text: str) -> TableRender:
    """Draw a table onto a surface, substituting ASCII for glyphs it can't show.

    Never raises RenderError. Characters the surface still rejects after
    transliteration are replaced with PLACEHOLDER; if even that is rejected
    the surface is left as it was and the result has ``drawn`` set to False.
    """
    try:
        result = render_table(text, surface.can_display)
    except ProbeError as e:
        logger.info(f"Capability probe failed ({e}), attempting direct render")
        result = TableRender(text, fallback=False)
    return _commit(surface, result.text, result.fallback)


def _commit(surface: RenderSurface, text: str, fallback: bool) -> TableRender:
    while True:
        try:
            with scoped_render(surface):
                surface.draw(text)
            return TableRender(text, fallback=fallback)
        except RenderError as e:
            if not fallback:
                logger.info(f"Render rejected ({e}), drawing ASCII fallback")
                text, fallback = transliterate(text), True
            elif e.char is not None and e.char != PLACEHOLDER and e.char in text:
                logger.warning(f"Render rejected ({e}), replacing {e.char!r} with {PLACEHOLDER!r}")
                text = text.replace(e.char, PLACEHOLDER)
            else:
                logger.error(f"Cannot draw table: {e}")
                return TableRender(text, fallback=True, drawn=False)


class TextSurface:
    """In-memory text surface, e.g. a buffer to be written to a terminal.

    Drawing fails on characters the target encoding can't represent. Characters
    are written one at a time, so a rejected draw leaves the characters before
    the offending one behind until the surface is restored.
    """

    def __init__(self, can_display: Callable[[str], bool] | None = None, encoding: str | None = None):
        self.encoding = encoding or stdout_encoding()
        self._probe = can_display
        self.chunks: list[str] = []

    def can_display(self, char: str) -> bool:
        if self._probe is not None and not char.isspace() and not self._probe(char):
            return False
        return can_encode(char, self.encoding)

    def draw(self, text: str) -> None:
        written = []
        try:
            for char in text:
                if not can_encode(char, self.encoding):
                    raise RenderError(f"{self.encoding} cannot encode {char!r} (U+{ord(char):04X})", char=char)
                written.append(char)
        finally:
            if written:
                self.chunks.append("".join(written))
        self.chunks.append("\n")

    def snapshot(self) -> int:
        return len(self.chunks)

    def restore(self, state: int) -> None:
        del self.chunks[state:]

    def getvalue(self) -> str:
        return "".join(self.chunks)
