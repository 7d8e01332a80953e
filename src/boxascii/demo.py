"""Showcase tables exercising each family of box-drawing glyphs."""

from dataclasses import dataclass

from loguru import logger

from boxascii.render import RenderSurface, TableRender, draw_table


@dataclass(frozen=True)
class Section:
    title: str
    body: str


class SectionBuilder:
    """Collects sections in order; build() returns an immutable tuple."""

    def __init__(self):
        self._sections: list[Section] = []

    def add(self, title: str, body: str) -> "SectionBuilder":
        if any(s.title == title for s in self._sections):
            raise ValueError(f"Duplicate section: {title}")
        self._sections.append(Section(title, body.strip("\n")))
        return self

    def build(self) -> tuple[Section, ...]:
        return tuple(self._sections)


SINGLE = """
┌──────┬──────┐
│ left │ right│
├──────┼──────┤
│ 1    │ 2    │
└──────┴──────┘
"""

HEAVY = """
┏━━━━━━┳━━━━━━┓
┃ left ┃ right┃
┣━━━━━━╋━━━━━━┫
┃ 1    ┃ 2    ┃
┗━━━━━━┻━━━━━━┛
"""

DOUBLE = """
╔══════╦══════╗
║ left ║ right║
╠══════╬══════╣
║ 1    ║ 2    ║
╚══════╩══════╝
"""

MIXED = """
╓──────╥──────╖
║ left ║ right║
╟──────╫──────╢
║ 1    ║ 2    ║
╙──────╨──────╜
"""

ROUNDED = """
╭──────────────╮
│ ╲  rounded ╱ │
│  ╳ corners   │
│ ╱          ╲ │
╰──────────────╯
"""

DASHED = """
┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄┄
┆ dashed ┊ dot ┆
╌╌╌╌╌╌╌╌╌╌╌╌╌╌╌╌
╶─╴half lines ╷╵
"""

DEFAULT_SECTIONS = (
    SectionBuilder()
    .add("Single lines", SINGLE)
    .add("Heavy lines", HEAVY)
    .add("Double lines", DOUBLE)
    .add("Single and double mixed", MIXED)
    .add("Rounded corners and diagonals", ROUNDED)
    .add("Dashes and half lines", DASHED)
    .build()
)


def render_demo(surface: RenderSurface, sections: tuple[Section, ...] = DEFAULT_SECTIONS) -> list[TableRender]:
    """Draw each section's title and table, returning the table renders."""
    results = []
    for section in sections:
        draw_table(surface, section.title)
        draw_table(surface, "-" * len(section.title))
        result = draw_table(surface, section.body)
        logger.debug(f"{section.title}: {'ASCII fallback' if result.fallback else 'kept'}")
        results.append(result)
        surface.draw("")
    return results
