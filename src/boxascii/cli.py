import argparse
import sys
from pathlib import Path

from loguru import logger

from boxascii.config import Settings, load_settings
from boxascii.demo import render_demo
from boxascii.errors import ProbeError
from boxascii.glyph_probe import FontProbe, find_monospace_font
from boxascii.image_surface import ImageSurface
from boxascii.render import TextSurface, draw_table
from boxascii.terminal import get_terminal_size


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format="<level>{level: <8}</level> {message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print box-drawing tables, falling back to ASCII where needed")
    parser.add_argument("file", nargs="?", help="Text file to render (default: stdin)")
    parser.add_argument("-f", "--font", default=None, help="Font to check glyphs against (default: system monospace)")
    parser.add_argument("-s", "--font-size", type=int, default=None, help="Font size in pixels (default: 16)")
    parser.add_argument(
        "-a", "--ascii", action="store_true", default=None, help="Always transliterate box-drawing characters"
    )
    parser.add_argument("-d", "--demo", action="store_true", help="Render the built-in showcase tables")
    parser.add_argument("-i", "--image", default=None, help="Render onto a PNG image at this path instead")
    parser.add_argument("-c", "--config", default=None, help="Settings file (default: ./boxascii.toml or ~/.config)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debugging detail to stderr")
    return parser


def _load_probe(settings: Settings) -> FontProbe | None:
    font = settings.font or find_monospace_font()
    if font is None:
        logger.warning("No monospace font found, checking the terminal encoding only")
        return None
    try:
        return FontProbe(font, settings.font_size)
    except ProbeError as e:
        logger.warning(str(e))
        return None


def _render(surface, text: str | None) -> None:
    if text is None:
        results = render_demo(surface)
    else:
        results = [draw_table(surface, text)]
    fallbacks = sum(r.fallback for r in results)
    if fallbacks:
        logger.info(f"Used ASCII fallback for {fallbacks} of {len(results)} table(s)")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as e:
        print(f"Bad config: {e}", file=sys.stderr)
        return 2
    settings = settings.override(font=args.font, font_size=args.font_size, force_ascii=args.ascii)
    configure_logging("DEBUG" if args.verbose else settings.log_level)

    text = None
    if not args.demo:
        if args.file is None:
            text = sys.stdin.read()
        else:
            path = Path(args.file)
            if not path.is_file():
                print(f"File not found: {path}", file=sys.stderr)
                return 1
            try:
                text = path.read_text(encoding="utf-8")
            except UnicodeDecodeError as e:
                print(f"Not UTF-8 text: {path} ({e.reason})", file=sys.stderr)
                return 1
        text = text.rstrip("\n")

    probe = _load_probe(settings)

    if args.image:
        if probe is None:
            print("Rendering an image needs a usable font", file=sys.stderr)
            return 1
        surface = ImageSurface(probe, columns=get_terminal_size()[0], ascii_only=settings.force_ascii)
        _render(surface, text)
        surface.save(args.image)
        logger.info(f"Saved {args.image}")
        return 0

    if settings.force_ascii:
        surface = TextSurface(can_display=lambda char: char.isascii())
    else:
        surface = TextSurface(can_display=probe.can_display if probe else None)
    _render(surface, text)
    sys.stdout.write(surface.getvalue())
    return 0


if __name__ == "__main__":
    sys.exit(main())
