import pytest

from boxascii.glyph_probe import FontProbe, find_monospace_font

FONT_PATH = find_monospace_font()


@pytest.fixture
def font_path():
    if FONT_PATH is None:
        pytest.skip("No monospace font found on system")
    return FONT_PATH


@pytest.fixture
def probe(font_path):
    return FontProbe(font_path, 16)
