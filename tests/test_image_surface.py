import numpy as np
import pytest

from boxascii.errors import ProbeError, RenderError
from boxascii.image_surface import ImageSurface
from boxascii.render import draw_table


def test_draw_grows_image(probe):
    surface = ImageSurface(probe, columns=10)
    surface.draw("ab\ncd\nef")
    assert surface.row == 3
    assert surface.image.height >= 3 * probe.line_height
    assert surface.image.width == 10 * probe.advance
    assert np.asarray(surface.crop()).sum() > 0


def test_blank_draw_leaves_image_empty(probe):
    surface = ImageSurface(probe, columns=4)
    surface.draw("    ")
    assert np.asarray(surface.image).sum() == 0


def test_rejects_missing_glyph_and_restores(probe):
    surface = ImageSurface(probe, columns=10)
    surface.draw("ok")
    state = surface.snapshot()
    before = np.asarray(surface.image).copy()
    with pytest.raises(RenderError):
        surface.draw("ab\uffff")
    surface.restore(state)
    assert surface.row == 1
    assert np.array_equal(np.asarray(surface.image)[: before.shape[0]], before)


def test_ascii_only(probe):
    surface = ImageSurface(probe, columns=10, ascii_only=True)
    result = draw_table(surface, "┌─┐\n└─┘")
    assert result.fallback
    assert result.text == "---\n---"


def test_probe_failure_falls_back(probe, monkeypatch):
    surface = ImageSurface(probe, columns=10)

    def broken(char):
        if char.isascii():
            return True
        raise ProbeError("font is unreadable")

    monkeypatch.setattr(probe, "can_display", broken)
    result = draw_table(surface, "╔═╗\n╚═╝")
    assert result.fallback
    assert result.text == "===\n==="
    assert surface.row == 2


def test_save(probe, tmp_path):
    surface = ImageSurface(probe, columns=5)
    surface.draw("+---+")
    path = tmp_path / "table.png"
    surface.save(path)
    assert path.exists()


def test_long_lines_widen_the_image(probe):
    surface = ImageSurface(probe, columns=10)
    surface.draw("x" * 20)
    assert surface.columns == 20
    assert surface.image.width == 20 * probe.advance
    last_cell = np.asarray(surface.image)[:, 19 * probe.advance :]
    assert last_cell.sum() > 0


def test_restore_undoes_widening(probe):
    surface = ImageSurface(probe, columns=10)
    state = surface.snapshot()
    with pytest.raises(RenderError):
        surface.draw("x" * 15 + "\uffff")
    surface.restore(state)
    assert surface.columns == 10
    assert surface.image.width == 10 * probe.advance
