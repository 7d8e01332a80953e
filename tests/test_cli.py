import io

import pytest
from loguru import logger

from boxascii import cli
from boxascii.config import CONFIG_FNAME

TABLE = "┌─┐\n│x│\n└─┘\n"


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Run from an empty directory with no user config and no font."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr(cli, "find_monospace_font", lambda: None)
    yield
    logger.remove()


def test_keeps_unicode_on_utf8_stdout(tmp_path, capsys):
    path = tmp_path / "table.txt"
    path.write_text(TABLE, encoding="utf-8")
    assert cli.main([str(path)]) == 0
    assert capsys.readouterr().out == TABLE


def test_force_ascii(tmp_path, capsys):
    path = tmp_path / "table.txt"
    path.write_text(TABLE, encoding="utf-8")
    assert cli.main([str(path), "--ascii"]) == 0
    assert capsys.readouterr().out == "---\n|x|\n---\n"


def test_force_ascii_from_config(tmp_path, capsys):
    (tmp_path / CONFIG_FNAME).write_text("force_ascii = true\n")
    path = tmp_path / "table.txt"
    path.write_text(TABLE, encoding="utf-8")
    assert cli.main([str(path)]) == 0
    assert capsys.readouterr().out == "---\n|x|\n---\n"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("╔═╗\n"))
    assert cli.main(["-a"]) == 0
    assert capsys.readouterr().out == "===\n"


def test_file_not_found(tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.txt")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_bad_config(tmp_path, capsys):
    (tmp_path / CONFIG_FNAME).write_text("font_size = \n")
    assert cli.main(["--demo"]) == 2
    assert "Bad config" in capsys.readouterr().err


def test_demo(capsys):
    assert cli.main(["--demo", "--ascii"]) == 0
    out = capsys.readouterr().out
    assert "Double lines" in out
    assert out.isascii()


def test_image_needs_font(tmp_path, capsys):
    assert cli.main(["--demo", "--image", str(tmp_path / "out.png")]) == 1
    assert "needs a usable font" in capsys.readouterr().err


def test_image(tmp_path, font_path, monkeypatch):
    monkeypatch.setattr(cli, "find_monospace_font", lambda: font_path)
    out = tmp_path / "out.png"
    assert cli.main(["--demo", "--image", str(out)]) == 0
    assert out.exists()


def test_directory_is_not_a_file(tmp_path, capsys):
    assert cli.main([str(tmp_path)]) == 1
    assert "File not found" in capsys.readouterr().err


def test_non_utf8_file(tmp_path, capsys):
    path = tmp_path / "table.txt"
    path.write_bytes(b"\xff\xfe\xc9")
    assert cli.main([str(path)]) == 1
    assert "Not UTF-8 text" in capsys.readouterr().err
