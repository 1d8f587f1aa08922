"""Tests for the command line program."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from isomap import ltn
from isomap.keyboard import KeyPosition
from isomap.main import main, parse_args


class TestParseArgs:
    """Test argument defaults."""

    def test_defaults(self) -> None:

        args = parse_args([])
        assert args.tuning == "edo12"
        assert args.layout == "wicki-hayden"
        assert args.start is None
        assert (args.left, args.right) == (16, 16)

    def test_repeated_start(self) -> None:

        args = parse_args(["--start", "1:39", "--start", "3:40"])
        assert args.start == ["1:39", "3:40"]


class TestMain:
    """Test running the program end to end."""

    def test_list(self, capsys: pytest.CaptureFixture[str]) -> None:

        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "edo12" in out
        assert "edo31" in out
        assert "wicki-hayden" in out

    def test_writes_ltn(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:

        path = tmp_path / "out.ltn"
        assert main(["--ltn", str(path)]) == 0
        assert "Filled 280 keys from 2:39" in capsys.readouterr().out

        keyboard = ltn.load(path)
        seed = keyboard.get(KeyPosition(2, 39))
        assert (seed.channel, seed.note) == (1, 60)

    def test_writes_svg(self, tmp_path: Path) -> None:

        path = tmp_path / "out.svg"
        assert main(["--svg", str(path), "--left", "4", "--right", "4"]) == 0
        assert "<svg" in path.read_text(encoding="utf-8")

    def test_layout_file(self, tmp_path: Path) -> None:

        layout_path = tmp_path / "layout.json"
        layout_path.write_text(json.dumps({
            "name": "harmonic",
            "right": "minor_second",
            "up_left": "minor_third",
            "up_right": "major_third",
        }), encoding="utf-8")
        out = tmp_path / "out.ltn"

        assert main(["--layout-file", str(layout_path), "--ltn", str(out)]) == 0
        keyboard = ltn.load(out)
        assert keyboard.get(KeyPosition(2, 40)).note == 61

    def test_load_then_fill_merges(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:

        first = tmp_path / "first.ltn"
        second = tmp_path / "second.ltn"
        assert main(["--ltn", str(first)]) == 0
        capsys.readouterr()

        assert main(["--load", str(first), "--ltn", str(second)]) == 0
        assert "Filled 0 keys" in capsys.readouterr().out
        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    def test_nothing_to_write(self, capsys: pytest.CaptureFixture[str]) -> None:

        assert main([]) == 0
        assert "Nothing written" in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [
        ["--tuning", "edo99"],
        ["--layout", "janko"],
        ["--start", "9:0"],
        ["--left", "-1"],
    ])
    def test_invalid_arguments(self, argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:

        assert main(argv) == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_load_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:

        assert main(["--load", str(tmp_path / "missing.ltn")]) == 1
        assert "File Error" in capsys.readouterr().out
