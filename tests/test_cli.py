from __future__ import annotations

from pathlib import Path

import pytest

from animframe import __version__, cli


def test_parse_defaults() -> None:
    args = cli.parse_args([])
    assert args.demo == "ripples"
    assert args.frames is None
    assert args.size is None
    assert not args.headless


def test_headless_implies_frame_limit() -> None:
    args = cli.parse_args(["--headless"])
    assert args.frames == cli.HEADLESS_DEFAULT_FRAMES
    args = cli.parse_args(["--headless", "--frames", "2", "--size", "320x200"])
    assert args.frames == 2
    assert args.size == (320, 200)


@pytest.mark.parametrize(
    "argv", [["--size", "big"], ["--size", "0x10"], ["--frames", "-1"], ["nope"]]
)
def test_parse_rejects_bad_values(argv: list[str]) -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(argv)


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["--version"])
    assert __version__ in capsys.readouterr().out


def test_headless_run_records_frames(tmp_path: Path) -> None:
    out = tmp_path / "rec"
    args = cli.parse_args(
        ["--headless", "--frames", "3", "--size", "300x300", "--record", str(out)]
    )
    assert cli.run(args) == 3
    assert len(list(out.glob("frame_*.png"))) == 3


def test_main_headless(tmp_path: Path) -> None:
    cli.main(["--headless", "--frames", "1", "--record", str(tmp_path)])
    assert (tmp_path / "frame_00001.png").exists()
