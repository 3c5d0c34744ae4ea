"""Tests for CLI tool."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from marshalwire import __version__, encode
from marshalwire.cli.main import main

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


def test_cli_help_subprocess() -> None:
    """Test CLI --help flag through the module entry point."""
    env = dict(os.environ, PYTHONPATH=str(SRC_DIR))
    result = subprocess.run(
        [sys.executable, "-m", "marshalwire.cli.main", "--help"],
        capture_output=True,
        text=True,
        env=env,
    )
    assert result.returncode == 0
    assert "marshalwire: Marshal wire-format codec" in result.stdout
    assert "--dump" in result.stdout


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI --version flag."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert f"marshalwire {__version__}" in capsys.readouterr().out


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "marshalwire: Marshal wire-format codec" in capsys.readouterr().out


def test_cli_dump(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --dump prints every value in a stream."""
    stream = tmp_path / "data.marshal"
    stream.write_bytes(encode({"depth": 12}) + encode([b"raw", None]))

    assert main(["--dump", str(stream)]) == 0
    out = capsys.readouterr().out
    assert "--- value 1 ---" in out
    assert "{'depth': 12}" in out
    assert "[b'raw', None]" in out
    assert "2 values decoded" in out


def test_cli_dump_corrupt(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --dump reports decode errors."""
    stream = tmp_path / "bad.marshal"
    stream.write_bytes(b"u\x09\x00\x00\x00abc")

    assert main(["--dump", str(stream)]) == 1
    assert "Error decoding file" in capsys.readouterr().err


def test_cli_dump_missing_file(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --dump with missing file."""
    assert main(["--dump", "nonexistent.marshal"]) == 1
    assert "not found" in capsys.readouterr().err.lower()


def test_cli_from_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --from-json writes the encoded document."""
    source = tmp_path / "doc.json"
    source.write_text(json.dumps({"b": [1, 2.5], "a": "x"}), encoding="utf-8")
    output = tmp_path / "doc.marshal"

    assert main(["--from-json", str(source), "--output", str(output)]) == 0
    assert output.read_bytes() == encode({"a": "x", "b": [1, 2.5]})
    assert f"Wrote {output.stat().st_size} bytes" in capsys.readouterr().out


def test_cli_from_json_requires_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test --from-json without --output fails."""
    source = tmp_path / "doc.json"
    source.write_text("{}", encoding="utf-8")

    assert main(["--from-json", str(source)]) == 2
    assert "--output" in capsys.readouterr().err


def test_cli_from_json_invalid(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test malformed JSON is reported."""
    source = tmp_path / "doc.json"
    source.write_text("{not json", encoding="utf-8")

    assert main(["--from-json", str(source), "-o", str(tmp_path / "out")]) == 1
    assert "Error encoding file" in capsys.readouterr().err
